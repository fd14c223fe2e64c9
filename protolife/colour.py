"""The particle colours and their display values."""

from __future__ import annotations

import random as _random
from enum import Enum

NUM_COLOURS = 6

_RGB = {
    0: (172, 40, 71),
    1: (90, 181, 82),
    2: (51, 136, 222),
    3: (255, 155, 37),
    4: (233, 75, 234),
    5: (57, 247, 241),
}


class ParticleColour(Enum):
    """One of the six particle species."""

    RED = 0
    GREEN = 1
    BLUE = 2
    ORANGE = 3
    PINK = 4
    AQUA = 5

    def __str__(self) -> str:
        return self.name.capitalize()

    def index(self) -> int:
        return self.value

    @classmethod
    def from_index(cls, index: int) -> ParticleColour:
        if not 0 <= index < NUM_COLOURS:
            raise ValueError(f"invalid particle colour index: {index}")
        return cls(index)

    @classmethod
    def random(cls, particle_variety: int, rng: _random.Random | None = None) -> ParticleColour:
        """Pick uniformly among the first ``particle_variety`` colours."""
        if not 1 <= particle_variety <= NUM_COLOURS:
            raise ValueError(f"invalid particle variety: {particle_variety}")
        chooser = rng if rng is not None else _random
        return cls.from_index(chooser.randint(1, particle_variety) - 1)

    def rgb(self) -> tuple[int, int, int]:
        """The sRGB display colour as 0-255 components."""
        return _RGB[self.value]