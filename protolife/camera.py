"""Camera zoom, panning, following and the pointer tools that act on the world."""

from __future__ import annotations

import math
from dataclasses import replace

from .colour import ParticleColour
from .math import Vec2
from .params import scale_bounds
from .world import Simulation

SELECT_RADIUS = 25.0
ERASE_RADIUS = 30.0
FOLLOW_SPEED = 3.0
SCROLL_STEP = 0.05
TOUCH_REGISTRATION_TIMEOUT = 0.25


def _clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


def _shift_all(simulation: Simulation, offset: Vec2) -> None:
    for particle in simulation:
        particle.position = particle.position + offset


class Camera:
    """An orthographic view of the world.

    The view itself stays at the origin; panning moves the particles instead,
    which the wrapping world makes indistinguishable from moving the view.
    """

    def __init__(self, screen_width: float = 1920.0, screen_height: float = 1080.0) -> None:
        self.screen_width = float(screen_width)
        self.screen_height = float(screen_height)
        self.scale = 1.0
        self.following: int | None = None
        self.touch_timeout = 0.0

    def scale_bounds(self) -> tuple[float, float]:
        """The smallest and largest zoom scale allowed for the current screen."""
        return scale_bounds(self.screen_width, self.screen_height)

    def clamp_zoom(self) -> float:
        """Keep the zoom scale within bounds; returns the resulting scale."""
        low, high = self.scale_bounds()
        self.scale = _clamp(self.scale, low, high)
        return self.scale

    def scroll_zoom(self, delta_y: float) -> float:
        """Zoom by a scroll wheel movement, limited to a small step per event."""
        low, high = self.scale_bounds()
        step = _clamp(delta_y, -SCROLL_STEP, SCROLL_STEP)
        self.scale = _clamp(self.scale - step, low, high)
        return self.scale

    def drag(self, simulation: Simulation, delta: Vec2) -> None:
        """Pan by a screen-space drag; stops following any particle."""
        self.following = None
        offset = Vec2(delta.x, -delta.y) * self.scale
        _shift_all(simulation, offset)

    def follow(self, simulation: Simulation, dt: float) -> None:
        """Advance the camera by ``dt`` seconds.

        Expires the touch registration timeout and glides the followed
        particle towards the centre of the view. Following stops when the
        particle no longer exists.
        """
        if self.touch_timeout > 0.0:
            self.touch_timeout = max(0.0, self.touch_timeout - dt)

        if self.following is None:
            return
        particle = simulation.particles.get(self.following)
        if particle is None:
            self.following = None
            return

        # Dividing by the scale keeps the glide speed the same at every zoom level.
        translation = particle.position * ((FOLLOW_SPEED / self.scale) * dt)
        _shift_all(simulation, -translation)

    def pinch(
        self,
        simulation: Simulation,
        first_previous: Vec2,
        first: Vec2,
        second_previous: Vec2,
        second: Vec2,
    ) -> None:
        """Pan, zoom and rotate the world from the movement of two touches."""
        self.touch_timeout = TOUCH_REGISTRATION_TIMEOUT

        prev_center = (first_previous + second_previous) / 2.0
        curr_center = (first + second) / 2.0
        moved = curr_center - prev_center
        translation = Vec2(moved.x, -moved.y) * self.scale

        prev_diff = second_previous - first_previous
        curr_diff = second - first

        prev_length = prev_diff.length()
        curr_length = curr_diff.length()
        if curr_length > 0.0:
            ratio = prev_length / curr_length
        elif prev_length > 0.0:
            ratio = math.inf
        else:
            ratio = 1.0

        rotation = math.atan2(curr_diff.y, curr_diff.x) - math.atan2(prev_diff.y, prev_diff.x)
        cos_r = math.cos(-rotation)
        sin_r = math.sin(-rotation)

        low, high = self.scale_bounds()
        self.scale = _clamp(self.scale * ratio, low, high)

        for particle in simulation:
            x, y = particle.position
            rotated = Vec2(x * cos_r - y * sin_r, x * sin_r + y * cos_r)
            particle.position = rotated + translation

    def select_follow(self, simulation: Simulation, position: Vec2) -> int | None:
        """Start following the particle nearest ``position``, if one is close enough.

        Ignored while a recent pinch is still registering, so lifting two
        fingers is not mistaken for a tap.
        """
        if self.touch_timeout > 0.0:
            return None

        nearest = min(
            simulation.query(position, SELECT_RADIUS),
            key=lambda hit: hit[0].distance_squared(position),
            default=None,
        )
        if nearest is None:
            return None
        self.following = nearest[1]
        return self.following

    def erase(self, simulation: Simulation, position: Vec2) -> int:
        """Remove every particle near ``position``; returns how many went."""
        hits = [pid for _, pid in simulation.query(position, ERASE_RADIUS)]
        return sum(simulation.remove_particle(pid) for pid in hits)

    def brush(self, simulation: Simulation, position: Vec2, colour: ParticleColour) -> int:
        """Place a particle of ``colour`` at ``position``; returns its id."""
        return simulation.spawn_particle(replace(position), colour)