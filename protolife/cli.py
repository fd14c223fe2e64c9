"""Command line entry point: run the particle life simulation headlessly."""

from __future__ import annotations

import argparse
import json
import random
import sys
from collections import Counter

from .camera import Camera
from .colour import ParticleColour
from .model import PRESETS, Preset, export_state, import_state
from .world import DECAY_INTERVAL, Simulation


def _find_preset(parser: argparse.ArgumentParser, key: str) -> Preset:
    if key.isdigit():
        position = int(key)
        if position < len(PRESETS):
            return PRESETS[position]
    for preset in PRESETS:
        if preset.name.casefold() == key.casefold():
            return preset
    parser.error(f"unknown preset: {key}")
    raise AssertionError("unreachable")


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="protolife",
        description="Simulate coloured particles drawn to and repelled by one another.",
    )
    parser.add_argument("--width", type=float, default=1920.0, help="screen width")
    parser.add_argument("--height", type=float, default=1080.0, help="screen height")
    parser.add_argument("--steps", type=int, default=0, help="frames to simulate")
    parser.add_argument("--dt", type=float, default=1.0 / 60.0, help="seconds per frame")
    parser.add_argument("--seed", type=int, default=None, help="random seed")
    parser.add_argument("--preset", default=None, help="preset name or number")
    parser.add_argument("--state", default=None, help="JSON file with a shared state")
    parser.add_argument("--export", action="store_true", help="print the state as JSON")
    parser.add_argument("--list-presets", action="store_true", help="list presets and exit")
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.list_presets:
        for number, preset in enumerate(PRESETS):
            print(f"{number}: {preset.name}")
        return 0

    if args.steps < 0:
        parser.error("--steps must not be negative")
    if args.dt <= 0:
        parser.error("--dt must be positive")

    preset = _find_preset(parser, args.preset) if args.preset is not None else None

    simulation = Simulation(args.width, args.height, rng=random.Random(args.seed))
    camera = Camera(args.width, args.height)
    simulation.respawn()

    if preset is not None:
        simulation.apply_preset(preset)

    if args.state is not None:
        try:
            with open(args.state, encoding="utf-8") as handle:
                params, model = import_state(json.load(handle))
        except (OSError, ValueError) as error:
            print(f"failed to load state: {error}", file=sys.stderr)
            return 1
        simulation.params = params
        simulation.model = model

    elapsed = 0.0
    for _ in range(args.steps):
        camera.follow(simulation, args.dt)
        simulation.step(args.dt)
        elapsed += args.dt
        while elapsed >= DECAY_INTERVAL:
            elapsed -= DECAY_INTERVAL
            simulation.decay(camera.following)

    if args.export:
        print(json.dumps(export_state(simulation.params, simulation.model)))
        return 0

    counts = Counter(particle.colour for particle in simulation)
    print(f"particles: {len(simulation)}")
    for colour in ParticleColour:
        if counts[colour]:
            print(f"{colour}: {counts[colour]}")
    return 0


if __name__ == "__main__":
    sys.exit(main())