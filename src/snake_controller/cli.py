"""CLI launcher for the snake controller."""

from __future__ import annotations

import argparse
import logging
import sys

from snake_controller.config import ControllerConfig

logger = logging.getLogger(__name__)

# One script character is held for one game tick.
_SCRIPT_INPUTS: dict[str, tuple[str, ...]] = {
    "u": ("up",),
    "d": ("down",),
    "l": ("left",),
    "r": ("right",),
    ".": (),
}
_RESET_CHAR = "x"


def _positive_int(raw: str) -> int:
    value = int(raw)
    if value < 1:
        raise argparse.ArgumentTypeError("must be at least 1")
    return value


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="snake-controller",
        description="Cycle-driven snake controller simulation tools.",
    )
    sub = parser.add_subparsers(dest="command", help="Available commands.")

    # --- simulate ---
    sim_p = sub.add_parser(
        "simulate", help="Run a scripted game and print the grid.",
    )
    sim_p.add_argument(
        "--script", type=str, default="",
        help="One character per tick: u/d/l/r, '.' for none, 'x' for reset.",
    )
    sim_p.add_argument(
        "--config", type=str, default=None,
        help="Path to a JSON config file.",
    )
    sim_p.add_argument("--clock-hz", type=_positive_int, default=None)
    sim_p.add_argument("--ticks-per-second", type=_positive_int, default=None)
    sim_p.add_argument(
        "--frames", action="store_true",
        help="Print the grid after every script step.",
    )

    # --- benchmark ---
    bench_p = sub.add_parser(
        "benchmark", help="Measure controller cycle throughput.",
    )
    bench_p.add_argument("--cycles", type=_positive_int, default=10_000)
    bench_p.add_argument("--seed", type=int, default=42)

    # --- config ---
    config_p = sub.add_parser(
        "config", help="Write the default configuration as JSON.",
    )
    config_p.add_argument("output", help="Destination JSON path.")

    return parser


def _load_config(args: argparse.Namespace) -> ControllerConfig:
    config = (
        ControllerConfig.load(args.config)
        if args.config else ControllerConfig()
    )
    overrides: dict = {}
    if args.clock_hz is not None:
        overrides["clock_hz"] = args.clock_hz
    if args.ticks_per_second is not None:
        overrides["ticks_per_second"] = args.ticks_per_second
    if overrides:
        d = config.to_dict()
        d.update(overrides)
        config = ControllerConfig(**d)
    return config


def _run_simulate(args: argparse.Namespace) -> int:
    from snake_controller import grid
    from snake_controller.engine import GameController
    from snake_controller.inputs import DirectionInputs

    script = args.script.lower()
    unknown = sorted(
        {c for c in script if c not in _SCRIPT_INPUTS and c != _RESET_CHAR},
    )
    if unknown:
        print(f"Invalid script characters: {''.join(unknown)}", file=sys.stderr)  # noqa: T201
        return 2

    try:
        config = _load_config(args)
    except (ValueError, TypeError, OSError) as exc:
        print(f"Invalid configuration: {exc}", file=sys.stderr)  # noqa: T201
        return 2

    controller = GameController(config)
    for char in script:
        if char == _RESET_CHAR:
            controller.cycle(reset=True)
        else:
            inputs = DirectionInputs.from_names(*_SCRIPT_INPUTS[char])
            for _ in range(config.tick_divisor):
                controller.cycle(inputs)
        if args.frames:
            print(grid.to_text(controller.frame))  # noqa: T201
            print()  # noqa: T201

    print(grid.to_text(controller.frame))  # noqa: T201
    print(  # noqa: T201
        f"state={controller.state.value} length={controller.length} "
        f"head={controller.head} apple={controller.apple.position} "
        f"ticks={controller.ticks}"
    )
    return 0


def _run_benchmark(args: argparse.Namespace) -> int:
    from snake_controller.benchmark import benchmark_throughput

    result = benchmark_throughput(cycles=args.cycles, seed=args.seed)
    print(result.summary())  # noqa: T201
    return 0


def _run_config(args: argparse.Namespace) -> int:
    ControllerConfig().save(args.output)
    print(f"Wrote default configuration to {args.output}")  # noqa: T201
    return 0


def main(argv: list[str] | None = None) -> int:
    """Entry point for the ``snake-controller`` CLI."""
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    handlers = {
        "simulate": _run_simulate,
        "benchmark": _run_benchmark,
        "config": _run_config,
    }
    return handlers[args.command](args)


if __name__ == "__main__":
    sys.exit(main())
