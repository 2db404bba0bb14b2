"""Command-line entry point for watching and benchmarking brains."""

from __future__ import annotations

import argparse
import logging
import sys
import time

from snake_brains.brains.registry import BrainKind

_BRAIN_CHOICES = [k.value for k in BrainKind]

_CLEAR_SCREEN = "\x1b[2J\x1b[H"


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="snake-brains",
        description="Watch or benchmark autonomous snake brains.",
    )
    sub = parser.add_subparsers(dest="command", help="Available commands.")

    # --- play ---
    play_p = sub.add_parser("play", help="Play one match in the terminal.")
    play_p.add_argument(
        "--config", type=str, default=None,
        help="Path to a JSON config file; flags override its values.",
    )
    play_p.add_argument("--width", type=int, default=None)
    play_p.add_argument("--height", type=int, default=None)
    play_p.add_argument("--brain", type=str, default=None, choices=_BRAIN_CHOICES)
    play_p.add_argument("--seed", type=int, default=None)
    play_p.add_argument("--delay-ms", type=int, default=None)
    play_p.add_argument("--max-moves", type=int, default=None)
    play_p.add_argument(
        "--quiet", action="store_true",
        help="Only print the final board and result.",
    )

    # --- benchmark ---
    bench_p = sub.add_parser(
        "benchmark", help="Run seeded matches headless and report stats.",
    )
    bench_p.add_argument(
        "--brain", type=str, default=BrainKind.IMPATIENT.value,
        choices=_BRAIN_CHOICES,
    )
    bench_p.add_argument("--width", type=int, default=9)
    bench_p.add_argument("--height", type=int, default=9)
    bench_p.add_argument("--num-games", type=int, default=10)
    bench_p.add_argument("--seed", type=int, default=42)
    bench_p.add_argument("--max-moves", type=int, default=None)

    return parser


_RESULT_MESSAGES = {
    "crashed_wall": "DEAD. Ran into a wall",
    "ate_snake": "DEAD. Ran into a snake",
    "forfeit": "FORFEIT. The brain gave up",
    "won": "VICTORY. Ate last apple",
    "continued": "STOPPED. Move limit reached",
}


def _run_play(args: argparse.Namespace) -> int:
    from snake_brains.brains.registry import make_brain
    from snake_brains.config import GameConfig
    from snake_brains.game import Game, StepOutcome
    from snake_brains.render import render_text
    from snake_brains.runner import match_generators, run_match

    config = GameConfig.load(args.config) if args.config else GameConfig()

    overrides: dict = {}
    for name in ("width", "height", "brain", "seed", "delay_ms", "max_moves"):
        val = getattr(args, name, None)
        if val is not None:
            overrides[name] = val
    if overrides:
        d = config.to_dict()
        d.update(overrides)
        config = GameConfig(**d)

    game_rng, brain_rng = match_generators(config.seed)
    game = Game(config.width, config.height, rng=game_rng)
    brain = make_brain(config.brain, rng=brain_rng)

    def draw(g: Game) -> None:
        print(_CLEAR_SCREEN + render_text(g))  # noqa: T201

    def pace() -> None:
        time.sleep(config.delay_ms / 1000)

    if not args.quiet:
        draw(game)
    result = run_match(
        game,
        brain,
        max_moves=config.max_moves,
        pacer=None if args.quiet else pace,
        on_tick=None if args.quiet else draw,
    )
    if args.quiet:
        print(render_text(game))  # noqa: T201
    print(_RESULT_MESSAGES[result.outcome.value])  # noqa: T201
    return 0 if result.outcome is StepOutcome.WON else 1


def _run_benchmark(args: argparse.Namespace) -> int:
    from snake_brains.benchmark import benchmark_brain

    result = benchmark_brain(
        args.brain,
        width=args.width,
        height=args.height,
        num_games=args.num_games,
        seed=args.seed,
        max_moves=args.max_moves,
    )
    print(result.summary())  # noqa: T201
    return 0


def main(argv: list[str] | None = None) -> int:
    """Entry point for the ``snake-brains`` CLI."""
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
        "play": _run_play,
        "benchmark": _run_benchmark,
    }
    return handlers[args.command](args)


if __name__ == "__main__":
    sys.exit(main())
