"""
Command line entry point: play in a window, or run headless random-agent episodes
"""

import argparse
import os

from .config import VARIANT_CONFIGS, make_config
from .storage import ScoreStore

DEFAULT_STORE = os.path.join(os.path.expanduser("~"), ".dark_horizon", "scores.json")


def play_window(config, store, seed=None, verbose=1):
    """Open the arcade window and hand control to its event loop"""
    import arcade

    from .render import ArcadeScheduler, HorizonWindow
    from .session import GameSession
    from .utils import make_rng

    session = GameSession(
        config=config,
        store=store,
        rng=make_rng(seed),
        scheduler=ArcadeScheduler(1 / config.fps),
        verbose=verbose,
    )
    HorizonWindow(session)
    arcade.run()
    return session


def run_headless(config, episodes, seed=None):
    from .env import run_random_episode

    results = []
    for i in range(episodes):
        ep_seed = None if seed is None else seed + i
        info = run_random_episode(render=False, seed=ep_seed, config=config)
        results.append(info["score"])

    if results:
        print(f"\n{'='*60}")
        print(f"Episodes: {len(results)}  Mean score: {sum(results) / len(results):.1f}  "
              f"Best: {max(results)}")
        print(f"{'='*60}\n")
    return results


def main(argv=None):
    parser = argparse.ArgumentParser(description="Dark Horizon arcade shooter")
    parser.add_argument(
        "--variant",
        type=str,
        default="classic",
        choices=sorted(VARIANT_CONFIGS),
        help="Scoring variant (default: classic)",
    )
    parser.add_argument("--mobile", action="store_true", help="Use the slower mobile asteroid speed")
    parser.add_argument("--seed", type=int, default=None, help="Random seed")
    parser.add_argument("--width", type=int, default=None, help="Window width")
    parser.add_argument("--height", type=int, default=None, help="Window height")
    parser.add_argument(
        "--store",
        type=str,
        default=DEFAULT_STORE,
        help=f"High score file (default: {DEFAULT_STORE})",
    )
    parser.add_argument(
        "--headless",
        type=int,
        default=0,
        metavar="N",
        help="Run N random-agent episodes without a window instead of playing",
    )
    parser.add_argument("--name", type=str, default=None, help="Player name to remember")
    parser.add_argument("--verbose", type=int, default=1)

    args = parser.parse_args(argv)

    overrides = {}
    if args.width:
        overrides["width"] = args.width
    if args.height:
        overrides["height"] = args.height
    config = make_config(args.variant, is_mobile=args.mobile, **overrides)

    if args.headless > 0:
        return run_headless(config, args.headless, seed=args.seed)

    store = ScoreStore(args.store, verbose=args.verbose)
    if args.name:
        store.set_player_name(args.name)
    if args.verbose > 0:
        print(f"[play] {store.get_player_name()} - high score {store.get_high_score()}")
    play_window(config, store, seed=args.seed, verbose=args.verbose)


if __name__ == "__main__":
    main()
