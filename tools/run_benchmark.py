#!/usr/bin/env python3
"""
Alpha-Beta Pruning Benchmark Runner

Searches generated midgame positions at several depths, with and without
alpha-beta pruning, and reports node counts and agreement.

Usage:
    python tools/run_benchmark.py [--depths 2,3,4] [--positions 20] [--verbose]
"""

import sys
import argparse
import logging
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from othello_engine.evaluation.heuristic import HeuristicEvaluator
from othello_engine.utils.benchmark import generate_positions, run_pruning_benchmark


def setup_logging(verbose: bool = False):
    """Configure logging."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(message)s",
        datefmt="%H:%M:%S",
    )


def format_time(seconds: float) -> str:
    """Format time"""
    if seconds < 1:
        return f"{seconds * 1000:.0f}ms"
    elif seconds < 60:
        return f"{seconds:.1f}s"
    else:
        minutes = int(seconds // 60)
        secs = seconds % 60
        return f"{minutes}m {secs:.0f}s"


def run_benchmark(depths: list[int], num_positions: int, plies: int, seed: int, verbose: bool = False):
    """
    Run the pruning benchmark at multiple depths.

    Args:
        depths: List of depths to test
        num_positions: Number of generated positions
        plies: Random moves played to reach each position
        seed: Random seed for position generation
        verbose: If True, print detailed results for each position
    """
    logger = logging.getLogger(__name__)
    evaluator = HeuristicEvaluator()

    positions = generate_positions(num_positions, plies=plies, seed=seed)
    logger.info(f"Generated {len(positions)} positions ({plies} plies, seed {seed})")

    print("=" * 80)
    print("ALPHA-BETA BENCHMARK - Othello Engine")
    print("=" * 80)
    print("Evaluator: Heuristic (weights + mobility + corners + discs)")
    print("Search: Minimax, with and without Alpha-Beta Pruning")
    print(f"Depths: {depths}")
    print(f"Positions: {len(positions)}")
    print("=" * 80)

    all_results = []

    for depth in depths:
        result = run_pruning_benchmark(positions, depth, evaluator=evaluator, progress=True)
        all_results.append(result)

        print(f"\nResults at depth {depth}:")
        print(f"  Agreement: {result['agreed']}/{result['total']}")
        print(f"  Nodes (minimax): {result['nodes']:,}")
        print(f"  Nodes (alpha-beta): {result['pruned_nodes']:,}")
        print(f"  Reduction: {100 * result['reduction']:.1f}%")
        print(f"  Avg time per position: {format_time(result['avg_time'])}")

        if verbose:
            for r in result['results']:
                move = r.pruned_move.notation if r.pruned_move else "-"
                print(
                    f"    {r.position.id}: {r.position.color.name:<5} {move:<3} "
                    f"score {r.pruned_score:>6}  nodes {r.nodes:>8,} -> {r.pruned_nodes:>8,}"
                )

        disagreements = [r for r in result['results'] if not r.agrees]
        for r in disagreements:
            logger.error(
                f"{r.position.id}: minimax {r.move} ({r.score}) != "
                f"alpha-beta {r.pruned_move} ({r.pruned_score})"
            )

    print("\n" + "=" * 80)
    print("SUMMARY TABLE")
    print("=" * 80)
    print(f"{'Depth':<8} {'Agree':<10} {'Minimax':>14} {'Alpha-Beta':>14} {'Saved':>8} {'Avg Time':>10}")
    print("-" * 80)

    for r in all_results:
        print(
            f"{r['depth']:<8} {r['agreed']}/{r['total']:<7} {r['nodes']:>14,} "
            f"{r['pruned_nodes']:>14,} {100 * r['reduction']:>7.1f}% {format_time(r['avg_time']):>10}"
        )

    print("=" * 80)
    print("Benchmark complete!")
    print("=" * 80)

    return all_results


def main():
    parser = argparse.ArgumentParser(
        description="Compare minimax and alpha-beta node counts at multiple depths"
    )
    parser.add_argument(
        "--depths",
        type=str,
        default="2,3,4",
        help="Comma-separated list of depths to test (default: 2,3,4)"
    )
    parser.add_argument(
        "--positions",
        type=int,
        default=20,
        help="Number of generated positions (default: 20)"
    )
    parser.add_argument(
        "--plies",
        type=int,
        default=20,
        help="Random moves played to reach each position (default: 20)"
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=0,
        help="Random seed (default: 0)"
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Print detailed results for each position"
    )

    args = parser.parse_args()
    setup_logging(verbose=args.verbose)

    try:
        depths = [int(d.strip()) for d in args.depths.split(",")]
    except ValueError:
        print("Error: depths must be comma-separated integers")
        sys.exit(1)

    try:
        results = run_benchmark(depths, args.positions, args.plies, args.seed, verbose=args.verbose)
    except KeyboardInterrupt:
        print("\n\nBenchmark interrupted by user")
        sys.exit(1)

    if any(r['agreed'] != r['total'] for r in results):
        sys.exit(2)


if __name__ == "__main__":
    main()
