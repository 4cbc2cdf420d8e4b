"""
Unit Tests for Pruning Benchmark

Tests for benchmark utilities, focusing on:
    - Reproducible position generation
    - Pruned vs. unpruned comparison
    - Summary statistics
"""

import pytest

from othello_engine.board import Board, Cell
from othello_engine.utils.benchmark import (
    BenchmarkPosition,
    PruningComparison,
    compare_pruning,
    generate_positions,
    run_pruning_benchmark,
)


class TestGeneratePositions:
    """Tests for generate_positions."""

    def test_count_and_ids(self):
        positions = generate_positions(5, plies=16, seed=1)

        assert len(positions) == 5
        assert [p.id for p in positions] == ["P.01", "P.02", "P.03", "P.04", "P.05"]

    def test_player_to_move_can_move(self):
        for position in generate_positions(10, plies=30, seed=3):
            assert position.board.has_any_move(position.color)
            assert not position.board.is_terminal()

    def test_same_seed_same_positions(self):
        first = generate_positions(4, plies=20, seed=11)
        second = generate_positions(4, plies=20, seed=11)

        assert [(p.board, p.color) for p in first] == [(p.board, p.color) for p in second]

    def test_plies_played(self):
        """Every ply places at most one disc."""
        for position in generate_positions(3, plies=10, seed=5):
            assert 4 < position.board.occupied <= 14

    def test_zero_plies_is_opening(self):
        positions = generate_positions(2, plies=0)

        assert all(p.board == Board.initial() and p.color is Cell.DARK for p in positions)


class TestComparePruning:
    """Tests for compare_pruning."""

    @pytest.fixture
    def position(self):
        return generate_positions(1, plies=18, seed=9)[0]

    def test_agrees(self, position):
        comparison = compare_pruning(position, depth=3)

        assert comparison.agrees, "Pruning should not change move or score"
        assert comparison.pruned_nodes <= comparison.nodes
        assert 0.0 <= comparison.reduction < 1.0
        assert comparison.time_taken >= 0.0

    def test_opening(self):
        comparison = compare_pruning(BenchmarkPosition(Board.initial(), Cell.DARK, "start"), depth=2)

        assert comparison.move == comparison.pruned_move
        assert comparison.nodes == 16

    def test_reduction_without_nodes(self):
        comparison = PruningComparison(
            position=BenchmarkPosition(Board.initial(), Cell.DARK),
            depth=1,
            move=None,
            score=None,
            nodes=0,
            pruned_move=None,
            pruned_score=None,
            pruned_nodes=0,
        )

        assert comparison.reduction == 0.0
        assert comparison.agrees


class TestRunPruningBenchmark:
    """Tests for run_pruning_benchmark."""

    def test_summary(self):
        positions = generate_positions(4, plies=18, seed=21)

        summary = run_pruning_benchmark(positions, depth=3)

        assert summary['depth'] == 3
        assert summary['total'] == 4
        assert summary['agreed'] == 4
        assert summary['nodes'] == sum(r.nodes for r in summary['results'])
        assert summary['pruned_nodes'] <= summary['nodes']
        assert summary['reduction'] == pytest.approx(1.0 - summary['pruned_nodes'] / summary['nodes'])
        assert summary['avg_time'] == pytest.approx(summary['total_time'] / 4)

    def test_empty(self):
        summary = run_pruning_benchmark([], depth=2)

        assert summary['total'] == 0
        assert summary['reduction'] == 0.0
        assert summary['avg_time'] == 0.0
