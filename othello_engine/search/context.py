"""
Search configuration and telemetry.

Each top-level search owns one SearchContext. The recursive evaluator
receives it explicitly, so two engines (or two tests) never share a node
counter.
"""

from dataclasses import dataclass


@dataclass
class SearchContext:
    """Toggles and node counter for a single search."""

    pruning_enabled: bool = True
    """Cut off sibling moves once beta <= alpha"""

    trace_enabled: bool = False
    """Log considered moves, scores and cutoffs"""

    nodes_examined: int = 0
    """Calls to search_value since the last reset()"""

    def reset(self) -> None:
        self.nodes_examined = 0

    def visit(self) -> None:
        self.nodes_examined += 1
