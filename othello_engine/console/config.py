"""
Game configuration for the console driver.
"""

from dataclasses import dataclass

MIN_SEARCH_DEPTH = 1
MAX_SEARCH_DEPTH = 8


@dataclass
class GameConfig:
    """Settings for a human/AI game session.

    The search engine itself accepts any depth; the range check here keeps
    interactive games responsive.
    """

    # Search
    search_depth: int = 4
    """Plies searched by the AI (1-8)"""

    pruning_enabled: bool = True
    """Use alpha-beta pruning"""

    trace_enabled: bool = False
    """Log considered moves and cutoffs"""

    # Players
    ai_dark: bool = False
    """Dark is played by the AI"""

    ai_light: bool = True
    """Light is played by the AI"""

    # Pacing
    pace_ai: bool = False
    """Pause before the AI's move is shown"""

    def __post_init__(self):
        """Validate configuration after initialization."""
        if not isinstance(self.search_depth, int) or isinstance(self.search_depth, bool):
            raise ValueError(f"search_depth must be an integer, got {self.search_depth!r}")

        if not MIN_SEARCH_DEPTH <= self.search_depth <= MAX_SEARCH_DEPTH:
            raise ValueError(
                f"search_depth should be between {MIN_SEARCH_DEPTH} and "
                f"{MAX_SEARCH_DEPTH}, got {self.search_depth}"
            )

    def thinking_delay(self) -> float:
        """Seconds to pause before showing an AI move (0 unless pace_ai)."""
        if not self.pace_ai:
            return 0.0
        return max(0.8, self.search_depth * 0.2)

    def __repr__(self) -> str:
        """String representation of config."""
        players = {
            (False, False): "Human vs Human",
            (True, False): "AI vs Human",
            (False, True): "Human vs AI",
            (True, True): "AI vs AI",
        }[(self.ai_dark, self.ai_light)]
        return (
            f"GameConfig(\n"
            f"  Players: {players}\n"
            f"  Search: depth={self.search_depth}, pruning={self.pruning_enabled}, "
            f"trace={self.trace_enabled}\n"
            f"  Pacing: {self.thinking_delay():.1f}s\n"
            f")"
        )
