"""
Console Interface

This module provides a text driver for playing Othello against the engine:
turn sequencing (including forced passes), human and AI players, and a
line-oriented command loop.

Protocol Flow:
    User -> "play d3"
    Engine -> "info depth 4 score 7 nodes 412 time 31"
    Engine -> "bestmove c3"
    Engine -> board diagram and "DARK to move"
    User -> "quit"
"""

from othello_engine.console.config import GameConfig
from othello_engine.console.interface import ConsoleInterface
from othello_engine.console.session import GameSession

__all__ = ['ConsoleInterface', 'GameConfig', 'GameSession']
