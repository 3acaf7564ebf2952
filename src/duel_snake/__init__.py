"""Duel Snake — two-player snake simulation core."""

from duel_snake.clock import IntervalTrigger
from duel_snake.collectible import INACTIVE, Collectible, CollectibleKind
from duel_snake.config import DisplayConfig, GameConfig, PlayerConfig
from duel_snake.grid import Grid, GridFullError, contains
from duel_snake.round import GameEvent, RoundState
from duel_snake.snake import Direction, Snake

__all__ = [
    "INACTIVE",
    "Collectible",
    "CollectibleKind",
    "Direction",
    "DisplayConfig",
    "GameConfig",
    "GameEvent",
    "Grid",
    "GridFullError",
    "IntervalTrigger",
    "PlayerConfig",
    "RoundState",
    "Snake",
    "contains",
]
