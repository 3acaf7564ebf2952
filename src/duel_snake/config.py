"""Game and display configuration."""

from __future__ import annotations

import json
import logging
from dataclasses import asdict, dataclass, field
from pathlib import Path

from duel_snake.snake import Direction

logger = logging.getLogger(__name__)

_DIRECTION_NAMES = {d.name.lower(): d for d in Direction}


@dataclass(frozen=True)
class PlayerConfig:
    """Starting layout and colour for one snake."""

    start: tuple[int, int]
    direction: str
    color: tuple[int, int, int]

    def __post_init__(self) -> None:
        if self.direction not in _DIRECTION_NAMES:
            raise ValueError(
                f"direction must be one of {sorted(_DIRECTION_NAMES)}, "
                f"got {self.direction!r}."
            )

    @property
    def start_direction(self) -> Direction:
        return _DIRECTION_NAMES[self.direction]


def _player1() -> PlayerConfig:
    return PlayerConfig(start=(6, 9), direction="right", color=(0, 117, 44))


def _player2() -> PlayerConfig:
    return PlayerConfig(start=(18, 9), direction="left", color=(0, 82, 172))


@dataclass(frozen=True)
class DisplayConfig:
    """Pixel layout and frame rate for the pygame front-end."""

    cell_size: int = 30
    offset: int = 75
    fps: int = 60
    background: tuple[int, int, int] = (173, 204, 96)
    foreground: tuple[int, int, int] = (43, 51, 24)

    def __post_init__(self) -> None:
        if self.cell_size < 1:
            raise ValueError("cell_size must be at least 1.")
        if self.offset < 0:
            raise ValueError("offset must be non-negative.")
        if self.fps < 1:
            raise ValueError("fps must be at least 1.")


@dataclass(frozen=True)
class GameConfig:
    """Rules, timings and layout of a two-player round.

    Supports JSON serialization so a tuned setup can be replayed.
    """

    cell_count: int = 25
    snake_length: int = 3
    food_value: int = 1
    powerup_value: int = 5

    # Timing (seconds)
    tick_interval: float = 0.2
    powerup_on_time: float = 10.0
    powerup_gap_min: float = 15.0
    powerup_gap_max: float = 16.0

    player1: PlayerConfig = field(default_factory=_player1)
    player2: PlayerConfig = field(default_factory=_player2)
    display: DisplayConfig = field(default_factory=DisplayConfig)
    seed: int | None = None

    def __post_init__(self) -> None:
        if self.cell_count < 4:
            raise ValueError("cell_count must be at least 4.")
        if self.snake_length < 3:
            raise ValueError("snake_length must be at least 3.")
        if self.food_value < 0 or self.powerup_value < 0:
            raise ValueError("food_value and powerup_value must be non-negative.")
        if self.tick_interval <= 0:
            raise ValueError("tick_interval must be positive.")
        if self.powerup_on_time <= 0:
            raise ValueError("powerup_on_time must be positive.")
        if not 0 < self.powerup_gap_min <= self.powerup_gap_max:
            raise ValueError(
                "powerup_gap_min must be positive and not exceed powerup_gap_max."
            )

        occupied: set[tuple[int, int]] = set()
        for number, player in ((1, self.player1), (2, self.player2)):
            x, y = player.start
            dx, dy = player.start_direction.value
            for seg in range(self.snake_length):
                cx, cy = x - dx * seg, y - dy * seg
                if not (0 <= cx < self.cell_count and 0 <= cy < self.cell_count):
                    raise ValueError(
                        f"snake_length does not fit the grid for player {number}; "
                        "move the start cell or reduce the length."
                    )
                if (cx, cy) in occupied:
                    raise ValueError(
                        "starting snakes overlap; move the start cells or "
                        "reduce snake_length."
                    )
                occupied.add((cx, cy))

    @property
    def window_size(self) -> int:
        """Side length of the square window in pixels."""
        return 2 * self.display.offset + self.display.cell_size * self.cell_count

    def to_dict(self) -> dict:
        """Serialize to a plain dict (tuples become lists on JSON dump)."""
        return asdict(self)

    def save(self, path: str | Path) -> None:
        """Write config to a JSON file."""
        p = Path(path)
        p.parent.mkdir(parents=True, exist_ok=True)
        p.write_text(json.dumps(self.to_dict(), indent=2))
        logger.info("Config saved to %s", p)

    @classmethod
    def from_dict(cls, raw: dict) -> GameConfig:
        """Build a config from a dict such as the one :meth:`to_dict` returns."""
        raw = dict(raw)
        for key in ("player1", "player2"):
            if key in raw:
                player = dict(raw[key])
                player["start"] = tuple(player["start"])
                player["color"] = tuple(player["color"])
                raw[key] = PlayerConfig(**player)
        if "display" in raw:
            display = dict(raw["display"])
            for colour in ("background", "foreground"):
                if colour in display:
                    display[colour] = tuple(display[colour])
            raw["display"] = DisplayConfig(**display)
        return cls(**raw)

    @classmethod
    def load(cls, path: str | Path) -> GameConfig:
        """Load config from a JSON file."""
        return cls.from_dict(json.loads(Path(path).read_text()))
