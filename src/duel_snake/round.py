"""Two-player round state: ticking, collisions, scoring and power-up timing."""

from __future__ import annotations

import enum
import logging
from collections.abc import Callable

import numpy as np

from duel_snake.clock import Clock, IntervalTrigger
from duel_snake.collectible import Collectible, CollectibleKind
from duel_snake.config import GameConfig
from duel_snake.grid import Grid, contains
from duel_snake.snake import Direction, Snake

logger = logging.getLogger(__name__)


class GameEvent(enum.Enum):
    """Discrete events emitted to the audio boundary."""

    ATE_FOOD = "ate-food"
    HIT = "hit-wall-or-self-or-opponent"
    ATE_POWERUP = "ate-powerup"


EventListener = Callable[[GameEvent], None]


class RoundState:
    """Owns both snakes, the food, the power-up and the scores of a round.

    Each call to :meth:`step` advances the round by one tick while it is
    running. :meth:`update` paces those ticks against the clock and is
    meant to be called once per display frame.

    Terminal collisions are checked in a fixed order and the first match
    ends the round: player 1 (wall, self, opponent), then player 2 (wall,
    self, opponent). When both snakes crash in the same tick, player 1's
    crash is found first and player 2 wins.
    """

    def __init__(
        self,
        config: GameConfig | None = None,
        clock: Clock | None = None,
    ) -> None:
        cfg = config or GameConfig()
        self.config = cfg
        self.rng = np.random.default_rng(cfg.seed)
        self.grid = Grid(cfg.cell_count)

        self.snake1 = Snake(
            cfg.player1.start,
            cfg.player1.start_direction,
            length=cfg.snake_length,
            color=cfg.player1.color,
        )
        self.snake2 = Snake(
            cfg.player2.start,
            cfg.player2.start_direction,
            length=cfg.snake_length,
            color=cfg.player2.color,
        )

        self.food = Collectible(
            self.grid, CollectibleKind.FOOD, cfg.food_value, rng=self.rng,
        )
        self.powerup = Collectible(
            self.grid, CollectibleKind.POWERUP, cfg.powerup_value, rng=self.rng,
        )
        self.food.activate(self.snake1.body, self.snake2.body)

        self._tick_trigger = IntervalTrigger(cfg.tick_interval, clock)
        self.clock = self._tick_trigger.clock
        now = self._tick_trigger.last_fired
        self._powerup_on = IntervalTrigger(cfg.powerup_on_time, self.clock, now)
        self._powerup_gap = IntervalTrigger(self._roll_gap(), self.clock, now)
        self.powerup_visible = False

        self.scores = [0, 0]
        self.running = True
        self.winner: int | None = None
        self.winner_message = ""
        self.tick = 0
        self.events: list[GameEvent] = []
        self._listeners: list[EventListener] = []

    # ------------------------------------------------------------------
    # Read-only views
    # ------------------------------------------------------------------

    @property
    def score1(self) -> int:
        return self.scores[0]

    @property
    def score2(self) -> int:
        return self.scores[1]

    @property
    def snakes(self) -> tuple[Snake, Snake]:
        return self.snake1, self.snake2

    @property
    def powerup_interval(self) -> float:
        """Randomized gap between the power-up hiding and showing again."""
        return self._powerup_gap.interval

    @property
    def powerup_shown_at(self) -> float:
        return self._powerup_on.last_fired

    @property
    def powerup_hidden_at(self) -> float:
        return self._powerup_gap.last_fired

    # ------------------------------------------------------------------
    # Input and events
    # ------------------------------------------------------------------

    def subscribe(self, listener: EventListener) -> None:
        """Register a callback invoked with every emitted event."""
        self._listeners.append(listener)

    def set_direction(self, player: int, direction: Direction) -> bool:
        """Request a turn for *player* (1 or 2) on the next tick.

        Returns whether the turn was accepted. Requests are ignored once
        the round is over.
        """
        snake = self._snake(player)
        if not self.running:
            return False
        return snake.set_direction(direction)

    # ------------------------------------------------------------------
    # Ticking
    # ------------------------------------------------------------------

    def update(self, now: float | None = None) -> bool:
        """Run one tick if the tick interval has elapsed.

        Returns whether a tick ran.
        """
        if not self.running:
            return False
        if not self._tick_trigger.ready(now):
            return False
        self.step(now)
        return True

    def step(self, now: float | None = None) -> dict:
        """Advance the round by one tick.

        Returns the full round state as a serializable dict.
        """
        if not self.running:
            return self.get_state()

        if now is None:
            now = self.clock()
        self.events = []

        self.snake1.advance()
        self.snake2.advance()

        for player in (1, 2):
            self._check_food(player)
        for player in (1, 2):
            self._check_powerup(player, now)

        self._check_terminal()

        if self.running:
            self._schedule_powerup(now)

        self.tick += 1
        logger.debug(
            "Tick %d: heads %s %s.", self.tick, self.snake1.head, self.snake2.head,
        )
        return self.get_state()

    def reset(self, now: float | None = None) -> bool:
        """Start a new round. Only allowed once the current one is over.

        Returns ``False`` without changing anything while still running.
        """
        if self.running:
            logger.debug("Reset ignored: round still running.")
            return False

        if now is None:
            now = self.clock()
        cfg = self.config
        self.snake1.reset_to(cfg.player1.start, cfg.player1.start_direction)
        self.snake2.reset_to(cfg.player2.start, cfg.player2.start_direction)
        self.food.activate(self.snake1.body, self.snake2.body)
        self.powerup.deactivate()
        self.powerup_visible = False
        self._powerup_gap.interval = self._roll_gap()
        self._powerup_gap.restart(now)
        self._powerup_on.restart(now)
        self._tick_trigger.restart(now)

        self.scores = [0, 0]
        self.running = True
        self.winner = None
        self.winner_message = ""
        self.tick = 0
        self.events = []
        logger.info("New round started.")
        return True

    def get_state(self) -> dict:
        """Return the full, serializable round state."""
        return {
            "tick": self.tick,
            "running": self.running,
            "winner": self.winner,
            "winner_message": self.winner_message,
            "scores": list(self.scores),
            "snakes": [s.to_dict() for s in self.snakes],
            "food": self.food.to_dict(),
            "powerup": self.powerup.to_dict(),
            "powerup_visible": self.powerup_visible,
            "events": [e.value for e in self.events],
            "grid": self.grid.to_dict(),
        }

    # ------------------------------------------------------------------
    # Tick phases
    # ------------------------------------------------------------------

    def _check_food(self, player: int) -> None:
        snake = self._snake(player)
        if not self.food.is_at(snake.head):
            return
        self.food.activate(self.snake1.body, self.snake2.body)
        snake.grow()
        self.scores[player - 1] += self.food.value
        self._emit(GameEvent.ATE_FOOD)

    def _check_powerup(self, player: int, now: float) -> None:
        snake = self._snake(player)
        if not self.powerup.is_at(snake.head):
            return
        self._hide_powerup(now)
        snake.grow()
        self.scores[player - 1] += self.powerup.value
        self._emit(GameEvent.ATE_POWERUP)

    def _check_terminal(self) -> None:
        checks = (
            ("wall", self._hit_wall),
            ("self", self._hit_self),
            ("opponent", self._hit_opponent),
        )
        for player in (1, 2):
            for reason, collided in checks:
                if collided(player):
                    self._declare_winner(3 - player, reason)
                    return

    def _hit_wall(self, player: int) -> bool:
        return not self.grid.in_bounds(self._snake(player).head)

    def _hit_self(self, player: int) -> bool:
        return self._snake(player).self_collision()

    def _hit_opponent(self, player: int) -> bool:
        return contains(self._snake(player).head, self._snake(3 - player).body)

    def _schedule_powerup(self, now: float) -> None:
        if self.powerup_visible:
            if self._powerup_on.ready(now):
                self._hide_powerup(now)
                logger.debug("Power-up expired at tick %d.", self.tick)
        elif self._powerup_gap.ready(now):
            self.powerup.activate(self.snake1.body, self.snake2.body)
            self.powerup_visible = True
            self._powerup_on.restart(now)
            logger.debug("Power-up shown at %s.", self.powerup.position)

    def _hide_powerup(self, now: float) -> None:
        self.powerup.deactivate()
        self.powerup_visible = False
        self._powerup_gap.restart(now)

    def _declare_winner(self, winner: int, reason: str) -> None:
        self.running = False
        self.winner = winner
        self.winner_message = f"Player {winner} Wins!"
        self._emit(GameEvent.HIT)
        logger.info(
            "Player %d crashed (%s) at tick %d; scores %d-%d.",
            3 - winner,
            reason,
            self.tick + 1,
            self.scores[0],
            self.scores[1],
        )

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _snake(self, player: int) -> Snake:
        if player == 1:
            return self.snake1
        if player == 2:
            return self.snake2
        raise ValueError(f"player must be 1 or 2, got {player}.")

    def _roll_gap(self) -> float:
        cfg = self.config
        if cfg.powerup_gap_min == cfg.powerup_gap_max:
            return cfg.powerup_gap_min
        return float(self.rng.uniform(cfg.powerup_gap_min, cfg.powerup_gap_max))

    def _emit(self, event: GameEvent) -> None:
        self.events.append(event)
        for listener in self._listeners:
            listener(event)
