"""Pygame window, keyboard input and drawing for a local duel."""

from __future__ import annotations

import logging
from pathlib import Path

import pygame

from duel_snake.audio import SoundBoard
from duel_snake.config import GameConfig
from duel_snake.grid import Cell
from duel_snake.round import RoundState
from duel_snake.snake import Direction

logger = logging.getLogger(__name__)

RED = (230, 41, 55)
WHITE = (255, 255, 255)

# Arrow keys steer player 1, WASD steers player 2.
KEY_BINDINGS: dict[int, tuple[int, Direction]] = {
    pygame.K_UP: (1, Direction.UP),
    pygame.K_DOWN: (1, Direction.DOWN),
    pygame.K_LEFT: (1, Direction.LEFT),
    pygame.K_RIGHT: (1, Direction.RIGHT),
    pygame.K_w: (2, Direction.UP),
    pygame.K_s: (2, Direction.DOWN),
    pygame.K_a: (2, Direction.LEFT),
    pygame.K_d: (2, Direction.RIGHT),
}
RESTART_KEY = pygame.K_SPACE


def cell_rect(cell: Cell, cell_size: int, offset: int) -> pygame.Rect:
    """Map a grid cell to its pixel rectangle on screen."""
    x, y = cell
    return pygame.Rect(offset + x * cell_size, offset + y * cell_size, cell_size, cell_size)


class DuelSnakeApp:
    """Runs a :class:`RoundState` inside a pygame window.

    The round is only read from and sent input; all rules live in the
    core. Ticks are paced by the round's own interval trigger, rendering
    runs once per frame after any tick that fired.
    """

    def __init__(
        self,
        config: GameConfig | None = None,
        assets_dir: Path | None = None,
    ) -> None:
        pygame.init()
        pygame.font.init()

        self.config = config or GameConfig()
        self.display = self.config.display
        self.assets_dir = assets_dir or Path.cwd()

        size = self.config.window_size
        self.screen = pygame.display.set_mode((size, size))
        pygame.display.set_caption("2-Player Snake with Powerups")
        self.clock = pygame.time.Clock()

        self.title_font = pygame.font.SysFont(None, 48)
        self.body_font = pygame.font.SysFont(None, 26)

        self.round = RoundState(self.config)
        self.audio = SoundBoard(self.assets_dir / "Sounds")
        self.audio.load_assets()
        self.round.subscribe(self.audio.play)

        self.food_image = self._load_image("food.png")
        self.powerup_image = self._load_image("powerup.png")

    def _load_image(self, name: str) -> pygame.Surface | None:
        path = self.assets_dir / "Graphics" / name
        if not path.exists():
            logger.debug("Image %s not found; drawing a plain cell.", path)
            return None
        try:
            image = pygame.image.load(str(path)).convert_alpha()
        except pygame.error as exc:
            logger.warning("Could not load %s: %s", path, exc)
            return None
        size = self.display.cell_size
        return pygame.transform.smoothscale(image, (size, size))

    def run(self) -> None:
        """Main event/update/render loop."""
        logger.info("Starting duel on a %dx%d grid.", self.config.cell_count, self.config.cell_count)
        running = True
        while running:
            self.clock.tick(self.display.fps)
            running = self._handle_events()
            if not running:
                break
            self.round.update()
            self._render()

        self.audio.close()
        pygame.quit()

    def _handle_events(self) -> bool:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                return False
            if event.type != pygame.KEYDOWN:
                continue
            self.handle_key(event.key)
        return True

    def handle_key(self, key: int) -> None:
        """Forward one key press to the round."""
        if key == RESTART_KEY:
            self.round.reset()
            return
        binding = KEY_BINDINGS.get(key)
        if binding is not None:
            player, direction = binding
            self.round.set_direction(player, direction)

    def _render(self) -> None:
        self.screen.fill(self.display.background)
        if self.round.running:
            self._render_playfield()
        else:
            self._render_game_over()
        self._render_hud()
        pygame.display.flip()

    def _render_playfield(self) -> None:
        size, offset = self.display.cell_size, self.display.offset
        for snake in self.round.snakes:
            for segment in snake.body:
                pygame.draw.rect(
                    self.screen, snake.color, cell_rect(segment, size, offset),
                    border_radius=size // 2,
                )
        self._draw_collectible(self.round.food.position, self.food_image, RED)
        if self.round.powerup_visible:
            self._draw_collectible(
                self.round.powerup.position, self.powerup_image, WHITE,
            )

    def _draw_collectible(
        self, cell: Cell, image: pygame.Surface | None, fallback: tuple[int, int, int],
    ) -> None:
        rect = cell_rect(cell, self.display.cell_size, self.display.offset)
        if image is not None:
            self.screen.blit(image, rect.topleft)
        else:
            pygame.draw.rect(self.screen, fallback, rect)

    def _render_game_over(self) -> None:
        offset = self.display.offset
        middle = offset + self.display.cell_size * self.config.cell_count // 2
        message = self.title_font.render(self.round.winner_message, True, RED)
        prompt = self.body_font.render("Press SPACE to Restart", True, RED)
        self.screen.blit(message, (offset + 100, middle))
        self.screen.blit(prompt, (offset + 100, middle + 50))

    def _render_hud(self) -> None:
        fg = self.display.foreground
        offset = self.display.offset
        board = self.display.cell_size * self.config.cell_count
        border = pygame.Rect(offset - 5, offset - 5, board + 10, board + 10)
        pygame.draw.rect(self.screen, fg, border, width=5)

        title = self.title_font.render("2-Player Snake", True, fg)
        self.screen.blit(title, (offset - 5, 20))
        p1 = self.body_font.render(f"P1 Score: {self.round.score1:02d}", True, fg)
        p2 = self.body_font.render(f"P2 Score: {self.round.score2:02d}", True, fg)
        self.screen.blit(p1, (offset - 5, offset + board + 10))
        self.screen.blit(p2, (offset + 300, offset + board + 10))
