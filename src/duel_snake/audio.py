"""Sound effects for round events."""

from __future__ import annotations

import logging
from pathlib import Path

import pygame

from duel_snake.round import GameEvent

logger = logging.getLogger(__name__)

_EVENT_FILES: dict[GameEvent, str] = {
    GameEvent.ATE_FOOD: "eat.mp3",
    GameEvent.HIT: "wall.mp3",
    GameEvent.ATE_POWERUP: "powerup.mp3",
}


class SoundBoard:
    """Plays a sound per :class:`GameEvent`, silently if assets are absent."""

    def __init__(self, sounds_dir: Path) -> None:
        self.sounds_dir = sounds_dir
        self.sound_enabled = False
        self.sounds: dict[GameEvent, pygame.mixer.Sound] = {}
        try:
            pygame.mixer.init()
            self.sound_enabled = True
        except pygame.error as exc:
            logger.warning("Audio disabled: %s", exc)

    def load_assets(self) -> None:
        """Load the event sounds that exist on disk."""
        if not self.sound_enabled:
            return
        for event, name in _EVENT_FILES.items():
            path = self.sounds_dir / name
            if not path.exists():
                logger.debug("Sound file %s not found.", path)
                continue
            try:
                self.sounds[event] = pygame.mixer.Sound(str(path))
            except pygame.error as exc:
                logger.warning("Could not load %s: %s", path, exc)

    def play(self, event: GameEvent) -> None:
        """Play the sound mapped to *event*, if any."""
        if not self.sound_enabled:
            return
        sound = self.sounds.get(event)
        if sound:
            sound.play()

    def close(self) -> None:
        if self.sound_enabled:
            pygame.mixer.quit()
            self.sound_enabled = False
