"""
progression.py: Score, level and difficulty bookkeeping.
"""

import logging

from .constants import POINTS_PER_LEVEL, SPEED_PER_LEVEL
from .data_models import Bird, Pipe, Progression

logger = logging.getLogger(__name__)


class ProgressionManager:
    """Scores cleared pipes and raises the level every ten points."""

    def try_pass(self, progression: Progression, pipe: Pipe, bird: Bird) -> bool:
        """
        Scores a pipe the first time its left edge is behind the bird.
        Returns True when a point was awarded.
        """
        if pipe.passed or pipe.x >= bird.x - bird.radius:
            return False
        pipe.passed = True
        progression.score += 1
        self.check_level(progression)
        return True

    def check_level(self, progression: Progression) -> bool:
        """Brings the level up to score // 10 + 1, one step at a time."""
        candidate = progression.score // POINTS_PER_LEVEL + 1
        leveled_up = False
        while candidate > progression.level:
            progression.level += 1
            progression.game_speed += SPEED_PER_LEVEL
            leveled_up = True
            logger.info("Level up: level=%d speed=%.1f",
                        progression.level, progression.game_speed)
        return leveled_up
