"""Random sprite image picker"""
import random
from typing import Optional

import pygame


class SpritePicker:
    def __init__(self, count: int, seed: Optional[int] = None):
        if seed is None:
            seed = pygame.time.get_ticks() ^ random.getrandbits(32)
        self.count = count
        self._rng = random.Random(seed)

    def pick(self) -> int:
        return self._rng.randrange(self.count)
