"""Edge-triggered trigger key"""
import pygame
from catstack_config import CONFIG

class TriggerEdge:
    """Turns key down/up into single presses; auto-repeat downs are dropped."""
    def __init__(self, key=None):
        self.key = key if key is not None else getattr(pygame, CONFIG["TRIGGER_KEY"])
        self.held = False
    def down(self, key) -> bool:
        if key != self.key: return False
        if self.held: return False
        self.held = True; return True
    def up(self, key):
        if key == self.key: self.held = False
    def reset(self):
        self.held = False
    def handle(self, e) -> bool:
        if e.type == pygame.KEYDOWN: return self.down(e.key)
        if e.type == pygame.KEYUP: self.up(e.key)
        return False
