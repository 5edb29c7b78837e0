"""Stack helpers: top, settle, score"""
import math
from typing import List
from catstack_layout import Dims
from catstack_sprite import FallingSprite, StackedSprite, collides

Stack = List[StackedSprite]

def stack_top(stack: Stack, dims: Dims) -> float:
    """Highest point of the stack (smallest y), or the ground line when empty."""
    if not stack: return float(dims.ground_y)
    return min(s.y for s in stack)

def settle(stack: Stack, sprite: FallingSprite, dims: Dims) -> bool:
    """Clamp a falling sprite onto the ground or the stack; True if it landed.

    Ground is checked first, then the stack in insertion order. The first
    overlapping stacked sprite wins, even if a later one is higher.
    """
    hit = False
    if sprite.y + dims.sprite >= dims.ground_y:
        sprite.y = float(dims.ground_y - dims.sprite); hit = True
    for s in stack:
        if collides(sprite, s, dims.sprite):
            sprite.y = s.y - dims.sprite; hit = True
            break
    return hit

def landing_score(prev: int, settled_y: float, dims: Dims) -> int:
    height = dims.height - (settled_y + dims.sprite)
    return max(prev, math.floor(height / dims.sprite))
