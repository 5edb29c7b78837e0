"""Sprite model: the piece in flight and its landed snapshots"""
from dataclasses import dataclass


@dataclass
class FallingSprite:
    x: float
    y: float
    image: int
    falling: bool = False

    @staticmethod
    def spawn(x: float, y: float, image: int) -> "FallingSprite":
        return FallingSprite(float(x), float(y), image, False)


@dataclass(frozen=True)
class StackedSprite:
    x: float
    y: float
    image: int

    @staticmethod
    def snapshot(s: FallingSprite) -> "StackedSprite":
        return StackedSprite(s.x, s.y, s.image)


def collides(a, b, size: float) -> bool:
    """Axis-aligned overlap of two squares of side `size`.

    Strict inequalities: squares that only share an edge do not collide.
    """
    return (a.x < b.x + size and a.x + size > b.x and
            a.y < b.y + size and a.y + size > b.y)
