# catstack_layout.py
from dataclasses import dataclass
from catstack_config import CONFIG

@dataclass(frozen=True)
class Dims:
    width: int
    height: int
    sprite: int
    ground_h: int
    ground_y: int
    spawn_x: float
    spawn_y: float
    target_band: float

def compute_dims(width: int, height: int, cfg=CONFIG) -> Dims:
    """Viewport geometry, fixed once the window size is known."""
    sprite = int(cfg["SPRITE_SIZE"])
    ground_h = int(cfg["GROUND_HEIGHT"])
    return Dims(
        width=int(width), height=int(height),
        sprite=sprite, ground_h=ground_h,
        ground_y=int(height) - ground_h,
        spawn_x=float(cfg["SPAWN_X"]), spawn_y=float(cfg["SPAWN_Y"]),
        target_band=height * cfg["TARGET_BAND_FRACTION"],
    )
