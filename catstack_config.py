"""Tunable gameplay numbers (pixels, seconds, pixels per second)."""

CONFIG = {
    "GAME_DURATION": 60,
    "GROUND_HEIGHT": 50,
    "SPRITE_SIZE": 100,
    "HORIZONTAL_SPEED": 180,
    "FALL_SPEED": 300,
    "FOLLOW_RATE": 0.05,
    "REFERENCE_FPS": 60,
    "TARGET_BAND_FRACTION": 0.5,
    "SPAWN_X": 0,
    "SPAWN_Y": 50,
    "MAX_FRAME_DT": 0.1,
    "SPRITE_COUNT": 3,
    "ASSET_DIR": "assets",
    "SEED": None,
    "TARGET_FPS": 60,
    "WINDOW_SIZE": None,
    "TRIGGER_KEY": "K_SPACE",
    "LOG_LEVEL": "INFO",
}

_POSITIVE = ("GAME_DURATION", "SPRITE_SIZE", "HORIZONTAL_SPEED", "FALL_SPEED",
             "REFERENCE_FPS", "MAX_FRAME_DT", "SPRITE_COUNT", "TARGET_FPS")


def validate_config(cfg=CONFIG):
    """Raise ValueError for settings the game loop can't run with."""
    for key in _POSITIVE:
        if not cfg[key] > 0:
            raise ValueError(f"{key} must be positive, got {cfg[key]!r}")
    if cfg["GROUND_HEIGHT"] < 0:
        raise ValueError(f"GROUND_HEIGHT must be >= 0, got {cfg['GROUND_HEIGHT']!r}")
    if not 0 < cfg["FOLLOW_RATE"] < 1:
        raise ValueError(f"FOLLOW_RATE must be in (0, 1), got {cfg['FOLLOW_RATE']!r}")
    if not 0 < cfg["TARGET_BAND_FRACTION"] < 1:
        raise ValueError(f"TARGET_BAND_FRACTION must be in (0, 1), got {cfg['TARGET_BAND_FRACTION']!r}")
    if cfg["WINDOW_SIZE"] is not None:
        w, h = cfg["WINDOW_SIZE"]
        if w <= 0 or h <= 0:
            raise ValueError(f"WINDOW_SIZE must be positive, got {cfg['WINDOW_SIZE']!r}")
