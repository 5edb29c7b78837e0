"""Camera tracking: a smoothed vertical scroll that follows the stack top."""
from catstack_layout import Dims


def target_offset(top: float, dims: Dims) -> float:
    """Scroll needed to keep the stack top on the target band, 0 below it."""
    band_line = dims.height - dims.target_band
    if top < band_line:
        return band_line - top
    return 0.0


def follow_frame(offset: float, target: float, rate: float) -> float:
    """One per-frame smoothing step; never overshoots for rate in (0, 1)."""
    return offset + (target - offset) * rate


def follow(offset: float, target: float, rate: float, dt: float, reference_fps: float) -> float:
    """Time-scaled smoothing.

    Equivalent to `follow_frame` applied once per frame at `reference_fps`,
    so the scroll speed doesn't depend on the actual frame rate.
    """
    if dt <= 0:
        return offset
    alpha = 1.0 - (1.0 - rate) ** (dt * reference_fps)
    return offset + (target - offset) * alpha
