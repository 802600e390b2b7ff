"""
Catcher geometry

The catcher's width shrinks as CircleSize grows. Everything here is
expressed in playfield units (512 wide).
"""

BASE_SIZE = 106.75
ALLOWED_CATCH_RANGE = 0.8
BASE_DASH_SPEED = 1.0


def calculate_scale(circle_size: float) -> float:
    return 1.0 - 0.7 * (circle_size - 5) / 5


def calculate_catch_width(circle_size: float) -> float:
    """
    Width of the area of the catcher that can catch objects
    """
    return BASE_SIZE * abs(calculate_scale(circle_size)) * ALLOWED_CATCH_RANGE


def difficulty_half_catcher_width(circle_size: float) -> float:
    """
    Half catcher width used for difficulty, with the extra reduction
    applied to very small catchers (CircleSize above 5.5)
    """
    half_catcher_width = calculate_catch_width(circle_size) * 0.5
    half_catcher_width *= 1 - (max(0.0, circle_size - 5.5) * 0.0625)
    return half_catcher_width
