"""Easing curves for wallpaper transitions.

Every curve maps a progress value in [0, 1] to an eased value; the
"back" and "elastic" families overshoot that range on purpose.
"""

from __future__ import annotations

import math
from typing import Callable

EasingFunc = Callable[[float], float]

_BACK_OVERSHOOT = 1.70158
_BOUNCE_COEFF = 7.5625
_BOUNCE_DIVISOR = 2.75


def linear(progress: float) -> float:
    """No easing: the progress value itself, as a float."""
    return float(progress)


def ease_in_quad(progress: float) -> float:
    return progress * progress


def ease_out_quad(progress: float) -> float:
    return 1.0 - (1.0 - progress) * (1.0 - progress)


def ease_in_out_quad(progress: float) -> float:
    if progress < 0.5:
        return 2.0 * progress * progress
    return 1.0 - (-2.0 * progress + 2.0) ** 2 / 2.0


def ease_in_cubic(progress: float) -> float:
    return progress * progress * progress


def ease_out_cubic(progress: float) -> float:
    return 1.0 - (1.0 - progress) ** 3


def ease_in_out_cubic(progress: float) -> float:
    if progress < 0.5:
        return 4.0 * progress * progress * progress
    return 1.0 - (-2.0 * progress + 2.0) ** 3 / 2.0


def ease_in_quart(progress: float) -> float:
    return progress**4


def ease_out_quart(progress: float) -> float:
    return 1.0 - (1.0 - progress) ** 4


def ease_in_out_quart(progress: float) -> float:
    if progress < 0.5:
        return 8.0 * progress**4
    return 1.0 - (-2.0 * progress + 2.0) ** 4 / 2.0


def ease_in_sine(progress: float) -> float:
    return 1.0 - math.cos((progress * math.pi) / 2.0)


def ease_out_sine(progress: float) -> float:
    return math.sin((progress * math.pi) / 2.0)


def ease_in_out_sine(progress: float) -> float:
    return -(math.cos(math.pi * progress) - 1.0) / 2.0


def ease_in_expo(progress: float) -> float:
    if progress == 0.0:
        return 0.0
    return 2.0 ** (10.0 * progress - 10.0)


def ease_out_expo(progress: float) -> float:
    if progress == 1.0:
        return 1.0
    return 1.0 - 2.0 ** (-10.0 * progress)


def ease_in_out_expo(progress: float) -> float:
    if progress == 0.0:
        return 0.0
    if progress == 1.0:
        return 1.0
    if progress < 0.5:
        return 2.0 ** (20.0 * progress - 10.0) / 2.0
    return (2.0 - 2.0 ** (-20.0 * progress + 10.0)) / 2.0


def ease_in_circ(progress: float) -> float:
    return 1.0 - math.sqrt(1.0 - progress * progress)


def ease_out_circ(progress: float) -> float:
    return math.sqrt(1.0 - (progress - 1.0) ** 2)


def ease_in_out_circ(progress: float) -> float:
    if progress < 0.5:
        return (1.0 - math.sqrt(1.0 - (2.0 * progress) ** 2)) / 2.0
    return (math.sqrt(1.0 - (-2.0 * progress + 2.0) ** 2) + 1.0) / 2.0


def ease_in_back(progress: float) -> float:
    coefficient = _BACK_OVERSHOOT + 1.0
    return coefficient * progress**3 - _BACK_OVERSHOOT * progress**2


def ease_out_back(progress: float) -> float:
    coefficient = _BACK_OVERSHOOT + 1.0
    return (
        1.0
        + coefficient * (progress - 1.0) ** 3
        + _BACK_OVERSHOOT * (progress - 1.0) ** 2
    )


def ease_in_out_back(progress: float) -> float:
    overshoot = _BACK_OVERSHOOT * 1.525
    if progress < 0.5:
        return ((2.0 * progress) ** 2 * ((overshoot + 1.0) * 2.0 * progress - overshoot)) / 2.0
    return (
        (2.0 * progress - 2.0) ** 2
        * ((overshoot + 1.0) * (progress * 2.0 - 2.0) + overshoot)
        + 2.0
    ) / 2.0


def ease_in_elastic(progress: float) -> float:
    if progress == 0.0:
        return 0.0
    if progress == 1.0:
        return 1.0
    period = (2.0 * math.pi) / 3.0
    return -(2.0 ** (10.0 * progress - 10.0)) * math.sin((progress * 10.0 - 10.75) * period)


def ease_out_elastic(progress: float) -> float:
    if progress == 0.0:
        return 0.0
    if progress == 1.0:
        return 1.0
    period = (2.0 * math.pi) / 3.0
    return 2.0 ** (-10.0 * progress) * math.sin((progress * 10.0 - 0.75) * period) + 1.0


def ease_in_out_elastic(progress: float) -> float:
    if progress == 0.0:
        return 0.0
    if progress == 1.0:
        return 1.0
    period = (2.0 * math.pi) / 4.5
    wave = math.sin((20.0 * progress - 11.125) * period)
    if progress < 0.5:
        return -(2.0 ** (20.0 * progress - 10.0) * wave) / 2.0
    return (2.0 ** (-20.0 * progress + 10.0) * wave) / 2.0 + 1.0


def ease_out_bounce(progress: float) -> float:
    if progress < 1.0 / _BOUNCE_DIVISOR:
        return _BOUNCE_COEFF * progress * progress
    if progress < 2.0 / _BOUNCE_DIVISOR:
        shifted = progress - 1.5 / _BOUNCE_DIVISOR
        return _BOUNCE_COEFF * shifted * shifted + 0.75
    if progress < 2.5 / _BOUNCE_DIVISOR:
        shifted = progress - 2.25 / _BOUNCE_DIVISOR
        return _BOUNCE_COEFF * shifted * shifted + 0.9375
    shifted = progress - 2.625 / _BOUNCE_DIVISOR
    return _BOUNCE_COEFF * shifted * shifted + 0.984375


def ease_in_bounce(progress: float) -> float:
    return 1.0 - ease_out_bounce(1.0 - progress)


def ease_in_out_bounce(progress: float) -> float:
    if progress < 0.5:
        return (1.0 - ease_out_bounce(1.0 - 2.0 * progress)) / 2.0
    return (1.0 + ease_out_bounce(2.0 * progress - 1.0)) / 2.0


def _sample_bezier(p1: float, p2: float, t: float) -> float:
    inverse = 1.0 - t
    return 3.0 * inverse * inverse * t * p1 + 3.0 * inverse * t * t * p2 + t * t * t


def _sample_bezier_derivative(p1: float, p2: float, t: float) -> float:
    inverse = 1.0 - t
    return (
        3.0 * inverse * inverse * p1
        + 6.0 * inverse * t * (p2 - p1)
        + 3.0 * t * t * (1.0 - p2)
    )


def cubic_bezier(x1: float, y1: float, x2: float, y2: float) -> EasingFunc:
    """Build an easing curve from the two control points of a cubic bezier."""

    def curve(progress: float) -> float:
        t = progress
        for _ in range(8):
            current = _sample_bezier(x1, x2, t)
            derivative = _sample_bezier_derivative(x1, x2, t)
            if abs(derivative) < 1e-6:
                break
            t -= (current - progress) / derivative
            t = max(0.0, min(1.0, t))
        return _sample_bezier(y1, y2, t)

    return curve


_BY_NAME: dict[str, EasingFunc] = {
    "linear": linear,
    "easeIn": ease_in_quad,
    "ease-in": ease_in_quad,
    "easeOut": ease_out_quad,
    "ease-out": ease_out_quad,
    "easeInOut": ease_in_out_quad,
    "ease-in-out": ease_in_out_quad,
    "easeInCubic": ease_in_cubic,
    "easeOutCubic": ease_out_cubic,
    "easeInOutCubic": ease_in_out_cubic,
    "easeInSine": ease_in_sine,
    "easeOutSine": ease_out_sine,
    "easeInOutSine": ease_in_out_sine,
    "easeInExpo": ease_in_expo,
    "easeOutExpo": ease_out_expo,
    "easeInOutExpo": ease_in_out_expo,
    "easeInCirc": ease_in_circ,
    "easeOutCirc": ease_out_circ,
    "easeInOutCirc": ease_in_out_circ,
    "easeInBack": ease_in_back,
    "easeOutBack": ease_out_back,
    "easeInOutBack": ease_in_out_back,
    "easeInElastic": ease_in_elastic,
    "easeOutElastic": ease_out_elastic,
    "easeInOutElastic": ease_in_out_elastic,
    "easeInBounce": ease_in_bounce,
    "easeOutBounce": ease_out_bounce,
    "easeInOutBounce": ease_in_out_bounce,
}

_AVAILABLE = (
    "linear", "easeIn", "easeOut", "easeInOut",
    "easeInCubic", "easeOutCubic", "easeInOutCubic",
    "easeInSine", "easeOutSine", "easeInOutSine",
    "easeInExpo", "easeOutExpo", "easeInOutExpo",
    "easeInCirc", "easeOutCirc", "easeInOutCirc",
    "easeInBack", "easeOutBack", "easeInOutBack",
    "easeInElastic", "easeOutElastic", "easeInOutElastic",
    "easeInBounce", "easeOutBounce", "easeInOutBounce",
)


def get_by_name(name: str) -> EasingFunc:
    """Look up an easing curve by name; unknown names give ease-in-out quad."""
    return _BY_NAME.get(name, ease_in_out_quad)


def available_names() -> list[str]:
    """Names offered to the user interface, in display order."""
    return list(_AVAILABLE)