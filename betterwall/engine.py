"""Drives a transition effect over time with an easing curve."""

from __future__ import annotations

import time
from datetime import timedelta
from typing import Callable, Optional

from PIL import Image

from . import logger
from .easing import EasingFunc, ease_in_out_quad, get_by_name
from .effects import TransitionEffect, TransitionParams

FinishCallback = Callable[[], None]


def _paint(canvas: Image.Image, image: Image.Image, alpha: float = 1.0) -> None:
    layer = Image.new("RGBA", canvas.size, (0, 0, 0, 0))
    layer.paste(image if image.mode == "RGBA" else image.convert("RGBA"), (0, 0))
    alpha = min(1.0, max(0.0, alpha))
    if alpha < 1.0:
        layer.putalpha(layer.getchannel("A").point(lambda value: round(value * alpha)))
    canvas.alpha_composite(layer)


class TransitionEngine:
    """Tracks one running transition and renders its frames.

    ``clock`` returns a monotonic time in seconds.
    """

    def __init__(self, clock: Optional[Callable[[], float]] = None) -> None:
        self._clock = clock or time.monotonic
        self._active = False
        self._source: Optional[Image.Image] = None
        self._target: Optional[Image.Image] = None
        self._preloaded: Optional[Image.Image] = None
        self._effect: Optional[TransitionEffect] = None
        self._start_time = self._clock()
        self._duration_ms = 500
        self._easing: EasingFunc = ease_in_out_quad
        self._callback: Optional[FinishCallback] = None
        self._progress = 0.0
        self._eased = 0.0
        self.target_fps = 60

    def start(
        self,
        source: Optional[Image.Image],
        target: Optional[Image.Image],
        effect: Optional[TransitionEffect],
        duration_ms: int,
        easing_name: str = "easeInOut",
        callback: Optional[FinishCallback] = None,
    ) -> None:
        """Start a transition using a named easing curve."""
        self.start_with_easing(
            source, target, effect, duration_ms, get_by_name(easing_name), callback
        )

    def start_with_easing(
        self,
        source: Optional[Image.Image],
        target: Optional[Image.Image],
        effect: Optional[TransitionEffect],
        duration_ms: int,
        easing: Optional[EasingFunc] = None,
        callback: Optional[FinishCallback] = None,
    ) -> None:
        """Start a transition; a missing target falls back to the preloaded image."""
        self.stop()
        if target is None and self._preloaded is not None:
            target, self._preloaded = self._preloaded, None
        self._source = source
        self._target = target
        self._effect = effect
        self._duration_ms = max(1, int(duration_ms))
        self._easing = easing or ease_in_out_quad
        self._callback = callback
        self._start_time = self._clock()
        self._progress = 0.0
        self._eased = 0.0
        self._active = True
        logger.debug(f"Transition started: duration={duration_ms}ms")

    def preload(self, surface: Optional[Image.Image]) -> None:
        """Keep ``surface`` as the target of the next transition started without one."""
        self.clear_preload()
        if surface is not None:
            self._preloaded = surface
            logger.debug("Preloaded next wallpaper surface for transition")

    def clear_preload(self) -> None:
        self._preloaded = None

    def stop(self) -> None:
        """Abandon the running transition without calling its callback."""
        self._active = False
        self._source = None
        self._target = None
        self._progress = 0.0
        self._eased = 0.0

    def _update(self) -> None:
        if not self._active:
            return
        elapsed_ms = int((self._clock() - self._start_time) * 1000)
        self._progress = min(1.0, elapsed_ms / self._duration_ms)
        self._eased = self._easing(self._progress)

    def render(
        self, canvas: Image.Image, params: Optional[TransitionParams] = None
    ) -> bool:
        """Draw the current frame; False once the transition has finished."""
        if not self._active:
            return False
        params = params or TransitionParams()
        self._update()
        source, target, effect = self._source, self._target, self._effect

        if self._progress >= 1.0:
            if effect is not None and source is not None and target is not None:
                effect.render(canvas, source, target, 1.0, params)
            elif target is not None:
                _paint(canvas, target)
            callback = self._callback
            self.stop()
            if callback is not None:
                callback()
            return False

        if effect is not None and source is not None and target is not None:
            effect.render(canvas, source, target, self._eased, params)
        elif source is not None and target is None:
            _paint(canvas, source)
        elif target is not None and source is None:
            _paint(canvas, target, self._eased)
        return True

    def is_active(self) -> bool:
        return self._active

    def progress(self) -> float:
        """Linear progress from 0 to 1."""
        self._update()
        return self._progress

    def eased_progress(self) -> float:
        """Progress after the easing curve."""
        self._update()
        return self._eased

    def frame_interval(self) -> timedelta:
        """Time between frames at ``target_fps``."""
        return timedelta(milliseconds=1000 // self.target_fps)