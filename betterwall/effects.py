"""Transition effects that blend one wallpaper image into another.

Effects draw onto an RGBA :class:`PIL.Image.Image` canvas whose size is the
output size.  The source and target wallpapers are drawn at the canvas
origin unless an effect moves them.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Optional

from PIL import Image, ImageChops, ImageDraw

Rect = tuple[float, float, float, float]


class Direction(Enum):
    LEFT = "left"
    RIGHT = "right"
    UP = "up"
    DOWN = "down"


@dataclass
class TransitionParams:
    direction: Direction = Direction.LEFT


class TransitionEffect(ABC):
    """Base class of all transitions."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable effect name."""

    @abstractmethod
    def render(
        self,
        canvas: Image.Image,
        source: Image.Image,
        target: Image.Image,
        progress: float,
        params: Optional[TransitionParams] = None,
    ) -> None:
        """Draw the frame at ``progress`` (0 to 1) onto ``canvas``."""

    @staticmethod
    def _prepare(canvas: Image.Image) -> tuple[int, int]:
        if canvas.mode != "RGBA":
            raise ValueError(f"canvas must be RGBA, not {canvas.mode}")
        return canvas.size

    @staticmethod
    def _paint(
        canvas: Image.Image,
        image: Image.Image,
        offset: tuple[float, float] = (0.0, 0.0),
        alpha: float = 1.0,
        mask: Optional[Image.Image] = None,
    ) -> None:
        """Composite ``image`` over ``canvas`` at ``offset``, faded and clipped."""
        layer = Image.new("RGBA", canvas.size, (0, 0, 0, 0))
        picture = image if image.mode == "RGBA" else image.convert("RGBA")
        layer.paste(picture, (round(offset[0]), round(offset[1])))
        alpha = min(1.0, max(0.0, alpha))
        if alpha < 1.0 or mask is not None:
            channel = layer.getchannel("A")
            if alpha < 1.0:
                channel = channel.point(lambda value: round(value * alpha))
            if mask is not None:
                channel = ImageChops.multiply(channel, mask)
            layer.putalpha(channel)
        canvas.alpha_composite(layer)

    @staticmethod
    def _rect_mask(size: tuple[int, int], rects: Iterable[Rect]) -> Image.Image:
        """An "L" mask that is opaque inside the union of ``(x, y, w, h)`` rects."""
        width, height = size
        mask = Image.new("L", size, 0)
        draw = ImageDraw.Draw(mask)
        for x, y, w, h in rects:
            x0, x1 = sorted((round(x), round(x + w)))
            y0, y1 = sorted((round(y), round(y + h)))
            x0, y0 = max(x0, 0), max(y0, 0)
            x1, y1 = min(x1, width), min(y1, height)
            if x1 > x0 and y1 > y0:
                draw.rectangle([x0, y0, x1 - 1, y1 - 1], fill=255)
        return mask


class FadeEffect(TransitionEffect):
    """Cross-fade: the target is drawn over the source with rising opacity."""

    @property
    def name(self) -> str:
        return "Fade"

    def render(self, canvas, source, target, progress, params=None):
        self._prepare(canvas)
        progress = min(1.0, max(0.0, progress))
        self._paint(canvas, source)
        self._paint(canvas, target, alpha=progress)


class SlideEffect(TransitionEffect):
    """Push: the target slides in and pushes the source out."""

    @property
    def name(self) -> str:
        return "Slide"

    def render(self, canvas, source, target, progress, params=None):
        width, height = self._prepare(canvas)
        direction = (params or TransitionParams()).direction
        remaining = 1.0 - progress
        if direction is Direction.LEFT:
            from_offset, to_offset = (-width * progress, 0.0), (width * remaining, 0.0)
        elif direction is Direction.RIGHT:
            from_offset, to_offset = (width * progress, 0.0), (-width * remaining, 0.0)
        elif direction is Direction.UP:
            from_offset, to_offset = (0.0, -height * progress), (0.0, height * remaining)
        else:
            from_offset, to_offset = (0.0, height * progress), (0.0, -height * remaining)
        canvas.paste((0, 0, 0, 255), (0, 0, width, height))
        self._paint(canvas, source, from_offset)
        self._paint(canvas, target, to_offset)


class WipeEffect(TransitionEffect):
    """Reveal the target behind a moving edge."""

    @property
    def name(self) -> str:
        return "Wipe"

    def render(self, canvas, source, target, progress, params=None):
        width, height = self._prepare(canvas)
        direction = (params or TransitionParams()).direction
        self._paint(canvas, source)
        rects: list[Rect] = [(0.0, 0.0, width * progress, height)]
        if direction is Direction.LEFT:
            rects.append((width * (1.0 - progress), 0.0, width, height))
        self._paint(canvas, target, mask=self._rect_mask(canvas.size, rects))