"""Shape, block and blend based transition effects.

Like the basic effects, these draw onto an RGBA :class:`PIL.Image.Image`
canvas whose size is the output size.
"""

from __future__ import annotations

import math
from typing import Optional

from PIL import Image, ImageDraw

from .effects import Rect, TransitionEffect, TransitionParams

_RAMP_LENGTH = 2048
_DISSOLVE_MULTIPLIER = 2654435761


def _as_rgba(image: Image.Image) -> Image.Image:
    return image if image.mode == "RGBA" else image.convert("RGBA")


class ExpandingCircleEffect(TransitionEffect):
    """The target is revealed inside a circle growing from an origin point."""

    def __init__(self, origin_x: float = 0.5, origin_y: float = 0.5) -> None:
        self.origin_x = origin_x
        self.origin_y = origin_y

    @property
    def name(self) -> str:
        return "Expanding Circle"

    def render(
        self,
        canvas: Image.Image,
        source: Image.Image,
        target: Image.Image,
        progress: float,
        params: Optional[TransitionParams] = None,
    ) -> None:
        width, height = self._prepare(canvas)
        self._paint(canvas, source)

        cx = width * self.origin_x
        cy = height * self.origin_y
        max_radius = math.sqrt(
            max(
                cx**2 + cy**2,
                (width - cx) ** 2 + cy**2,
                cx**2 + (height - cy) ** 2,
                (width - cx) ** 2 + (height - cy) ** 2,
            )
        )
        radius = max_radius * progress

        mask = Image.new("L", canvas.size, 0)
        if radius > 0:
            ImageDraw.Draw(mask).ellipse(
                [cx - radius, cy - radius, cx + radius, cy + radius], fill=255
            )
        self._paint(canvas, target, mask=mask)


class ExpandingSquareEffect(TransitionEffect):
    """The target is revealed inside a (optionally rounded) growing square."""

    def __init__(
        self,
        origin_x: float = 0.5,
        origin_y: float = 0.5,
        corner_radius: float = 0.0,
    ) -> None:
        self.origin_x = origin_x
        self.origin_y = origin_y
        self.corner_radius = corner_radius

    @property
    def name(self) -> str:
        return "Expanding Square"

    def render(
        self,
        canvas: Image.Image,
        source: Image.Image,
        target: Image.Image,
        progress: float,
        params: Optional[TransitionParams] = None,
    ) -> None:
        width, height = self._prepare(canvas)
        self._paint(canvas, source)

        cx = width * self.origin_x
        cy = height * self.origin_y
        max_half = max(cx, width - cx, cy, height - cy) * 1.5
        half = max_half * progress
        corner = self.corner_radius * progress

        x = cx - half
        y = cy - half
        side = half * 2
        if side <= 0:
            mask = Image.new("L", canvas.size, 0)
        elif corner > 0:
            mask = Image.new("L", canvas.size, 0)
            ImageDraw.Draw(mask).rounded_rectangle(
                [x, y, x + side, y + side],
                radius=round(min(corner, half)),
                fill=255,
            )
        else:
            mask = self._rect_mask(canvas.size, [(x, y, side, side)])
        self._paint(canvas, target, mask=mask)


class DissolveEffect(TransitionEffect):
    """Blocks of the target appear in a fixed scattered order."""

    def __init__(self, block_size: int = 8) -> None:
        self.block_size = block_size

    @property
    def block_size(self) -> int:
        return self._block_size

    @block_size.setter
    def block_size(self, size: int) -> None:
        self._block_size = max(2, int(size))

    @property
    def name(self) -> str:
        return "Dissolve"

    def render(
        self,
        canvas: Image.Image,
        source: Image.Image,
        target: Image.Image,
        progress: float,
        params: Optional[TransitionParams] = None,
    ) -> None:
        width, height = self._prepare(canvas)
        self._paint(canvas, source)

        size = self._block_size
        blocks_x = (width + size - 1) // size
        blocks_y = (height + size - 1) // size
        total = blocks_x * blocks_y
        if total == 0:
            return
        reveal = int(total * progress)

        rects: list[Rect] = []
        for by in range(blocks_y):
            for bx in range(blocks_x):
                index = by * blocks_x + bx
                order = ((index * _DISSOLVE_MULTIPLIER) & 0xFFFFFFFF) % total
                if order < reveal:
                    x = bx * size
                    y = by * size
                    rects.append((x, y, min(size, width - x), min(size, height - y)))
        self._paint(canvas, target, mask=self._rect_mask(canvas.size, rects))


class ZoomEffect(TransitionEffect):
    """Zoom into the source while it fades, then zoom out of the target."""

    def __init__(self, zoom_factor: float = 1.5) -> None:
        self.zoom_factor = zoom_factor

    @property
    def name(self) -> str:
        return "Zoom"

    def render(
        self,
        canvas: Image.Image,
        source: Image.Image,
        target: Image.Image,
        progress: float,
        params: Optional[TransitionParams] = None,
    ) -> None:
        width, height = self._prepare(canvas)
        midpoint = 0.5
        cx = width / 2.0
        cy = height / 2.0

        if progress < midpoint:
            step = progress / midpoint
            scale = 1.0 + (self.zoom_factor - 1.0) * step
            alpha = 1.0 - step
            image = source
        else:
            step = (progress - midpoint) / (1.0 - midpoint)
            scale = self.zoom_factor - (self.zoom_factor - 1.0) * step
            alpha = step
            image = target

        if scale == 0:
            return
        inverse = 1.0 / scale
        scaled = _as_rgba(image).transform(
            canvas.size,
            Image.Transform.AFFINE,
            (inverse, 0.0, cx - cx * inverse, 0.0, inverse, cy - cy * inverse),
            resample=Image.Resampling.BILINEAR,
        )
        self._paint(canvas, scaled, alpha=alpha)


class MorphEffect(TransitionEffect):
    """Fade the source out while the target fades in."""

    @property
    def name(self) -> str:
        return "Morph"

    def render(
        self,
        canvas: Image.Image,
        source: Image.Image,
        target: Image.Image,
        progress: float,
        params: Optional[TransitionParams] = None,
    ) -> None:
        self._prepare(canvas)
        self._paint(canvas, source, alpha=1.0 - progress)
        self._paint(canvas, target, alpha=progress)


class AngledWipeEffect(TransitionEffect):
    """A wipe along an arbitrary angle, with a hard or gradient edge."""

    def __init__(
        self,
        angle_degrees: float = 0.0,
        soft_edge: bool = False,
        edge_width: float = 50.0,
    ) -> None:
        self.angle_degrees = angle_degrees
        self.soft_edge = soft_edge
        self.edge_width = edge_width

    @property
    def name(self) -> str:
        return "Angled Wipe"

    def render(
        self,
        canvas: Image.Image,
        source: Image.Image,
        target: Image.Image,
        progress: float,
        params: Optional[TransitionParams] = None,
    ) -> None:
        width, height = self._prepare(canvas)
        self._paint(canvas, source)

        angle = math.radians(self.angle_degrees)
        cos_a = math.cos(angle)
        sin_a = math.sin(angle)
        diagonal = math.sqrt(width * width + height * height)
        if diagonal == 0:
            return
        wipe = progress * (diagonal + self.edge_width) - self.edge_width / 2

        if self.soft_edge and self.edge_width > 0:
            mask = self._gradient_mask(canvas.size, cos_a, sin_a, diagonal, wipe)
        else:
            mask = self._hard_mask(canvas.size, cos_a, sin_a, diagonal, wipe)
        self._paint(canvas, target, mask=mask)

    def _gradient_mask(
        self,
        size: tuple[int, int],
        cos_a: float,
        sin_a: float,
        diagonal: float,
        wipe: float,
    ) -> Image.Image:
        width, height = size
        start = min(1.0, max(0.0, (wipe - self.edge_width / 2) / diagonal))
        end = min(1.0, max(0.0, (wipe + self.edge_width / 2) / diagonal))

        def alpha_at(t: float) -> int:
            if end <= start:
                return 0 if t < start else 255
            if t <= start:
                return 0
            if t >= end:
                return 255
            return round(255 * (t - start) / (end - start))

        # The ramp spans t in [-0.5, 1.5] so every canvas pixel lands inside it.
        ramp = Image.new("L", (_RAMP_LENGTH, 1))
        ramp.putdata(
            [alpha_at((i + 0.5) / _RAMP_LENGTH * 2.0 - 0.5) for i in range(_RAMP_LENGTH)]
        )
        base = cos_a * width / 2.0 + sin_a * height / 2.0 - diagonal
        scale = _RAMP_LENGTH / (4.0 * diagonal)
        return ramp.transform(
            size,
            Image.Transform.AFFINE,
            (
                cos_a * scale,
                sin_a * scale,
                (-base / (2.0 * diagonal) + 0.5) * _RAMP_LENGTH / 2.0,
                0.0,
                0.0,
                0.5,
            ),
            resample=Image.Resampling.NEAREST,
        )

    @staticmethod
    def _hard_mask(
        size: tuple[int, int],
        cos_a: float,
        sin_a: float,
        diagonal: float,
        wipe: float,
    ) -> Image.Image:
        width, height = size
        perp_x, perp_y = -sin_a, cos_a
        line_x = width / 2.0 + cos_a * (wipe - diagonal / 2)
        line_y = height / 2.0 + sin_a * (wipe - diagonal / 2)
        extend = diagonal * 2
        points = [
            (line_x + perp_x * extend, line_y + perp_y * extend),
            (line_x - perp_x * extend, line_y - perp_y * extend),
            (
                line_x - perp_x * extend + cos_a * extend,
                line_y - perp_y * extend + sin_a * extend,
            ),
            (
                line_x + perp_x * extend + cos_a * extend,
                line_y + perp_y * extend + sin_a * extend,
            ),
        ]
        mask = Image.new("L", size, 0)
        ImageDraw.Draw(mask).polygon(points, fill=255)
        return mask


class PixelateEffect(TransitionEffect):
    """Pixelate the source away, then sharpen the target into view."""

    def __init__(self, max_block_size: int = 64) -> None:
        self.max_block_size = max_block_size

    @property
    def max_block_size(self) -> int:
        return self._max_block_size

    @max_block_size.setter
    def max_block_size(self, size: int) -> None:
        self._max_block_size = max(4, int(size))

    @property
    def name(self) -> str:
        return "Pixelate"

    def render(
        self,
        canvas: Image.Image,
        source: Image.Image,
        target: Image.Image,
        progress: float,
        params: Optional[TransitionParams] = None,
    ) -> None:
        width, height = self._prepare(canvas)
        midpoint = 0.5
        if progress < midpoint:
            image = source
            amount = progress / midpoint
        else:
            image = target
            amount = 1.0 - (progress - midpoint) / (1.0 - midpoint)

        block = 1 + int((self._max_block_size - 1) * amount)
        picture = _as_rgba(image)
        image_width, image_height = picture.size
        if block <= 1 or image_width <= 0 or image_height <= 0:
            self._paint(canvas, picture)
            return

        pixels = picture.load()
        draw = ImageDraw.Draw(canvas)
        for by in range(0, height, block):
            for bx in range(0, width, block):
                sx = min(bx + block // 2, image_width - 1)
                sy = min(by + block // 2, image_height - 1)
                r, g, b, a = pixels[sx, sy]
                # Colour is taken premultiplied and drawn opaque.
                color = (r * a // 255, g * a // 255, b * a // 255, 255)
                block_w = min(block, width - bx)
                block_h = min(block, height - by)
                draw.rectangle([bx, by, bx + block_w - 1, by + block_h - 1], fill=color)


class BlindsEffect(TransitionEffect):
    """Strips of the target open like window blinds."""

    def __init__(self, blind_count: int = 10, vertical: bool = False) -> None:
        self.blind_count = blind_count
        self.vertical = vertical

    @property
    def blind_count(self) -> int:
        return self._blind_count

    @blind_count.setter
    def blind_count(self, count: int) -> None:
        self._blind_count = max(2, int(count))

    @property
    def name(self) -> str:
        return "Blinds"

    def render(
        self,
        canvas: Image.Image,
        source: Image.Image,
        target: Image.Image,
        progress: float,
        params: Optional[TransitionParams] = None,
    ) -> None:
        width, height = self._prepare(canvas)
        self._paint(canvas, source)

        count = self._blind_count
        blind = (width if self.vertical else height) / count
        reveal = blind * progress
        if self.vertical:
            rects: list[Rect] = [(i * blind, 0.0, reveal, height) for i in range(count)]
        else:
            rects = [(0.0, i * blind, width, reveal) for i in range(count)]
        self._paint(canvas, target, mask=self._rect_mask(canvas.size, rects))