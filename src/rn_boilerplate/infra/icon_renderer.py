"""Pillow-backed icon and splash-logo rendering.

Pillow is an optional dependency.  Availability is probed up front with
:func:`importlib.util.find_spec` so that the ``icons`` command can fail
with an actionable :class:`OptionalDependencyMissingError` before any
file is written.
"""

from __future__ import annotations

import importlib.util
import io
from pathlib import Path
from typing import Any

from rn_boilerplate.core.models import AssetTarget, IconColors
from rn_boilerplate.exceptions import (
    IconGenerationError,
    InvalidColorError,
    OptionalDependencyMissingError,
)

PILLOW_INSTALL_HINT: str = "Install it with: pip install 'rn-boilerplate[icons]'"

TEXT_COLOR: str = "#FFFFFF"


def pillow_available() -> bool:
    """Return ``True`` when the ``PIL`` package can be imported."""
    return importlib.util.find_spec("PIL") is not None


def require_pillow() -> None:
    """Raise :class:`OptionalDependencyMissingError` when Pillow is absent."""
    if not pillow_available():
        raise OptionalDependencyMissingError(
            "Pillow is not installed; it is required for icon generation.",
            hint=PILLOW_INSTALL_HINT,
        )


class PillowIconRenderer:
    """Draws the placeholder launcher icon and splash logo as PNG bytes.

    Usage::

        renderer = PillowIconRenderer(colors)
        png = renderer.render_icon(192)
    """

    def __init__(self, colors: IconColors) -> None:
        require_pillow()
        from PIL import Image, ImageColor, ImageDraw, ImageFont

        self._image: Any = Image
        self._draw: Any = ImageDraw
        self._font: Any = ImageFont
        self.primary = self._parse_color(ImageColor, colors.primary, "--primary")
        self.background = self._parse_color(ImageColor, colors.background, "--background")

    @staticmethod
    def _parse_color(image_color: Any, value: str, option: str) -> tuple[int, ...]:
        try:
            return tuple(image_color.getcolor(value, "RGBA"))
        except ValueError as exc:
            raise InvalidColorError(
                f"Invalid color for {option}: {value!r}",
                hint="Use a CSS color such as '#1976D2' or 'white'.",
            ) from exc

    # ------------------------------------------------------------------
    # Drawing
    # ------------------------------------------------------------------

    def _load_font(self, px: float) -> Any:
        return self._font.load_default(size=max(1, round(px)))

    def _draw_badge(
        self,
        size: int,
        *,
        background: tuple[int, ...] | None,
        radius_ratio: float,
        label: str,
        label_ratio: float,
    ) -> bytes:
        fill = background if background is not None else (0, 0, 0, 0)
        image = self._image.new("RGBA", (size, size), fill)
        draw = self._draw.Draw(image)

        center = size / 2
        radius = size * radius_ratio
        draw.ellipse(
            (center - radius, center - radius, center + radius, center + radius),
            fill=self.primary,
        )
        draw.text(
            (center, center),
            label,
            fill=TEXT_COLOR,
            font=self._load_font(size * label_ratio),
            anchor="mm",
        )

        buffer = io.BytesIO()
        image.save(buffer, format="PNG")
        return buffer.getvalue()

    def render_icon(self, size: int) -> bytes:
        """Background square, primary circle, "App" label."""
        return self._draw_badge(
            size,
            background=self.background,
            radius_ratio=0.3,
            label="App",
            label_ratio=0.15,
        )

    def render_splash_logo(self, size: int) -> bytes:
        """Transparent canvas, primary circle, "Logo" label."""
        return self._draw_badge(
            size,
            background=None,
            radius_ratio=0.4,
            label="Logo",
            label_ratio=0.2,
        )

    def render(self, target: AssetTarget) -> bytes:
        if target.kind == "splash":
            return self.render_splash_logo(target.size)
        return self.render_icon(target.size)


def write_assets(renderer: PillowIconRenderer, targets: list[AssetTarget]) -> list[Path]:
    """Render every target to disk, creating parent directories.

    Sizes shared by several targets are rendered once.
    """
    cache: dict[tuple[str, int], bytes] = {}
    written: list[Path] = []
    for target in targets:
        key = (target.kind, target.size)
        if key not in cache:
            cache[key] = renderer.render(target)
        try:
            target.path.parent.mkdir(parents=True, exist_ok=True)
            target.path.write_bytes(cache[key])
        except OSError as exc:
            raise IconGenerationError(f"Failed to write {target.path}: {exc}") from exc
        written.append(target.path)
    return written
