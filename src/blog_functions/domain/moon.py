"""Moon phase domain models."""

from dataclasses import dataclass
from enum import Enum

Point = tuple[float, float]


class MoonPhase(str, Enum):
    """The eight named lunar phases, in cyclical order."""

    NEW_MOON = "New Moon"
    WAXING_CRESCENT = "Waxing Crescent"
    FIRST_QUARTER = "First Quarter"
    WAXING_GIBBOUS = "Waxing Gibbous"
    FULL_MOON = "Full Moon"
    WANING_GIBBOUS = "Waning Gibbous"
    LAST_QUARTER = "Last Quarter"
    WANING_CRESCENT = "Waning Crescent"


@dataclass(frozen=True)
class MoonIcon:
    """Vector description of a moon phase icon.

    ``outline`` traces the whole disk and ``lit`` the illuminated region,
    which is empty for a new moon. The point tuples hold every coordinate
    each path reaches, arc extremes included.
    """

    phase: MoonPhase
    size: float
    color: str
    outline: str
    lit: str
    outline_points: tuple[Point, ...]
    lit_points: tuple[Point, ...]
    stroke_width: float = 1.0

    def bounding_box(self) -> tuple[float, float, float, float]:
        """Return (min_x, min_y, max_x, max_y) including the stroke."""
        min_x, min_y, max_x, max_y = _bounds(self.outline_points + self.lit_points)
        half = self.stroke_width / 2
        return min_x - half, min_y - half, max_x + half, max_y + half

    def lit_bounding_box(self) -> tuple[float, float, float, float] | None:
        """Return the bounds of the lit region, or None for a new moon."""
        if not self.lit_points:
            return None
        return _bounds(self.lit_points)

    def to_svg(self) -> str:
        """Render the icon as an inline SVG fragment."""
        size = format_number(self.size)
        parts = [
            f'<svg xmlns="http://www.w3.org/2000/svg" width="{size}" '
            f'height="{size}" viewBox="0 0 {size} {size}" role="img" '
            f'aria-label="{self.phase.value}">',
            f"<title>{self.phase.value}</title>",
            f'<path d="{self.outline}" fill="none" stroke="{self.color}" '
            f'stroke-width="{format_number(self.stroke_width)}"/>',
        ]
        if self.lit:
            parts.append(f'<path d="{self.lit}" fill="{self.color}"/>')
        parts.append("</svg>")
        return "".join(parts)


def format_number(value: float) -> str:
    """Format a coordinate compactly for SVG output."""
    text = f"{value:.2f}".rstrip("0").rstrip(".")
    return "0" if text == "-0" else text


def _bounds(points: tuple[Point, ...]) -> tuple[float, float, float, float]:
    xs = [x for x, _ in points]
    ys = [y for _, y in points]
    return min(xs), min(ys), max(xs), max(ys)
