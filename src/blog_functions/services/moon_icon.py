"""SVG icons for moon phases.

Shapes are drawn on a unit disk centred at the origin, lit limb on the
right for waxing phases, then scaled into a ``size`` x ``size`` box. Waning
phases are the waxing shapes mirrored across the vertical axis.
"""

from blog_functions.domain.moon import MoonIcon, MoonPhase, Point, format_number

# ("M", x, y) | ("L", x, y) | ("A", rx, ry, sweep, x, y) | ("Z",)
Segment = tuple
Shape = tuple[tuple[Segment, ...], tuple[Point, ...]]

# Terminator semi-axis, as a fraction of the radius.
CRESCENT_TERMINATOR = 0.5
GIBBOUS_TERMINATOR = 0.5

_DISK: Shape = (
    (
        ("M", -1.0, 0.0),
        ("A", 1.0, 1.0, 1, 1.0, 0.0),
        ("A", 1.0, 1.0, 1, -1.0, 0.0),
        ("Z",),
    ),
    ((-1.0, 0.0), (0.0, -1.0), (1.0, 0.0), (0.0, 1.0)),
)

_WAXING_CRESCENT: Shape = (
    (
        ("M", 0.0, -1.0),
        ("A", 1.0, 1.0, 1, 0.0, 1.0),
        ("A", CRESCENT_TERMINATOR, 1.0, 0, 0.0, -1.0),
        ("Z",),
    ),
    ((0.0, -1.0), (1.0, 0.0), (0.0, 1.0), (CRESCENT_TERMINATOR, 0.0)),
)

_FIRST_QUARTER: Shape = (
    (
        ("M", 0.0, -1.0),
        ("A", 1.0, 1.0, 1, 0.0, 1.0),
        ("L", 0.0, -1.0),
        ("Z",),
    ),
    ((0.0, -1.0), (1.0, 0.0), (0.0, 1.0)),
)

_WAXING_GIBBOUS: Shape = (
    (
        ("M", 0.0, -1.0),
        ("A", 1.0, 1.0, 1, 0.0, 1.0),
        ("A", GIBBOUS_TERMINATOR, 1.0, 1, 0.0, -1.0),
        ("Z",),
    ),
    ((0.0, -1.0), (1.0, 0.0), (0.0, 1.0), (-GIBBOUS_TERMINATOR, 0.0)),
)


def _mirror(shape: Shape) -> Shape:
    """Reflect a shape across the vertical axis."""
    segments, points = shape
    mirrored = []
    for segment in segments:
        kind = segment[0]
        if kind in {"M", "L"}:
            mirrored.append((kind, -segment[1], segment[2]))
        elif kind == "A":
            _, rx, ry, sweep, x, y = segment
            mirrored.append(("A", rx, ry, 1 - sweep, -x, y))
        else:
            mirrored.append(segment)
    return tuple(mirrored), tuple((-x, y) for x, y in points)


_LIT_SHAPES: dict[MoonPhase, Shape | None] = {
    MoonPhase.NEW_MOON: None,
    MoonPhase.WAXING_CRESCENT: _WAXING_CRESCENT,
    MoonPhase.FIRST_QUARTER: _FIRST_QUARTER,
    MoonPhase.WAXING_GIBBOUS: _WAXING_GIBBOUS,
    MoonPhase.FULL_MOON: _DISK,
    MoonPhase.WANING_GIBBOUS: _mirror(_WAXING_GIBBOUS),
    MoonPhase.LAST_QUARTER: _mirror(_FIRST_QUARTER),
    MoonPhase.WANING_CRESCENT: _mirror(_WAXING_CRESCENT),
}


def moon_phase_icon(
    phase: MoonPhase,
    size: float = 24,
    color: str = "currentColor",
    stroke_width: float = 1.0,
) -> MoonIcon:
    """Build the icon for a phase, fitted inside a ``size`` x ``size`` box."""
    if size <= 2 * stroke_width:
        raise ValueError(f"Icon size must exceed twice the stroke width, got {size}")
    centre = size / 2
    radius = centre - stroke_width

    def place(point: Point) -> Point:
        return centre + radius * point[0], centre + radius * point[1]

    def render(segments: tuple[Segment, ...]) -> str:
        commands = []
        for segment in segments:
            kind = segment[0]
            if kind in {"M", "L"}:
                x, y = place((segment[1], segment[2]))
                commands.append(f"{kind}{format_number(x)} {format_number(y)}")
            elif kind == "A":
                _, rx, ry, sweep, px, py = segment
                x, y = place((px, py))
                commands.append(
                    f"A{format_number(rx * radius)} {format_number(ry * radius)} "
                    f"0 0 {sweep} {format_number(x)} {format_number(y)}"
                )
            else:
                commands.append("Z")
        return " ".join(commands)

    disk_segments, disk_points = _DISK
    lit_shape = _LIT_SHAPES[MoonPhase(phase)]
    lit = ""
    lit_points: tuple[Point, ...] = ()
    if lit_shape is not None:
        lit = render(lit_shape[0])
        lit_points = tuple(place(point) for point in lit_shape[1])

    return MoonIcon(
        phase=MoonPhase(phase),
        size=size,
        color=color,
        outline=render(disk_segments),
        lit=lit,
        outline_points=tuple(place(point) for point in disk_points),
        lit_points=lit_points,
        stroke_width=stroke_width,
    )
