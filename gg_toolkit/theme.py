"""Themes: the non-data look of a plot.

``theme(...)`` sets individual elements and merges into whatever theme the
plot already has (later values win). Named themes such as
:func:`theme_minimal` are complete: adding one replaces the current theme.
"""

from __future__ import annotations

from typing import Any

from .feature import FeatureSpec
from .Options import Options


def element_blank() -> dict[str, Any]:
    """Hide the element entirely."""
    return {"blank": True}


def element_line(
    color: Any = None,
    size: float | None = None,
    linetype: Any = None,
    blank: bool = False,
) -> dict[str, Any]:
    return Options.of(color=color, size=size, linetype=linetype, blank=blank or None).to_dict()


def element_rect(
    fill: Any = None,
    color: Any = None,
    size: float | None = None,
    linetype: Any = None,
    blank: bool = False,
) -> dict[str, Any]:
    return Options.of(
        fill=fill, color=color, size=size, linetype=linetype, blank=blank or None
    ).to_dict()


def element_text(
    color: Any = None,
    family: str | None = None,
    face: str | None = None,
    size: float | None = None,
    angle: float | None = None,
    hjust: float | None = None,
    vjust: float | None = None,
    margin: Any = None,
    blank: bool = False,
) -> dict[str, Any]:
    """Text element.

    ``face`` is ``"plain"``, ``"italic"``, ``"bold"`` or ``"bold_italic"``;
    ``margin`` is a number or a list of 1-4 numbers (top, right, bottom,
    left).
    """
    return Options.of(
        color=color,
        family=family,
        face=face,
        size=size,
        angle=angle,
        hjust=hjust,
        vjust=vjust,
        margin=margin,
        blank=blank or None,
    ).to_dict()


def theme(**elements: Any) -> FeatureSpec:
    """Set theme elements by name.

    Examples
    --------
    >>> theme(legend_position="bottom", axis_title_y=element_blank()).as_dict()
    {'legend_position': 'bottom', 'axis_title_y': {'blank': True}}
    """
    return FeatureSpec("theme", Options(elements))


def _named(name: str) -> FeatureSpec:
    return FeatureSpec("theme", Options.of(name=name), complete=True)


def theme_grey() -> FeatureSpec:
    """Grey background and white grid lines."""
    return _named("grey")


def theme_bw() -> FeatureSpec:
    return _named("bw")


def theme_minimal() -> FeatureSpec:
    """No background annotations."""
    return _named("minimal")


def theme_classic() -> FeatureSpec:
    return _named("classic")


def theme_light() -> FeatureSpec:
    return _named("light")


def theme_none() -> FeatureSpec:
    """Basic settings only; no styling beyond the engine defaults."""
    return _named("none")


def theme_void() -> FeatureSpec:
    """Completely empty theme: no axes, grid or background."""
    return _named("void")


__all__ = [
    "element_blank",
    "element_line",
    "element_rect",
    "element_text",
    "theme",
    "theme_bw",
    "theme_classic",
    "theme_grey",
    "theme_light",
    "theme_minimal",
    "theme_none",
    "theme_void",
]
