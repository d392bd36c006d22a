"""Geometry-side option capsules.

Each capsule lists the constant aesthetics or drawing parameters one
geometry understands. Field names follow the engine's option names; the few
that differ are renamed through ``option_keys``.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any, ClassVar

from .Options import OptionsCapsule

Number = int | float


# -----------------------------
# Shared options
# -----------------------------


@dataclass(frozen=True)
class WithColorOption(OptionsCapsule):
    """``color_by``: which colour aesthetic drives the outline colour."""

    color_by: str | None = None


@dataclass(frozen=True)
class WithFillOption(OptionsCapsule):
    """``fill_by``: which colour aesthetic drives the fill colour."""

    fill_by: str | None = None


@dataclass(frozen=True)
class WithSpatialParameters(OptionsCapsule):
    """Map data joined to the layer data for polygon-like geometries.

    ``map_join`` is stored in its canonical ``[[data...], [map...]]`` form;
    use :func:`normalize_map_join` to build it.
    """

    map: Any = None
    map_join: list[list[str]] | None = None
    use_crs: str | None = None


def normalize_map_join(value: Any, *, caller: str) -> list[list[str]] | None:
    """Return ``map_join`` as ``[[data columns], [map columns]]``.

    Accepted forms: a single column name (joined to the same name), or a pair
    ``(data_side, map_side)`` where each side is a name or a sequence of
    names. Both sides must name the same number of columns.

    Raises
    ------
    ValueError
        If the pair has the wrong arity or the two sides differ in length.
    TypeError
        If a column name is not a string.
    """
    if value is None:
        return None
    if isinstance(value, str):
        return [[value], [value]]
    if isinstance(value, Mapping) or not isinstance(value, Sequence):
        raise TypeError(
            f"{caller}() map_join must be a column name or a (data, map) pair, "
            f"got {type(value).__name__}"
        )
    if len(value) != 2:
        raise ValueError(
            f"{caller}() map_join must be a pair (data_columns, map_columns), "
            f"got {len(value)} element(s)"
        )
    data_side = _column_list(value[0], caller=caller)
    map_side = _column_list(value[1], caller=caller)
    if len(data_side) != len(map_side):
        raise ValueError(
            f"{caller}() map_join sides differ in length: "
            f"{len(data_side)} data column(s) vs {len(map_side)} map column(s)"
        )
    if not data_side:
        raise ValueError(f"{caller}() map_join must name at least one column")
    return [data_side, map_side]


def _column_list(side: Any, *, caller: str) -> list[str]:
    if isinstance(side, str):
        return [side]
    if isinstance(side, Sequence) and all(isinstance(c, str) for c in side):
        return list(side)
    raise TypeError(f"{caller}() map_join columns must be str or a sequence of str, got {side!r}")


# -----------------------------
# Per-geometry aesthetics
# -----------------------------


@dataclass(frozen=True)
class PointAesthetics(OptionsCapsule):
    x: Number | None = None
    y: Number | None = None
    alpha: Number | None = None
    color: Any = None
    fill: Any = None
    shape: Any = None
    size: Number | None = None
    stroke: Number | None = None


@dataclass(frozen=True)
class LineAesthetics(OptionsCapsule):
    x: Number | None = None
    y: Number | None = None
    alpha: Number | None = None
    color: Any = None
    linetype: Any = None
    size: Number | None = None


@dataclass(frozen=True)
class BarAesthetics(OptionsCapsule):
    x: Number | None = None
    y: Number | None = None
    alpha: Number | None = None
    color: Any = None
    fill: Any = None
    width: Number | None = None
    size: Number | None = None
    linetype: Any = None


@dataclass(frozen=True)
class PolygonAesthetics(OptionsCapsule):
    x: Number | None = None
    y: Number | None = None
    alpha: Number | None = None
    color: Any = None
    fill: Any = None
    linetype: Any = None
    size: Number | None = None


@dataclass(frozen=True)
class ViolinAesthetics(OptionsCapsule):
    option_keys: ClassVar[Mapping[str, str]] = {"violin_width": "violinwidth"}

    x: Number | None = None
    y: Number | None = None
    violin_width: Number | None = None
    alpha: Number | None = None
    color: Any = None
    fill: Any = None
    linetype: Any = None
    size: Number | None = None
    width: Number | None = None


@dataclass(frozen=True)
class ViolinParameters(OptionsCapsule):
    """Drawing options of the violin geometry.

    ``show_half``: ``-1`` draws the left half, ``1`` the right half and ``0``
    the full violin.
    """

    quantile_lines: bool | None = None
    show_half: Number | None = None


@dataclass(frozen=True)
class BoxplotAesthetics(OptionsCapsule):
    x: Number | None = None
    y: Number | None = None
    lower: Number | None = None
    middle: Number | None = None
    upper: Number | None = None
    ymin: Number | None = None
    ymax: Number | None = None
    alpha: Number | None = None
    color: Any = None
    fill: Any = None
    size: Number | None = None
    linetype: Any = None
    shape: Any = None
    width: Number | None = None


@dataclass(frozen=True)
class BoxplotParameters(OptionsCapsule):
    outlier_color: Any = None
    outlier_fill: Any = None
    outlier_shape: Any = None
    outlier_size: Number | None = None
    fatten: Number | None = None
    whisker_width: Number | None = None


@dataclass(frozen=True)
class PointRangeAesthetics(OptionsCapsule):
    x: Number | None = None
    y: Number | None = None
    ymin: Number | None = None
    ymax: Number | None = None
    alpha: Number | None = None
    color: Any = None
    fill: Any = None
    linetype: Any = None
    shape: Any = None
    size: Number | None = None
    stroke: Number | None = None
    linewidth: Number | None = None


@dataclass(frozen=True)
class PointRangeParameters(OptionsCapsule):
    fatten: Number | None = None


@dataclass(frozen=True)
class SmoothAesthetics(OptionsCapsule):
    x: Number | None = None
    y: Number | None = None
    ymin: Number | None = None
    ymax: Number | None = None
    size: Number | None = None
    linetype: Any = None
    color: Any = None
    fill: Any = None
    alpha: Number | None = None


@dataclass(frozen=True)
class ContourAesthetics(OptionsCapsule):
    x: Number | None = None
    y: Number | None = None
    z: Number | None = None
    alpha: Number | None = None
    color: Any = None
    linetype: Any = None
    size: Number | None = None


__all__ = [
    "BarAesthetics",
    "BoxplotAesthetics",
    "BoxplotParameters",
    "ContourAesthetics",
    "LineAesthetics",
    "PointAesthetics",
    "PointRangeAesthetics",
    "PointRangeParameters",
    "PolygonAesthetics",
    "SmoothAesthetics",
    "ViolinAesthetics",
    "ViolinParameters",
    "WithColorOption",
    "WithFillOption",
    "WithSpatialParameters",
    "normalize_map_join",
]
