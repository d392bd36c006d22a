"""Coordinate systems. A plot has at most one; adding another replaces it."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from .feature import FeatureSpec, check_pair
from .Options import Options


def _coord(name: str, caller: str, *, xlim: Any, ylim: Any, **options: Any) -> FeatureSpec:
    return FeatureSpec(
        "coord",
        Options.of(
            name=name,
            xlim=check_pair(xlim, caller=caller, name="xlim"),
            ylim=check_pair(ylim, caller=caller, name="ylim"),
            **options,
        ),
    )


def coord_cartesian(
    xlim: Sequence[float | None] | None = None,
    ylim: Sequence[float | None] | None = None,
    expand: bool | None = None,
) -> FeatureSpec:
    """Cartesian coordinates; limits zoom in without dropping data.

    Raises
    ------
    ValueError
        If ``xlim`` or ``ylim`` is not a ``(min, max)`` pair.
    """
    return _coord("cartesian", "coord_cartesian", xlim=xlim, ylim=ylim, expand=expand)


def coord_fixed(
    ratio: float | None = None,
    xlim: Sequence[float | None] | None = None,
    ylim: Sequence[float | None] | None = None,
    expand: bool | None = None,
) -> FeatureSpec:
    """Cartesian coordinates with a fixed y/x aspect ``ratio``."""
    return _coord("fixed", "coord_fixed", xlim=xlim, ylim=ylim, ratio=ratio, expand=expand)


def coord_flip(
    xlim: Sequence[float | None] | None = None,
    ylim: Sequence[float | None] | None = None,
    expand: bool | None = None,
) -> FeatureSpec:
    """Swap the x and y axes."""
    return _coord("flip", "coord_flip", xlim=xlim, ylim=ylim, expand=expand)


def coord_polar(
    xlim: Sequence[float | None] | None = None,
    ylim: Sequence[float | None] | None = None,
    theta: str | None = None,
    start: float | None = None,
    direction: int | None = None,
    transform_bkgr: bool | None = None,
) -> FeatureSpec:
    """Polar coordinates.

    ``theta`` names the variable mapped to the angle (``"x"`` or ``"y"``),
    ``start`` is the offset in radians and ``direction`` is ``1`` for
    clockwise, ``-1`` for anticlockwise.
    """
    return _coord("polar", "coord_polar", xlim=xlim, ylim=ylim, theta=theta, start=start,
                  direction=direction, transform_bkgr=transform_bkgr)


__all__ = ["coord_cartesian", "coord_fixed", "coord_flip", "coord_polar"]
