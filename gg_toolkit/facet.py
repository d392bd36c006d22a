"""Faceting: split a plot into panels by one or more discrete variables."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from .feature import FeatureSpec
from .Options import Options


def facet_grid(
    x: str | None = None,
    y: str | None = None,
    scales: str | None = None,
    x_order: int | None = None,
    y_order: int | None = None,
    x_format: str | None = None,
    y_format: str | None = None,
    x_labwidth: int | None = None,
    y_labwidth: int | None = None,
) -> FeatureSpec:
    """Lay panels out in a grid of ``x`` columns and ``y`` rows.

    Parameters
    ----------
    x, y : str, optional
        Variables defining the columns and rows.
    scales : {"fixed", "free", "free_x", "free_y"}, optional
        Whether panels share axis ranges.
    x_order, y_order : {1, -1, 0}, optional
        Ascending, descending or data order of the facet values.
    x_format, y_format : str, optional
        Label format patterns.
    x_labwidth, y_labwidth : int, optional
        Wrap labels longer than this many characters.
    """
    if x is None and y is None:
        raise ValueError("facet_grid() needs at least one of x= or y=")
    return FeatureSpec(
        "facet",
        Options.of(
            name="grid",
            x=x,
            y=y,
            scales=scales,
            x_order=x_order,
            y_order=y_order,
            x_format=x_format,
            y_format=y_format,
            x_labwidth=x_labwidth,
            y_labwidth=y_labwidth,
        ),
    )


def facet_wrap(
    facets: str | Sequence[str],
    ncol: int | None = None,
    nrow: int | None = None,
    order: Any = None,
    format: Any = None,
    dir: str | None = None,
    scales: str | None = None,
    labwidth: Any = None,
) -> FeatureSpec:
    """Wrap a one-dimensional sequence of panels into rows.

    ``dir`` is ``"h"`` (fill rows first) or ``"v"`` (fill columns first).
    """
    if isinstance(facets, str):
        facets_value: Any = facets
    elif isinstance(facets, Sequence) and facets and all(isinstance(f, str) for f in facets):
        facets_value = list(facets)
    else:
        raise TypeError("facet_wrap() facets must be a variable name or a non-empty list of names")
    return FeatureSpec(
        "facet",
        Options.of(
            name="wrap",
            facets=facets_value,
            ncol=ncol,
            nrow=nrow,
            order=order,
            format=format,
            dir=dir,
            scales=scales,
            labwidth=labwidth,
        ),
    )


__all__ = ["facet_grid", "facet_wrap"]
