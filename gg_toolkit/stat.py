"""Statistic-first layer builders.

These are the ``stat_*`` counterparts of the geometry builders: the
statistical transform is fixed and the geometry used to draw its output can
be chosen with ``geom=``.
"""

from __future__ import annotations

from typing import Any

from .aes import Aes
from .geom import build_layer
from .geom_capabilities import (
    BoxplotAesthetics,
    BoxplotParameters,
    ContourAesthetics,
    SmoothAesthetics,
    WithColorOption,
    WithFillOption,
)
from .Layer import Layer
from .pos import PosOptions, position_dodge, position_identity
from .sampling import SamplingOptions
from .stat_capabilities import (
    BoxplotStatAesthetics,
    BoxplotStatParameters,
    ContourStatParameters,
    SmoothStatParameters,
)
from .stat_options import Stat
from .tooltips import TooltipOptions

Number = int | float


def stat_smooth(
    mapping: Aes | None = None,
    *,
    data: Any = None,
    geom: str = "smooth",
    position: PosOptions | None = None,
    show_legend: bool | None = None,
    inherit_aes: bool | None = None,
    manual_key: Any = None,
    sampling: SamplingOptions | None = None,
    tooltips: TooltipOptions | None = None,
    orientation: str | None = None,
    x: Number | None = None,
    y: Number | None = None,
    ymin: Number | None = None,
    ymax: Number | None = None,
    size: Number | None = None,
    linetype: Any = None,
    color: Any = None,
    fill: Any = None,
    alpha: Number | None = None,
    method: str | None = None,
    n: int | None = None,
    level: Number | None = None,
    se: bool | None = None,
    span: Number | None = None,
    deg: int | None = None,
    seed: int | None = None,
    max_n: int | None = None,
    color_by: str | None = None,
    fill_by: str | None = None,
) -> Layer:
    """Add a smoothed conditional mean.

    Parameters
    ----------
    geom : str, default="smooth"
        Geometry used to draw the fitted values.
    method : {"lm", "loess"}, optional
        Smoothing method; ``"lm"`` is a linear model, ``"loess"`` local
        regression.
    n : int, optional
        Number of points to evaluate the smoother at.
    level : float, optional
        Confidence level of the band.
    se : bool, optional
        Show the confidence band.
    span : float, optional
        Amount of smoothing for ``"loess"``.
    deg : int, optional
        Degree of the polynomial for ``"lm"``.
    seed, max_n : int, optional
        ``"loess"`` works on a random sample of at most ``max_n`` points
        drawn with ``seed``.

    Notes
    -----
    Option order: SmoothAesthetics, SmoothStatParameters, WithColorOption,
    WithFillOption.
    """
    return build_layer(
        "stat_smooth",
        geom,
        mapping=mapping,
        data=data,
        stat=Stat.smooth(),
        position=position if position is not None else position_identity,
        capabilities=(
            SmoothAesthetics(x=x, y=y, ymin=ymin, ymax=ymax, size=size, linetype=linetype,
                             color=color, fill=fill, alpha=alpha),
            SmoothStatParameters(method=method, n=n, level=level, se=se, span=span, deg=deg,
                                 seed=seed, max_n=max_n),
            WithColorOption(color_by=color_by),
            WithFillOption(fill_by=fill_by),
        ),
        show_legend=show_legend,
        inherit_aes=inherit_aes,
        manual_key=manual_key,
        sampling=sampling,
        tooltips=tooltips,
        orientation=orientation,
    )


def stat_boxplot(
    mapping: Aes | None = None,
    *,
    data: Any = None,
    geom: str = "boxplot",
    position: PosOptions | None = None,
    show_legend: bool | None = None,
    inherit_aes: bool | None = None,
    manual_key: Any = None,
    sampling: SamplingOptions | None = None,
    tooltips: TooltipOptions | None = None,
    orientation: str | None = None,
    x: Number | None = None,
    y: Number | None = None,
    lower: Number | None = None,
    middle: Number | None = None,
    upper: Number | None = None,
    ymin: Number | None = None,
    ymax: Number | None = None,
    alpha: Number | None = None,
    color: Any = None,
    fill: Any = None,
    size: Number | None = None,
    linetype: Any = None,
    shape: Any = None,
    width: Number | None = None,
    weight: Number | None = None,
    outlier_color: Any = None,
    outlier_fill: Any = None,
    outlier_shape: Any = None,
    outlier_size: Number | None = None,
    fatten: Number | None = None,
    var_width: bool | None = None,
    coef: Number | None = None,
) -> Layer:
    """Compute box-and-whiskers statistics.

    Option order: BoxplotAesthetics, BoxplotParameters, BoxplotStatAesthetics,
    BoxplotStatParameters.
    """
    return build_layer(
        "stat_boxplot",
        geom,
        mapping=mapping,
        data=data,
        stat=Stat.boxplot(),
        position=position if position is not None else position_dodge(),
        capabilities=(
            BoxplotAesthetics(x=x, y=y, lower=lower, middle=middle, upper=upper, ymin=ymin,
                              ymax=ymax, alpha=alpha, color=color, fill=fill, size=size,
                              linetype=linetype, shape=shape, width=width),
            BoxplotParameters(outlier_color=outlier_color, outlier_fill=outlier_fill,
                              outlier_shape=outlier_shape, outlier_size=outlier_size,
                              fatten=fatten),
            BoxplotStatAesthetics(weight=weight),
            BoxplotStatParameters(var_width=var_width, coef=coef),
        ),
        show_legend=show_legend,
        inherit_aes=inherit_aes,
        manual_key=manual_key,
        sampling=sampling,
        tooltips=tooltips,
        orientation=orientation,
    )


def stat_contour(
    mapping: Aes | None = None,
    *,
    data: Any = None,
    geom: str = "contour",
    position: PosOptions | None = None,
    show_legend: bool | None = None,
    inherit_aes: bool | None = None,
    manual_key: Any = None,
    sampling: SamplingOptions | None = None,
    tooltips: TooltipOptions | None = None,
    x: Number | None = None,
    y: Number | None = None,
    z: Number | None = None,
    alpha: Number | None = None,
    color: Any = None,
    linetype: Any = None,
    size: Number | None = None,
    bins: int | None = None,
    binwidth: Number | None = None,
    color_by: str | None = None,
) -> Layer:
    """Compute contour lines; ``bins`` or ``binwidth`` pick the levels.

    Option order: ContourAesthetics, ContourStatParameters, WithColorOption.
    """
    return build_layer(
        "stat_contour",
        geom,
        mapping=mapping,
        data=data,
        stat=Stat.contour(),
        position=position if position is not None else position_identity,
        capabilities=(
            ContourAesthetics(x=x, y=y, z=z, alpha=alpha, color=color, linetype=linetype,
                              size=size),
            ContourStatParameters(bins=bins, binwidth=binwidth),
            WithColorOption(color_by=color_by),
        ),
        show_legend=show_legend,
        inherit_aes=inherit_aes,
        manual_key=manual_key,
        sampling=sampling,
        tooltips=tooltips,
    )


__all__ = ["stat_boxplot", "stat_contour", "stat_smooth"]
