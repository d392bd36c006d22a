"""Geometry layer builders.

Every ``geom_*`` function returns an immutable :class:`~gg_toolkit.Layer.Layer`.
Arguments left at ``None`` are omitted from the plot document so the engine
applies its own defaults; any other value, including ``0``, ``False`` and
``""``, is passed through unchanged.

Layer settings shared by all builders
-------------------------------------
mapping : Aes, optional
    Aesthetic mapping created with :func:`~gg_toolkit.aes.aes`.
data : mapping or data frame, optional
    Layer data; inherited from :func:`~gg_toolkit.Plot.ggplot` when omitted.
stat : StatOptions, optional
    Statistical transform; each geometry has its own default.
position : PosOptions, optional
    Position adjustment; each geometry has its own default.
show_legend, inherit_aes, manual_key, sampling, tooltips, orientation :
    See :class:`~gg_toolkit.Layer.Layer`.
color_by, fill_by : str, optional
    Which colour aesthetic (``"color"``, ``"fill"``, ``"paint_a"``,
    ``"paint_b"``, ``"paint_c"``) drives the outline / fill colour.

Each builder documents the order in which its option groups are merged; a
later group wins when two groups define the same option.
"""

from __future__ import annotations

from typing import Any

from .aes import Aes
from .geom_capabilities import (
    BarAesthetics,
    BoxplotAesthetics,
    BoxplotParameters,
    ContourAesthetics,
    LineAesthetics,
    PointAesthetics,
    PointRangeAesthetics,
    PointRangeParameters,
    PolygonAesthetics,
    SmoothAesthetics,
    ViolinAesthetics,
    ViolinParameters,
    WithColorOption,
    WithFillOption,
    WithSpatialParameters,
    normalize_map_join,
)
from .Layer import Layer, check_data, check_mapping
from .Options import OptionsCapsule
from .pos import PosOptions, position_dodge, position_identity, position_stack
from .sampling import SamplingOptions
from .stat_capabilities import (
    BinStatAesthetics,
    BinStatParameters,
    BoxplotStatAesthetics,
    BoxplotStatParameters,
    ContourStatParameters,
    CountStatAesthetics,
    SmoothStatParameters,
    YDensityStatAesthetics,
    YDensityStatParameters,
)
from .stat_options import Stat, StatOptions
from .tooltips import TooltipOptions

Number = int | float


def build_layer(
    caller: str,
    geom: str,
    *,
    mapping: Aes | None,
    data: Any,
    stat: StatOptions,
    position: PosOptions,
    capabilities: tuple[OptionsCapsule, ...],
    show_legend: bool | None = None,
    inherit_aes: bool | None = None,
    manual_key: Any = None,
    sampling: SamplingOptions | None = None,
    tooltips: TooltipOptions | None = None,
    orientation: str | None = None,
) -> Layer:
    """Validate the shared layer settings and assemble a :class:`Layer`."""
    if not isinstance(stat, StatOptions):
        raise TypeError(f"{caller}() stat must be a Stat.* value, got {type(stat).__name__}")
    if not isinstance(position, PosOptions):
        raise TypeError(
            f"{caller}() position must be a position_* value, got {type(position).__name__}"
        )
    if sampling is not None and not isinstance(sampling, SamplingOptions):
        raise TypeError(
            f"{caller}() sampling must be a sampling_* value, got {type(sampling).__name__}"
        )
    if tooltips is not None and not isinstance(tooltips, TooltipOptions):
        raise TypeError(
            f"{caller}() tooltips must come from layer_tooltips(), got {type(tooltips).__name__}"
        )
    return Layer(
        geom=geom,
        stat=stat,
        position=position,
        mapping=check_mapping(mapping, caller=caller),
        capabilities=capabilities,
        data=check_data(data, caller=caller),
        show_legend=show_legend,
        inherit_aes=inherit_aes,
        manual_key=manual_key,
        sampling=sampling,
        tooltips=tooltips,
        orientation=orientation,
    )


def geom_point(
    mapping: Aes | None = None,
    *,
    data: Any = None,
    stat: StatOptions | None = None,
    position: PosOptions | None = None,
    show_legend: bool | None = None,
    inherit_aes: bool | None = None,
    manual_key: Any = None,
    sampling: SamplingOptions | None = None,
    tooltips: TooltipOptions | None = None,
    x: Number | None = None,
    y: Number | None = None,
    alpha: Number | None = None,
    color: Any = None,
    fill: Any = None,
    shape: Any = None,
    size: Number | None = None,
    stroke: Number | None = None,
    color_by: str | None = None,
    fill_by: str | None = None,
) -> Layer:
    """Scatter plot marks.

    Option order: PointAesthetics, WithColorOption, WithFillOption.
    """
    return build_layer(
        "geom_point",
        "point",
        mapping=mapping,
        data=data,
        stat=stat if stat is not None else Stat.identity,
        position=position if position is not None else position_identity,
        capabilities=(
            PointAesthetics(x=x, y=y, alpha=alpha, color=color, fill=fill, shape=shape,
                            size=size, stroke=stroke),
            WithColorOption(color_by=color_by),
            WithFillOption(fill_by=fill_by),
        ),
        show_legend=show_legend,
        inherit_aes=inherit_aes,
        manual_key=manual_key,
        sampling=sampling,
        tooltips=tooltips,
    )


def geom_line(
    mapping: Aes | None = None,
    *,
    data: Any = None,
    stat: StatOptions | None = None,
    position: PosOptions | None = None,
    show_legend: bool | None = None,
    inherit_aes: bool | None = None,
    manual_key: Any = None,
    sampling: SamplingOptions | None = None,
    tooltips: TooltipOptions | None = None,
    x: Number | None = None,
    y: Number | None = None,
    alpha: Number | None = None,
    color: Any = None,
    linetype: Any = None,
    size: Number | None = None,
    color_by: str | None = None,
) -> Layer:
    """Connect observations in order of the x variable.

    Option order: LineAesthetics, WithColorOption.
    """
    return build_layer(
        "geom_line",
        "line",
        mapping=mapping,
        data=data,
        stat=stat if stat is not None else Stat.identity,
        position=position if position is not None else position_identity,
        capabilities=(
            LineAesthetics(x=x, y=y, alpha=alpha, color=color, linetype=linetype, size=size),
            WithColorOption(color_by=color_by),
        ),
        show_legend=show_legend,
        inherit_aes=inherit_aes,
        manual_key=manual_key,
        sampling=sampling,
        tooltips=tooltips,
    )


def geom_bar(
    mapping: Aes | None = None,
    *,
    data: Any = None,
    stat: StatOptions | None = None,
    position: PosOptions | None = None,
    show_legend: bool | None = None,
    inherit_aes: bool | None = None,
    manual_key: Any = None,
    sampling: SamplingOptions | None = None,
    tooltips: TooltipOptions | None = None,
    orientation: str | None = None,
    x: Number | None = None,
    y: Number | None = None,
    alpha: Number | None = None,
    color: Any = None,
    fill: Any = None,
    width: Number | None = None,
    size: Number | None = None,
    linetype: Any = None,
    weight: Number | None = None,
    color_by: str | None = None,
    fill_by: str | None = None,
) -> Layer:
    """Bars whose height is the number of cases in each group.

    Defaults to ``Stat.count()`` and ``position_stack()``.

    Option order: BarAesthetics, CountStatAesthetics, WithColorOption,
    WithFillOption.

    Examples
    --------
    >>> from gg_toolkit import aes
    >>> layer = geom_bar(aes(x="type", fill="cond"), color="dark_green", alpha=0.3)
    >>> layer.seal().to_dict()
    {'mapping': {'x': 'type', 'fill': 'cond'}, 'alpha': 0.3, 'color': 'dark_green'}
    """
    return build_layer(
        "geom_bar",
        "bar",
        mapping=mapping,
        data=data,
        stat=stat if stat is not None else Stat.count(),
        position=position if position is not None else position_stack(),
        capabilities=(
            BarAesthetics(x=x, y=y, alpha=alpha, color=color, fill=fill, width=width,
                          size=size, linetype=linetype),
            CountStatAesthetics(weight=weight),
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


def geom_histogram(
    mapping: Aes | None = None,
    *,
    data: Any = None,
    stat: StatOptions | None = None,
    position: PosOptions | None = None,
    show_legend: bool | None = None,
    inherit_aes: bool | None = None,
    manual_key: Any = None,
    sampling: SamplingOptions | None = None,
    tooltips: TooltipOptions | None = None,
    orientation: str | None = None,
    x: Number | None = None,
    y: Number | None = None,
    alpha: Number | None = None,
    color: Any = None,
    fill: Any = None,
    width: Number | None = None,
    size: Number | None = None,
    linetype: Any = None,
    weight: Number | None = None,
    bins: int | None = None,
    binwidth: Number | None = None,
    center: Number | None = None,
    boundary: Number | None = None,
    color_by: str | None = None,
    fill_by: str | None = None,
) -> Layer:
    """Bin a continuous variable and draw the counts as bars.

    Option order: BarAesthetics, BinStatAesthetics, BinStatParameters,
    WithColorOption, WithFillOption.
    """
    return build_layer(
        "geom_histogram",
        "histogram",
        mapping=mapping,
        data=data,
        stat=stat if stat is not None else Stat.bin(),
        position=position if position is not None else position_stack(),
        capabilities=(
            BarAesthetics(x=x, y=y, alpha=alpha, color=color, fill=fill, width=width,
                          size=size, linetype=linetype),
            BinStatAesthetics(weight=weight),
            BinStatParameters(bins=bins, binwidth=binwidth, center=center, boundary=boundary),
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


def geom_polygon(
    mapping: Aes | None = None,
    *,
    data: Any = None,
    stat: StatOptions | None = None,
    position: PosOptions | None = None,
    show_legend: bool | None = None,
    inherit_aes: bool | None = None,
    manual_key: Any = None,
    sampling: SamplingOptions | None = None,
    tooltips: TooltipOptions | None = None,
    map: Any = None,
    map_join: Any = None,
    use_crs: str | None = None,
    x: Number | None = None,
    y: Number | None = None,
    alpha: Number | None = None,
    color: Any = None,
    fill: Any = None,
    linetype: Any = None,
    size: Number | None = None,
    color_by: str | None = None,
    fill_by: str | None = None,
) -> Layer:
    """Filled closed paths defined by the vertices of individual polygons.

    Parameters
    ----------
    map : mapping, optional
        Shapes to draw (for example region boundaries), optionally joined to
        the layer data.
    map_join : str or pair, optional
        Columns to join ``data`` and ``map`` on: a single name used on both
        sides, or ``(data_columns, map_columns)`` where each side is a name
        or a list of names of equal length.
    use_crs : str, optional
        ``"provided"`` keeps the map's own coordinate reference system.

    Raises
    ------
    ValueError
        If ``map_join`` is not a pair or its two sides differ in length.

    Notes
    -----
    Option order: PolygonAesthetics, WithSpatialParameters, WithColorOption,
    WithFillOption.
    """
    return build_layer(
        "geom_polygon",
        "polygon",
        mapping=mapping,
        data=data,
        stat=stat if stat is not None else Stat.identity,
        position=position if position is not None else position_identity,
        capabilities=(
            PolygonAesthetics(x=x, y=y, alpha=alpha, color=color, fill=fill,
                              linetype=linetype, size=size),
            WithSpatialParameters(
                map=check_data(map, caller="geom_polygon"),
                map_join=normalize_map_join(map_join, caller="geom_polygon"),
                use_crs=use_crs,
            ),
            WithColorOption(color_by=color_by),
            WithFillOption(fill_by=fill_by),
        ),
        show_legend=show_legend,
        inherit_aes=inherit_aes,
        manual_key=manual_key,
        sampling=sampling,
        tooltips=tooltips,
    )


def geom_violin(
    mapping: Aes | None = None,
    *,
    data: Any = None,
    stat: StatOptions | None = None,
    position: PosOptions | None = None,
    show_legend: bool | None = None,
    inherit_aes: bool | None = None,
    manual_key: Any = None,
    sampling: SamplingOptions | None = None,
    tooltips: TooltipOptions | None = None,
    orientation: str | None = None,
    x: Number | None = None,
    y: Number | None = None,
    violin_width: Number | None = None,
    alpha: Number | None = None,
    color: Any = None,
    fill: Any = None,
    linetype: Any = None,
    size: Number | None = None,
    width: Number | None = None,
    weight: Number | None = None,
    scale: str | None = None,
    tails_cutoff: Number | None = None,
    bw: str | Number | None = None,
    kernel: str | None = None,
    n: int | None = None,
    trim: bool | None = None,
    adjust: Number | None = None,
    full_scan_max: int | None = None,
    quantiles: list[Number] | None = None,
    quantile_lines: bool | None = None,
    show_half: Number | None = None,
    color_by: str | None = None,
    fill_by: str | None = None,
) -> Layer:
    """Mirrored density plot with boxplot-like grouping.

    Defaults to ``Stat.ydensity()`` and ``position_dodge()``.

    Computed variables available to mappings: ``..violinwidth..``,
    ``..density..``, ``..count..``, ``..scaled..`` and ``..quantile..``.

    Parameters
    ----------
    violin_width : float, optional
        Density scaled for the violin (emitted as ``violinwidth``).
    width : float, optional
        Width of the violin bounding box.
    weight : float, optional
        Weight used by the density estimate.
    scale : {"area", "count", "width"}, optional
        ``"area"``: all violins have the same area; ``"count"``: areas scale
        with the number of observations; ``"width"``: same maximum width.
    tails_cutoff : float, optional
        Extends each violin by ``tails_cutoff * bw`` when ``trim=False``.
    bw : str or float, optional
        Bandwidth rule (``"nrd0"``, ``"nrd"``) or value.
    kernel : str, optional
        ``"gaussian"``, ``"cosine"``, ``"optcosine"``, ``"rectangular"``,
        ``"triangular"``, ``"biweight"`` or ``"epanechikov"``.
    n : int, optional
        Number of sampled points of the density function.
    trim : bool, optional
        Trim the tails to the range of the data.
    adjust : float, optional
        Bandwidth multiplier.
    full_scan_max : int, optional
        Above this many points a faster, less accurate estimate is used.
    quantiles : list of float, optional
        Quantiles of the density estimate to compute.
    quantile_lines : bool, optional
        Draw lines at ``quantiles``.
    show_half : {-1, 0, 1}, optional
        Draw the left half, the full violin, or the right half.

    Notes
    -----
    Option order: ViolinAesthetics, ViolinParameters, YDensityStatAesthetics,
    YDensityStatParameters, WithColorOption, WithFillOption.
    """
    return build_layer(
        "geom_violin",
        "violin",
        mapping=mapping,
        data=data,
        stat=stat if stat is not None else Stat.ydensity(),
        position=position if position is not None else position_dodge(),
        capabilities=(
            ViolinAesthetics(x=x, y=y, violin_width=violin_width, alpha=alpha, color=color,
                             fill=fill, linetype=linetype, size=size, width=width),
            ViolinParameters(quantile_lines=quantile_lines, show_half=show_half),
            YDensityStatAesthetics(weight=weight),
            YDensityStatParameters(scale=scale, tails_cutoff=tails_cutoff, bw=bw, kernel=kernel,
                                   n=n, trim=trim, adjust=adjust, full_scan_max=full_scan_max,
                                   quantiles=quantiles),
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


def geom_boxplot(
    mapping: Aes | None = None,
    *,
    data: Any = None,
    stat: StatOptions | None = None,
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
    whisker_width: Number | None = None,
    var_width: bool | None = None,
    coef: Number | None = None,
    color_by: str | None = None,
    fill_by: str | None = None,
) -> Layer:
    """Box and whiskers summary of a continuous variable.

    ``coef`` sets the whisker length as a multiple of the IQR; ``var_width``
    makes box widths proportional to the square root of the group size.

    Option order: BoxplotAesthetics, BoxplotParameters, BoxplotStatAesthetics,
    BoxplotStatParameters, WithColorOption, WithFillOption.
    """
    return build_layer(
        "geom_boxplot",
        "boxplot",
        mapping=mapping,
        data=data,
        stat=stat if stat is not None else Stat.boxplot(),
        position=position if position is not None else position_dodge(),
        capabilities=(
            BoxplotAesthetics(x=x, y=y, lower=lower, middle=middle, upper=upper, ymin=ymin,
                              ymax=ymax, alpha=alpha, color=color, fill=fill, size=size,
                              linetype=linetype, shape=shape, width=width),
            BoxplotParameters(outlier_color=outlier_color, outlier_fill=outlier_fill,
                              outlier_shape=outlier_shape, outlier_size=outlier_size,
                              fatten=fatten, whisker_width=whisker_width),
            BoxplotStatAesthetics(weight=weight),
            BoxplotStatParameters(var_width=var_width, coef=coef),
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


def geom_pointrange(
    mapping: Aes | None = None,
    *,
    data: Any = None,
    stat: StatOptions | None = None,
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
    alpha: Number | None = None,
    color: Any = None,
    fill: Any = None,
    linetype: Any = None,
    shape: Any = None,
    size: Number | None = None,
    stroke: Number | None = None,
    linewidth: Number | None = None,
    fatten: Number | None = None,
    color_by: str | None = None,
    fill_by: str | None = None,
) -> Layer:
    """Vertical interval through a point.

    Option order: PointRangeAesthetics, PointRangeParameters, WithColorOption,
    WithFillOption.
    """
    return build_layer(
        "geom_pointrange",
        "pointrange",
        mapping=mapping,
        data=data,
        stat=stat if stat is not None else Stat.identity,
        position=position if position is not None else position_identity,
        capabilities=(
            PointRangeAesthetics(x=x, y=y, ymin=ymin, ymax=ymax, alpha=alpha, color=color,
                                 fill=fill, linetype=linetype, shape=shape, size=size,
                                 stroke=stroke, linewidth=linewidth),
            PointRangeParameters(fatten=fatten),
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


def geom_smooth(
    mapping: Aes | None = None,
    *,
    data: Any = None,
    stat: StatOptions | None = None,
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
    """Smoothed conditional mean with an optional confidence band.

    Option order: SmoothAesthetics, SmoothStatParameters, WithColorOption,
    WithFillOption.
    """
    return build_layer(
        "geom_smooth",
        "smooth",
        mapping=mapping,
        data=data,
        stat=stat if stat is not None else Stat.smooth(),
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


def geom_contour(
    mapping: Aes | None = None,
    *,
    data: Any = None,
    stat: StatOptions | None = None,
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
    """Contour lines of a 3d surface given on a regular x/y grid.

    Option order: ContourAesthetics, ContourStatParameters, WithColorOption.
    """
    return build_layer(
        "geom_contour",
        "contour",
        mapping=mapping,
        data=data,
        stat=stat if stat is not None else Stat.contour(),
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


__all__ = [
    "build_layer",
    "geom_bar",
    "geom_boxplot",
    "geom_contour",
    "geom_histogram",
    "geom_line",
    "geom_point",
    "geom_pointrange",
    "geom_polygon",
    "geom_smooth",
    "geom_violin",
]
