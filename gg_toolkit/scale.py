"""Scales: how data values map to positions, colours and legends.

Each helper returns a ``FeatureSpec`` of kind ``"scale"``; every scale added
to a plot is kept, in order, in the document's ``scales`` list.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from .feature import FeatureSpec, check_pair
from .Options import Options


def scale(aesthetic: str, **options: Any) -> FeatureSpec:
    """Generic scale for ``aesthetic``; unset options are dropped."""
    if not isinstance(aesthetic, str) or not aesthetic:
        raise ValueError(f"scale() aesthetic must be a non-empty str, got {aesthetic!r}")
    return FeatureSpec("scale", Options.of(aesthetic=aesthetic, **options))


def _continuous(
    aesthetic: str,
    caller: str,
    *,
    name: str | None,
    breaks: Sequence[Any] | None,
    labels: Sequence[str] | None,
    limits: Sequence[Any] | None,
    expand: Sequence[float] | None,
    na_value: Any,
    trans: str | None,
    format: str | None,
    position: str | None,
) -> FeatureSpec:
    return scale(
        aesthetic,
        name=name,
        breaks=breaks,
        labels=labels,
        limits=check_pair(limits, caller=caller, name="limits"),
        expand=expand,
        na_value=na_value,
        trans=trans,
        format=format,
        position=position,
    )


def scale_x_continuous(
    name: str | None = None,
    breaks: Sequence[Any] | None = None,
    labels: Sequence[str] | None = None,
    limits: Sequence[Any] | None = None,
    expand: Sequence[float] | None = None,
    na_value: Any = None,
    trans: str | None = None,
    format: str | None = None,
    position: str | None = None,
) -> FeatureSpec:
    """Continuous x position scale.

    Parameters
    ----------
    name : str, optional
        Axis title.
    breaks, labels : sequence, optional
        Tick positions and their labels.
    limits : (min, max), optional
        Data range shown; ``None`` at either end is left to the engine.
    expand : sequence of float, optional
        ``[multiplicative, additive]`` padding around the data.
    trans : str, optional
        ``"identity"``, ``"log10"``, ``"sqrt"`` or ``"reverse"``.
    format : str, optional
        Tick label format pattern, e.g. ``".2f"``.

    Raises
    ------
    ValueError
        If ``limits`` is not a pair.
    """
    return _continuous("x", "scale_x_continuous", name=name, breaks=breaks, labels=labels,
                       limits=limits, expand=expand, na_value=na_value, trans=trans,
                       format=format, position=position)


def scale_y_continuous(
    name: str | None = None,
    breaks: Sequence[Any] | None = None,
    labels: Sequence[str] | None = None,
    limits: Sequence[Any] | None = None,
    expand: Sequence[float] | None = None,
    na_value: Any = None,
    trans: str | None = None,
    format: str | None = None,
    position: str | None = None,
) -> FeatureSpec:
    """Continuous y position scale; see :func:`scale_x_continuous`."""
    return _continuous("y", "scale_y_continuous", name=name, breaks=breaks, labels=labels,
                       limits=limits, expand=expand, na_value=na_value, trans=trans,
                       format=format, position=position)


def scale_x_log10(name: str | None = None, **options: Any) -> FeatureSpec:
    return scale_x_continuous(name=name, trans="log10", **options)


def scale_y_log10(name: str | None = None, **options: Any) -> FeatureSpec:
    return scale_y_continuous(name=name, trans="log10", **options)


def scale_x_discrete(
    name: str | None = None,
    breaks: Sequence[Any] | None = None,
    labels: Sequence[str] | None = None,
    limits: Sequence[Any] | None = None,
    expand: Sequence[float] | None = None,
    na_value: Any = None,
    reverse: bool | None = None,
    format: str | None = None,
) -> FeatureSpec:
    """Discrete x position scale; ``limits`` lists the categories in order."""
    return scale("x", name=name, breaks=breaks, labels=labels, limits=limits, expand=expand,
                 na_value=na_value, reverse=reverse, format=format, discrete=True)


def scale_y_discrete(
    name: str | None = None,
    breaks: Sequence[Any] | None = None,
    labels: Sequence[str] | None = None,
    limits: Sequence[Any] | None = None,
    expand: Sequence[float] | None = None,
    na_value: Any = None,
    reverse: bool | None = None,
    format: str | None = None,
) -> FeatureSpec:
    return scale("y", name=name, breaks=breaks, labels=labels, limits=limits, expand=expand,
                 na_value=na_value, reverse=reverse, format=format, discrete=True)


def _manual(aesthetic: str, caller: str, values: Any, **options: Any) -> FeatureSpec:
    if values is None or isinstance(values, str):
        raise TypeError(f"{caller}() values must be a list or mapping of colours")
    return scale(aesthetic, values=values, **options)


def scale_color_manual(
    values: Sequence[Any] | dict[str, Any],
    name: str | None = None,
    breaks: Sequence[Any] | None = None,
    labels: Sequence[str] | None = None,
    limits: Sequence[Any] | None = None,
    na_value: Any = None,
    guide: Any = None,
) -> FeatureSpec:
    """Map discrete values to the given colours."""
    return _manual("color", "scale_color_manual", values, name=name, breaks=breaks,
                   labels=labels, limits=limits, na_value=na_value, guide=guide)


def scale_fill_manual(
    values: Sequence[Any] | dict[str, Any],
    name: str | None = None,
    breaks: Sequence[Any] | None = None,
    labels: Sequence[str] | None = None,
    limits: Sequence[Any] | None = None,
    na_value: Any = None,
    guide: Any = None,
) -> FeatureSpec:
    return _manual("fill", "scale_fill_manual", values, name=name, breaks=breaks,
                   labels=labels, limits=limits, na_value=na_value, guide=guide)


def scale_color_gradient(
    low: str | None = None,
    high: str | None = None,
    name: str | None = None,
    breaks: Sequence[Any] | None = None,
    labels: Sequence[str] | None = None,
    limits: Sequence[Any] | None = None,
    na_value: Any = None,
    guide: Any = None,
    trans: str | None = None,
    format: str | None = None,
) -> FeatureSpec:
    """Two-colour gradient between ``low`` and ``high``."""
    return scale("color", name=name, breaks=breaks, labels=labels,
                 limits=check_pair(limits, caller="scale_color_gradient", name="limits"),
                 na_value=na_value, guide=guide, trans=trans, format=format,
                 low=low, high=high, scale_mapper_kind="color_gradient")


def scale_fill_gradient(
    low: str | None = None,
    high: str | None = None,
    name: str | None = None,
    breaks: Sequence[Any] | None = None,
    labels: Sequence[str] | None = None,
    limits: Sequence[Any] | None = None,
    na_value: Any = None,
    guide: Any = None,
    trans: str | None = None,
    format: str | None = None,
) -> FeatureSpec:
    return scale("fill", name=name, breaks=breaks, labels=labels,
                 limits=check_pair(limits, caller="scale_fill_gradient", name="limits"),
                 na_value=na_value, guide=guide, trans=trans, format=format,
                 low=low, high=high, scale_mapper_kind="color_gradient")


def xlim(limits: Sequence[Any]) -> FeatureSpec:
    """Set the x scale limits (a pair for continuous data, categories otherwise)."""
    return scale("x", limits=list(limits))


def ylim(limits: Sequence[Any]) -> FeatureSpec:
    return scale("y", limits=list(limits))


__all__ = [
    "scale",
    "scale_color_gradient",
    "scale_color_manual",
    "scale_fill_gradient",
    "scale_fill_manual",
    "scale_x_continuous",
    "scale_x_discrete",
    "scale_x_log10",
    "scale_y_continuous",
    "scale_y_discrete",
    "scale_y_log10",
    "xlim",
    "ylim",
]
