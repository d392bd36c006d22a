"""Titles, axis labels and plot size."""

from __future__ import annotations

from typing import Any

from .feature import FeatureList, FeatureSpec, feature_list
from .Options import Options
from .scale import scale


def ggtitle(label: str, subtitle: str | None = None) -> FeatureSpec:
    return FeatureSpec("ggtitle", Options.of(text=label, subtitle=subtitle))


def labs(
    title: str | None = None,
    subtitle: str | None = None,
    caption: str | None = None,
    **aesthetics: str,
) -> FeatureList:
    """Change the plot title, caption and per-aesthetic legend/axis titles.

    Each aesthetic label becomes a scale carrying only a ``name``, so it
    combines with other scales for the same aesthetic in the engine.

    Examples
    --------
    >>> [f.kind for f in labs(title="Cars", x="weight")]
    ['ggtitle', 'scale']
    """
    items: list[Any] = []
    if title is not None or subtitle is not None:
        items.append(FeatureSpec("ggtitle", Options.of(text=title, subtitle=subtitle)))
    if caption is not None:
        items.append(FeatureSpec("caption", Options.of(text=caption)))
    for aesthetic, name in aesthetics.items():
        if name is not None:
            items.append(scale(aesthetic, name=name))
    return feature_list(items)


def xlab(label: str) -> FeatureSpec:
    return scale("x", name=label)


def ylab(label: str) -> FeatureSpec:
    return scale("y", name=label)


def ggsize(width: int, height: int) -> FeatureSpec:
    """Set the plot size in pixels.

    Raises
    ------
    ValueError
        If ``width`` or ``height`` is not a positive number.
    """
    for name, value in (("width", width), ("height", height)):
        if isinstance(value, bool) or not isinstance(value, (int, float)) or value <= 0:
            raise ValueError(f"ggsize() {name} must be a positive number, got {value!r}")
    return FeatureSpec("ggsize", Options.of(width=width, height=height))


__all__ = ["ggsize", "ggtitle", "labs", "xlab", "ylab"]
