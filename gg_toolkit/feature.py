"""Plot-level features added to a plot with ``+``.

A ``FeatureSpec`` is any non-layer building block of the plot document
(scale, theme, coordinate system, facet, title, size). Its ``kind`` tells
:class:`~gg_toolkit.Plot.Plot` where the feature goes; see
:meth:`Plot.__add__ <gg_toolkit.Plot.Plot.__add__>` for how each kind
combines with what is already there.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from typing import Any

from .Options import Options

FEATURE_KINDS = ("scale", "theme", "coord", "facet", "ggsize", "ggtitle", "caption")


@dataclass(frozen=True, eq=False)
class FeatureSpec:
    """One plot-level building block.

    Parameters
    ----------
    kind : str
        One of :data:`FEATURE_KINDS`.
    options : Options
        The feature's part of the plot document.
    complete : bool
        For themes only: ``True`` replaces any earlier theme instead of
        merging into it.
    """

    kind: str
    options: Options
    complete: bool = False

    def __post_init__(self) -> None:
        if self.kind not in FEATURE_KINDS:
            raise ValueError(f"Unknown feature kind {self.kind!r}; expected one of {FEATURE_KINDS}")

    def as_dict(self) -> dict[str, Any]:
        return self.options.to_dict()

    def __add__(self, other: Any) -> "FeatureList":
        return FeatureList((self,)) + other

    def __repr__(self) -> str:
        return f"FeatureSpec({self.kind!r}, {self.options.to_dict()!r})"


@dataclass(frozen=True)
class FeatureList:
    """Several features (or layers) added to a plot together, in order."""

    features: tuple[Any, ...]

    def __add__(self, other: Any) -> "FeatureList":
        if other is None:
            return self
        if isinstance(other, FeatureList):
            return FeatureList(self.features + other.features)
        return FeatureList(self.features + (other,))

    def __iter__(self):
        return iter(self.features)

    def __len__(self) -> int:
        return len(self.features)


def feature_list(items: Iterable[Any]) -> FeatureList:
    return FeatureList(tuple(item for item in items if item is not None))


def check_pair(value: Any, *, caller: str, name: str) -> list[Any] | None:
    """Return ``value`` as a two-element list or raise ``ValueError``.

    ``None`` passes through. Either end of the pair may be ``None`` to leave
    that limit to the engine.
    """
    if value is None:
        return None
    if isinstance(value, str) or not isinstance(value, Sequence):
        raise TypeError(f"{caller}() {name} must be a (min, max) pair, got {type(value).__name__}")
    if len(value) != 2:
        raise ValueError(f"{caller}() {name} must have exactly 2 elements, got {len(value)}")
    return list(value)


__all__ = ["FEATURE_KINDS", "FeatureList", "FeatureSpec", "check_pair", "feature_list"]
