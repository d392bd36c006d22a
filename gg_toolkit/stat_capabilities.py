"""Statistic-side option capsules.

These carry the parameters the engine's statistical transforms read from a
layer (bandwidths, smoothing method, bin counts, ...) plus the stat-only
aesthetics such as ``weight``.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import ClassVar

from .Options import OptionsCapsule

Number = int | float


@dataclass(frozen=True)
class CountStatAesthetics(OptionsCapsule):
    weight: Number | None = None


@dataclass(frozen=True)
class BinStatAesthetics(OptionsCapsule):
    weight: Number | None = None


@dataclass(frozen=True)
class BinStatParameters(OptionsCapsule):
    bins: int | None = None
    binwidth: Number | None = None
    center: Number | None = None
    boundary: Number | None = None


@dataclass(frozen=True)
class YDensityStatAesthetics(OptionsCapsule):
    weight: Number | None = None


@dataclass(frozen=True)
class YDensityStatParameters(OptionsCapsule):
    """Kernel density options for violins.

    ``scale`` is one of ``"area"``, ``"count"`` or ``"width"``. ``bw`` is a
    rule name (``"nrd0"``, ``"nrd"``) or a number.
    """

    scale: str | None = None
    tails_cutoff: Number | None = None
    bw: str | Number | None = None
    kernel: str | None = None
    n: int | None = None
    trim: bool | None = None
    adjust: Number | None = None
    full_scan_max: int | None = None
    quantiles: Sequence[Number] | None = None


@dataclass(frozen=True)
class SmoothStatParameters(OptionsCapsule):
    """Regression options: ``method`` is ``"lm"`` or ``"loess"``."""

    method: str | None = None
    n: int | None = None
    level: Number | None = None
    se: bool | None = None
    span: Number | None = None
    deg: int | None = None
    seed: int | None = None
    max_n: int | None = None


@dataclass(frozen=True)
class BoxplotStatAesthetics(OptionsCapsule):
    weight: Number | None = None


@dataclass(frozen=True)
class BoxplotStatParameters(OptionsCapsule):
    option_keys: ClassVar[Mapping[str, str]] = {"var_width": "varwidth"}

    var_width: bool | None = None
    coef: Number | None = None


@dataclass(frozen=True)
class ContourStatParameters(OptionsCapsule):
    bins: int | None = None
    binwidth: Number | None = None


__all__ = [
    "BinStatAesthetics",
    "BinStatParameters",
    "BoxplotStatAesthetics",
    "BoxplotStatParameters",
    "ContourStatParameters",
    "CountStatAesthetics",
    "SmoothStatParameters",
    "YDensityStatAesthetics",
    "YDensityStatParameters",
]
