"""Statistical transforms as layer options.

``Stat`` is the catalogue of transforms a layer can request. A stat carries
its own parameters; when a layer builder also receives the same parameter as
a keyword, the keyword wins (see :meth:`gg_toolkit.Layer.Layer.as_dict`).
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Any

from .Options import Options

Number = int | float


@dataclass(frozen=True)
class StatOptions:
    """A named statistical transform plus its parameters."""

    kind: str
    parameters: Options = field(default_factory=Options)


def _stat(kind: str, **parameters: Any) -> StatOptions:
    return StatOptions(kind, Options(parameters))


class Stat:
    """Namespace of statistical transforms understood by the engine."""

    identity = StatOptions("identity")

    @staticmethod
    def count() -> StatOptions:
        return StatOptions("count")

    @staticmethod
    def bin(
        bins: int | None = None,
        binwidth: Number | None = None,
        center: Number | None = None,
        boundary: Number | None = None,
    ) -> StatOptions:
        return _stat("bin", bins=bins, binwidth=binwidth, center=center, boundary=boundary)

    @staticmethod
    def smooth(
        method: str | None = None,
        n: int | None = None,
        level: Number | None = None,
        se: bool | None = None,
        span: Number | None = None,
        deg: int | None = None,
        seed: int | None = None,
        max_n: int | None = None,
    ) -> StatOptions:
        return _stat(
            "smooth",
            method=method,
            n=n,
            level=level,
            se=se,
            span=span,
            deg=deg,
            seed=seed,
            max_n=max_n,
        )

    @staticmethod
    def boxplot(var_width: bool | None = None, coef: Number | None = None) -> StatOptions:
        return _stat("boxplot", varwidth=var_width, coef=coef)

    @staticmethod
    def ydensity(
        scale: str | None = None,
        tails_cutoff: Number | None = None,
        bw: str | Number | None = None,
        kernel: str | None = None,
        n: int | None = None,
        trim: bool | None = None,
        adjust: Number | None = None,
        full_scan_max: int | None = None,
        quantiles: Sequence[Number] | None = None,
    ) -> StatOptions:
        return _stat(
            "ydensity",
            scale=scale,
            tails_cutoff=tails_cutoff,
            bw=bw,
            kernel=kernel,
            n=n,
            trim=trim,
            adjust=adjust,
            full_scan_max=full_scan_max,
            quantiles=quantiles,
        )

    @staticmethod
    def contour(bins: int | None = None, binwidth: Number | None = None) -> StatOptions:
        return _stat("contour", bins=bins, binwidth=binwidth)


__all__ = ["Stat", "StatOptions"]
