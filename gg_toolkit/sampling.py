"""Data sampling applied by the engine before a layer is drawn.

Sampling keeps very large layers responsive. Each helper returns a
``SamplingOptions``; several can be chained with ``+`` and are applied in
order.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from .Options import Options


@dataclass(frozen=True)
class SamplingOptions:
    """Ordered chain of sampling steps."""

    steps: tuple[Options, ...]

    def __add__(self, other: Any) -> "SamplingOptions":
        if not isinstance(other, SamplingOptions):
            return NotImplemented
        if self.is_none or other.is_none:
            raise ValueError("sampling_none cannot be combined with other sampling steps")
        return SamplingOptions(self.steps + other.steps)

    @property
    def is_none(self) -> bool:
        return len(self.steps) == 0

    def as_spec(self) -> str | dict[str, Any] | list[dict[str, Any]]:
        """Return ``"none"``, a single step, or the list of chained steps."""
        if self.is_none:
            return "none"
        if len(self.steps) == 1:
            return self.steps[0].to_dict()
        return [step.to_dict() for step in self.steps]


def _sampling(name: str, n: int, **parameters: Any) -> SamplingOptions:
    if not isinstance(n, int) or isinstance(n, bool) or n <= 0:
        raise ValueError(f"sampling_{name}() n must be a positive int, got {n!r}")
    return SamplingOptions((Options.of(name=name, n=n, **parameters),))


sampling_none = SamplingOptions(())


def sampling_random(n: int, seed: int | None = None) -> SamplingOptions:
    """Keep ``n`` randomly selected rows."""
    return _sampling("random", n, seed=seed)


def sampling_pick(n: int) -> SamplingOptions:
    """Keep the first ``n`` distinct values of the discrete variable."""
    return _sampling("pick", n)


def sampling_systematic(n: int) -> SamplingOptions:
    """Keep every k-th row so that about ``n`` rows remain."""
    return _sampling("systematic", n)


def sampling_group_random(n: int, seed: int | None = None) -> SamplingOptions:
    """Keep ``n`` randomly selected groups."""
    return _sampling("group_random", n, seed=seed)


def sampling_group_systematic(n: int) -> SamplingOptions:
    """Keep every k-th group so that about ``n`` groups remain."""
    return _sampling("group_systematic", n)


def sampling_random_stratified(
    n: int,
    seed: int | None = None,
    min_subsample: int | None = None,
) -> SamplingOptions:
    """Random sampling that keeps every stratum represented."""
    return _sampling("random_stratified", n, seed=seed, min_subsample=min_subsample)


def sampling_vertex_vw(n: int) -> SamplingOptions:
    """Simplify paths to ``n`` vertices with the Visvalingam-Whyatt algorithm."""
    return _sampling("vertex_vw", n)


def sampling_vertex_dp(n: int) -> SamplingOptions:
    """Simplify paths to ``n`` vertices with the Douglas-Peucker algorithm."""
    return _sampling("vertex_dp", n)


__all__ = [
    "SamplingOptions",
    "sampling_group_random",
    "sampling_group_systematic",
    "sampling_none",
    "sampling_pick",
    "sampling_random",
    "sampling_random_stratified",
    "sampling_systematic",
    "sampling_vertex_dp",
    "sampling_vertex_vw",
]
