"""Position adjustments for overlapping marks."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from .Options import Options


@dataclass(frozen=True)
class PosOptions:
    """A named position adjustment with optional parameters.

    Parameters
    ----------
    kind : str
        Engine name of the adjustment (``"dodge"``, ``"stack"``, ...).
    parameters : Options
        Adjustment parameters; unset ones are already dropped.
    """

    kind: str
    parameters: Options = field(default_factory=Options)

    def as_spec(self) -> str | dict[str, Any]:
        """Return the bare name, or ``{"name": kind, **parameters}``."""
        if not self.parameters:
            return self.kind
        return {"name": self.kind, **self.parameters.to_dict()}


def _position(kind: str, **parameters: Any) -> PosOptions:
    return PosOptions(kind, Options(parameters))


position_identity = PosOptions("identity")


def position_stack(vjust: float | None = None, mode: str | None = None) -> PosOptions:
    """Stack overlapping objects on top of each other.

    ``mode`` is ``"groups"`` (stack groups only) or ``"all"``.
    """
    return _position("stack", vjust=vjust, mode=mode)


def position_fill(vjust: float | None = None, mode: str | None = None) -> PosOptions:
    """Stack overlapping objects and normalize each stack to height 1."""
    return _position("fill", vjust=vjust, mode=mode)


def position_dodge(width: float | None = None) -> PosOptions:
    """Place overlapping objects side by side."""
    return _position("dodge", width=width)


def position_jitter(
    width: float | None = None,
    height: float | None = None,
    seed: int | None = None,
) -> PosOptions:
    """Add random noise to positions; ``seed`` makes it reproducible."""
    return _position("jitter", width=width, height=height, seed=seed)


def position_nudge(x: float | None = None, y: float | None = None) -> PosOptions:
    """Shift positions by a constant offset."""
    return _position("nudge", x=x, y=y)


def position_jitterdodge(
    dodge_width: float | None = None,
    jitter_width: float | None = None,
    jitter_height: float | None = None,
    seed: int | None = None,
) -> PosOptions:
    """Dodge groups, then jitter inside each group."""
    return _position(
        "jitterdodge",
        dodge_width=dodge_width,
        jitter_width=jitter_width,
        jitter_height=jitter_height,
        seed=seed,
    )


__all__ = [
    "PosOptions",
    "position_dodge",
    "position_fill",
    "position_identity",
    "position_jitter",
    "position_jitterdodge",
    "position_nudge",
    "position_stack",
]
