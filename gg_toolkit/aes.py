"""Aesthetic mappings and manual legend keys."""

from __future__ import annotations

from typing import Any

from .Options import Options, OptionsCapsule


class Aes(OptionsCapsule):
    """Ordered association between plot aesthetics and data columns.

    Unlike the fixed-field capsules used by geometries, a mapping accepts any
    aesthetic name; the engine decides which ones a geometry understands.
    """

    def __init__(self, entries: dict[str, Any]) -> None:
        object.__setattr__(self, "_mapping", Options(entries))

    def seal(self) -> Options:
        return self._mapping

    def __bool__(self) -> bool:
        return len(self._mapping) > 0

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Aes):
            return self._mapping == other._mapping
        return NotImplemented

    def __hash__(self) -> int:
        return hash(tuple(self._mapping))

    def __repr__(self) -> str:
        inner = ", ".join(f"{k}={v!r}" for k, v in self._mapping.items())
        return f"aes({inner})"


def aes(x: Any = None, y: Any = None, **other: Any) -> Aes:
    """Map data columns to aesthetics.

    Parameters
    ----------
    x, y : str, optional
        Columns mapped to the position aesthetics.
    **other :
        Any other aesthetic (``color``, ``fill``, ``size``, ``group``,
        ``paint_a``, ...). ``None`` leaves the aesthetic unmapped.

    Examples
    --------
    >>> aes(x="type", fill="cond").seal().to_dict()
    {'x': 'type', 'fill': 'cond'}
    """
    return Aes({"x": x, "y": y, **other})


def layer_key(
    label: str,
    group: str | None = None,
    index: int | None = None,
    **aesthetics: Any,
) -> Options:
    """Describe a manual legend entry for a layer's ``manual_key``.

    Parameters
    ----------
    label : str
        Text shown in the legend.
    group : str, optional
        Legend group the key belongs to.
    index : int, optional
        Position of the key inside its group.
    **aesthetics :
        Constant aesthetic values used to draw the key glyph.
    """
    if not isinstance(label, str):
        raise TypeError(f"layer_key() label must be str, got {type(label).__name__}")
    return Options.of(label=label, group=group, index=index, **aesthetics)


__all__ = ["Aes", "aes", "layer_key"]
