"""One drawn layer of a plot: geometry, statistic, position and options.

Purpose
-------
``Layer`` is the immutable result of every ``geom_*``/``stat_*`` builder. It
keeps the user's parameters exactly as given and turns them into the layer
entry of the plot document on request.

Architecture
------------
Option groups are held as an ordered tuple of capsules (see
:mod:`gg_toolkit.Options`). :meth:`Layer.seal` merges the aesthetic mapping
and then each capsule in declared order, so a later capsule overrides an
earlier one on a shared key. :meth:`Layer.as_dict` adds the layer-level
settings (geom, stat, position, data, legend, sampling, tooltips) in front of
the sealed options.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from .aes import Aes, aes
from .feature import FeatureList
from .Options import Options, OptionsCapsule, freeze_value, merge_fragments, seal_all
from .pos import PosOptions
from .sampling import SamplingOptions
from .stat_options import StatOptions
from .tooltips import TooltipOptions


def check_data(data: Any, *, caller: str) -> Any:
    """Validate ``data`` is column-oriented and return it unchanged.

    Accepted: ``None``, any mapping of column name to values, or a
    data-frame-like object exposing ``columns`` and ``to_dict``.
    """
    if data is None or isinstance(data, Mapping):
        return data
    if hasattr(data, "columns") and hasattr(data, "to_dict"):
        return data
    raise TypeError(
        f"{caller}() data must be a mapping of column name to values or a data frame, "
        f"got {type(data).__name__}"
    )


def check_mapping(mapping: Any, *, caller: str) -> Aes:
    if mapping is None:
        return aes()
    if not isinstance(mapping, Aes):
        raise TypeError(
            f"{caller}() mapping must be created with aes(...), got {type(mapping).__name__}"
        )
    return mapping


@dataclass(frozen=True, eq=False)
class Layer:
    """Immutable description of a single plot layer.

    Parameters
    ----------
    geom : str
        Engine name of the geometry (``"point"``, ``"violin"``, ...).
    stat : StatOptions
        Statistical transform applied to the layer data.
    position : PosOptions
        Position adjustment.
    mapping : Aes
        Layer-level aesthetic mapping.
    capabilities : tuple[OptionsCapsule, ...]
        Option groups in the builder's declared order.
    data : mapping or data frame, optional
        Layer data; inherited from the plot when omitted.
    show_legend : bool, optional
        ``False`` hides this layer from the legend.
    inherit_aes : bool, optional
        ``False`` stops the plot-level mapping from applying to this layer.
    manual_key : str or Options, optional
        Manual legend key, a label or the result of :func:`layer_key`.
    sampling : SamplingOptions, optional
        Sampling applied before drawing.
    tooltips : TooltipOptions, optional
        Tooltip content; :data:`tooltips_none` hides tooltips.
    orientation : str, optional
        ``"x"`` or ``"y"``; detected by the engine when omitted.
    """

    geom: str
    stat: StatOptions
    position: PosOptions
    mapping: Aes = field(default_factory=aes)
    capabilities: tuple[OptionsCapsule, ...] = ()
    data: Any = None
    show_legend: bool | None = None
    inherit_aes: bool | None = None
    manual_key: str | Options | None = None
    sampling: SamplingOptions | None = None
    tooltips: TooltipOptions | None = None
    orientation: str | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "data", freeze_value(self.data))

    def seal(self) -> Options:
        """Return the mapping plus every capability fragment, merged in order."""
        mapping = self.mapping.seal()
        head = Options.of(mapping=mapping if mapping else None)
        return merge_fragments(head, seal_all(self.capabilities))

    def as_dict(self) -> dict[str, Any]:
        """Return this layer's entry in the plot document."""
        settings = Options.of(
            position=self.position.as_spec(),
            data=self.data,
            show_legend=self.show_legend,
            inherit_aes=self.inherit_aes,
            manual_key=self.manual_key,
            sampling=self.sampling.as_spec() if self.sampling is not None else None,
            tooltips=self.tooltips.as_spec() if self.tooltips is not None else None,
            orientation=self.orientation,
        )
        return merge_fragments(
            Options.of(geom=self.geom, stat=self.stat.kind),
            self.stat.parameters,
            settings,
            self.seal(),
        ).to_dict()

    def __add__(self, other: Any) -> FeatureList:
        return FeatureList((self,)) + other

    def __repr__(self) -> str:
        return f"Layer(geom={self.geom!r}, stat={self.stat.kind!r}, mapping={self.mapping!r})"


__all__ = ["Layer", "check_data", "check_mapping"]
