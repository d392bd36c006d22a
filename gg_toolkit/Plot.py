"""The plot document: global data and mapping plus layers and features.

Purpose
-------
``Plot`` gathers everything added with ``+`` and emits the single document
the Lets-Plot engine draws. It is immutable: ``plot + layer`` returns a new
plot, so a base plot can be extended in several directions.

How features combine
--------------------
- layers and scales are appended; layer order is draw order (later layers
  draw on top) and is never changed,
- ``theme(...)`` merges into the current theme (later keys win); a complete
  named theme such as ``theme_minimal()`` replaces it,
- coordinate system, facet, size, title and caption replace the previous
  value,
- a ``FeatureList`` (from :func:`~gg_toolkit.labels.labs`) adds its members
  in order; ``None`` is ignored.

Examples
--------
>>> from gg_toolkit import aes, geom_bar, ggplot, ggsize
>>> data = {"type": ["X", "X", "Y"], "cond": ["A", "B", "A"]}
>>> p = ggplot(data) + geom_bar(aes(x="type", fill="cond"), color="dark_green", alpha=0.3)
>>> p = p + ggsize(700, 350)
>>> [layer["geom"] for layer in p.as_dict()["layers"]]
['bar']
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any

from .aes import Aes, aes
from .display_context import DisplaySink, RenderContext, display
from .display_sinks import HtmlFileSink
from .feature import FeatureList, FeatureSpec
from .Layer import Layer, check_data, check_mapping
from .Options import Options, freeze_value, merge_fragments
from .plot_html import html_page
from .serialize import plot_mime_bundle, to_json


@dataclass(frozen=True, eq=False)
class Plot:
    """Immutable plot document under construction.

    Use :func:`ggplot` rather than instantiating directly.
    """

    data: Any = None
    mapping: Aes = field(default_factory=aes)
    layers: tuple[Layer, ...] = ()
    scales: tuple[FeatureSpec, ...] = ()
    theme: Options | None = None
    coord: FeatureSpec | None = None
    facet: FeatureSpec | None = None
    ggsize: FeatureSpec | None = None
    ggtitle: FeatureSpec | None = None
    caption: FeatureSpec | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "data", freeze_value(self.data))

    def __add__(self, other: Any) -> "Plot":
        if other is None:
            return self
        if isinstance(other, FeatureList):
            result = self
            for item in other:
                result = result + item
            return result
        if isinstance(other, Layer):
            return replace(self, layers=self.layers + (other,))
        if isinstance(other, FeatureSpec):
            return self._add_feature(other)
        raise TypeError(f"Cannot add {type(other).__name__} to a plot")

    def _add_feature(self, feature: FeatureSpec) -> "Plot":
        if feature.kind == "scale":
            return replace(self, scales=self.scales + (feature,))
        if feature.kind == "theme":
            if feature.complete or self.theme is None:
                return replace(self, theme=feature.options)
            return replace(self, theme=merge_fragments(self.theme, feature.options))
        return replace(self, **{feature.kind: feature})

    def as_dict(self) -> dict[str, Any]:
        """Return the plot document.

        Keys, in order: ``kind``, ``data``, ``mapping``, ``ggtitle``,
        ``caption``, ``ggsize``, ``theme``, ``coord``, ``facet``, ``layers``,
        ``scales``. Unset entries are omitted; ``layers`` and ``scales`` are
        always present.
        """
        mapping = self.mapping.seal()
        return Options.of(
            kind="plot",
            data=self.data,
            mapping=mapping if mapping else None,
            ggtitle=_options_of(self.ggtitle),
            caption=_options_of(self.caption),
            ggsize=_options_of(self.ggsize),
            theme=self.theme,
            coord=_options_of(self.coord),
            facet=_options_of(self.facet),
            layers=[layer.as_dict() for layer in self.layers],
            scales=[scale.as_dict() for scale in self.scales],
        ).to_dict()

    def to_json(self, *, indent: int | None = None) -> str:
        return to_json(self.as_dict(), indent=indent)

    def to_html(self, *, title: str | None = None) -> str:
        """Return a standalone HTML page drawing this plot."""
        return html_page(self.as_dict(), title=title)

    def show(self, context: RenderContext | DisplaySink | str | None = None) -> None:
        """Display the plot; see :func:`gg_toolkit.display_context.display`."""
        display(self.as_dict(), context)

    def _repr_mimebundle_(self, include: Any = None, exclude: Any = None) -> dict[str, Any]:
        """IPython rich display hook (last expression of a cell)."""
        return plot_mime_bundle(self.as_dict())

    def __repr__(self) -> str:
        return f"Plot(layers={len(self.layers)}, scales={len(self.scales)})"


def _options_of(feature: FeatureSpec | None) -> Options | None:
    return feature.options if feature is not None else None


def ggplot(data: Any = None, mapping: Aes | None = None) -> Plot:
    """Start a plot.

    Parameters
    ----------
    data : mapping or data frame, optional
        Default data for every layer.
    mapping : Aes, optional
        Default aesthetic mapping for every layer.
    """
    return Plot(
        data=check_data(data, caller="ggplot"),
        mapping=check_mapping(mapping, caller="ggplot"),
    )


def ggsave(plot: Plot, filename: str | Path, *, path: str | Path | None = None) -> str:
    """Export ``plot`` to a standalone HTML file and return its absolute path.

    Raises
    ------
    ValueError
        If the file extension is not ``.html``/``.htm``; other formats need
        the rendering engine.
    """
    if not isinstance(plot, Plot):
        raise TypeError(f"ggsave() expects a Plot, got {type(plot).__name__}")
    target = Path(path) / filename if path is not None else Path(filename)
    if target.suffix.lower() not in (".html", ".htm"):
        raise ValueError(f"ggsave() can only export HTML, got {target.suffix or 'no extension'!r}")
    HtmlFileSink(target).display(plot.as_dict())
    return str(target.resolve())


__all__ = ["Plot", "ggplot", "ggsave"]
