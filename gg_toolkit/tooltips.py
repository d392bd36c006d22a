"""Layer tooltip configuration.

``layer_tooltips()`` returns an immutable builder; each chained call returns a
new ``TooltipOptions`` so a base configuration can be shared between layers.

>>> tips = layer_tooltips(["cond"]).line("@|@type").format("@alpha", ".2f")
>>> tips.as_spec()["lines"]
['@|@type']
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, replace
from typing import Any

from .Options import Options


@dataclass(frozen=True)
class TooltipOptions:
    """Content and placement of a layer's tooltips.

    Parameters
    ----------
    variables : tuple[str, ...] or None
        Columns listed in the tooltip as ``name: value`` lines.
    line_templates : tuple[str, ...]
        Extra line templates, in the order they were added.
    field_formats : tuple[tuple[str, str], ...]
        ``(field, pattern)`` pairs.
    title_text, anchor_value, min_width_value, no_splitting :
        Optional placement and title settings.
    hidden : bool
        ``True`` only for :data:`tooltips_none`.
    """

    variables: tuple[str, ...] | None = None
    line_templates: tuple[str, ...] = ()
    field_formats: tuple[tuple[str, str], ...] = ()
    title_text: str | None = None
    anchor_value: str | None = None
    min_width_value: float | None = None
    no_splitting: bool | None = None
    hidden: bool = False

    def line(self, template: str) -> "TooltipOptions":
        """Append a line template (``"label|@variable"`` or plain text)."""
        return replace(self, line_templates=self.line_templates + (template,))

    def format(self, field: str, pattern: str) -> "TooltipOptions":
        """Format a field (``"@name"``, ``"^x"`` or ``"x"``) with ``pattern``."""
        return replace(self, field_formats=self.field_formats + ((field, pattern),))

    def title(self, text: str) -> "TooltipOptions":
        return replace(self, title_text=text)

    def anchor(self, value: str) -> "TooltipOptions":
        """Pin the tooltip to a corner, e.g. ``"top_right"``."""
        return replace(self, anchor_value=value)

    def min_width(self, value: float) -> "TooltipOptions":
        return replace(self, min_width_value=value)

    def disable_splitting(self) -> "TooltipOptions":
        """Show all values in one general tooltip instead of side tooltips."""
        return replace(self, no_splitting=True)

    def as_spec(self) -> str | dict[str, Any]:
        """Return ``"none"`` for hidden tooltips, otherwise the options dict."""
        if self.hidden:
            return "none"
        return Options.of(
            variables=list(self.variables) if self.variables is not None else None,
            lines=list(self.line_templates) if self.line_templates else None,
            formats=[{"field": f, "format": p} for f, p in self.field_formats] or None,
            title=self.title_text,
            tooltip_anchor=self.anchor_value,
            tooltip_min_width=self.min_width_value,
            disable_splitting=self.no_splitting,
        ).to_dict()


def layer_tooltips(variables: Sequence[str] | None = None) -> TooltipOptions:
    """Start a tooltip configuration listing ``variables``."""
    if isinstance(variables, str):
        raise TypeError("layer_tooltips() variables must be a sequence of names, not a str")
    return TooltipOptions(variables=tuple(variables) if variables is not None else None)


tooltips_none = TooltipOptions(hidden=True)


__all__ = ["TooltipOptions", "layer_tooltips", "tooltips_none"]
