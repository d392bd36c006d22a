"""Wire format of plot documents.

Documents are built from whatever the user passed (NumPy arrays, tuples,
dates, data frames, nested ``Options``). This module turns them into plain
JSON values at the boundary, and packs them into the two-part payload a
notebook front-end understands.
"""

from __future__ import annotations

import datetime as _dt
import json
import math
from collections.abc import Mapping
from typing import Any

import numpy as np

from .Options import OptionsCapsule

PLOT_MIME_TYPE = "application/plot+json"
PLOT_OUTPUT_TYPE = "lets_plot_spec"


def _epoch_millis(value: _dt.datetime) -> float:
    if value.tzinfo is None:
        value = value.replace(tzinfo=_dt.timezone.utc)
    return value.timestamp() * 1000.0


def _datetime64_millis(value: np.datetime64) -> float | None:
    if np.isnat(value):
        return None
    return float(value.astype("datetime64[ms]").astype(np.int64))


def standardize(value: Any) -> Any:
    """Return ``value`` converted to plain JSON-compatible Python values.

    Conversions:

    - ``Options``/capsules and mappings become ``dict`` (keys must be ``str``).
    - Tuples, lists and NumPy arrays become ``list``.
    - NumPy scalars become Python scalars.
    - NumPy ``datetime64`` values become milliseconds since the Unix epoch;
      ``NaT`` becomes ``None``.
    - Non-finite floats become ``None``.
    - ``datetime``/``date`` become milliseconds since the Unix epoch (naive
      values are taken as UTC).
    - Data frames (objects with ``columns`` and ``to_dict``) become a
      mapping of column name to list.

    Raises
    ------
    TypeError
        For values with no JSON representation.
    """
    if value is None:
        return None
    if isinstance(value, np.datetime64):
        return _datetime64_millis(value)
    if isinstance(value, np.generic):
        return standardize(value.item())
    if isinstance(value, (str, bool, int)):
        return value
    if isinstance(value, float):
        return float(value) if math.isfinite(value) else None
    if isinstance(value, np.ndarray):
        if np.issubdtype(value.dtype, np.datetime64):
            return [standardize(item) for item in value]
        return [standardize(item) for item in value.tolist()]
    if isinstance(value, OptionsCapsule):
        return standardize(value.seal())
    if isinstance(value, Mapping):
        result: dict[str, Any] = {}
        for key, item in value.items():
            if not isinstance(key, str):
                raise TypeError(f"Plot document keys must be str, got {type(key).__name__}: {key!r}")
            result[key] = standardize(item)
        return result
    if isinstance(value, (list, tuple)):
        return [standardize(item) for item in value]
    if isinstance(value, _dt.datetime):
        return _epoch_millis(value)
    if isinstance(value, _dt.date):
        return _epoch_millis(_dt.datetime(value.year, value.month, value.day))
    if hasattr(value, "columns") and hasattr(value, "to_dict"):
        return standardize(value.to_dict(orient="list"))
    raise TypeError(f"Value of type {type(value).__name__} is not supported in a plot document")


def to_json(document: Mapping[str, Any], *, indent: int | None = None) -> str:
    """Serialize ``document`` to JSON, keeping key insertion order."""
    separators = (",", ":") if indent is None else (",", ": ")
    return json.dumps(
        standardize(document),
        indent=indent,
        separators=separators,
        ensure_ascii=False,
        allow_nan=False,
    )


def plot_payload(document: Mapping[str, Any]) -> dict[str, Any]:
    """Return the machine-readable part of the notebook payload."""
    return {
        "output_type": PLOT_OUTPUT_TYPE,
        "output": standardize(document),
        "apply_color_scheme": True,
    }


def plot_mime_bundle(document: Mapping[str, Any], *, div_id: str | None = None) -> dict[str, Any]:
    """Return the notebook MIME bundle for ``document``.

    The bundle has a human-viewable ``text/html`` entry and the structured
    ``application/plot+json`` entry.
    """
    from .plot_html import html_snippet

    return {
        "text/html": html_snippet(document, div_id=div_id),
        PLOT_MIME_TYPE: plot_payload(document),
    }


__all__ = [
    "PLOT_MIME_TYPE",
    "PLOT_OUTPUT_TYPE",
    "plot_mime_bundle",
    "plot_payload",
    "standardize",
    "to_json",
]
