"""Process-wide display configuration.

Settings come from keyword arguments to :func:`configure`, falling back to
environment variables read once on first use:

- ``GG_TOOLKIT_DISPLAY``: name of the default display sink (``notebook``,
  ``widget``, ``browser``, or any registered name). Unset means detect.
- ``GG_TOOLKIT_JS_VERSION``: Lets-Plot JS library version.
- ``GG_TOOLKIT_JS_URL``: URL template for the library; ``{version}`` is
  substituted.
"""

from __future__ import annotations

import logging
import os
import threading
from collections.abc import Mapping
from dataclasses import dataclass, fields, replace
from typing import Any

logger = logging.getLogger(__name__)
if not logger.handlers:
    logger.addHandler(logging.NullHandler())

ENV_DISPLAY = "GG_TOOLKIT_DISPLAY"
ENV_JS_VERSION = "GG_TOOLKIT_JS_VERSION"
ENV_JS_URL = "GG_TOOLKIT_JS_URL"

DEFAULT_JS_VERSION = "4.5.1"
DEFAULT_JS_URL = (
    "https://cdn.jsdelivr.net/gh/JetBrains/lets-plot@v{version}/js-package/distr/lets-plot.min.js"
)


@dataclass(frozen=True)
class DisplayConfig:
    """Immutable display settings.

    Parameters
    ----------
    display : str or None
        Default sink name; ``None`` selects one from the running environment.
    js_version : str
        Lets-Plot JS library version.
    js_url : str
        Library URL template containing ``{version}``.
    page_title : str
        ``<title>`` of standalone HTML pages.
    """

    display: str | None = None
    js_version: str = DEFAULT_JS_VERSION
    js_url: str = DEFAULT_JS_URL
    page_title: str = "gg_toolkit plot"

    @property
    def script_url(self) -> str:
        return self.js_url.format(version=self.js_version)

    @classmethod
    def from_environ(cls, environ: Mapping[str, str] | None = None) -> "DisplayConfig":
        env = os.environ if environ is None else environ
        return cls(
            display=env.get(ENV_DISPLAY) or None,
            js_version=env.get(ENV_JS_VERSION) or DEFAULT_JS_VERSION,
            js_url=env.get(ENV_JS_URL) or DEFAULT_JS_URL,
        )


_CONFIG_LOCK = threading.Lock()
_CONFIG: DisplayConfig | None = None


def get_config() -> DisplayConfig:
    """Return the active configuration, reading the environment on first use."""
    global _CONFIG
    with _CONFIG_LOCK:
        if _CONFIG is None:
            _CONFIG = DisplayConfig.from_environ()
        return _CONFIG


def configure(**changes: Any) -> DisplayConfig:
    """Update the active configuration and return it.

    Changing ``display`` drops the cached default render context so the next
    display call resolves the new sink.

    Raises
    ------
    TypeError
        If a keyword is not a :class:`DisplayConfig` field.
    """
    global _CONFIG
    known = {f.name for f in fields(DisplayConfig)}
    unknown = sorted(set(changes) - known)
    if unknown:
        raise TypeError(f"configure() got unknown setting(s): {', '.join(unknown)}")
    current = get_config()
    updated = replace(current, **changes)
    with _CONFIG_LOCK:
        _CONFIG = updated
    logger.debug("display configuration updated: %s", changes)
    if "display" in changes and changes["display"] != current.display:
        from .display_context import reset_default_context

        reset_default_context()
    return updated


def reset_config() -> None:
    """Forget the active configuration; the environment is read again on next use."""
    global _CONFIG
    with _CONFIG_LOCK:
        _CONFIG = None


__all__ = [
    "DEFAULT_JS_URL",
    "DEFAULT_JS_VERSION",
    "DisplayConfig",
    "configure",
    "get_config",
    "reset_config",
]
