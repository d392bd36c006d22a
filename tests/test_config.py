from __future__ import annotations

import pytest

from gg_toolkit import config
from gg_toolkit.config import (
    DEFAULT_JS_VERSION,
    DisplayConfig,
    configure,
    get_config,
    reset_config,
)
from gg_toolkit.display_context import default_context


def test_defaults_from_empty_environment() -> None:
    cfg = DisplayConfig.from_environ({})
    assert cfg.display is None
    assert cfg.js_version == DEFAULT_JS_VERSION
    assert f"v{DEFAULT_JS_VERSION}" in cfg.script_url


def test_environment_variables_are_read() -> None:
    cfg = DisplayConfig.from_environ(
        {
            config.ENV_DISPLAY: "browser",
            config.ENV_JS_VERSION: "1.2.3",
            config.ENV_JS_URL: "https://example.invalid/lp-{version}.js",
        }
    )
    assert cfg.display == "browser"
    assert cfg.script_url == "https://example.invalid/lp-1.2.3.js"


def test_get_config_reads_process_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv(config.ENV_DISPLAY, "widget")
    reset_config()
    assert get_config().display == "widget"


def test_configure_updates_active_settings() -> None:
    updated = configure(js_version="5.0.0", page_title="Report")
    assert get_config() is updated
    assert updated.js_version == "5.0.0"
    assert updated.page_title == "Report"


def test_configure_rejects_unknown_settings() -> None:
    with pytest.raises(TypeError, match="bogus"):
        configure(bogus=1)


def test_changing_display_resets_default_context() -> None:
    configure(display="browser")
    first = default_context()
    assert first.name == "browser"
    assert default_context() is first

    configure(display="notebook")
    assert default_context().name == "notebook"
