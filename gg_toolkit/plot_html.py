"""HTML renditions of a plot document.

Both renditions hand the document to the Lets-Plot JS library in the
browser; nothing is drawn on the Python side.

- :func:`html_snippet` is embeddable (notebook outputs): it loads the
  library on demand and draws into its own ``<div>``.
- :func:`html_page` is a standalone page for files and browsers.
"""

from __future__ import annotations

import html
import uuid
from collections.abc import Mapping
from typing import Any

from .config import DisplayConfig, get_config
from .serialize import to_json


def _script_json(document: Mapping[str, Any]) -> str:
    # "</" would close the surrounding <script> element.
    return to_json(document).replace("</", "<\\/")


def html_snippet(
    document: Mapping[str, Any],
    *,
    div_id: str | None = None,
    config: DisplayConfig | None = None,
) -> str:
    """Return a self-contained HTML fragment that draws ``document``.

    Parameters
    ----------
    document : Mapping
        Plot document.
    div_id : str, optional
        Id of the container element; a random one is generated by default.
    config : DisplayConfig, optional
        Settings providing the library URL; defaults to :func:`get_config`.
    """
    cfg = config if config is not None else get_config()
    target = div_id if div_id is not None else f"gg-{uuid.uuid4().hex[:12]}"
    return f"""\
<div id="{html.escape(target)}"></div>
<script type="text/javascript">
(function() {{
    var plotSpec = {_script_json(document)};
    var containerDiv = document.getElementById({to_json(target)});
    function build() {{
        window.LetsPlot.buildPlotFromRawSpecs(plotSpec, -1, -1, containerDiv);
    }}
    if (window.LetsPlot) {{
        build();
        return;
    }}
    var script = document.createElement("script");
    script.type = "text/javascript";
    script.src = {to_json(cfg.script_url)};
    script.onload = build;
    script.onerror = function() {{
        containerDiv.textContent = "Failed to load the Lets-Plot JS library from " + script.src;
    }};
    document.head.appendChild(script);
}})();
</script>
"""


def html_page(
    document: Mapping[str, Any],
    *,
    title: str | None = None,
    config: DisplayConfig | None = None,
) -> str:
    """Return a complete HTML page that draws ``document``."""
    cfg = config if config is not None else get_config()
    page_title = html.escape(title if title is not None else cfg.page_title)
    return f"""\
<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <title>{page_title}</title>
    <script type="text/javascript" src="{html.escape(cfg.script_url)}"></script>
</head>
<body>
    <div id="plot"></div>
    <script type="text/javascript">
        var plotSpec = {_script_json(document)};
        LetsPlot.buildPlotFromRawSpecs(plotSpec, -1, -1, document.getElementById("plot"));
    </script>
</body>
</html>
"""


__all__ = ["html_page", "html_snippet"]
