"""Top-level public API for the ``gg_toolkit`` package.

Build grammar-of-graphics plot documents and hand them to the Lets-Plot JS
engine, for example:

>>> from gg_toolkit import aes, geom_point, ggplot  # doctest: +SKIP
>>> ggplot({"x": [1, 2], "y": [3, 4]}, aes("x", "y")) + geom_point(size=3)  # doctest: +SKIP

Builders only assemble documents; drawing, statistics and layout happen in
the engine.
"""

__version__ = "0.1.0"

from .aes import Aes, aes, layer_key
from .config import DisplayConfig, configure, get_config, reset_config
from .coord import coord_cartesian, coord_fixed, coord_flip, coord_polar
from .display_context import (
    DisplayError,
    DisplaySink,
    RenderContext,
    available_sinks,
    display,
    register_sink,
    use_render_context,
)
from .display_sinks import BrowserSink, HtmlFileSink, NotebookSink, WidgetSink
from .facet import facet_grid, facet_wrap
from .feature import FeatureList, FeatureSpec
from .geom import (
    geom_bar,
    geom_boxplot,
    geom_contour,
    geom_histogram,
    geom_line,
    geom_point,
    geom_pointrange,
    geom_polygon,
    geom_smooth,
    geom_violin,
)
from .labels import ggsize, ggtitle, labs, xlab, ylab
from .Layer import Layer
from .Options import Options, OptionsCapsule, merge_fragments
from .Plot import Plot, ggplot, ggsave
from .pos import (
    position_dodge,
    position_fill,
    position_identity,
    position_jitter,
    position_jitterdodge,
    position_nudge,
    position_stack,
)
from .sampling import (
    sampling_group_random,
    sampling_group_systematic,
    sampling_none,
    sampling_pick,
    sampling_random,
    sampling_random_stratified,
    sampling_systematic,
    sampling_vertex_dp,
    sampling_vertex_vw,
)
from .scale import (
    scale_color_gradient,
    scale_color_manual,
    scale_fill_gradient,
    scale_fill_manual,
    scale_x_continuous,
    scale_x_discrete,
    scale_x_log10,
    scale_y_continuous,
    scale_y_discrete,
    scale_y_log10,
    xlim,
    ylim,
)
from .stat import stat_boxplot, stat_contour, stat_smooth
from .stat_options import Stat
from .theme import (
    element_blank,
    element_line,
    element_rect,
    element_text,
    theme,
    theme_bw,
    theme_classic,
    theme_grey,
    theme_light,
    theme_minimal,
    theme_none,
    theme_void,
)
from .tooltips import layer_tooltips, tooltips_none
