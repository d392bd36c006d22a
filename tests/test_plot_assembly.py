from __future__ import annotations

from pathlib import Path

import pytest

from gg_toolkit import (
    RenderContext,
    aes,
    coord_fixed,
    coord_flip,
    element_blank,
    facet_wrap,
    geom_bar,
    geom_line,
    geom_point,
    ggplot,
    ggsave,
    ggsize,
    ggtitle,
    labs,
    scale_x_log10,
    theme,
    theme_minimal,
    xlim,
)
from gg_toolkit.serialize import PLOT_MIME_TYPE


class _Collect:
    def __init__(self) -> None:
        self.seen: list[dict] = []

    def display(self, document) -> None:
        self.seen.append(document)


DATA = {"type": ["X", "X", "Y"], "cond": ["A", "B", "A"]}


def test_empty_plot_document() -> None:
    assert ggplot().as_dict() == {"kind": "plot", "layers": [], "scales": []}


def test_layer_order_is_insertion_order() -> None:
    p = ggplot(DATA) + geom_bar() + geom_line() + geom_point()
    assert [layer["geom"] for layer in p.as_dict()["layers"]] == ["bar", "line", "point"]


def test_adding_returns_new_plot() -> None:
    base = ggplot(DATA)
    extended = base + geom_point()
    assert base.layers == ()
    assert len(extended.layers) == 1


def test_global_data_and_mapping() -> None:
    doc = ggplot(DATA, aes(x="type", fill="cond")).as_dict()
    assert doc["data"] == DATA
    assert doc["mapping"] == {"x": "type", "fill": "cond"}


def test_document_key_order() -> None:
    p = (
        ggplot(DATA, aes(x="type"))
        + facet_wrap("cond")
        + coord_flip()
        + theme(legend_position="bottom")
        + ggsize(700, 350)
        + labs(title="Counts", caption="source")
        + geom_bar()
        + xlim(["X", "Y"])
    )
    assert list(p.as_dict()) == [
        "kind",
        "data",
        "mapping",
        "ggtitle",
        "caption",
        "ggsize",
        "theme",
        "coord",
        "facet",
        "layers",
        "scales",
    ]


def test_theme_fragments_merge_with_later_values_winning() -> None:
    p = (
        ggplot()
        + theme(legend_position="bottom")
        + theme(axis_title=element_blank(), legend_position="top")
    )
    assert p.as_dict()["theme"] == {"legend_position": "top", "axis_title": {"blank": True}}


def test_named_theme_replaces_and_can_be_refined() -> None:
    p = ggplot() + theme(legend_position="bottom") + theme_minimal()
    assert p.as_dict()["theme"] == {"name": "minimal"}

    refined = p + theme(legend_position="top")
    assert refined.as_dict()["theme"] == {"name": "minimal", "legend_position": "top"}


def test_coordinate_system_is_replaced() -> None:
    p = ggplot() + coord_flip() + coord_fixed(ratio=2)
    assert p.as_dict()["coord"] == {"name": "fixed", "ratio": 2}


def test_scales_accumulate_in_order() -> None:
    p = ggplot() + scale_x_log10("weight") + xlim([1, 100])
    assert p.as_dict()["scales"] == [
        {"aesthetic": "x", "name": "weight", "trans": "log10"},
        {"aesthetic": "x", "limits": [1, 100]},
    ]


def test_labs_adds_title_caption_and_axis_names() -> None:
    doc = (ggplot() + labs(title="T", subtitle="S", caption="C", x="X", fill="Cond")).as_dict()
    assert doc["ggtitle"] == {"text": "T", "subtitle": "S"}
    assert doc["caption"] == {"text": "C"}
    assert doc["scales"] == [
        {"aesthetic": "x", "name": "X"},
        {"aesthetic": "fill", "name": "Cond"},
    ]


def test_title_and_size_are_replaced() -> None:
    doc = (ggplot() + ggtitle("a") + ggtitle("b") + ggsize(1, 2) + ggsize(3, 4)).as_dict()
    assert doc["ggtitle"] == {"text": "b"}
    assert doc["ggsize"] == {"width": 3, "height": 4}


def test_features_can_be_combined_before_adding() -> None:
    combined = coord_flip() + theme(legend_position="none")
    doc = (ggplot() + combined).as_dict()
    assert doc["coord"] == {"name": "flip"}
    assert doc["theme"] == {"legend_position": "none"}


def test_adding_none_is_a_no_op() -> None:
    p = ggplot()
    assert p + None is p


@pytest.mark.parametrize("other", [5, "geom_point", {"geom": "point"}])
def test_adding_unsupported_object_raises(other) -> None:
    with pytest.raises(TypeError, match="Cannot add"):
        ggplot() + other


def test_ggplot_checks_its_arguments() -> None:
    with pytest.raises(TypeError, match="ggplot\\(\\) data"):
        ggplot([1, 2, 3])
    with pytest.raises(TypeError, match="ggplot\\(\\) mapping"):
        ggplot(DATA, {"x": "type"})


def test_sealing_twice_gives_identical_json() -> None:
    p = ggplot(DATA) + geom_bar(aes(x="type", fill="cond"), color="dark_green", alpha=0.3)
    assert p.to_json() == p.to_json()
    assert p.as_dict() is not p.as_dict()


def test_repr_mimebundle_has_html_and_plot_payload() -> None:
    bundle = (ggplot(DATA) + geom_bar(aes(x="type")))._repr_mimebundle_()
    assert set(bundle) == {"text/html", PLOT_MIME_TYPE}
    payload = bundle[PLOT_MIME_TYPE]
    assert payload["output_type"] == "lets_plot_spec"
    assert payload["apply_color_scheme"] is True
    assert payload["output"]["kind"] == "plot"
    assert payload["output"]["layers"][0]["geom"] == "bar"


def test_show_uses_explicit_context() -> None:
    sink = _Collect()
    p = ggplot(DATA) + geom_point()
    p.show(RenderContext(sink))
    assert sink.seen == [p.as_dict()]


def test_to_html_is_standalone_page() -> None:
    page = (ggplot(DATA) + geom_point()).to_html(title="Demo")
    assert page.startswith("<!DOCTYPE html>")
    assert "<title>Demo</title>" in page
    assert "buildPlotFromRawSpecs" in page


def test_ggsave_writes_html(tmp_path: Path) -> None:
    p = ggplot(DATA) + geom_bar(aes(x="type"))
    written = ggsave(p, "bars.html", path=tmp_path)
    assert Path(written) == (tmp_path / "bars.html").resolve()
    assert '"geom":"bar"' in Path(written).read_text(encoding="utf-8")


def test_ggsave_rejects_other_formats(tmp_path: Path) -> None:
    with pytest.raises(ValueError, match="HTML"):
        ggsave(ggplot(), "bars.png", path=tmp_path)
    with pytest.raises(TypeError, match="Plot"):
        ggsave(geom_point(), "bars.html", path=tmp_path)


def test_layer_then_feature_can_be_combined_before_adding() -> None:
    combined = geom_point() + coord_flip() + geom_line()
    doc = (ggplot() + combined).as_dict()
    assert [layer["geom"] for layer in doc["layers"]] == ["point", "line"]
    assert doc["coord"] == {"name": "flip"}


def test_plot_keeps_data_given_at_construction() -> None:
    data = {"x": [1, 2]}
    p = ggplot(data) + geom_point(shape=[0.25])
    data["x"].append(3)
    assert p.as_dict()["data"] == {"x": [1, 2]}
    assert '"shape":[0.25]' in p.to_json()
