from __future__ import annotations

import pytest

from gg_toolkit import (
    coord_cartesian,
    coord_polar,
    element_line,
    element_rect,
    element_text,
    facet_grid,
    facet_wrap,
    ggsize,
    ggtitle,
    labs,
    scale_color_gradient,
    scale_fill_manual,
    scale_x_continuous,
    scale_x_discrete,
    scale_y_continuous,
    theme_none,
    theme_void,
    xlab,
    ylab,
)
from gg_toolkit.feature import FeatureSpec
from gg_toolkit.Options import Options
from gg_toolkit.scale import scale


def test_continuous_scale_limits_become_list() -> None:
    assert scale_x_continuous(limits=(0, 10)).as_dict() == {"aesthetic": "x", "limits": [0, 10]}


def test_continuous_scale_keeps_open_limit() -> None:
    assert scale_y_continuous(limits=[None, 5]).as_dict()["limits"] == [None, 5]


def test_continuous_scale_rejects_malformed_limits() -> None:
    with pytest.raises(ValueError, match="scale_x_continuous\\(\\) limits"):
        scale_x_continuous(limits=(1, 2, 3))
    with pytest.raises(TypeError, match="scale_x_continuous\\(\\) limits"):
        scale_x_continuous(limits="ab")


def test_discrete_scale_is_flagged() -> None:
    assert scale_x_discrete(reverse=True).as_dict() == {
        "aesthetic": "x",
        "reverse": True,
        "discrete": True,
    }


def test_manual_scale_values() -> None:
    assert scale_fill_manual(values=["red", "blue"]).as_dict() == {
        "aesthetic": "fill",
        "values": ["red", "blue"],
    }
    with pytest.raises(TypeError, match="values"):
        scale_fill_manual(values="red")


def test_gradient_scale_mapper() -> None:
    assert scale_color_gradient(low="white", high="red").as_dict() == {
        "aesthetic": "color",
        "low": "white",
        "high": "red",
        "scale_mapper_kind": "color_gradient",
    }


def test_generic_scale_requires_aesthetic() -> None:
    with pytest.raises(ValueError, match="aesthetic"):
        scale("")


def test_axis_labels_are_name_only_scales() -> None:
    assert xlab("Weight").as_dict() == {"aesthetic": "x", "name": "Weight"}
    assert ylab("").as_dict() == {"aesthetic": "y", "name": ""}


def test_coord_limits_must_be_pairs() -> None:
    assert coord_cartesian(xlim=(0, None)).as_dict() == {"name": "cartesian", "xlim": [0, None]}
    with pytest.raises(ValueError, match="coord_cartesian\\(\\) ylim"):
        coord_cartesian(ylim=[1])


def test_coord_polar_options() -> None:
    assert coord_polar(theta="y", start=0).as_dict() == {"name": "polar", "theta": "y", "start": 0}


def test_facet_grid_needs_a_variable() -> None:
    with pytest.raises(ValueError, match="facet_grid"):
        facet_grid()
    assert facet_grid(x="cyl", x_order=-1).as_dict() == {"name": "grid", "x": "cyl", "x_order": -1}


def test_facet_wrap_accepts_name_or_names() -> None:
    assert facet_wrap("cyl").as_dict() == {"name": "wrap", "facets": "cyl"}
    assert facet_wrap(("cyl", "gear"), ncol=2).as_dict() == {
        "name": "wrap",
        "facets": ["cyl", "gear"],
        "ncol": 2,
    }


@pytest.mark.parametrize("facets", [[], ["cyl", 1], 3])
def test_facet_wrap_rejects_bad_facets(facets) -> None:
    with pytest.raises(TypeError, match="facet_wrap"):
        facet_wrap(facets)


def test_theme_elements() -> None:
    assert element_line(color="red", size=0) == {"color": "red", "size": 0}
    assert element_rect(fill="white", blank=False) == {"fill": "white"}
    assert element_text(blank=True) == {"blank": True}
    assert element_text(face="bold", margin=[1, 2]) == {"face": "bold", "margin": [1, 2]}


def test_named_theme_is_complete() -> None:
    void = theme_void()
    assert void.complete is True
    assert void.as_dict() == {"name": "void"}


def test_theme_none_is_distinct_from_void() -> None:
    assert theme_none().as_dict() == {"name": "none"}
    assert theme_none().complete is True


def test_title_with_subtitle() -> None:
    assert ggtitle("T", subtitle="S").as_dict() == {"text": "T", "subtitle": "S"}


def test_labs_without_arguments_is_empty() -> None:
    assert len(labs()) == 0


@pytest.mark.parametrize(("width", "height"), [(0, 100), (100, -1), (True, 100), ("1", 100)])
def test_ggsize_requires_positive_numbers(width, height) -> None:
    with pytest.raises(ValueError, match="ggsize"):
        ggsize(width, height)


def test_unknown_feature_kind_is_rejected() -> None:
    with pytest.raises(ValueError, match="Unknown feature kind"):
        FeatureSpec("legend", Options())
