from __future__ import annotations

import pytest

from gg_toolkit import (
    layer_tooltips,
    position_dodge,
    position_fill,
    position_identity,
    position_jitterdodge,
    position_nudge,
    position_stack,
    sampling_none,
    sampling_pick,
    sampling_random,
    sampling_random_stratified,
    sampling_vertex_dp,
    tooltips_none,
)


def test_position_without_parameters_is_bare_name() -> None:
    assert position_identity.as_spec() == "identity"
    assert position_dodge().as_spec() == "dodge"
    assert position_stack().as_spec() == "stack"


def test_position_with_parameters_is_document() -> None:
    assert position_dodge(width=0.5).as_spec() == {"name": "dodge", "width": 0.5}
    assert position_fill(vjust=0).as_spec() == {"name": "fill", "vjust": 0}
    assert position_nudge(y=1).as_spec() == {"name": "nudge", "y": 1}
    assert position_jitterdodge(dodge_width=0.3, seed=4).as_spec() == {
        "name": "jitterdodge",
        "dodge_width": 0.3,
        "seed": 4,
    }


def test_single_sampling_step() -> None:
    assert sampling_random_stratified(10, min_subsample=3).as_spec() == {
        "name": "random_stratified",
        "n": 10,
        "min_subsample": 3,
    }
    assert sampling_vertex_dp(20).as_spec() == {"name": "vertex_dp", "n": 20}


def test_sampling_steps_chain_in_order() -> None:
    chained = sampling_pick(10) + sampling_random(5, seed=2)
    assert chained.as_spec() == [
        {"name": "pick", "n": 10},
        {"name": "random", "n": 5, "seed": 2},
    ]


def test_sampling_none() -> None:
    assert sampling_none.as_spec() == "none"
    with pytest.raises(ValueError, match="sampling_none"):
        sampling_none + sampling_pick(1)


@pytest.mark.parametrize("n", [0, -3, 2.5, True, "10"])
def test_sampling_size_must_be_positive_int(n) -> None:
    with pytest.raises(ValueError, match="sampling_random\\(\\) n"):
        sampling_random(n)


def test_tooltip_builder_emits_every_setting() -> None:
    tips = (
        layer_tooltips(["a"])
        .line("@b")
        .format("@b", ".1f")
        .title("T")
        .anchor("top_left")
        .min_width(100)
        .disable_splitting()
    )
    assert tips.as_spec() == {
        "variables": ["a"],
        "lines": ["@b"],
        "formats": [{"field": "@b", "format": ".1f"}],
        "title": "T",
        "tooltip_anchor": "top_left",
        "tooltip_min_width": 100,
        "disable_splitting": True,
    }


def test_tooltip_builder_is_immutable() -> None:
    base = layer_tooltips()
    base.line("@x")
    assert base.as_spec() == {}


def test_empty_variable_list_is_kept() -> None:
    assert layer_tooltips([]).as_spec() == {"variables": []}


def test_tooltips_none_and_string_variables() -> None:
    assert tooltips_none.as_spec() == "none"
    with pytest.raises(TypeError, match="layer_tooltips"):
        layer_tooltips("a")
