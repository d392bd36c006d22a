"""Property-based tests for sealing, omission and override order.

These complement the example-based tests with generated parameter sets so the
merge rules hold for arbitrary keys and values, not only the hand-picked ones.
"""

from __future__ import annotations

from dataclasses import dataclass

import pytest

from gg_toolkit import geom_bar, geom_line, geom_point, ggplot
from gg_toolkit.Options import OptionsCapsule, merge_fragments, seal_all

try:
    from hypothesis import HealthCheck, given, settings
    from hypothesis import strategies as st
except ModuleNotFoundError:  # pragma: no cover - environment-specific fallback
    pytest.skip("hypothesis is required for property-based tests", allow_module_level=True)


@dataclass(frozen=True)
class _Aesthetics(OptionsCapsule):
    fill: object = None


@dataclass(frozen=True)
class _ColorOption(OptionsCapsule):
    fill: object = None


POINT_OPTIONS = ("alpha", "color", "fill", "shape", "size", "stroke")
# Any non-None value must survive sealing unchanged, falsy ones included.
PRESENT_VALUES = st.one_of(
    st.just(0),
    st.just(""),
    st.booleans(),
    st.integers(min_value=-1000, max_value=1000),
    st.floats(allow_nan=False, allow_infinity=False),
    st.text(max_size=8),
)
BUILDERS = {"bar": geom_bar, "line": geom_line, "point": geom_point}
# The first example pays for import warm-up.
RELAXED = settings(suppress_health_check=[HealthCheck.too_slow], deadline=None)


@RELAXED
@given(options=st.dictionaries(st.sampled_from(POINT_OPTIONS), PRESENT_VALUES))
def test_given_options_are_emitted_exactly(options: dict[str, object]) -> None:
    """Supplied options appear with their value; omitted ones never appear."""
    sealed = geom_point(**options).seal().to_dict()
    assert sealed == options


@RELAXED
@given(options=st.dictionaries(st.sampled_from(POINT_OPTIONS), PRESENT_VALUES))
def test_sealing_is_byte_identical(options: dict[str, object]) -> None:
    p = ggplot() + geom_point(**options)
    assert p.to_json() == p.to_json()
    assert (ggplot() + geom_point(**options)).to_json() == p.to_json()


@RELAXED
@given(first=PRESENT_VALUES, second=PRESENT_VALUES)
def test_later_capability_wins_shared_key(first: object, second: object) -> None:
    merged = seal_all([_Aesthetics(fill=first), _ColorOption(fill=second)])
    assert merged.to_dict() == {"fill": second}


@RELAXED
@given(
    left=st.dictionaries(st.text(max_size=4), st.integers()),
    right=st.dictionaries(st.text(max_size=4), st.integers()),
)
def test_merge_matches_dict_update_semantics(
    left: dict[str, int], right: dict[str, int]
) -> None:
    merged = merge_fragments(left, right)
    expected = {**left, **right}
    assert merged.to_dict() == expected
    assert list(merged) == list(expected)


@RELAXED
@given(kinds=st.lists(st.sampled_from(sorted(BUILDERS)), max_size=8))
def test_plot_keeps_layer_insertion_order(kinds: list[str]) -> None:
    p = ggplot()
    for kind in kinds:
        p = p + BUILDERS[kind]()
    assert [layer["geom"] for layer in p.as_dict()["layers"]] == kinds
