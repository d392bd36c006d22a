from __future__ import annotations

from dataclasses import dataclass

import pytest

from gg_toolkit.geom_capabilities import ViolinAesthetics
from gg_toolkit.Options import Options, OptionsCapsule, merge_fragments, seal_all
from gg_toolkit.stat_capabilities import BoxplotStatParameters


@dataclass(frozen=True)
class _Aesthetics(OptionsCapsule):
    fill: str | None = None
    alpha: float | None = None


@dataclass(frozen=True)
class _ColorOption(OptionsCapsule):
    fill: str | None = None
    color_by: str | None = None


def test_unset_values_are_omitted() -> None:
    doc = Options.of(color="red", size=None, alpha=0.5)
    assert doc.to_dict() == {"color": "red", "alpha": 0.5}
    assert "size" not in doc


def test_falsy_values_are_kept_verbatim() -> None:
    doc = Options.of(alpha=0, show=False, label="", breaks=[])
    assert doc.to_dict() == {"alpha": 0, "show": False, "label": "", "breaks": []}


def test_merge_later_fragment_wins_and_keeps_first_position() -> None:
    merged = merge_fragments(Options.of(a=1, b=2), Options.of(b=3, c=4))
    assert merged.to_dict() == {"a": 1, "b": 3, "c": 4}
    assert list(merged) == ["a", "b", "c"]


def test_plus_operator_merges_like_merge_fragments() -> None:
    doc = Options.of(color="red", alpha=0) + Options.of(color="blue")
    assert doc.to_dict() == {"color": "blue", "alpha": 0}


def test_plus_with_non_mapping_raises_type_error() -> None:
    with pytest.raises(TypeError):
        Options.of(a=1) + 1


def test_options_are_read_only() -> None:
    doc = Options.of(a=1)
    with pytest.raises(TypeError):
        doc["a"] = 2  # type: ignore[index]


def test_non_string_keys_are_rejected() -> None:
    with pytest.raises(TypeError, match="keys must be str"):
        Options({1: "x"})


def test_to_dict_converts_nested_documents_and_tuples() -> None:
    doc = Options.of(outer=Options.of(inner=(1, 2)), items=[Options.of(k="v")])
    assert doc.to_dict() == {"outer": {"inner": [1, 2]}, "items": [{"k": "v"}]}


def test_to_dict_does_not_share_containers_with_the_document() -> None:
    doc = Options.of(values=[1])
    emitted = doc.to_dict()
    emitted["values"].append(2)
    assert doc.to_dict()["values"] == [1]


def test_capsule_seals_fields_in_declaration_order() -> None:
    fragment = _Aesthetics(alpha=0.3, fill="A").seal()
    assert list(fragment) == ["fill", "alpha"]


def test_capsule_option_keys_rename_fields() -> None:
    assert ViolinAesthetics(violin_width=0.5, alpha=0).seal().to_dict() == {
        "violinwidth": 0.5,
        "alpha": 0,
    }
    assert BoxplotStatParameters(var_width=True).seal().to_dict() == {"varwidth": True}


def test_later_capability_overrides_shared_key() -> None:
    merged = seal_all([_Aesthetics(fill="A", alpha=0.1), _ColorOption(fill="B")])
    assert merged.to_dict() == {"fill": "B", "alpha": 0.1}


def test_capability_order_decides_the_winner() -> None:
    merged = seal_all([_ColorOption(fill="B"), _Aesthetics(fill="A")])
    assert merged["fill"] == "A"


def test_sealing_is_deterministic() -> None:
    capsule = _Aesthetics(fill="A", alpha=0.1)
    assert capsule.seal() == capsule.seal()
    assert capsule.seal().to_dict() == capsule.seal().to_dict()


def test_document_keeps_values_given_at_construction() -> None:
    values = [1, 2]
    nested = {"inner": [3]}
    doc = Options.of(values=values, nested=nested)
    values.append(99)
    nested["inner"].append(99)
    nested["extra"] = True
    assert doc.to_dict() == {"values": [1, 2], "nested": {"inner": [3]}}


def test_capsule_keeps_values_given_at_construction() -> None:
    fills = ["A", "B"]
    capsule = _Aesthetics(fill=fills)
    fills.append("C")
    assert capsule.seal().to_dict() == {"fill": ["A", "B"]}


def test_document_equality_ignores_container_kind() -> None:
    assert Options.of(margin=(1, 2)) == {"margin": [1, 2]}
    assert Options.of(margin=(1, 2)) != {"margin": [1, 3]}
