"""
Tests for the serializable form and the dict / JSON codecs
"""

import json
import uuid
from dataclasses import dataclass

import pytest

from treelog.computation import DescribedComputation, success, failure
from treelog.labels import described_label, undescribed_label
from treelog.outcome import Success, Failure
from treelog.serialization import (
    SerializableTree,
    to_serializable_form,
    from_serializable_form,
    label_to_dict,
    label_from_dict,
    tree_from_dict,
    outcome_from_dict,
    to_dict,
    from_dict,
    dumps,
    loads,
)
from treelog.syntax import map_each
from treelog.tree import leaf, node


@dataclass(frozen=True)
class Thing:
    id: int
    name: str


def thing_to_dict(thing):
    return {"id": thing.id, "name": thing.name}


def thing_from_dict(d):
    return Thing(d["id"], d["name"])


def sample_computation():
    return (
        success(Thing(1, "one"), "Here's one")
        .annotate_with(Thing(10, "ten"))
        .and_then(lambda t: success(Thing(t.id + 1, "two"), "And two"))
        .describe("Things")
    )


class TestSerializableForm:
    def test_structure_mirrors_tree(self):
        dc = sample_computation()
        sdc = to_serializable_form(dc)
        assert sdc.outcome == dc.outcome
        assert isinstance(sdc.tree, SerializableTree)
        assert sdc.tree.label == dc.tree.label
        assert [c.label for c in sdc.tree.children] == [c.label for c in dc.tree.children]

    def test_round_trip(self):
        dc = sample_computation()
        assert from_serializable_form(to_serializable_form(dc)) == dc

    def test_shared_subtrees(self):
        shared = leaf(described_label("shared", True))
        tree = node(undescribed_label(True), [shared, shared])
        dc = DescribedComputation(Success(1), tree)
        assert from_serializable_form(to_serializable_form(dc)) == dc

    def test_deep_tree(self):
        tree = leaf(described_label("bottom", False))
        for i in range(20000):
            tree = node(described_label(f"level {i}", True), [tree])
        dc = DescribedComputation(Failure("bottom"), tree)
        restored = from_serializable_form(to_serializable_form(dc))
        assert restored == dc


class TestDictCodec:
    def test_described_label(self):
        label = described_label("Step", False, {"b", "a"})
        assert label_to_dict(label) == {"success": False, "annotations": ["a", "b"], "description": "Step"}

    def test_undescribed_label_has_no_description(self):
        assert label_to_dict(undescribed_label(True)) == {"success": True, "annotations": []}

    @pytest.mark.parametrize("label", [
        described_label("Step", True),
        described_label("", False, {1, 2}),
        undescribed_label(False, {"x"}),
    ])
    def test_label_round_trip(self, label):
        assert label_from_dict(label_to_dict(label)) == label

    def test_success_layout(self):
        assert to_dict(success(3, "Three")) == {
            "outcome": {"Right": 3},
            "tree": {
                "label": {"success": True, "annotations": [], "description": "Three"},
                "children": [],
            },
        }

    def test_failure_layout(self):
        assert to_dict(failure("Boo"))["outcome"] == {"Left": "Boo"}

    def test_round_trip_with_encoders(self):
        dc = sample_computation()
        d = to_dict(dc, thing_to_dict, thing_to_dict)
        assert d["outcome"] == {"Right": {"id": 2, "name": "two"}}
        restored = from_dict(d, thing_from_dict, thing_from_dict)
        assert restored == dc
        assert restored.all_annotations() == frozenset({Thing(10, "ten")})

    def test_json_round_trip(self):
        dc = map_each("Numbers", [1, 2, 3], lambda x: success(x * 2, f"Doubled {x}"))
        text = dumps(dc, sort_keys=True)
        assert json.loads(text)["outcome"] == {"Right": [2, 4, 6]}
        assert loads(text) == dc

    def test_json_continuation_after_load(self):
        original = success(1, "Loaded").annotate_with(str(uuid.UUID(int=7)))
        restored = loads(dumps(original))
        continued = restored.and_then(lambda x: success(x + 1, "FTW!")).describe("Resumed")
        assert continued.value == 2
        assert continued.show() == f"Resumed\n  Loaded - [{uuid.UUID(int=7)}]\n  FTW!"

    def test_deep_tree_dicts(self):
        tree = leaf(described_label("bottom", True))
        for i in range(20000):
            tree = node(described_label(f"level {i}", True), [tree])
        dc = DescribedComputation(Success(None), tree)
        assert from_dict(to_dict(dc)) == dc

    @pytest.mark.parametrize("d", [
        {"tree": {"label": {"success": True}}},
        {"outcome": {"Right": 1}},
        {"outcome": {"Middle": 1}, "tree": {"label": {"success": True}}},
        {"outcome": {"Right": 1}, "tree": {"children": []}},
        {"outcome": {"Right": 1}, "tree": {"label": {"description": "no flag"}}},
        "not a dict",
        {"outcome": "Right", "tree": {"label": {"success": True}}},
        {"outcome": {"Right": 1}, "tree": ["label"]},
        {"outcome": {"Right": 1}, "tree": {"label": "success"}},
        {"outcome": {"Right": 1}, "tree": {"label": {"success": True}, "children": [3]}},
        {"outcome": {"Right": 1}, "tree": {"label": {"success": True}, "children": {"a": 1}}},
    ])
    def test_malformed(self, d):
        with pytest.raises(ValueError):
            from_dict(d)

    @pytest.mark.parametrize("decode, bad", [
        (label_from_dict, "success"),
        (label_from_dict, None),
        (tree_from_dict, ["label"]),
        (outcome_from_dict, "Right"),
    ])
    def test_non_dict_input(self, decode, bad):
        with pytest.raises(ValueError):
            decode(bad)

    def test_outcome_from_dict(self):
        assert outcome_from_dict({"Left": "Boo"}) == Failure("Boo")
        assert outcome_from_dict({"Right": "1"}, int) == Success(1)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
