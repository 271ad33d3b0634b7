"""
Tests for the domain model builder.
"""
import logging

import pytest

from group_solver.core.model import GroupModel, build_model
from group_solver.errors import ConfigError, NameNotFoundError


RAW = {
    "names": ["delta", "alpha", "charlie", "bravo", "echo"],
    "groups": {
        "warm": ["echo", "alpha", "charlie"],
        "cold": ["delta", "bravo"],
    },
    "avoid": [["echo", "bravo"], ["charlie", "alpha"]],
    "ignore": ["warm"],
}


def build(raw=RAW):
    return build_model(
        raw["names"],
        raw["groups"],
        avoid_grouping=raw.get("avoid"),
        ignore_groups=raw.get("ignore"),
    )


class TestBuildModel:
    def test_names_sorted(self):
        model = build()
        assert model.names == ("alpha", "bravo", "charlie", "delta", "echo")

    def test_groups_sorted_by_name_with_sorted_members(self):
        model = build()
        assert model.groups == (
            ("cold", (1, 3)),
            ("warm", (0, 2, 4)),
        )

    def test_avoid_sets_sorted(self):
        model = build()
        assert model.avoid_grouping == ((0, 2), (1, 4))

    def test_ignore_groups_resolved(self):
        model = build()
        assert model.ignore_groups == (1,)

    def test_idempotent(self):
        assert build() == build()

    def test_input_order_irrelevant(self):
        shuffled = {
            "names": list(reversed(RAW["names"])),
            "groups": {
                "cold": ["bravo", "delta"],
                "warm": ["charlie", "echo", "alpha"],
            },
            "avoid": [["alpha", "charlie"], ["bravo", "echo"]],
            "ignore": ["warm"],
        }
        assert build(shuffled) == build()

    def test_optional_limits(self):
        model = build_model(RAW["names"], RAW["groups"])
        assert model.avoid_grouping == ()
        assert model.ignore_groups == ()

    def test_model_is_immutable(self):
        model = build()
        with pytest.raises(Exception):
            model.names = ()


class TestLookupFailures:
    def test_unknown_group_member(self):
        with pytest.raises(NameNotFoundError) as excinfo:
            build_model(["a", "b"], {"g": ["a", "zulu"]})
        assert 'name "zulu" not found' in str(excinfo.value)

    def test_unknown_avoid_member(self):
        with pytest.raises(NameNotFoundError):
            build_model(["a", "b"], {"g": ["a", "b"]}, avoid_grouping=[["a", "x"]])

    def test_unknown_ignored_group(self):
        with pytest.raises(NameNotFoundError) as excinfo:
            build_model(["a", "b"], {"g": ["a", "b"]}, ignore_groups=["h"])
        assert 'group "h" not found' in str(excinfo.value)

    def test_lookup_error_is_lookup_error(self):
        with pytest.raises(LookupError):
            build_model(["a"], {"g": ["b"]})

    def test_duplicate_item_names(self):
        with pytest.raises(ConfigError):
            build_model(["a", "b", "a"], {"g": ["a"]})


class TestDuplicates:
    def test_group_duplicates_collapsed(self, caplog):
        with caplog.at_level(logging.WARNING):
            model = build_model(["a", "b", "c"], {"g": ["c", "a", "c", "a"]})
        assert model.groups == (("g", (0, 2)),)
        assert "Collapsed duplicate members" in caplog.text

    def test_avoid_duplicates_collapsed(self):
        model = build_model(["a", "b"], {"g": ["a", "b"]}, avoid_grouping=[["b", "a", "b"]])
        assert model.avoid_grouping == ((0, 1),)

    def test_duplicate_ignores_collapsed(self):
        model = build_model(["a"], {"g": ["a"]}, ignore_groups=["g", "g"])
        assert model.ignore_groups == (0,)


class TestModelHelpers:
    def test_lookups(self):
        model = build()
        assert model.item_index("charlie") == 2
        assert model.group_index("warm") == 1
        with pytest.raises(NameNotFoundError):
            model.item_index("foxtrot")

    def test_groups_of_items(self):
        model = build_model(["a", "b", "c", "d"], {"x": ["a", "b"], "y": ["b", "c"]})
        assert model.groups_of_items() == [[0], [0, 1], [1], []]

    def test_sizes(self):
        model = build()
        assert isinstance(model, GroupModel)
        assert model.num_items == 5
        assert model.num_groups == 2
        assert model.group_names == ("cold", "warm")
