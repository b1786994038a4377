import pytest

from utils.json_path import dict_items, first_of, first_of_strategies, nav, scan_for


TREE = {"a": {"b": [{"c": "deep"}, {"c": 2}]}, "n": None}


@pytest.mark.parametrize(
    "path, expected_type, result",
    [
        (("a", "b", 0, "c"), None, "deep"),
        (("a", "b", 1, "c"), int, 2),
        (("a", "b", 1, "c"), str, None),
        (("a", "b", 5, "c"), None, None),
        (("a", "x"), None, None),
        (("a", 0), None, None),
        (("a", "b", "c"), None, None),
        (("n",), None, None),
        ((), dict, TREE),
    ],
)
def test_nav(path, expected_type, result):
    assert nav(TREE, path, expected_type) == result


def test_nav_on_non_container_returns_none():
    assert nav("text", ("a",)) is None
    assert nav(None, (0,)) is None


def test_first_of_returns_first_matching_path():
    assert first_of(TREE, [("missing",), ("a", "b", 1, "c")], int) == 2
    assert first_of(TREE, [("missing",), ("also", "missing")]) is None


def test_dict_items_skips_non_dicts():
    assert list(dict_items([{"a": 1}, "x", None, {"b": 2}])) == [{"a": 1}, {"b": 2}]
    assert list(dict_items("not a list")) == []


def test_first_of_strategies_skips_empty_results():
    calls = []

    def empty(tree):
        calls.append("empty")
        return []

    def hit(tree):
        calls.append("hit")
        return ["found"]

    def never(tree):
        calls.append("never")
        return ["late"]

    assert first_of_strategies([empty, hit, never], {}) == ["found"]
    assert calls == ["empty", "hit"]


def _target(node):
    return node.get("target")


def test_scan_for_finds_nested_value():
    tree = {"x": {"y": [{"z": {"target": "here"}}]}}
    assert scan_for(tree, _target) == "here"


def test_scan_for_respects_source_order():
    tree = {"first": {"target": 1}, "second": {"target": 2}}
    assert scan_for(tree, _target) == 1


def test_scan_for_is_depth_bounded():
    tree = {"a": {"b": {"c": {"target": "deep"}}}}
    assert scan_for(tree, _target, max_depth=3) is None
    assert scan_for(tree, _target, max_depth=4) == "deep"


def test_scan_for_lists_do_not_add_depth():
    tree = {"a": [[{"target": "in list"}]]}
    assert scan_for(tree, _target, max_depth=2) == "in list"


def test_scan_for_non_container():
    assert scan_for("nope", _target) is None
