"""Tests for container nodes.

Critical Invariants:
- A container is dirty iff any child is dirty, recomputed on every read
- The key set is fixed at construction
- An empty container is never dirty and has no get/set
"""

import copy
import pickle

import pytest

from dirtyproxy import ContainerNode, FieldNode, Trackable, build


def test_flat_object_mirrors_keys():
    node = build({"a": 1, "b": 2})

    assert isinstance(node, ContainerNode)
    assert list(node) == ["a", "b"]
    assert isinstance(node.a, FieldNode)
    assert isinstance(node.b, FieldNode)
    assert node.is_dirty is False


def test_child_mutation_dirties_parent_only_through_that_child():
    node = build({"a": 1, "b": 2})

    node.a.set(99)

    assert node.is_dirty is True
    assert node.a.is_dirty is True
    assert node.b.is_dirty is False


def test_empty_object_is_clean_and_has_no_fields():
    node = build({})

    assert isinstance(node, ContainerNode)
    assert node.is_dirty is False
    assert len(node) == 0
    assert not hasattr(node, "get")
    assert not hasattr(node, "set")


def test_container_never_caches_dirtiness():
    """CRITICAL: Ancestors are not notified of child sets, so reads must recompute.

    Why: A cached answer would go stale after any descendant set().
    """
    node = build({"a": 1})
    assert not node.is_dirty

    node.a.set(2)
    assert node.is_dirty

    node.a.set(1)
    assert not node.is_dirty


def test_key_named_is_dirty_is_a_child_not_the_accessor():
    """The accessor is never scanned as a child; a real key of that name still is."""
    node = build({"is_dirty": False, "other": 1})

    assert node.is_dirty is False
    assert isinstance(node["is_dirty"], FieldNode)

    node["is_dirty"].set(True)
    assert node.is_dirty is True


def test_item_and_attribute_access_agree():
    node = build({"x": {"y": 1}})

    assert node["x"] is node.x
    assert node["x"]["y"] is node.x.y


def test_non_identifier_keys_need_item_access():
    node = build({"zima-blue": 20, 3: "three"})

    assert node["zima-blue"].get() == 20
    assert node[3].get() == "three"


def test_unknown_key_raises_key_error():
    node = build({"a": 1})

    with pytest.raises(KeyError):
        node["missing"]


def test_unknown_attribute_raises_attribute_error():
    node = build({"a": 1})

    with pytest.raises(AttributeError, match="no key 'missing'"):
        node.missing


def test_key_set_is_fixed():
    """Children cannot be added, replaced or removed after construction."""
    node = build({"a": 1})

    with pytest.raises(TypeError):
        node["b"] = build(2)  # type: ignore[index]
    with pytest.raises(TypeError):
        del node["a"]  # type: ignore[attr-defined]
    with pytest.raises(AttributeError, match="keys are fixed"):
        node.a = build(2)
    with pytest.raises(AttributeError, match="keys are fixed"):
        del node.a

    assert list(node) == ["a"]


def test_mapping_like_surface():
    node = build({"a": 1, "b": {"c": 2}})

    assert "a" in node
    assert "c" not in node
    assert list(node.keys()) == ["a", "b"]
    assert [key for key, _ in node.items()] == ["a", "b"]
    assert all(isinstance(child, Trackable) for child in node.values())


def test_source_type_records_mirrored_type():
    assert build({"a": 1}).source_type is dict
    assert build([1, 2]).source_type is list


def test_dir_lists_identifier_keys():
    node = build({"alpha": 1, "not-an-identifier": 2})

    assert "alpha" in dir(node)
    assert "not-an-identifier" not in dir(node)
    assert "is_dirty" in dir(node)


def test_copy_keeps_children_shared():
    node = build({"a": 1})

    duplicate = copy.copy(node)

    assert duplicate is not node
    assert duplicate.a is node.a
    assert duplicate.source_type is dict


def test_deepcopy_preserves_dirty_state_independently():
    node = build({"a": {"b": 1}})
    node.a.b.set(2)

    duplicate = copy.deepcopy(node)

    assert duplicate.is_dirty
    assert duplicate.a.b.origin == 1
    duplicate.a.b.set(1)
    assert not duplicate.is_dirty
    assert node.is_dirty


def test_pickle_round_trip_keeps_origin_and_current():
    node = build({"a": [1, 2]})
    node.a[0].set(5)

    restored = pickle.loads(pickle.dumps(node))

    assert list(restored) == ["a"]
    assert restored.a[0].get() == 5
    assert restored.a[0].origin == 1
    assert restored.is_dirty


def test_container_is_trackable():
    assert isinstance(build({}), Trackable)


def test_repr_marks_dirty_containers():
    node = build({"a": 1})
    assert repr(node) == "ContainerNode<dict>('a')"

    node.a.set(2)
    assert repr(node) == "ContainerNode*<dict>('a')"
