"""Tests for Ref — getter/setter backing stores."""

import pytest

from propwire import Ref


class _Node:
    def __init__(self, child=None):
        self.value = 0
        self.child = child


class TestRef:
    def test_get_set(self):
        box = {"v": 1}
        ref = Ref(lambda: box["v"], lambda v: box.__setitem__("v", v))
        assert ref.value == 1
        ref.value = 2
        assert box == {"v": 2}

    def test_requires_getter(self):
        with pytest.raises(ValueError):
            Ref(None, lambda v: None)

    def test_requires_setter(self):
        with pytest.raises(ValueError):
            Ref(lambda: 1, None)

    def test_attribute(self):
        node = _Node()
        ref = Ref.attribute(node, "value")
        ref.value = 5
        assert node.value == 5

    def test_attribute_requires_parent(self):
        with pytest.raises(ValueError):
            Ref.attribute(None, "value")


class TestPath:
    def test_single_member(self):
        node = _Node()
        Ref.path(node, "value").value = 3
        assert node.value == 3

    def test_member_chain_binds_owner(self):
        leaf = _Node()
        root = _Node(child=_Node(child=leaf))
        ref = Ref.path(root, "child.child.value")
        ref.value = 9
        assert leaf.value == 9

    def test_owner_resolved_once(self):
        first = _Node()
        root = _Node(child=first)
        ref = Ref.path(root, "child.value")
        root.child = _Node()
        ref.value = 4
        assert first.value == 4
        assert root.child.value == 0

    def test_static_member_rejected(self):
        with pytest.raises(ValueError, match="static member"):
            Ref.path(_Node, "value")

    def test_empty_path_rejected(self):
        with pytest.raises(ValueError):
            Ref.path(_Node(), "")

    def test_non_member_access_rejected(self):
        with pytest.raises(ValueError):
            Ref.path(_Node(), "child[0].value")

    def test_none_in_chain_rejected(self):
        with pytest.raises(ValueError):
            Ref.path(_Node(), "child.value")

    def test_attribute_default_while_unset(self):
        node = _Node()
        ref = Ref.attribute(node, "missing", None)
        assert ref.value is None
        ref.value = 2
        assert node.missing == 2
