import pytest

from algokit.avl import (
    AVLNode,
    balance,
    describe,
    height,
    rotate_left,
    rotate_left_right,
    rotate_right,
    rotate_right_left,
    update_height,
)


def _values(node):
    if node is None:
        return []
    return _values(node.left) + [node.data] + _values(node.right)


def _heights_consistent(node):
    if node is None:
        return True
    expected = 1 + max(height(node.left), height(node.right))
    return (
        node.height == expected
        and _heights_consistent(node.left)
        and _heights_consistent(node.right)
    )


def _fix_heights(node):
    if node is not None:
        _fix_heights(node.left)
        _fix_heights(node.right)
        update_height(node)
    return node


def test_empty_subtree():
    assert height(None) == 0
    assert balance(None) == 0


def test_update_height_of_leaf_and_parent():
    leaf = AVLNode(5)
    parent = AVLNode(10, left=leaf)
    update_height(parent)
    assert parent.height == leaf.height + 1
    assert balance(parent) == leaf.height


def test_rotate_right_on_left_chain():
    root = _fix_heights(AVLNode(30, left=AVLNode(20, left=AVLNode(10))))
    before = _values(root)
    new_root = rotate_right(root)
    assert new_root.data == 20
    assert new_root.left.data == 10 and new_root.right.data == 30
    assert _values(new_root) == before
    assert _heights_consistent(new_root)
    assert balance(new_root) == height(new_root.left) - height(new_root.right)
    assert height(new_root.left) == height(new_root.right)


def test_rotate_left_on_right_chain():
    root = _fix_heights(AVLNode(10, right=AVLNode(20, right=AVLNode(30))))
    before = _values(root)
    new_root = rotate_left(root)
    assert new_root.data == 20
    assert _values(new_root) == before
    assert _heights_consistent(new_root)
    assert height(new_root.left) == height(new_root.right)


def test_rotate_left_right():
    root = _fix_heights(AVLNode(30, left=AVLNode(10, right=AVLNode(20))))
    before = _values(root)
    new_root = rotate_left_right(root)
    assert new_root.data == 20
    assert new_root.left.data == 10 and new_root.right.data == 30
    assert _values(new_root) == before
    assert _heights_consistent(new_root)


def test_rotate_right_left():
    root = _fix_heights(AVLNode(10, right=AVLNode(30, left=AVLNode(20))))
    before = _values(root)
    new_root = rotate_right_left(root)
    assert new_root.data == 20
    assert new_root.left.data == 10 and new_root.right.data == 30
    assert _values(new_root) == before
    assert _heights_consistent(new_root)


def test_rotation_keeps_inner_subtree():
    inner = AVLNode(25)
    root = _fix_heights(
        AVLNode(30, left=AVLNode(20, left=AVLNode(10), right=inner), right=AVLNode(40))
    )
    before = _values(root)
    new_root = rotate_right(root)
    assert new_root.right.left is inner
    assert _values(new_root) == before
    assert _heights_consistent(new_root)


@pytest.mark.parametrize(
    "rotation", [rotate_right, rotate_left, rotate_left_right, rotate_right_left]
)
def test_rotation_of_leaf_raises(rotation):
    with pytest.raises(ValueError):
        rotation(AVLNode(1))


def test_describe_sample_tree():
    root = AVLNode(1, left=AVLNode(2, left=AVLNode(4), right=AVLNode(5)), right=AVLNode(3))
    _fix_heights(root)
    lines = describe(root).splitlines()
    assert len(lines) == 15
    names = [line for line in lines if line.startswith("Node ")]
    assert names == [f"Node {value}" for value in _values(root)]
    assert lines[0:3] == ["Node 4", f"Height= {height(root.left.left)}.", "BF= 0."]


def test_describe_empty():
    assert describe(None) == ""