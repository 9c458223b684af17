from binarytrees.node import binary_tree_node
from binarytrees.rotate import rotate_left, rotate_right
from binarytrees.traversal import levelorder


def _check_links(node):
    for child in (node.left, node.right):
        if child is not None:
            assert child.parent is node
            _check_links(child)


def test_rotate_left_sequence():
    root = binary_tree_node(None, 98)
    root.right = binary_tree_node(root, 128)
    root.right.right = binary_tree_node(root.right, 402)

    root = rotate_left(root)
    assert root.value == 128
    assert root.parent is None
    assert root.left.value == 98
    assert root.right.value == 402
    _check_links(root)

    root.right.right = binary_tree_node(root.right, 450)
    root.right.left = binary_tree_node(root.right, 420)
    root = rotate_left(root)
    assert root.value == 402
    assert list(levelorder(root)) == [402, 128, 450, 98, 420]
    assert root.left.right.value == 420
    _check_links(root)


def test_rotate_right_sequence():
    root = binary_tree_node(None, 98)
    root.left = binary_tree_node(root, 64)
    root.left.left = binary_tree_node(root.left, 32)

    root = rotate_right(root)
    assert root.value == 64
    assert root.parent is None
    assert root.left.value == 32
    assert root.right.value == 98
    _check_links(root)

    root.left.left = binary_tree_node(root.left, 20)
    root.left.right = binary_tree_node(root.left, 56)
    root = rotate_right(root)
    assert root.value == 32
    assert list(levelorder(root)) == [32, 20, 64, 56, 98]
    assert root.right.left.value == 56
    _check_links(root)


def test_rotate_without_child_returns_none_and_keeps_tree():
    root = binary_tree_node(None, 5)
    root.left = binary_tree_node(root, 3)
    assert rotate_left(root) is None
    assert root.left.value == 3 and root.right is None
    leaf = binary_tree_node(None, 1)
    assert rotate_right(leaf) is None
    assert rotate_left(None) is None
    assert rotate_right(None) is None


def test_rotate_subtree_updates_grandparent():
    root = binary_tree_node(None, 10)
    root.right = binary_tree_node(root, 20)
    root.right.right = binary_tree_node(root.right, 30)
    new_sub = rotate_left(root.right)
    assert new_sub.value == 30
    assert root.right is new_sub
    assert new_sub.parent is root
    assert new_sub.left.value == 20
    _check_links(root)


def test_rotations_are_inverse():
    root = binary_tree_node(None, 2)
    root.left = binary_tree_node(root, 1)
    root.right = binary_tree_node(root, 4)
    root.right.left = binary_tree_node(root.right, 3)
    root.right.right = binary_tree_node(root.right, 5)
    before = list(levelorder(root))
    back = rotate_right(rotate_left(root))
    assert back is root
    assert list(levelorder(back)) == before
    _check_links(back)