import pytest

from binarytrees.node import binary_tree_node
from binarytrees.traversal import inorder, levelorder, postorder, preorder


@pytest.fixture
def tree():
    root = binary_tree_node(None, 98)
    root.left = binary_tree_node(root, 12)
    root.right = binary_tree_node(root, 402)
    root.left.left = binary_tree_node(root.left, 6)
    root.left.right = binary_tree_node(root.left, 56)
    root.right.left = binary_tree_node(root.right, 256)
    root.right.right = binary_tree_node(root.right, 512)
    return root


def test_preorder(tree):
    assert list(preorder(tree)) == [98, 12, 6, 56, 402, 256, 512]


def test_inorder(tree):
    assert list(inorder(tree)) == [6, 12, 56, 98, 256, 402, 512]


def test_postorder(tree):
    assert list(postorder(tree)) == [6, 56, 12, 256, 512, 402, 98]


def test_levelorder(tree):
    assert list(levelorder(tree)) == [98, 12, 402, 6, 56, 256, 512]


@pytest.mark.parametrize("walk", [preorder, inorder, postorder, levelorder])
def test_empty_tree(walk):
    assert list(walk(None)) == []


@pytest.mark.parametrize("walk", [preorder, inorder, postorder, levelorder])
def test_single_node(walk):
    assert list(walk(binary_tree_node(None, 7))) == [7]


def test_lopsided_tree():
    root = binary_tree_node(None, 1)
    root.right = binary_tree_node(root, 2)
    root.right.left = binary_tree_node(root.right, 3)
    assert list(preorder(root)) == [1, 2, 3]
    assert list(inorder(root)) == [1, 3, 2]
    assert list(postorder(root)) == [3, 2, 1]
    assert list(levelorder(root)) == [1, 2, 3]


def test_deep_tree_does_not_overflow():
    root = binary_tree_node(None, 0)
    node = root
    for value in range(1, 5000):
        node.left = binary_tree_node(node, value)
        node = node.left
    assert list(inorder(root))[0] == 4999
    assert sum(1 for _ in postorder(root)) == 5000