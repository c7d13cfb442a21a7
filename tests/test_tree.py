from tree_ import BinaryTreeNode


def test_leaf_node():
    node = BinaryTreeNode(4)
    assert node.value == 4
    assert node.left is None
    assert node.right is None


def test_node_owns_children():
    left = BinaryTreeNode(1)
    right = BinaryTreeNode(3)
    root = BinaryTreeNode(2, left=left, right=right)
    assert root.left is left
    assert root.right is right
    assert root.left.left is None
    assert not hasattr(left, "parent")
