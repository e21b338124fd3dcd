from collections import Counter

from puzzlekit.binary_tree import (
    connect,
    del_nodes,
    diameter_of_binary_tree,
    distance_k,
    merge_trees,
    preorder,
    vertical_traversal,
)
from puzzlekit.nodes import LinkedTreeNode, NaryNode, TreeNode, build_tree, tree_values


def _values(root):
    return [v for v in tree_values(root) if v is not None]


def _left_chain(values):
    head = None
    for val in reversed(values):
        head = TreeNode(val, left=head)
    return head


def _right_chain(values):
    head = None
    for val in reversed(values):
        head = TreeNode(val, right=head)
    return head


def test_vertical_traversal_worked_example():
    root = build_tree([3, 9, 20, None, None, 15, 7])
    assert vertical_traversal(root) == [[9], [3, 15], [20], [7]]


def test_vertical_traversal_keeps_every_value():
    values = [1, 2, 3, 4, 5, 6, 7, None, 8, None, 9]
    columns = vertical_traversal(build_tree(values))
    flat = [v for column in columns for v in column]
    assert Counter(flat) == Counter(v for v in values if v is not None)


def test_vertical_traversal_sorts_shared_positions():
    columns = vertical_traversal(build_tree([1, 2, 3, 4, 6, 5, 7]))
    middle = columns[2]
    assert middle[0] == 1
    assert middle[1:] == sorted(middle[1:])
    assert set(middle) == {1, 5, 6}


def test_vertical_traversal_left_chain_gives_one_value_per_column():
    values = [1, 2, 3]
    assert vertical_traversal(_left_chain(values)) == [[v] for v in reversed(values)]


def test_vertical_traversal_empty():
    assert not vertical_traversal(None)


def test_connect_perfect_tree():
    d, e, f, g = (LinkedTreeNode(v) for v in (4, 5, 6, 7))
    b = LinkedTreeNode(2, d, e)
    c = LinkedTreeNode(3, f, g)
    a = LinkedTreeNode(1, b, c)
    assert connect(a) is a
    assert a.next is None
    assert b.next is c
    assert c.next is None
    assert d.next is e and e.next is f and f.next is g
    assert g.next is None


def test_connect_skips_gaps_and_clears_stale_links():
    d, e, g = (LinkedTreeNode(v) for v in (4, 5, 7))
    b = LinkedTreeNode(2, d, e)
    c = LinkedTreeNode(3, None, g)
    a = LinkedTreeNode(1, b, c)
    g.next = a
    connect(a)
    assert e.next is g
    assert g.next is None


def test_connect_none():
    assert connect(None) is None


def test_del_nodes_worked_example():
    forest = del_nodes(build_tree([1, 2, 3, 4, 5, 6, 7]), [3, 5])
    assert [tree_values(t) for t in forest] == [[6], [7], [1, 2, None, 4]]


def test_del_nodes_removes_exactly_the_deleted_values():
    values = [1, 2, 3, 4, 5, 6, 7, 8, 9, 10]
    doomed = [2, 3, 9]
    forest = del_nodes(build_tree(values), doomed)
    remaining = Counter(v for tree in forest for v in _values(tree))
    assert remaining == Counter(v for v in values if v not in doomed)


def test_del_nodes_nothing_deleted_returns_original_root():
    root = build_tree([1, 2, 3])
    forest = del_nodes(root, [])
    assert len(forest) == 1 and forest[0] is root


def test_del_nodes_root_deleted_leaves_children():
    root = build_tree([1, 2, 3])
    left, right = root.left, root.right
    forest = del_nodes(root, [1])
    assert len(forest) == 2
    assert forest[0] is left and forest[1] is right


def test_del_nodes_everything_deleted():
    assert not del_nodes(build_tree([1, 2, 3]), [1, 2, 3])


def test_diameter_of_chain():
    values = [1, 2, 3, 4, 5]
    assert diameter_of_binary_tree(_left_chain(values)) == len(values) - 1


def test_diameter_through_root():
    left = _left_chain([2, 3, 4])
    right = _right_chain([5, 6])
    root = TreeNode(1, left, right)
    assert diameter_of_binary_tree(root) == len([2, 3, 4]) + len([5, 6])


def test_diameter_not_through_root():
    left_arm = [3, 4, 5]
    right_arm = [6, 7, 8]
    hub = TreeNode(2, _left_chain(left_arm), _right_chain(right_arm))
    root = TreeNode(1, hub)
    assert diameter_of_binary_tree(root) == len(left_arm) + len(right_arm)


def test_diameter_single_node_equals_empty():
    assert diameter_of_binary_tree(TreeNode(1)) == diameter_of_binary_tree(None)
    assert not diameter_of_binary_tree(None)


def test_merge_trees_with_identical_shapes_doubles_values():
    values = [1, 3, 2, 5, None, 4]
    merged = merge_trees(build_tree(values), build_tree(values))
    assert tree_values(merged) == [None if v is None else 2 * v for v in values]


def test_merge_trees_sum_preserved():
    first = [1, 3, 2, 5]
    second = [2, 1, 3, None, 4, None, 7]
    merged = merge_trees(build_tree(first), build_tree(second))
    total = sum(v for v in first + second if v is not None)
    assert sum(_values(merged)) == total


def test_merge_trees_with_missing_side():
    root = build_tree([1, 2])
    assert merge_trees(None, root) is root
    assert merge_trees(root, None) is root
    assert merge_trees(None, None) is None


def test_merge_trees_shares_subtrees_from_second():
    first = TreeNode(1)
    second = build_tree([2, 3])
    merged = merge_trees(first, second)
    assert merged is first
    assert merged.left is second.left


def test_preorder_nary():
    root = NaryNode(1, [NaryNode(2, [NaryNode(3), NaryNode(4)]), NaryNode(5), NaryNode(6)])
    assert preorder(root) == list(range(1, 7))


def test_preorder_empty():
    assert not preorder(None)


def test_distance_k_worked_example():
    root = build_tree([3, 5, 1, 6, 2, 0, 8, None, None, 7, 4])
    assert distance_k(root, root.left, 2) == [7, 4, 1]


def test_distance_k_zero_is_target():
    root = build_tree([3, 5, 1])
    assert distance_k(root, root.right, 0) == [root.right.val]


def test_distance_k_one_is_neighbours():
    root = build_tree([3, 5, 1, 6, 2, 0, 8])
    target = root.left
    expected = [target.left.val, target.right.val, root.val]
    assert sorted(distance_k(root, target, 1)) == sorted(expected)


def test_distance_k_beyond_tree():
    root = build_tree([1, 2, 3])
    assert not distance_k(root, root, 5)