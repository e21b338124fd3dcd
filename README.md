# puzzlekit

A small library of classic algorithm puzzles over arrays, matrices, linked
lists and trees. It is written in plain Python and needs nothing outside the
standard library.

## Install

```
pip install .
```

To run the tests, install with the test extra and run `pytest`:

```
pip install ".[test]"
pytest
```

## Modules

- `puzzlekit.nodes`: the node types `TreeNode`, `ListNode`, `NaryNode` and
  `LinkedTreeNode`, which is a `TreeNode` that also has a `next` pointer. The
  helpers `build_tree`, `tree_values`, `build_list` and `list_values` convert
  between Python lists and nodes. Nodes compare and hash by identity.
- `puzzlekit.arrays`: `two_sum`, `min_subarray_len`, `maximum_product`
  (the result is taken modulo 1e9+7), `next_permutation`,
  `find_words_containing`, `triangle_type`, `is_zero_array`, `subarray_sum`
  and `set_zeroes`.
- `puzzlekit.spiral`: `spiral_order`, `generate_matrix`, `spiral_matrix_iii`
  and `spiral_matrix_iv`. `spiral_matrix_iii` raises `ValueError` when the
  start cell lies outside the grid. `spiral_matrix_iv` fills cells that the
  list does not reach with `-1`.
- `puzzlekit.binary_tree`: `vertical_traversal`, `connect`, `del_nodes`,
  `diameter_of_binary_tree`, `merge_trees`, `preorder` (for `NaryNode`
  trees) and `distance_k`.
- `puzzlekit.bst`: `bst_from_preorder`, `delete_node` and `trim_bst`.
  `bst_from_preorder` stops at the first value it cannot place, such as a
  duplicate.

## Examples

```python
from puzzlekit.arrays import two_sum, triangle_type
from puzzlekit.spiral import generate_matrix, spiral_order
from puzzlekit.nodes import tree_values
from puzzlekit.bst import bst_from_preorder, trim_bst

two_sum([2, 7, 11, 15], 9)           # [0, 1]
triangle_type([3, 3, 3])             # "equilateral"

generate_matrix(3)                   # [[1, 2, 3], [8, 9, 4], [7, 6, 5]]
spiral_order([[1, 2, 3], [4, 5, 6]]) # [1, 2, 3, 6, 5, 4]

root = bst_from_preorder([8, 5, 1, 7, 10, 12])
tree_values(trim_bst(root, 5, 10))   # [8, 5, 10, None, 7]
```

Trees are written as level-order lists in which `None` marks a missing child.
`build_tree([1, None, 2])` builds a root with only a right child, and
`tree_values` turns a tree back into a list of that form, with trailing
`None` entries removed.

Functions that change their input in place return `None`, as Python's own
in-place operations do. These are `next_permutation` and `set_zeroes`. The
tree operations `connect`, `del_nodes`, `merge_trees`, `delete_node` and
`trim_bst` also modify the nodes they are given.

## What it does not do

puzzlekit is a library only. It has no command-line program and reads no
input files; call its functions from your own Python code.