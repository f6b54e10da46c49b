# codekata

Solutions to well-known algorithm exercises. Each one is a plain function or a small class. They work on ordinary Python values, plus two simple node types for linked lists and binary trees.

## Installation

```
pip install .
```

To install the test tools and run the tests:

```
pip install ".[test]"
pytest
```

## Linked lists

Lists are built from `ListNode` values (`codekata.linked_list`). A `ListNode` can be iterated to get its values. `from_list` turns a Python list into a chain of nodes and gives `None` for an empty list. `to_list` turns a chain back into a list.

```python
from codekata.linked_list import from_list, to_list
from codekata.list_arithmetic import add_two_numbers
from codekata.list_sorting import merge_k_lists

# 342 + 465 = 807, digits stored least significant first
print(to_list(add_two_numbers(from_list([2, 4, 3]), from_list([5, 6, 4]))))  # [7, 0, 8]

print(to_list(merge_k_lists([from_list([1, 4, 5]), from_list([1, 3, 4]), from_list([2, 6])])))
# [1, 1, 2, 3, 4, 4, 5, 6]
```

| Module | Functions |
| --- | --- |
| `codekata.list_arithmetic` | `add_two_numbers`, `add_two_numbers_forward` |
| `codekata.list_removal` | `delete_node`, `remove_elements`, `remove_nth_from_end` |
| `codekata.list_reversal` | `reverse_list`, `reverse_list_recursive`, `reverse_print` |
| `codekata.list_reordering` | `middle_node`, `odd_even_list`, `rotate_right` |
| `codekata.list_dedup` | `delete_duplicates`, `delete_all_duplicates` |
| `codekata.list_sorting` | `merge_k_lists`, `sort_list` |

Most of these relink the nodes they are given rather than copying them.

## Trees

`tree_from_level_order` (`codekata.tree_node`) builds a `TreeNode` tree from level-order values. `None` marks a missing child.

```python
from codekata.tree_node import tree_from_level_order
from codekata.trees import Codec, invert_tree

root = tree_from_level_order([4, 2, 7, 1, 3, 6, 9])
mirrored = invert_tree(root)  # mirrors the tree in place

codec = Codec()
text = codec.serialize(tree_from_level_order([2, 1, 3]))  # post-order values separated by spaces
copy = codec.deserialize(text)
```

## Strings and parsing

```python
from codekata.strings import decode_string, compare_version, is_subsequence, Matching
from codekata.number_parsing import is_number, my_atoi
from codekata.tag_validator import is_valid
from codekata.paths import simplify_path, length_longest_path

decode_string("3[a2[c]]")                 # "accaccacc"
compare_version("7.5.2.4", "7.5.3")       # -1
is_subsequence("abc", "ahbgdc")           # True
Matching("ahbgdc").is_match("abc")        # True
is_number(" 005047e+6")                   # True
my_atoi("   -42")                         # -42
is_valid("<DIV>This is the first line <![CDATA[<div>]]></DIV>")  # True
simplify_path("/a/./b/../../c/")          # "/c"
length_longest_path("dir\n\tsubdir1\n\tsubdir2\n\t\tfile.ext")  # 20
```

`Matching` prepares one lowercase target for many subsequence queries.

`codekata.parentheses` provides `longest_valid_parentheses` and `generate_parenthesis`.

## Numbers, bits and arrays

| Module | Functions |
| --- | --- |
| `codekata.bits` | `is_power_of_two`, `single_numbers`, `find_error_nums`, `integer_replacement` |
| `codekata.utf8_validation` | `valid_utf8` |
| `codekata.sequences` | `fib`, `fib_mod`, `pascal_rows`, `generate`, `get_row`, `find_nth_digit`, `my_pow` |
| `codekata.combinatorics` | `subsets`, `subsets_with_dup`, `combination_sum4` |
| `codekata.arrays` | `two_sum`, `search_range`, `first_missing_positive`, `find_max_consecutive_ones` |
| `codekata.array_ops` | `remove_duplicates`, `merge`, `min_path_sum`, `max_sliding_window`, `num_identical_pairs` |

`pascal_rows()` is an endless generator of the rows of Pascal's triangle. `remove_duplicates` and `merge` change the list they are given in place.

## Constant-time counters

`AllOne` (`codekata.all_one`) counts string keys. It can return a key with the highest count or the lowest count in O(1); both give `""` when it holds no keys.

```python
from codekata.all_one import AllOne

counter = AllOne()
for key in ["a", "b", "b", "c", "c", "c"]:
    counter.inc(key)
counter.get_max_key()  # "c"
counter.get_min_key()  # "a"
counter.dec("a")       # "a" reaches 0 and is dropped
```

## Errors

Several functions check their inputs and raise `ValueError` when they are out of range: for example `fib` and `fib_mod` for an index out of bounds, `max_sliding_window` for a window size larger than the array, `rotate_right` for a negative `k`, `remove_nth_from_end` when the list is too short, `merge` and `min_path_sum` for badly sized input, and `Matching.is_match` for characters that are not lowercase letters.

## What it does not do

This is a library only. It has no command-line tool and reads no files; every function works on the values passed to it.