# codekata

A collection of classic coding exercises written as plain, importable Python:
binary-tree traversals and queries, array and string puzzles, linked-list
arithmetic, simple sorts, and a few small patterns around threads, files and
sockets.

The package uses only the standard library.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Modules

| Module | What it holds |
| --- | --- |
| `codekata.tree` | `TreeNode`, `insert_level_order`, `build_tree`, and the traversals `preorder`, `preorder_iterative`, `inorder`, `inorder_iterative`, `postorder`, `postorder_two_stacks`, `postorder_iterative`, `level_order`, `reverse_level_order` |
| `codekata.tree_metrics` | `size`, `size_iterative`, `height`, `height_iterative`, `height_with_markers`, `deepest_node`, `min_depth`, `min_depth_bfs`, `count_leaves`, `count_full_nodes`, `count_half_nodes`, `find_max`, `find_max_iterative` |
| `codekata.tree_search` | `contains`, `max_level_sum`, `total_sum`, `total_sum_recursive`, `has_path_sum`, `has_path_sum_recursive`, `ancestors`, `ancestors_of_value`, `root_to_leaf_paths` |
| `codekata.tree_shape` | `mirror`, `are_mirror`, `structurally_identical`, `structurally_identical_iterative`, `is_complete`, `zigzag_traversal`, `zigzag_level_order`, `zigzag_level_order_stack` |
| `codekata.arrays` | `two_sum`, `two_sum_brute_force`, `two_sum_sorted`, `two_sum_sorted_pointers`, `three_sum`, `three_sum_closest`, `kth_largest`, `top_k_frequent`, `majority_element`, `plus_one`, `plus_one_scan`, `first_occurrence`, `last_occurrence`, `min_jumps` |
| `codekata.strings` | `length_of_longest_substring`, `longest_palindrome`, `remove_digit`, `reverse_words`, `reverse_words_compact`, `is_palindrome`, `is_palindrome_two_pointer`, `appeal_sum`, `appeal_sum_fast`, `extract_number` |
| `codekata.linked_list` | `ListNode`, `build_list`, `to_list`, `add_two_numbers`, `add_two_numbers_carry` |
| `codekata.sorting` | `bubble_sort`, `insertion_sort` (both return a new sorted list) |
| `codekata.queue_ops` | `reverse_first_k` |
| `codekata.pointers` | `SharedPointer` (reference-counted, with `copy`, `move`, `assign`, `reset`, `get`, `use_count`) and `UniquePointer` (move-only, with `move`, `assign`, `reset`, `get`) |
| `codekata.threadpool` | `ThreadPool` with `submit` returning a `concurrent.futures.Future`, and `shutdown`; usable as a context manager |
| `codekata.logger` | the thread-safe singleton `Logger` (`Logger.instance()`, `log`), `log_from` and the `main` command |
| `codekata.textfile` | `read_lines`, `append_text` and the `main` command |
| `codekata.chat` | `ChatServer`, `ChatClient`, `server_main`, `client_main` |

Errors are raised where an answer does not exist: `find_max` and
`find_max_iterative` on an empty tree, `kth_largest` with `k` out of range,
`min_jumps` on an empty array or when the end cannot be reached, and
`reverse_first_k` on an empty queue or with `k` out of range all raise
`ValueError`. Submitting to a `ThreadPool` that has been shut down raises
`RuntimeError`; copying a `UniquePointer` raises `TypeError`.

## Examples

Trees:

```python
from codekata.tree import build_tree, inorder, level_order
from codekata.tree_metrics import count_leaves, height
from codekata.tree_shape import zigzag_level_order

root = build_tree([8, 7, 9, 2, 5, 6, 3, 4])
level_order(root)          # [8, 7, 9, 2, 5, 6, 3, 4]
inorder(root)              # [4, 2, 7, 5, 8, 6, 9, 3]
height(root)               # 4
count_leaves(root)         # 4
zigzag_level_order(root)   # [[8], [9, 7], [2, 5, 6, 3], [4]]
```

Arrays and strings:

```python
from codekata.arrays import kth_largest, min_jumps, two_sum
from codekata.strings import extract_number, is_palindrome

kth_largest([3, 2, 1, 5, 6, 4, 8], 3)            # 5
min_jumps([2, 3, 1, 1, 4])                       # 2
two_sum([2, 7, 11, 15], 9)                       # [0, 1]
extract_number("This is alpha 5057 and 97")      # 5057
is_palindrome("A man, a plan, a canal: Panama")  # True
```

Linked lists:

```python
from codekata.linked_list import add_two_numbers, build_list, to_list

to_list(add_two_numbers(build_list([2, 4, 3]), build_list([5, 6, 4])))  # [7, 0, 8]
```

Thread pool:

```python
from codekata.threadpool import ThreadPool

with ThreadPool(4) as pool:
    future = pool.submit(pow, 2, 10)
    print(future.result())  # 1024
```

On shutdown the workers stop and tasks still waiting in the queue are cancelled.

## Commands

Installing the package provides these commands:

```
codekata-logger [--threads N]         # N threads (default 5) each log one random call through the shared logger
codekata-textfile [PATH]              # print the file's lines, then append "This is new line" (default thefile.txt)
codekata-chat-server [--host H] [--port P]   # broadcast chat server, default 0.0.0.0:12345
codekata-chat-client [--host H] [--port P]   # chat client, default 127.0.0.1:12345
```

The chat server relays every message it receives to all other connected
clients. The client reads a chat name from the first line of standard input,
then sends each following line as `<name> : <message>`; sending `quit` ends
the session.

## What it does not do

The chat is a minimal relay: messages are passed on as raw chunks of text,
with no framing, history, rooms or authentication, and the server keeps
nothing once a client disconnects.