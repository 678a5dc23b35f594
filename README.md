# dsakit

Classic algorithms and data structures, written plainly so they are easy to
read and use. The package has sorting routines, Fibonacci and factorial
variants, array and string helpers, a binary search tree, stack queries, a
singly linked list and a small lending-library manager with a text menu.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

- `dsakit.sorting`: `bubble_sort`, `insertion_sort`, `merge_sort`,
  `quick_sort`, `selection_sort`. Each takes any iterable of comparable
  values and returns a new ascending list; the input is left unchanged.
- `dsakit.numbers`: `fibonacci_memo`, `fibonacci_recursive`,
  `fibonacci_table` (the list F(0) to F(n)), `fibonacci_offset` (the series
  0, 0, 1, 1, 2, ...), `factorial_recursive`, `factorial_iterative`.
  Negative `n` raises `ValueError` in `fibonacci_recursive`,
  `fibonacci_table`, `fibonacci_offset` and `factorial_recursive`.
- `dsakit.arrays`: `alternates`, `is_sorted`, `largest`, `leaders`,
  `linear_search` (index or `None`), `push_zeros_to_end`,
  `remove_duplicates` (collapses adjacent runs), `reversed_array`,
  `rotate_right`, `second_largest` (`None` when all values are equal),
  `subarrays` (a generator of every non-empty slice), `three_largest`
  (up to three distinct values, descending). `largest` and
  `second_largest` raise `ValueError` on empty input.
- `dsakit.strings`: `insert_char`, `search_char` (index or -1),
  `strings_same`, `is_palindrome`.
- `dsakit.tree`: `BinarySearchTree`, optionally built from an iterable, with
  `insert`, `inorder`, `preorder`, `postorder` and `dfs` (each traversal
  returns a list). Equal values go to the right. It supports `len()` and
  iterates in order.
- `dsakit.stacks`: `bottom_element` and `middle_element` for a stack held as
  a list whose top is the last element. Both raise `IndexError` on an empty
  stack.
- `dsakit.linked_list`: `Node`, `insert_at_head` (returns the new head) and
  `traverse` (yields each node's data).
- `dsakit.library`: `Book`, `Library`, `BookNotFoundError`, plus `run` and
  `main` for the interactive menu.

## Examples

```python
from dsakit.sorting import merge_sort
from dsakit.numbers import fibonacci_memo
from dsakit.arrays import rotate_right
from dsakit.tree import BinarySearchTree

merge_sort([9, 8, 3, 2, 4, 5, 6, 1, 0])   # [0, 1, 2, 3, 4, 5, 6, 8, 9]
fibonacci_memo(5)                          # 5
rotate_right([1, 2, 3, 4, 5, 6], 2)        # [5, 6, 1, 2, 3, 4]

tree = BinarySearchTree([7, 3, 4, 9, 1, 0, 8])
tree.inorder()                             # [0, 1, 3, 4, 7, 8, 9]
tree.preorder()                            # [7, 3, 1, 0, 4, 9, 8]
```

## Library manager

The package installs a menu-driven lending-library program:

```
dsakit-library
```

The menu lets you add a book, list all books with their status, borrow one
by ID, return one by ID, or exit. It stops at "Exit" or at the end of input.

It can also be driven from code:

```python
from dsakit.library import Book, Library

library = Library()
library.add_book(Book(1, "Dune", "Frank Herbert"))
library.borrow_book(1)        # True
library.borrow_book(1)        # False, already borrowed
print(library.format_table())
library.remove_book(1)        # returns the Book; BookNotFoundError if absent
```

`run(library, infile, outfile)` runs the same menu over any pair of text
streams.

### What it does not do

The library keeps its books in memory only: nothing is saved between runs,
and the menu offers no way to remove a book (use `Library.remove_book` from
code).