# drillbook

A collection of classic programming exercises, each one written as a small,
tested Python function or class: matrix traversals, text patterns, array
operations, searching, sorting, number theory, recursion on strings, linked
lists and stacks. It has no dependencies beyond the standard library.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## What is inside

| Module                     | Contents |
|----------------------------|----------|
| `drillbook.matrix`         | `spiral_order`, `wave_order`, `rotate_clockwise`, `contains`, `row_sums`, `column_sums`, `largest_row_index` |
| `drillbook.patterns`       | text patterns as lists of lines: `star_square`, `number_rows`, `letter_staircase`, `number_pyramid` |
| `drillbook.arrays`         | `minimum`, `maximum`, `reverse_values`, `rotate_right`, `swap_pairs`, `is_sorted_and_rotated`, `is_sorted`, `total`, `count_adjacent_repeats` |
| `drillbook.searching`      | `linear_search`, `recursive_contains`, `binary_search`, `binary_contains`, `first_occurrence`, `last_occurrence`, `find_pivot`, `integer_sqrt` |
| `drillbook.sorting`        | `bubble_sort`, `recursive_bubble_sort`, `insertion_sort`, `selection_sort`, `merge_sort`, `merge_sorted` (all return new lists) |
| `drillbook.numbers`        | `is_prime`, `count_primes`, `gcd`, `factorial`, `fibonacci`, `fibonacci_series`, `power`, `to_binary`, `from_binary`, `count_set_bits`, `add_without_plus`, `say_digits` |
| `drillbook.strings`        | `permutations`, `subsets`, `is_palindrome`, `count_palindromic_substrings`, `reverse_string` |
| `drillbook.linked_lists`   | `Node`, `SinglyLinkedList`, `DoublyLinkedList`, `CircularLinkedList`, `reverse_in_groups` |
| `drillbook.stacks`         | `BoundedStack`, `StackOverflowError`, `StackUnderflowError`, `push_at_bottom`, `is_valid_brackets` |
| `drillbook.expression`     | spelled-out arithmetic: `word_to_number`, `evaluate_tokens`, `evaluate`, `main` |
| `drillbook.modifications`  | array-modification puzzles: `matches_last_writes`, `can_reach_with_values`, `can_reach_by_counting`, `parse_cases`, `main` |

## Examples

```python
from drillbook.matrix import spiral_order
from drillbook.numbers import gcd, say_digits
from drillbook.sorting import merge_sort
from drillbook.stacks import is_valid_brackets
from drillbook.linked_lists import SinglyLinkedList
from drillbook.expression import evaluate, word_to_number

spiral_order([[1, 2, 3], [4, 5, 6], [7, 8, 9]])
# [1, 2, 3, 6, 9, 8, 7, 4, 5]

gcd(12, 18)
# 6

say_digits(120)
# ['one', 'two', 'zero']

merge_sort([2, 15, 1, 8, 4, 6, 9])
# [1, 2, 4, 6, 8, 9, 15]

is_valid_brackets("[{()}]")
# True

items = SinglyLinkedList([1, 2, 3, 4, 5, 6, 7, 8])
items.reverse_in_groups(3)
list(items)
# [3, 2, 1, 6, 5, 4, 8, 7]

word_to_number("onectwoczero")
# 120

evaluate("add onectwo three")
# 15
```

Notes on behaviour:

- `BoundedStack` raises `StackOverflowError` when pushed past its capacity
  and `StackUnderflowError` (a subclass of `IndexError`) when popped or
  peeked while empty.
- The linked lists use 1-based positions in `insert_at` and `delete_at` and
  raise `IndexError` for positions out of range; `CircularLinkedList`
  raises `ValueError` when the element to insert after or delete is absent.
- `minimum`, `maximum`, `largest_row_index` and `find_pivot` raise
  `ValueError` on empty input; `factorial`, `fibonacci`, `power` and
  `integer_sqrt` raise `ValueError` on negative arguments.
- `count_set_bits` and `add_without_plus` work on 32-bit values, so
  negative numbers behave as two's complement.

## Spelled-out arithmetic

Numbers are digit words joined by the letter `c` (`onectwo` is 12). The
operations are `add`, `sub`, `mul`, `div`, `rem` and `pow`; `div` and `rem`
truncate toward zero. Operations and numbers go onto separate stacks, and
the most recent operation is applied to the two most recent numbers until a
single number remains. `evaluate` raises `ValueError` with the message
`expression evaluation stopped invalid words present` or
`expression is not complete or invalid` when the input cannot be evaluated.

## Command-line tools

`drillbook-expr` evaluates the words given as arguments, or one line read
from standard input when none are given, and prints the result or the
error message:

```
drillbook-expr add onectwo three
```

`drillbook-modifications` reads test cases from a file, or from standard
input when no path is given. The input holds a case count, then for each
case `n`, the `n` original values, the `n` target values, `m`, and the `m`
modification values. For every case it prints `YES` or `NO`, as decided by
`can_reach_with_values`:

```
drillbook-modifications cases.txt
```

## What it does not do

The exercises are plain functions and classes; apart from the two commands
above there are no interactive programs that prompt for input and print
patterns, matrices or sorted arrays. Call the functions from Python and
print their results yourself.