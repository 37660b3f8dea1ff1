# algolab

Small, self-contained implementations of classic algorithms and data
structures. The package uses only the standard library.

## Installation

```
pip install .
```

To run the test suite:

```
pip install .[test]
pytest
```

## Modules

| Module | Contents |
| --- | --- |
| `algolab.basics` | `count_zeros`, `integer_quotient` (the quotient whose remainder lies in `[0, \|b\|)`), `count_lucky_tickets`, `is_balanced` for round brackets, `is_prime` and `primes_up_to`, `count_occurrences` (overlaps counted), `swap_segments`, `fibonacci_recursive` and `fibonacci_iterative`, `power_linear` and `power_log` |
| `algolab.real_number` | `is_real_number`, a finite-state recogniser (`State`) for numbers such as `1.5e10`; a string is accepted only if it ends in the exponent's digits |
| `algolab.sorting` | `bubble_sort`, `counting_sort`, `insertion_sort`, `partition`, `hybrid_quick_sort` (insertion sort below ten items), `hoare_quick_sort`, `is_sorted`, `most_frequent` (smallest value wins ties, `-1` for empty input), `linear_search`, `binary_search` |
| `algolab.binary_code` | 32-bit bit lists, most significant bit first: `to_bits` (two's complement), `negate_bits`, `add_bits`, and `from_bits`, which reads a sign bit followed by a 31-bit magnitude |
| `algolab.phonebook` | `PhoneBook` (at most 100 entries, `PhoneBookFullError` when full) with `add`, `search_by_name`, `search_by_phone`, `format`, `load` and `save` |
| `algolab.rpn` | `evaluate_postfix` for postfix expressions over single-digit operands; errors derive from `PostfixError` |
| `algolab.brackets` | `check_brackets` for `()`, `[]` and `{}` |
| `algolab.infix` | `to_postfix`, conversion of infix expressions over single digits to postfix, plus `is_operator` and `priority` |
| `algolab.josephus` | `find_survivor`, the Josephus counting-out problem |
| `algolab.records` | `Record`, a stable `merge_sort`, `parse_records` and `read_records` for `name - phone` lines, and `sort_records` by `"name"` or `"phone"` |
| `algolab.expression_tree` | `parse_expression`, `evaluate` and `format_tree` for prefix trees such as `( * ( + 1 1 ) 2 )`, built from `Number` and `Operation` nodes |
| `algolab.avl` | `AVLTree`, a self-balancing string-to-string dictionary with `insert`, `search`, `delete`, `height`, `in`, `len` and in-order iteration over keys |
| `algolab.word_count` | `string_hash` and `WordCounter`, a chained hash table with `add`, `update`, `count`, `frequencies`, `fill_factor`, `max_chain_length` and `average_chain_length` |
| `algolab.states` | `Road`, `State`, `nearest_city`, `distribute_cities` and `parse_input`, which split the cities of a road graph among capitals |

## Examples

```python
from algolab.rpn import evaluate_postfix
from algolab.infix import to_postfix
from algolab.brackets import check_brackets
from algolab.josephus import find_survivor
from algolab.avl import AVLTree

evaluate_postfix("9 6 - 1 2 + *")   # 9
to_postfix("(2 + 3) * 5")           # "2 3 + 5 *"
check_brackets("([]{[]})")          # True
find_survivor(5, 2)                 # 3

tree = AVLTree()
tree.insert("apple", "fruit")
tree.search("apple")                # "fruit"
"apple" in tree                     # True
tree.delete("apple")
```

Errors are raised as exceptions. `evaluate_postfix("2 +")` raises
`StackEmptyError`, `evaluate_postfix("3 4 5 +")` raises `StackNotEmptyError`,
and `to_postfix("(2 + 3 * 5")` raises `UnbalancedParenthesesError`. Division
by zero raises `ZeroDivisionError`.

## Commands

Installing the package provides three commands:

- `algolab-phonebook [FILE]` runs an interactive phone book kept in a text
  file of `phone name` pairs. Without an argument it asks for the file path.
  The book is written back to the file on exit.
- `algolab-wordcount [FILE]` prints how often each word of a text file
  appears, then the hash table's fill factor and its longest and average
  chain lengths. The file defaults to `9.txt`.
- `algolab-states [FILE]` reads the number of cities, the roads and the
  capitals as whitespace-separated integers and prints the cities each state
  takes. The file defaults to `10.1.txt`.

## Limitations

Only the three modules above have commands; everything else is used as a
library. The phone book is the only storage the package offers, and it is a
plain text file.