# katas

A collection of small, self-contained programming exercises. Each one is a
plain function or a small class that you can import and call. The package
has no dependencies beyond the standard library.

## Installing

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Modules

- `katas.numbers`: digit and arithmetic puzzles: `how_many_dalmatians`,
  `digital_root`, `multiple_3_and_5`, `positive_sum`, `strong`,
  `sum_even_fibonacci`, `product_fib`, `count_bits`, `count_bits_simpler`,
  `equable_triangle`, `easy_line` and `two_sum`. `product_fib` returns the
  two Fibonacci numbers and whether their product is exactly the number
  searched for. `count_bits` and `count_bits_simpler` raise `ValueError`
  for negative values.
- `katas.primes`: `is_prime`, `reverse_int`, `backwards_prime` and `gap`.
  `gap` returns `None` when no pair of primes with the given gap is found.
- `katas.sequences`: list puzzles: `choose_best_sum`, `dir_reduc`,
  `josephus`, `josephus_survivor`, `josephus_survivor_recursive`, `john`,
  `ann`, `sum_john`, `sum_ann`, `pick_peaks` (which returns a `PosPeaks`
  with `pos` and `peaks` lists) and `range_extraction`.
- `katas.numerics`: numerical approximations: `len_curve`,
  `len_curve_with_hypot`, `simpson` and its integrand `simpson_integrand`.
- `katas.text`: string exercises: `abbrev_name`, `dna_strand`,
  `create_phone_number`, `first_non_repeating`, `stock_list`,
  `high_and_low`, `high`, `wave`, `split_strings`, `spin_words` and
  `to_weird_case`.
- `katas.validation`: `is_valid_ip`, `is_multiple_of_3` (backed by the
  regular expression `MULTIPLE_OF_3_REGEX`), `pass_hash` (hex MD5),
  `alphanumeric`, `valid_braces` and `valid_braces_recursive`.
- `katas.transforms`: `oper` with `vert_mirror` and `hor_mirror`,
  `order_weight`, `play_pass`, `revrot` and `in_array`.
- `katas.machine`: a `Machine` that learns which of the functions returned
  by `actions()` belongs to which command from the feedback it gets.
- `katas.scaffold`: `create_kata` and the `create-kata` command.

## Examples

```python
from katas.numbers import digital_root, easy_line
from katas.primes import backwards_prime
from katas.sequences import dir_reduc
from katas.text import spin_words
from katas.validation import valid_braces

digital_root(16)                    # 7
easy_line(7)                        # "3432"
backwards_prime(1, 31)              # [13, 17, 31]
dir_reduc(["NORTH", "SOUTH", "SOUTH", "EAST", "WEST", "NORTH", "WEST"])
                                    # ["WEST"]
spin_words("Hey fellow warriors")   # "Hey wollef sroirraw"
valid_braces("([{}])")              # True
```

Training the learning machine:

```python
from katas.machine import Machine

machine = Machine()
for _ in range(20):
    result = machine.command(0, 7)
    machine.response(result == 0)

machine.command(0, 1000)            # 0
```

Each call to `response(False)` moves the last command on to the next action,
wrapping around after the last one.

## Starting a new exercise

The `create-kata` command makes a new exercise directory in the current
directory, holding two starter files. The words you give it are joined with
hyphens to form the directory name:

```
create-kata highest scoring word
```

It prints an error and exits with status 1 if no name is given or the
directory or its files cannot be created. From Python,
`katas.scaffold.create_kata(name, base)` does the same inside the directory
`base`, returns the new directory's path and raises
`katas.scaffold.ScaffoldError` on failure.