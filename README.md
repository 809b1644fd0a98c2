# sattools

Building blocks for working with propositional formulas in conjunctive
normal form (CNF). The package has no runtime dependencies.

Literals are non-zero integers: `v` stands for variable `v` and `-v` for
its negation.

## What is inside

| Module | Contents |
| --- | --- |
| `sattools.bitops` | Bit helpers on single words and on bitsets stored as lists of 32- or 64-bit words: `one_bit`, `bit_count`, `least_significant_bit_word`, `least_significant_bit_position`, `most_significant_bit_position`, `one_range`, `interval_up`, `interval_down`, `is_bit_set`, `set_bit`, `clear_bit`, `bit_count_range`, `is_empty_range`, `first_set_in_range`, `last_set_in_range` (ranges are inclusive) |
| `sattools.bitset` | `Bitset`, a resizable bitset of 64-bit words whose iteration yields the set positions, and `BitQueue`, whose `top()` returns the highest set bit (or `None`) without searching |
| `sattools.sparse_bitset` | `SparseBitset`, which remembers which positions were set so that it can be cleared word by word |
| `sattools.clause` | `Clause` (literals, redundancy flag, LBD), plus `normalize_literals` and `literal_sort_key`, which order literals by variable with the positive literal first |
| `sattools.cnf_model` | `CNFModel`: a clause list with per-literal occurrence lists and counters of binary, ternary and dropped tautological clauses |
| `sattools.cnf_stats` | `CNFStats` and `LiteralStat`: counts of unary, binary, ternary and large clauses with positive/negative literal totals; `summarize()` returns the report as a string |
| `sattools.implication_graph` | `BinaryImplicationGraph`, built from the two-literal clauses of a `CNFModel`; `resolve()` returns the unit literal a binary clause resolves to, or `None` |
| `sattools.cnf_writer` | `dumps` and `dump`, which write a model in DIMACS CNF format |
| `sattools.drat` | `DratWriter` and `DratProofHandler`, which write DRAT proofs as plain text or gzip-compressed text |

## Example

```python
from sattools.cnf_model import CNFModel
from sattools.cnf_writer import dumps

model = CNFModel()
model.add_clause([1, -2])
model.add_clause([2, 3, -4])
model.add_clause([5, -5])          # tautology: dropped, returns False

print(model.number_of_variables(), model.number_of_clauses())   # 4 2
print(model.number_of_trivial_clauses())                        # 1
print(dumps(model))
```

`add_clause` removes duplicate literals and sorts the rest before storing
the clause. The number of variables is the highest variable seen, and at
least 1.

Writing a proof:

```python
from sattools.drat import DratProofHandler

with DratProofHandler("proof.drat", compressed=False) as proof:
    proof.add_clause([1, 2])
    proof.delete_clause([1, 2])
```

Each added clause becomes one line of literals ending in `0`; deleted
clauses are prefixed with `d`. With `compressed=True` the same text is
written through gzip.

## What it does not do

The package has no DIMACS reader, no SAT solver, no unit propagation or
conflict analysis, and no command-line program. Formulas are built by
calling `add_clause` from Python.

## Running the tests

Install the `test` extra, then run `pytest` from the project root.