# autocompleteme

An interactive autocomplete search engine. It loads a file of weighted terms,
such as movie titles with their popularity, and for each prefix you type it
lists the matching terms, heaviest first.

## Installing

```
pip install .
```

## Input file

Each line holds an integer weight, then whitespace, then the query text:

```
5000	The Godfather
4200	The Dark Knight
3100	The Good, The Bad And The Ugly
```

Blank lines and lines with a weight but no query are skipped. A non-blank
line that does not start with an integer weight is an error.

## Running

```
autocompleteme terms.txt 5
```

The first argument is the terms file. The second is the largest number of
matches to show for each query; it must be a positive integer (a leading
integer is read, so `5x` counts as `5`).

At each prompt, type a prefix. Before the search runs, the input is tidied:
leading and trailing blanks are stripped, runs of spaces are collapsed, the
text is lower-cased and the first letter of each word is capitalised, so
`  the   GO` is searched as `The Go`. Matches are printed one per line as the
weight, a tab and the query. If fewer matches exist than you asked for, the
program says so and prints all of them. If none match, it prints
`No matched query!`. Type `exit` (in any case) or end the input to quit.

Exit status: 0 on a normal finish, 1 on wrong usage, 2 if the file cannot be
opened, 3 if the count is not an integer or is less than 1.

## Using it as a library

```python
from autocompleteme.engine import Autocomplete
from autocompleteme.term import Term

engine = Autocomplete()
engine.insert(Term("The Godfather", 5000))
engine.insert(Term("The Dark Knight", 4200))
engine.sort()

for term in engine.all_matches("The G"):
    print(term)          # prints "5000\tThe Godfather"
```

`Autocomplete.sort()` must be called after inserting and before searching.

- `Autocomplete.binary_search(prefix)` returns the index of some term in the
  sorted order whose query starts with `prefix`, or `None`.
- `Autocomplete.search(key)` returns a `range` of the indices of all matching
  terms in the sorted order; it is empty when nothing matches.
- `Autocomplete.all_matches(prefix)` returns a `SortingList` of the matching
  terms in descending order of weight.
- `str(engine)` lists every term, one per line.

The command-line pieces are in `autocompleteme.cli`: `load_terms(lines)`
yields a `Term` for each input line, and `main(argv=None)` runs the
interactive search and returns the exit status.

The supporting modules can be used on their own:

- `autocompleteme.term`: `Term` (a frozen dataclass with `query` and
  `weight`, ordered by query, printed as `weight<TAB>query`),
  `compare_by_weight` and `compare_by_prefix`. Both comparisons return 1, 0
  or -1; `compare_by_prefix` raises `ValueError` for a negative length.
- `autocompleteme.sortinglist`: `SortingList`, a sequence with `insert`,
  indexing, iteration, `std_sort`, and selection, bubble and merge sorts
  driven by a three-way compare function, plus `shuffle(rng=None)` and
  `render()`.
- `autocompleteme.powerstring`: `to_lower`, `to_upper`, `remove_extra_space`
  and `word_format`, acting on ASCII letters.

## Running the tests

```
pip install ".[test]"
pytest
```