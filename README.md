# drillsmith

drillsmith is a set of small, worked programming drills written as importable
Python code. Each module in `drillsmith.drills` covers one topic with plain
functions, dataclasses, enums and exceptions that you can call, read and test.

It has no dependencies beyond the standard library.

## Installation

```
pip install drillsmith
```

To run the test suite, install the `test` extra and run `pytest`:

```
pip install drillsmith[test]
pytest
```

## The drills

| Module | Topic |
| --- | --- |
| `drillsmith.drills.basics` | strings, lists, optional values, modules, variadic "macros", characters, slices |
| `drillsmith.drills.functions` | calling functions, parameters, return values |
| `drillsmith.drills.conditionals` | choosing between values |
| `drillsmith.drills.quizzes` | short quizzes mixing the topics above |
| `drillsmith.drills.structs` | dataclasses, named tuples, unit values, validated records |
| `drillsmith.drills.enums` | message variants and a state machine that processes them |
| `drillsmith.drills.collections` | dictionaries as fruit baskets, list transforms |
| `drillsmith.drills.errors` | raising and wrapping errors, strict integer parsing |
| `drillsmith.drills.climate` | parsing `city,year,temp` records with a descriptive error |
| `drillsmith.drills.iterators` | capitalising words, exact division, factorial, counting |
| `drillsmith.drills.containers` | cons lists, generic wrappers, report cards, appending "Bar" |
| `drillsmith.drills.concurrency` | summing across threads, polling background jobs |

## Examples

```python
from drillsmith.drills.iterators import capitalize_first, factorial, divide
from drillsmith.drills.climate import Climate
from drillsmith.drills.errors import PositiveNonzeroInteger, ParsePosNonzeroError
from drillsmith.drills.quizzes import calculate_apple_price

capitalize_first("hello")               # "Hello"
factorial(4)                            # 24
divide(81, 9)                           # 9
divide(81, 6)                           # raises NotDivisibleError
calculate_apple_price(65)               # 65
Climate.parse("Munich,2015,23.1")       # Climate(city='Munich', year=2015, temp=23.1)
Climate.parse("")                       # raises ParseClimateError: empty input

try:
    PositiveNonzeroInteger.parse("0")
except ParsePosNonzeroError as exc:
    exc.creation                        # CreationKind.ZERO
```

## What drillsmith does not do

drillsmith is only the drills themselves. It has no command-line program: it
does not read an exercise list, compile or run exercise files, watch files for
changes, show hints, or track which exercises are done.