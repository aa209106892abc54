# misislab

A collection of small data structures and algorithms. It needs nothing
beyond the standard library.

- `misislab.complex.Complex` is a complex number with a `{re,im}` text form
  and equality within twice the machine epsilon.
- `misislab.arrayd.ArrayD` is a resizable, bounds-checked array of floats.
- `misislab.arrayt.ArrayT` is a resizable, bounds-checked array of any
  element type. New slots are filled by a factory, `int` by default.
- `misislab.stackl.StackL` is a LIFO stack of byte values (0..255).
- `misislab.queuea.QueueA` is a FIFO queue of byte values (0..255).
- `misislab.segment_tree.SegmentTree` is a segment tree. It supports range
  additions and point subtractions, and gives sums of the positive parts of
  its values over inclusive ranges.
- `misislab.problems` holds functions that solve classic
  competitive-programming puzzles, for example `can_split_watermelon`,
  `next_distinct_year`, `round_summands`, `max_digit_string` and
  `count_interesting_pairs`.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Examples

```python
from misislab.complex import Complex

z = Complex(2, 3) * Complex(5, -7)
print(z)                        # {31,1}
print(Complex.parse("{1,2}"))   # {1,2}
print(Complex(12, 3) + 12)      # {24,3}
```

```python
from misislab.arrayd import ArrayD

a = ArrayD(3)
a[0] = 1.0
a.insert(1, 2.0)
a.remove(0)
print(list(a), len(a))   # [2.0, 0.0, 0.0] 3
```

```python
from misislab.stackl import StackL
from misislab.queuea import QueueA

st = StackL()
st.push(14)
st.push(12)
print(st.top())   # 12

q = QueueA()
q.push(2)
print(q.top())    # 2
```

```python
from misislab.segment_tree import SegmentTree

tree = SegmentTree([1, -2, 3])
print(tree.positive_sum(0, 2))   # 4
```

```python
from misislab.problems import can_split_watermelon, next_distinct_year

print(can_split_watermelon(8))   # True
print(next_distinct_year(1987))  # 2013
```

## Errors

- An index outside a container raises `IndexError`.
- A bad size raises `ValueError`. For `ArrayD` this is a size that is not
  positive. Removing the last element of an `ArrayD` also raises `ValueError`.
- Pushing a value outside 0..255 onto a `StackL` or `QueueA` raises
  `ValueError`.
- `top()` on an empty stack or queue raises `IndexError`. `pop()` on an
  empty stack or queue does nothing.
- Dividing a `Complex` by zero raises `ZeroDivisionError`.
- `Complex.parse` raises `ValueError` on text that is not in `{re,im}` form.

## What it does not do

The package has no command-line programs. The puzzle solutions are plain
functions that take Python values and return results. They do not read
standard input or print answers.