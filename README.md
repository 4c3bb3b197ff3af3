# fixed8

Signed fixed-point numbers stored as a 32-bit integer with 8 fractional
bits, which gives a resolution of 1/256.

## Installing

    pip install .

## Using the `Fixed` class

```python
from fixed8.fixed import Fixed

a = Fixed(5.05)          # built from a float, rounded to the nearest 1/256
b = Fixed(2)             # built from an integer
print(a * b)             # 10.1016
print((a * b).to_int())  # 10

c = Fixed.from_raw(1)    # the smallest positive step, 1/256
print(c.raw)             # 1
print(float(c))          # 0.00390625
print(repr(c))           # Fixed.from_raw(1)
```

- Construction: `Fixed()` is zero. `Fixed(n)` takes an `int`, `Fixed(x)` a
  `float` (rounded half away from zero after single-precision scaling), and
  `Fixed(other)` copies another `Fixed`. Values outside the 32-bit range
  raise `OverflowError`; NaN raises `ValueError`; other types raise
  `TypeError`. `Fixed.from_raw(raw)` builds a value from its scaled integer.
- Values are immutable. `raw` is the scaled integer; `to_float()` /
  `float()` and `to_int()` / `int()` convert back (`to_int` rounds toward
  negative infinity).
- Arithmetic: `+`, `-`, `*` and `/` give a new `Fixed`. The right-hand
  operand may be a `Fixed`, an `int` or a `float`. Results wrap around in
  32 bits. Dividing by zero raises `ZeroDivisionError`.
- Comparison: `==`, `!=`, `<`, `<=`, `>` and `>=` compare raw values between
  `Fixed` values only. `Fixed` values can be hashed.
- Stepping: `increment()` and `decrement()` return a value one raw step
  (1/256) away.
- `Fixed.min(a, b)` and `Fixed.max(a, b)` return the smaller or larger of two
  values; on a tie, the first one.
- `str()` prints the value as a float with up to six significant digits,
  so `Fixed(1234.4321)` prints as `1234.43`. `fixed8.fixed.format_float`
  applies the same formatting to a plain float.

## Demonstration

The `fixed8-demo` command prints short demonstrations: `raw` (raw bits of
copied values), `conversion` (values shown as floats and integers) and
`arithmetic` (stepping, arithmetic, comparison, min and max). With no
argument it runs all three.

    fixed8-demo
    fixed8-demo arithmetic

The same output is available as lists of lines from `raw_bits_demo()`,
`conversion_demo()` and `arithmetic_demo()` in `fixed8.demo`.