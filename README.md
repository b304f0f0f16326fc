# math32

Mathematical functions and constants evaluated in IEEE 754 single precision.

Python floats are 64-bit. The functions in `math32` round their inputs and
their results to the nearest 32-bit float, and most of them also round the
steps in between. The results therefore match what a float32 implementation
gives, and so do the special cases: signed zeros, infinities and NaN.

## Installation

```
pip install math32
```

The package needs Python 3.11 or later and has no dependencies outside the
standard library.

## Modules

| Module | Contents |
| --- | --- |
| `math32.core` | `f32`, `float32bits`, `float32frombits`, `float64bits`, `float64frombits`, `inf`, `nan`, `isnan`, `isinf`, `fabs`, `copysign`, `signbit`, `nextafter`; constants such as `E`, `PI`, `PHI`, `SQRT2`, `LN2`, `LN10`, `LOG2E`, `LOG10E`, `MAX_FLOAT32`, `SMALLEST_NONZERO_FLOAT32` and the integer limits `MAX_INT32`, `MIN_INT32` and so on |
| `math32.rounding` | `floor`, `ceil`, `trunc`, `modf`, `frexp`, `ldexp`, `round`, `round_to_even`, `mod`, `remainder`, `dim`, `fmax`, `fmin` |
| `math32.exponential` | `sqrt`, `exp`, `exp2`, `expm1`, `log` |
| `math32.trig` | `sin`, `cos`, `tan`, `sincos` |
| `math32.power` | `pow`, `pow10`, `hypot` |

## Usage

```python
from math32.core import f32, float32bits, nextafter, copysign
from math32.exponential import sqrt, exp, log
from math32.trig import sincos
from math32.rounding import frexp, ldexp, round_to_even
from math32.power import pow, hypot

f32(0.1)                 # 0.10000000149011612, the nearest float32
hex(float32bits(1.0))    # '0x3f800000'
nextafter(0.0, 1.0)      # 1.401298464324817e-45, smallest float32 subnormal

sqrt(2.0)                # float32 square root, correctly rounded
s, c = sincos(0.5)

frac, e = frexp(8.0)     # (0.5, 4)
ldexp(frac, e)           # 8.0
ldexp(1.0, 128)          # inf: overflows the float32 range

round_to_even(2.5)       # 2.0
copysign(0.0, -1.0)      # -0.0
```

Functions return NaN, an infinity or a signed zero for out-of-domain and
boundary arguments instead of raising, as IEEE 754 prescribes. For example,
`log(-1.0)` is NaN and `log(0.0)` is `-inf`.

`frexp`, `modf` and `sincos` return pairs.

Trigonometric arguments of 2**29 and above are reduced with a multi-word
representation of 4/π, so `sin`, `cos` and `tan` stay meaningful for large
inputs.

## What the package does not provide

`math32` covers the functions listed above only. It has no inverse
trigonometric functions (arcsine, arccosine, arctangent), no hyperbolic
functions or their inverses, no base-10 or base-2 logarithm, no `log1p`, no
cube root, and no error, gamma or Bessel functions. For those, use the
standard `math` module and round the result with `math32.core.f32`.

## Running the tests

```
pip install -e ".[test]"
pytest
```