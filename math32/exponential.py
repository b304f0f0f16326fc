"""Square root, exponentials and the natural logarithm in single precision.

Every intermediate result is rounded to binary32, so the functions give
the same values as a float32 implementation of the same algorithms.
"""

from .core import (
    BIAS,
    MASK,
    SHIFT,
    SQRT2,
    f32,
    float32bits,
    float32frombits,
    inf,
    isinf,
    isnan,
    nan,
)
from .rounding import frexp, ldexp

_U32 = 0xFFFFFFFF

# Shared reduction constants: ln(2) split into a high part with trailing
# zero bits and a small low part.
_LN2_HI = f32(6.9313812256e-01)
_LN2_LO = f32(9.0580006145e-06)
_LOG2E = f32(1.4426950216e00)

_EXP_OVERFLOW = f32(7.09782712893383973096e02)
_EXP_UNDERFLOW = f32(-7.45133219101941108420e02)
_NEAR_ZERO = 2.0**-28

_EXP2_OVERFLOW = f32(1.0239999999999999e03)
_EXP2_UNDERFLOW = f32(-1.0740e03)

_P1 = f32(1.6666667163e-01)
_P2 = f32(-2.7777778450e-03)
_P3 = f32(6.6137559770e-05)
_P4 = f32(-1.6533901999e-06)
_P5 = f32(4.1381369442e-08)

_EXPM1_OTHRESHOLD = f32(89.415985)
_LN2_X27 = f32(1.871497344970703125e01)
_LN2_HALF_X3 = f32(1.0397207736968994140625)
_LN2_HALF = f32(3.465735912322998046875e-01)
_INV_LN2 = f32(1.4426950216e00)
_TINY = 2.0**-54

_Q1 = f32(-3.3333335072e-02)
_Q2 = f32(1.5873016091e-03)
_Q3 = f32(-7.9365076090e-05)
_Q4 = f32(4.0082177293e-06)
_Q5 = f32(-2.0109921195e-07)

_L1 = f32(6.6666668653e-01)
_L2 = f32(4.0000000596e-01)
_L3 = f32(2.8571429849e-01)
_L4 = f32(2.2222198546e-01)
_L5 = f32(1.8183572590e-01)
_L6 = f32(1.5313838422e-01)
_L7 = f32(1.4798198640e-01)

_HALF_SQRT2 = SQRT2 / 2


def _horner(z, coeffs):
    """Evaluate c0 + z*(c1 + z*(c2 + ...)) rounding every step to binary32."""
    acc = coeffs[-1]
    for c in reversed(coeffs[:-1]):
        acc = f32(c + f32(z * acc))
    return acc


def sqrt(x):
    """Correctly rounded square root of x."""
    x = f32(x)
    if x == 0 or isnan(x) or isinf(x, 1):
        return x
    if x < 0:
        return nan()
    ix = float32bits(x)
    exp = (ix >> SHIFT) & MASK
    if exp == 0:
        while ix & (1 << SHIFT) == 0:
            ix <<= 1
            exp -= 1
        exp += 1
    exp -= BIAS
    ix &= ~(MASK << SHIFT) & _U32
    ix |= 1 << SHIFT
    if exp & 1 == 1:
        ix <<= 1
    exp >>= 1
    ix = (ix << 1) & _U32
    q = s = 0
    r = 1 << (SHIFT + 1)
    while r:
        t = s + r
        if t <= ix:
            s = t + r
            ix -= t
            q += r
        ix = (ix << 1) & _U32
        r >>= 1
    if ix:
        q += q & 1
    return float32frombits((q >> 1) + ((exp - 1 + BIAS) << SHIFT))


def _expmulti(hi, lo, k):
    """Return e**r * 2**k where r = hi - lo and |r| <= ln(2)/2."""
    r = f32(hi - lo)
    t = f32(r * r)
    c = f32(r - f32(t * _horner(t, (_P1, _P2, _P3, _P4, _P5))))
    y = f32(1 - f32(f32(lo - f32(f32(r * c) / f32(2 - c))) - hi))
    return ldexp(y, k)


def exp(x):
    """Base-e exponential of x."""
    x = f32(x)
    if isnan(x) or isinf(x, 1):
        return x
    if isinf(x, -1):
        return 0.0
    if x > _EXP_OVERFLOW:
        return inf(1)
    if x < _EXP_UNDERFLOW:
        return 0.0
    if -_NEAR_ZERO < x < _NEAR_ZERO:
        return f32(1 + x)
    k = 0
    if x < 0:
        k = int(f32(f32(_LOG2E * x) - 0.5))
    elif x > 0:
        k = int(f32(f32(_LOG2E * x) + 0.5))
    fk = f32(k)
    hi = f32(x - f32(fk * _LN2_HI))
    lo = f32(fk * _LN2_LO)
    return _expmulti(hi, lo, k)


def exp2(x):
    """Base-2 exponential of x."""
    x = f32(x)
    if isnan(x) or isinf(x, 1):
        return x
    if isinf(x, -1):
        return 0.0
    if x > _EXP2_OVERFLOW:
        return inf(1)
    if x < _EXP2_UNDERFLOW:
        return 0.0
    k = 0
    if x > 0:
        k = int(f32(x + 0.5))
    elif x < 0:
        k = int(f32(x - 0.5))
    t = f32(x - f32(k))
    hi = f32(t * _LN2_HI)
    lo = f32(-t * _LN2_LO)
    return _expmulti(hi, lo, k)


def _add_exponent(y, k):
    """Add k to the binary exponent field of y."""
    return float32frombits((float32bits(y) + (k << 23)) & _U32)


def expm1(x):
    """e**x - 1, accurate for x near zero."""
    x = f32(x)
    if isinf(x, 1) or isnan(x):
        return x
    if isinf(x, -1):
        return -1.0

    negative = x < 0
    absx = -x if negative else x

    if absx >= _LN2_X27:
        if negative:
            return -1.0
        if absx >= _EXPM1_OTHRESHOLD:
            return inf(1)

    c = 0.0
    if absx > _LN2_HALF:
        if absx < _LN2_HALF_X3:
            if not negative:
                hi, lo, k = f32(x - _LN2_HI), _LN2_LO, 1
            else:
                hi, lo, k = f32(x + _LN2_HI), -_LN2_LO, -1
        else:
            scaled = f32(_INV_LN2 * x)
            k = int(f32(scaled - 0.5)) if negative else int(f32(scaled + 0.5))
            fk = f32(k)
            hi = f32(x - f32(fk * _LN2_HI))
            lo = f32(fk * _LN2_LO)
        x = f32(hi - lo)
        c = f32(f32(hi - x) - lo)
    elif absx < _TINY:
        return x
    else:
        k = 0

    hfx = f32(0.5 * x)
    hxs = f32(x * hfx)
    r1 = f32(1 + f32(hxs * _horner(hxs, (_Q1, _Q2, _Q3, _Q4, _Q5))))
    t = f32(3 - f32(r1 * hfx))
    e = f32(hxs * f32(f32(r1 - t) / f32(6.0 - f32(x * t))))
    if k == 0:
        return f32(x - f32(f32(x * e) - hxs))

    e = f32(f32(x * f32(e - c)) - c)
    e = f32(e - hxs)
    if k == -1:
        return f32(f32(0.5 * f32(x - e)) - 0.5)
    if k == 1:
        if x < -0.25:
            return f32(-2 * f32(e - f32(x + 0.5)))
        return f32(1 + f32(2 * f32(x - e)))
    if k <= -2 or k > 56:
        y = f32(1 - f32(e - x))
        return f32(_add_exponent(y, k) - 1)
    if k < 20:
        t = float32frombits(0x3F800000 - (0x1000000 >> k))
        y = f32(t - f32(e - x))
        return _add_exponent(y, k)
    t = float32frombits((0x7F - k) << 23)
    y = f32(x - f32(e + t))
    y = f32(y + 1)
    return _add_exponent(y, k)


def log(x):
    """Natural logarithm of x."""
    x = f32(x)
    if isnan(x) or isinf(x, 1):
        return x
    if x < 0:
        return nan()
    if x == 0:
        return inf(-1)

    f1, ki = frexp(x)
    if f1 < _HALF_SQRT2:
        f1 = f32(f1 * 2)
        ki -= 1
    f = f32(f1 - 1)
    k = f32(ki)

    s = f32(f / f32(2 + f))
    s2 = f32(s * s)
    s4 = f32(s2 * s2)
    t1 = f32(s2 * _horner(s4, (_L1, _L3, _L5, _L7)))
    t2 = f32(s4 * _horner(s4, (_L2, _L4, _L6)))
    big_r = f32(t1 + t2)
    hfsq = f32(f32(0.5 * f) * f)
    inner = f32(f32(s * f32(hfsq + big_r)) + f32(k * _LN2_LO))
    return f32(f32(k * _LN2_HI) - f32(f32(hfsq - inner) - f))