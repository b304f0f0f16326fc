"""Integer parts, exponent splitting, remainders and min/max in single precision."""

from .core import (
    BIAS,
    FRAC_MASK,
    MASK,
    SHIFT,
    SIGN_MASK,
    UVONE,
    copysign,
    f32,
    fabs,
    float32bits,
    float32frombits,
    inf,
    isinf,
    isnan,
    nan,
    signbit,
)

_SMALLEST_NORMAL = 2.0**-126


def _normalize(x):
    """Return a normal number y and exponent e with x == y * 2**e."""
    if fabs(x) < _SMALLEST_NORMAL:
        return f32(x * (1 << SHIFT)), -SHIFT
    return x, 0


def floor(x):
    """Greatest integer value less than or equal to x."""
    x = f32(x)
    if x == 0 or isnan(x) or isinf(x):
        return x
    if x < 0:
        d, fract = modf(-x)
        if fract != 0:
            d = f32(d + 1)
        return -d
    return modf(x)[0]


def ceil(x):
    """Least integer value greater than or equal to x."""
    return -floor(-f32(x))


def trunc(x):
    """Integer part of x."""
    x = f32(x)
    if x == 0 or isnan(x) or isinf(x):
        return x
    return modf(x)[0]


def modf(f):
    """Split f into integer and fractional parts carrying the sign of f."""
    f = f32(f)
    if f < 1:
        if f < 0:
            whole, frac = modf(-f)
            return -whole, -frac
        if f == 0:
            return f, f
        return 0.0, f
    x = float32bits(f)
    e = ((x >> SHIFT) & MASK) - BIAS
    if e < 32 - 9:
        x &= ~((1 << (32 - 9 - e)) - 1)
    whole = float32frombits(x)
    return whole, f32(f - whole)


def frexp(f):
    """Split f into a fraction in [0.5, 1) and a power of two."""
    f = f32(f)
    if f == 0 or isinf(f) or isnan(f):
        return f, 0
    f, exp = _normalize(f)
    x = float32bits(f)
    exp += ((x >> SHIFT) & MASK) - BIAS + 1
    x &= ~(MASK << SHIFT)
    x |= (BIAS - 1) << SHIFT
    return float32frombits(x), exp


def ldexp(frac, exp):
    """Return frac * 2**exp, rounded to single precision."""
    frac = f32(frac)
    if frac == 0 or isinf(frac) or isnan(frac):
        return frac
    frac, e = _normalize(frac)
    exp += e
    x = float32bits(frac)
    exp += ((x >> SHIFT) & MASK) - BIAS
    if exp < -149:
        return copysign(0.0, frac)
    if exp > 127:
        return inf(-1) if frac < 0 else inf(1)
    m = 1.0
    if exp < -(BIAS - 1):
        exp += SHIFT
        m = 1.0 / (1 << 23)
    x &= ~(MASK << SHIFT)
    x |= (exp + BIAS) << SHIFT
    return f32(m * float32frombits(x))


def round(x):
    """Nearest integer, rounding half away from zero."""
    bits = float32bits(x)
    e = (bits >> SHIFT) & MASK
    if e < BIAS:
        bits &= SIGN_MASK
        if e == BIAS - 1:
            bits |= UVONE
    elif e < BIAS + SHIFT:
        half = 1 << (SHIFT - 1)
        e -= BIAS
        bits += half >> e
        bits &= ~(FRAC_MASK >> e)
    return float32frombits(bits)


def round_to_even(x):
    """Nearest integer, rounding ties to even."""
    bits = float32bits(x)
    e = (bits >> SHIFT) & MASK
    if e >= BIAS:
        e -= BIAS
        if e < SHIFT:
            half_minus_ulp = (1 << (SHIFT - 1)) - 1
            bits += (half_minus_ulp + ((bits >> (SHIFT - e)) & 1)) >> e
            bits &= ~(FRAC_MASK >> e)
    elif e == BIAS - 1 and bits & FRAC_MASK:
        bits = (bits & SIGN_MASK) | UVONE
    else:
        bits &= SIGN_MASK
    return float32frombits(bits)


def mod(x, y):
    """Remainder of x/y whose sign agrees with x."""
    x, y = f32(x), f32(y)
    if y == 0 or isinf(x) or isnan(x) or isnan(y):
        return nan()
    if y < 0:
        y = -y
    yfr, yexp = frexp(y)
    negative = x < 0
    r = -x if negative else x
    while r >= y:
        rfr, rexp = frexp(r)
        if rfr < yfr:
            rexp -= 1
        r = f32(r - ldexp(y, rexp - yexp))
    return -r if negative else r


def remainder(x, y):
    """IEEE 754 remainder of x/y."""
    x, y = f32(x), f32(y)
    if isnan(x) or isnan(y) or isinf(x) or y == 0:
        return nan()
    if isinf(y):
        return x
    hx = float32bits(x) & 0x7FFFFFFF
    hy = float32bits(y) & 0x7FFFFFFF
    if hy <= 0x7EFFFFFF:
        x = mod(x, f32(y + y))
    if hx == hy:
        return 0.0
    negative = x < 0
    if negative:
        x = -x
    if y < 0:
        y = -y
    if hy < 0x01000000:
        if f32(x + x) > y:
            x = f32(x - y)
            if f32(x + x) >= y:
                x = f32(x - y)
    else:
        y_half = f32(0.5 * y)
        if x > y_half:
            x = f32(x - y)
            if x >= y_half:
                x = f32(x - y)
    return -x if negative else x


def fmax(x, y):
    """Larger of x and y, with +Inf winning over NaN and +0 over -0."""
    x, y = f32(x), f32(y)
    if isinf(x, 1) or isinf(y, 1):
        return inf(1)
    if isnan(x) or isnan(y):
        return nan()
    if x == 0 and x == y:
        return y if signbit(x) else x
    return x if x > y else y


def fmin(x, y):
    """Smaller of x and y, with -Inf winning over NaN and -0 over +0."""
    x, y = f32(x), f32(y)
    if isinf(x, -1) or isinf(y, -1):
        return inf(-1)
    if isnan(x) or isnan(y):
        return nan()
    if x == 0 and x == y:
        return x if signbit(x) else y
    return x if x < y else y


def dim(x, y):
    """Maximum of x-y and 0."""
    return fmax(f32(f32(x) - f32(y)), 0.0)