"""Powers and the Euclidean norm in single precision."""

from .core import copysign, f32, fabs, inf, isinf, isnan, nan, signbit
from .exponential import exp, log, sqrt
from .rounding import frexp, ldexp, modf


def _recip(v):
    """1/v in single precision, with division by zero giving a signed infinity."""
    if v == 0:
        return inf(-1) if signbit(v) else inf(1)
    return f32(1 / v)


def _is_odd_int(x):
    whole, frac = modf(x)
    return frac == 0 and int(whole) & 1 == 1


def pow(x, y):
    """x raised to the power y."""
    x, y = f32(x), f32(y)
    if y == 0 or x == 1:
        return 1.0
    if y == 1:
        return x
    if y == 0.5:
        return sqrt(x)
    if y == -0.5:
        return _recip(sqrt(x))
    if isnan(x) or isnan(y):
        return nan()
    if x == 0:
        if y < 0:
            return copysign(inf(1), x) if _is_odd_int(y) else inf(1)
        return x if _is_odd_int(y) else 0.0
    if isinf(y):
        if x == -1:
            return 1.0
        if (fabs(x) < 1) == isinf(y, 1):
            return 0.0
        return inf(1)
    if isinf(x):
        if isinf(x, -1):
            return pow(_recip(x), -y)
        return 0.0 if y < 0 else inf(1)

    flip = y < 0
    absy = -y if flip else y
    yi, yf = modf(absy)
    if yf != 0 and x < 0:
        return nan()
    if yi >= 1 << 31:
        return exp(f32(y * log(x)))

    a1 = 1.0
    ae = 0
    if yf != 0:
        if yf > 0.5:
            yf = f32(yf - 1)
            yi = f32(yi + 1)
        a1 = exp(f32(yf * log(x)))

    x1, xe = frexp(x)
    i = int(yi)
    while i:
        if i & 1:
            a1 = f32(a1 * x1)
            ae += xe
        x1 = f32(x1 * x1)
        xe <<= 1
        if x1 < 0.5:
            x1 = f32(x1 + x1)
            xe -= 1
        i >>= 1

    if flip:
        a1 = _recip(a1)
        ae = -ae
    return ldexp(a1, ae)


def pow10(e):
    """10 raised to the integer power e, rounded to single precision."""
    if e < -323:
        return 0.0
    if e > 308:
        return inf(1)
    return f32(float(f"1e{e}"))


def hypot(p, q):
    """sqrt(p*p + q*q) without needless overflow or underflow."""
    p, q = f32(p), f32(q)
    if isinf(p) or isinf(q):
        return inf(1)
    if isnan(p) or isnan(q):
        return nan()
    p, q = abs(p), abs(q)
    if p < q:
        p, q = q, p
    if p == 0:
        return 0.0
    q = f32(q / p)
    return f32(p * sqrt(f32(1 + f32(q * q))))