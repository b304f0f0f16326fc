"""Sine, cosine and tangent in single precision.

Arguments below 2**29 are reduced modulo pi/4 with a three-part split of
pi/4; larger arguments use a Payne-Hanek style reduction.
"""

from .core import (
    BIAS,
    MASK,
    PI,
    SHIFT,
    f32,
    fabs,
    float32bits,
    float32frombits,
    isinf,
    isnan,
    nan,
)

_M64 = (1 << 64) - 1

# pi/4 split into three parts for extended-precision reduction.
_PI4A = f32(7.85398125648498535156e-1)
_PI4B = f32(3.77489470793079817668e-8)
_PI4C = f32(2.69515142907905952645e-15)

_FOUR_OVER_PI = f32(4 / PI)
_PI4 = f32(PI / 4)

_SIN = tuple(
    f32(c)
    for c in (
        1.58962301576546568060e-10,
        -2.50507477628578072866e-8,
        2.75573136213857245213e-6,
        -1.98412698295895385996e-4,
        8.33333333332211858878e-3,
        -1.66666666666666307295e-1,
    )
)

_COS = tuple(
    f32(c)
    for c in (
        -1.13585365213876817300e-11,
        2.08757008419747316778e-9,
        -2.75573141792967388112e-7,
        2.48015872888517045348e-5,
        -1.38888888888730564116e-3,
        4.16666666666665929218e-2,
    )
)

_TAN_P = tuple(
    f32(c)
    for c in (
        -1.30936939181383777646e4,
        1.15351664838587416140e6,
        -1.79565251976484877988e7,
    )
)

_TAN_Q = tuple(
    f32(c)
    for c in (
        1.00000000000000000000e0,
        1.36812963470692954678e4,
        -1.32089234440210967447e6,
        2.50083801823357915839e7,
        -5.38695755929454629881e7,
    )
)

_TAN_SMALL = f32(1e-14)

REDUCE_THRESHOLD = 1 << 29

# Binary digits of 4/pi: 4/pi = sum of _M_PI4[i] * 2**(-64*i).
_M_PI4 = (
    0x0000000000000001,
    0x45F306DC9C882A53,
    0xF84EAFA3EA69BB81,
    0xB6C52B3278872083,
    0xFCA2C757BD778AC3,
    0x6E48DC74849BA5C0,
    0x0C925DD413A32439,
    0xFC3BD63962534E7D,
    0xD1046BEA5D768909,
    0xD338E04D68BEFC82,
    0x7323AC7306A673E9,
    0x3908BF177BF25076,
    0x3FF12FFFBC0B301F,
    0xDE5E2316B414DA3E,
    0xDA6CFD9E4F96136E,
    0x9E8C7ECD3CBFD45A,
    0xEA4F758FD7CBE2F6,
    0x7A0E73EF14A525D4,
    0xD7F6BF623F1ABA10,
    0xAC06608DF8F6D757,
)


def _shl(v, s):
    """64-bit left shift; shifts of 64 or more give zero."""
    return (v << s) & _M64 if s < 64 else 0


def _shr(v, s):
    """64-bit logical right shift; shifts of 64 or more give zero."""
    return v >> s if s < 64 else 0


def _trig_reduce(x):
    """Reduce a large positive x; return the octant j and remainder z."""
    if x < _PI4:
        return 0, x
    ix = float32bits(x)
    exp = ((ix >> SHIFT) & MASK) - BIAS - SHIFT
    ix &= ~(MASK << SHIFT) & 0xFFFFFFFF
    ix |= 1 << SHIFT

    floatingbits = 32 - 3
    digit, bitshift = divmod(exp + floatingbits, 32)
    back = 32 - bitshift
    z0 = _shl(_M_PI4[digit], bitshift) | _shr(_M_PI4[digit + 1], back)
    z1 = _shl(_M_PI4[digit + 1], bitshift) | _shr(_M_PI4[digit + 2], back)
    z2 = _shl(_M_PI4[digit + 2], bitshift) | _shr(_M_PI4[digit + 3], back)

    z2hi = (z2 * ix) >> 64
    prod1 = z1 * ix
    z1hi, z1lo = prod1 >> 64, prod1 & _M64
    z0lo = (z0 * ix) & _M64
    total = z1lo + z2hi
    lo, carry = total & _M64, total >> 64
    hi = (z0lo + z1hi + carry) & _M64

    j = hi >> floatingbits
    hi = _shl(hi, 3) | _shr(lo, floatingbits)
    lz = 64 - hi.bit_length()
    e = (BIAS - (lz + 1)) & _M64
    hi = _shl(hi, lz + 1) | _shr(lo, (32 - (lz + 1)) & _M64)
    hi >>= 43 - SHIFT
    hi |= (e << SHIFT) & _M64
    z = float32frombits(hi & 0xFFFFFFFF)
    if j & 1:
        j = (j + 1) & 7
        z = f32(z - 1)
    return j, f32(z * _PI4)


def _reduce(x):
    """Return the octant j and remainder z of a non-negative x."""
    if x >= REDUCE_THRESHOLD:
        return _trig_reduce(x)
    j = int(f32(x * _FOUR_OVER_PI))
    y = f32(j)
    if j & 1:
        j += 1
        y = f32(y + 1)
    j &= 7
    z = f32(f32(f32(x - f32(y * _PI4A)) - f32(y * _PI4B)) - f32(y * _PI4C))
    return j, z


def _horner(zz, coeffs):
    acc = coeffs[0]
    for c in coeffs[1:]:
        acc = f32(f32(acc * zz) + c)
    return acc


def _sin_poly(z, zz):
    return f32(z + f32(f32(z * zz) * _horner(zz, _SIN)))


def _cos_poly(zz):
    return f32(f32(1.0 - f32(0.5 * zz)) + f32(f32(zz * zz) * _horner(zz, _COS)))


def sincos(x):
    """Return (sin(x), cos(x))."""
    x = f32(x)
    if x == 0:
        return x, 1.0
    if isnan(x) or isinf(x):
        return nan(), nan()

    sin_neg = cos_neg = False
    if x < 0:
        x = -x
        sin_neg = True

    j, z = _reduce(x)
    if j > 3:
        j -= 4
        sin_neg, cos_neg = not sin_neg, not cos_neg
    if j > 1:
        cos_neg = not cos_neg

    zz = f32(z * z)
    c = _cos_poly(zz)
    s = _sin_poly(z, zz)
    if j in (1, 2):
        s, c = c, s
    if cos_neg:
        c = -c
    if sin_neg:
        s = -s
    return s, c


def sin(x):
    """Sine of the radian argument x."""
    x = f32(x)
    if x == 0 or isnan(x):
        return x
    if isinf(x):
        return nan()

    negative = False
    if x < 0:
        x = -x
        negative = True

    j, z = _reduce(x)
    if j > 3:
        negative = not negative
        j -= 4
    zz = f32(z * z)
    y = _cos_poly(zz) if j in (1, 2) else _sin_poly(z, zz)
    return -y if negative else y


def cos(x):
    """Cosine of the radian argument x."""
    x = f32(x)
    if isnan(x) or isinf(x):
        return nan()

    negative = False
    x = fabs(x)
    j, z = _reduce(x)
    if j > 3:
        j -= 4
        negative = not negative
    if j > 1:
        negative = not negative

    zz = f32(z * z)
    y = _sin_poly(z, zz) if j in (1, 2) else _cos_poly(zz)
    return -y if negative else y


def tan(x):
    """Tangent of the radian argument x."""
    x = f32(x)
    if x == 0 or isnan(x):
        return x
    if isinf(x):
        return nan()

    negative = False
    if x < 0:
        x = -x
        negative = True

    j, z = _reduce(x)
    zz = f32(z * z)
    if zz > _TAN_SMALL:
        p0, p1, p2 = _TAN_P
        _, q1, q2, q3, q4 = _TAN_Q
        num = f32(zz * f32(f32(f32(f32(p0 * zz) + p1) * zz) + p2))
        den = f32(f32(zz + q1) * zz)
        den = f32(f32(f32(den + q2) * zz) + q3)
        den = f32(f32(den * zz) + q4)
        y = f32(z + f32(z * f32(num / den)))
    else:
        y = z
    if j & 2:
        y = f32(-1 / y)
    return -y if negative else y