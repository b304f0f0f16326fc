"""Single-precision bit access, classification, sign handling and constants.

Values are carried as Python floats that always hold an exact IEEE 754
binary32 value; :func:`f32` rounds an arbitrary float to that set.
"""

import math
import struct

_F32 = struct.Struct("<f")
_U32 = struct.Struct("<I")
_F64 = struct.Struct("<d")
_U64 = struct.Struct("<Q")

UVNAN = 0x7FE00000
UVINF = 0x7F800000
UVONE = 0x3F800000
UVNEGINF = 0xFF800000
MASK = 0xFF
SHIFT = 32 - 8 - 1
BIAS = 127
SIGN_MASK = 1 << 31
FRAC_MASK = (1 << SHIFT) - 1

MAX_FLOAT32 = 3.40282346638528859811704183484516925440e38
SMALLEST_NONZERO_FLOAT32 = 1.401298464324817070923729583289916131280e-45

MAX_INT8 = (1 << 7) - 1
MIN_INT8 = -(1 << 7)
MAX_INT16 = (1 << 15) - 1
MIN_INT16 = -(1 << 15)
MAX_INT32 = (1 << 31) - 1
MIN_INT32 = -(1 << 31)
MAX_INT64 = (1 << 63) - 1
MIN_INT64 = -(1 << 63)
MAX_UINT8 = (1 << 8) - 1
MAX_UINT16 = (1 << 16) - 1
MAX_UINT32 = (1 << 32) - 1
MAX_UINT64 = (1 << 64) - 1


def f32(x):
    """Round x to the nearest single-precision value."""
    x = float(x)
    try:
        return _F32.unpack(_F32.pack(x))[0]
    except OverflowError:
        return math.copysign(math.inf, x)


E = f32(2.71828182845904523536028747135266249775724709369995957496696763)
PI = f32(3.14159265358979323846264338327950288419716939937510582097494459)
PHI = f32(1.61803398874989484820458683436563811772030917980576286213544862)

SQRT2 = f32(1.41421356237309504880168872420969807856967187537694807317667974)
SQRTE = f32(1.64872127070012814684865078781416357165377610071014801157507931)
SQRTPI = f32(1.77245385090551602729816748334114518279754945612238712821380779)
SQRTPHI = f32(1.27201964951406896425242246173749149171560804184009624861664038)

LN2 = f32(0.693147180559945309417232121458176568075500134360255254120680009)
LOG2E = f32(1 / LN2)
LN10 = f32(2.30258509299404568401799145468436420760110148862877297603332790)
LOG10E = f32(1 / LN10)


def float32bits(f):
    """Return the IEEE 754 binary32 representation of f as an int."""
    return _U32.unpack(_F32.pack(f32(f)))[0]


def float32frombits(b):
    """Return the single-precision value whose binary32 representation is b."""
    return _F32.unpack(_U32.pack(b & 0xFFFFFFFF))[0]


def float64bits(f):
    """Return the IEEE 754 binary64 representation of f as an int."""
    return _U64.unpack(_F64.pack(float(f)))[0]


def float64frombits(b):
    """Return the double-precision value whose binary64 representation is b."""
    return _F64.unpack(_U64.pack(b & 0xFFFFFFFFFFFFFFFF))[0]


def inf(sign):
    """Positive infinity if sign >= 0, negative infinity otherwise."""
    return math.inf if sign >= 0 else -math.inf


def nan():
    """Return a not-a-number value."""
    return float32frombits(UVNAN)


def isnan(f):
    """Report whether f is not-a-number."""
    return f != f


def isinf(f, sign=0):
    """Report whether f is an infinity of the given sign (0 means either)."""
    return (sign >= 0 and f > MAX_FLOAT32) or (sign <= 0 and f < -MAX_FLOAT32)


def fabs(x):
    """Absolute value of x; clears the sign bit, so NaN stays NaN."""
    return float32frombits(float32bits(x) & ~SIGN_MASK)


def copysign(x, y):
    """Value with the magnitude of x and the sign of y."""
    return float32frombits(
        (float32bits(x) & ~SIGN_MASK) | (float32bits(y) & SIGN_MASK)
    )


def signbit(x):
    """True if x is negative or negative zero."""
    return float32bits(x) & SIGN_MASK != 0


def nextafter(x, y):
    """Next representable single-precision value after x towards y."""
    x, y = f32(x), f32(y)
    if isnan(x) or isnan(y):
        return nan()
    if x == y:
        return x
    if x == 0:
        return copysign(float32frombits(1), y)
    if (y > x) == (x > 0):
        return float32frombits(float32bits(x) + 1)
    return float32frombits(float32bits(x) - 1)