import pytest

from math32.core import LN10, f32, fabs, float32frombits, inf, isnan, nan, signbit, copysign, nextafter
from math32.exponential import exp, exp2, expm1, log, sqrt
from math32.rounding import ldexp

VF = [
    f32(v)
    for v in (
        4.9790119248836735e00,
        7.7388724745781045e00,
        -2.7688005719200159e-01,
        -5.0106036182710749e00,
        9.6362937071984173e00,
        2.9263772392439646e00,
        5.2290834314593066e00,
        2.7279399104360102e00,
        1.8253080916808550e00,
        -8.6859247685756013e00,
    )
]

EXP = [
    1.4533071302642137507696589e02,
    2.2958822575694449002537581e03,
    7.5814542574851666582042306e-01,
    6.6668778421791005061482264e-03,
    1.5310493273896033740861206e04,
    1.8659907517999328638667732e01,
    1.8662167355098714543942057e02,
    1.5301332413189378961665788e01,
    6.2047063430646876349125085e00,
    1.6894712385826521111610438e-04,
]
EXPM1 = [
    5.105047796122957327384770212e-02,
    8.046199708567344080562675439e-02,
    -2.764970978891639815187418703e-03,
    -4.8871434888875355394330300273e-02,
    1.0115864277221467777117227494e-01,
    2.969616407795910726014621657e-02,
    5.368214487944892300914037972e-02,
    2.765488851131274068067445335e-02,
    1.842068661871398836913874273e-02,
    -8.3193870863553801814961137573e-02,
]
EXP2 = [
    3.1537839463286288034313104e01,
    2.1361549283756232296144849e02,
    8.2537402562185562902577219e-01,
    3.1021158628740294833424229e-02,
    7.9581744110252191462569661e02,
    7.6019905892596359262696423e00,
    3.7506882048388096973183084e01,
    6.6250893439173561733216375e00,
    3.5438267900243941544605339e00,
    2.4281533133513300984289196e-03,
]
LOG = [
    1.605231462693062999102599e00,
    2.0462560018708770653153909e00,
    -1.2841708730962657801275038e00,
    1.6115563905281545116286206e00,
    2.2655365644872016636317461e00,
    1.0737652208918379856272735e00,
    1.6542360106073546632707956e00,
    1.0035467127723465801264487e00,
    6.0174879014578057187016475e-01,
    2.161703872847352815363655e00,
]
SQRT = [
    2.2313699659365484748756904e00,
    2.7818829009464263511285458e00,
    5.2619393496314796848143251e-01,
    2.2384377628763938724244104e00,
    3.1042380236055381099288487e00,
    1.7106657298385224403917771e00,
    2.286718922705479046148059e00,
    1.6516476350711159636222979e00,
    1.3510396336454586262419247e00,
    2.9471892997524949215723329e00,
]

NEG_ZERO = copysign(0.0, -1.0)


def tolerance(a, b, e):
    a, b, e = f32(a), f32(b), f32(e)
    d = fabs(f32(a - b))
    if b != 0:
        e = fabs(f32(e * b))
    return d < e


def close(a, b):
    return tolerance(a, b, 1e-5)


def veryclose(a, b):
    return tolerance(a, b, 1e-6)


def alike(a, b):
    if isnan(a) and isnan(b):
        return True
    if a == b:
        return signbit(a) == signbit(b)
    return False


EXP_SPECIAL = [
    (inf(-1), 0.0),
    (-2000.0, 0.0),
    (2000.0, inf(1)),
    (inf(1), inf(1)),
    (nan(), nan()),
]


@pytest.mark.parametrize("x, want", list(zip(VF, EXP)))
def test_exp_values(x, want):
    assert close(f32(want), exp(x))


@pytest.mark.parametrize("x, want", EXP_SPECIAL)
def test_exp_special(x, want):
    assert alike(want, exp(x))


def test_exp_of_tiny_argument_is_one_plus_x():
    assert exp(2.0**-30) == f32(1 + 2.0**-30)
    assert exp(0.0) == 1.0


@pytest.mark.parametrize("x, want", list(zip(VF, EXP2)))
def test_exp2_values(x, want):
    assert close(f32(want), exp2(x))


@pytest.mark.parametrize("x, want", EXP_SPECIAL)
def test_exp2_special(x, want):
    assert alike(want, exp2(x))


@pytest.mark.parametrize("n", range(-1074, 1024, 7))
def test_exp2_integer_powers(n):
    assert exp2(f32(n)) == ldexp(1.0, n)


@pytest.mark.parametrize("x, want", list(zip(VF, EXPM1)))
def test_expm1_small(x, want):
    a = f32(x / 100)
    assert veryclose(f32(want), expm1(a))


def test_expm1_large_saturates():
    assert expm1(f32(VF[4] * 10)) == inf(1)
    assert expm1(f32(VF[3] * 10)) == -1.0
    assert expm1(f32(VF[9] * 10)) == -1.0


@pytest.mark.parametrize(
    "x, want",
    [
        (inf(-1), -1.0),
        (-710.0, -1.0),
        (NEG_ZERO, NEG_ZERO),
        (0.0, 0.0),
        (710.0, inf(1)),
        (inf(1), inf(1)),
        (nan(), nan()),
    ],
)
def test_expm1_special(x, want):
    assert alike(want, expm1(x))


@pytest.mark.parametrize("x, want", list(zip(VF, LOG)))
def test_log_values(x, want):
    assert close(f32(want), log(fabs(x)))


def test_log_ten_within_one_ulp():
    got = log(10.0)
    assert got in (nextafter(LN10, 0.0), LN10, nextafter(LN10, 10.0))


@pytest.mark.parametrize(
    "x, want",
    [
        (inf(-1), nan()),
        (-f32(3.14159265358979), nan()),
        (NEG_ZERO, inf(-1)),
        (0.0, inf(-1)),
        (1.0, 0.0),
        (inf(1), inf(1)),
        (nan(), nan()),
    ],
)
def test_log_special(x, want):
    assert alike(want, log(x))


@pytest.mark.parametrize("x", [0.5, 1.0, 2.5, 37.0])
def test_log_inverts_exp(x):
    assert close(f32(x), log(exp(x)))


@pytest.mark.parametrize("x, want", list(zip(VF, SQRT)))
def test_sqrt_values(x, want):
    assert tolerance(sqrt(fabs(x)), f32(want), 1e-7)


@pytest.mark.parametrize(
    "x, want",
    [
        (inf(-1), nan()),
        (-f32(3.14159265358979), nan()),
        (NEG_ZERO, NEG_ZERO),
        (0.0, 0.0),
        (inf(1), inf(1)),
        (nan(), nan()),
        (float32frombits(2), 5.293955920339377e-23),
    ],
)
def test_sqrt_special(x, want):
    assert alike(want, sqrt(x))


@pytest.mark.parametrize("x, want", [(16.0, 4.0), (2.25, 1.5), (1.0, 1.0), (0.25, 0.5)])
def test_sqrt_exact_squares(x, want):
    assert sqrt(x) == want