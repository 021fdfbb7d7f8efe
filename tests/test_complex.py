import cmath
import math

import pytest

from zcalc.complex import Complex, ZERO, ONE, I, NAN, INFINITY, PI


def approx(z):
    return pytest.approx(complex(z))


def test_arithmetic():
    z = Complex(1, 2)
    w = Complex(3, 4)

    assert z + w == Complex(4, 6)
    assert z - w == Complex(-2, -2)
    assert z * w == Complex(-5, 10)
    assert Complex(-5, 10) / w == Complex(1, 2)
    assert -z == Complex(-1, -2)


def test_immutable():
    z = Complex(1, 2)
    z.add(ONE)

    assert z == Complex(1, 2)

    with pytest.raises(AttributeError):
        z.real = 5


def test_divide_by_zero():
    assert ONE.divide(ZERO).is_infinite()
    assert ZERO.divide(ZERO).is_infinite()
    assert NAN.divide(ZERO).is_nan()


def test_sentinels():
    assert NAN.is_nan()
    assert not NAN.is_infinite()
    assert INFINITY.is_infinite()
    assert not INFINITY.is_nan()
    assert not ONE.is_nan()
    assert not ONE.is_infinite()
    assert NAN != NAN


def test_is_infinite_needs_both_components():
    assert Complex(-math.inf, -math.inf).is_infinite()
    assert not Complex(math.inf, 0).is_infinite()
    assert not Complex(0, -math.inf).is_infinite()
    assert not Complex(math.inf, math.nan).is_infinite()


def test_is_real():
    assert Complex(3).is_real()
    assert Complex(3, -0.0).is_real()
    assert not I.is_real()


def test_modulus_and_argument():
    z = Complex(3, -4)

    assert z.abs() == 5
    assert z.modulus() == Complex(5, 0)
    assert z.conjugate() == Complex(3, 4)
    assert Complex(-1).arg() == math.pi
    assert I.argument() == Complex(math.pi / 2)


def test_ln_of_zero():
    assert ZERO.ln() == Complex(-math.inf, 0)
    assert not ZERO.ln().is_infinite()


def test_ln_principal_branch():
    assert Complex(-1).ln() == Complex(0, math.pi)
    assert Complex(-1, -0.0).ln() == Complex(0, math.pi)
    assert ONE.negate().ln() == Complex(0, math.pi)


def test_exp_overflow():
    assert Complex(1000).exp() == Complex(math.inf, 0)
    assert not Complex(1000).exp().is_infinite()
    assert Complex(-1000).exp() == ZERO


def test_sqrt():
    assert Complex(4).sqrt() == Complex(2)
    assert Complex(-1).sqrt() == I
    assert Complex(-4, -0.0).sqrt() == Complex(0, 2)
    assert complex(Complex(3, 4).sqrt()) == pytest.approx(2 + 1j)


def test_power_real():
    assert Complex(3) ** 2 == Complex(9)
    assert Complex(-2) ** 3 == Complex(-8)
    assert Complex(4) ** 0.5 == Complex(2)
    assert Complex(2) ** -1 == Complex(0.5)


def test_power_zero_base():
    assert ZERO ** 2 == ZERO
    assert ZERO ** 0 == ONE
    assert (ZERO ** -1).is_infinite()
    assert (ZERO ** I).is_nan()


def test_power_complex():
    assert complex(Complex(-4) ** 0.5) == pytest.approx(2j)
    assert complex(I ** 2) == pytest.approx(-1)
    assert complex(Complex(1, 1) ** Complex(0.5, 0.5)) == pytest.approx((1 + 1j) ** (0.5 + 0.5j))


def test_power_overflow():
    assert Complex(10) ** 400 == Complex(math.inf)
    assert Complex(-10) ** 401 == Complex(-math.inf)


def test_power_nan():
    assert (NAN ** 2).is_nan()
    assert (Complex(2) ** NAN).is_nan()


@pytest.mark.parametrize("name, reference", [
    ('exp', cmath.exp),
    ('ln', cmath.log),
    ('log10', cmath.log10),
    ('log2', lambda z: cmath.log(z, 2)),
    ('sqrt', cmath.sqrt),
    ('sin', cmath.sin),
    ('cos', cmath.cos),
    ('tan', cmath.tan),
    ('sinh', cmath.sinh),
    ('cosh', cmath.cosh),
    ('tanh', cmath.tanh),
    ('arcsin', cmath.asin),
    ('arctan', cmath.atan),
    ('cot', lambda z: 1 / cmath.tan(z)),
    ('sec', lambda z: 1 / cmath.cos(z)),
    ('csc', lambda z: 1 / cmath.sin(z)),
])
def test_elementary_functions(name, reference):
    for z in [Complex(0.5, 0.3), Complex(-1.2, 0.7), Complex(2.0, -0.4)]:
        actual = getattr(z, name)()
        assert complex(actual) == pytest.approx(reference(complex(z)))


def test_arccos_real_domain():
    assert complex(Complex(0.5).arccos()) == pytest.approx(math.pi / 3)
    assert complex(Complex(-0.5).arccos()) == pytest.approx(2 * math.pi / 3)
    assert complex(Complex(1).arccos()) == pytest.approx(0)
    assert complex(Complex(-1).arccos()) == pytest.approx(math.pi)


def test_arccos_outside_unit_interval():
    w = Complex(2).arccos()

    assert w.real == pytest.approx(0)
    assert w.imag == pytest.approx(math.acosh(2))


def test_trig_of_real():
    for x in [-2.5, -1, 0, 0.3, 1.7]:
        assert complex(Complex(x).sin()) == pytest.approx(math.sin(x))
        assert complex(Complex(x).cos()) == pytest.approx(math.cos(x))
        assert complex(Complex(x).arctan()) == pytest.approx(math.atan(x))


def test_csc_of_zero():
    assert Complex(0).csc().is_infinite()


def test_trig_of_infinity_does_not_raise():
    assert Complex(math.inf).sin().is_nan()
    assert Complex(math.inf).cos().is_nan()


def test_rad_deg():
    assert complex(Complex(180).rad()) == pytest.approx(math.pi)
    assert complex(Complex(math.pi).deg()) == pytest.approx(180)
    assert complex(Complex(-90).rad()) == pytest.approx(-math.pi / 2)
    assert Complex(2).rad().is_real()


def test_rad_deg_of_non_real():
    assert Complex(1, 1).rad().is_nan()
    assert I.deg().is_nan()
    assert NAN.rad().is_nan()


def test_str():
    assert str(Complex(1, -2)) == "(1.0 - 2.0i)"
    assert str(PI) == f"({math.pi} + 0.0i)"
    assert repr(Complex(1, 2)) == "Complex(1.0, 2.0)"


def test_unpacking():
    re, im = Complex(1, 2)

    assert (re, im) == (1.0, 2.0)
