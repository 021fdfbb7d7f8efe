# Immutable complex values. Domain problems come back as NaN or infinite values, never exceptions.

import math


def _exp(t):
    try:
        return math.exp(t)
    except OverflowError:
        return math.inf


def _log(t):
    if t == 0:
        return -math.inf
    return math.log(t)


def _sin(t):
    if math.isinf(t):
        return math.nan
    return math.sin(t)


def _cos(t):
    if math.isinf(t):
        return math.nan
    return math.cos(t)


def _sinh(t):
    return (_exp(t) - _exp(-t)) / 2


def _cosh(t):
    return (_exp(t) + _exp(-t)) / 2


def _coerce(w):
    if isinstance(w, Complex):
        return w
    if isinstance(w, complex):
        return Complex(w.real, w.imag)
    return Complex(w)


class Complex:
    __slots__ = ('_re', '_im')

    def __init__(self, real=0.0, imag=0.0):
        self._re = float(real)
        self._im = float(imag)

    @classmethod
    def from_polar(cls, r, theta):
        return cls(r * _cos(theta), r * _sin(theta))

    @property
    def real(self):
        return self._re

    @property
    def imag(self):
        return self._im

    # polar form

    def abs(self):
        return math.hypot(self._re, self._im)

    def modulus(self):
        return Complex(self.abs())

    def arg(self):
        # -0.0 + 0.0 == 0.0, keeps the principal argument in (-pi, pi]
        return math.atan2(self._im + 0.0, self._re)

    def argument(self):
        return Complex(self.arg())

    def polar(self):
        return self.abs(), self.arg()

    def conjugate(self):
        return Complex(self._re, -self._im)

    def negate(self):
        return Complex(-self._re, -self._im)

    # arithmetic

    def add(self, w):
        w = _coerce(w)
        return Complex(self._re + w._re, self._im + w._im)

    def subtract(self, w):
        w = _coerce(w)
        return Complex(self._re - w._re, self._im - w._im)

    def multiply(self, w):
        w = _coerce(w)
        a, b, c, d = self._re, self._im, w._re, w._im
        return Complex(a*c - b*d, a*d + b*c)

    def divide(self, w):
        w = _coerce(w)
        a, b, c, d = self._re, self._im, w._re, w._im
        den = c*c + d*d

        if den == 0:
            if self.is_nan():
                return NAN
            return INFINITY

        return Complex((a*c + b*d) / den, (b*c - a*d) / den)

    def power(self, w):
        # zero base and real-only fast paths first, then exp(w * ln z)
        w = _coerce(w)

        if self.is_nan() or w.is_nan():
            return NAN

        a, c = self._re, w._re

        if a == 0 and self._im == 0:
            if c > 0:
                return ZERO
            if c == 0 and w._im == 0:
                return ONE
            if w._im == 0:
                return INFINITY
            return NAN

        if self._im == 0 and w._im == 0 and (a > 0 or c.is_integer()):
            try:
                return Complex(math.pow(a, c))
            except OverflowError:
                if a < 0 and c % 2 == 1:
                    return Complex(-math.inf)
                return Complex(math.inf)

        return self.ln().multiply(w).exp()

    # exponentials and logarithms

    def exp(self):
        e = _exp(self._re)
        if self._im == 0:
            return Complex(e)
        return Complex(e * _cos(self._im), e * _sin(self._im))

    def ln(self):
        return Complex(_log(self.abs()), self.arg())

    def log(self, base):
        return self.ln().divide(_log(base))

    def log2(self):
        return self.log(2)

    def log10(self):
        return self.log(10)

    def sqrt(self):
        if self._im == 0:
            if self._re >= 0:
                return Complex(math.sqrt(self._re))
            if self._re < 0:
                return Complex(0.0, math.sqrt(-self._re))

        r = math.sqrt(self.abs())
        theta = self.arg() / 2
        return Complex(r * _cos(theta), r * _sin(theta))

    # trigonometry

    def sin(self):
        a, b = self._re, self._im
        if b == 0:
            return Complex(_sin(a))
        return Complex(_cosh(b) * _sin(a), _sinh(b) * _cos(a))

    def cos(self):
        a, b = self._re, self._im
        if b == 0:
            return Complex(_cos(a))
        return Complex(_cosh(b) * _cos(a), -_sinh(b) * _sin(a))

    def tan(self):
        return self.sin().divide(self.cos())

    def cot(self):
        return ONE.divide(self.tan())

    def sec(self):
        return ONE.divide(self.cos())

    def csc(self):
        return ONE.divide(self.sin())

    def sinh(self):
        a, b = self._re, self._im
        if b == 0:
            return Complex(_sinh(a))
        return Complex(_sinh(a) * _cos(b), _cosh(a) * _sin(b))

    def cosh(self):
        a, b = self._re, self._im
        if b == 0:
            return Complex(_cosh(a))
        return Complex(_cosh(a) * _cos(b), _sinh(a) * _sin(b))

    def tanh(self):
        return self.sinh().divide(self.cosh())

    def arcsin(self):
        # -i * ln(sqrt(1 - z^2) + iz)
        w = ONE.subtract(self.multiply(self)).sqrt().add(self.multiply(I))
        return NEGATIVE_I.multiply(w.ln())

    def arccos(self):
        # -i * ln(z + sqrt(z^2 - 1)), folded onto the principal branch
        w = self.multiply(self).subtract(ONE).sqrt().add(self).ln().multiply(NEGATIVE_I)
        if w._re >= 0:
            return Complex(w._re, -w._im)
        return w.negate()

    def arctan(self):
        # -i/2 * ln((z - i) / (-z - i))
        q = self.subtract(I).divide(self.negate().subtract(I))
        return NEGATIVE_I.multiply(q.ln()).divide(2.0)

    # angle units, real input only

    def rad(self):
        if not self.is_real():
            return NAN
        return Complex(math.radians(self._re))

    def deg(self):
        if not self.is_real():
            return NAN
        return Complex(math.degrees(self._re))

    # predicates

    def is_real(self):
        return self._im == 0

    def is_nan(self):
        return math.isnan(self._re) or math.isnan(self._im)

    def is_infinite(self):
        return math.isinf(self._re) and math.isinf(self._im)

    def equals(self, w):
        w = _coerce(w)
        return self._re == w._re and self._im == w._im

    # python protocol

    def __eq__(self, other):
        if isinstance(other, (Complex, complex, int, float)):
            return self.equals(other)
        return NotImplemented

    def __hash__(self):
        return hash((self._re, self._im))

    def __neg__(self):
        return self.negate()

    def __add__(self, other):
        return self.add(other)

    def __sub__(self, other):
        return self.subtract(other)

    def __mul__(self, other):
        return self.multiply(other)

    def __truediv__(self, other):
        return self.divide(other)

    def __pow__(self, other):
        return self.power(other)

    def __abs__(self):
        return self.abs()

    def __complex__(self):
        return complex(self._re, self._im)

    def __iter__(self):
        yield self._re
        yield self._im

    def __repr__(self):
        return f"Complex({self._re!r}, {self._im!r})"

    def __str__(self):
        sign = '-' if self._im < 0 else '+'
        return f"({self._re} {sign} {abs(self._im)}i)"


ZERO = Complex(0.0, 0.0)
ONE = Complex(1.0, 0.0)
I = Complex(0.0, 1.0)
NEGATIVE_I = Complex(0.0, -1.0)
PI = Complex(math.pi)
E = Complex(math.e)
NAN = Complex(math.nan, math.nan)
INFINITY = Complex(math.inf, math.inf)
