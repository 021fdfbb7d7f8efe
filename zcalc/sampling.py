import numpy as np

from .expression import Expression

X_MIN = -10.0
X_MAX = 10.0
X_STEP = 0.001


class Samples:
    def __init__(self, x, real, imag):
        self.x = x
        self.real = real
        self.imag = imag

    @property
    def defined(self):
        return ~(np.isnan(self.real) | np.isnan(self.imag))

    @property
    def is_real(self):
        return bool(np.all(self.imag[self.defined] == 0))

    def __len__(self):
        return len(self.x)

    def __repr__(self):
        return f"Samples({len(self)} points, is_real={self.is_real})"


def sample(expression, lower=X_MIN, upper=X_MAX, step=X_STEP):
    if isinstance(expression, str):
        expression = Expression(expression)

    if step <= 0:
        raise ValueError(f"step must be positive, got {step}")

    xs = np.arange(lower, upper, step, dtype=float)
    real = np.empty_like(xs)
    imag = np.empty_like(xs)

    for i, x in enumerate(xs):
        y = expression.evaluate(float(x))
        real[i] = y.real
        imag[i] = y.imag

    return Samples(xs, real, imag)


def segments(xs, ys):
    xs = np.asarray(xs, dtype=float)
    ys = np.asarray(ys, dtype=float)

    finite = np.isfinite(ys)
    breaks = np.flatnonzero(np.diff(finite.astype(int))) + 1

    for cx, cy, ok in zip(np.split(xs, breaks), np.split(ys, breaks), np.split(finite, breaks)):
        if ok.size and ok[0]:
            yield cx, cy
