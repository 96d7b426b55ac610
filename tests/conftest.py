"""Shared test fixtures for PyFHECoeffs tests."""

import cmath
import math

import numpy as np
import pytest

from pyfhecoeffs import ChebyshevApproximator, HermiteInterpolator


# ---------------------------------------------------------------------------
# Test functions
# ---------------------------------------------------------------------------

def square(x):
    """x^2"""
    return x * x


def parity(i):
    """Lowest bit of a 4-bit plaintext: i mod 2."""
    return float(i % 2)


def square_mod_7(i):
    return float((i * i) % 7)


class CallRecorder:
    """Wrap a function and record every argument it is called with."""

    def __init__(self, func):
        self.func = func
        self.calls = []

    def __call__(self, x):
        self.calls.append(x)
        return self.func(x)


# ---------------------------------------------------------------------------
# Loop-based references, written straight from the closed-form sums
# ---------------------------------------------------------------------------

def _reference_chebyshev(func, a, b, degree):
    n = degree + 1
    samples = [
        func(math.cos(math.pi * (i + 0.5) / n) * 0.5 * (b - a) + 0.5 * (a + b))
        for i in range(n)
    ]
    coeffs = []
    for i in range(n):
        acc = sum(samples[j] * math.cos(math.pi * i * (j + 0.5) / n) for j in range(n))
        coeffs.append(acc * 2.0 / n)
    return np.array(coeffs)


def _tap(y, freq):
    p = len(y)
    return sum(y[l] * cmath.exp(complex(0, -2 * math.pi * freq * l / p)) for l in range(p))


def _reference_hermite(y, order):
    p = len(y)
    alpha = [0j] * p
    alpha[0] = complex(sum(y) / p)
    for k in range(1, p):
        alpha[k] = _tap(y, k) * 2.0 * (p - k) / (p * p)
    if order == 1:
        return np.array(alpha)

    if order == 2:
        half = p // 2
        beta = [0j] * (half + 1)
        delta = [0j] * (half + 1)
        theta = [0j] * (half + 1)
        for k in range(1, half + 1):
            gamma = 1 if (p % 2 == 0 and k == half) else 0
            scale = (2 - gamma) * k * (p - k) / p ** 3
            beta[k - 1] = _tap(y, k) * scale
            delta[k - 1] = _tap(y, p + k) * scale
            theta[k - 1] = _tap(y, p - k) * scale
        n = 3 * p // 2
        coeffs = [0j] * n
        coeffs[0] = alpha[0]
        for i in range(1, n):
            if i < half:
                coeffs[i] = alpha[i] + beta[i]
            elif i == half:
                coeffs[i] = alpha[i] + beta[i] - (1 - p % 2) * 0.5 * theta[p - i - p % 2]
            elif i < p:
                coeffs[i] = alpha[i] - 0.5 * theta[p - i]
            elif i > p:
                coeffs[i] = -0.5 * delta[i - p]
        return np.array(coeffs)

    beta = [0j] * p
    delta = [0j] * p
    theta = [0j] * p
    for k in range(1, p):
        scale = 2.0 * k * (p - k) * (2 * p - k) / (3.0 * p ** 4)
        beta[k] = _tap(y, k) * scale
        delta[k] = _tap(y, p + k) * scale
        theta[k] = _tap(y, p - k) * scale
    coeffs = [0j] * (2 * p)
    coeffs[0] = alpha[0]
    for i in range(1, 2 * p):
        if i < p:
            coeffs[i] = alpha[i] + beta[i] - 0.5 * theta[p - i]
        if i > p:
            coeffs[i] = -0.5 * delta[i - p]
    return np.array(coeffs)


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def cheb_exp():
    """Pre-built degree-16 approximation of exp on [-1, 1]."""
    approx = ChebyshevApproximator(math.exp, -1.0, 1.0, 16)
    approx.build(verbose=False)
    return approx


@pytest.fixture
def cheb_log_shifted():
    """Pre-built degree-24 approximation of log on [2, 5]."""
    approx = ChebyshevApproximator(math.log, 2.0, 5.0, 24)
    approx.build(verbose=False)
    return approx


@pytest.fixture
def hermite_parity_3():
    """Pre-built third-order interpolant of i mod 2 over p = 16."""
    interp = HermiteInterpolator(parity, 16, order=3)
    interp.build(verbose=False)
    return interp


@pytest.fixture
def random_samples():
    """Reproducible real samples for p = 1..16."""
    rng = np.random.default_rng(42)
    return {p: rng.uniform(-1.0, 1.0, size=p) for p in range(1, 17)}
