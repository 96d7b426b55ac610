"""Trigonometric (Hermite-style) interpolation on the cyclic domain ``{0..p-1}``.

Functional bootstrapping evaluates a function of an encrypted integer in
``[0, p)`` as a trigonometric sum ``sum_k c_k exp(2 pi i k x / p)``. This
module computes the ``c_k`` from the ``p`` samples ``y[l] = f(l)``.

All orders share the DFT tap

.. math::

    \\alpha_0 = \\frac{1}{p} \\sum_l y_l, \\qquad
    \\alpha_k = \\frac{2 (p - k)}{p^2} \\sum_l y_l e^{-2 \\pi i k l / p},
    \\quad 1 \\le k < p

and orders 2 and 3 add correction sequences ``beta``, ``delta`` and
``theta`` (kernels at frequencies ``k``, ``p + k`` and ``p - k``) that are
folded into a longer output with closed-form boundary terms.

============  ============  ========================================
Order         Length        Correction range and scale
============  ============  ========================================
1             ``p``         none
2             ``3p // 2``   ``k <= p // 2``, ``(2 - g) k (p-k) / p^3``
3             ``2p``        ``k < p``, ``2 k (p-k)(2p-k) / (3 p^4)``
============  ============  ========================================
"""

from __future__ import annotations

import enum
import time
from typing import Callable

import numpy as np

from pyfhecoeffs._sampling import _sample, _validate_count


class HermiteOrder(enum.IntEnum):
    """Correction order of the trigonometric interpolant."""

    FIRST = 1
    SECOND = 2
    THIRD = 3


def _validate_order(order) -> HermiteOrder:
    try:
        return HermiteOrder(order)
    except ValueError:
        raise ValueError(
            f"Hermite order {order!r} not supported (use 1, 2 or 3)"
        ) from None


def hermite_coefficient_count(p: int, order=HermiteOrder.FIRST) -> int:
    """Number of coefficients produced for period *p* at *order*.

    Raises
    ------
    ValueError
        If *p* is zero or *order* is not 1, 2 or 3.
    """
    p = _validate_count(p, "p")
    order = _validate_order(order)
    if order == HermiteOrder.FIRST:
        return p
    if order == HermiteOrder.SECOND:
        return 3 * p // 2
    return 2 * p


def _dft_tap(y: np.ndarray, frequencies: np.ndarray, p: int) -> np.ndarray:
    """Return ``sum_l y[l] exp(-2 pi i f l / p)`` for every frequency ``f``.

    The output index runs over *frequencies*; each row of the kernel matrix
    is independent, so the product is a single BLAS call.
    """
    index = np.arange(p)
    kernel = np.exp(-2j * np.pi * np.outer(frequencies, index) / p)
    return kernel @ y


def _assemble_second_order(y, p, alpha, base):
    half = p // 2
    k = np.arange(1, half + 1)
    gamma = ((p % 2 == 0) & (k == half)).astype(float)
    scale = (2.0 - gamma) * k * (p - k) / float(p) ** 3

    # One extra zero slot: the p // 2 boundary terms index one past the
    # computed entries.
    beta = np.zeros(half + 1, dtype=complex)
    delta = np.zeros(half + 1, dtype=complex)
    theta = np.zeros(half + 1, dtype=complex)
    beta[:half] = base[:half] * scale
    delta[:half] = _dft_tap(y, p + k, p) * scale
    theta[:half] = _dft_tap(y, p - k, p) * scale

    parity = p % 2
    n = 3 * p // 2
    coeffs = np.zeros(n, dtype=complex)
    coeffs[0] = alpha[0]
    for i in range(1, n):
        if i < half:
            coeffs[i] = alpha[i] + beta[i]
        elif i == half:
            coeffs[i] = alpha[i] + beta[i] - (1 - parity) * 0.5 * theta[p - i - parity]
        elif i < p:
            coeffs[i] = alpha[i] - 0.5 * theta[p - i]
        elif i > p:
            coeffs[i] = -0.5 * delta[i - p]
    return coeffs


def _assemble_third_order(y, p, alpha, base):
    k = np.arange(1, p)
    scale = 2.0 * k * (p - k) * (2 * p - k) / (3.0 * float(p) ** 4)

    beta = np.zeros(p, dtype=complex)
    delta = np.zeros(p, dtype=complex)
    theta = np.zeros(p, dtype=complex)
    beta[1:] = base * scale
    delta[1:] = _dft_tap(y, p + k, p) * scale
    theta[1:] = _dft_tap(y, p - k, p) * scale

    # coeffs[p] stays zero
    coeffs = np.zeros(2 * p, dtype=complex)
    coeffs[0] = alpha[0]
    coeffs[1:p] = alpha[1:] + beta[1:] - 0.5 * theta[:0:-1]
    coeffs[p + 1:] = -0.5 * delta[1:]
    return coeffs


def hermite_coefficients_from_values(values, order=HermiteOrder.FIRST) -> np.ndarray:
    """Interpolation coefficients from precomputed samples ``y[l] = f(l)``.

    Parameters
    ----------
    values : array_like of shape (p,)
        Real samples at ``0, 1, ..., p - 1``.
    order : HermiteOrder or int, optional
        1, 2 or 3. Default is 1.

    Returns
    -------
    ndarray of complex128
        ``p``, ``3p // 2`` or ``2p`` coefficients depending on *order*.

    Raises
    ------
    ValueError
        If *values* is empty or *order* is unsupported.
    TypeError
        If *values* is complex.
    """
    order = _validate_order(order)
    if np.iscomplexobj(values):
        raise TypeError("Hermite interpolation samples must be real")
    y = np.asarray(values, dtype=float)
    if y.ndim != 1:
        raise ValueError(f"values must be a 1-D sequence, got shape {y.shape}")
    p = _validate_count(y.shape[0], "p")

    k = np.arange(1, p)
    base = _dft_tap(y, k, p)
    alpha = np.zeros(p, dtype=complex)
    alpha[0] = y.mean()
    alpha[1:] = base * (2.0 * (p - k) / float(p * p))

    if order == HermiteOrder.FIRST:
        return alpha
    if order == HermiteOrder.SECOND:
        return _assemble_second_order(y, p, alpha, base)
    return _assemble_third_order(y, p, alpha, base)


def hermite_interp_coeff(func: Callable[[int], float], p: int,
                         order=HermiteOrder.FIRST) -> np.ndarray:
    """Sample *func* at ``0..p-1`` and return interpolation coefficients.

    Parameters
    ----------
    func : callable
        ``func(l) -> float`` for integer ``l``. Called exactly once per point.
    p : int
        Plaintext domain size (period).
    order : HermiteOrder or int, optional
        1, 2 or 3. Default is 1.

    Raises
    ------
    ValueError
        If *p* is zero or *order* is unsupported. Raised before *func* is
        called.
    """
    p = _validate_count(p, "p")
    order = _validate_order(order)
    values = _sample(func, range(p), dtype=float)
    return hermite_coefficients_from_values(values, order)


def hermite_interp_order1_coeff(func: Callable[[int], float], p: int) -> np.ndarray:
    """Baseline trigonometric interpolant: ``p`` coefficients.

    Examples
    --------
    >>> complex(hermite_interp_order1_coeff(lambda i: i, 4)[0])
    (1.5+0j)
    """
    return hermite_interp_coeff(func, p, HermiteOrder.FIRST)


def hermite_interp_order2_coeff(func: Callable[[int], float], p: int) -> np.ndarray:
    """Second-order interpolant: ``3p // 2`` coefficients."""
    return hermite_interp_coeff(func, p, HermiteOrder.SECOND)


def hermite_interp_order3_coeff(func: Callable[[int], float], p: int) -> np.ndarray:
    """Third-order interpolant: ``2p`` coefficients, entry ``p`` is zero."""
    return hermite_interp_coeff(func, p, HermiteOrder.THIRD)


def eval_trig_series(coefficients, x, p: int):
    """Evaluate ``Re sum_k c_k exp(2 pi i k x / p)`` in plaintext.

    For first- and third-order coefficients this reproduces ``f(x)`` at every
    integer ``x`` in ``[0, p)``.

    Parameters
    ----------
    coefficients : array_like
        Output of one of the ``hermite_interp_*`` functions.
    x : float or array_like
        Evaluation point(s).
    p : int
        Period used to build the coefficients.

    Returns
    -------
    float or ndarray
    """
    p = _validate_count(p, "p")
    c = np.asarray(coefficients, dtype=complex)
    if c.ndim != 1:
        raise ValueError("coefficients must be a 1-D sequence")
    k = np.arange(c.shape[0])
    phase = np.exp(2j * np.pi * np.multiply.outer(np.asarray(x, dtype=float), k) / p)
    return (phase @ c).real


class HermiteInterpolator:
    """Build-once trigonometric interpolant of a function on ``{0..p-1}``.

    Parameters
    ----------
    function : callable
        ``f(l) -> float`` for integer ``l``.
    p : int
        Plaintext domain size.
    order : HermiteOrder or int, optional
        Correction order, 1 to 3. Default is 1.

    Examples
    --------
    >>> interp = HermiteInterpolator(lambda i: i % 2, 16, order=3)
    >>> interp.build(verbose=False)
    >>> len(interp.coefficients)
    32
    >>> round(float(interp.eval(5)), 10)
    1.0
    """

    def __init__(self, function: Callable, p: int, order=HermiteOrder.FIRST):
        self.function = function
        self.p = _validate_count(p, "p")
        self.order = _validate_order(order)

        self.coefficients: np.ndarray | None = None
        self.build_time: float = 0.0
        self.n_evaluations: int = 0

    @property
    def n_coefficients(self) -> int:
        return hermite_coefficient_count(self.p, self.order)

    def build(self, verbose: bool = True) -> None:
        """Sample the function at ``0..p-1`` and compute the coefficients.

        Parameters
        ----------
        verbose : bool, optional
            If True, print build progress. Default is True.
        """
        if verbose:
            print(f"Building order-{int(self.order)} trigonometric interpolant "
                  f"(p={self.p}, {self.p} evaluations)...")

        start = time.time()
        self.coefficients = hermite_interp_coeff(self.function, self.p, self.order)
        self.n_evaluations = self.p
        self.build_time = time.time() - start

        if verbose:
            print(f"  Built in {self.build_time:.3f}s "
                  f"({len(self.coefficients)} coefficients)")

    def eval(self, x):
        """Evaluate the trigonometric series at *x* (scalar or array).

        Raises
        ------
        RuntimeError
            If ``build()`` has not been called.
        """
        if self.coefficients is None:
            raise RuntimeError("Call build() first")
        return eval_trig_series(self.coefficients, x, self.p)

    def __repr__(self) -> str:
        built = self.coefficients is not None
        return (
            f"HermiteInterpolator("
            f"p={self.p}, "
            f"order={int(self.order)}, "
            f"built={built})"
        )

    def __str__(self) -> str:
        built = self.coefficients is not None
        status = "built" if built else "not built"
        lines = [
            f"HermiteInterpolator (order {int(self.order)}, {status})",
            f"  Period:       {self.p}",
            f"  Coefficients: {self.n_coefficients}",
        ]
        if built:
            lines.append(
                f"  Build:        {self.build_time:.3f}s, "
                f"{self.n_evaluations:,} evaluations"
            )
        return "\n".join(lines)
