"""Chebyshev coefficient generation for homomorphic polynomial evaluation.

A function on ``[a, b]`` is sampled at the ``degree + 1`` Chebyshev Type I
nodes and the samples are turned into Chebyshev-basis coefficients with a
type-II discrete cosine transform. The coefficient sequence is what a
homomorphic Chebyshev series evaluator (Paterson-Stockmeyer style) consumes.

Coefficients follow the convention

.. math::

    c_i = \\frac{2}{n} \\sum_{j=0}^{n-1} f(x_j)
          \\cos\\left(\\frac{\\pi i (j + 1/2)}{n}\\right), \\qquad n = d + 1

with ``c_0`` *not* halved. The evaluator applies the ``c_0 / 2`` scaling of
the constant term; :func:`eval_chebyshev_series` does the same in plaintext.

References
----------
- Trefethen (2013), "Approximation Theory and Approximation Practice",
  SIAM, Chapter 3.
- Press et al. (2007), "Numerical Recipes", 3rd ed., Section 5.8.
"""

from __future__ import annotations

import time
from typing import Callable

import numpy as np
from numpy.polynomial.chebyshev import chebpts1, chebval

from pyfhecoeffs._sampling import _sample, _validate_count


def chebyshev_nodes(a: float, b: float, degree: int) -> np.ndarray:
    """Return the ``degree + 1`` sampling nodes on ``[a, b]``.

    Nodes are ``x_i = cos(pi (i + 0.5) / n) (b - a) / 2 + (a + b) / 2`` in
    **descending** order, which is the order the cosine transform expects.

    Parameters
    ----------
    a, b : float
        Interval bounds.
    degree : int
        Approximation degree (>= 1).

    Returns
    -------
    ndarray of shape (degree + 1,)

    Raises
    ------
    ValueError
        If *degree* is zero, negative, or not an integer.
    """
    degree = _validate_count(degree, "degree")
    nodes_std = chebpts1(degree + 1)[::-1]
    return 0.5 * (a + b) + 0.5 * (b - a) * nodes_std


def chebyshev_coefficients_from_values(values) -> np.ndarray:
    """Compute Chebyshev coefficients from samples at :func:`chebyshev_nodes`.

    Uses DCT-II (`scipy.fft.dct`) divided by the number of samples. Complex
    samples are transformed componentwise.

    Parameters
    ----------
    values : array_like of shape (n,)
        Function values at the nodes, in node order.

    Returns
    -------
    ndarray of shape (n,)
        ``float64`` for real samples, ``complex128`` for complex samples.

    Raises
    ------
    ValueError
        If *values* is not a non-empty 1-D sequence.
    """
    from scipy.fft import dct

    values = np.asarray(values)
    if values.ndim != 1 or values.shape[0] == 0:
        raise ValueError(
            f"values must be a non-empty 1-D sequence, got shape {values.shape}"
        )
    n = values.shape[0]
    if np.iscomplexobj(values):
        real = dct(values.real.astype(float), type=2)
        imag = dct(values.imag.astype(float), type=2)
        return (real + 1j * imag) / n
    return dct(values.astype(float), type=2) / n


def eval_chebyshev_coefficients(func: Callable[[float], float], a: float, b: float,
                                degree: int) -> np.ndarray:
    """Chebyshev coefficients of a real-valued function on ``[a, b]``.

    Parameters
    ----------
    func : callable
        ``func(x) -> float``. Called exactly once per node.
    a, b : float
        Interval bounds.
    degree : int
        Approximation degree (>= 1).

    Returns
    -------
    ndarray of float64, shape (degree + 1,)

    Raises
    ------
    ValueError
        If *degree* is zero (or otherwise not a positive integer).

    Examples
    --------
    >>> coeffs = eval_chebyshev_coefficients(lambda x: x * x, -1.0, 1.0, 2)
    >>> bool(np.allclose(coeffs, [1.0, 0.0, 0.5]))
    True
    """
    nodes = chebyshev_nodes(a, b, degree)
    values = _sample(func, (float(x) for x in nodes), dtype=float)
    return chebyshev_coefficients_from_values(values)


def eval_chebyshev_coefficients_complex(func: Callable[[float], complex], a: float,
                                        b: float, degree: int) -> np.ndarray:
    """Chebyshev coefficients of a complex-valued function on ``[a, b]``.

    Same nodes and transform as :func:`eval_chebyshev_coefficients`; real and
    imaginary parts are transformed independently.

    Returns
    -------
    ndarray of complex128, shape (degree + 1,)

    Raises
    ------
    ValueError
        If *degree* is zero (or otherwise not a positive integer).
    """
    nodes = chebyshev_nodes(a, b, degree)
    values = _sample(func, (float(x) for x in nodes), dtype=complex)
    return chebyshev_coefficients_from_values(values)


def eval_chebyshev_series(coefficients, x, a: float, b: float):
    """Evaluate ``c_0 / 2 + sum_{k>=1} c_k T_k(t)`` on ``[a, b]`` in plaintext.

    ``t = (2x - a - b) / (b - a)`` maps the interval onto ``[-1, 1]``. This is
    the series a homomorphic Chebyshev evaluator computes from the output of
    :func:`eval_chebyshev_coefficients`.

    Parameters
    ----------
    coefficients : array_like
        Chebyshev coefficients with an un-halved constant term.
    x : float or array_like
        Evaluation point(s).
    a, b : float
        Interval bounds used to build the coefficients.

    Returns
    -------
    float, complex or ndarray
    """
    c = np.array(coefficients, dtype=np.result_type(np.asarray(coefficients), float))
    if c.ndim != 1 or c.shape[0] == 0:
        raise ValueError("coefficients must be a non-empty 1-D sequence")
    c[0] /= 2
    t = (2.0 * np.asarray(x, dtype=float) - a - b) / (b - a)
    return chebval(t, c)


class ChebyshevApproximator:
    """Build-once Chebyshev coefficient generator for a 1-D function.

    Parameters
    ----------
    function : callable
        Function to approximate. Signature: ``f(x) -> float`` (or
        ``-> complex`` with ``complex_valued=True``).
    a, b : float
        Interval bounds.
    degree : int
        Approximation degree; ``degree + 1`` coefficients are produced.
    complex_valued : bool, optional
        Use the complex-valued overload. Default is False.

    Examples
    --------
    >>> import math
    >>> approx = ChebyshevApproximator(math.exp, -1.0, 1.0, 12)
    >>> approx.build(verbose=False)
    >>> abs(approx.eval(0.3) - math.exp(0.3)) < 1e-10
    True
    """

    def __init__(
        self,
        function: Callable,
        a: float,
        b: float,
        degree: int,
        complex_valued: bool = False,
    ):
        self.function = function
        self.a = a
        self.b = b
        self.degree = _validate_count(degree, "degree")
        self.complex_valued = complex_valued

        self.coefficients: np.ndarray | None = None
        self.build_time: float = 0.0
        self.n_evaluations: int = 0

    def build(self, verbose: bool = True) -> None:
        """Sample the function at the nodes and compute the coefficients.

        Parameters
        ----------
        verbose : bool, optional
            If True, print build progress. Default is True.
        """
        n = self.degree + 1
        if verbose:
            kind = "complex" if self.complex_valued else "real"
            print(f"Building degree-{self.degree} Chebyshev coefficients "
                  f"for {kind} function on [{self.a}, {self.b}] ({n} evaluations)...")

        start = time.time()
        if self.complex_valued:
            self.coefficients = eval_chebyshev_coefficients_complex(
                self.function, self.a, self.b, self.degree
            )
        else:
            self.coefficients = eval_chebyshev_coefficients(
                self.function, self.a, self.b, self.degree
            )
        self.n_evaluations = n
        self.build_time = time.time() - start

        if verbose:
            print(f"  Built in {self.build_time:.3f}s ({n} coefficients)")

    def eval(self, x):
        """Evaluate the Chebyshev series at *x* (scalar or array).

        Raises
        ------
        RuntimeError
            If ``build()`` has not been called.
        """
        if self.coefficients is None:
            raise RuntimeError("Call build() first")
        return eval_chebyshev_series(self.coefficients, x, self.a, self.b)

    def nodes(self) -> np.ndarray:
        """Return the sampling nodes used by :meth:`build`."""
        return chebyshev_nodes(self.a, self.b, self.degree)

    def __repr__(self) -> str:
        built = self.coefficients is not None
        return (
            f"ChebyshevApproximator("
            f"domain=[{self.a}, {self.b}], "
            f"degree={self.degree}, "
            f"built={built})"
        )

    def __str__(self) -> str:
        built = self.coefficients is not None
        status = "built" if built else "not built"
        kind = "complex" if self.complex_valued else "real"
        lines = [
            f"ChebyshevApproximator (degree {self.degree}, {kind}, {status})",
            f"  Domain:      [{self.a}, {self.b}]",
            f"  Nodes:       {self.degree + 1}",
        ]
        if built:
            lines.append(
                f"  Build:       {self.build_time:.3f}s, "
                f"{self.n_evaluations:,} evaluations"
            )
            lines.append(
                f"  Last coeff:  {abs(self.coefficients[-1]):.2e}"
            )
        return "\n".join(lines)
