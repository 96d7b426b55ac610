"""PyFHECoeffs: coefficient generation for homomorphic function evaluation.

Provides Chebyshev-basis coefficients for functions on an interval
(:func:`eval_chebyshev_coefficients` and its complex counterpart) and
trigonometric interpolation coefficients for functions on the cyclic
domain ``{0, ..., p - 1}`` at correction orders 1 to 3
(:func:`hermite_interp_coeff`). The :class:`ChebyshevApproximator` and
:class:`HermiteInterpolator` classes wrap both in a build/eval object.

Example
-------
>>> from pyfhecoeffs import hermite_interp_order3_coeff
>>> coeffs = hermite_interp_order3_coeff(lambda i: i % 2, 16)
>>> len(coeffs), complex(coeffs[16])
(32, 0j)
"""

from pyfhecoeffs._version import __version__
from pyfhecoeffs.chebyshev import (
    ChebyshevApproximator,
    chebyshev_coefficients_from_values,
    chebyshev_nodes,
    eval_chebyshev_coefficients,
    eval_chebyshev_coefficients_complex,
    eval_chebyshev_series,
)
from pyfhecoeffs.hermite import (
    HermiteInterpolator,
    HermiteOrder,
    eval_trig_series,
    hermite_coefficient_count,
    hermite_coefficients_from_values,
    hermite_interp_coeff,
    hermite_interp_order1_coeff,
    hermite_interp_order2_coeff,
    hermite_interp_order3_coeff,
)

__all__ = [
    "ChebyshevApproximator",
    "HermiteInterpolator",
    "HermiteOrder",
    "chebyshev_coefficients_from_values",
    "chebyshev_nodes",
    "eval_chebyshev_coefficients",
    "eval_chebyshev_coefficients_complex",
    "eval_chebyshev_series",
    "eval_trig_series",
    "hermite_coefficient_count",
    "hermite_coefficients_from_values",
    "hermite_interp_coeff",
    "hermite_interp_order1_coeff",
    "hermite_interp_order2_coeff",
    "hermite_interp_order3_coeff",
    "__version__",
]
