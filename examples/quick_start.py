"""Quick start example: coefficients for a smooth function and a digit extractor."""

import math

from pyfhecoeffs import ChebyshevApproximator, HermiteInterpolator

# Chebyshev coefficients of a logistic function on [-8, 8]
cheb = ChebyshevApproximator(lambda x: 1.0 / (1.0 + math.exp(-x)), -8.0, 8.0, 59)
cheb.build()

x = 1.3
exact = 1.0 / (1.0 + math.exp(-x))
approx = cheb.eval(x)
print(f"Exact:  {exact:.10f}")
print(f"Approx: {approx:.10f}")
print(f"Error:  {abs(approx - exact):.2e}")

# Lowest bit of a 4-bit plaintext, third-order trigonometric interpolant
bits = 4
p = 2 ** bits
interp = HermiteInterpolator(lambda i: i % 2, p, order=3)
interp.build()
print(f"\n{interp}")
print("f(0..p-1) =", [round(float(interp.eval(i)), 6) for i in range(p)])
