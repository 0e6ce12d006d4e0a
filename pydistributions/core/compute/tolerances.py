"""
Numerical defaults shared by the distribution and KS engines.

- Inverse CDF solver: absolute accuracy of the bracketed root finder
- Rational conversion: tolerance fallback chain and denominator bound
  used when an exact algorithm needs a float as a fraction
- Decimal conversion: significant digits kept when a fraction is turned
  back into a float
"""

# Absolute accuracy for inverse_cumulative_probability root finding
SOLVER_DEFAULT_ABSOLUTE_ACCURACY = 1e-6

# Root finder iteration budget (brentq maxiter)
SOLVER_MAX_ITERATIONS = 200

# Tried in order; a looser tolerance is only used if the stricter one fails
RATIONAL_CONVERSION_TOLERANCES = (1e-20, 1e-10, 1e-5)

# Convergent numerators and denominators must stay below this bound
RATIONAL_MAX_DENOMINATOR = 2**31 - 1

# Continued fraction iteration budget
RATIONAL_MAX_ITERATIONS = 10000

# Significant decimal digits used by rational_to_float
DECIMAL_DIGITS = 20
