"""
Numerical constants and defaults for density integration.

This module defines the default step counts, precisions and distribution
names shared by the library and the command-line interface.
"""

# Trapezoidal integration
DEFAULT_STEP_COUNT = 100  # Bins per interval when the caller gives none
DEFAULT_TABLE_STEPS = 10  # Rows - 1 in a tabulated density
MIN_STEP_COUNT = 1  # At least one trapezoid is needed for a finite width

# Derivative estimates
DEFAULT_DX = 1e-3  # Central-difference step used by tangent_at
TANGENT_DECIMALS = 3  # Tangent slope is reported to 3 decimal places

# Supported distributions (CLI names)
DISTRIBUTIONS = ("uniform", "normal", "standard-normal", "exponential")

# Exponential support starts at zero
EXPONENTIAL_SUPPORT_START = 0.0
