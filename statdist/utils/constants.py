"""
Numerical constants and tolerances for distribution calculations.

This module defines machine limits, mathematical constants and the
thresholds used by the series, continued-fraction and quantile
algorithms. All values are calibrated for IEEE 754 double precision.
"""

import math
import sys

# Machine limits (IEEE 754 double)
DBL_EPSILON = sys.float_info.epsilon  # 2.220446e-16
DBL_MIN = sys.float_info.min  # 2.225074e-308, smallest normalized
DBL_MAX = sys.float_info.max  # 1.797693e+308
DBL_MAX_EXP = sys.float_info.max_exp  # 1024
LOG_DBL_MAX = math.log(DBL_MAX)  # ~709.78; exp() overflows beyond this

# Mathematical constants
M_LN2 = 0.693147180559945309417232121458  # log(2)
M_2PI = 6.283185307179586476925286766559  # 2*pi
M_SQRT_2PI = 2.50662827463100050241576528481104525301  # sqrt(2*pi)
M_1_SQRT_2PI = 0.398942280401432677939946059934  # 1/sqrt(2*pi)
M_LN_SQRT_2PI = 0.918938533204672741780329736406  # log(sqrt(2*pi))
M_LN_2PI = 1.837877066409345483560659472811  # log(2*pi)
M_SQRT2 = 1.41421356237309504880168872420969808  # sqrt(2)
EULERS_CONST = 0.5772156649015328606065120900824024

# Saddle-point and series machinery
X_LRG = 2.86111748575702815380240589208115399625e307  # 2^1023 / pi; 2*pi*x overflows beyond
SCALEFACTOR = 2.0**256  # (2^32)^8, rescaling factor for continued fractions
LOGCF_TOLERANCE = 1e-14  # relative tolerance for logcf()
LOG1PMX_MIN = -0.79149064  # below this log1pmx() evaluates directly
PD_LOWER_CF_MAX_ITERATIONS = 200000
BD0_MAX_TERMS = 1000
POIS_M_CUTOFF = M_LN2 * DBL_MAX_EXP / DBL_EPSILON  # 3.196577e18

# Gamma quantile (AS 91)
QGAMMA_EPS1 = 1e-2  # tolerance of the starting approximation
QGAMMA_EPS2 = 5e-7  # final relative precision of AS 91
QGAMMA_MAX_ITERATIONS = 1000  # was 20 in AS 91
QGAMMA_P_MIN = 1e-100  # below this, keep the starting approximation
QGAMMA_P_MAX = 1 - 1e-14  # above this, keep the starting approximation

# Discrete quantile search
QUANTILE_FUZZ = 1 - 64 * DBL_EPSILON  # ensures left continuity of the search
COARSE_SEARCH_THRESHOLD = 1e5  # n or lambda from which coarse steps are used
COARSE_STEP_FRACTION = 0.001  # first coarse step as a fraction of n (or y)
COARSE_STEP_SHRINK = 100  # divisor applied to the step after each pass
CDF_FLOOR_NUDGE = 1e-7  # guards near-integer arguments of pbinom/ppois

# Binomial CDF summation
PBINOM_TAIL_TOL = 1e-3 * DBL_EPSILON  # dropped tail bound, relative to the largest term
PBINOM_RESYNC_STEPS = 1024  # recurrence steps between exact mass evaluations

# Student-t quantile solver
T_QUANTILE_TOLERANCE = 1e-13  # relative step tolerance for Newton
T_QUANTILE_MAX_ITERATIONS = 60
T_BRACKET_MAX_EXPANSIONS = 2100  # doubling steps while bracketing the root
T_NORMAL_DF = 1e20  # above this, t is treated as standard normal

# Brent fallback parameters
BRENT_RTOL = 4 * DBL_EPSILON  # smallest rtol accepted by scipy.optimize.brentq
BRENT_XTOL = 1e-300
BRENT_MAX_ITERATIONS = 500

# Confidence-interval critical values
Z95CI = 1.95996  # qnorm(0.975)
Z90CI = 1.64485  # qnorm(0.95)
LARGE_SAMPLE_SIZE = 30  # from here on z replaces t in mean intervals

# Hypothesis testing
DEFAULT_ALPHA = 0.05
