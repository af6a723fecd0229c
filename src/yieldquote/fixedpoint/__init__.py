"""Integer fixed-point arithmetic and decimal normalization"""

# Modules imported here are simply for easier namespace resolution, e.g.,
# from yieldquote.fixedpoint import FixedPointIntegerMath
# instead of
# from yieldquote.fixedpoint.fixed_point_integer_math import FixedPointIntegerMath

# pyright: reportUnusedImport=false

from .decimals import FIXED_POINT_DECIMALS, from_fixed_point, normalize, to_fixed_point
from .fixed_point_integer_math import FixedPointIntegerMath

ONE_18 = FixedPointIntegerMath.ONE_18
