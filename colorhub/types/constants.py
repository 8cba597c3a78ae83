# No dependencies besides numpy
import numpy as np

# Slack allowed on every nominal channel range, absorbs chained float error
BOUNDS_TOLERANCE = 0.005

HUE_360 = 360.0
HUE_HALF_TURN = 180.0

HEX_MAX = 255
HEX_DIGITS = 6

# D65 / 2 degree reference white
D65_WHITE = (0.95047, 1.0, 1.08883)

default_float_dtype = np.float32
