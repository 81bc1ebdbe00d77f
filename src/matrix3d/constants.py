"""Constants shared across matrix3d modules."""

import math

# Every stored and composed matrix is MATRIX_SIZE x MATRIX_SIZE
MATRIX_SIZE = 4

# Dimension of the 2D affine matrices produced by skew
MATRIX_SIZE_2D = 3

DEG_TO_RAD = math.pi / 180.0

# Unit marker that switches a string angle to degrees
DEGREE_MARKER = "deg"

# Name of the CSS function emitted by serialize()
CSS_FUNCTION = "matrix3d"

# Order in which slots are multiplied onto the base matrix
COMPOSE_ORDER = ("perspective", "translate", "rotate", "skew", "scale")
