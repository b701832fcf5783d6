"""
===============================================================================
HYPERCOMPLEX - Numeric and Display Constants
===============================================================================
Central place for the representation choices shared by the quaternion type
and the demo driver. Components are IEEE-754 double precision throughout.
===============================================================================
"""

import numpy as np


# =============================================================================
# COMPONENT REPRESENTATION
# =============================================================================
COMPONENT_DTYPE = np.float64
COMPONENT_COUNT = 4
COMPONENT_NAMES = ("real", "imaginary_x", "imaginary_y", "imaginary_z")

# =============================================================================
# TEXT RENDERING
# =============================================================================
DISPLAY_PRECISION = 6                  # digits after the point, like std::to_string
IMAGINARY_UNITS = ("i", "j", "k")
