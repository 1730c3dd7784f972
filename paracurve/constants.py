import math

EPS = 1.0e-15  # snap-to-zero tolerance for trigonometric components and line coefficients
INF = math.inf  # slope sentinel for a vertical tangent
PI = math.acos(-1)

DERIVATIVE_PREFIX = "GetDerivate"
POINT_PREFIX = "GetPoint"

# Sample inputs printed by the demo entry point
DEMO_UNIT_RADIUS = 1.0
DEMO_OFFSET_CENTER = (5.0, 5.0)
DEMO_OFFSET_RADIUS = 5.0
DEMO_POINT_PARAMETER = PI / 6
DEMO_DERIVATIVE_PARAMETER = PI / 4

RENDER_NUM_POINTS = 100
