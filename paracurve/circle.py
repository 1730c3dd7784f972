import logging
import math
from numbers import Real
from typing import Optional

from paracurve.cad_types import CurveKind, Point2D, PointLike, as_point
from paracurve.constants import EPS, INF
from paracurve.curve import Curve, register_curve

logger = logging.getLogger(__name__)


@register_curve(CurveKind.CIRCLE)
class Circle(Curve):
    """
    A circle parameterised by angle: ``center + radius * (cos t, sin t)``.

    Can be built as ``Circle(radius)`` (centred at the origin) or
    ``Circle(center, radius)``. Omitted values default to the origin and a
    radius of 0.0. The radius sign is not validated; a negative radius
    reflects every point through the centre.
    """

    def __init__(
        self,
        *args,
        center: Optional[PointLike] = None,
        radius: Optional[float] = None,
    ):
        super().__init__(CurveKind.CIRCLE)
        if len(args) > 2:
            raise TypeError(
                f"Circle() takes at most 2 positional arguments ({len(args)} given)"
            )
        if len(args) == 1:
            if isinstance(args[0], Real):
                if radius is not None:
                    raise TypeError("Circle() got multiple values for 'radius'")
                radius = args[0]
            else:
                if center is not None:
                    raise TypeError("Circle() got multiple values for 'center'")
                center = args[0]
        elif len(args) == 2:
            if center is not None or radius is not None:
                raise TypeError("Circle() got multiple values for 'center' or 'radius'")
            center, radius = args

        self._center = as_point(center) if center is not None else Point2D()
        self._radius = float(radius) if radius is not None else 0.0

        if self._radius < 0.0:
            logger.warning(
                "Circle centred at %s has negative radius %s", self._center, self._radius
            )
        elif self._radius == 0.0:
            logger.debug("Circle centred at %s is degenerate (zero radius)", self._center)

    @classmethod
    def from_center(cls, center: PointLike, radius: float) -> "Circle":
        return cls(center=center, radius=radius)

    @property
    def center(self) -> Point2D:
        return self._center

    @property
    def radius(self) -> float:
        return self._radius

    def point_at(self, t: float) -> Point2D:
        """Point at angle ``t``; near-zero trig components snap to exactly 0.0."""
        cos_t = math.cos(t)
        sin_t = math.sin(t)
        x = self._radius * cos_t if abs(cos_t) > EPS else 0.0
        y = self._radius * sin_t if abs(sin_t) > EPS else 0.0
        return self._center + Point2D(x, y)

    def tangent_slope_at(self, t: float) -> float:
        """
        Slope of the tangent at ``point_at(t)``.

        The tangent line is written as ``A*x + B*y + C = 0`` where ``(A, B)``
        is the radius vector from the centre to the point.
        """
        p = self.point_at(t)
        A = p.x - self._center.x
        B = p.y - self._center.y
        C = -A * p.x - B * p.y

        # parallel to the Y axis
        if abs(B) < EPS:
            return INF
        # parallel to the X axis
        if abs(A) < EPS:
            return 0.0
        # line cuts off segments a and b on the X and Y axes
        if abs(C) > EPS:
            a = -C / A
            b = -C / B
            if (a > 0 and b > 0) or (a < 0 and b < 0):
                return -b / a
            return b / a
        # through the origin: y = -(A / B) * x
        return -A / B

    def __repr__(self):
        return f"Circle(center={self._center}, radius={self._radius})"

    def __eq__(self, other):
        if not isinstance(other, Circle):
            return NotImplemented
        return self._center == other._center and self._radius == other._radius

    def __hash__(self):
        return hash((self._center, self._radius))
