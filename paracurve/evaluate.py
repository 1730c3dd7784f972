"""
Generic helpers that evaluate any curve through the shared capability set.

These never look at the concrete curve type; anything satisfying
:class:`~paracurve.curve.SupportsCurve` can be passed in.
"""

from typing import TypeVar

from paracurve.constants import DERIVATIVE_PREFIX, POINT_PREFIX
from paracurve.curve import SupportsCurve

C = TypeVar("C", bound=SupportsCurve)


def derivative_report(curve: C, t: float) -> str:
    return f"{DERIVATIVE_PREFIX}: {curve.tangent_slope_at(t)}"


def point_report(curve: C, t: float) -> str:
    return f"{POINT_PREFIX}: {curve.point_at(t)}"


def report(curve: C, t: float) -> str:
    """One-line summary of the point and tangent slope at ``t``."""
    return f"{curve.kind}: point {curve.point_at(t)}, slope {curve.tangent_slope_at(t)}"


def print_derivative(curve: C, t: float) -> None:
    print(derivative_report(curve, t))
