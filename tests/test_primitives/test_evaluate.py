import math

import pytest

from paracurve import Circle, CurveKind, Point2D
from paracurve.evaluate import derivative_report, point_report, print_derivative, report


class StubCurve:
    """Satisfies the curve capability set without subclassing Curve."""

    kind = CurveKind.HELIX

    def point_at(self, t):
        return Point2D(1.0, 2.0)

    def tangent_slope_at(self, t):
        return 0.5


def test_derivative_report_for_circle():
    line = derivative_report(Circle(Point2D(5, 5), 5), math.pi / 4)
    prefix, value = line.split(": ")
    assert prefix == "GetDerivate"
    assert float(value) == pytest.approx(-1.0)


def test_derivative_report_vertical_tangent():
    assert derivative_report(Circle(1), 0.0) == "GetDerivate: inf"


def test_point_report():
    assert point_report(Circle(1), 0.0) == "GetPoint: {1.0, 0.0}"


def test_report_summary():
    assert report(Circle(1), math.pi / 2) == "Circle: point {0.0, 1.0}, slope 0.0"


def test_reports_work_for_any_conforming_curve():
    stub = StubCurve()
    assert derivative_report(stub, 0.0) == "GetDerivate: 0.5"
    assert point_report(stub, 0.0) == "GetPoint: {1.0, 2.0}"
    assert report(stub, 0.0) == "Helix: point {1.0, 2.0}, slope 0.5"


def test_print_derivative(capsys):
    print_derivative(Circle(1), 0.0)
    assert capsys.readouterr().out == "GetDerivate: inf\n"
