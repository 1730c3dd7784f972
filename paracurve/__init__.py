"""
paracurve - A Python library for parametric planar curves.

This package evaluates points and tangent slopes on parametric curves.
"""

__version__ = "0.1.0"
__author__ = "Your Name"
__email__ = "your.email@example.com"

# Core geometry types
from .cad_types import CurveKind, Point2D

# Curve contract and registry
from .curve import (
    Curve,
    SupportsCurve,
    create_curve,
    curve_class,
    register_curve,
    registered_kinds,
)

# Concrete curves
from .circle import Circle

# Generic evaluation
from .evaluate import derivative_report, point_report, print_derivative, report

# Define what gets imported with "from paracurve import *"
__all__ = [
    # Geometry types
    "Point2D",
    "CurveKind",
    # Curve contract
    "Curve",
    "SupportsCurve",
    "register_curve",
    "curve_class",
    "create_curve",
    "registered_kinds",
    # Curves
    "Circle",
    # Evaluation
    "derivative_report",
    "point_report",
    "report",
    "print_derivative",
]
