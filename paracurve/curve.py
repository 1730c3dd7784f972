"""
Curve module - the abstract contract shared by every parametric planar curve.

A curve maps a scalar parameter ``t`` to a point in the plane and can report
the slope of its tangent line at that point. Concrete variants subclass
:class:`Curve` and register themselves for their :class:`CurveKind`, so new
variants are added as new classes rather than by editing existing ones.
"""

import logging
from abc import ABC, abstractmethod
from typing import Callable, Dict, Iterable, List, Protocol, Type, TypeVar, Union

import numpy as np

from paracurve.cad_types import CurveKind, Point2D

logger = logging.getLogger(__name__)


class SupportsCurve(Protocol):
    """Capability set required by code that evaluates curves generically."""

    @property
    def kind(self) -> CurveKind: ...

    def point_at(self, t: float) -> Point2D: ...

    def tangent_slope_at(self, t: float) -> float: ...


class Curve(ABC):
    """
    Abstract base class for parametric planar curves.

    Subclasses must implement both :meth:`point_at` and
    :meth:`tangent_slope_at`; until they do, they cannot be instantiated.
    """

    def __init__(self, kind: CurveKind):
        self._kind = kind

    @property
    def kind(self) -> CurveKind:
        """The variant tag fixed at construction."""
        return self._kind

    @abstractmethod
    def point_at(self, t: float) -> Point2D:
        """
        Evaluate the curve's position at parameter ``t``.

        Args:
            t: Curve parameter

        Returns:
            Point2D: The point on the curve
        """
        ...

    @abstractmethod
    def tangent_slope_at(self, t: float) -> float:
        """
        Slope of the tangent line at the point for parameter ``t``.

        Returns ``math.inf`` for a vertical tangent and ``0.0`` for a
        horizontal one.
        """
        ...

    def points_at(self, ts: Union[Iterable[float], np.ndarray]) -> np.ndarray:
        """Evaluate :meth:`point_at` for each parameter, as an ``(n, 2)`` array."""
        params = np.fromiter(ts, dtype=float)
        coords = [tuple(self.point_at(float(t))) for t in params]
        return np.array(coords, dtype=float).reshape(-1, 2)


C = TypeVar("C", bound=Type[Curve])

_CURVE_CLASSES: Dict[CurveKind, Type[Curve]] = {}


def register_curve(kind: CurveKind) -> Callable[[C], C]:
    """Class decorator recording the implementation of ``kind``."""

    def decorator(cls: C) -> C:
        existing = _CURVE_CLASSES.get(kind)
        if existing is not None and existing is not cls:
            raise ValueError(
                f"{kind} curves are already implemented by {existing.__name__}"
            )
        _CURVE_CLASSES[kind] = cls
        logger.debug("Registered %s for %s curves", cls.__name__, kind)
        return cls

    return decorator


def curve_class(kind: CurveKind) -> Type[Curve]:
    """Return the class implementing ``kind``."""
    try:
        return _CURVE_CLASSES[kind]
    except KeyError:
        raise NotImplementedError(f"{kind} curves are not implemented") from None


def create_curve(kind: CurveKind, *args, **kwargs) -> Curve:
    """Construct a curve of the given kind from its constructor arguments."""
    return curve_class(kind)(*args, **kwargs)


def registered_kinds() -> List[CurveKind]:
    return [kind for kind in CurveKind if kind in _CURVE_CLASSES]
