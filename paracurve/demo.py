"""
Demo entry point: prints points and a tangent slope for two sample circles.
"""

import argparse
import logging
from typing import List, Optional

from paracurve.cad_types import Point2D
from paracurve.circle import Circle
from paracurve.constants import (
    DEMO_DERIVATIVE_PARAMETER,
    DEMO_OFFSET_CENTER,
    DEMO_OFFSET_RADIUS,
    DEMO_POINT_PARAMETER,
    DEMO_UNIT_RADIUS,
)
from paracurve.evaluate import derivative_report

logger = logging.getLogger(__name__)


def demo_lines() -> List[str]:
    circle_1 = Circle(DEMO_UNIT_RADIUS)
    circle_2 = Circle(Point2D(*DEMO_OFFSET_CENTER), DEMO_OFFSET_RADIUS)
    logger.debug("Sample curves: %r, %r", circle_1, circle_2)

    return [
        f"R=1, (0.0; 0.0), pi: {circle_1.point_at(DEMO_POINT_PARAMETER)}",
        f"R=5, (5.0; 5.0), pi: {circle_2.point_at(DEMO_POINT_PARAMETER)}",
        derivative_report(circle_2, DEMO_DERIVATIVE_PARAMETER),
    ]


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        description="Evaluate points and tangent slopes on sample circles"
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging (default: False)",
    )
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG)

    for line in demo_lines():
        print(line)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
