"""
Render a curve, and optionally its tangent line at one parameter, to PNG.
"""

import math
from typing import Optional

import numpy as np

from paracurve.constants import RENDER_NUM_POINTS
from paracurve.curve import Curve


def to_png(
    curve: Curve,
    file_name: Optional[str] = None,
    t: Optional[float] = None,
    num_points: int = RENDER_NUM_POINTS,
    width: int = 800,
    height: int = 600,
    margin: float = 0.1,
) -> None:
    """
    Render the curve sampled over one full turn of its parameter.

    Args:
        curve: The curve to draw
        file_name: Path to save the PNG file. If None, displays in a UI window instead.
        t: If given, mark the point at this parameter and draw its tangent line
        num_points: Number of samples along the curve (at least 2)
        width: Image width in pixels (default: 800)
        height: Image height in pixels (default: 600)
        margin: Margin around the curve as a fraction of size (default: 0.1)

    Raises:
        ValueError: If fewer than 2 samples are requested
        ImportError: If matplotlib is not installed
    """
    if num_points < 2:
        raise ValueError(f"num_points must be at least 2, got {num_points}")

    try:
        import matplotlib.pyplot as plt
    except ImportError:
        raise ImportError(
            "matplotlib is required for curve rendering. Install with: pip install matplotlib"
        )

    coords = curve.points_at(np.linspace(0.0, 2.0 * math.pi, num_points))

    fig, ax = plt.subplots(figsize=(width / 100, height / 100), dpi=100)
    ax.set_aspect("equal")
    ax.plot(coords[:, 0], coords[:, 1], "k-", linewidth=2)

    min_x, min_y = coords.min(axis=0)
    max_x, max_y = coords.max(axis=0)
    x_range = max(max_x - min_x, 1)
    y_range = max(max_y - min_y, 1)
    margin_x = x_range * margin
    margin_y = y_range * margin
    ax.set_xlim(min_x - margin_x, max_x + margin_x)
    ax.set_ylim(min_y - margin_y, max_y + margin_y)

    if t is not None:
        point = curve.point_at(t)
        slope = curve.tangent_slope_at(t)
        ax.plot([point.x], [point.y], "ro")
        if math.isinf(slope):
            ax.axvline(point.x, color="r", linestyle="--", linewidth=1)
        else:
            xs = np.array([min_x - margin_x, max_x + margin_x])
            ax.plot(xs, point.y + slope * (xs - point.x), "r--", linewidth=1)

    # Style
    ax.grid(True, alpha=0.3)
    ax.set_xlabel("X")
    ax.set_ylabel("Y")
    ax.set_title(f"{curve.kind}")

    # Save or show
    plt.tight_layout()
    if file_name:
        plt.savefig(file_name, dpi=100, bbox_inches="tight", facecolor="white")
        plt.close(fig)
    else:
        plt.show()
