"""
Segment-to-segment distance used by the growth admission check.

Closest points between two finite segments P(s) = p1 + s*d1 and
Q(t) = p2 + t*d2 with s, t in [0, 1]: solve the normal equations for the
unconstrained pair, clamp s, propagate to t, clamp t, repropagate to s.
"""

import math

import numpy as np

EPS = 1e-8


def _clamp01(v: float) -> float:
    return min(1.0, max(0.0, v))


def segment_distance(
    x1: float, y1: float, x2: float, y2: float,
    x3: float, y3: float, x4: float, y4: float
) -> float:
    """Minimum Euclidean distance between segment (x1,y1)-(x2,y2) and (x3,y3)-(x4,y4)."""
    d1x, d1y = x2 - x1, y2 - y1
    d2x, d2y = x4 - x3, y4 - y3
    rx, ry = x1 - x3, y1 - y3

    a = d1x * d1x + d1y * d1y
    e = d2x * d2x + d2y * d2y
    f = d2x * rx + d2y * ry

    if a <= EPS and e <= EPS:
        return math.hypot(rx, ry)

    if a <= EPS:
        s = 0.0
        t = _clamp01(f / e)
    else:
        c = d1x * rx + d1y * ry
        if e <= EPS:
            t = 0.0
            s = _clamp01(-c / a)
        else:
            b = d1x * d2x + d1y * d2y
            denom = a * e - b * b

            # Nearly parallel (relative to the lengths): any s works, pick the start of the first segment
            s = _clamp01((b * f - c * e) / denom) if denom > EPS * a * e else 0.0
            t = (b * s + f) / e

            if t < 0.0:
                t = 0.0
                s = _clamp01(-c / a)
            elif t > 1.0:
                t = 1.0
                s = _clamp01((b - c) / a)

    dx = rx + d1x * s - d2x * t
    dy = ry + d1y * s - d2y * t
    return math.hypot(dx, dy)


def segment_distances(
    x1: float, y1: float, x2: float, y2: float, others: np.ndarray
) -> np.ndarray:
    """
    Vectorized segment_distance of one segment against many.

    others: (N, 4) array of [x3, y3, x4, y4] rows.
    Returns (N,) distances, elementwise equal to segment_distance.
    """
    others = np.asarray(others, dtype=np.float64).reshape(-1, 4)
    if len(others) == 0:
        return np.empty(0, dtype=np.float64)

    p2 = others[:, 0:2]
    d2 = others[:, 2:4] - p2
    d1 = np.array([x2 - x1, y2 - y1], dtype=np.float64)
    r = np.array([x1, y1], dtype=np.float64) - p2

    a = float(d1 @ d1)
    e = np.sum(d2 * d2, axis=1)
    f = np.sum(d2 * r, axis=1)
    e_ok = e > EPS
    safe_e = np.where(e_ok, e, 1.0)

    if a <= EPS:
        s = np.zeros(len(others))
        t = np.where(e_ok, np.clip(f / safe_e, 0.0, 1.0), 0.0)
    else:
        b = d2 @ d1
        c = r @ d1
        denom = a * e - b * b
        denom_ok = denom > EPS * a * e
        safe_denom = np.where(denom_ok, denom, 1.0)

        s = np.where(denom_ok, np.clip((b * f - c * e) / safe_denom, 0.0, 1.0), 0.0)
        t = (b * s + f) / safe_e

        s = np.where(
            t < 0.0,
            np.clip(-c / a, 0.0, 1.0),
            np.where(t > 1.0, np.clip((b - c) / a, 0.0, 1.0), s)
        )
        t = np.clip(t, 0.0, 1.0)

        # Degenerate others collapse to their start point
        s = np.where(e_ok, s, np.clip(-c / a, 0.0, 1.0))
        t = np.where(e_ok, t, 0.0)

    diff = r + s[:, None] * d1[None, :] - t[:, None] * d2
    return np.linalg.norm(diff, axis=1)
