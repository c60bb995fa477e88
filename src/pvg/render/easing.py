"""Interpolation curves used by the frame evaluator."""

import math
from functools import lru_cache
from typing import Callable

# Newton-Raphson / bisection settings for solving the bezier x(s) = t.
NEWTON_ITERATIONS = 8
NEWTON_MIN_SLOPE = 1e-6
SOLVE_EPSILON = 1e-7
BISECTION_ITERATIONS = 50

# Spring constants matching the default physical spring of the previews.
SPRING_MASS = 1.0
SPRING_STIFFNESS = 100.0
SPRING_DAMPING = 10.0
SPRING_REST_THRESHOLD = 0.005
SPRING_SCAN_STEP = 0.001
SPRING_SCAN_LIMIT = 10.0


def clamp01(value: float) -> float:
    """Clamp a value to [0, 1]."""
    return min(1.0, max(0.0, value))


def interpolate(start: float, end: float, progress: float) -> float:
    """Interpolate between two values; progress 0 and 1 return the endpoints exactly."""
    if progress == 0:
        return float(start)
    if progress == 1:
        return float(end)
    return start + (end - start) * progress


def cubic_bezier(x1: float, y1: float, x2: float, y2: float) -> Callable[[float], float]:
    """Build a CSS-style cubic-bezier easing function.

    The curve runs from (0, 0) to (1, 1) with control points (x1, y1) and
    (x2, y2). Inputs outside [0, 1] are clamped.
    """

    def sample(p1: float, p2: float, s: float) -> float:
        return (((1 - 3 * p2 + 3 * p1) * s + (3 * p2 - 6 * p1)) * s + 3 * p1) * s

    def slope(p1: float, p2: float, s: float) -> float:
        return 3 * (1 - 3 * p2 + 3 * p1) * s * s + 2 * (3 * p2 - 6 * p1) * s + 3 * p1

    def solve(x: float) -> float:
        s = x
        for _ in range(NEWTON_ITERATIONS):
            d = slope(x1, x2, s)
            if abs(d) < NEWTON_MIN_SLOPE:
                break
            error = sample(x1, x2, s) - x
            if abs(error) < SOLVE_EPSILON:
                return s
            s -= error / d

        if 0.0 <= s <= 1.0 and abs(sample(x1, x2, s) - x) < SOLVE_EPSILON:
            return s

        low, high = 0.0, 1.0
        s = x
        for _ in range(BISECTION_ITERATIONS):
            error = sample(x1, x2, s) - x
            if abs(error) < SOLVE_EPSILON:
                break
            if error > 0:
                high = s
            else:
                low = s
            s = (low + high) / 2
        return s

    def ease(t: float) -> float:
        if t <= 0:
            return 0.0
        if t >= 1:
            return 1.0
        return sample(y1, y2, solve(t))

    return ease


ease_in_out = cubic_bezier(0.25, 0.1, 0.25, 1.0)


def spring_position(
    time: float,
    mass: float = SPRING_MASS,
    stiffness: float = SPRING_STIFFNESS,
    damping: float = SPRING_DAMPING,
) -> float:
    """Position of a unit spring released at rest from 0 towards 1.

    Args:
        time: Seconds since release.
        mass: Mass of the oscillator.
        stiffness: Spring constant.
        damping: Damping coefficient.

    Returns:
        Position; may exceed 1 while an under-damped spring overshoots.
    """
    omega0 = math.sqrt(stiffness / mass)
    zeta = damping / (2 * math.sqrt(stiffness * mass))

    if zeta < 1:
        omega1 = omega0 * math.sqrt(1 - zeta * zeta)
        envelope = math.exp(-zeta * omega0 * time)
        return 1 - envelope * (
            math.cos(omega1 * time) + (zeta * omega0 / omega1) * math.sin(omega1 * time)
        )

    if zeta == 1:
        return 1 - math.exp(-omega0 * time) * (1 + omega0 * time)

    root = omega0 * math.sqrt(zeta * zeta - 1)
    r1 = -zeta * omega0 + root
    r2 = -zeta * omega0 - root
    return 1 - (r2 * math.exp(r1 * time) - r1 * math.exp(r2 * time)) / (r2 - r1)


@lru_cache(maxsize=None)
def spring_settle_time(
    mass: float = SPRING_MASS,
    stiffness: float = SPRING_STIFFNESS,
    damping: float = SPRING_DAMPING,
    threshold: float = SPRING_REST_THRESHOLD,
) -> float:
    """Seconds after which the spring stays within ``threshold`` of rest."""
    settled_after = 0.0
    steps = int(SPRING_SCAN_LIMIT / SPRING_SCAN_STEP)
    for i in range(1, steps + 1):
        time = i * SPRING_SCAN_STEP
        if abs(1 - spring_position(time, mass, stiffness, damping)) > threshold:
            settled_after = time
    return settled_after + SPRING_SCAN_STEP


def spring_progress(t: float) -> float:
    """Map progress to spring position, stretched so the spring settles at t = 1."""
    if t <= 0:
        return 0.0
    if t >= 1:
        return 1.0
    return spring_position(t * spring_settle_time())
