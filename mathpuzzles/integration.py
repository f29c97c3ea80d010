"""Numerical integration: Romberg extrapolation and Gauss-Legendre quadrature."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from mpmath import mp, mpf

_BRACKET_LOW = "2.26274649749316953701833503496598089204466788"
_BRACKET_HIGH = "2.26274649749316953701833503496598089204466789"
_LOWER_LIMIT = 1.0e-30
_TOLERANCE_BITS = 150
_MAX_BISECTIONS = 1000
_MAX_NEWTON_STEPS = 100


def romberg_integrate(a: Any, b: Any, func: Callable[[Any], Any], levels: int = 15) -> Any:
    """Integrate ``func`` over [a, b] by the trapezoid rule with Richardson extrapolation.

    Level i uses 2**(i + 1) panels; works with floats or mpmath numbers.
    """
    if not a < b:
        raise ValueError("a must be less than b")
    if levels < 1:
        raise ValueError("levels must be at least 1")
    ends = (func(a) + func(b)) / 2
    previous: list[Any] = []
    panels = 2
    for i in range(levels):
        h = (b - a) / panels
        interior = sum(func(a + k * h) for k in range(1, panels))
        row = [h * (ends + interior)]
        factor = 4
        for j in range(1, i + 1):
            row.append(row[j - 1] + (row[j - 1] - previous[j - 1]) / (factor - 1))
            factor *= 4
        previous = row
        panels *= 2
    return previous[-1]


def romberg_answer(levels: int = 15, dps: int = 1000) -> tuple[mpf, mpf]:
    """Integrate 1 / (1 + x**3) over [0, 1]; return it with the closed form."""
    with mp.workdps(dps):

        def integrand(x: mpf) -> mpf:
            return 1 / (1 + x * x * x)

        answer = romberg_integrate(mpf(0), mpf(1), integrand, levels)
        check = mp.log(2) / 3 + mp.sqrt(3) * mp.pi / 9
    return answer, check


class GaussLegendre:
    """Gauss-Legendre rule of a given order, built at the current mpmath precision."""

    def __init__(self, order: int, eps: mpf | None = None) -> None:
        if order < 1:
            raise ValueError("order must be at least 1")
        if eps is None:
            eps = mpf(10) ** -(mp.dps * 3 // 5)
        self.order = order
        nodes = [mpf(0)] * order
        weights = [mpf(0)] * order
        for i in range((order + 1) // 2):
            z = mp.cos(mp.pi * (mpf(i + 1) - mpf("0.25")) / (mpf(order) + mpf("0.5")))
            for _ in range(_MAX_NEWTON_STEPS):
                p1, p2 = mpf(1), mpf(0)
                for j in range(1, order + 1):
                    p3 = p2
                    p2 = p1
                    p1 = ((2 * j - 1) * z * p2 - (j - 1) * p3) / j
                pp = order * (z * p1 - p2) / (z * z - 1)
                z1 = z
                z = z1 - p1 / pp
                if abs(z - z1) <= eps:
                    break
            nodes[i] = -z
            nodes[order - 1 - i] = z
            weight = 2 / ((1 - z * z) * pp * pp)
            weights[i] = weight
            weights[order - 1 - i] = weight
        self.nodes = tuple(nodes)
        self.weights = tuple(weights)

    def integrate(self, x1: Any, x2: Any, func: Callable[[mpf], mpf]) -> mpf:
        """Integrate ``func`` over [x1, x2]."""
        x1, x2 = mpf(x1), mpf(x2)
        if not x1 < x2:
            raise ValueError("x1 must be less than x2")
        middle = (x1 + x2) / 2
        radius = (x2 - x1) / 2
        total = mp.fsum(w * func(middle + radius * x) for x, w in zip(self.nodes, self.weights))
        return total * radius


def log_tanh_integrand(x: mpf) -> mpf:
    """Integrand of log(1 - t) log(t) over (0, 1) after t = tanh(pi/2 sinh x)."""
    half_pi = mp.pi / 2
    a = half_pi * mp.sinh(x)
    t = mp.tanh(a)
    return mp.log(1 - t) * mp.log(t) * half_pi * mp.cosh(x) / (mp.cosh(a) * mp.cosh(a))


def _bisect(func: Callable[[mpf], mpf], low: mpf, high: mpf, bits: int, max_iter: int) -> mpf:
    f_low = func(low)
    if f_low == 0:
        return low
    f_high = func(high)
    if f_high == 0:
        return high
    if (f_low > 0) == (f_high > 0):
        raise ValueError("the function does not change sign on the bracket")
    tolerance = max(mpf(2) ** (1 - bits), 4 * mp.eps)
    for _ in range(max_iter):
        if high - low <= tolerance * min(abs(low), abs(high)):
            break
        middle = (low + high) / 2
        if middle in (low, high):
            break
        f_middle = func(middle)
        if f_middle == 0:
            return middle
        if (f_middle > 0) == (f_low > 0):
            low, f_low = middle, f_middle
        else:
            high = middle
    return (low + high) / 2


def gauss_legendre_answer(order: int = 1000, dps: int = 170) -> tuple[mpf, mpf]:
    """Integrate the log-tanh integrand up to the limit that best matches 2 - pi**2/6.

    Returns the integral and that constant. Raises ValueError when the
    built-in bracket for the upper limit holds no sign change.
    """
    with mp.workdps(dps):
        rule = GaussLegendre(order)
        constant = 2 - mp.pi**2 / 6
        lower = mpf(_LOWER_LIMIT)

        def difference(upper: mpf) -> mpf:
            return rule.integrate(lower, upper, log_tanh_integrand) - constant

        upper = _bisect(
            difference, mpf(_BRACKET_LOW), mpf(_BRACKET_HIGH), _TOLERANCE_BITS, _MAX_BISECTIONS
        )
        answer = rule.integrate(lower, upper, log_tanh_integrand)
    return answer, constant