# finance/rootfinding.py
"""Root-finding for the TVM rate (Newton-Raphson, with a brentq alternative)."""
from __future__ import annotations
import logging
import math
from dataclasses import dataclass
from typing import Callable, Tuple

from scipy.optimize import brentq

from .config import RATE_INITIAL_GUESS, RATE_MAX_ITERATIONS, RATE_TOLERANCE

logger = logging.getLogger(__name__)

FuncDeriv = Callable[[float], Tuple[float, float]]
Func = Callable[[float], float]


@dataclass(frozen=True)
class RootResult:
    root: float
    iterations: int
    converged: bool
    method: str


class RootFindingError(RuntimeError):
    """Raised when an iteration cannot take another step (zero derivative, NaN, no bracket)."""


def newton_raphson(
    func_and_deriv: FuncDeriv,
    initial_guess: float = RATE_INITIAL_GUESS,
    *,
    tol: float = RATE_TOLERANCE,
    max_iter: int = RATE_MAX_ITERATIONS,
) -> RootResult:
    """
    x_{k+1} = x_k - f(x_k)/f'(x_k), stopping when |x_{k+1} - x_k| < tol.

    Without convergence after max_iter steps the last iterate is returned
    with converged=False (best effort, the caller decides whether to trust it).
    """
    x = float(initial_guess)
    for iteration in range(1, max_iter + 1):
        value, deriv = func_and_deriv(x)
        logger.debug("Newton iter %s: x=%s value=%s deriv=%s", iteration, x, value, deriv)
        if deriv == 0.0:
            raise RootFindingError(f"Zero derivative at x={x} (iteration {iteration})")
        x_new = x - value / deriv
        if not math.isfinite(x_new):
            raise RootFindingError(f"Non-finite Newton step at iteration {iteration}")
        if abs(x_new - x) < tol:
            return RootResult(x_new, iteration, True, "newton")
        x = x_new

    logger.warning("Newton did not converge after %s iterations; best estimate x=%s", max_iter, x)
    return RootResult(x, max_iter, False, "newton")


def brent(func: Func, lower: float, upper: float, tol: float = RATE_TOLERANCE,
          max_iter: int = RATE_MAX_ITERATIONS) -> RootResult:
    """Bracketed root via scipy's brentq; requires f(lower) and f(upper) of opposite signs."""
    f_lower, f_upper = func(lower), func(upper)
    if f_lower == 0.0:
        return RootResult(lower, 0, True, "brentq")
    if f_upper == 0.0:
        return RootResult(upper, 0, True, "brentq")
    if f_lower * f_upper > 0:
        raise RootFindingError(f"No sign change in [{lower}, {upper}]")
    root, info = brentq(func, lower, upper, xtol=tol, maxiter=max_iter,
                        full_output=True, disp=False)
    logger.debug("brentq: root=%s iterations=%s converged=%s", root, info.iterations, info.converged)
    return RootResult(float(root), int(info.iterations), bool(info.converged), "brentq")
