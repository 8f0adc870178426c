# finance/problem.py
from __future__ import annotations
import logging
import math
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .rootfinding import RootFindingError
from .tvm import (
    TVMError, future_value, present_value, payment, number_of_periods,
    interest_rate, rate_residual,
)

logger = logging.getLogger(__name__)


class Unknown(str, Enum):
    PERIODS = "periods"
    RATE = "rate"
    PRESENT_VALUE = "pv"
    PAYMENT = "pmt"
    FUTURE_VALUE = "fv"


@dataclass(frozen=True)
class TVMProblem:
    """
    One TVM evaluation. Rate is in percent (5.0 = 5% per period).
    The field matching `unknown` is ignored; zero means "not applicable".
    """
    unknown: Unknown
    periods: float = 0.0
    rate: float = 0.0
    present_value: float = 0.0
    payment: float = 0.0
    future_value: float = 0.0


@dataclass(frozen=True)
class TVMResult:
    """
    Outcome of one solve. value is None when there is no result; converged
    and iterations only carry information for the rate solver.
    """
    value: Optional[float]
    converged: bool = True
    iterations: int = 0
    reason: str = ""

    @property
    def ok(self) -> bool:
        return self.value is not None


def _no_result(reason: str) -> TVMResult:
    logger.debug("No result: %s", reason)
    return TVMResult(None, reason=reason)


def _precondition(p: TVMProblem) -> str:
    """Returns a message when the selected branch cannot be evaluated, '' otherwise."""
    n, rate, pv, pmt, fv = p.periods, p.rate, p.present_value, p.payment, p.future_value
    if p.unknown is Unknown.PERIODS:
        if rate == 0:
            return "" if pmt != 0 else "zero rate requires a payment"
        if pv == 0 and pmt == 0:
            return "present value or payment required"
        return "" if fv != 0 else "future value required"
    if n <= 0:
        return "periods must be positive"
    if p.unknown is Unknown.RATE:
        if pv == 0 and pmt == 0:
            return "present value or payment required"
        return "" if fv != 0 else "future value required"
    if p.unknown is Unknown.PRESENT_VALUE:
        if rate == 0:
            return "rate must be non-zero"
        return "" if fv != 0 else "future value required"
    if p.unknown is Unknown.PAYMENT:
        if rate == 0:
            return "rate must be non-zero"
        return "" if (pv != 0 or fv != 0) else "present value or future value required"
    return "" if rate >= 0 else "rate must not be negative"


def solve_with_status(p: TVMProblem) -> TVMResult:
    """Solve for p.unknown; failures come back as TVMResult(value=None, reason=...)."""
    reason = _precondition(p)
    if reason:
        return _no_result(reason)

    i = p.rate / 100.0
    converged, iterations = True, 0
    try:
        if p.unknown is Unknown.PERIODS:
            value = number_of_periods(p.rate, p.present_value, p.payment, p.future_value)
        elif p.unknown is Unknown.RATE:
            root = interest_rate(p.periods, p.present_value, p.payment, p.future_value)
            value, converged, iterations = root.root * 100.0, root.converged, root.iterations
        elif p.unknown is Unknown.PRESENT_VALUE:
            value = present_value(p.periods, i, p.payment, p.future_value)
        elif p.unknown is Unknown.PAYMENT:
            value = payment(p.periods, i, p.present_value, p.future_value)
        else:
            value = future_value(p.periods, i, p.present_value, p.payment)
    except (TVMError, RootFindingError, ZeroDivisionError, OverflowError) as exc:
        return _no_result(str(exc))

    if not math.isfinite(value):
        return _no_result(f"non-finite result {value}")
    return TVMResult(value, converged=converged, iterations=iterations)


def solve(p: TVMProblem) -> Optional[float]:
    """Computed unknown (rate in percent) or None."""
    return solve_with_status(p).value


def check_consistency(p: TVMProblem, value: float) -> float:
    """
    Residual of PV*(1+r)^n + PMT*((1+r)^n - 1)/r - FV once `value`
    is placed in the unknown's slot. Near zero for a consistent solution.
    """
    fields = {
        Unknown.PERIODS: "periods",
        Unknown.RATE: "rate",
        Unknown.PRESENT_VALUE: "present_value",
        Unknown.PAYMENT: "payment",
        Unknown.FUTURE_VALUE: "future_value",
    }
    known = {name: getattr(p, name) for name in fields.values()}
    known[fields[p.unknown]] = value
    f, _ = rate_residual(known["rate"] / 100.0, known["periods"], known["present_value"],
                         known["payment"], known["future_value"])
    return f
