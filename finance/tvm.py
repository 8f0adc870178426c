# finance/tvm.py
from __future__ import annotations
import math

from .config import RATE_BRACKET, RATE_INITIAL_GUESS
from .rootfinding import RootResult, brent, newton_raphson


class TVMError(ValueError):
    """Base error for time-value-of-money calculations."""


class TVMDomainError(TVMError):
    """Formula evaluated outside its real domain (log of non-positive, zero rate, bad base)."""


def growth_factor(i: float, n: float) -> float:
    """(1+i)^n, only in real arithmetic."""
    try:
        return math.pow(1.0 + i, n)
    except (ValueError, OverflowError) as exc:
        raise TVMDomainError(f"(1+{i})^{n} has no finite real value") from exc


def annuity_factor(i: float, n: float) -> float:
    """((1+i)^n - 1)/i: future value of n unit payments at period end."""
    if i == 0:
        raise TVMDomainError("annuity factor undefined for zero rate")
    return (growth_factor(i, n) - 1.0) / i


def future_value(n: float, i: float, pv: float, pmt: float = 0.0) -> float:
    """
    FV = PV*(1+i)^n + PMT*((1+i)^n - 1)/i
    Zero rate: PV + PMT*n
    """
    if i == 0:
        return pv + pmt * n
    return pv * growth_factor(i, n) + pmt * annuity_factor(i, n)


def present_value(n: float, i: float, pmt: float, fv: float) -> float:
    """PV = (FV - PMT*((1+i)^n - 1)/i) / (1+i)^n, i != 0."""
    if i == 0:
        raise TVMDomainError("present value requires a non-zero rate")
    if pmt == 0:
        return fv / growth_factor(i, n)
    return (fv - pmt * annuity_factor(i, n)) / growth_factor(i, n)


def payment(n: float, i: float, pv: float, fv: float) -> float:
    """PMT = (FV - PV*(1+i)^n) / (((1+i)^n - 1)/i), i != 0."""
    if i == 0:
        raise TVMDomainError("payment requires a non-zero rate")
    factor = annuity_factor(i, n)
    if factor == 0:
        raise TVMDomainError("annuity factor is zero")
    return (fv - pv * growth_factor(i, n)) / factor


def future_value_annuity(i: float, n: float, pmt: float) -> float:
    """
    FV of n equal end-of-period payments: PMT*(((1+i)^n - 1)/i)
    Zero rate: PMT*n
    """
    if i == 0:
        return pmt * n
    return pmt * annuity_factor(i, n)


def number_of_periods(rate_pct: float, pv: float, pmt: float, fv: float) -> float:
    """
    n from the log inversion of the TVM equation. Rate in percent.
    - rate 0:   (FV - PV)/PMT
    - PMT 0:    ln(FV/PV) / ln(1+r)
    - general:  ln((FV*r + PMT)/(PV*r + PMT)) / ln(1+r)
    """
    if rate_pct == 0:
        if pmt == 0:
            raise TVMDomainError("zero rate and zero payment: periods undetermined")
        return (fv - pv) / pmt

    r = rate_pct / 100.0
    if r <= -1.0:
        raise TVMDomainError("rate must be greater than -100%")

    if pmt == 0:
        if pv == 0 or fv / pv <= 0:
            raise TVMDomainError("FV/PV must be positive: no real solution")
        return math.log(fv / pv) / math.log(1.0 + r)

    numerator = fv * r + pmt
    denominator = pv * r + pmt
    if denominator == 0 or numerator / denominator <= 0:
        raise TVMDomainError("(FV*r + PMT)/(PV*r + PMT) must be positive: no real solution")
    return math.log(numerator / denominator) / math.log(1.0 + r)


def rate_residual(r: float, n: float, pv: float, pmt: float, fv: float) -> tuple[float, float]:
    """
    f(r)  = PV*(1+r)^n + PMT*((1+r)^n - 1)/r - FV
    f'(r) = n*PV*(1+r)^(n-1) + PMT*(n*(1+r)^(n-1)/r - ((1+r)^n - 1)/r^2)
    At r = 0 the annuity terms take their limits (n and n(n-1)/2).
    """
    if r == 0:
        return pv + pmt * n - fv, n * pv + pmt * n * (n - 1.0) / 2.0
    g = growth_factor(r, n)
    g1 = growth_factor(r, n - 1.0)
    f = pv * g + pmt * ((g - 1.0) / r) - fv
    df = n * pv * g1 + pmt * (n * g1 / r - (g - 1.0) / (r * r))
    return f, df


def interest_rate(n: float, pv: float, pmt: float, fv: float,
                  initial_guess: float = RATE_INITIAL_GUESS) -> RootResult:
    """Periodic rate (fraction) by Newton-Raphson; see RootResult.converged."""
    return newton_raphson(lambda r: rate_residual(r, n, pv, pmt, fv), initial_guess)


def interest_rate_brent(n: float, pv: float, pmt: float, fv: float,
                        lower: float = RATE_BRACKET[0], upper: float = RATE_BRACKET[1]) -> RootResult:
    """Periodic rate (fraction) by brentq inside [lower, upper]."""
    return brent(lambda r: rate_residual(r, n, pv, pmt, fv)[0], lower, upper)
