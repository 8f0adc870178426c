# finance/compound.py
from __future__ import annotations
from typing import Dict, Optional

import numpy as np
import pandas as pd

from .config import COMPOUNDING_FREQUENCIES, DEFAULT_COMPOUNDING, DEPOSIT_FREQUENCIES
from .tvm import future_value_annuity


def _check_frequencies(compounding: int, deposit_frequency: int) -> None:
    if compounding not in COMPOUNDING_FREQUENCIES:
        raise ValueError(f"Unsupported compounding frequency: {compounding}")
    if deposit_frequency not in DEPOSIT_FREQUENCIES:
        raise ValueError(f"Unsupported deposit frequency: {deposit_frequency}")


def deposits_future_value(r: float, years: np.ndarray, deposit: float, deposit_frequency: int) -> np.ndarray:
    """
    FV of end-of-period deposits after `years`.
    Monthly: D*(((1+r/12)^(12t) - 1)/(r/12)); annual: D*(((1+r)^t - 1)/r).
    Zero rate: D*freq*t.
    """
    years = np.asarray(years, dtype=float)
    if deposit <= 0 or deposit_frequency == 0:
        return np.zeros_like(years)
    i = r / deposit_frequency
    return np.array([future_value_annuity(i, deposit_frequency * t, deposit) for t in years])


def balances(principal: float, r: float, years: np.ndarray, compounding: int,
             deposit: float, deposit_frequency: int) -> np.ndarray:
    """P*(1 + r/m)^(m*t) plus the deposits' FV, for each t in `years`."""
    years = np.asarray(years, dtype=float)
    base = principal * np.power(1.0 + r / compounding, compounding * years)
    return base + deposits_future_value(r, years, deposit, deposit_frequency)


def yearly_breakdown(principal: float, rate_pct: float, years: int,
                     compounding: int = DEFAULT_COMPOUNDING, deposit: float = 0.0,
                     deposit_frequency: int = 0) -> pd.DataFrame:
    """Year 0..t: cumulative deposits ('principal'), interest and balance."""
    _check_frequencies(compounding, deposit_frequency)
    r = rate_pct / 100.0
    t = np.arange(0, years + 1)
    balance = balances(principal, r, t, compounding, deposit, deposit_frequency)
    contributions = principal + deposit * deposit_frequency * t.astype(float)
    return pd.DataFrame({
        "year": t,
        "principal": contributions,
        "interest": balance - contributions,
        "balance": balance,
    })


def compound_interest(principal: float, rate_pct: float, years: int,
                      compounding: int = DEFAULT_COMPOUNDING, deposit: float = 0.0,
                      deposit_frequency: int = 0) -> Optional[Dict]:
    """
    Final amount of a principal compounded m times a year plus optional
    monthly/annual deposits. None when P <= 0, rate < 0 or years <= 0.
    """
    if principal <= 0 or rate_pct < 0 or years <= 0 or deposit < 0:
        return None
    table = yearly_breakdown(principal, rate_pct, int(years), compounding, deposit, deposit_frequency)
    last = table.iloc[-1]
    return {
        "final_amount": float(last["balance"]),
        "total_deposits": float(last["principal"]),
        "total_interest": float(last["interest"]),
        "schedule": table,
    }
