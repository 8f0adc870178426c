# finance/inflation.py
from __future__ import annotations
from typing import Dict, Optional

import numpy as np
import pandas as pd


def purchasing_power(amount: float, rate_pct: float, years) -> np.ndarray:
    """Real value after t years: A/(1+pi)^t (vectorized over t)."""
    return amount / np.power(1.0 + rate_pct / 100.0, np.asarray(years, dtype=float))


def inflation_impact(amount: float, rate_pct: float, years: int) -> Optional[Dict]:
    """
    Effect of constant annual inflation on `amount`:
    - future_value: A*(1+pi)^t (nominal amount needed to keep pace)
    - real_value:   A/(1+pi)^t (what today's amount buys then)
    None when amount <= 0, rate < 0 or years <= 0.
    """
    if amount <= 0 or rate_pct < 0 or years <= 0:
        return None
    pi = rate_pct / 100.0
    t = np.arange(0, int(years) + 1)
    power = purchasing_power(amount, rate_pct, t)
    real_value = float(power[-1])
    lost = amount - real_value
    return {
        "future_value": amount * (1.0 + pi) ** int(years),
        "real_value": real_value,
        "purchasing_power_lost": lost,
        "percentage_lost": lost / amount * 100.0,
        "schedule": pd.DataFrame({
            "year": t,
            "purchasing_power": power,
            "original_value": np.full(t.shape, float(amount)),
        }),
    }
