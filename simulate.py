# simulate.py
from __future__ import annotations
import math
from typing import Dict, List, Sequence

import pandas as pd

from finance.compound import compound_interest
from finance.config import COMPOUNDING_FREQUENCIES


def tvm_schedule(n: float, rate_pct: float, pv: float, pmt: float = 0.0) -> pd.DataFrame:
    """
    Period-by-period balance of a TVM problem:
    - balance grows at rate_pct per period
    - PMT added at the end of each period
    Only whole periods are listed (0..floor(n)).
    """
    if n < 1:
        raise ValueError("n must cover at least one whole period")
    i = rate_pct / 100.0
    balance = pv
    contributions = pv
    rows = [{"period": 0, "balance": balance, "contributions": contributions, "interest": 0.0}]
    for k in range(1, math.floor(n) + 1):
        balance *= (1.0 + i)
        balance += pmt
        contributions += pmt
        rows.append({"period": k, "balance": balance, "contributions": contributions,
                     "interest": balance - contributions})
    return pd.DataFrame(rows)


def compare_compounding(principal: float, rate_pct: float, years: int,
                        frequencies: Sequence[int] = tuple(COMPOUNDING_FREQUENCIES),
                        deposit: float = 0.0, deposit_frequency: int = 0) -> List[Dict]:
    """Same deposit plan under each compounding frequency, best first."""
    out = []
    for m in frequencies:
        res = compound_interest(principal, rate_pct, years, m, deposit, deposit_frequency)
        if res is None:
            continue
        out.append({
            "compounding": m,
            "label": COMPOUNDING_FREQUENCIES[m],
            "final_amount": res["final_amount"],
            "total_interest": res["total_interest"],
        })
    return sorted(out, key=lambda x: x["final_amount"], reverse=True)
