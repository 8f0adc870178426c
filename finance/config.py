# finance/config.py
from __future__ import annotations
import os

# Newton-Raphson (rate solver)
RATE_INITIAL_GUESS = 0.10     # 10% per period
RATE_TOLERANCE = 1e-7         # on |r_{k+1} - r_k|
RATE_MAX_ITERATIONS = 100

# Default bracket for the brentq rate solver (fraction, not percent)
RATE_BRACKET = (-0.99, 1.0)

# Compound interest: compounding periods per year
COMPOUNDING_FREQUENCIES = {
    1: "Annually",
    2: "Semi-annually",
    4: "Quarterly",
    12: "Monthly",
    52: "Weekly",
    365: "Daily",
}
DEFAULT_COMPOUNDING = 12

# Additional deposits per year (0 = none)
DEPOSIT_FREQUENCIES = {
    0: "None",
    12: "Monthly",
    1: "Annual",
}

LOG_LEVEL = os.getenv("LOG_LEVEL", "WARNING").upper()
