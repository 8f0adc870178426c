# main.py
from __future__ import annotations
import logging

from finance.config import COMPOUNDING_FREQUENCIES, DEPOSIT_FREQUENCIES, LOG_LEVEL
from finance.problem import TVMProblem, Unknown, solve_with_status
from finance.compound import compound_interest
from finance.inflation import inflation_impact
from simulate import tvm_schedule, compare_compounding

logger = logging.getLogger(__name__)


# =========================
# Input helpers
# =========================
def _input_float(msg: str, default: float) -> float:
    raw = input(f"{msg} [{default}]: ").strip()
    return float(raw.replace(",", ".") or default)

def _input_int(msg: str, default: int) -> int:
    raw = input(f"{msg} [{default}]: ").strip()
    return int(raw or default)

def _input_bool(msg: str, default: bool=False) -> bool:
    raw = input(f"{msg} [{'y' if default else 'n'}]: ").strip().lower()
    if raw == "":
        return default
    return raw.startswith("y")

def _input_choice(msg: str, options: dict, default):
    labels = ", ".join(f"{k}={v}" for k, v in options.items())
    while True:
        raw = input(f"{msg} ({labels}) [{default}]: ").strip()
        if raw == "":
            return default
        for key in options:
            if str(key) == raw:
                return key
        print("Invalid option.")


# =========================
# Menu
# =========================
def menu():
    print("\n=== Financial Calculators ===")
    print("1) Time value of money (solve n, rate, PV, PMT or FV)")
    print("2) Compound interest")
    print("3) Inflation and purchasing power")
    print("0) Exit")


UNKNOWN_LABELS = {
    Unknown.PERIODS: "Number of periods",
    Unknown.RATE: "Interest rate (%)",
    Unknown.PRESENT_VALUE: "Present value",
    Unknown.PAYMENT: "Payment",
    Unknown.FUTURE_VALUE: "Future value",
}

DEFAULTS = {
    Unknown.PERIODS: 10.0,
    Unknown.RATE: 5.0,
    Unknown.PRESENT_VALUE: 1000.0,
    Unknown.PAYMENT: 100.0,
    Unknown.FUTURE_VALUE: 2000.0,
}


def read_tvm_problem() -> TVMProblem:
    options = {u.value: UNKNOWN_LABELS[u] for u in Unknown}
    unknown = Unknown(_input_choice("Calculate", options, Unknown.FUTURE_VALUE.value))
    values = {}
    for u in Unknown:
        if u is unknown:
            continue
        values[u] = _input_float(UNKNOWN_LABELS[u], DEFAULTS[u])
    return TVMProblem(
        unknown,
        periods=values.get(Unknown.PERIODS, 0.0),
        rate=values.get(Unknown.RATE, 0.0),
        present_value=values.get(Unknown.PRESENT_VALUE, 0.0),
        payment=values.get(Unknown.PAYMENT, 0.0),
        future_value=values.get(Unknown.FUTURE_VALUE, 0.0),
    )


# =========================
# Menu actions
# =========================
def action_tvm():
    print("\n-- Time value of money --")
    problem = read_tvm_problem()
    res = solve_with_status(problem)
    if not res.ok:
        print(f"No result ({res.reason}).")
        return

    label = UNKNOWN_LABELS[problem.unknown]
    if problem.unknown is Unknown.RATE:
        print(f"\n{label}: {res.value:.4f}%")
        if not res.converged:
            print(f"Warning: did not converge in {res.iterations} iterations; showing best estimate.")
    elif problem.unknown is Unknown.PERIODS:
        print(f"\n{label}: {res.value:.2f}")
    else:
        print(f"\n{label}: {res.value:,.2f}")

    if problem.unknown is Unknown.FUTURE_VALUE and problem.periods >= 1 \
            and _input_bool("Show period-by-period balance?", False):
        table = tvm_schedule(problem.periods, problem.rate, problem.present_value, problem.payment)
        print(table.to_string(index=False, float_format=lambda x: f"{x:,.2f}"))


def action_compound():
    print("\n-- Compound interest --")
    principal = _input_float("Principal", 10000.0)
    rate_pct = _input_float("Annual interest rate (%)", 7.0)
    years = _input_int("Years", 10)
    compounding = _input_choice("Compounding", COMPOUNDING_FREQUENCIES, 12)
    deposit = _input_float("Additional deposit", 0.0)
    deposit_frequency = _input_choice("Deposit frequency", DEPOSIT_FREQUENCIES, 0) if deposit > 0 else 0

    res = compound_interest(principal, rate_pct, years, compounding, deposit, deposit_frequency)
    if res is None:
        print("No result (principal and years must be positive, rate not negative).")
        return
    print(f"\nFinal amount:   {res['final_amount']:,.2f}")
    print(f"Total deposits: {res['total_deposits']:,.2f}")
    print(f"Total interest: {res['total_interest']:,.2f}")
    print(res["schedule"].to_string(index=False, float_format=lambda x: f"{x:,.2f}"))

    if _input_bool("Compare compounding frequencies?", False):
        for row in compare_compounding(principal, rate_pct, years, deposit=deposit,
                                       deposit_frequency=deposit_frequency):
            print(f"- {row['label']}: {row['final_amount']:,.2f} (interest {row['total_interest']:,.2f})")


def action_inflation():
    print("\n-- Inflation --")
    amount = _input_float("Current amount", 10000.0)
    rate_pct = _input_float("Annual inflation rate (%)", 3.0)
    years = _input_int("Years", 10)

    res = inflation_impact(amount, rate_pct, years)
    if res is None:
        print("No result (amount and years must be positive, rate not negative).")
        return
    print(f"\nNominal amount needed in {years} years: {res['future_value']:,.2f}")
    print(f"Purchasing power of today's amount:     {res['real_value']:,.2f}")
    print(f"Purchasing power lost: {res['purchasing_power_lost']:,.2f} ({res['percentage_lost']:.2f}%)")


# =========================
# Main loop
# =========================
def main():
    logging.basicConfig(level=LOG_LEVEL, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    while True:
        menu()
        op = input("Choose: ").strip()
        try:
            if op == "1":
                action_tvm()
            elif op == "2":
                action_compound()
            elif op == "3":
                action_inflation()
            elif op == "0":
                print("Bye!")
                break
            else:
                print("Invalid option.")
        except ValueError as e:
            logger.debug("Invalid input", exc_info=True)
            print(f"Invalid input: {e}")


if __name__ == "__main__":
    main()
