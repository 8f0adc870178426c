import math
import pytest
from finance.tvm import (
    TVMDomainError, growth_factor, annuity_factor, future_value, present_value, payment,
    future_value_annuity, number_of_periods, rate_residual, interest_rate, interest_rate_brent,
)

def test_future_value_lump_sum():
    # 1000 at 10% for 5 periods
    assert abs(future_value(5, 0.10, 1000) - 1610.51) < 1e-9

def test_future_value_zero_rate_is_linear():
    assert future_value(10, 0.0, 1000, 100) == 2000

def test_future_value_with_payments():
    fv = future_value(12, 0.01, 1000, 100)
    assert abs(fv - (1000 * 1.01**12 + 100 * ((1.01**12 - 1) / 0.01))) < 1e-9

def test_present_value_lump_sum():
    pv = present_value(2, 0.1, 0, 1210)
    assert abs(pv * (1.1**2) - 1210) < 1e-9

def test_present_value_and_payment_roundtrip():
    fv = future_value(10, 0.05, 1000, 100)
    assert abs(present_value(10, 0.05, 100, fv) - 1000) < 1e-8
    assert abs(payment(10, 0.05, 1000, fv) - 100) < 1e-8

def test_zero_rate_is_a_domain_error_for_pv_and_pmt():
    with pytest.raises(TVMDomainError):
        present_value(10, 0.0, 100, 2000)
    with pytest.raises(TVMDomainError):
        payment(10, 0.0, 1000, 2000)
    with pytest.raises(TVMDomainError):
        annuity_factor(0.0, 10)

def test_future_value_annuity():
    vf = future_value_annuity(0.01, 12, 100)
    assert abs(vf - 100 * (((1.01)**12 - 1) / 0.01)) < 1e-9
    assert future_value_annuity(0.0, 12, 100) == 1200

def test_growth_factor_negative_base_fractional_exponent():
    with pytest.raises(TVMDomainError):
        growth_factor(-1.5, 2.5)
    # integer exponent stays real
    assert growth_factor(-1.5, 2) == 0.25

def test_periods_lump_sum_roundtrip():
    fv = future_value(10, 0.05, 1000)
    assert abs(fv - 1628.89) < 0.01
    n = number_of_periods(5, 1000, 0, 1628.89)
    assert abs(n - 10) / 10 < 1e-4

def test_periods_with_payments_roundtrip():
    fv = future_value(10, 0.05, 1000, 100)
    assert abs(number_of_periods(5, 1000, 100, fv) - 10) < 1e-9

def test_periods_zero_rate_linear():
    assert number_of_periods(0, 1000, 100, 2000) == 10

@pytest.mark.parametrize("rate, pv, pmt, fv", [
    (5, 1000, 0, -500),     # FV/PV negative
    (5, 0, 0, 1000),        # neither PV nor PMT
    (0, 1000, 0, 2000),     # zero rate without PMT
    (5, 1000, -100, 3000),  # negative log ratio
])
def test_periods_no_real_solution(rate, pv, pmt, fv):
    with pytest.raises(TVMDomainError):
        number_of_periods(rate, pv, pmt, fv)

def test_rate_residual_matches_finite_difference():
    n, pv, pmt, fv = 10, 1000, 100, 3000
    r, h = 0.05, 1e-6
    f, df = rate_residual(r, n, pv, pmt, fv)
    f_up, _ = rate_residual(r + h, n, pv, pmt, fv)
    f_dn, _ = rate_residual(r - h, n, pv, pmt, fv)
    assert math.isclose(df, (f_up - f_dn) / (2 * h), rel_tol=1e-6)
    assert abs(f - (future_value(n, r, pv, pmt) - fv)) < 1e-9

def test_rate_residual_zero_rate_limit():
    f, df = rate_residual(0.0, 10, 1000, 100, 1500)
    assert f == 500
    assert df == 10 * 1000 + 100 * 10 * 9 / 2

def test_interest_rate_lump_sum_doubles():
    res = interest_rate(10, 1000, 0, 2000)
    assert res.converged
    assert res.iterations < 100
    assert abs(res.root - (2 ** 0.1 - 1)) < 1e-10

def test_interest_rate_roundtrip_with_payments():
    fv = future_value(10, 0.06, 1000, 100)
    res = interest_rate(10, 1000, 100, fv)
    assert res.converged
    assert abs(res.root - 0.06) < 1e-8

def test_interest_rate_brent_agrees_with_newton():
    newton = interest_rate(10, 1000, 0, 2000)
    brent = interest_rate_brent(10, 1000, 0, 2000)
    assert brent.method == "brentq"
    assert abs(newton.root - brent.root) < 1e-6
