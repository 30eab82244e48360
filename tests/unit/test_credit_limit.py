"""Unit tests for credit limit evaluation"""

import random
import pytest
from credit_engine.domain.credit_limit import (
    calculate_debt_value,
    calculate_installments,
    draw_discount_rate,
    new_rng,
    verify_credit_limit,
)


def test_calculate_debt_value_ascii():
    """Test debt value is $200 per character for ASCII identifiers"""
    assert calculate_debt_value("a") == 200.0
    assert calculate_debt_value("abc") == 600.0
    assert calculate_debt_value("x" * 100) == 20000.0


def test_draw_discount_rate_bounds(fixed_random):
    """Test discount rate spans [0.05, 0.20)"""
    assert draw_discount_rate(fixed_random(0.0)) == pytest.approx(0.05)
    assert draw_discount_rate(fixed_random(0.5)) == pytest.approx(0.125)
    assert draw_discount_rate(fixed_random(0.999999)) < 0.20


def test_calculate_installments_truncates():
    """Test one installment per full $1000"""
    assert calculate_installments(5500.0) == 5
    assert calculate_installments(8999.99) == 8
    assert calculate_installments(9500.0) == 9


def test_calculate_installments_clamped():
    """Test installments never leave [1, 12]"""
    assert calculate_installments(0.5) == 1
    assert calculate_installments(999.99) == 1
    assert calculate_installments(12999.0) == 12
    assert calculate_installments(16000.0) == 12


def test_verify_credit_limit_minimum_discount(fixed_random):
    """Test lowest draw applies a 5% discount"""
    result = verify_credit_limit("x" * 50, rng=fixed_random(0.0))

    assert result.debt_value == 10000.0
    assert result.payment_value == pytest.approx(9500.0)
    assert result.installments == 9


def test_verify_credit_limit_maximum_discount(fixed_random):
    """Test highest draw approaches a 20% discount"""
    result = verify_credit_limit("x" * 50, rng=fixed_random(0.9999999))

    assert result.debt_value == 10000.0
    assert result.payment_value == pytest.approx(8000.0, abs=0.01)
    assert result.payment_value > 8000.0
    assert result.installments == 8


def test_verify_credit_limit_fallback_when_no_discount(fixed_random):
    """Test payable amount falls back to 95% when the rate is not positive"""
    # -1.0 yields a -10% rate, so the payable amount would exceed the debt
    result = verify_credit_limit("x" * 10, rng=fixed_random(-1.0))

    assert result.debt_value == 2000.0
    assert result.payment_value == pytest.approx(1900.0)
    assert result.installments == 1


def test_verify_credit_limit_single_character():
    """Test length-1 identifier: $200 debt, one installment"""
    result = verify_credit_limit("a")

    assert result.debt_value == 200.0
    assert 160.0 <= result.payment_value <= 190.0
    assert result.installments == 1


def test_verify_credit_limit_long_identifier_caps_installments():
    """Test length-100 identifier is capped at 12 installments"""
    result = verify_credit_limit("d" * 100)

    assert result.debt_value == 20000.0
    assert result.payment_value / 1000 > 12
    assert result.installments == 12


def test_verify_credit_limit_invariants():
    """Test bounds hold across identifier lengths and random draws"""
    for length in range(1, 120, 7):
        debt_id = "d" * length
        result = verify_credit_limit(debt_id)

        assert result.debt_value == length * 200.0
        assert 1 <= result.installments <= 12
        assert 0 < result.payment_value <= result.debt_value
        assert result.debt_value * 0.80 <= result.payment_value <= result.debt_value * 0.95


def test_verify_credit_limit_repeated_calls_same_debt_value():
    """Test repeated evaluations keep the debt value stable"""
    results = [verify_credit_limit("debt-123", rng=random.Random(seed)) for seed in range(10)]

    assert {r.debt_value for r in results} == {1600.0}
    assert len({r.payment_value for r in results}) > 1


def test_new_rng_seeded_from_clock(monkeypatch):
    """Test each generator is seeded from the nanosecond clock"""
    monkeypatch.setattr("credit_engine.domain.credit_limit.time.time_ns", lambda: 42)

    first = new_rng()
    second = new_rng()

    assert first is not second
    assert first.random() == random.Random(42).random()
    assert verify_credit_limit("abc") == verify_credit_limit("abc")


def test_calculate_debt_value_counts_utf8_bytes():
    """Test multibyte identifiers are measured in UTF-8 bytes"""
    assert calculate_debt_value("é") == 400.0
    assert calculate_debt_value("café") == 1000.0
    assert calculate_debt_value("債務") == 1200.0


def test_verify_credit_limit_multibyte_identifier(fixed_random):
    """Test a multibyte identifier drives the whole plan by byte length"""
    # 3 characters, 7 bytes
    result = verify_credit_limit("債務1", rng=fixed_random(0.0))

    assert result.debt_value == 1400.0
    assert result.payment_value == pytest.approx(1330.0)
    assert result.installments == 1
