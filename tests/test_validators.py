from __future__ import annotations

import random

import pytest

from application.utils.validators import (
    is_strong_password,
    is_valid_cnpj,
    is_valid_cpf,
    is_valid_date,
    is_valid_phone,
    only_digits,
    parse_date,
)


def _cpf_with_checks(base: str) -> str:
    digits = base
    for weight in (10, 11):
        total = sum(int(d) * (weight - i) for i, d in enumerate(digits))
        check = 11 - total % 11
        digits += str(0 if check >= 10 else check)
    return digits


def _cnpj_with_checks(base: str) -> str:
    digits = base
    for weights in ((5, 4, 3, 2, 9, 8, 7, 6, 5, 4, 3, 2), (6, 5, 4, 3, 2, 9, 8, 7, 6, 5, 4, 3, 2)):
        mod = sum(int(d) * w for d, w in zip(digits, weights)) % 11
        digits += str(0 if mod < 2 else 11 - mod)
    return digits


def _mutate(digits: str, rng: random.Random) -> str:
    pos = rng.randrange(len(digits))
    new = rng.choice([d for d in "0123456789" if d != digits[pos]])
    return digits[:pos] + new + digits[pos + 1:]


def test_only_digits_strips_formatting_and_is_idempotent():
    assert only_digits("529.982.247-25") == "52998224725"
    assert only_digits(None) == ""
    assert only_digits(11987654321) == "11987654321"
    once = only_digits("(11) 98765-4321")
    assert only_digits(once) == once


@pytest.mark.parametrize("value", ["529.982.247-25", "52998224725", "111.444.777-35"])
def test_known_valid_cpf(value):
    assert is_valid_cpf(value)


@pytest.mark.parametrize("value", ["529.982.247-24", "5299822472", "529982247250", "", None, "abc"])
def test_invalid_cpf(value):
    assert not is_valid_cpf(value)


@pytest.mark.parametrize("digit", "0123456789")
def test_repeated_cpf_is_rejected(digit):
    assert not is_valid_cpf(digit * 11)


def test_generated_cpfs_are_valid_and_mutations_are_caught():
    rng = random.Random(20240917)
    undetected = 0
    trials = 2000
    for _ in range(trials):
        cpf = _cpf_with_checks("".join(rng.choice("0123456789") for _ in range(9)))
        if len(set(cpf)) == 1:
            continue
        assert is_valid_cpf(cpf), cpf
        if is_valid_cpf(_mutate(cpf, rng)):
            undetected += 1
    assert undetected / trials < 0.01


def test_changing_a_check_digit_always_invalidates_cpf():
    cpf = "52998224725"
    for pos in (9, 10):
        for d in "0123456789":
            if d != cpf[pos]:
                assert not is_valid_cpf(cpf[:pos] + d + cpf[pos + 1:])


def test_known_cnpj():
    assert is_valid_cnpj("11.222.333/0001-81")
    assert not is_valid_cnpj("11.222.333/0001-80")
    assert not is_valid_cnpj("11.222.333/0001")
    assert not is_valid_cnpj("00000000000000")
    assert not is_valid_cnpj(None)


def test_generated_cnpjs_are_valid_and_mutations_are_caught():
    rng = random.Random(7)
    undetected = 0
    trials = 2000
    for _ in range(trials):
        cnpj = _cnpj_with_checks("".join(rng.choice("0123456789") for _ in range(12)))
        if len(set(cnpj)) == 1:
            continue
        assert is_valid_cnpj(cnpj), cnpj
        if is_valid_cnpj(_mutate(cnpj, rng)):
            undetected += 1
    assert undetected / trials < 0.01


@pytest.mark.parametrize(
    "value, expected",
    [
        ("11987654321", True),
        ("1198765432", True),
        ("(11) 3333-4444", True),
        ("119876543", False),
        ("119876543210", False),
        (None, False),
    ],
)
def test_phone_length(value, expected):
    assert is_valid_phone(value) is expected


def test_dates():
    assert parse_date("1990-05-17").isoformat() == "1990-05-17"
    assert parse_date("1990-05-17T10:00:00Z").isoformat() == "1990-05-17"
    assert is_valid_date("2010-03-01T00:00:00.000Z")
    assert not is_valid_date("17/05/1990")
    assert not is_valid_date("")
    assert not is_valid_date(None)
    assert parse_date("1990-02-30") is None


def test_offset_datetimes_use_the_utc_calendar_day():
    assert parse_date("1990-05-17T23:00:00-03:00").isoformat() == "1990-05-18"
    assert parse_date("1990-05-18T01:00:00+03:00").isoformat() == "1990-05-17"
    assert parse_date("1990-05-17T23:00:00").isoformat() == "1990-05-17"


@pytest.mark.parametrize(
    "value, expected",
    [
        ("abcdefg1", True),
        ("abcdefgh", False),
        ("12345678", False),
        ("abc123", False),
        ("abcdefg1\n", False),
        (None, False),
    ],
)
def test_password_policy(value, expected):
    assert is_strong_password(value) is expected
