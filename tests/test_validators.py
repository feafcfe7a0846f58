from types import SimpleNamespace

import pytest

from diet_tracker.utils.validators import PASSWORD_SYMBOLS, is_owner, validate_password


@pytest.mark.parametrize("password", [
    "Passw0rd!",
    "ABCDEFG1@",
    "longer Passw0rd with spaces?",
    "Zz9<>zzz",
])
def test_validate_password_accepts_strong(password):
    assert validate_password(password)


@pytest.mark.parametrize("password", [
    "",
    "Pa0!",          # too short
    "Pass0rd",       # 7 chars, no symbol
    "password1!",    # no uppercase
    "Password!!",    # no digit
    "Password11",    # no symbol
    "Passw0rd-",     # '-' is not in the symbol set
    "Passw0rd_",     # '_' is not either
])
def test_validate_password_rejects_weak(password):
    assert not validate_password(password)


def test_every_listed_symbol_counts():
    for symbol in PASSWORD_SYMBOLS:
        assert validate_password(f"Abcdefg1{symbol}"), symbol


def test_validate_password_rejects_non_strings():
    assert not validate_password(None)
    assert not validate_password(12345678)


def test_is_owner():
    row = SimpleNamespace(user_id=7)
    assert is_owner(row, 7)
    assert not is_owner(row, 8)
    assert not is_owner(None, 7)
