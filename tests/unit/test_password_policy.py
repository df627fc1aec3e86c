import pytest

from account.domain.services.credentials import SALT_LENGTH, generate_salt
from account.domain.services.password_policy import is_valid_password


@pytest.mark.parametrize("password", ["Abcdef12", "aB3aaaaa", "ZZZZzzzz9", "A1b" * 10])
def test_accepts_mixed_case_letters_and_digits(password):
    assert is_valid_password(password)


@pytest.mark.parametrize(
    "password",
    [
        None,
        "",
        "short1",
        "Abcde12",  # seven characters
        "alllowercase1",
        "ALLUPPERCASE1",
        "NoDigitsHere",
        "Abcdef12!",  # symbols are outside the allowed alphabet
        "Abc def12",
    ],
)
def test_rejects(password):
    assert not is_valid_password(password)


def test_salts_are_random_and_sized():
    salts = {generate_salt() for _ in range(20)}
    assert len(salts) == 20
    assert all(len(s) == SALT_LENGTH for s in salts)
