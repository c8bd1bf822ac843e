"""Unit tests for password hashing."""

from community.application.security import hash_password, verify_password


def test_hash_is_salted():
    first = hash_password("correct horse")
    second = hash_password("correct horse")

    assert first != second
    assert verify_password("correct horse", first)
    assert verify_password("correct horse", second)


def test_wrong_password_does_not_verify():
    assert not verify_password("battery staple", hash_password("correct horse"))


def test_malformed_hash_does_not_verify():
    assert not verify_password("anything", "not-a-bcrypt-hash")
