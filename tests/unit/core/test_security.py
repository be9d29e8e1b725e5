from __future__ import annotations

import pytest

from tenderdesk.core.security import hash_password, is_password_hash, verify_password


def test_hash_is_salted_and_verifiable():
    first = hash_password("s3cret!", iterations=1000)
    second = hash_password("s3cret!", iterations=1000)

    assert first != second
    assert is_password_hash(first)
    assert verify_password("s3cret!", first)
    assert not verify_password("wrong", first)


def test_verify_rejects_plaintext_values():
    assert not verify_password("s3cret!", "s3cret!")
    assert not is_password_hash(None)


def test_empty_password_rejected():
    with pytest.raises(ValueError):
        hash_password("")
