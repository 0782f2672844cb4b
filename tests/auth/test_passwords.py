from __future__ import annotations

import sys
from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).resolve().parents[2]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from authgate.auth.passwords import (
    BCRYPT_ROUNDS,
    hash_password,
    needs_rehash,
    verify_password,
)


def test_hash_and_verify_password() -> None:
    password = "s3cret-value"
    hashed = hash_password(password)
    assert hashed != password
    assert verify_password(password, hashed)
    assert not verify_password("wrong", hashed)


def test_hash_uses_configured_work_factor() -> None:
    hashed = hash_password("p1")
    assert hashed.startswith("$2b$")
    assert hashed.split("$")[2] == f"{BCRYPT_ROUNDS:02d}"
    assert not needs_rehash(hashed)


def test_same_password_gets_distinct_salted_digests() -> None:
    first = hash_password("same-input")
    second = hash_password("same-input")
    assert first != second
    assert verify_password("same-input", first)
    assert verify_password("same-input", second)


@pytest.mark.parametrize(
    "digest",
    ["", "not-a-hash", "$2b$10$tooshort", "$argon2id$v=19$garbage"],
)
def test_malformed_digest_is_a_mismatch(digest: str) -> None:
    assert verify_password("anything", digest) is False


def test_empty_password_never_verifies() -> None:
    hashed = hash_password("value")
    assert verify_password("", hashed) is False


def test_hash_rejects_non_string() -> None:
    with pytest.raises(TypeError):
        hash_password(None)  # type: ignore[arg-type]


def test_needs_rehash_for_missing_or_weaker_hash() -> None:
    assert needs_rehash("")
    assert needs_rehash("not-a-hash")
