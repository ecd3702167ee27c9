import uuid
from datetime import timedelta

import pytest

from app.core.exceptions import UnauthenticatedError
from app.core.security import (
    create_access_token,
    decode_access_token,
    hash_password,
    verify_password,
)


def test_password_hash_round_trip():
    hashed = hash_password("correct horse")

    assert hashed != "correct horse"
    assert verify_password("correct horse", hashed)
    assert not verify_password("battery staple", hashed)


def test_account_without_hash_never_matches():
    assert not verify_password("anything", None)


def test_token_carries_user_id():
    user_id = uuid.uuid4()

    assert decode_access_token(create_access_token(user_id)) == user_id


def test_expired_token_is_rejected():
    token = create_access_token(uuid.uuid4(), expires_delta=timedelta(minutes=-1))

    with pytest.raises(UnauthenticatedError):
        decode_access_token(token)
