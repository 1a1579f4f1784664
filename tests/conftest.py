"""Test configuration and fixtures."""

import os
from uuid import uuid4

import logfire
import pytest

from scribe.config import Settings
from scribe.domain.value import UserId
from scribe.util.jwt import create_token

os.environ.setdefault("ENVIRONMENT", "test")

# Console only, nothing leaves the machine
logfire.configure(send_to_logfire=False, console=False)


def make_user_id() -> UserId:
    """A fresh identity provider user id."""
    return UserId(uuid4())


def auth_headers(user_id: UserId) -> dict[str, str]:
    """Bearer header with a locally minted access token for ``user_id``."""
    token = create_token(str(user_id), Settings().auth)
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def user_id() -> UserId:
    return make_user_id()


@pytest.fixture
def other_user_id() -> UserId:
    return make_user_id()
