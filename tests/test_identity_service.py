import pytest

from app.core.errors import UserNotFoundError
from app.core.security import verify_session_token
from app.domains.identity.schemas import ExternalIdentity


def make_identity(**overrides) -> ExternalIdentity:
    data = {
        "external_id": "google-sub-1",
        "email": "alice@example.com",
        "display_name": "Alice",
        "avatar_url": None,
    }
    data.update(overrides)
    return ExternalIdentity(**data)


@pytest.mark.asyncio
async def test_first_sign_in_creates_user(identity_service, storage):
    user = await identity_service.sign_in(make_identity())

    assert user.external_id == "google-sub-1"
    assert user.display_name == "Alice"
    assert list(storage.users) == [user.id]


@pytest.mark.asyncio
async def test_repeat_sign_in_returns_existing_user(identity_service, storage):
    first = await identity_service.sign_in(make_identity())
    second = await identity_service.sign_in(make_identity(display_name="Renamed"))

    assert second.id == first.id
    assert second.display_name == "Alice"
    assert len(storage.users) == 1


@pytest.mark.asyncio
async def test_get_user(identity_service):
    user = await identity_service.sign_in(make_identity())

    assert (await identity_service.get_user(user.id)).email == "alice@example.com"

    with pytest.raises(UserNotFoundError) as exc_info:
        await identity_service.get_user("missing-user")
    assert exc_info.value.user_id == "missing-user"


@pytest.mark.asyncio
async def test_issued_token_identifies_user(identity_service):
    user = await identity_service.sign_in(make_identity())

    session = verify_session_token(identity_service.issue_session_token(user))

    assert session.user_id == user.id
    assert session.email == "alice@example.com"
    assert session.name == "Alice"
