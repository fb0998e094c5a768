import pytest
from sqlalchemy.exc import OperationalError

from app.db.models import Cosmos, CosmosMember, User
from app.schemas.principal import Principal
from app.services.cosmos import verify_access_to_cosmos
from app.services.users import authenticate_or_create_user


async def _bootstrap(session_factory, principal) -> tuple[str, str]:
    async with session_factory() as s:
        result = await authenticate_or_create_user(s, principal)
    return result.user.id, result.user.cosmos[0].id


@pytest.mark.asyncio
async def test_owner_gets_cosmos(session_factory, principal):
    _, cosmos_id = await _bootstrap(session_factory, principal)

    async with session_factory() as s:
        result = await verify_access_to_cosmos(s, principal, cosmos_id)

    assert result.status == 200
    assert result.data.cosmos.id == cosmos_id
    assert result.data.cosmos.name == "Dopa"


@pytest.mark.asyncio
async def test_stranger_gets_ok_with_no_cosmos(session_factory, principal, other_principal):
    _, cosmos_id = await _bootstrap(session_factory, principal)
    await _bootstrap(session_factory, other_principal)

    async with session_factory() as s:
        result = await verify_access_to_cosmos(s, other_principal, cosmos_id)

    assert result.status == 200
    assert result.data.cosmos is None


@pytest.mark.asyncio
async def test_unknown_cosmos_is_ok_with_no_cosmos(session_factory, principal):
    await _bootstrap(session_factory, principal)

    async with session_factory() as s:
        result = await verify_access_to_cosmos(s, principal, "cos_missing")

    assert result.status == 200
    assert result.data.cosmos is None


@pytest.mark.asyncio
async def test_no_session_is_forbidden(session_factory, principal):
    _, cosmos_id = await _bootstrap(session_factory, principal)

    async with session_factory() as s:
        result = await verify_access_to_cosmos(s, None, cosmos_id)

    assert result.status == 403
    assert result.data is None


@pytest.mark.asyncio
async def test_any_member_of_a_shared_cosmos_has_access(session_factory, principal, other_principal):
    _, cosmos_id = await _bootstrap(session_factory, principal)
    bob_id, _ = await _bootstrap(session_factory, other_principal)

    async with session_factory() as s:
        carol = User(external_id="user_2carol", email="carol@example.com")
        s.add(carol)
        await s.flush()
        s.add_all([
            CosmosMember(cosmos_id=cosmos_id, user_id=bob_id),
            CosmosMember(cosmos_id=cosmos_id, user_id=carol.id),
        ])
        await s.commit()

    for caller in (other_principal, Principal(external_id="user_2carol")):
        async with session_factory() as s:
            result = await verify_access_to_cosmos(s, caller, cosmos_id)
        assert result.status == 200
        assert result.data.cosmos.id == cosmos_id


@pytest.mark.asyncio
async def test_cosmos_without_members_is_not_open_to_everyone(session_factory, principal, other_principal):
    user_id, _ = await _bootstrap(session_factory, principal)

    async with session_factory() as s:
        lonely = Cosmos(name="Lonely", user_id=user_id)
        s.add(lonely)
        await s.commit()

    async with session_factory() as s:
        result = await verify_access_to_cosmos(s, other_principal, lonely.id)

    assert result.status == 200
    assert result.data.cosmos is None


class _BrokenSession:
    async def execute(self, *args, **kwargs):
        raise OperationalError("select ...", {}, Exception("connection reset"))


@pytest.mark.asyncio
async def test_query_failure_is_forbidden(principal):
    result = await verify_access_to_cosmos(_BrokenSession(), principal, "cos_any")

    assert result.status == 403
    assert result.data.cosmos is None
