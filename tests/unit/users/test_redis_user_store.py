from datetime import datetime, timezone
import pytest
from pytest_mock import MockerFixture
from unittest.mock import Mock, call

from taskflow.common.exceptions import ResourceAlreadyExistsException
from taskflow.common.redis import RedisClient
from taskflow.users.schemas import User, UserRole
from taskflow.users.store.redis.store import RedisUserStore

TEST_TIMESTAMP = datetime(2024, 1, 1, 12, 0, 0, tzinfo=timezone.utc)


@pytest.fixture
def mock_redis_client(mocker: MockerFixture) -> Mock:
    return mocker.Mock(spec=RedisClient)


@pytest.fixture
def user_store(mock_redis_client: Mock) -> RedisUserStore:
    return RedisUserStore(redis_client=mock_redis_client, key_prefix="users")


@pytest.fixture
def sample_user() -> User:
    return User(
        name="Test User",
        email="test@example.com",
        role=UserRole.USER,
        created_at=TEST_TIMESTAMP,
    )


@pytest.fixture
def sample_user_hash() -> dict[str, str]:
    return {
        "id": "1",
        "name": "Test User",
        "email": "test@example.com",
        "role": "USER",
        "created_at": TEST_TIMESTAMP.isoformat(),
    }


def test_insert(
    user_store: RedisUserStore, mock_redis_client: Mock, sample_user: User
) -> None:
    mock_redis_client.incr.return_value = 1
    mock_redis_client.set.return_value = True

    result = user_store.insert(sample_user)

    assert result.id == 1
    mock_redis_client.set.assert_called_once_with(
        "users:email:test@example.com", 1, nx=True
    )
    mock_redis_client.hset.assert_called_once_with(
        "users:1",
        mapping={
            "id": 1,
            "name": "Test User",
            "email": "test@example.com",
            "role": "USER",
            "created_at": TEST_TIMESTAMP.isoformat(),
        },
    )
    mock_redis_client.zadd.assert_called_once_with("users:ids", {"1": 1})


def test_insert_duplicate_email(
    user_store: RedisUserStore, mock_redis_client: Mock, sample_user: User
) -> None:
    mock_redis_client.incr.return_value = 2
    mock_redis_client.set.return_value = None

    with pytest.raises(ResourceAlreadyExistsException):
        user_store.insert(sample_user)

    mock_redis_client.hset.assert_not_called()


def test_find_by_email(
    user_store: RedisUserStore,
    mock_redis_client: Mock,
    sample_user_hash: dict[str, str],
) -> None:
    mock_redis_client.get.return_value = "1"
    mock_redis_client.hgetall.return_value = sample_user_hash

    result = user_store.find_by_email("test@example.com")

    assert result is not None
    assert result.id == 1
    assert result.created_at == TEST_TIMESTAMP
    mock_redis_client.get.assert_called_once_with("users:email:test@example.com")
    mock_redis_client.hgetall.assert_called_once_with("users:1")


def test_find_by_email_missing(
    user_store: RedisUserStore, mock_redis_client: Mock
) -> None:
    mock_redis_client.get.return_value = None

    assert user_store.find_by_email("missing@example.com") is None
    mock_redis_client.hgetall.assert_not_called()


def test_save_with_new_email_moves_index(
    user_store: RedisUserStore,
    mock_redis_client: Mock,
    sample_user: User,
    sample_user_hash: dict[str, str],
) -> None:
    mock_redis_client.hgetall.return_value = sample_user_hash
    mock_redis_client.set.return_value = True

    result = user_store.save(
        sample_user.model_copy(update={"id": 1, "email": "new@example.com"})
    )

    assert result.email == "new@example.com"
    mock_redis_client.set.assert_called_once_with(
        "users:email:new@example.com", 1, nx=True
    )
    mock_redis_client.delete.assert_called_once_with("users:email:test@example.com")
    mock_redis_client.incr.assert_not_called()


def test_delete_by_id(
    user_store: RedisUserStore,
    mock_redis_client: Mock,
    sample_user_hash: dict[str, str],
) -> None:
    mock_redis_client.hgetall.return_value = sample_user_hash

    user_store.delete_by_id(1)

    assert mock_redis_client.delete.call_args == call(
        "users:1", "users:email:test@example.com"
    )
    mock_redis_client.zrem.assert_called_once_with("users:ids", "1")


def test_delete_missing_is_noop(
    user_store: RedisUserStore, mock_redis_client: Mock
) -> None:
    mock_redis_client.hgetall.return_value = {}

    user_store.delete_by_id(999)

    mock_redis_client.delete.assert_not_called()
