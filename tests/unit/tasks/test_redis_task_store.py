from datetime import datetime, timezone
import pytest
from pytest_mock import MockerFixture
from typing import Any
from unittest.mock import Mock

from taskflow.common.redis import RedisClient
from taskflow.tasks.schemas import Task, TaskStatus
from taskflow.tasks.store.redis.store import RedisTaskStore

TEST_TIMESTAMP = datetime(2024, 1, 1, 12, 0, 0, tzinfo=timezone.utc)


@pytest.fixture
def mock_redis_client(mocker: MockerFixture) -> Mock:
    return mocker.Mock(spec=RedisClient)


@pytest.fixture
def task_store(mock_redis_client: Mock) -> RedisTaskStore:
    return RedisTaskStore(redis_client=mock_redis_client, key_prefix="tasks")


@pytest.fixture
def sample_task() -> Task:
    return Task(
        title="Test Task",
        description="Test Description",
        status=TaskStatus.PENDING,
        created_at=TEST_TIMESTAMP,
    )


def task_hash(task_id: int, **overrides: Any) -> dict[str, str]:
    data = {
        "id": str(task_id),
        "title": "Test Task",
        "description": "Test Description",
        "status": "PENDING",
        "created_at": TEST_TIMESTAMP.isoformat(),
    }
    data.update(overrides)
    return data


def test_insert(
    task_store: RedisTaskStore, mock_redis_client: Mock, sample_task: Task
) -> None:
    mock_redis_client.incr.return_value = 1

    result = task_store.insert(sample_task)

    assert result.id == 1
    mock_redis_client.incr.assert_called_once_with("tasks:id_counter")
    mock_redis_client.hset.assert_called_once_with(
        "tasks:1",
        mapping={
            "id": 1,
            "title": "Test Task",
            "description": "Test Description",
            "status": "PENDING",
            "created_at": TEST_TIMESTAMP.isoformat(),
        },
    )
    mock_redis_client.hdel.assert_called_once_with("tasks:1", "assigned_to_id")
    mock_redis_client.zadd.assert_called_once_with("tasks:ids", {"1": 1})


def test_find_by_id(task_store: RedisTaskStore, mock_redis_client: Mock) -> None:
    mock_redis_client.hgetall.return_value = task_hash(1, assigned_to_id="4")

    result = task_store.find_by_id(1)

    assert result == Task(
        id=1,
        title="Test Task",
        description="Test Description",
        status=TaskStatus.PENDING,
        assigned_to_id=4,
        created_at=TEST_TIMESTAMP,
    )
    mock_redis_client.hgetall.assert_called_once_with("tasks:1")


def test_find_by_id_missing(
    task_store: RedisTaskStore, mock_redis_client: Mock
) -> None:
    mock_redis_client.hgetall.return_value = {}

    assert task_store.find_by_id(999) is None


def test_find_all_and_filters(
    task_store: RedisTaskStore, mock_redis_client: Mock
) -> None:
    hashes = {
        "tasks:1": task_hash(1, title="Write Report"),
        "tasks:2": task_hash(2, title="Review code", status="COMPLETED"),
    }
    mock_redis_client.zrange.return_value = ["1", "2"]
    mock_redis_client.hgetall.side_effect = lambda key: hashes.get(key, {})

    assert [task.id for task in task_store.find_all()] == [1, 2]
    assert [task.id for task in task_store.find_by_status(TaskStatus.COMPLETED)] == [2]
    assert [task.id for task in task_store.find_by_title_contains("report")] == [1]
    assert task_store.find_by_owner(3) == []
    mock_redis_client.zrange.assert_called_with("tasks:ids", 0, -1)


def test_save_existing_overwrites(
    task_store: RedisTaskStore, mock_redis_client: Mock, sample_task: Task
) -> None:
    mock_redis_client.exists.return_value = 1

    result = task_store.save(sample_task.model_copy(update={"id": 3}))

    assert result.id == 3
    mock_redis_client.incr.assert_not_called()
    assert mock_redis_client.hset.call_args.args[0] == "tasks:3"


def test_save_missing_inserts(
    task_store: RedisTaskStore, mock_redis_client: Mock, sample_task: Task
) -> None:
    mock_redis_client.exists.return_value = 0
    mock_redis_client.incr.return_value = 8

    result = task_store.save(sample_task.model_copy(update={"id": 3}))

    assert result.id == 8


def test_delete_by_id(task_store: RedisTaskStore, mock_redis_client: Mock) -> None:
    task_store.delete_by_id(1)

    mock_redis_client.delete.assert_called_once_with("tasks:1")
    mock_redis_client.zrem.assert_called_once_with("tasks:ids", "1")
