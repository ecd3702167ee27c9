"""Notification inbox."""

import uuid

import pytest

from app.config.settings import settings
from app.db.enums import NotificationType, UserRole
from app.db.models.user import User
from app.services.notification import NotificationService, NotificationSink
from tests.conftest import API


def test_mark_read_is_idempotent(client, marketplace):
    headers = marketplace.client_headers
    notification = client.get(f"{API}/notifications", headers=headers).json()["data"][0]
    assert client.get(f"{API}/notifications/unread-count", headers=headers).json()["data"] == {
        "count": 1
    }

    for _ in range(2):
        response = client.patch(f"{API}/notifications/{notification['id']}/read", headers=headers)
        assert response.status_code == 200
        assert response.json()["data"]["is_read"] is True

    unread = client.get(f"{API}/notifications/unread-count", headers=headers).json()["data"]
    assert unread["count"] == 0


def test_cannot_mark_someone_elses_notification(client, marketplace):
    notification = client.get(
        f"{API}/notifications", headers=marketplace.client_headers
    ).json()["data"][0]

    response = client.patch(
        f"{API}/notifications/{notification['id']}/read",
        headers=marketplace.freelancer_headers,
    )

    assert response.status_code == 404
    assert response.json()["error"]["code"] == "NOTIFICATION_NOT_FOUND"


def test_mark_all_read(client, marketplace, register, submit_proposal):
    _, second_headers = register("second@example.com", role="freelancer")
    submit_proposal(second_headers, marketplace.project["id"])
    headers = marketplace.client_headers

    response = client.patch(f"{API}/notifications/read-all", headers=headers)
    assert response.status_code == 200
    assert response.json()["data"]["updated"] == 2

    again = client.patch(f"{API}/notifications/read-all", headers=headers)
    assert again.json()["data"]["updated"] == 0
    inbox = client.get(f"{API}/notifications", headers=headers).json()["data"]
    assert all(n["is_read"] for n in inbox)


def test_inbox_is_newest_first(client, marketplace):
    client.post(
        f"{API}/proposals/{marketplace.proposal['id']}/accept",
        headers=marketplace.client_headers,
    )
    client.patch(
        f"{API}/projects/{marketplace.project['id']}",
        json={"status": "completed"},
        headers=marketplace.freelancer_headers,
    )

    inbox = client.get(f"{API}/notifications", headers=marketplace.client_headers).json()["data"]

    assert [n["type"] for n in inbox] == ["project_completed", "proposal_received"]


@pytest.mark.asyncio
async def test_inbox_is_capped(db_session, monkeypatch):
    user = User(
        email="busy@example.com",
        first_name="Busy",
        last_name="Person",
        role=UserRole.CLIENT.value,
    )
    db_session.add(user)
    await db_session.commit()

    sink = NotificationSink()
    for i in range(settings.NOTIFICATION_INBOX_LIMIT + 5):
        notification_id = await sink.append(
            user_id=user.id,
            type=NotificationType.ADMIN_NOTICE,
            title=f"Notice {i}",
            message="Scheduled maintenance",
        )
        assert notification_id is not None

    service = NotificationService(db_session)
    inbox = await service.list_notifications(user)

    assert len(inbox) == settings.NOTIFICATION_INBOX_LIMIT
    assert inbox[0].title == f"Notice {settings.NOTIFICATION_INBOX_LIMIT + 4}"
    assert await service.unread_count(user) == settings.NOTIFICATION_INBOX_LIMIT + 5


@pytest.mark.asyncio
async def test_sink_swallows_write_failures(db_session):
    # No such user: the foreign key rejects the insert
    sink = NotificationSink()

    result = await sink.append(
        user_id=uuid.uuid4(),
        type=NotificationType.ADMIN_NOTICE,
        title="Orphan",
        message="Nobody to receive this",
    )

    assert result is None
