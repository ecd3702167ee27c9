"""Start/stop time tracking."""

import uuid
from datetime import datetime

import pytest

from app.core.exceptions import (
    ActiveTimerExistsError,
    ForbiddenError,
    TimeEntryNotFoundException,
)
from app.core.utils.time_utils import floor_minutes
from app.db.enums import ProjectStatus, UserRole
from app.db.models.project import Project
from app.db.models.user import User
from app.services.time_entry import TimeEntryService
from tests.conftest import API


def _start(client, headers, project_id, description="Working"):
    return client.post(
        f"{API}/time/start",
        json={"project_id": project_id, "description": description},
        headers=headers,
    )


def test_start_and_stop_timer(client, assigned):
    started = _start(client, assigned.freelancer_headers, assigned.project["id"])
    assert started.status_code == 201
    entry = started.json()["data"]
    assert entry["end_time"] is None
    assert entry["duration_minutes"] is None

    stopped = client.post(
        f"{API}/time/stop",
        json={"time_entry_id": entry["id"]},
        headers=assigned.freelancer_headers,
    )
    assert stopped.status_code == 200
    data = stopped.json()["data"]
    assert data["end_time"] is not None
    assert data["duration_minutes"] == 0

    listing = client.get(f"{API}/time", headers=assigned.freelancer_headers).json()["data"]
    assert [e["id"] for e in listing] == [entry["id"]]


def test_only_one_running_timer(client, assigned):
    first = _start(client, assigned.freelancer_headers, assigned.project["id"]).json()["data"]

    second = _start(client, assigned.freelancer_headers, assigned.project["id"])

    assert second.status_code == 409
    error = second.json()["error"]
    assert error["code"] == "ACTIVE_TIMER_EXISTS"
    assert error["details"] == first["id"]


def test_timer_can_restart_after_stop(client, assigned):
    first = _start(client, assigned.freelancer_headers, assigned.project["id"]).json()["data"]
    client.post(
        f"{API}/time/stop",
        json={"time_entry_id": first["id"]},
        headers=assigned.freelancer_headers,
    )

    assert _start(client, assigned.freelancer_headers, assigned.project["id"]).status_code == 201


def test_unassigned_freelancer_cannot_track(client, assigned, register):
    _, other_headers = register("other@example.com", role="freelancer")

    response = _start(client, other_headers, assigned.project["id"])

    assert response.status_code == 403


def test_clients_cannot_track(client, assigned):
    response = _start(client, assigned.client_headers, assigned.project["id"])

    assert response.status_code == 403


def test_unknown_project(client, register):
    _, headers = register("f@example.com", role="freelancer")

    response = _start(client, headers, str(uuid.uuid4()))

    assert response.status_code == 404


def test_completed_project_cannot_be_tracked(client, assigned):
    client.patch(
        f"{API}/projects/{assigned.project['id']}",
        json={"status": "completed"},
        headers=assigned.freelancer_headers,
    )

    response = _start(client, assigned.freelancer_headers, assigned.project["id"])

    assert response.status_code == 409
    assert response.json()["error"]["code"] == "INVALID_PROJECT_STATE"


def test_stop_unknown_or_already_stopped(client, assigned):
    unknown = client.post(
        f"{API}/time/stop",
        json={"time_entry_id": str(uuid.uuid4())},
        headers=assigned.freelancer_headers,
    )
    assert unknown.status_code == 404

    entry = _start(client, assigned.freelancer_headers, assigned.project["id"]).json()["data"]
    stop = {"time_entry_id": entry["id"]}
    client.post(f"{API}/time/stop", json=stop, headers=assigned.freelancer_headers)
    again = client.post(f"{API}/time/stop", json=stop, headers=assigned.freelancer_headers)
    assert again.status_code == 404
    assert again.json()["error"]["code"] == "TIME_ENTRY_NOT_FOUND"


@pytest.mark.parametrize(
    "start, end, minutes",
    [
        (datetime(2024, 5, 1, 10, 0, 0), datetime(2024, 5, 1, 10, 2, 30), 2),
        (datetime(2024, 5, 1, 10, 0, 0), datetime(2024, 5, 1, 10, 0, 59), 0),
        (datetime(2024, 5, 1, 23, 30, 0), datetime(2024, 5, 2, 1, 0, 0), 90),
    ],
)
def test_floor_minutes(start, end, minutes):
    assert floor_minutes(start, end) == minutes


async def _assigned_pair(session):
    freelancer = User(
        email="clock@example.com",
        first_name="Clock",
        last_name="Work",
        role=UserRole.FREELANCER.value,
    )
    owner = User(
        email="owner@example.com",
        first_name="Owner",
        last_name="Person",
        role=UserRole.CLIENT.value,
    )
    session.add_all([freelancer, owner])
    await session.flush()
    project = Project(
        client_id=owner.id,
        title="Timed work",
        description="Work by the minute",
        category="misc",
        budget=100,
        timeline="1 day",
        status=ProjectStatus.IN_PROGRESS.value,
        requirements=[],
        selected_freelancer_id=freelancer.id,
    )
    session.add(project)
    await session.commit()
    return freelancer, owner, project


@pytest.mark.asyncio
async def test_duration_is_whole_minutes_rounded_down(db_session):
    freelancer, _, project = await _assigned_pair(db_session)
    ticks = iter([datetime(2024, 5, 1, 10, 0, 0), datetime(2024, 5, 1, 10, 2, 30)])
    service = TimeEntryService(db_session, clock=lambda: next(ticks))

    entry = await service.start_timer(freelancer, project.id, "Pairing")
    stopped = await service.stop_timer(freelancer, entry.id)

    assert stopped.start_time == datetime(2024, 5, 1, 10, 0, 0)
    assert stopped.end_time == datetime(2024, 5, 1, 10, 2, 30)
    assert stopped.duration_minutes == 2


@pytest.mark.asyncio
async def test_service_enforces_single_running_timer(db_session):
    freelancer, owner, project = await _assigned_pair(db_session)
    service = TimeEntryService(db_session)

    running = await service.start_timer(freelancer, project.id)

    other = Project(
        client_id=owner.id,
        title="Other work",
        description="Also assigned",
        category="misc",
        budget=50,
        timeline="1 day",
        status=ProjectStatus.IN_PROGRESS.value,
        requirements=[],
        selected_freelancer_id=freelancer.id,
    )
    db_session.add(other)
    await db_session.commit()

    with pytest.raises(ActiveTimerExistsError) as exc_info:
        await service.start_timer(freelancer, other.id)
    assert exc_info.value.entry_id == str(running.id)

    with pytest.raises(ForbiddenError):
        await service.start_timer(owner, project.id)

    with pytest.raises(TimeEntryNotFoundException):
        await service.stop_timer(freelancer, uuid.uuid4())
