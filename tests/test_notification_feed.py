import asyncio
from datetime import datetime, timedelta

import httpx
import pytz

from pethub.services.api_client import PetHubClient, SessionExpiredError
from pethub.services.notification_feed import (
    FOCUS_DEBOUNCE,
    FeedSnapshot,
    NotificationFeed,
    NotificationPoller,
    fetch_snapshot,
)

NOW = pytz.utc.localize(datetime(2024, 1, 1, 10, 0))


class FakeClock:
    def __init__(self, now=NOW):
        self.now = now

    def __call__(self):
        return self.now


def snapshot(*task_times, user_id=1):
    tasks = [
        {"id": i, "pet_id": 1, "type": "Feeding", "description": "Dry food", "time": t, "frequency": "daily"}
        for i, t in enumerate(task_times, start=1)
    ]
    return FeedSnapshot(current_user_id=user_id, tasks=tasks, pet_names={1: "Rex"}, posts=[])


class TestNotificationFeed:
    def test_completed_poll_derives_list(self):
        feed = NotificationFeed(clock=FakeClock())
        seq = feed.begin_poll()

        assert feed.complete_poll(seq, snapshot("2024-01-01T10:05:00Z"))
        assert [n.id for n in feed.notifications] == ["due-1"]

    def test_stale_result_is_discarded(self):
        feed = NotificationFeed(clock=FakeClock())
        first = feed.begin_poll()
        second = feed.begin_poll()

        assert feed.complete_poll(second, snapshot("2024-01-01T10:05:00Z"))
        assert not feed.complete_poll(first, snapshot("2024-01-01T10:20:00Z"))
        assert [n.id for n in feed.notifications] == ["due-1"]
        assert feed.latest_sequence == second

    def test_failed_poll_keeps_previous_list(self):
        feed = NotificationFeed(clock=FakeClock())
        feed.complete_poll(feed.begin_poll(), snapshot("2024-01-01T10:05:00Z"))

        feed.fail_poll(feed.begin_poll(), httpx.ConnectError("offline"))

        assert [n.id for n in feed.notifications] == ["due-1"]
        assert not feed.session_expired

    def test_session_expiry_is_flagged_and_cleared_by_next_success(self):
        feed = NotificationFeed(clock=FakeClock())
        feed.fail_poll(feed.begin_poll(), SessionExpiredError("401"))
        assert feed.session_expired

        feed.complete_poll(feed.begin_poll(), snapshot())
        assert not feed.session_expired

    def test_dismiss_and_clear_all(self):
        feed = NotificationFeed(clock=FakeClock())
        feed.complete_poll(feed.begin_poll(), snapshot("2024-01-01T10:05:00Z", "2024-01-01T10:20:00Z"))
        assert [n.id for n in feed.notifications] == ["reminder-2", "due-1"]

        feed.dismiss("due-1")
        assert [n.id for n in feed.notifications] == ["reminder-2"]

        feed.clear_all()
        assert feed.notifications == []
        assert feed.dismissed == {"due-1", "reminder-2"}

        # Dismissed ids stay hidden on later polls
        feed.complete_poll(feed.begin_poll(), snapshot("2024-01-01T10:05:00Z", "2024-01-01T10:20:00Z"))
        assert feed.notifications == []

    def test_focus_debounce(self):
        clock = FakeClock()
        feed = NotificationFeed(clock=clock)
        assert feed.should_poll_on_focus()

        feed.begin_poll()
        assert not feed.should_poll_on_focus()

        clock.now = NOW + FOCUS_DEBOUNCE
        assert feed.should_poll_on_focus()

    def test_dismiss_before_first_poll(self):
        feed = NotificationFeed(clock=FakeClock())
        feed.dismiss("due-1")
        assert feed.notifications == []


def api_handler(status=200):
    data = {
        "/user/profile": {"id": 1, "full_name": "Owner", "email": "owner@pethub.io"},
        "/pet": [{"id": 1, "name": "Rex"}],
        "/task": [
            {"id": 4, "pet_id": 1, "type": "Feeding", "description": "Dry food",
             "time": (datetime.now(pytz.utc) + timedelta(minutes=5)).isoformat(), "frequency": "daily"},
        ],
        "/post": [],
    }

    def handler(request):
        if status != 200:
            return httpx.Response(status, json={"detail": "Invalid token"})
        return httpx.Response(200, json=data[request.url.path])

    return handler


def make_client(handler):
    return PetHubClient("token", base_url="http://pethub.local", transport=httpx.MockTransport(handler))


class TestPoller:
    def test_fetch_snapshot(self):
        async def go():
            async with make_client(api_handler()) as client:
                return await fetch_snapshot(client)

        result = asyncio.run(go())

        assert result.current_user_id == 1
        assert result.pet_names == {1: "Rex"}
        assert result.tasks[0]["id"] == 4

    def test_poll_once_updates_feed(self):
        feed = NotificationFeed()

        async def go():
            async with make_client(api_handler()) as client:
                return await NotificationPoller(client, feed).poll_once()

        assert asyncio.run(go())
        assert [n.id for n in feed.notifications] == ["due-4"]

    def test_unauthorized_marks_session_expired_and_stops(self):
        feed = NotificationFeed()

        async def go():
            async with make_client(api_handler(status=401)) as client:
                await NotificationPoller(client, feed, interval=timedelta(seconds=1)).run()

        asyncio.run(asyncio.wait_for(go(), timeout=5))
        assert feed.session_expired
        assert feed.notifications == []

    def test_server_error_keeps_list(self):
        feed = NotificationFeed()

        async def go():
            async with make_client(api_handler()) as client:
                await NotificationPoller(client, feed).poll_once()
            async with make_client(api_handler(status=500)) as client:
                return await NotificationPoller(client, feed).poll_once()

        assert not asyncio.run(go())
        assert [n.id for n in feed.notifications] == ["due-4"]
        assert not feed.session_expired

    def test_on_focus_is_debounced(self):
        feed = NotificationFeed()

        async def go():
            async with make_client(api_handler()) as client:
                poller = NotificationPoller(client, feed)
                return await poller.on_focus(), await poller.on_focus()

        assert asyncio.run(go()) == (True, False)

    def test_malformed_body_keeps_list(self):
        feed = NotificationFeed()
        good = api_handler()

        def handler(request):
            if request.url.path == "/task":
                return httpx.Response(200, json={"tasks": []})
            return good(request)

        async def go():
            async with make_client(good) as client:
                await NotificationPoller(client, feed).poll_once()
            async with make_client(handler) as client:
                return await NotificationPoller(client, feed).poll_once()

        assert not asyncio.run(go())
        assert [n.id for n in feed.notifications] == ["due-4"]

    def test_unexpected_error_keeps_list_and_poller_alive(self):
        feed = NotificationFeed()
        calls = []

        def broken(request):
            calls.append(request.url.path)
            raise RuntimeError("transport blew up")

        async def go():
            async with make_client(api_handler()) as client:
                await NotificationPoller(client, feed).poll_once()
            async with make_client(broken) as client:
                poller = NotificationPoller(client, feed)
                return await poller.poll_once(), await poller.poll_once()

        assert asyncio.run(go()) == (False, False)
        assert [n.id for n in feed.notifications] == ["due-4"]
        assert not feed.session_expired
        assert calls

    def test_fetch_snapshot_reads_only_the_four_lists(self):
        seen = []
        good = api_handler()

        def handler(request):
            seen.append((request.method, request.url.path))
            return good(request)

        async def go():
            async with make_client(handler) as client:
                await fetch_snapshot(client)

        asyncio.run(go())

        assert sorted(seen) == [("GET", "/pet"), ("GET", "/post"), ("GET", "/task"), ("GET", "/user/profile")]
        assert not hasattr(PetHubClient, "get_notifications")
