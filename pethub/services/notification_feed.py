"""
Notification Feed

Caller-side state for the derived notification list: the session's
dismissed ids, the last snapshot and list, the poll sequence used to drop
stale responses, and the async poller that keeps it fresh.
"""

import asyncio
from dataclasses import dataclass, field
from datetime import datetime, timedelta
from typing import Any, Callable, Dict, List, Optional

import httpx

from pethub.schemas.notification import Notification
from pethub.services.api_client import PetHubClient, SessionExpiredError
from pethub.services.notification_service import derive_notifications
from pethub.utils.datetime_utils import utcnow
from pethub.utils.logger import get_logger

logger = get_logger("pethub.notification-feed")

POLL_INTERVAL = timedelta(minutes=5)
FOCUS_DEBOUNCE = timedelta(seconds=30)


@dataclass(frozen=True)
class FeedSnapshot:
    """Complete data for one derivation pass."""

    current_user_id: Optional[int]
    tasks: List[Any] = field(default_factory=list)
    pet_names: Dict[int, str] = field(default_factory=dict)
    posts: List[Any] = field(default_factory=list)


class NotificationFeed:
    """
    Session-owned notification state.

    The dismissed set lives for the session only. Every poll, dismiss and
    clear re-runs the deriver with the current dismissed set; a failed poll
    keeps the previous list.
    """

    def __init__(self, clock: Callable[[], datetime] = utcnow):
        self._clock = clock
        self._sequence = 0
        self._snapshot: Optional[FeedSnapshot] = None
        self._last_poll_started: Optional[datetime] = None
        self.dismissed: set = set()
        self.notifications: List[Notification] = []
        self.session_expired = False

    @property
    def latest_sequence(self) -> int:
        return self._sequence

    def begin_poll(self) -> int:
        """Start a poll pass and return its sequence number."""
        self._sequence += 1
        self._last_poll_started = self._clock()
        return self._sequence

    def should_poll_on_focus(self, now: Optional[datetime] = None) -> bool:
        """Focus events poll at most once per FOCUS_DEBOUNCE."""
        if self._last_poll_started is None:
            return True
        now = now or self._clock()
        return now - self._last_poll_started >= FOCUS_DEBOUNCE

    def complete_poll(
        self,
        sequence: int,
        snapshot: FeedSnapshot,
        now: Optional[datetime] = None
    ) -> bool:
        """
        Store a finished pass.

        Returns:
            False when a newer pass was started meanwhile and this result
            was discarded, True otherwise
        """
        if sequence != self._sequence:
            logger.debug("Discarding stale poll result", sequence=sequence, latest=self._sequence)
            return False

        self._snapshot = snapshot
        self.session_expired = False
        self._derive(now)
        logger.info(
            "Notification feed refreshed",
            sequence=sequence,
            count=len(self.notifications),
        )
        return True

    def fail_poll(self, sequence: int, error: Exception) -> None:
        """Record a failed pass; the displayed list is left untouched."""
        if sequence != self._sequence:
            return

        if isinstance(error, SessionExpiredError):
            self.session_expired = True
            logger.warning("Session expired while polling notifications", sequence=sequence)
        else:
            logger.warning("Notification poll failed", sequence=sequence, error=str(error))

    def dismiss(self, notification_id: str) -> None:
        self.dismissed.add(notification_id)
        self._derive()

    def clear_all(self) -> None:
        self.dismissed.update(n.id for n in self.notifications)
        self._derive()

    def _derive(self, now: Optional[datetime] = None) -> None:
        if self._snapshot is None:
            self.notifications = []
            return

        snapshot = self._snapshot
        self.notifications = derive_notifications(
            now or self._clock(),
            snapshot.tasks,
            snapshot.pet_names,
            snapshot.posts,
            snapshot.current_user_id,
            frozenset(self.dismissed),
        )


async def fetch_snapshot(client: PetHubClient) -> FeedSnapshot:
    """
    Fetch everything one derivation pass needs.

    Raises:
        ValueError: if a response body does not have the expected shape
    """
    profile, pets, tasks, posts = await asyncio.gather(
        client.get_profile(),
        client.get_pets(),
        client.get_tasks(),
        client.get_posts(),
    )
    if not isinstance(profile, dict):
        raise ValueError(f"Malformed profile response: {type(profile).__name__}")
    for name, body in (("pet", pets), ("task", tasks), ("post", posts)):
        if not isinstance(body, list):
            raise ValueError(f"Malformed {name} list response: {type(body).__name__}")

    return FeedSnapshot(
        current_user_id=profile.get("id"),
        tasks=tasks,
        pet_names={
            pet["id"]: pet["name"]
            for pet in pets
            if isinstance(pet, dict) and "id" in pet and "name" in pet
        },
        posts=posts,
    )


class NotificationPoller:
    """Keeps a NotificationFeed fresh from the API on a fixed interval."""

    def __init__(
        self,
        client: PetHubClient,
        feed: NotificationFeed,
        interval: timedelta = POLL_INTERVAL,
    ):
        self.client = client
        self.feed = feed
        self.interval = interval

    async def poll_once(self) -> bool:
        """Run one fetch-then-derive pass. Returns True if its result was kept."""
        sequence = self.feed.begin_poll()
        try:
            snapshot = await fetch_snapshot(self.client)
        except (httpx.HTTPError, SessionExpiredError, ValueError) as e:
            self.feed.fail_poll(sequence, e)
            return False
        except Exception as e:
            # Keep the loop and the last list alive on anything unexpected
            logger.exception("Unexpected error while polling notifications", sequence=sequence)
            self.feed.fail_poll(sequence, e)
            return False
        return self.feed.complete_poll(sequence, snapshot)

    async def on_focus(self) -> bool:
        """Poll for a screen focus event, subject to the debounce."""
        if not self.feed.should_poll_on_focus():
            return False
        return await self.poll_once()

    async def run(self) -> None:
        """
        Poll forever on the interval. Cancel the task to stop.

        Stops on its own once the session expires, since every later poll
        would be rejected too.
        """
        sleep_s = max(1.0, self.interval.total_seconds())
        while True:
            await self.poll_once()
            if self.feed.session_expired:
                logger.info("Stopping notification poller after session expiry")
                return
            await asyncio.sleep(sleep_s)
