"""
Notification Service

Derives the notification feed for a user from a snapshot of tasks, pet names
and posts. Nothing here touches the database or the clock: callers pass
``now`` and the data in, and get a fresh list back on every poll.
"""

import logging
import math
from collections.abc import Mapping
from datetime import datetime, timedelta
from typing import Any, Iterable, List, Optional

import pytz

from pethub.schemas.notification import Notification, NotificationData

logger = logging.getLogger(__name__)

MAX_NOTIFICATIONS = 50
DUE_WINDOW_MINUTES = 15
REMINDER_WINDOW_MINUTES = 30
CAPTION_PREVIEW_LENGTH = 50

UNKNOWN_PET = "Unknown Pet"

TASK_ICONS = {
    "feeding": "🍽️",
    "drinking": "💧",
    "walking": "🚶",
    "grooming": "🧼",
    "playing": "🎾",
    "custom": "📋",
}
DEFAULT_TASK_ICON = "📝"
SCHEDULED_ICON = "📅"
OVERDUE_ICON = "⚠️"
LIKE_ICON = "❤️"
COMMENT_ICON = "💬"


class DerivationContractError(ValueError):
    """Raised when the caller passes inputs that break the derivation contract."""


def _field(record: Any, name: str, default: Any = None) -> Any:
    """Read a field from a mapping (API JSON) or an object (ORM row)."""
    if isinstance(record, Mapping):
        return record.get(name, default)
    return getattr(record, name, default)


def _as_int(value: Any) -> Optional[int]:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str) and value.strip().lstrip("-").isdigit():
        return int(value)
    return None


def _to_utc(value: datetime) -> datetime:
    """Stored datetimes are naive UTC; aware ones are converted."""
    if value.tzinfo is None:
        return pytz.utc.localize(value)
    return value.astimezone(pytz.utc)


def parse_instant(value: Any) -> Optional[datetime]:
    """Parse a datetime or ISO string into an aware UTC datetime, or None."""
    try:
        if isinstance(value, datetime):
            return _to_utc(value)
        if isinstance(value, str) and value:
            return _to_utc(datetime.fromisoformat(value.replace("Z", "+00:00")))
    except (ValueError, OverflowError):
        # Unparseable, or outside the datetime range once shifted to UTC
        return None
    return None


def _localize(naive: datetime, tz) -> datetime:
    # pytz zones need localize() to pick the right offset
    if hasattr(tz, "localize"):
        return tz.localize(naive)
    return naive.replace(tzinfo=tz)


def _on_day_at(day: datetime, anchor: datetime) -> datetime:
    """``day``'s calendar date at ``anchor``'s time of day, in ``day``'s zone."""
    naive = datetime.combine(day.date(), anchor.timetz().replace(tzinfo=None))
    return _localize(naive, day.tzinfo)


def next_occurrence(frequency: Optional[str], anchor: datetime, now: datetime) -> Optional[datetime]:
    """
    Compute the occurrence a task's windows are measured against.

    Args:
        frequency: daily, weekly or scheduled
        anchor: the task's stored ``time``, already in ``now``'s zone
        now: the current instant (aware)

    Returns:
        daily: today at the anchor's time of day, or tomorrow if that passed
        weekly: today at the anchor's time of day when today is the anchor's
            weekday, otherwise None
        scheduled: the anchor itself
        anything else: None
    """
    if frequency == "daily":
        occurrence = _on_day_at(now, anchor)
        if occurrence < now:
            occurrence = _on_day_at(now + timedelta(days=1), anchor)
        return occurrence
    if frequency == "weekly":
        # Weekdays that have not arrived yet this week produce nothing
        if anchor.weekday() != now.weekday():
            return None
        return _on_day_at(now, anchor)
    if frequency == "scheduled":
        return anchor
    return None


def get_task_icon(task_type: str) -> str:
    """Icon for a task type, case-insensitive, with a generic fallback."""
    return TASK_ICONS.get((task_type or "").lower(), DEFAULT_TASK_ICON)


def _task_notification(task: Any, pet_names: Mapping, now: datetime) -> Optional[Notification]:
    task_id = _as_int(_field(task, "id"))
    anchor = parse_instant(_field(task, "time"))
    if task_id is None or anchor is None:
        logger.debug("Skipping task with missing id or unparseable time: %r", task)
        return None

    frequency = _field(task, "frequency")
    try:
        anchor = anchor.astimezone(now.tzinfo)
        occurrence = next_occurrence(frequency, anchor, now)
        timestamp = occurrence.astimezone(pytz.utc) if occurrence is not None else None
    except OverflowError:
        logger.debug("Skipping task %s with out-of-range time", task_id)
        return None
    if occurrence is None:
        return None

    pet_id = _as_int(_field(task, "pet_id"))
    pet_name = pet_names.get(pet_id) or UNKNOWN_PET
    task_type = str(_field(task, "type") or "")
    description = str(_field(task, "description") or "")
    data = NotificationData(task_id=task_id, pet_id=pet_id)

    if frequency == "daily":
        minutes = math.floor((occurrence - now).total_seconds() / 60)
        if 0 <= minutes <= DUE_WINDOW_MINUTES:
            return Notification(
                id=f"due-{task_id}",
                type="task_reminder",
                title="Task Due Now",
                message=f"{task_type} ({description}) for {pet_name} is due now",
                timestamp=timestamp,
                icon=get_task_icon(task_type),
                data=data,
            )
        if DUE_WINDOW_MINUTES < minutes <= REMINDER_WINDOW_MINUTES:
            return Notification(
                id=f"reminder-{task_id}",
                type="task_reminder",
                title="Task Reminder",
                message=f"{task_type} ({description}) for {pet_name} in {minutes} minutes",
                timestamp=timestamp,
                icon=get_task_icon(task_type),
                data=data,
            )
        return None

    if occurrence.date() != now.date():
        return None

    upcoming = occurrence >= now
    if frequency == "scheduled":
        prefix, title = ("scheduled", "Scheduled Task Today") if upcoming else ("overdue", "Overdue Task")
    else:
        prefix, title = ("weekly", "Weekly Task Today") if upcoming else ("overdue-weekly", "Overdue Weekly Task")

    if upcoming:
        return Notification(
            id=f"{prefix}-{task_id}",
            type="scheduled_task",
            title=title,
            message=f"{task_type}: {description} for {pet_name} is scheduled for today",
            timestamp=timestamp,
            icon=SCHEDULED_ICON,
            data=data,
        )
    return Notification(
        id=f"{prefix}-{task_id}",
        type="task_reminder",
        title=title,
        message=f"{task_type}: {description} for {pet_name} is overdue",
        timestamp=timestamp,
        icon=OVERDUE_ICON,
        data=data,
    )


def _caption_preview(caption: Any) -> str:
    if not isinstance(caption, str) or not caption.strip():
        return "Your pet photo"
    if len(caption) > CAPTION_PREVIEW_LENGTH:
        return caption[:CAPTION_PREVIEW_LENGTH - 3] + "..."
    return caption


def _social_notifications(post: Any, current_user_id: int) -> List[Notification]:
    post_id = _as_int(_field(post, "id"))
    if post_id is None or _as_int(_field(post, "user_id")) != current_user_id:
        return []

    notifications = []
    likes = _as_int(_field(post, "likes"))
    created_at = parse_instant(_field(post, "created_at"))
    if likes and likes > 0 and created_at is not None:
        notifications.append(Notification(
            id=f"likes-{post_id}",
            type="like",
            title=f"Your post got {likes} like{'s' if likes > 1 else ''}",
            message=_caption_preview(_field(post, "caption")),
            timestamp=created_at,
            icon=LIKE_ICON,
            data=NotificationData(post_id=post_id),
        ))

    comments = _field(post, "comments")
    if not isinstance(comments, (list, tuple)):
        if comments is not None:
            logger.debug("Ignoring malformed comments on post %s: %r", post_id, comments)
        comments = []

    for comment in comments:
        comment_id = _as_int(_field(comment, "id"))
        author_id = _as_int(_field(comment, "user_id"))
        commented_at = parse_instant(_field(comment, "created_at"))
        if comment_id is None or commented_at is None or author_id == current_user_id:
            continue
        notifications.append(Notification(
            id=f"comment-{comment_id}",
            type="comment",
            title="New comment on your post",
            message=_caption_preview(_field(comment, "content")),
            timestamp=commented_at,
            icon=COMMENT_ICON,
            data=NotificationData(post_id=post_id, comment_id=comment_id),
        ))
    return notifications


def derive_notifications(
    now: datetime,
    tasks: List[Any],
    pet_names: Mapping,
    posts: List[Any],
    current_user_id: Optional[int],
    dismissed: Optional[Iterable[str]] = None,
) -> List[Notification]:
    """
    Build the notification feed for one poll.

    Args:
        now: current instant; naive values are read as UTC
        tasks: task records (ORM rows or JSON dicts)
        pet_names: pet id -> display name
        posts: post records, optionally carrying their comments
        current_user_id: the user the feed is for
        dismissed: notification ids the user already acknowledged

    Returns:
        Up to 50 notifications, most recent timestamp first. Equal
        timestamps keep input order (tasks before posts).

    Raises:
        DerivationContractError: if ``now`` is not a datetime, ``tasks`` or
            ``posts`` is not a list, or ``pet_names`` is not a mapping
    """
    if not isinstance(now, datetime):
        raise DerivationContractError(f"now must be a datetime, got {type(now).__name__}")
    if not isinstance(tasks, (list, tuple)):
        raise DerivationContractError(f"tasks must be a list, got {type(tasks).__name__}")
    if not isinstance(posts, (list, tuple)):
        raise DerivationContractError(f"posts must be a list, got {type(posts).__name__}")
    if not isinstance(pet_names, Mapping):
        raise DerivationContractError(f"pet_names must be a mapping, got {type(pet_names).__name__}")

    if now.tzinfo is None:
        now = pytz.utc.localize(now)
    dismissed_ids = set(dismissed or ())

    notifications: List[Notification] = []
    for task in tasks:
        notification = _task_notification(task, pet_names, now)
        if notification is not None:
            notifications.append(notification)

    if current_user_id is not None:
        for post in posts:
            notifications.extend(_social_notifications(post, current_user_id))

    notifications.sort(key=lambda n: n.timestamp, reverse=True)

    seen = set()
    result = []
    for notification in notifications:
        if notification.id in dismissed_ids or notification.id in seen:
            continue
        seen.add(notification.id)
        result.append(notification)

    logger.debug(
        "Derived %d notifications from %d tasks and %d posts",
        len(result), len(tasks), len(posts),
    )
    return result[:MAX_NOTIFICATIONS]
