from datetime import datetime, timedelta

import pytest
import pytz

from pethub.services.notification_service import (
    DEFAULT_TASK_ICON,
    DerivationContractError,
    derive_notifications,
    get_task_icon,
    next_occurrence,
)

UTC = pytz.utc
USER_ID = 7


def at(text):
    return datetime.fromisoformat(text.replace("Z", "+00:00"))


def task(task_id, time, frequency="daily", pet_id=1, type="Feeding", description="Dry food"):
    return {
        "id": task_id,
        "pet_id": pet_id,
        "type": type,
        "description": description,
        "time": time,
        "frequency": frequency,
    }


def derive(now, tasks=(), posts=(), pet_names=None, dismissed=None):
    return derive_notifications(
        at(now) if isinstance(now, str) else now,
        list(tasks),
        {1: "Rex"} if pet_names is None else pet_names,
        list(posts),
        USER_ID,
        dismissed or set(),
    )


def ids(notifications):
    return [n.id for n in notifications]


class TestDailyWindows:
    def test_due_window(self):
        result = derive("2024-01-01T10:00:00Z", [task(1, "2024-01-01T10:05:00Z")])

        assert ids(result) == ["due-1"]
        assert result[0].type == "task_reminder"
        assert result[0].title == "Task Due Now"
        assert result[0].message == "Feeding (Dry food) for Rex is due now"

    def test_time_equal_to_now_is_due(self):
        assert ids(derive("2024-01-01T10:00:00Z", [task(1, "2024-01-01T10:00:00Z")])) == ["due-1"]

    def test_reminder_window(self):
        result = derive("2024-01-01T10:00:00Z", [task(1, "2024-01-01T10:20:00Z")])

        assert ids(result) == ["reminder-1"]
        assert result[0].title == "Task Reminder"
        assert "20 minutes" in result[0].message

    def test_outside_both_windows(self):
        assert derive("2024-01-01T10:00:00Z", [task(1, "2024-01-01T10:45:00Z")]) == []

    def test_uses_time_of_day_from_an_older_anchor(self):
        # Created weeks ago; only 10:05 matters
        assert ids(derive("2024-01-01T10:00:00Z", [task(1, "2023-11-20T10:05:00Z")])) == ["due-1"]

    def test_passed_time_of_day_waits_for_tomorrow(self):
        assert derive("2024-01-01T10:00:00Z", [task(1, "2024-01-01T09:55:00Z")]) == []

    def test_window_crossing_midnight(self):
        result = derive("2024-01-01T23:55:00Z", [task(1, "2024-01-01T00:05:00Z")])

        assert ids(result) == ["due-1"]
        assert result[0].timestamp == at("2024-01-02T00:05:00Z")


class TestScheduled:
    def test_overdue_same_day(self):
        result = derive("2024-03-05T14:00:00Z", [task(3, "2024-03-05T09:00:00Z", "scheduled")])

        assert ids(result) == ["overdue-3"]
        assert result[0].type == "task_reminder"
        assert result[0].title == "Overdue Task"
        assert result[0].message == "Feeding: Dry food for Rex is overdue"

    def test_later_today(self):
        result = derive("2024-03-05T14:00:00Z", [task(3, "2024-03-05T18:00:00Z", "scheduled")])

        assert ids(result) == ["scheduled-3"]
        assert result[0].type == "scheduled_task"
        assert result[0].title == "Scheduled Task Today"

    def test_other_days_are_silent(self):
        tasks = [
            task(3, "2024-03-04T18:00:00Z", "scheduled"),
            task(4, "2024-03-06T09:00:00Z", "scheduled"),
        ]
        assert derive("2024-03-05T14:00:00Z", tasks) == []

    def test_calendar_date_follows_now_timezone(self):
        tokyo = pytz.timezone("Asia/Tokyo")
        now = tokyo.localize(datetime(2024, 3, 6, 8, 0))  # 2024-03-05T23:00Z
        # 2024-03-05T20:00Z is 05:00 on March 6th in Tokyo
        result = derive(now, [task(3, "2024-03-05T20:00:00Z", "scheduled")])

        assert ids(result) == ["overdue-3"]


class TestWeekly:
    # 2024-03-05 is a Tuesday
    def test_matching_weekday_upcoming(self):
        result = derive("2024-03-05T08:00:00Z", [task(5, "2024-02-20T10:00:00Z", "weekly")])

        assert ids(result) == ["weekly-5"]
        assert result[0].title == "Weekly Task Today"
        assert result[0].timestamp == at("2024-03-05T10:00:00Z")

    def test_matching_weekday_overdue(self):
        result = derive("2024-03-05T12:00:00Z", [task(5, "2024-02-20T10:00:00Z", "weekly")])

        assert ids(result) == ["overdue-weekly-5"]
        assert result[0].type == "task_reminder"
        assert result[0].title == "Overdue Weekly Task"

    def test_other_weekday_is_silent(self):
        assert derive("2024-03-05T08:00:00Z", [task(5, "2024-02-22T10:00:00Z", "weekly")]) == []


class TestNextOccurrence:
    def test_unknown_frequency(self):
        now = at("2024-03-05T08:00:00Z")
        assert next_occurrence("monthly", now, now) is None

    def test_scheduled_is_the_anchor(self):
        now = at("2024-03-05T08:00:00Z")
        anchor = at("2024-04-01T08:00:00Z")
        assert next_occurrence("scheduled", anchor, now) == anchor


class TestSocial:
    def post(self, post_id, likes=3, user_id=USER_ID, caption="Rex at the beach", created_at="2024-01-01T08:00:00Z", **extra):
        return {"id": post_id, "user_id": user_id, "likes": likes, "caption": caption, "created_at": created_at, **extra}

    def test_like_timestamp_is_post_creation(self):
        post = self.post(9)
        for now in ("2024-01-01T10:00:00Z", "2024-06-01T10:00:00Z"):
            result = derive(now, posts=[post])
            assert ids(result) == ["likes-9"]
            assert result[0].timestamp == at("2024-01-01T08:00:00Z")
            assert result[0].title == "Your post got 3 likes"
            assert result[0].data.post_id == 9

    def test_single_like_title(self):
        assert derive("2024-01-02T00:00:00Z", posts=[self.post(9, likes=1)])[0].title == "Your post got 1 like"

    def test_ignores_other_users_and_unliked_posts(self):
        posts = [self.post(1, user_id=USER_ID + 1), self.post(2, likes=0)]
        assert derive("2024-01-02T00:00:00Z", posts=posts) == []

    def test_caption_is_truncated(self):
        result = derive("2024-01-02T00:00:00Z", posts=[self.post(9, caption="x" * 80)])
        assert len(result[0].message) <= 50
        assert result[0].message.endswith("...")

    def test_missing_caption_falls_back(self):
        assert derive("2024-01-02T00:00:00Z", posts=[self.post(9, caption=None)])[0].message == "Your pet photo"

    def test_comments_from_other_users(self):
        comments = [
            {"id": 21, "user_id": USER_ID + 1, "content": "Cute!", "created_at": "2024-01-01T09:00:00Z"},
            {"id": 22, "user_id": USER_ID, "content": "Thanks", "created_at": "2024-01-01T09:30:00Z"},
        ]
        result = derive("2024-01-02T00:00:00Z", posts=[self.post(9, likes=0, comments=comments)])

        assert ids(result) == ["comment-21"]
        assert result[0].type == "comment"
        assert result[0].data.comment_id == 21


class TestAssembly:
    def test_idempotent(self):
        tasks = [task(1, "2024-01-01T10:05:00Z"), task(2, "2024-01-01T08:00:00Z", "scheduled")]
        posts = [{"id": 4, "user_id": USER_ID, "likes": 2, "caption": "hi", "created_at": "2023-12-31T08:00:00Z"}]

        first = derive("2024-01-01T10:00:00Z", tasks, posts)
        second = derive("2024-01-01T10:00:00Z", tasks, posts)

        assert [n.model_dump() for n in first] == [n.model_dump() for n in second]
        assert ids(first) == ["due-1", "overdue-2", "likes-4"]

    def test_dismissed_ids_never_come_back(self):
        tasks = [task(1, "2024-01-01T10:05:00Z"), task(2, "2024-01-01T10:10:00Z")]
        for _ in range(3):
            assert ids(derive("2024-01-01T10:00:00Z", tasks, dismissed={"due-1"})) == ["due-2"]

    def test_duplicate_ids_keep_first(self):
        tasks = [task(1, "2024-01-01T10:05:00Z", description="first"), task(1, "2024-01-01T10:05:00Z", description="second")]
        result = derive("2024-01-01T10:00:00Z", tasks)

        assert ids(result) == ["due-1"]
        assert "first" in result[0].message

    def test_cap_and_sort(self):
        tasks = [task(i, f"2024-03-05T{10 + i // 60:02d}:{i % 60:02d}:00Z", "scheduled") for i in range(60)]
        result = derive("2024-03-05T09:00:00Z", tasks)

        assert len(result) == 50
        timestamps = [n.timestamp for n in result]
        assert timestamps == sorted(timestamps, reverse=True)
        assert set(ids(result)) == {f"scheduled-{i}" for i in range(10, 60)}

    def test_equal_timestamps_keep_input_order(self):
        created = "2024-01-01T08:00:00Z"
        posts = [
            {"id": 2, "user_id": USER_ID, "likes": 1, "caption": "b", "created_at": created},
            {"id": 1, "user_id": USER_ID, "likes": 1, "caption": "a", "created_at": created},
        ]
        assert ids(derive("2024-01-02T00:00:00Z", posts=posts)) == ["likes-2", "likes-1"]

    def test_unknown_pet_and_type(self):
        result = derive(
            "2024-01-01T10:00:00Z",
            [task(1, "2024-01-01T10:05:00Z", pet_id=99, type="Vet visit")],
        )

        assert "Unknown Pet" in result[0].message
        assert result[0].icon == DEFAULT_TASK_ICON

    def test_icon_lookup_ignores_case(self):
        assert get_task_icon("WALKING") == get_task_icon("walking") != DEFAULT_TASK_ICON

    def test_recent_like_sorts_above_earlier_overdue_task(self):
        tasks = [task(3, "2024-03-05T09:00:00Z", "scheduled")]
        posts = [{"id": 9, "user_id": USER_ID, "likes": 1, "caption": "hi", "created_at": "2024-03-05T12:00:00Z"}]

        result = derive("2024-03-05T14:00:00Z", tasks, posts)

        assert ids(result) == ["likes-9", "overdue-3"]
        assert result[1].timestamp == at("2024-03-05T09:00:00Z")

    def test_naive_now_is_utc(self):
        result = derive(datetime(2024, 1, 1, 10, 0), [task(1, datetime(2024, 1, 1, 10, 5))])
        assert ids(result) == ["due-1"]
        assert result[0].timestamp == UTC.localize(datetime(2024, 1, 1, 10, 5))


class TestFailureSemantics:
    def test_malformed_records_are_skipped(self):
        tasks = [
            task(1, "not-a-date"),
            task(None, "2024-01-01T10:05:00Z"),
            {"frequency": "daily"},
            task(2, "2024-01-01T10:05:00Z"),
        ]
        posts = [{"id": 5, "user_id": USER_ID, "likes": "many", "created_at": "2024-01-01T00:00:00Z"}]

        assert ids(derive("2024-01-01T10:00:00Z", tasks, posts)) == ["due-2"]

    def test_out_of_range_time_is_skipped(self):
        tasks = [
            task(1, "0001-01-01T00:00:00+05:00"),
            task(3, "9999-12-31T23:59:00-05:00", "scheduled"),
            task(2, "2024-01-01T10:05:00Z"),
        ]
        assert ids(derive("2024-01-01T10:00:00Z", tasks)) == ["due-2"]

    def test_out_of_range_time_in_a_far_zone_is_skipped(self):
        tokyo = pytz.timezone("Asia/Tokyo")
        now = tokyo.localize(datetime(2024, 1, 1, 19, 0))
        tasks = [task(1, datetime(9999, 12, 31, 23, 0)), task(2, "2024-01-01T10:05:00Z")]

        assert ids(derive(now, tasks)) == ["due-2"]

    def test_malformed_comments_keep_like(self):
        posts = [{"id": 1, "user_id": USER_ID, "likes": 2, "caption": "hi",
                  "created_at": "2024-01-01T00:00:00Z", "comments": 5}]
        assert ids(derive("2024-01-02T00:00:00Z", posts=posts)) == ["likes-1"]

    def test_now_must_be_a_datetime(self):
        with pytest.raises(DerivationContractError):
            derive_notifications("2024-01-01T10:00:00Z", [], {}, [], USER_ID, set())

    @pytest.mark.parametrize("tasks, posts", [(None, []), ([], "posts")])
    def test_inputs_must_be_lists(self, tasks, posts):
        with pytest.raises(DerivationContractError):
            derive_notifications(at("2024-01-01T10:00:00Z"), tasks, {}, posts, USER_ID, set())

    def test_contract_error_is_a_value_error(self):
        assert issubclass(DerivationContractError, ValueError)

    def test_orm_like_objects_are_accepted(self):
        class Row:
            def __init__(self, **fields):
                self.__dict__.update(fields)

        row = Row(id=1, pet_id=1, type="Walking", description="Park", time=datetime(2024, 1, 1, 10, 20), frequency="daily")
        result = derive("2024-01-01T10:00:00Z", [row])

        assert ids(result) == ["reminder-1"]
        assert result[0].data.task_id == 1
        assert result[0].data.pet_id == 1
        assert result[0].timestamp - at("2024-01-01T10:00:00Z") == timedelta(minutes=20)
