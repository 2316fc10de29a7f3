from datetime import date, datetime

import pytest

from src.tuition_center.tuition_center.core.exceptions import ValidationError
from src.tuition_center.tuition_center.schedules.matcher import ScheduleMatcher, is_scheduled_on

SUNDAY = date(2024, 3, 3)
MONDAY = date(2024, 3, 4)
TUESDAY = date(2024, 3, 5)
WEDNESDAY = date(2024, 3, 6)
SATURDAY = date(2024, 3, 9)


def test_day_name_is_matched_case_insensitively():
    assert is_scheduled_on("THỨ 2, THỨ 4", MONDAY) is True
    assert is_scheduled_on("thứ 2, thứ 4", MONDAY) is True
    assert is_scheduled_on("THỨ 2, THỨ 4", MONDAY) == is_scheduled_on("thứ 2, thứ 4", MONDAY)


def test_numeric_day_tokens():
    schedule = "2, 4, 6 (18:00 - 20:00)"

    assert is_scheduled_on(schedule, MONDAY) is True
    assert is_scheduled_on(schedule, WEDNESDAY) is True
    assert is_scheduled_on(schedule, TUESDAY) is False


def test_saturday_uses_token_seven():
    assert is_scheduled_on("7, CN", SATURDAY) is True


def test_sunday_abbreviation_and_full_name():
    assert is_scheduled_on("Thứ 7, CN", SUNDAY) is True
    assert is_scheduled_on("Chủ nhật (8:00 - 10:00)", SUNDAY) is True


def test_sunday_ignores_numeric_tokens():
    assert is_scheduled_on("2, 4, 6", SUNDAY) is False


@pytest.mark.parametrize("schedule", ["", None, "   ", "không rõ lịch"])
def test_empty_or_unmatched_schedule_is_not_scheduled(schedule):
    assert is_scheduled_on(schedule, TUESDAY) is False


def test_malformed_inputs_never_raise():
    matcher = ScheduleMatcher()

    assert matcher.is_scheduled_on(123, MONDAY) is False
    assert matcher.is_scheduled_on("Thứ 2", "2024-03-04") is False


def test_time_of_day_is_ignored():
    assert is_scheduled_on("Thứ 2", datetime(2024, 3, 4, 23, 59)) is True


def test_extra_whitespace_still_matches_numeric_token():
    assert is_scheduled_on("  thứ   2 ,  thứ 4 ", MONDAY) is True


def test_custom_day_name_table():
    matcher = ScheduleMatcher(("Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat"), sunday_tokens=("su",))

    assert matcher.is_scheduled_on("MON, WED", MONDAY) is True
    assert matcher.is_scheduled_on("Tue/Thu", MONDAY) is False
    assert matcher.is_scheduled_on("sun", SUNDAY) is True
    assert matcher.day_name(WEDNESDAY) == "Wed"


def test_day_name_table_must_have_seven_entries():
    with pytest.raises(ValidationError):
        ScheduleMatcher(("Mon", "Tue"))


def test_day_name_and_today_shortcut():
    matcher = ScheduleMatcher()

    assert matcher.day_name(MONDAY) == "Thứ 2"
    assert matcher.day_name(SUNDAY) == "Chủ nhật"
    assert matcher.is_scheduled_today("2, 4, 6", today=MONDAY) is True
