from datetime import datetime, timezone

import pytest

from robot_logs.modules.logs import (
    Invalid,
    LogEntryInput,
    LogFilters,
    Valid,
    compute_duration,
    validate_log_batch,
    validate_log_query,
)


def test_duration_of_five_seconds_is_5000_ms():
    start = datetime(2024, 1, 1, 0, 0, 0, tzinfo=timezone.utc)
    end = datetime(2024, 1, 1, 0, 0, 5, tzinfo=timezone.utc)
    assert compute_duration(start, end) == 5000


def test_duration_handles_offsets_and_naive_values():
    start = datetime(2024, 1, 1, 2, 0, 0)  # naive, read as UTC
    end = datetime.fromisoformat("2024-01-01T03:00:01+01:00")
    assert compute_duration(start, end) == 1000


def test_valid_batch_is_parsed(make_log):
    result = validate_log_batch([make_log(robot="r1", generation="gen3")])

    assert isinstance(result, Valid)
    [entry] = result.value
    assert isinstance(entry, LogEntryInput)
    assert entry.robot == "r1"
    assert entry.device_generation == "gen3"
    assert entry.start_time == datetime(2024, 1, 1, tzinfo=timezone.utc)
    assert entry.duration == 5000


def test_numeric_strings_are_accepted_for_coordinates(make_log):
    result = validate_log_batch([make_log(lat="48.1", lng="11.5")])

    assert isinstance(result, Valid)
    assert result.value[0].lat == pytest.approx(48.1)


def test_empty_batch():
    result = validate_log_batch([])
    assert result == Invalid(field="logs", message="No logs provided")


def test_first_violated_field_is_reported(make_log):
    first = make_log()
    del first["endTime"]
    second = make_log()
    del second["robot"]

    result = validate_log_batch([first, second])

    assert result == Invalid(field="endTime", message="No endTime provided", index=0)


def test_missing_generation_uses_wire_name(make_log):
    entry = make_log()
    del entry["deviceGeneration"]

    result = validate_log_batch([entry])

    assert isinstance(result, Invalid)
    assert result.as_detail() == {
        "field": "deviceGeneration",
        "message": "No deviceGeneration provided",
        "index": 0,
    }


def test_non_finite_coordinates_are_rejected(make_log):
    result = validate_log_batch([make_log(lat=float("nan"))])
    assert isinstance(result, Invalid)
    assert result.field == "lat"


def test_query_defaults():
    result = validate_log_query({})
    assert result == Valid(LogFilters(limit=100, offset=0))


def test_query_values_are_parsed():
    result = validate_log_query(
        {
            "minDuration": "1500.5",
            "deviceGeneration": "gen2",
            "from": "2024-01-01",
            "to": "2024-01-02T12:30:00Z",
            "limit": "25",
            "offset": "50",
        }
    )

    assert isinstance(result, Valid)
    filters = result.value
    assert filters.min_duration == 1500.5
    assert filters.device_generation == "gen2"
    assert filters.start_from == datetime(2024, 1, 1, tzinfo=timezone.utc)
    assert filters.end_to == datetime(2024, 1, 2, 12, 30, tzinfo=timezone.utc)
    assert (filters.limit, filters.offset) == (25, 50)


def test_unknown_query_parameters_are_ignored():
    assert isinstance(validate_log_query({"sort": "desc"}), Valid)


@pytest.mark.parametrize(
    "params, field",
    [
        ({"limit": "0"}, "limit"),
        ({"limit": "501"}, "limit"),
        ({"limit": "2.5"}, "limit"),
        ({"offset": "-1"}, "offset"),
        ({"minDuration": ""}, "minDuration"),
        ({"from": "soon"}, "from"),
        ({"to": "2024-01-01T25:00:00"}, "to"),
    ],
)
def test_invalid_query_names_parameter(params, field):
    result = validate_log_query(params)
    assert isinstance(result, Invalid)
    assert result.field == field
    assert result.index is None
    assert result.message.startswith(f"Invalid {field}")


@pytest.mark.parametrize("field", ["lat", "lng"])
def test_boolean_coordinates_are_rejected(make_log, field):
    result = validate_log_batch([make_log(**{field: True})])

    assert isinstance(result, Invalid)
    assert result.field == field
    assert result.index == 0


def test_empty_generation_filter_means_no_filter():
    result = validate_log_query({"deviceGeneration": ""})

    assert isinstance(result, Valid)
    assert result.value.device_generation is None
