import json
from datetime import datetime

from lanparty_attendance.description import describe_attendance
from lanparty_attendance.logging import get_logger, setup_logging, use_library_defaults
from lanparty_attendance.timeline import generate_buckets


def test_json_output_goes_to_stderr(capsys):
    setup_logging(json_output=True, log_level="INFO")

    get_logger("tests").info("bucket_check", count=3)

    captured = capsys.readouterr()
    assert captured.out == ""
    record = json.loads(captured.err.strip().splitlines()[-1])
    assert record["event"] == "bucket_check"
    assert record["count"] == 3
    assert record["level"] == "info"
    assert "timestamp" in record


def test_inverted_interval_is_logged(capsys):
    setup_logging(json_output=True, log_level="WARNING")

    generate_buckets(datetime(2025, 1, 19), datetime(2025, 1, 17))

    record = json.loads(capsys.readouterr().err.strip().splitlines()[-1])
    assert record["event"] == "inverted_interval"
    assert record["level"] == "warning"


def test_level_filters_debug(capsys):
    setup_logging(json_output=True, log_level="INFO")

    generate_buckets(datetime(2025, 1, 17, 18), datetime(2025, 1, 19, 12))

    assert "buckets_generated" not in capsys.readouterr().err


def test_library_defaults_keep_stdout_clean(capsys):
    use_library_defaults()

    begin, end = datetime(2025, 1, 17, 18), datetime(2025, 1, 19, 12)
    generate_buckets(begin, end)
    describe_attendance([1, 1, 0, 0, 0, 0, 0, 0], begin, end)

    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err == ""


def test_library_defaults_report_warnings_on_stderr(capsys):
    use_library_defaults()

    generate_buckets(datetime(2025, 1, 19), datetime(2025, 1, 17))

    captured = capsys.readouterr()
    assert captured.out == ""
    assert "inverted_interval" in captured.err
