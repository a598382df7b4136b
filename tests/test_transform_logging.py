"""
Testes do logging estruturado de transformações.
"""

import json
import logging

import pandas as pd
import pytest

from wisdom import RangeRescaler, ZScoreStandardizer
from wisdom.infrastructure.logging import (
    TransformTimer,
    configure_logging,
    get_transform_logger,
    get_transform_metrics,
)


def _run_success_and_failure():
    transformer = RangeRescaler.Charter().found()
    transformer.transform("x", "y", pd.DataFrame({"x": [1.0, 2.0]}))
    transformer.transform("x", "y", pd.DataFrame({"x": [3.0, 3.0]}))


def test_each_transform_is_recorded():
    _run_success_and_failure()

    logs = get_transform_logger().get_recent_logs()

    assert [l.success for l in logs] == [True, False]
    assert logs[0].transformer == "minmax"
    assert logs[0].rows == 2
    assert logs[1].rows == 0
    assert logs[1].reason == "degenerate_range"
    assert logs[0].transform_id != logs[1].transform_id


def test_metrics_aggregate_by_reason_and_transformer():
    _run_success_and_failure()

    metrics = get_transform_metrics()

    assert metrics["total_transforms"] == 2
    assert metrics["successful_transforms"] == 1
    assert metrics["failed_transforms"] == 1
    assert metrics["success_rate"] == 0.5
    assert metrics["failures_by_reason"] == {"degenerate_range": 1}
    assert metrics["by_transformer"] == {"minmax": {"count": 2, "errors": 1}}


def test_failed_transform_logs_warning(caplog):
    with caplog.at_level(logging.WARNING, logger="wisdom"):
        _run_success_and_failure()

    warnings = [r for r in caplog.records if r.levelno == logging.WARNING]
    assert len(warnings) == 1
    assert "degenerate_range" in warnings[0].getMessage()


def test_disabled_logger_records_nothing():
    transform_logger = get_transform_logger()
    transform_logger.configure(enabled=False)

    _run_success_and_failure()

    assert transform_logger.get_recent_logs() == []
    assert transform_logger.get_metrics().total_transforms == 0


def test_log_file_from_environment(monkeypatch, tmp_path):
    log_file = tmp_path / "logs" / "transforms.jsonl"
    monkeypatch.setenv("WISDOM_TRANSFORM_LOG_FILE", str(log_file))

    _run_success_and_failure()

    lines = log_file.read_text(encoding="utf-8").splitlines()
    assert len(lines) == 2
    assert json.loads(lines[1])["reason"] == "degenerate_range"


def test_buffer_is_bounded():
    transform_logger = get_transform_logger()
    transform_logger.configure(max_logs=3)

    for _ in range(5):
        _run_success_and_failure()

    assert len(transform_logger.get_recent_logs()) == 3
    assert transform_logger.get_metrics().total_transforms == 10


def test_export_json_and_csv(tmp_path):
    _run_success_and_failure()
    transform_logger = get_transform_logger()

    assert transform_logger.export_logs(tmp_path / "logs.json")
    assert transform_logger.export_logs(tmp_path / "logs.csv", format="csv")

    exported = json.loads((tmp_path / "logs.json").read_text(encoding="utf-8"))
    assert len(exported) == 2
    csv_lines = (tmp_path / "logs.csv").read_text(encoding="utf-8").splitlines()
    assert len(csv_lines) == 3


def test_clear_and_reset():
    _run_success_and_failure()
    transform_logger = get_transform_logger()

    transform_logger.clear_logs()
    transform_logger.reset_metrics()

    assert transform_logger.get_recent_logs() == []
    assert get_transform_metrics()["total_transforms"] == 0


def test_timer_measures_latency():
    with TransformTimer() as timer:
        sum(range(1000))

    assert timer.latency_ms >= 0.0
    assert timer.end_time >= timer.start_time


def test_configure_logging_adds_single_handler():
    package_logger = logging.getLogger("wisdom")
    original_handlers = list(package_logger.handlers)
    original_level = package_logger.level
    try:
        configure_logging("DEBUG")
        configure_logging("DEBUG")

        added = [h for h in package_logger.handlers if h not in original_handlers]
        assert len(added) == 1
        assert package_logger.level == logging.DEBUG
    finally:
        package_logger.handlers = original_handlers
        package_logger.setLevel(original_level)


def test_malformed_logging_settings_fail_when_building_transformer(monkeypatch):
    monkeypatch.setenv("WISDOM_MAX_TRANSFORM_LOGS", "abc")
    table = pd.DataFrame({"x": [1.0, 2.0]})

    with pytest.raises(ValueError, match="WISDOM_MAX_TRANSFORM_LOGS"):
        RangeRescaler.Charter().found().transform("x", "y", table)

    assert list(table.columns) == ["x"]


def test_logging_failure_does_not_break_transform(monkeypatch, caplog):
    transformer = RangeRescaler.Charter().found()

    def broken_log_transform(**kwargs):
        raise OSError("disk full")

    monkeypatch.setattr(transformer._transform_logger, "log_transform", broken_log_transform)
    table = pd.DataFrame({"x": [1.0, 2.0]})

    with caplog.at_level(logging.ERROR, logger="wisdom"):
        result = transformer.transform("x", "y", table)

    assert result.is_valid
    assert list(result) == [0.0, 1.0]
    assert "disk full" in caplog.text


def test_logs_by_transformer():
    _run_success_and_failure()
    ZScoreStandardizer.Charter().found().transform(
        "x", "z", pd.DataFrame({"x": [1.0, 2.0, 3.0]})
    )
    transform_logger = get_transform_logger()

    zscore_logs = transform_logger.get_logs_by_transformer("zscore")
    minmax_logs = transform_logger.get_logs_by_transformer("minmax", n=1)

    assert [l.transformer for l in zscore_logs] == ["zscore"]
    assert len(minmax_logs) == 1
    assert minmax_logs[0].success is False


def test_non_positive_n_returns_no_logs():
    _run_success_and_failure()
    transform_logger = get_transform_logger()

    assert transform_logger.get_recent_logs(0) == []
    assert transform_logger.get_logs_by_transformer("minmax", n=0) == []
