"""Tests for log output: silent by default, structured when opted in."""

import json
import logging
import subprocess
import sys
from collections.abc import Iterator

import pytest

from nonicle.contracts import CanonicalInvariantError
from nonicle.core.config import NonicleSettings, configure, override_settings
from nonicle.core.logging import LOGGER_NAMESPACE, configure_logging, reset_logging


@pytest.fixture(autouse=True)
def _reset_logging() -> Iterator[None]:
    yield
    reset_logging()


def _json_lines(text: str) -> list[dict[str, object]]:
    return [json.loads(line) for line in text.strip().split("\n") if line]


class TestSilentByDefault:
    def test_import_writes_nothing(self) -> None:
        result = subprocess.run(
            [sys.executable, "-c", "import nonicle"],
            capture_output=True,
            text=True,
            check=True,
        )
        assert result.stdout == ""
        assert result.stderr == ""

    def test_configure_writes_nothing(self, capsys: pytest.CaptureFixture[str]) -> None:
        previous = configure(NonicleSettings(debug_assertions=True))
        configure(previous)
        with override_settings(log_violations=False):
            pass

        captured = capsys.readouterr()
        assert captured.out == ""
        assert captured.err == ""

    def test_package_logger_has_null_handler(self) -> None:
        handlers = logging.getLogger(LOGGER_NAMESPACE).handlers
        assert any(isinstance(handler, logging.NullHandler) for handler in handlers)


class TestConfigureLogging:
    def test_root_logger_untouched(self) -> None:
        root = logging.getLogger()
        before = list(root.handlers)
        level = root.level

        configure_logging(json_output=True)

        assert root.handlers == before
        assert root.level == level

    def test_json_output(self, capsys: pytest.CaptureFixture[str]) -> None:
        configure_logging(json_output=True)

        logging.getLogger("nonicle.test").info("test message", extra={"key": "value"})

        data = _json_lines(capsys.readouterr().out)[-1]
        assert data["event"] == "test message"
        assert data["key"] == "value"
        assert data["level"] == "info"
        assert data["logger"] == "nonicle.test"
        assert "_record" not in data
        assert "_from_structlog" not in data

    def test_console_output(self, capsys: pytest.CaptureFixture[str]) -> None:
        configure_logging(json_output=False)

        logging.getLogger("nonicle.test").info("test message")

        out = capsys.readouterr().out
        assert "test message" in out
        assert not out.strip().startswith("{")

    def test_other_namespaces_not_captured(self, capsys: pytest.CaptureFixture[str]) -> None:
        configure_logging(json_output=True)

        logging.getLogger("host.app").warning("host message")

        assert "host message" not in capsys.readouterr().out

    def test_level_filters(self, capsys: pytest.CaptureFixture[str]) -> None:
        configure_logging(json_output=True, level="WARNING")

        logging.getLogger("nonicle.test").info("hidden")

        assert "hidden" not in capsys.readouterr().out

    def test_reconfigure_replaces_handler(self, capsys: pytest.CaptureFixture[str]) -> None:
        configure_logging(json_output=True)
        configure_logging(json_output=True)

        logging.getLogger("nonicle.test").info("once")

        assert capsys.readouterr().out.count("once") == 1

    def test_reset_restores_propagation(self) -> None:
        handler = configure_logging(json_output=True)
        reset_logging()

        package_logger = logging.getLogger(LOGGER_NAMESPACE)
        assert handler not in package_logger.handlers
        assert package_logger.propagate is True


class TestViolationLogging:
    def test_violation_is_logged_before_raising(self, capsys: pytest.CaptureFixture[str]) -> None:
        from nonicle.core.envelope import Canonical

        configure_logging(json_output=True)

        with pytest.raises(CanonicalInvariantError):
            Canonical([2, 1])

        lines = _json_lines(capsys.readouterr().out)
        violation = next(line for line in lines if str(line["event"]).startswith("Canonical invariant violated"))
        assert violation["invariant"] == "tie"
        assert violation["value"] == "[2, 1]"
        assert violation["level"] == "error"

    def test_violation_reaches_host_handlers(self, caplog: pytest.LogCaptureFixture) -> None:
        from nonicle.core.envelope import Canonical

        with caplog.at_level(logging.ERROR, logger=LOGGER_NAMESPACE), pytest.raises(CanonicalInvariantError):
            Canonical([2, 1])

        assert any(record.invariant == "tie" for record in caplog.records)  # type: ignore[attr-defined]

    def test_violation_logging_can_be_disabled(self, capsys: pytest.CaptureFixture[str]) -> None:
        from nonicle.core.envelope import Canonical

        configure_logging(json_output=True)

        with override_settings(log_violations=False), pytest.raises(CanonicalInvariantError):
            Canonical([2, 1])

        assert "Canonical invariant violated" not in capsys.readouterr().out
