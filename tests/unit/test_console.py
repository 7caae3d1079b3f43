"""
Тесты консольной обёртки

Проверяет:
1. Текстовый режим: аргументы и stdin, "Result:" / "Error:"
2. JSON-режим: addition_request → addition_result
3. Конфигурацию из окружения и приоритет флагов
"""

import io
import json
import logging

import pytest

from src.console import ConsoleConfig, add_tokens, evaluate_request, main, render_result
from src.console.config import PROMPT
from src.console.logging_config import JSONFormatter, get_logger, setup_logging
from src.console.main import EXIT_ERROR, EXIT_OK, MISSING_OPERAND_MESSAGE, MissingOperand
from src.core import InvalidNumeral, NumeralOverflow, parse


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for key in ("ROMAN_LOG_LEVEL", "ROMAN_LOG_JSON", "ROMAN_VERBOSE"):
        monkeypatch.delenv(key, raising=False)


# =============================================================================
# OPERATIONS
# =============================================================================


class TestAddTokens:
    """Тесты для add_tokens"""

    def test_sum(self) -> None:
        assert add_tokens(["IV", "IX"]) == parse("XIII")

    def test_extra_tokens_ignored(self) -> None:
        assert add_tokens(["I", "I", "garbage"]) == parse("II")

    @pytest.mark.parametrize("tokens", [[], ["X"]])
    def test_missing_operand(self, tokens) -> None:
        with pytest.raises(MissingOperand):
            add_tokens(tokens)

    def test_first_token_validated_before_second_is_required(self) -> None:
        with pytest.raises(InvalidNumeral):
            add_tokens(["ABC"])

    def test_overflow(self) -> None:
        with pytest.raises(NumeralOverflow):
            add_tokens(["MMMMCMXCIX", "I"])


class TestRenderResult:
    def test_plain(self) -> None:
        assert render_result(parse("XIII")) == "Result: XIII"

    def test_verbose(self) -> None:
        assert render_result(parse("XIII"), verbose=True) == "Result: XIII (13)"


class TestEvaluateRequest:
    """Тесты JSON-обработки"""

    def test_success(self) -> None:
        assert evaluate_request({"augend": "XLIX", "addend": "I"}) == {"sum": "L", "value": 50}

    def test_invalid_numeral(self) -> None:
        response = evaluate_request({"augend": "VX", "addend": "I"})
        assert response == {
            "error": {"kind": "invalid_numeral", "message": "VX is not a Roman numeral"}
        }

    def test_overflow(self) -> None:
        response = evaluate_request({"augend": "MMMMCMXCIX", "addend": "I"})
        assert response["error"]["kind"] == "overflow"

    def test_contract_violation(self) -> None:
        response = evaluate_request({"augend": "X"})
        assert response["error"]["kind"] == "contract"


# =============================================================================
# ENTRY POINT
# =============================================================================


class TestMainText:
    """Тесты текстового режима"""

    def test_arguments(self, capsys) -> None:
        assert main(["IV", "IX"]) == EXIT_OK
        assert capsys.readouterr().out == "Result: XIII\n"

    def test_stdin(self, capsys) -> None:
        assert main([], stdin=io.StringIO("XLIX I\n")) == EXIT_OK
        out = capsys.readouterr().out
        assert out == f"{PROMPT}\nResult: L\n"

    def test_stdin_multiline(self, capsys) -> None:
        assert main([], stdin=io.StringIO("CDXC\nX\n")) == EXIT_OK
        assert capsys.readouterr().out.endswith("Result: D\n")

    def test_invalid_numeral(self, capsys) -> None:
        assert main(["IIII", "I"]) == EXIT_ERROR
        assert capsys.readouterr().out == "Error: IIII is not a Roman numeral\n"

    def test_overflow(self, capsys) -> None:
        assert main(["MMMMCMXCIX", "I"]) == EXIT_ERROR
        assert capsys.readouterr().out == "Error: Resulting Roman numeral larger than 4999\n"

    def test_missing_operand(self, capsys) -> None:
        assert main([], stdin=io.StringIO("X")) == EXIT_ERROR
        assert capsys.readouterr().out.endswith(f"Error: {MISSING_OPERAND_MESSAGE}\n")

    def test_verbose_flag(self, capsys) -> None:
        assert main(["--verbose", "X", "V"]) == EXIT_OK
        assert capsys.readouterr().out == "Result: XV (15)\n"

    def test_verbose_from_env(self, capsys, monkeypatch) -> None:
        monkeypatch.setenv("ROMAN_VERBOSE", "1")
        assert main(["X", "V"]) == EXIT_OK
        assert capsys.readouterr().out == "Result: XV (15)\n"

    def test_logs_go_to_stderr(self, capsys) -> None:
        assert main(["--log-level", "INFO", "X", "V"]) == EXIT_OK
        captured = capsys.readouterr()
        assert captured.out == "Result: XV\n"
        assert "Added X + V = XV" in captured.err


class TestMainJson:
    """Тесты JSON-режима"""

    def test_success(self, capsys) -> None:
        stdin = io.StringIO(json.dumps({"augend": "IV", "addend": "IX"}))
        assert main(["--json"], stdin=stdin) == EXIT_OK
        assert json.loads(capsys.readouterr().out) == {"sum": "XIII", "value": 13}

    def test_overflow(self, capsys) -> None:
        stdin = io.StringIO(json.dumps({"augend": "MMMMCMXCIX", "addend": "I"}))
        assert main(["--json"], stdin=stdin) == EXIT_ERROR
        assert json.loads(capsys.readouterr().out)["error"]["kind"] == "overflow"

    def test_malformed_json(self, capsys) -> None:
        assert main(["--json"], stdin=io.StringIO("{not json")) == EXIT_ERROR
        assert json.loads(capsys.readouterr().out)["error"]["kind"] == "contract"


# =============================================================================
# CONFIG & LOGGING
# =============================================================================


class TestConsoleConfig:
    def test_defaults(self) -> None:
        config = ConsoleConfig.from_env()
        assert config == ConsoleConfig(log_level="WARNING", log_json=False, verbose=False)

    def test_from_env(self, monkeypatch) -> None:
        monkeypatch.setenv("ROMAN_LOG_LEVEL", "debug")
        monkeypatch.setenv("ROMAN_LOG_JSON", "true")
        monkeypatch.setenv("ROMAN_VERBOSE", "0")
        assert ConsoleConfig.from_env() == ConsoleConfig(
            log_level="DEBUG", log_json=True, verbose=False
        )


class TestLogging:
    def test_json_formatter(self) -> None:
        record = logging.LogRecord(
            "src.console", logging.WARNING, __file__, 1, "bad %s", ("VX",), None
        )
        record.augend = "VX"
        payload = json.loads(JSONFormatter().format(record))
        assert payload["message"] == "bad VX"
        assert payload["level"] == "WARNING"
        assert payload["augend"] == "VX"

    def test_setup_replaces_handlers(self) -> None:
        setup_logging("INFO")
        setup_logging("DEBUG", json_format=True)
        root = logging.getLogger("src")
        assert len(root.handlers) == 1
        assert isinstance(root.handlers[0].formatter, JSONFormatter)
        assert root.level == logging.DEBUG

    def test_get_logger_prefix(self) -> None:
        assert get_logger("console").name == "src.console"
