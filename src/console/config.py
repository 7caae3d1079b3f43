"""
Console Configuration

Настройки консольной обёртки. Значения по умолчанию переопределяются
переменными окружения (ConsoleConfig.from_env), а те, в свою очередь,
флагами командной строки.

Environment Variables:
    ROMAN_LOG_LEVEL: Уровень логирования (DEBUG, INFO, WARNING, ERROR)
    ROMAN_LOG_JSON:  "1": логи в JSON формате
    ROMAN_VERBOSE:   "1": печатать целое значение рядом с результатом
"""

import os
from dataclasses import dataclass
from typing import Final


# =============================================================================
# CONSTANTS
# =============================================================================

PROMPT: Final[str] = "Enter two Roman Numerals separated by spaces."
RESULT_PREFIX: Final[str] = "Result: "
ERROR_PREFIX: Final[str] = "Error: "

ENV_LOG_LEVEL: Final[str] = "ROMAN_LOG_LEVEL"
ENV_LOG_JSON: Final[str] = "ROMAN_LOG_JSON"
ENV_VERBOSE: Final[str] = "ROMAN_VERBOSE"


def _env_flag(key: str, default: bool) -> bool:
    value = os.getenv(key)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class ConsoleConfig:
    """Конфигурация консоли."""

    log_level: str = "WARNING"
    log_json: bool = False
    verbose: bool = False

    @classmethod
    def from_env(cls) -> "ConsoleConfig":
        """Загрузка конфигурации из переменных окружения."""
        defaults = cls()
        return cls(
            log_level=os.getenv(ENV_LOG_LEVEL, defaults.log_level).upper(),
            log_json=_env_flag(ENV_LOG_JSON, defaults.log_json),
            verbose=_env_flag(ENV_VERBOSE, defaults.verbose),
        )
