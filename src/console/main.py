"""
Console: тонкая обёртка над движком сложения

Читает два римских числа (из аргументов или stdin), печатает
"Result: <сумма>" или "Error: <сообщение>". Внутренности ошибок
не анализируются: печатается только их сообщение.

JSON-режим (--json): stdin содержит addition_request документ,
stdout получает addition_result документ.
"""

import argparse
import json
import sys
from typing import Any, Dict, List, Optional, Sequence, TextIO

from jsonschema import ValidationError

from src.console.config import ERROR_PREFIX, PROMPT, RESULT_PREFIX, ConsoleConfig
from src.console.logging_config import get_logger, setup_logging
from src.core import InvalidNumeral, Numeral, NumeralOverflow, add, format_numeral, parse
from src.core.contracts import validate_addition_request, validate_addition_result

logger = get_logger("console")

EXIT_OK = 0
EXIT_ERROR = 1

MISSING_OPERAND_MESSAGE = "Expected two Roman numerals"


class MissingOperand(ValueError):
    """На входе меньше двух токенов."""

    def __init__(self) -> None:
        super().__init__(MISSING_OPERAND_MESSAGE)


# =============================================================================
# OPERATIONS
# =============================================================================


def add_tokens(tokens: Sequence[str]) -> Numeral:
    """
    Разбор двух первых токенов и их сложение.

    Токены передаются в parse() как есть. Лишние токены игнорируются.

    Raises:
        MissingOperand: Если токенов меньше двух
        InvalidNumeral: Если токен не является римским числом
        NumeralOverflow: Если сумма больше 4999
    """
    if not tokens:
        raise MissingOperand()
    augend = parse(tokens[0])
    if len(tokens) < 2:
        raise MissingOperand()
    addend = parse(tokens[1])

    result = add(augend, addend)
    logger.info(
        "Added %s + %s = %s",
        augend,
        addend,
        result,
        extra={"augend": augend.text, "addend": addend.text, "sum": result.text},
    )
    return result


def render_result(result: Numeral, verbose: bool = False) -> str:
    """Строка результата для вывода."""
    line = RESULT_PREFIX + format_numeral(result)
    if verbose:
        line += f" ({result.value})"
    return line


def evaluate_request(document: Any) -> Dict[str, Any]:
    """
    Обработка addition_request документа.

    Returns:
        addition_result документ: {"sum", "value"} или {"error": {"kind", "message"}}
    """
    try:
        validate_addition_request(document)
        result = add(parse(document["augend"]), parse(document["addend"]))
        response: Dict[str, Any] = {"sum": result.text, "value": result.value}
    except ValidationError as e:
        logger.warning("Contract violation: %s", e.message)
        response = {"error": {"kind": "contract", "message": e.message}}
    except InvalidNumeral as e:
        logger.warning("Invalid numeral: %r", e.text)
        response = {"error": {"kind": "invalid_numeral", "message": str(e)}}
    except NumeralOverflow as e:
        logger.warning("Overflow: %s", e)
        response = {"error": {"kind": "overflow", "message": str(e)}}

    validate_addition_result(response)
    return response


# =============================================================================
# RUNNERS
# =============================================================================


def run_text(tokens: Optional[List[str]], config: ConsoleConfig, stdin: TextIO) -> int:
    """Текстовый режим: токены из аргументов или stdin."""
    if not tokens:
        print(PROMPT)
        tokens = stdin.read().split()

    try:
        result = add_tokens(tokens)
    except (InvalidNumeral, NumeralOverflow, MissingOperand) as e:
        logger.warning("Addition failed: %s", e)
        print(ERROR_PREFIX + str(e))
        return EXIT_ERROR

    print(render_result(result, config.verbose))
    return EXIT_OK


def run_json(stdin: TextIO) -> int:
    """JSON-режим: addition_request из stdin → addition_result в stdout."""
    raw = stdin.read()
    try:
        document = json.loads(raw)
    except json.JSONDecodeError as e:
        logger.warning("Malformed JSON request: %s", e)
        response: Dict[str, Any] = {"error": {"kind": "contract", "message": str(e)}}
        validate_addition_result(response)
    else:
        response = evaluate_request(document)

    print(json.dumps(response))
    return EXIT_ERROR if "error" in response else EXIT_OK


# =============================================================================
# ENTRY POINT
# =============================================================================


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="roman-add",
        description="Add two Roman numerals (range I to MMMMCMXCIX).",
    )
    parser.add_argument(
        "numerals",
        nargs="*",
        metavar="NUMERAL",
        help="Two Roman numerals; read from stdin when omitted",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Read an addition_request JSON document from stdin",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        default=None,
        help="Also print the integer value of the result",
    )
    parser.add_argument("--log-level", default=None, help="Log level (overrides ROMAN_LOG_LEVEL)")
    return parser


def main(argv: Optional[Sequence[str]] = None, stdin: Optional[TextIO] = None) -> int:
    """Точка входа консоли. Возвращает код выхода."""
    args = build_parser().parse_args(argv)

    env_config = ConsoleConfig.from_env()
    config = ConsoleConfig(
        log_level=(args.log_level or env_config.log_level).upper(),
        log_json=env_config.log_json,
        verbose=env_config.verbose if args.verbose is None else args.verbose,
    )
    setup_logging(config.log_level, json_format=config.log_json)

    stdin = stdin if stdin is not None else sys.stdin
    if args.json:
        return run_json(stdin)
    return run_text(args.numerals, config, stdin)
