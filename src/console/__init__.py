"""
Console wrapper for the Roman numeral engine.

Reads two numerals, prints the sum or the error message.
"""

from src.console.config import ConsoleConfig
from src.console.main import add_tokens, evaluate_request, main, render_result

__all__ = [
    "ConsoleConfig",
    "add_tokens",
    "evaluate_request",
    "render_result",
    "main",
]
