"""
Numeral: Immutable римское число

Immutable Pydantic модель, оборачивающая каноническую римскую запись
в диапазоне 1–4999. Экземпляр создаётся только через успешную валидацию;
сложение всегда создаёт новый экземпляр.
"""

from pydantic import BaseModel, Field, ValidationError, field_validator

from src.core.contracts.grammar import is_roman_numeral
from src.core.domain.valuation import int_to_roman, numeral_value


# =============================================================================
# EXCEPTIONS
# =============================================================================


class InvalidNumeral(ValueError):
    """
    Строка не является каноническим римским числом (или пуста).

    Attributes:
        text: Отклонённый вход, без изменений
    """

    def __init__(self, text: str, message: str | None = None):
        self.text = text
        if message is None:
            message = f"{text} is not a Roman numeral"
        super().__init__(message)


# =============================================================================
# NUMERAL MODEL
# =============================================================================


class Numeral(BaseModel):
    """
    Каноническое римское число.

    Immutable модель (frozen=True): равенство и hash по text.
    Прямое создание Numeral(text=...) при нарушении грамматики бросает
    pydantic.ValidationError; публичная граница: parse(), которая
    переводит её в InvalidNumeral.
    """

    text: str = Field(..., min_length=1, description="Каноническая римская запись")

    model_config = {"frozen": True}  # Immutable

    @field_validator("text")
    @classmethod
    def validate_grammar(cls, v: str) -> str:
        """Проверка канонической грамматики 1–4999 (без нормализации)."""
        if not is_roman_numeral(v):
            raise ValueError(f"{v!r} is not a canonical Roman numeral")
        return v

    @property
    def value(self) -> int:
        """Целое значение числа."""
        return numeral_value(self.text)

    @classmethod
    def parse(cls, text: str) -> "Numeral":
        """Создание из строки; см. parse()."""
        return parse(text)

    @classmethod
    def from_int(cls, value: int) -> "Numeral":
        """
        Создание из целого в диапазоне 1–4999.

        Raises:
            ValueError: Если value вне диапазона
        """
        return cls(text=int_to_roman(value))

    def __str__(self) -> str:
        return self.text

    def __add__(self, other: object) -> "Numeral":
        if not isinstance(other, Numeral):
            return NotImplemented
        from src.core.math.addition import add

        return add(self, other)


# =============================================================================
# BOUNDARY FUNCTIONS
# =============================================================================


def parse(text: str) -> Numeral:
    """
    Создание Numeral из пользовательской строки.

    Строка сохраняется как есть: регистр и пробелы не нормализуются.

    Args:
        text: Римская запись

    Returns:
        Numeral

    Raises:
        InvalidNumeral: Если text пуст или не проходит грамматику
    """
    if not text:
        raise InvalidNumeral(text, "Zero length Roman numeral")
    try:
        return Numeral(text=text)
    except ValidationError as e:
        raise InvalidNumeral(text) from e


def format_numeral(numeral: Numeral) -> str:
    """Каноническая строковая форма числа (для вывода)."""
    return numeral.text
