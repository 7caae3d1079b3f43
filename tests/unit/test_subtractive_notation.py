"""
Тесты развёртывания и обратной свёртки subtractive pairs
"""

import pytest

from src.core.math.subtractive_notation import expand_subtractives, recollapse_subtractives


class TestExpandSubtractives:
    """Тесты для expand_subtractives"""

    @pytest.mark.parametrize(
        "text, expanded",
        [
            ("XIV", "XIIII"),
            ("IV", "IIII"),
            ("IX", "VIIII"),
            ("XL", "XXXX"),
            ("XC", "LXXXX"),
            ("CD", "CCCC"),
            ("CM", "DCCCC"),
            ("MCMXCIV", "MDCCCCLXXXXIIII"),
            ("XLIX", "XXXXVIIII"),
        ],
    )
    def test_pairs_expanded(self, text: str, expanded: str) -> None:
        assert expand_subtractives(text) == expanded

    @pytest.mark.parametrize("text", ["I", "III", "VIII", "MMMDCCCLXXXVIII"])
    def test_additive_unchanged(self, text: str) -> None:
        assert expand_subtractives(text) == text

    def test_empty(self) -> None:
        assert expand_subtractives("") == ""


class TestRecollapseSubtractives:
    """Тесты для recollapse_subtractives"""

    @pytest.mark.parametrize(
        "sequence, canonical",
        [
            ("IIII", "IV"),
            ("VIIII", "IX"),
            ("XXXX", "XL"),
            ("LXXXX", "XC"),
            ("CCCC", "CD"),
            ("DCCCC", "CM"),
            ("XIIII", "XIV"),
            ("XXXXVIIII", "XLIX"),
            ("MDCCCCLXXXXVIIII", "MCMXCIX"),
            ("MMMMDCCCCLXXXXVIIII", "MMMMCMXCIX"),
        ],
    )
    def test_runs_recollapsed(self, sequence: str, canonical: str) -> None:
        assert recollapse_subtractives(sequence) == canonical

    def test_long_window_checked_first(self) -> None:
        """VIIII → IX, а не VIV"""
        assert recollapse_subtractives("VIIII") == "IX"

    @pytest.mark.parametrize("sequence", ["III", "VIII", "XXXVII", "MMM"])
    def test_short_runs_unchanged(self, sequence: str) -> None:
        assert recollapse_subtractives(sequence) == sequence

    def test_inverse_of_expand(self) -> None:
        """Инвариант: recollapse(expand(x)) == x для канонических записей"""
        for text in ["IV", "XIV", "XCIX", "CDXLIV", "MCMXCIV", "MMMMCMXCIX"]:
            assert recollapse_subtractives(expand_subtractives(text)) == text
