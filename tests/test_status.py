"""Tests for restshim.http.status — reason phrase tables."""

import pytest

from restshim.http.status import EXTENDED_REASON_PHRASES, REASON_PHRASES, reason_phrases


class TestReasonPhrases:
    @pytest.mark.parametrize(
        ("code", "phrase"),
        [
            (200, "OK"),
            (201, "Created"),
            (404, "Not Found"),
            (418, "I'm a teapot"),
            (425, "Unordered Collection"),
            (511, "Network Authentication Required"),
        ],
    )
    def test_historical_table(self, code: int, phrase: str) -> None:
        assert REASON_PHRASES[code] == phrase

    @pytest.mark.parametrize("code", [103, 308, 421])
    def test_extended_codes(self, code: int) -> None:
        assert code not in REASON_PHRASES
        assert code in EXTENDED_REASON_PHRASES

    def test_extended_is_a_superset(self) -> None:
        assert REASON_PHRASES.items() <= EXTENDED_REASON_PHRASES.items()

    def test_select_table(self) -> None:
        assert reason_phrases() is REASON_PHRASES
        assert reason_phrases(extended=True) is EXTENDED_REASON_PHRASES

    def test_tables_are_read_only(self) -> None:
        with pytest.raises(TypeError):
            REASON_PHRASES[999] = "Nope"  # type: ignore[index]
