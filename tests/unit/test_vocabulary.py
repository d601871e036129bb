# ABOUTME: Unit tests for the static genre vocabulary.
# ABOUTME: Validates declared order, immutability, and reverse lookups.

import pytest

from shelfcode.codes.vocabulary import (
    DEFAULT_THEME_CODE,
    GENRE_MAPPINGS,
    genre_names,
    theme_name_for,
)


class TestGenreMappings:
    """Tests for the GENRE_MAPPINGS table."""

    def test_declared_order_is_preserved(self) -> None:
        """Keys iterate in declared order, fiction first and General last."""
        names = list(GENRE_MAPPINGS)
        assert names[:3] == ["Fiction", "Fantasy", "Science Fiction"]
        assert names[-1] == "General"
        assert len(names) == 22

    def test_mapping_is_read_only(self) -> None:
        """The vocabulary cannot be modified at runtime."""
        with pytest.raises(TypeError):
            GENRE_MAPPINGS["Poetry"] = "POE"  # type: ignore[index]

    def test_codes_are_uppercase(self) -> None:
        """Every theme code is 2-4 uppercase letters."""
        for code in GENRE_MAPPINGS.values():
            assert code.isalpha() and code.isupper()
            assert 2 <= len(code) <= 4

    def test_general_maps_to_default(self) -> None:
        """The General category carries the default theme code."""
        assert GENRE_MAPPINGS["General"] == DEFAULT_THEME_CODE

    def test_genre_names_matches_keys(self) -> None:
        """genre_names() lists the keys in declared order."""
        assert genre_names() == list(GENRE_MAPPINGS.keys())


class TestThemeNameFor:
    """Tests for reverse lookup by theme code."""

    def test_known_code(self) -> None:
        assert theme_name_for("SF") == "Science Fiction"

    def test_unknown_code(self) -> None:
        assert theme_name_for("ZZZ") is None

    def test_lookup_is_case_sensitive(self) -> None:
        assert theme_name_for("fan") is None
