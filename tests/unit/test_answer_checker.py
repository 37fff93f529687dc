"""Tests for AnswerCheckerService."""

import pytest

from latin_drill.models import Declension, Gender
from latin_drill.services import AnswerCheckerService


@pytest.fixture
def rex(make_word):
    return make_word(
        id="word_rex_0005",
        nominative="rēx",
        genitive="rēgis",
        declension=Declension.THIRD,
        gender=Gender.MASCULINE,
        translation="king",
        additional_meanings=("ruler",),
    )


class TestCheckLatinWord:
    """Tests for check_latin_word."""

    def test_accepts_unaccented_forms(self, rex):
        assert AnswerCheckerService.check_latin_word(rex, "Rex", "regis", "masculine", "3rd")

    def test_accepts_enum_members(self, rex):
        assert AnswerCheckerService.check_latin_word(
            rex, "rex", "regis", Gender.MASCULINE, Declension.THIRD
        )

    @pytest.mark.parametrize(
        "nominative,genitive,gender,declension",
        [
            ("rex", "regis", "feminine", "3rd"),
            ("rex", "regis", "masculine", "2nd"),
            ("rex", "rexis", "masculine", "3rd"),
            ("reg", "regis", "masculine", "3rd"),
            ("", "", "", ""),
        ],
    )
    def test_rejects_any_wrong_part(self, rex, nominative, genitive, gender, declension):
        assert not AnswerCheckerService.check_latin_word(
            rex, nominative, genitive, gender, declension
        )


class TestCheckTranslation:
    """Tests for check_translation."""

    def test_accepts_primary_translation(self, rex):
        assert AnswerCheckerService.check_translation(rex, " King ")

    def test_accepts_secondary_meaning(self, rex):
        assert AnswerCheckerService.check_translation(rex, "ruler")

    def test_rejects_wrong_or_blank(self, rex):
        assert not AnswerCheckerService.check_translation(rex, "queen")
        assert not AnswerCheckerService.check_translation(rex, "   ")
