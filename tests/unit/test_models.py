"""
Unit tests for domain models and the random source helpers.
"""

import pytest

from olympiad.core.models import (
    CuratedRow,
    DiagramKind,
    DiagramSpec,
    Level,
    Question,
    QuestionOrigin,
    QuizSession,
    Subject,
    is_valid_pair,
)
from olympiad.core.random_source import choice, make_rng, rand_int, random_token, shuffled


def _question(**overrides):
    data = {
        "id": "1-abc",
        "signature": "mat-sq-s4",
        "level": Level.SMP,
        "subject": Subject.MATEMATIKA,
        "question_text": "Keliling persegi bersisi 4 cm?",
        "options": ["12", "16", "20", "8"],
        "correct_index": 1,
    }
    data.update(overrides)
    return Question(**data)


class TestLevelSubject:
    """Parsing and level/subject validity."""

    @pytest.mark.parametrize("text,level", [("SMP", Level.SMP), (" sma ", Level.SMA)])
    def test_level_parse(self, text, level):
        assert Level.parse(text) is level

    def test_subject_parse_case_insensitive(self):
        assert Subject.parse("kebumian") is Subject.KEBUMIAN

    @pytest.mark.parametrize("parse,value", [(Level.parse, "SD"), (Subject.parse, "Sejarah")])
    def test_unknown_values(self, parse, value):
        with pytest.raises(ValueError):
            parse(value)

    def test_valid_pairs(self):
        assert is_valid_pair(Level.SMP, Subject.IPA)
        assert is_valid_pair(Level.SMA, Subject.ASTRONOMI)
        assert not is_valid_pair(Level.SMP, Subject.FISIKA)
        assert not is_valid_pair(Level.SMA, Subject.IPS)


class TestQuestion:
    """Question invariants and serialisation."""

    def test_correct_answer(self):
        assert _question().correct_answer == "16"

    @pytest.mark.parametrize("overrides", [
        {"options": ["1", "2", "3"]},
        {"options": ["1", "2", "3", "4", "5"]},
        {"correct_index": 4},
        {"correct_index": -1},
    ])
    def test_invalid_questions(self, overrides):
        with pytest.raises(ValueError):
            _question(**overrides)

    def test_filler_flag(self):
        assert not _question().is_filler
        assert _question(signature="mat-sq-s4-dup-1700000000000-0").is_filler

    def test_to_dict(self):
        question = _question(diagram=DiagramSpec(DiagramKind.RECTANGLE, {"length": 4, "width": 4}))

        data = question.to_dict()

        assert data["level"] == "SMP"
        assert data["subject"] == "Matematika"
        assert data["origin"] == QuestionOrigin.GENERATED.value
        assert data["diagram"] == {"kind": "rectangle", "params": {"length": 4, "width": 4}}
        assert data["image_url"] is None

    def test_session_signatures(self):
        session = QuizSession(questions=[_question(), _question(signature="cur-1")])
        assert len(session) == 2
        assert session.signatures == ["mat-sq-s4", "cur-1"]


class TestRandomSource:
    """Helpers over an injected RandomSource."""

    def test_rand_int_bounds(self, fixed_random):
        assert rand_int(fixed_random([0.0]), 3, 9) == 3
        assert rand_int(fixed_random([0.999999]), 3, 9) == 9

    def test_rand_int_stays_in_range(self):
        rng = make_rng(0)
        values = {rand_int(rng, -2, 2) for _ in range(500)}
        assert values == {-2, -1, 0, 1, 2}

    def test_choice_empty(self, rng):
        with pytest.raises(ValueError):
            choice(rng, [])

    def test_shuffled_is_a_permutation_copy(self, rng):
        items = list(range(10))
        result = shuffled(rng, items)

        assert sorted(result) == items
        assert items == list(range(10))

    def test_random_token(self, rng):
        token = random_token(rng)
        assert len(token) == 6
        assert token.isalnum() and token == token.lower()

    def test_seeded_sources_agree(self):
        assert shuffled(make_rng(5), list(range(8))) == shuffled(make_rng(5), list(range(8)))


class TestCuratedRow:
    """Parsing question bank records."""

    def test_from_dict_short_keys(self):
        row = CuratedRow.from_dict({
            "id": "q-1",
            "level": "SMP",
            "subject": "IPS",
            "question": "Ibu kota Indonesia?",
            "options": ["Jakarta", "Bandung", "Medan", "Bali"],
            "answer": "Jakarta",
        })

        assert row.question_text == "Ibu kota Indonesia?"
        assert row.answer_text == "Jakarta"
        assert row.is_active

    def test_non_text_values_become_text(self):
        row = CuratedRow.from_dict({
            "id": 17,
            "level": "SMA",
            "subject": "Matematika",
            "question": "12 x 4 = ?",
            "options": [48, 46.0, 44.5, None],
            "answer": 48.0,
            "explanation": None,
        })

        assert row.id == "17"
        assert row.options == ["48", "46", "44.5", ""]
        assert row.answer_text == "48"
        assert row.explanation == ""

    def test_missing_answer_is_empty(self):
        row = CuratedRow.from_dict({"id": "x", "options": ["a", "b", "c", "d"], "answer": None})
        assert row.answer_text == ""
