"""
Unit tests for the question template library.

Every registered template is sampled repeatedly to check the contract the
generator relies on: a recognisable signature, an answer of the right kind
and enough distinct distractors for string answers.
"""

import math

import pytest

from olympiad.core.models import SUBJECTS_BY_LEVEL, DiagramKind, Level, Subject
from olympiad.core.random_source import make_rng
from olympiad.generation.templates import (
    DEFAULT_PAIR,
    DEFAULT_TEMPLATES,
    is_generated_signature,
    registered_pairs,
    templates_for,
)
from olympiad.generation.templates.base import fact_key, num, round_half_up
from olympiad.generation.templates.biologi import BIOLOGI_FACTS
from olympiad.generation.templates.ips import IPS_FACTS
from olympiad.generation.templates.matematika import linear_equation, triangle_area
from olympiad.generation.templates.informatika import decimal_to_binary

SAMPLES_PER_TEMPLATE = 60


def _all_templates():
    for level, subject in registered_pairs():
        for fn in templates_for(level, subject):
            yield pytest.param(fn, id=f"{level.value}-{subject.value}-{fn.__name__}")


class TestRegistry:
    """Tests for template registration and lookup."""

    def test_every_offered_pair_has_templates(self):
        """All subjects offered at SMP and SMA should have at least one template."""
        registered = set(registered_pairs())
        for level, subjects in SUBJECTS_BY_LEVEL.items():
            for subject in subjects:
                assert (level, subject) in registered

    def test_unknown_pair_has_no_templates(self):
        """Pairs without registrations return an empty tuple."""
        assert templates_for(Level.SMP, Subject.FISIKA) == ()

    def test_default_templates_are_smp_math(self):
        assert DEFAULT_PAIR == (Level.SMP, Subject.MATEMATIKA)
        assert DEFAULT_TEMPLATES == templates_for(Level.SMP, Subject.MATEMATIKA)
        assert len(DEFAULT_TEMPLATES) == 10

    def test_is_generated_signature(self):
        assert is_generated_signature("mat-tri-b5-h3")
        assert is_generated_signature("sma-tri-b5-h3")
        assert is_generated_signature("bio-Mitokondria-dup-1700000000000-0")
        assert not is_generated_signature("3f2b8c1e-0000-4000-8000-000000000000")
        assert not is_generated_signature("")


class TestTemplateContract:
    """Sampled checks over every registered template."""

    @pytest.mark.parametrize("fn", list(_all_templates()))
    def test_template_output(self, fn):
        """Templates produce valid signatures, answers and distractors."""
        rng = make_rng(99)
        for _ in range(SAMPLES_PER_TEMPLATE):
            result = fn(rng)

            assert result.question_text
            assert result.explanation
            assert is_generated_signature(result.signature_base)

            if result.is_string_answer:
                assert len(result.other_options) == 3
                assert result.answer not in result.other_options
                assert len(set(result.other_options)) == 3
            else:
                assert math.isfinite(result.answer)
                assert result.other_options == ()

    @pytest.mark.parametrize("fn", list(_all_templates()))
    def test_signature_is_deterministic_for_parameters(self, fn):
        """Same random draws -> same signature."""
        first = fn(make_rng(7))
        second = fn(make_rng(7))
        assert first.signature_base == second.signature_base
        assert first.answer == second.answer


class TestMathTemplates:
    """Exact outputs with a fixed random source."""

    def test_triangle_area_lowest_draw(self, fixed_random):
        """random() == 0 picks the minimum base and height."""
        result = triangle_area(fixed_random([0.0]))

        assert result.answer == 7.5
        assert result.signature_base == "mat-tri-b5-h3"
        assert result.diagram.kind is DiagramKind.TRIANGLE
        assert result.diagram.params == {"base": 5, "height": 3}
        assert "7.5 cm²" in result.explanation

    def test_linear_equation(self, fixed_random):
        result = linear_equation(fixed_random([0.0]))

        assert result.answer == 2
        assert result.signature_base == "mat-alg-x2-c1"
        assert "x + 1 = 3" in result.question_text


class TestFactTemplates:
    """Tests for string-answer templates."""

    def test_fact_signature_strips_non_alphanumerics(self):
        assert fact_key("Vitamin A, D, E, K") == "VitaminADEK"
        assert fact_key("2 sel anak identik") == "2selanakidentik"

    def test_fact_signature_keeps_punctuation_when_asked(self):
        assert fact_key("17 Agustus 1945", keep_punctuation=True) == "17Agustus1945"
        assert fact_key("Vitamin A, D", keep_punctuation=True) == "VitaminA,D"

    def test_fact_signature_truncation(self):
        assert fact_key("Random Access Memory", max_len=10) == "RandomAcce"

    def test_biologi_fact_signatures_are_unique(self):
        keys = {fact_key(f.answer) for f in BIOLOGI_FACTS}
        assert len(keys) == len(BIOLOGI_FACTS)

    def test_ips_first_fact(self, fixed_random):
        """random() == 0 picks the first IPS fact."""
        fn = templates_for(Level.SMP, Subject.IPS)[0]
        result = fn(fixed_random([0.0]))

        assert result.answer == IPS_FACTS[0].answer == "Jakarta"
        assert result.signature_base == "ips-Jakarta"
        assert result.explanation == "Jawaban yang benar: Jakarta"

    def test_binary_distractors_differ(self):
        rng = make_rng(3)
        for _ in range(200):
            result = decimal_to_binary(rng)
            n = int(result.signature_base.removeprefix("inf-bin-"))
            assert result.answer == format(n, "b")
            assert len(set(result.other_options)) == 3


class TestNumberHelpers:
    """Tests for num/round_half_up."""

    @pytest.mark.parametrize("value,expected", [
        (7.0, "7"),
        (7.5, "7.5"),
        (12, "12"),
        (3.14159, "3.14"),
    ])
    def test_num(self, value, expected):
        assert num(value) == expected

    @pytest.mark.parametrize("value,expected", [
        (2.5, 3),
        (2.4999, 2),
        (-0.5, 0),
        (6.67, 7),
    ])
    def test_round_half_up(self, value, expected):
        assert round_half_up(value) == expected
