"""
Unit tests for the procedural generator.

Tests single-question generation, the unknown-pair fallback and batch
deduplication up to content exhaustion (mastery).
"""

import re

from olympiad.core.models import FILLER_MARKER, Level, QuestionOrigin, Subject
from olympiad.core.random_source import make_rng
from olympiad.generation.generator import ProceduralGenerator
from olympiad.generation.templates import is_generated_signature
from olympiad.generation.templates.base import fact_key
from olympiad.generation.templates.biologi import BIOLOGI_FACTS

FIXED_MILLIS = 1_700_000_000_000

ALL_BIOLOGI_SIGNATURES = {f"bio-{fact_key(f.answer)}" for f in BIOLOGI_FACTS}


class TestGenerateQuestion:
    """Tests for single questions."""

    def test_question_shape(self, generator):
        question = generator.generate_question(Level.SMP, Subject.MATEMATIKA)

        assert len(question.options) == 4
        assert 0 <= question.correct_index < 4
        assert question.origin is QuestionOrigin.GENERATED
        assert question.level is Level.SMP
        assert question.subject is Subject.MATEMATIKA
        assert question.signature.startswith("mat-")

    def test_id_is_timestamp_and_token(self, generator):
        question = generator.generate_question(Level.SMA, Subject.FISIKA)
        assert re.fullmatch(rf"{FIXED_MILLIS}-[0-9a-z]{{6}}", question.id)

    def test_ids_differ_between_questions(self, generator):
        ids = {generator.generate_question(Level.SMP, Subject.IPA).id for _ in range(20)}
        assert len(ids) == 20

    def test_unknown_pair_falls_back_to_default_templates(self, generator):
        """SMP has no Fisika templates; SMP Matematika ones are used instead."""
        question = generator.generate_question(Level.SMP, Subject.FISIKA)

        assert question.signature.startswith("mat-")
        assert question.level is Level.SMP
        assert question.subject is Subject.FISIKA

    def test_string_answer_question(self, generator):
        question = generator.generate_question(Level.SMA, Subject.BIOLOGI)

        fact = next(f for f in BIOLOGI_FACTS if f"bio-{fact_key(f.answer)}" == question.signature)
        assert question.correct_answer == fact.answer
        assert sorted(question.options) == sorted([fact.answer, *fact.others])
        assert question.explanation == f"Jawaban: {fact.answer}"

    def test_seeded_generators_agree(self):
        def build():
            gen = ProceduralGenerator(rng=make_rng(42), clock=lambda: FIXED_MILLIS)
            return gen.generate_question_batch(Level.SMA, Subject.MATEMATIKA, 5).questions

        first, second = build(), build()
        assert [q.signature for q in first] == [q.signature for q in second]
        assert [q.options for q in first] == [q.options for q in second]
        assert [q.id for q in first] == [q.id for q in second]


class TestGenerateBatch:
    """Tests for batch deduplication and mastery."""

    def test_exact_count_unique_signatures(self, generator):
        batch = generator.generate_question_batch(Level.SMP, Subject.MATEMATIKA, 10)

        assert len(batch.questions) == 10
        assert len({q.signature for q in batch.questions}) == 10
        assert not batch.mastery_reached

    def test_zero_count(self, generator):
        batch = generator.generate_question_batch(Level.SMP, Subject.MATEMATIKA, 0)
        assert batch.questions == []
        assert not batch.mastery_reached

    def test_excluded_signatures_are_avoided(self, generator):
        excluded = set(sorted(ALL_BIOLOGI_SIGNATURES)[:6])
        batch = generator.generate_question_batch(Level.SMA, Subject.BIOLOGI, 4, excluded)

        assert not batch.mastery_reached
        assert {q.signature for q in batch.questions} == ALL_BIOLOGI_SIGNATURES - excluded

    def test_excluded_set_not_mutated(self, generator):
        excluded = {"bio-Mitokondria"}
        generator.generate_question_batch(Level.SMA, Subject.BIOLOGI, 3, excluded)
        assert excluded == {"bio-Mitokondria"}

    def test_all_content_excluded_reaches_mastery(self, generator):
        batch = generator.generate_question_batch(Level.SMA, Subject.BIOLOGI, 5, ALL_BIOLOGI_SIGNATURES)

        assert batch.mastery_reached
        assert len(batch.questions) == 5
        assert all(q.is_filler for q in batch.questions)
        for n, question in enumerate(batch.questions):
            base, suffix = question.signature.split(FILLER_MARKER)
            assert base in ALL_BIOLOGI_SIGNATURES
            assert suffix == f"{FIXED_MILLIS}-{n}"

    def test_small_pool_partially_fills(self, generator):
        """Ten facts, fifteen requested: ten unique then five fillers."""
        batch = generator.generate_question_batch(Level.SMA, Subject.BIOLOGI, 15)

        assert batch.mastery_reached
        assert len(batch.questions) == 15
        unique = [q for q in batch.questions if not q.is_filler]
        assert {q.signature for q in unique} == ALL_BIOLOGI_SIGNATURES
        assert len(batch.questions) - len(unique) == 5
        assert len({q.signature for q in batch.questions}) == 15

    def test_filler_signatures_still_look_generated(self, generator):
        batch = generator.generate_question_batch(Level.SMA, Subject.BIOLOGI, 2, ALL_BIOLOGI_SIGNATURES)
        assert all(is_generated_signature(q.signature) for q in batch.questions)

    def test_small_budget_can_exhaust_large_pool(self):
        """A one-attempt budget still returns the full count."""
        gen = ProceduralGenerator(rng=make_rng(1), attempts_per_question=1, clock=lambda: FIXED_MILLIS)
        batch = gen.generate_question_batch(Level.SMA, Subject.BIOLOGI, 3, ALL_BIOLOGI_SIGNATURES)

        assert batch.mastery_reached
        assert len(batch.questions) == 3
