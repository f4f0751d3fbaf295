"""
Procedural question generator.

Picks a template for a (level, subject) pair, instantiates it, builds the
shuffled option set and stamps a fresh id. Batches deduplicate by signature
against an exclusion set under a bounded retry budget; when the budget runs
out the remaining slots are force-filled and mastery is reported.
"""
from __future__ import annotations

import time
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field

from loguru import logger

from olympiad.core.models import FILLER_MARKER, Level, Question, QuestionOrigin, Subject
from olympiad.core.random_source import RandomSource, choice, make_rng, random_token
from olympiad.generation.options import OptionSet, numeric_options, string_options
from olympiad.generation.templates import DEFAULT_TEMPLATES, TemplateResult, templates_for

DEFAULT_ATTEMPTS_PER_QUESTION = 50


@dataclass
class BatchResult:
    """Questions from one batch plus whether unique content ran out."""

    questions: list[Question] = field(default_factory=list)
    mastery_reached: bool = False


def _epoch_millis() -> int:
    return int(time.time() * 1000)


class ProceduralGenerator:
    """
    Template-driven question generator.

    The generator holds no per-session state; the only thing it keeps is the
    random source, which may be shared or created per request.
    """

    def __init__(
        self,
        rng: RandomSource | None = None,
        attempts_per_question: int = DEFAULT_ATTEMPTS_PER_QUESTION,
        clock: Callable[[], int] | None = None,
    ):
        """
        Initialize generator.

        Args:
            rng: Random source (defaults to an unseeded random.Random)
            attempts_per_question: Retry budget multiplier for batches
            clock: Returns epoch milliseconds; used for ids and filler suffixes
        """
        self.rng = rng or make_rng()
        self.attempts_per_question = attempts_per_question
        self.clock = clock or _epoch_millis

    # ========================================
    # Single question
    # ========================================

    def generate_question(self, level: Level, subject: Subject) -> Question:
        """Generate one question, falling back to the default templates for unknown pairs."""
        templates = templates_for(level, subject)
        if not templates:
            logger.debug(f"No templates for {level.value}/{subject.value}; using default templates")
            templates = DEFAULT_TEMPLATES

        result = choice(self.rng, templates)(self.rng)
        return self.build_question(result, level, subject)

    def build_question(self, result: TemplateResult, level: Level, subject: Subject) -> Question:
        """Turn a template result into a Question with shuffled options."""
        opts = self._build_options(result)
        return Question(
            id=self._new_id(),
            signature=result.signature_base,
            level=level,
            subject=subject,
            question_text=result.question_text,
            options=opts.options,
            correct_index=opts.correct_index,
            explanation=result.explanation,
            diagram=result.diagram,
            origin=QuestionOrigin.GENERATED,
        )

    def _build_options(self, result: TemplateResult) -> OptionSet:
        if result.is_string_answer:
            return string_options(self.rng, result.answer, result.other_options)
        return numeric_options(self.rng, result.answer, result.spread)

    def _new_id(self) -> str:
        return f"{self.clock()}-{random_token(self.rng)}"

    # ========================================
    # Batches
    # ========================================

    def generate_question_batch(
        self,
        level: Level,
        subject: Subject,
        count: int,
        excluded_signatures: Iterable[str] | None = None,
    ) -> BatchResult:
        """
        Generate `count` questions with signatures outside `excluded_signatures`.

        Args:
            level: Education level
            subject: Subject within the level
            count: Exact number of questions to return
            excluded_signatures: Signatures the user has already seen (not mutated)

        Returns:
            BatchResult with exactly `count` questions. mastery_reached is True
            when the retry budget ran out; the filler questions added after that
            carry a FILLER_MARKER suffix on their signature.
        """
        if count <= 0:
            return BatchResult()

        seen = set(excluded_signatures or ())
        questions: list[Question] = []
        attempts_left = count * self.attempts_per_question

        while len(questions) < count and attempts_left > 0:
            attempts_left -= 1
            question = self.generate_question(level, subject)
            if question.signature not in seen:
                seen.add(question.signature)
                questions.append(question)

        mastery = False
        if len(questions) < count:
            mastery = True
            missing = count - len(questions)
            logger.info(
                f"Content exhausted for {level.value}/{subject.value}: "
                f"{len(questions)} unique of {count}, filling {missing}"
            )
            stamp = self.clock()
            for n in range(missing):
                question = self.generate_question(level, subject)
                question.signature = f"{question.signature}{FILLER_MARKER}{stamp}-{n}"
                questions.append(question)

        return BatchResult(questions=questions, mastery_reached=mastery)
