"""
Hybrid Session Builder.

Blends curated question bank rows with procedurally generated questions:

1. Read the user's full answer history -> used signatures
2. Query the curated store for unseen active rows (failure -> empty, not fatal)
3. Map rows to Questions
4. Top up with generated questions that avoid used + curated signatures
5. Shuffle curated and generated items together

Any unexpected failure degrades the whole call to a pure procedural batch,
so a session of the requested size is always produced while the generator
itself works.
"""
from __future__ import annotations

from collections.abc import Sequence
from enum import Enum

from loguru import logger

from config import Settings, get_settings
from olympiad.core.errors import StoreError
from olympiad.core.models import CuratedRow, Level, Question, QuizSession, Subject
from olympiad.core.random_source import RandomSource, make_rng, shuffled
from olympiad.curated.mapper import IssueCallback, map_curated_row
from olympiad.curated.validator import CurationIssue, IssueCode, validate_curated_row
from olympiad.generation.generator import BatchResult, ProceduralGenerator
from olympiad.generation.templates import is_generated_signature
from olympiad.stores.base import CuratedStore, HistoryStore


class ExclusionScope(str, Enum):
    """Which seen signatures are passed to the curated store as exclusions."""

    ALL_SIGNATURES = "all"  # superset: generated signatures simply never match
    CURATED_ONLY = "curated"  # drop signatures produced by templates


class HybridSessionBuilder:
    """
    Builds quiz sessions from a curated store plus the procedural generator.

    Stateless between calls: concurrent fetch_session calls for different
    users are safe as long as the stores are.
    """

    def __init__(
        self,
        history_store: HistoryStore,
        curated_store: CuratedStore,
        generator: ProceduralGenerator | None = None,
        rng: RandomSource | None = None,
        exclusion_scope: ExclusionScope = ExclusionScope.ALL_SIGNATURES,
        on_curation_issue: IssueCallback | None = None,
    ):
        """
        Initialize builder.

        Args:
            history_store: Source of the user's answered signatures
            curated_store: Question bank (read-only)
            generator: Procedural generator (defaults to one sharing `rng`)
            rng: Random source for the final shuffle
            exclusion_scope: Signatures sent to the curated store as exclusions
            on_curation_issue: Receives malformed-row reports for curator review
        """
        self.rng = rng or make_rng()
        self.history_store = history_store
        self.curated_store = curated_store
        self.generator = generator or ProceduralGenerator(rng=self.rng)
        self.exclusion_scope = exclusion_scope
        self.on_curation_issue = on_curation_issue

    @classmethod
    def from_settings(cls, settings: Settings | None = None, **overrides) -> HybridSessionBuilder:
        """Build a builder with stores and generator configured from settings."""
        from olympiad.stores.factory import build_stores

        settings = settings or get_settings()
        stores = build_stores(settings)
        rng = make_rng(settings.random_seed)
        kwargs = {
            "history_store": stores.history,
            "curated_store": stores.curated,
            "generator": ProceduralGenerator(
                rng=rng, attempts_per_question=settings.generation_attempts_per_question
            ),
            "rng": rng,
            "exclusion_scope": ExclusionScope(settings.exclusion_scope),
        }
        kwargs.update(overrides)
        return cls(**kwargs)

    # ========================================
    # Session API
    # ========================================

    def fetch_session(self, level: Level, subject: Subject, count: int, user_id: str) -> QuizSession:
        """
        Build a session of exactly `count` questions for a user.

        Returns:
            QuizSession whose mastery_reached mirrors the generator's exhaustion
            signal (False when no generation was needed).
        """
        if count <= 0:
            return QuizSession(questions=[])

        try:
            return self._build(level, subject, count, user_id)
        except Exception as e:  # Intentionally broad - content delivery must not fail
            if isinstance(e, StoreError):
                logger.warning(f"Hybrid engine: store failure for {user_id}, falling back to generator: {e}")
            else:
                logger.exception(f"Hybrid engine: unexpected error for {user_id}, falling back to generator")
            batch = self.generator.generate_question_batch(level, subject, count)
            return QuizSession(
                questions=batch.questions,
                mastery_reached=batch.mastery_reached,
                generated_count=len(batch.questions),
                degraded=True,
            )

    def _build(self, level: Level, subject: Subject, count: int, user_id: str) -> QuizSession:
        # Step 1: every signature the user has ever answered
        history = self.history_store.fetch_history(user_id)
        used_signatures = {entry.question_signature for entry in history}
        logger.debug(f"History for {user_id}: {len(used_signatures)} seen signatures")

        # Step 2-3: unseen curated rows
        rows, degraded = self._query_curated(level, subject, count, used_signatures)
        curated = self._map_rows(rows, used_signatures, count)

        # Step 4-5: top up with generated questions
        remaining = count - len(curated)
        batch = BatchResult()
        if remaining > 0:
            excluded = used_signatures | {q.signature for q in curated}
            batch = self.generator.generate_question_batch(level, subject, remaining, excluded)

        # Step 6: interleave
        questions = shuffled(self.rng, curated + batch.questions)
        logger.info(
            f"Session for {user_id} {level.value}/{subject.value}: "
            f"{len(curated)} curated + {len(batch.questions)} generated"
            + (" (mastery)" if batch.mastery_reached else "")
        )
        return QuizSession(
            questions=questions,
            mastery_reached=batch.mastery_reached,
            curated_count=len(curated),
            generated_count=len(batch.questions),
            degraded=degraded,
        )

    # ========================================
    # Curated path
    # ========================================

    def curated_exclusions(self, used_signatures: set[str]) -> set[str]:
        if self.exclusion_scope is ExclusionScope.CURATED_ONLY:
            return {s for s in used_signatures if not is_generated_signature(s)}
        return set(used_signatures)

    def _query_curated(
        self,
        level: Level,
        subject: Subject,
        count: int,
        used_signatures: set[str],
    ) -> tuple[Sequence[CuratedRow], bool]:
        """Query the curated store; any failure yields an empty result and degraded=True."""
        try:
            rows = self.curated_store.query_active_questions(
                level, subject, self.curated_exclusions(used_signatures), count
            )
            return rows, False
        except Exception as e:  # Intentionally broad - the curated store is optional
            logger.warning(f"Hybrid engine: question bank query failed, using generator only: {e}")
            return [], True

    def _map_rows(self, rows: Sequence[CuratedRow], used_signatures: set[str], count: int) -> list[Question]:
        questions: list[Question] = []
        taken: set[str] = set()

        for row in rows:
            if len(questions) >= count:
                break
            if row.id in used_signatures or row.id in taken:
                continue
            try:
                question = map_curated_row(row, on_mismatch=self.on_curation_issue)
            except Exception as e:  # Intentionally broad - one bad row must not discard the others
                logger.warning(f"Skipping unusable curated question {row.id}: {e}")
                self._report_unusable(row, str(e))
                continue
            taken.add(question.signature)
            questions.append(question)

        return questions

    def _report_unusable(self, row: CuratedRow, reason: str) -> None:
        if self.on_curation_issue is None:
            return
        try:
            issues = [i for i in validate_curated_row(row) if i.code is not IssueCode.ANSWER_NOT_IN_OPTIONS]
        except Exception as e:  # Intentionally broad - reporting is best effort
            logger.warning(f"Could not validate curated question {row.id}: {e}")
            issues = []
        for issue in issues or [CurationIssue(row.id, IssueCode.UNMAPPABLE_ROW, reason)]:
            self.on_curation_issue(issue)
