"""In-memory answer repository for testing."""

from datetime import datetime
from typing import Optional, Sequence

from stackit.domain.model import Answer
from stackit.domain.repository import AnswerRepository
from stackit.domain.value import AnswerId, QuestionId, UserId


class InMemoryAnswerRepository(AnswerRepository):
    """In-memory implementation of AnswerRepository for testing."""

    def __init__(self) -> None:
        self._answers: dict[AnswerId, Answer] = {}

    async def find_by_id(self, answer_id: AnswerId) -> Optional[Answer]:
        """Find an answer by ID."""
        return self._answers.get(answer_id)

    async def find_by_question(self, question_id: QuestionId) -> list[Answer]:
        """Find a question's answers, accepted first then oldest first."""
        answers = [a for a in self._answers.values() if a.question_id == question_id]
        answers.sort(key=lambda a: (not a.is_accepted, a.created_at))
        return answers

    async def count_by_questions(
        self, question_ids: Sequence[QuestionId]
    ) -> dict[QuestionId, int]:
        """Count answers per question."""
        wanted = set(question_ids)
        counts: dict[QuestionId, int] = {}
        for answer in self._answers.values():
            if answer.question_id in wanted:
                counts[answer.question_id] = counts.get(answer.question_id, 0) + 1
        return counts

    async def find_accepted_question_ids(
        self, question_ids: Sequence[QuestionId]
    ) -> set[QuestionId]:
        """Return which of the questions have an accepted answer."""
        wanted = set(question_ids)
        return {
            a.question_id
            for a in self._answers.values()
            if a.is_accepted and a.question_id in wanted
        }

    async def save(self, answer: Answer) -> Answer:
        """Save an answer. Acceptance of existing answers is left untouched."""
        existing = self._answers.get(answer.id)
        if existing:
            answer = answer.model_copy(update={"is_accepted": existing.is_accepted})
        self._answers[answer.id] = answer
        return answer

    async def mark_accepted(
        self, answer_id: AnswerId, question_id: QuestionId
    ) -> Optional[Answer]:
        """Accept one answer and unaccept its siblings."""
        target = self._answers.get(answer_id)
        if target is None or target.question_id != question_id:
            return None

        now = datetime.now()
        for other in list(self._answers.values()):
            if other.question_id == question_id and other.is_accepted and other.id != answer_id:
                self._answers[other.id] = other.model_copy(
                    update={"is_accepted": False, "updated_at": now}
                )

        accepted = target.model_copy(update={"is_accepted": True, "updated_at": now})
        self._answers[answer_id] = accepted
        return accepted

    async def delete(self, answer_id: AnswerId) -> bool:
        """Delete an answer."""
        return self._answers.pop(answer_id, None) is not None

    async def delete_by_question(self, question_id: QuestionId) -> list[AnswerId]:
        """Delete every answer of a question."""
        deleted = [a.id for a in self._answers.values() if a.question_id == question_id]
        for answer_id in deleted:
            del self._answers[answer_id]
        return deleted

    async def count(self) -> int:
        """Count all answers."""
        return len(self._answers)

    async def find_recent(self, limit: int, offset: int = 0) -> list[Answer]:
        """Find answers newest first."""
        answers = sorted(self._answers.values(), key=lambda a: a.created_at, reverse=True)
        return answers[offset : offset + limit]

    async def count_by_authors(
        self, author_ids: Sequence[UserId]
    ) -> dict[UserId, int]:
        """Count answers per author."""
        wanted = set(author_ids)
        counts: dict[UserId, int] = {}
        for answer in self._answers.values():
            if answer.author_id in wanted:
                counts[answer.author_id] = counts.get(answer.author_id, 0) + 1
        return counts
