"""In-memory question repository for testing."""

from typing import Optional, Sequence

from stackit.domain.model import Question
from stackit.domain.repository.question import QuestionQuery, QuestionRepository
from stackit.domain.value import QuestionId, UserId


class InMemoryQuestionRepository(QuestionRepository):
    """In-memory implementation of QuestionRepository for testing."""

    def __init__(self) -> None:
        self._questions: dict[QuestionId, Question] = {}

    def _matching(self, query: Optional[QuestionQuery]) -> list[Question]:
        questions = list(self._questions.values())
        if query is None:
            return questions

        if query.tag is not None:
            questions = [q for q in questions if query.tag in q.tag_names]
        if query.search:
            needle = query.search.lower()
            questions = [
                q
                for q in questions
                if needle in q.title.lower() or needle in q.content.lower()
            ]
        return questions

    async def find_by_id(self, question_id: QuestionId) -> Optional[Question]:
        """Find a question by ID."""
        return self._questions.get(question_id)

    async def find_all(self, query: QuestionQuery) -> list[Question]:
        """Find questions newest first with filtering and pagination."""
        questions = self._matching(query)
        questions.sort(key=lambda q: q.created_at, reverse=True)
        return questions[query.offset : query.offset + query.limit]

    async def find_by_ids(self, question_ids: Sequence[QuestionId]) -> list[Question]:
        """Find several questions by ID."""
        return [self._questions[i] for i in question_ids if i in self._questions]

    async def count(self, query: Optional[QuestionQuery] = None) -> int:
        """Count questions matching the query filters."""
        return len(self._matching(query))

    async def save(self, question: Question) -> Question:
        """Save a question."""
        self._questions[question.id] = question
        return question

    async def increment_views(self, question_id: QuestionId) -> None:
        """Increment views by 1."""
        question = self._questions.get(question_id)
        if question:
            self._questions[question_id] = question.model_copy(
                update={"views": question.views + 1}
            )

    async def delete(self, question_id: QuestionId) -> bool:
        """Delete a question."""
        return self._questions.pop(question_id, None) is not None

    async def count_by_authors(
        self, author_ids: Sequence[UserId]
    ) -> dict[UserId, int]:
        """Count questions per author."""
        wanted = set(author_ids)
        counts: dict[UserId, int] = {}
        for question in self._questions.values():
            if question.author_id in wanted:
                counts[question.author_id] = counts.get(question.author_id, 0) + 1
        return counts
