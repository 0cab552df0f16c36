"""Question domain service."""

from datetime import datetime
from typing import Optional, Sequence
from uuid import uuid4

import logfire

from stackit.domain.error import NotFoundError
from stackit.domain.model import Question, User
from stackit.domain.repository import QuestionQuery, QuestionRepository
from stackit.domain.value import QuestionId, UserId

from .base import Service, ensure_author_or_admin
from .content_policy import ContentPolicy
from .tag_service import TagService


class QuestionService(Service):
    """Domain service for question operations."""

    def __init__(
        self,
        question_repository: QuestionRepository,
        tag_service: TagService,
        content_policy: ContentPolicy,
    ) -> None:
        """Initialize question service.

        Args:
            question_repository: Question repository
            tag_service: Tag domain service (tags are created on first use)
            content_policy: Content validation rules
        """
        self.question_repository = question_repository
        self.tag_service = tag_service
        self.content_policy = content_policy

    async def create_question(
        self, author: User, title: str, content: str, tags: Sequence[str]
    ) -> Question:
        """Validate and store a new question.

        Args:
            author: Asking user
            title: Question title
            content: Question body (plain text or HTML)
            tags: Tag names, normalized to lowercase

        Returns:
            Created question

        Raises:
            ValidationError: If title, content or tags break a content rule
        """
        with logfire.span(
            "question_service.create_question", author_id=str(author.id)
        ):
            title, content, tag_names = self.content_policy.check_question(
                title, content, tags
            )
            await self.tag_service.ensure_tags(tag_names)

            now = datetime.now()
            question = Question(
                id=QuestionId(uuid4()),
                author_id=author.id,
                author_username=author.username,
                title=title,
                content=content,
                tag_names=tag_names,
                views=0,
                created_at=now,
                updated_at=now,
            )
            saved = await self.question_repository.save(question)
            logfire.info(
                "Question created",
                question_id=str(saved.id),
                tags=[t.root for t in tag_names],
            )
            return saved

    async def get_question(self, question_id: QuestionId) -> Question:
        """Get a question by ID.

        Raises:
            NotFoundError: If question not found
        """
        with logfire.span("question_service.get_question", question_id=str(question_id)):
            question = await self.question_repository.find_by_id(question_id)
            if not question:
                logfire.warn("Question not found", question_id=str(question_id))
                raise NotFoundError("Question", str(question_id))
            return question

    async def record_view(self, question_id: QuestionId) -> None:
        """Count one view of a question."""
        await self.question_repository.increment_views(question_id)

    async def list_questions(self, query: QuestionQuery) -> tuple[list[Question], int]:
        """List questions newest first.

        Returns:
            The requested page and the total number of matches
        """
        with logfire.span(
            "question_service.list_questions",
            search=query.search,
            tag=query.tag.root if query.tag else None,
            limit=query.limit,
            offset=query.offset,
        ):
            questions = await self.question_repository.find_all(query)
            total = await self.question_repository.count(query)
            logfire.info("Questions listed", count=len(questions), total=total)
            return questions, total

    async def update_question(
        self,
        actor: User,
        question_id: QuestionId,
        title: Optional[str] = None,
        content: Optional[str] = None,
        tags: Optional[Sequence[str]] = None,
    ) -> Question:
        """Edit a question. Omitted fields keep their value.

        Raises:
            NotFoundError: If question not found
            NotAuthorizedError: If actor is neither the author nor an admin
            ValidationError: If a new value breaks a content rule
        """
        with logfire.span(
            "question_service.update_question",
            question_id=str(question_id),
            actor_id=str(actor.id),
        ):
            question = await self.get_question(question_id)
            ensure_author_or_admin(
                actor, question.author_id, "update", "question", str(question_id)
            )

            changes: dict = {"updated_at": datetime.now()}
            if title is not None:
                changes["title"] = self.content_policy.check_title(title)
            if content is not None:
                changes["content"] = self.content_policy.check_question_content(content)
            if tags is not None:
                tag_names = self.content_policy.check_tags(tags)
                await self.tag_service.ensure_tags(tag_names)
                changes["tag_names"] = tag_names

            saved = await self.question_repository.save(question.model_copy(update=changes))
            logfire.info(
                "Question updated",
                question_id=str(question_id),
                fields=sorted(k for k in changes if k != "updated_at"),
            )
            return saved

    async def delete_question(self, question_id: QuestionId) -> None:
        """Delete a question row. Callers remove dependent content first."""
        with logfire.span("question_service.delete_question", question_id=str(question_id)):
            if not await self.question_repository.delete(question_id):
                raise NotFoundError("Question", str(question_id))
            logfire.info("Question deleted", question_id=str(question_id))

    async def count_questions(self) -> int:
        """Count all questions."""
        return await self.question_repository.count()

    async def get_questions(
        self, question_ids: Sequence[QuestionId]
    ) -> dict[QuestionId, Question]:
        """Load several questions at once, keyed by ID. Unknown IDs are left out."""
        if not question_ids:
            return {}
        questions = await self.question_repository.find_by_ids(question_ids)
        return {question.id: question for question in questions}

    async def count_by_authors(self, author_ids: Sequence[UserId]) -> dict[UserId, int]:
        """Count questions asked per user."""
        if not author_ids:
            return {}
        return await self.question_repository.count_by_authors(author_ids)
