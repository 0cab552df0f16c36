"""Content validation rules for questions, answers and comments."""

from typing import Optional, Sequence

from pydantic import ValidationError as PydanticValidationError

from stackit.config import ContentSettings
from stackit.domain.error import ValidationError
from stackit.domain.value import TagName

from .base import Service


class ContentPolicy(Service):
    """Checks user content against the configured length rules.

    Lengths are measured on the trimmed text.
    """

    def __init__(self, content_settings: ContentSettings) -> None:
        self.settings = content_settings

    def check_title(self, title: str) -> str:
        """Validate a question title and return it trimmed."""
        title = title.strip()
        if len(title) < self.settings.question_title_min_length:
            raise ValidationError("title", "Title is required")
        if len(title) > self.settings.question_title_max_length:
            raise ValidationError(
                "title",
                "Title must be at most "
                f"{self.settings.question_title_max_length} characters",
            )
        return title

    def check_question_content(self, content: str) -> str:
        """Validate a question body."""
        if len(content.strip()) < self.settings.question_content_min_length:
            raise ValidationError("content", "Description is required")
        return content

    def check_tags(self, tags: Sequence[str]) -> list[TagName]:
        """Normalize tag names, dropping duplicates.

        Raises:
            ValidationError: If a tag is malformed or there are too many
        """
        names: list[TagName] = []
        for raw in tags:
            try:
                name = TagName(raw)
            except PydanticValidationError:
                raise ValidationError("tags", f"Invalid tag name: {raw!r}")
            if name not in names:
                names.append(name)

        if len(names) > self.settings.question_max_tags:
            raise ValidationError(
                "tags", f"At most {self.settings.question_max_tags} tags are allowed"
            )
        return names

    def check_question(
        self, title: str, content: str, tags: Optional[Sequence[str]] = None
    ) -> tuple[str, str, list[TagName]]:
        """Validate a whole question.

        Returns:
            Trimmed title, content and normalized tag names
        """
        return (
            self.check_title(title),
            self.check_question_content(content),
            self.check_tags(tags or []),
        )

    def check_answer(self, content: str) -> str:
        """Validate an answer body."""
        if len(content.strip()) < self.settings.answer_min_length:
            raise ValidationError(
                "content",
                f"Answer must be at least {self.settings.answer_min_length} characters",
            )
        return content

    def check_comment(self, content: str) -> str:
        """Validate a comment and return it trimmed."""
        content = content.strip()
        if not (
            self.settings.comment_min_length
            <= len(content)
            <= self.settings.comment_max_length
        ):
            raise ValidationError(
                "content",
                f"Comment must be between {self.settings.comment_min_length} and "
                f"{self.settings.comment_max_length} characters",
            )
        return content
