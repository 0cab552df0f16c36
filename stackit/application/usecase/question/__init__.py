"""Question use cases."""

from .delete_question import DeleteQuestionRequest, DeleteQuestionUseCase, DeleteResponse
from .get_question import (
    AnswerDetail,
    GetQuestionRequest,
    GetQuestionResponse,
    GetQuestionUseCase,
)
from .list_questions import (
    ListQuestionsRequest,
    ListQuestionsResponse,
    ListQuestionsUseCase,
    Pagination,
    QuestionSummary,
)
from .post_question import PostQuestionRequest, PostQuestionUseCase, QuestionResponse
from .update_question import UpdateQuestionRequest, UpdateQuestionUseCase

__all__ = [
    "AnswerDetail",
    "DeleteQuestionRequest",
    "DeleteQuestionUseCase",
    "DeleteResponse",
    "GetQuestionRequest",
    "GetQuestionResponse",
    "GetQuestionUseCase",
    "ListQuestionsRequest",
    "ListQuestionsResponse",
    "ListQuestionsUseCase",
    "Pagination",
    "PostQuestionRequest",
    "PostQuestionUseCase",
    "QuestionResponse",
    "QuestionSummary",
    "UpdateQuestionRequest",
    "UpdateQuestionUseCase",
]
