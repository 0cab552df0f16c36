"""Domain layer DI providers."""

from dishka import Scope, provide

from stackit.config import (
    AuthSettings,
    ContentSettings,
    NotificationSettings,
    VotingSettings,
)
from stackit.domain.repository import (
    AnswerRepository,
    CommentRepository,
    NotificationRepository,
    QuestionRepository,
    TagRepository,
    UserRepository,
    VoteRepository,
)
from stackit.domain.service import (
    AnswerService,
    AuthService,
    CommentService,
    ContentPolicy,
    JWTService,
    NotificationResolver,
    NotificationService,
    QuestionService,
    TagService,
    UserService,
    VoteService,
)
from stackit.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_auth_service(
        self, user_repository: UserRepository, auth_settings: AuthSettings
    ) -> AuthService:
        """Provide password authentication domain service."""
        return AuthService(user_repository=user_repository, auth_settings=auth_settings)

    @provide
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_user_service(self, user_repository: UserRepository) -> UserService:
        """Provide user domain service."""
        return UserService(user_repository=user_repository)

    @provide
    def get_content_policy(self, content_settings: ContentSettings) -> ContentPolicy:
        """Provide content validation rules."""
        return ContentPolicy(content_settings=content_settings)

    @provide
    def get_tag_service(self, tag_repository: TagRepository) -> TagService:
        """Provide tag domain service."""
        return TagService(tag_repository=tag_repository)

    @provide
    def get_question_service(
        self,
        question_repository: QuestionRepository,
        tag_service: TagService,
        content_policy: ContentPolicy,
    ) -> QuestionService:
        """Provide question domain service."""
        return QuestionService(
            question_repository=question_repository,
            tag_service=tag_service,
            content_policy=content_policy,
        )

    @provide
    def get_answer_service(
        self,
        answer_repository: AnswerRepository,
        question_service: QuestionService,
        content_policy: ContentPolicy,
        voting_settings: VotingSettings,
    ) -> AnswerService:
        """Provide answer domain service."""
        return AnswerService(
            answer_repository=answer_repository,
            question_service=question_service,
            content_policy=content_policy,
            voting_settings=voting_settings,
        )

    @provide
    def get_comment_service(
        self, comment_repository: CommentRepository, content_policy: ContentPolicy
    ) -> CommentService:
        """Provide comment domain service."""
        return CommentService(
            comment_repository=comment_repository, content_policy=content_policy
        )

    @provide
    def get_vote_service(
        self,
        vote_repository: VoteRepository,
        question_service: QuestionService,
        answer_service: AnswerService,
        voting_settings: VotingSettings,
    ) -> VoteService:
        """Provide vote domain service."""
        return VoteService(
            vote_repository=vote_repository,
            question_service=question_service,
            answer_service=answer_service,
            voting_settings=voting_settings,
        )

    @provide
    def get_notification_service(
        self,
        notification_repository: NotificationRepository,
        notification_settings: NotificationSettings,
    ) -> NotificationService:
        """Provide notification domain service."""
        return NotificationService(
            notification_repository=notification_repository,
            notification_settings=notification_settings,
        )

    @provide
    def get_notification_resolver(
        self,
        user_service: UserService,
        question_service: QuestionService,
        answer_service: AnswerService,
        notification_service: NotificationService,
        notification_settings: NotificationSettings,
    ) -> NotificationResolver:
        """Provide mention and owner notification resolver."""
        return NotificationResolver(
            user_service=user_service,
            question_service=question_service,
            answer_service=answer_service,
            notification_service=notification_service,
            notification_settings=notification_settings,
        )
