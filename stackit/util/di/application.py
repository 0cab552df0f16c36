"""Application layer DI providers."""

from dishka import Scope, provide

from stackit.application.usecase.admin import (
    BanUserUseCase,
    GetStatsUseCase,
    ListModerationAnswersUseCase,
    ListModerationQuestionsUseCase,
    ListUsersUseCase,
    UpdateUserRoleUseCase,
)
from stackit.application.usecase.answer import (
    AcceptAnswerUseCase,
    DeleteAnswerUseCase,
    PostAnswerUseCase,
    UpdateAnswerUseCase,
)
from stackit.application.usecase.auth import (
    GetCurrentUserUseCase,
    LoginUseCase,
    RegisterUseCase,
)
from stackit.application.usecase.comment import PostCommentUseCase
from stackit.application.usecase.notification import (
    ListNotificationsUseCase,
    MarkAllReadUseCase,
    MarkReadUseCase,
)
from stackit.application.usecase.question import (
    DeleteQuestionUseCase,
    GetQuestionUseCase,
    ListQuestionsUseCase,
    PostQuestionUseCase,
    UpdateQuestionUseCase,
)
from stackit.application.usecase.tag import ListTagsUseCase, SearchTagsUseCase
from stackit.application.usecase.user import (
    GetMyProfileUseCase,
    GetUserProfileUseCase,
    SearchUsersUseCase,
)
from stackit.application.usecase.vote import CastVoteUseCase
from stackit.domain.service import (
    AnswerService,
    AuthService,
    CommentService,
    JWTService,
    NotificationResolver,
    NotificationService,
    QuestionService,
    TagService,
    UserService,
    VoteService,
)
from stackit.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    scope = Scope.REQUEST

    # Auth use cases
    @provide
    def get_register_use_case(
        self, auth_service: AuthService, jwt_service: JWTService
    ) -> RegisterUseCase:
        """Provide register use case."""
        return RegisterUseCase(auth_service=auth_service, jwt_service=jwt_service)

    @provide
    def get_login_use_case(
        self, auth_service: AuthService, jwt_service: JWTService
    ) -> LoginUseCase:
        """Provide login use case."""
        return LoginUseCase(auth_service=auth_service, jwt_service=jwt_service)

    @provide
    def get_current_user_use_case(
        self, jwt_service: JWTService, user_service: UserService
    ) -> GetCurrentUserUseCase:
        """Provide get current user use case."""
        return GetCurrentUserUseCase(jwt_service=jwt_service, user_service=user_service)

    # Question use cases
    @provide
    def get_post_question_use_case(
        self,
        user_service: UserService,
        question_service: QuestionService,
        notification_resolver: NotificationResolver,
    ) -> PostQuestionUseCase:
        """Provide post question use case."""
        return PostQuestionUseCase(
            user_service=user_service,
            question_service=question_service,
            notification_resolver=notification_resolver,
        )

    @provide
    def get_get_question_use_case(
        self,
        question_service: QuestionService,
        answer_service: AnswerService,
        comment_service: CommentService,
        vote_service: VoteService,
    ) -> GetQuestionUseCase:
        """Provide get question use case."""
        return GetQuestionUseCase(
            question_service=question_service,
            answer_service=answer_service,
            comment_service=comment_service,
            vote_service=vote_service,
        )

    @provide
    def get_list_questions_use_case(
        self,
        question_service: QuestionService,
        answer_service: AnswerService,
        vote_service: VoteService,
    ) -> ListQuestionsUseCase:
        """Provide list questions use case."""
        return ListQuestionsUseCase(
            question_service=question_service,
            answer_service=answer_service,
            vote_service=vote_service,
        )

    @provide
    def get_update_question_use_case(
        self, user_service: UserService, question_service: QuestionService
    ) -> UpdateQuestionUseCase:
        """Provide update question use case."""
        return UpdateQuestionUseCase(
            user_service=user_service, question_service=question_service
        )

    @provide
    def get_delete_question_use_case(
        self,
        user_service: UserService,
        question_service: QuestionService,
        answer_service: AnswerService,
        comment_service: CommentService,
        vote_service: VoteService,
        notification_service: NotificationService,
    ) -> DeleteQuestionUseCase:
        """Provide delete question use case."""
        return DeleteQuestionUseCase(
            user_service=user_service,
            question_service=question_service,
            answer_service=answer_service,
            comment_service=comment_service,
            vote_service=vote_service,
            notification_service=notification_service,
        )

    # Answer use cases
    @provide
    def get_post_answer_use_case(
        self,
        user_service: UserService,
        question_service: QuestionService,
        answer_service: AnswerService,
        notification_resolver: NotificationResolver,
    ) -> PostAnswerUseCase:
        """Provide post answer use case."""
        return PostAnswerUseCase(
            user_service=user_service,
            question_service=question_service,
            answer_service=answer_service,
            notification_resolver=notification_resolver,
        )

    @provide
    def get_accept_answer_use_case(
        self, user_service: UserService, answer_service: AnswerService
    ) -> AcceptAnswerUseCase:
        """Provide accept answer use case."""
        return AcceptAnswerUseCase(
            user_service=user_service, answer_service=answer_service
        )

    @provide
    def get_update_answer_use_case(
        self, user_service: UserService, answer_service: AnswerService
    ) -> UpdateAnswerUseCase:
        """Provide update answer use case."""
        return UpdateAnswerUseCase(
            user_service=user_service, answer_service=answer_service
        )

    @provide
    def get_delete_answer_use_case(
        self,
        user_service: UserService,
        answer_service: AnswerService,
        comment_service: CommentService,
        vote_service: VoteService,
        notification_service: NotificationService,
    ) -> DeleteAnswerUseCase:
        """Provide delete answer use case."""
        return DeleteAnswerUseCase(
            user_service=user_service,
            answer_service=answer_service,
            comment_service=comment_service,
            vote_service=vote_service,
            notification_service=notification_service,
        )

    # Comment use cases
    @provide
    def get_post_comment_use_case(
        self,
        user_service: UserService,
        answer_service: AnswerService,
        comment_service: CommentService,
        notification_resolver: NotificationResolver,
    ) -> PostCommentUseCase:
        """Provide post comment use case."""
        return PostCommentUseCase(
            user_service=user_service,
            answer_service=answer_service,
            comment_service=comment_service,
            notification_resolver=notification_resolver,
        )

    # Vote use cases
    @provide
    def get_cast_vote_use_case(
        self, user_service: UserService, vote_service: VoteService
    ) -> CastVoteUseCase:
        """Provide cast vote use case."""
        return CastVoteUseCase(user_service=user_service, vote_service=vote_service)

    # Notification use cases
    @provide
    def get_list_notifications_use_case(
        self, notification_service: NotificationService
    ) -> ListNotificationsUseCase:
        """Provide list notifications use case."""
        return ListNotificationsUseCase(notification_service=notification_service)

    @provide
    def get_mark_read_use_case(
        self, notification_service: NotificationService
    ) -> MarkReadUseCase:
        """Provide mark notification read use case."""
        return MarkReadUseCase(notification_service=notification_service)

    @provide
    def get_mark_all_read_use_case(
        self, notification_service: NotificationService
    ) -> MarkAllReadUseCase:
        """Provide mark all notifications read use case."""
        return MarkAllReadUseCase(notification_service=notification_service)

    # Tag use cases
    @provide
    def get_list_tags_use_case(self, tag_service: TagService) -> ListTagsUseCase:
        """Provide list tags use case."""
        return ListTagsUseCase(tag_service=tag_service)

    @provide
    def get_search_tags_use_case(self, tag_service: TagService) -> SearchTagsUseCase:
        """Provide search tags use case."""
        return SearchTagsUseCase(tag_service=tag_service)

    # User use cases
    @provide
    def get_user_profile_use_case(
        self,
        user_service: UserService,
        question_service: QuestionService,
        answer_service: AnswerService,
    ) -> GetUserProfileUseCase:
        """Provide get user profile use case."""
        return GetUserProfileUseCase(
            user_service=user_service,
            question_service=question_service,
            answer_service=answer_service,
        )

    @provide
    def get_my_profile_use_case(
        self,
        user_service: UserService,
        question_service: QuestionService,
        answer_service: AnswerService,
        vote_service: VoteService,
    ) -> GetMyProfileUseCase:
        """Provide get own profile use case."""
        return GetMyProfileUseCase(
            user_service=user_service,
            question_service=question_service,
            answer_service=answer_service,
            vote_service=vote_service,
        )

    @provide
    def get_search_users_use_case(self, user_service: UserService) -> SearchUsersUseCase:
        """Provide search users use case."""
        return SearchUsersUseCase(user_service=user_service)

    # Admin use cases
    @provide
    def get_stats_use_case(
        self,
        user_service: UserService,
        question_service: QuestionService,
        answer_service: AnswerService,
        vote_service: VoteService,
    ) -> GetStatsUseCase:
        """Provide admin stats use case."""
        return GetStatsUseCase(
            user_service=user_service,
            question_service=question_service,
            answer_service=answer_service,
            vote_service=vote_service,
        )

    @provide
    def get_update_user_role_use_case(
        self, user_service: UserService
    ) -> UpdateUserRoleUseCase:
        """Provide update user role use case."""
        return UpdateUserRoleUseCase(user_service=user_service)

    @provide
    def get_ban_user_use_case(self, user_service: UserService) -> BanUserUseCase:
        """Provide ban user use case."""
        return BanUserUseCase(user_service=user_service)

    @provide
    def get_list_users_use_case(
        self,
        user_service: UserService,
        question_service: QuestionService,
        answer_service: AnswerService,
        vote_service: VoteService,
    ) -> ListUsersUseCase:
        """Provide admin user listing use case."""
        return ListUsersUseCase(
            user_service=user_service,
            question_service=question_service,
            answer_service=answer_service,
            vote_service=vote_service,
        )

    @provide
    def get_list_moderation_questions_use_case(
        self,
        user_service: UserService,
        question_service: QuestionService,
        answer_service: AnswerService,
        vote_service: VoteService,
    ) -> ListModerationQuestionsUseCase:
        """Provide admin question listing use case."""
        return ListModerationQuestionsUseCase(
            user_service=user_service,
            question_service=question_service,
            answer_service=answer_service,
            vote_service=vote_service,
        )

    @provide
    def get_list_moderation_answers_use_case(
        self,
        user_service: UserService,
        question_service: QuestionService,
        answer_service: AnswerService,
        vote_service: VoteService,
    ) -> ListModerationAnswersUseCase:
        """Provide admin answer listing use case."""
        return ListModerationAnswersUseCase(
            user_service=user_service,
            question_service=question_service,
            answer_service=answer_service,
            vote_service=vote_service,
        )
