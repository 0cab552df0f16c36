"""Comment use cases."""

from .post_comment import CommentResponse, PostCommentRequest, PostCommentUseCase

__all__ = ["CommentResponse", "PostCommentRequest", "PostCommentUseCase"]
