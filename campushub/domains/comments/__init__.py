from campushub.domains.comments.entities import (
    CommentNode, CommentTree, CommentPolicy, COMMENT_POLICIES
)
from campushub.domains.comments.schemas import (
    CommentCreate, CommentAuthor, CommentResponse, CommentThreadNode, CommentThreadResponse
)

__all__ = [
    "CommentNode", "CommentTree", "CommentPolicy", "COMMENT_POLICIES",
    "CommentCreate", "CommentAuthor", "CommentResponse", "CommentThreadNode",
    "CommentThreadResponse"
]
