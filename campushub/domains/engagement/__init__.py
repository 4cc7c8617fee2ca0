from campushub.domains.engagement.entities import Like, LikeResult, LikeSummary
from campushub.domains.engagement.schemas import LikeToggleResponse, LikeResponse, LikeSummaryResponse

__all__ = [
    "Like", "LikeResult", "LikeSummary",
    "LikeToggleResponse", "LikeResponse", "LikeSummaryResponse"
]
