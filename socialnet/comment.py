"""Comments left on posts."""

from dataclasses import dataclass, field

from socialnet.clock import format_timestamp, now
from socialnet.post import Post
from socialnet.user import User


@dataclass
class Comment:
    """A user's reply to a post."""

    comment_id: int
    text: str
    user: User
    post: Post
    timestamp: int = field(default_factory=now)

    def timestamp_text(self) -> str:
        """Return the creation time in ``ctime`` layout."""
        return format_timestamp(self.timestamp)