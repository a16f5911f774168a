"""Posts written by users."""

from dataclasses import dataclass, field

from socialnet.clock import format_timestamp, now
from socialnet.user import User


@dataclass
class Post:
    """A piece of content published by a user."""

    post_id: int
    content: str
    author: User
    timestamp: int = field(default_factory=now)
    likes: int = 0

    def timestamp_text(self) -> str:
        """Return the creation time in ``ctime`` layout."""
        return format_timestamp(self.timestamp)

    def increment_likes(self) -> None:
        """Add one like."""
        self.likes += 1

    def decrement_likes(self) -> None:
        """Remove one like."""
        self.likes -= 1