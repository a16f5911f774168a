"""Friendship relationships between users."""

import copy
import enum
import sys
from dataclasses import dataclass, field
from typing import TextIO

from socialnet.clock import format_timestamp, now
from socialnet.user import User


class RelationshipStatus(str, enum.Enum):
    """State of a friendship."""

    PENDING = "pending"
    ACCEPTED = "accepted"
    REJECTED = "rejected"
    BLOCKED = "blocked"

    def __str__(self) -> str:
        return self.value


@dataclass
class Relationship:
    """A friendship between two users; each user is held as a snapshot copy."""

    relationship_id: int
    user1: User
    user2: User
    status: RelationshipStatus
    timestamp: int = field(default_factory=now)

    def __post_init__(self) -> None:
        self.user1 = copy.copy(self.user1)
        self.user2 = copy.copy(self.user2)
        self.status = RelationshipStatus(self.status)

    def timestamp_text(self) -> str:
        """Return the creation time in ``ctime`` layout."""
        return format_timestamp(self.timestamp)

    def _announce(self, status: RelationshipStatus, text: str, out: TextIO | None) -> None:
        self.status = status
        print(text, file=out or sys.stdout)

    def send_request(self, out: TextIO | None = None) -> None:
        """Mark the friendship as requested."""
        self._announce(
            RelationshipStatus.PENDING,
            f"Friendship request sent from {self.user1.username} to {self.user2.username}",
            out,
        )

    def accept_request(self, out: TextIO | None = None) -> None:
        """Mark the friendship as accepted."""
        self._announce(
            RelationshipStatus.ACCEPTED,
            f"Friendship request accepted between {self.user1.username} and {self.user2.username}",
            out,
        )

    def reject_request(self, out: TextIO | None = None) -> None:
        """Mark the friendship as rejected."""
        self._announce(
            RelationshipStatus.REJECTED,
            f"Friendship request rejected between {self.user1.username} and {self.user2.username}",
            out,
        )

    def details(self) -> str:
        """Return the relationship details, one per line."""
        return "\n".join(
            [
                f"Relationship ID: {self.relationship_id}",
                f"User 1: {self.user1.username}",
                f"User 2: {self.user2.username}",
                f"Status: {self.status}",
                f"Timestamp: {self.timestamp_text()}",
            ]
        )

    def display_relationship_details(self, out: TextIO | None = None) -> None:
        """Write the relationship details followed by a blank line."""
        print(self.details() + "\n", file=out or sys.stdout)