"""Notifications delivered to users."""

import sys
from dataclasses import dataclass, field
from typing import TextIO

from socialnet.clock import format_timestamp, now
from socialnet.user import User


@dataclass
class Notification:
    """A message sent to a list of recipients."""

    message: str
    notification_id: int | None = None
    recipients: list[User] = field(default_factory=list)
    timestamp: int = field(default_factory=now)

    def add_recipient(self, user: User) -> None:
        """Append a user to the recipients."""
        self.recipients.append(user)

    def remove_recipient(self, user: User) -> None:
        """Remove the first occurrence of exactly this user, if present."""
        position = next(
            (i for i, recipient in enumerate(self.recipients) if recipient is user),
            None,
        )
        if position is not None:
            del self.recipients[position]

    def recipient_names(self) -> list[str]:
        """Return the usernames of the recipients in order."""
        return [recipient.username for recipient in self.recipients]

    def print_recipients(self, out: TextIO | None = None) -> None:
        """Write one recipient username per line."""
        stream = out or sys.stdout
        for name in self.recipient_names():
            print(name, file=stream)

    def timestamp_text(self) -> str:
        """Return the creation time in ``ctime`` layout."""
        return format_timestamp(self.timestamp)

    def messages(self) -> list[str]:
        """Return the delivery line for each recipient."""
        return [
            f"Sending notification to {recipient.username}: {self.message}"
            for recipient in self.recipients
        ]

    def send_notification(self, out: TextIO | None = None) -> None:
        """Deliver the message to every recipient."""
        stream = out or sys.stdout
        for line in self.messages():
            print(line, file=stream)