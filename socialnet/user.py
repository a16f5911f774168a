"""Users of the network."""

import sys
from dataclasses import dataclass
from typing import TextIO


@dataclass
class User:
    """A registered account."""

    user_id: int
    username: str
    password: str
    email: str

    def user_info(self) -> str:
        """Return the public details of the user, one per line."""
        return "\n".join(
            [
                f"User ID: {self.user_id}",
                f"Username: {self.username}",
                f"Email: {self.email}",
            ]
        )

    def display_user_info(self, out: TextIO | None = None) -> None:
        """Write the public details of the user to ``out`` (stdout by default)."""
        print(self.user_info(), file=out or sys.stdout)