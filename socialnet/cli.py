"""Command-line entry point: create a sample post and print its time."""

import argparse

from socialnet.post import Post
from socialnet.user import User

PASSWORD = "password"


def main(argv: list[str] | None = None) -> int:
    """Create a demo user and post, then print the post's creation time."""
    parser = argparse.ArgumentParser(
        prog="socialnet", description="Create a sample post and print when it was made."
    )
    parser.parse_args(argv)
    password = PASSWORD
    user = User(1, "Rayyan", password, "rayyan@example.com")
    post = Post(1, "Hello", user)
    print(post.timestamp_text())
    return 0