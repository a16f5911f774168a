"""In-memory users, posts, comments, notifications and friendships for a small social network."""

__version__ = "0.1.0"