# socialnet

A small, dependency-free in-memory model of a social network.

## What it provides

- `socialnet.user.User`: an account with `user_id`, `username`, `password`
  and `email`. `user_info()` returns the id, username and e-mail address on
  three lines; `display_user_info(out)` prints them to `out` (stdout by
  default).
- `socialnet.post.Post`: content written by a user (`post_id`, `content`,
  `author`), with a `timestamp` taken when the post is created and a `likes`
  counter starting at 0. `increment_likes()` and `decrement_likes()` change
  the counter by one.
- `socialnet.comment.Comment`: text left by a user on a post (`comment_id`,
  `text`, `user`, `post`, `timestamp`).
- `socialnet.notification.Notification`: a `message` with an optional
  `notification_id` and a list of `recipients`.
  - `add_recipient(user)` appends a user; `remove_recipient(user)` removes the
    first entry that is that very same object, and does nothing if there is
    none.
  - `recipient_names()` lists the recipients' usernames;
    `print_recipients(out)` prints one per line.
  - `messages()` returns one `Sending notification to <username>: <message>`
    line per recipient; `send_notification(out)` prints them.
- `socialnet.relationship.Relationship`: a friendship between `user1` and
  `user2`, with a `relationship_id`, a `status` and a `timestamp`. Both users
  are stored as copies taken when the relationship is made, so later changes
  to the original `User` objects are not seen. The status is a
  `RelationshipStatus` (`pending`, `accepted`, `rejected`, `blocked`); plain
  strings with those values are accepted and converted.
  - `send_request(out)`, `accept_request(out)` and `reject_request(out)` set
    the status to pending, accepted or rejected and print a line saying so.
  - `details()` returns the id, both usernames, the status and the creation
    time; `display_relationship_details(out)` prints them followed by a blank
    line.

Every class with a timestamp has `timestamp_text()`, which renders it in the
classic `ctime` layout in local time, for example `Thu Jan  1 00:00:00 1970`.
The helpers behind this are `socialnet.clock.now()` (current epoch seconds)
and `socialnet.clock.format_timestamp(timestamp)`.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Usage

```python
import sys

from socialnet.notification import Notification
from socialnet.post import Post
from socialnet.relationship import Relationship, RelationshipStatus
from socialnet.user import User

password = "password"
alice = User(1, "alice", password, "alice@example.com")
bob = User(2, "bob", password, "bob@example.com")
alice.display_user_info(sys.stdout)

post = Post(1, "Hello", alice)
post.increment_likes()
print(post.likes, post.timestamp_text())

note = Notification("You have a new follower")
note.add_recipient(alice)
note.send_notification(sys.stdout)

friendship = Relationship(1, alice, bob, RelationshipStatus.PENDING)
friendship.accept_request(sys.stdout)
friendship.display_relationship_details(sys.stdout)
```

## Command line

```
socialnet
```

creates a sample user and post and prints the post's creation time. It takes
no options other than `--help`.

## What it does not do

Everything lives in memory only: there is no storage, no server and no
network delivery. Notifications and friendship requests are "sent" by
writing a line of text to the given stream. Identifiers are whatever the
caller passes in; nothing assigns or checks them, and passwords are kept as
given, not hashed.