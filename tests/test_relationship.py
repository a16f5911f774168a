import io

import pytest

from socialnet.clock import format_timestamp
from socialnet.relationship import Relationship, RelationshipStatus
from socialnet.user import User


@pytest.fixture
def pair():
    password = "password"
    return (
        User(1, "alice", password, "alice@example.com"),
        User(2, "bob", password, "bob@example.com"),
    )


def test_status_accepts_strings(pair):
    rel = Relationship(1, *pair, "blocked")
    assert rel.status is RelationshipStatus.BLOCKED


def test_unknown_status_rejected(pair):
    with pytest.raises(ValueError):
        Relationship(1, *pair, "frenemies")


def test_users_are_copied(pair):
    rel = Relationship(1, *pair, RelationshipStatus.PENDING)
    pair[0].username = "renamed"
    assert rel.user1.username == "alice"
    assert rel.user1 is not pair[0]


def test_request_lifecycle(pair):
    rel = Relationship(1, *pair, RelationshipStatus.REJECTED)
    out = io.StringIO()
    rel.send_request(out)
    assert rel.status is RelationshipStatus.PENDING
    rel.accept_request(out)
    assert rel.status is RelationshipStatus.ACCEPTED
    rel.reject_request(out)
    assert rel.status is RelationshipStatus.REJECTED
    assert out.getvalue().splitlines() == [
        "Friendship request sent from alice to bob",
        "Friendship request accepted between alice and bob",
        "Friendship request rejected between alice and bob",
    ]


def test_details_and_display(pair):
    rel = Relationship(5, *pair, "pending", timestamp=1_000_000_000)
    lines = rel.details().splitlines()
    assert lines[0] == "Relationship ID: 5"
    assert lines[3] == "Status: pending"
    assert lines[4] == "Timestamp: " + format_timestamp(1_000_000_000)
    out = io.StringIO()
    rel.display_relationship_details(out)
    assert out.getvalue() == rel.details() + "\n\n"