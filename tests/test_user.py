import io

from socialnet.user import User


def make_user():
    password = "password"
    return User(1, "alice", password, "alice@example.com")


def test_fields_are_stored_and_mutable():
    user = make_user()
    assert user.user_id == 1
    assert user.username == "alice"
    assert user.password == "password"
    user.email = "other@example.com"
    assert user.email == "other@example.com"


def test_user_info_omits_password():
    info = make_user().user_info()
    assert info.splitlines() == [
        "User ID: 1",
        "Username: alice",
        "Email: alice@example.com",
    ]
    assert "password" not in info


def test_display_user_info_writes_lines():
    out = io.StringIO()
    user = make_user()
    user.display_user_info(out)
    assert out.getvalue() == user.user_info() + "\n"