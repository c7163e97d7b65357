import pytest

from app.core.exceptions import RequestValidationException
from app.domain.schemas.auth import UserLoginRequest, validate_login
from app.domain.schemas.board import BoardCreateRequest, validate_board
from app.domain.schemas.comment import CommentCreateRequest, validate_comment
from app.domain.schemas.page import PageRequest, build_page
from app.domain.schemas.user import UserSignupRequest, UserUpdateRequest, validate_signup, validate_update
from app.domain.schemas.validation import ensure_valid


def fields(violations):
    return sorted(v.field for v in violations)


def test_valid_signup_has_no_violations():
    request = UserSignupRequest(email="test@example.com", password="Abcd123!", nickname="tester1")
    assert validate_signup(request) == []


def test_signup_accepts_hangul_nickname():
    request = UserSignupRequest(email="test@example.com", password="Abcd123!", nickname="드림보드")
    assert validate_signup(request) == []


def test_signup_missing_fields():
    violations = validate_signup(UserSignupRequest())
    assert fields(violations) == ["email", "nickname", "password"]
    assert {v.message for v in violations} == {
        "Email is required.",
        "Password is required.",
        "Nickname is required.",
    }


def test_signup_blank_is_treated_as_missing():
    violations = validate_signup(UserSignupRequest(email="  ", password=" ", nickname=""))
    assert fields(violations) == ["email", "nickname", "password"]


@pytest.mark.parametrize("email", ["not-an-email", "a@", "@example.com"])
def test_signup_rejects_bad_email(email):
    request = UserSignupRequest(email=email, password="Abcd123!", nickname="tester1")
    assert fields(validate_signup(request)) == ["email"]


def test_signup_rejects_long_email():
    email = "a" * 60 + "@" + "b" * 40 + ".com"
    violations = validate_signup(UserSignupRequest(email=email, password="Abcd123!", nickname="tester1"))
    assert "Email must be at most 100 characters." in [v.message for v in violations]


@pytest.mark.parametrize(
    "password",
    [
        "Abc12!",  # too short
        "abcd123!",  # no upper
        "ABCD123!",  # no lower
        "Abcdefg!",  # no digit
        "Abcd1234",  # no special
        "Abcd 123!",  # space is not allowed
    ],
)
def test_signup_password_rules(password):
    request = UserSignupRequest(email="test@example.com", password=password, nickname="tester1")
    violations = validate_signup(request)
    assert violations
    assert set(fields(violations)) == {"password"}


def test_signup_password_at_max_length():
    request = UserSignupRequest(email="test@example.com", password="Abcdefgh12345678901!", nickname="tester1")
    assert validate_signup(request) == []


def test_signup_password_too_long():
    request = UserSignupRequest(email="test@example.com", password="Abcdefgh123456789012!", nickname="tester1")
    assert "Password must be 8 to 20 characters." in [v.message for v in validate_signup(request)]


@pytest.mark.parametrize("nickname", ["a", "a" * 21, "tester_1", "닉 네임"])
def test_signup_nickname_rules(nickname):
    request = UserSignupRequest(email="test@example.com", password="Abcd123!", nickname=nickname)
    assert set(fields(validate_signup(request))) == {"nickname"}


def test_password_not_in_repr():
    request = UserSignupRequest(email="test@example.com", password="Abcd123!", nickname="tester1")
    assert "Abcd123!" not in repr(request)
    assert "Abcd123!" not in repr(UserLoginRequest(email="test@example.com", password="Abcd123!"))


def test_login_only_checks_presence_and_format():
    assert validate_login(UserLoginRequest(email="test@example.com", password="x")) == []
    assert fields(validate_login(UserLoginRequest(email="nope", password=""))) == ["email", "password"]


def test_update_is_partial():
    assert validate_update(UserUpdateRequest()) == []
    assert validate_update(UserUpdateRequest(nickname="newnick")) == []
    assert fields(validate_update(UserUpdateRequest(password="weak"))) == ["password", "password"]


def test_board_and_comment_text_rules():
    assert validate_board(BoardCreateRequest(title="hi", content="body")) == []
    assert fields(validate_board(BoardCreateRequest(title="", content=None))) == ["content", "title"]
    assert fields(validate_board(BoardCreateRequest(title="t" * 201, content="body"))) == ["title"]
    assert validate_comment(CommentCreateRequest(content="c" * 500)) == []
    assert fields(validate_comment(CommentCreateRequest(content="c" * 501))) == ["content"]


def test_ensure_valid_raises_with_every_violation():
    with pytest.raises(RequestValidationException) as exc_info:
        ensure_valid(validate_signup(UserSignupRequest(email="bad")))
    error = exc_info.value
    assert error.status_code == 422
    assert len(error.violations) == 3
    assert {v["field"] for v in error.to_dict()["error"]["details"]["violations"]} == {
        "email",
        "password",
        "nickname",
    }


def test_build_page_rounds_total_pages_up():
    page = build_page([1, 2], total=5, page_request=PageRequest(page=2, size=2))
    assert page == {"items": [1, 2], "total": 5, "page": 2, "page_size": 2, "total_pages": 3}
    assert build_page([], 0, PageRequest())["total_pages"] == 0
    assert PageRequest(page=3, size=10).offset == 30
