import pytest

from app.application.services.auth_service import authenticate_user, login, verify_password
from app.application.services.user_service import (
    delete_user,
    get_user,
    get_user_boards,
    get_user_comments,
    search_users,
    signup,
    update_user,
)
from app.core.exceptions import (
    ConstraintViolationException,
    EntityNotFoundException,
    RequestValidationException,
    UnauthorizedException,
)
from app.domain.models.user import UserRole
from app.domain.schemas.auth import UserLoginRequest
from app.domain.schemas.user import UserRead, UserSignupRequest, UserUpdateRequest


def signup_request(**overrides):
    data = {"email": "test@example.com", "password": "Abcd123!", "nickname": "tester1"}
    data.update(overrides)
    return UserSignupRequest(**data)


def test_signup_stores_encoded_password_and_default_role(user_repo):
    user = signup(user_repo, signup_request())

    assert user.id is not None
    assert user.role == UserRole.USER
    assert user.password != "Abcd123!"
    assert verify_password("Abcd123!", user.password)
    assert user.created_at is not None

    read = UserRead.model_validate(user)
    assert read.email == "test@example.com"
    assert read.role == UserRole.USER
    assert "password" not in read.model_dump()


def test_signup_with_admin_role(user_repo):
    user = signup(user_repo, signup_request(role=UserRole.ADMIN))
    assert user.is_admin


def test_signup_rejects_duplicate_email(user_repo):
    signup(user_repo, signup_request())
    with pytest.raises(ConstraintViolationException):
        signup(user_repo, signup_request(nickname="tester2"))
    assert user_repo.count() == 1


def test_signup_rejects_invalid_request_before_saving(user_repo):
    with pytest.raises(RequestValidationException) as exc_info:
        signup(user_repo, signup_request(password="short"))
    assert [v.field for v in exc_info.value.violations] == ["password", "password"]
    assert user_repo.count() == 0


def test_login(user_repo):
    user = signup(user_repo, signup_request())

    assert login(user_repo, UserLoginRequest(email="test@example.com", password="Abcd123!")).id == user.id
    assert authenticate_user(user_repo, UserLoginRequest(email="test@example.com", password="Wrong123!")) is None
    with pytest.raises(UnauthorizedException):
        login(user_repo, UserLoginRequest(email="test@example.com", password="Wrong123!"))
    with pytest.raises(UnauthorizedException):
        login(user_repo, UserLoginRequest(email="nobody@example.com", password="Abcd123!"))
    with pytest.raises(RequestValidationException):
        login(user_repo, UserLoginRequest(email="not-an-email", password=""))


def test_update_user_is_partial(user_repo):
    user = signup(user_repo, signup_request())
    encoded = user.password

    user = update_user(user_repo, user.id, UserUpdateRequest(nickname="renamed"))
    assert user.nickname == "renamed"
    assert user.password == encoded

    user = update_user(user_repo, user.id, UserUpdateRequest(password="Newpass1!"))
    assert user.nickname == "renamed"
    assert verify_password("Newpass1!", user.password)

    with pytest.raises(RequestValidationException):
        update_user(user_repo, user.id, UserUpdateRequest(nickname="x"))
    with pytest.raises(EntityNotFoundException):
        update_user(user_repo, 9999, UserUpdateRequest(nickname="ghost"))


def test_get_and_delete_user(seed_users, user_repo):
    bob = seed_users["bob"]
    assert get_user(user_repo, bob.id).email == "bob@example.com"

    bob_id = bob.id
    delete_user(user_repo, bob_id)
    with pytest.raises(EntityNotFoundException):
        get_user(user_repo, bob_id)
    with pytest.raises(EntityNotFoundException):
        delete_user(user_repo, bob_id)


def test_search_and_user_contents(seed_users, make_board, make_comment, user_repo):
    alice = seed_users["alice"]
    board = make_board(alice)
    make_comment(board, alice)

    assert [u.nickname for u in search_users(user_repo, "ALI")] == ["alice"]
    assert len(get_user_boards(user_repo, "alice@example.com").boards) == 1
    assert len(get_user_comments(user_repo, "alice@example.com").comments) == 1
    with pytest.raises(EntityNotFoundException):
        get_user_boards(user_repo, "nobody@example.com")
    with pytest.raises(EntityNotFoundException):
        get_user_comments(user_repo, "nobody@example.com")
