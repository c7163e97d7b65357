import structlog
from structlog.testing import capture_logs

from app import main
from app.domain.models.user import User, UserRole
from app.infrastructure.database import session_scope


def test_seed_admin_skipped_without_password(monkeypatch, db):
    monkeypatch.setattr(main.settings, "ADMIN_PASSWORD", "")
    main.seed_admin()
    assert db.query(User).count() == 0


def test_seed_admin_creates_admin_once(monkeypatch, db):
    monkeypatch.setattr(main.settings, "ADMIN_PASSWORD", "Admin123!")
    main.seed_admin()
    main.seed_admin()

    admins = db.query(User).filter(User.email == main.settings.ADMIN_EMAIL).all()
    assert len(admins) == 1
    assert admins[0].role == UserRole.ADMIN


def test_session_scope_binds_request_id_and_rolls_back():
    with capture_logs() as logs:
        try:
            with session_scope(request_id="req-1") as session:
                assert structlog.contextvars.get_contextvars()["request_id"] == "req-1"
                session.add(User.create("scoped@example.com", "encoded", "scoped"))
                raise RuntimeError("boom")
        except RuntimeError:
            pass

    assert "request_id" not in structlog.contextvars.get_contextvars()
    rolled_back = [e for e in logs if e["event"] == "Transaction rolled back"]
    assert rolled_back[0]["error_type"] == "RuntimeError"

    with session_scope() as session:
        assert session.query(User).filter(User.email == "scoped@example.com").count() == 0
