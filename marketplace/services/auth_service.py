import logging
import re
import time
import uuid

from marketplace.config import settings
from marketplace.errors import Conflict, ValidationError
from marketplace.storage import Store
from marketplace.utils.security import check_password, generate_session_token, hash_password
from marketplace.utils.timefmt import format_timestamp, utcnow

logger = logging.getLogger(__name__)

EMAIL_RE = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")
MIN_PASSWORD_LENGTH = 8


class AuthService:
    """Local stand-in for the identity provider: users plus bearer sessions."""

    def __init__(self):
        self._sessions: dict[str, tuple[dict, float]] = {}  # token -> (user, expires_at)

    def _cleanup_expired(self):
        now = time.time()
        self._sessions = {t: s for t, s in self._sessions.items() if s[1] > now}

    def sign_up(self, store: Store, email: str, password: str) -> dict:
        email = email.strip().lower()
        if not EMAIL_RE.match(email):
            raise ValidationError("A valid email address is required")
        if len(password) < MIN_PASSWORD_LENGTH:
            raise ValidationError(f"Password must be at least {MIN_PASSWORD_LENGTH} characters")
        if store.select_one("users", {"email": email}):
            raise Conflict("An account with this email already exists")

        row = store.insert("users", {
            "id": str(uuid.uuid4()),
            "email": email,
            "password_hash": hash_password(password),
            "created_at": format_timestamp(utcnow()),
        })
        logger.info("User %s signed up", row["id"])
        return {"id": row["id"], "email": row["email"]}

    def sign_in(self, store: Store, email: str, password: str) -> dict | None:
        row = store.select_one("users", {"email": email.strip().lower()})
        if not row:
            return None
        matched, upgraded = check_password(row["password_hash"], password)
        if not matched:
            return None
        if upgraded:
            store.update("users", {"id": row["id"]}, {"password_hash": upgraded})
            logger.info("Upgraded password hash for user %s", row["id"])

        token = generate_session_token()
        ttl = settings.session_ttl_seconds
        self._sessions[token] = ({"id": row["id"], "email": row["email"]}, time.time() + ttl)
        return {"token": token, "expires_in_seconds": ttl}

    def sign_out(self, token: str):
        self._sessions.pop(token, None)

    def current_user(self, token: str) -> dict | None:
        self._cleanup_expired()
        session = self._sessions.get(token)
        return dict(session[0]) if session else None


auth_service = AuthService()
