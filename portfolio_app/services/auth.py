# portfolio_app/services/auth.py
import logging
from datetime import datetime
from functools import wraps

from flask import current_app, jsonify, session
from sqlalchemy.exc import IntegrityError

from portfolio_app.extensions import db, bcrypt
from portfolio_app.models import Checklist, User, UserSession

logger = logging.getLogger(__name__)

SESSION_KEY = "user"
SESSION_ID_KEY = "sid"


class AuthService:
    INVALID_CREDENTIALS = "Invalid username or password."
    USERNAME_TAKEN = "Username already taken."
    EMAIL_REGISTERED = "Email already registered."
    PASSWORD_MISMATCH = "Passwords do not match. Please try again."
    MISSING_FIELDS = "Username, email and password are required."
    REGISTRATION_FAILED = "Registration failed. Please try again later."

    @staticmethod
    def authenticate_user(username, password):
        """
        Check username & password using bcrypt.
        Return (user, None) when valid, (None, error) otherwise.
        """
        logger.info(f"🔐 Login attempt: {username}")

        user = User.query.filter_by(username=username).first()
        if not user:
            logger.warning(f"❌ Login failed: \"{username}\" not found")
            return None, AuthService.INVALID_CREDENTIALS

        if not bcrypt.check_password_hash(user.password, password):
            logger.warning(f"❌ Login failed: incorrect password for {username}")
            return None, AuthService.INVALID_CREDENTIALS

        logger.info(f"✅ Login successful for: {username}")
        return user, None

    @staticmethod
    def register(username, email, password, confirm_password):
        """
        Create a new user with an empty checklist.
        Return (user, None) on success, (None, error) otherwise.
        """
        logger.info(f"📝 Register attempt: username: {username}, email: {email}")

        if not username or not email or not password:
            return None, AuthService.MISSING_FIELDS

        if password != confirm_password:
            logger.warning("❌ Passwords do not match. Account not created.")
            return None, AuthService.PASSWORD_MISMATCH

        error = AuthService._duplicate_error(username, email)
        if error:
            return None, error

        hashed_password = bcrypt.generate_password_hash(password).decode("utf-8")
        user = User(username=username, email=email, password=hashed_password)
        user.checklist = Checklist(data="{}")

        try:
            db.session.add(user)
            db.session.commit()
        except IntegrityError:
            # a concurrent registration won the race past the checks above
            db.session.rollback()
            error = AuthService._duplicate_error(username, email)
            if error:
                return None, error
            logger.exception("❌ Registration failed")
            return None, AuthService.REGISTRATION_FAILED
        except Exception:
            db.session.rollback()
            logger.exception("❌ Registration failed")
            return None, AuthService.REGISTRATION_FAILED

        logger.info(f"✅ New user registered: {username}")
        return user, None

    @staticmethod
    def _duplicate_error(username, email):
        if User.query.filter_by(username=username).first():
            logger.warning(f"❌ Username {username} already taken.")
            return AuthService.USERNAME_TAKEN
        if User.query.filter_by(email=email).first():
            logger.warning(f"❌ Email {email} already associated with an account.")
            return AuthService.EMAIL_REGISTERED
        return None

    @staticmethod
    def start_session(user):
        """
        Create the server-side session record and point the cookie at it.
        The record expires a fixed PERMANENT_SESSION_LIFETIME after login.
        """
        AuthService.end_session()

        record = UserSession(
            user_id=user.id,
            expires_at=datetime.utcnow() + current_app.permanent_session_lifetime,
        )
        db.session.add(record)
        db.session.commit()

        session.permanent = True
        session[SESSION_ID_KEY] = record.id
        session[SESSION_KEY] = user.session_payload()

    @staticmethod
    def end_session():
        """Delete the server-side record so the cookie can no longer be replayed."""
        session_id = session.get(SESSION_ID_KEY)
        record = _load_session_record(session_id) if session_id else None
        if record is not None:
            db.session.delete(record)
            db.session.commit()
        session.clear()


def _load_session_record(session_id):
    return db.session.get(UserSession, session_id)


def current_user():
    """``{id, username, email}`` of the logged-in user, or None."""
    session_id = session.get(SESSION_ID_KEY)
    if not session_id:
        return None

    record = _load_session_record(session_id)
    if record is not None and not record.expired:
        return session.get(SESSION_KEY)

    if record is not None:
        db.session.delete(record)
        db.session.commit()
    logger.info("⌛ Session expired or revoked")
    session.clear()
    return None


def login_required(view):
    """Reject requests without a session before the view runs."""

    @wraps(view)
    def wrapped(*args, **kwargs):
        if current_user() is None:
            return jsonify({"error": "Not authenticated"}), 401
        return view(*args, **kwargs)

    return wrapped
