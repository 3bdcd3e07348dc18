from portfolio_app.extensions import db
from datetime import datetime
import uuid


class UserSession(db.Model):
    """Server-side record behind a session cookie; logout deletes it."""

    __tablename__ = "user_sessions"

    id = db.Column(db.String(32), primary_key=True, default=lambda: uuid.uuid4().hex)
    user_id = db.Column(db.String(36), db.ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    created_at = db.Column(db.DateTime, default=datetime.utcnow)
    expires_at = db.Column(db.DateTime, nullable=False)

    user = db.relationship("User", back_populates="sessions")

    @property
    def expired(self):
        return datetime.utcnow() >= self.expires_at

    def __repr__(self):
        return f"<UserSession {self.user_id}>"
