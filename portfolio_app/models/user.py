from ..extensions import db
from datetime import datetime
import uuid


class User(db.Model):
    __tablename__ = "users"

    id = db.Column(db.String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    username = db.Column(db.String(255), unique=True, nullable=False)
    email = db.Column(db.String(255), unique=True, nullable=False)
    password = db.Column(db.String(255), nullable=False)
    created_at = db.Column(db.DateTime, default=datetime.utcnow)

    checklist = db.relationship("Checklist", back_populates="user", uselist=False, cascade="all, delete-orphan")
    portfolios = db.relationship("Portfolio", back_populates="user", cascade="all, delete-orphan")
    sessions = db.relationship("UserSession", back_populates="user", cascade="all, delete-orphan")

    def session_payload(self):
        """The identity kept in the session cookie."""
        return {"id": self.id, "username": self.username, "email": self.email}

    # for string representation
    def __repr__(self):
        return f"<User {self.username}>"
