from portfolio_app.extensions import db
from datetime import datetime
import uuid


class Portfolio(db.Model):
    __tablename__ = "portfolios"

    id = db.Column(db.String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    user_id = db.Column(db.String(36), db.ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    name = db.Column(db.String(255), nullable=False)
    template = db.Column(db.String(50), nullable=False)
    components = db.Column(db.JSON, nullable=False, default=list)
    created_at = db.Column(db.DateTime, default=datetime.utcnow)
    updated_at = db.Column(db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    user = db.relationship("User", back_populates="portfolios")

    def __repr__(self):
        return f"<Portfolio {self.name}>"
