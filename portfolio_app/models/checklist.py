from portfolio_app.extensions import db
from datetime import datetime

# onboarding steps a checklist may track
CHECKLIST_STEPS = ("domain", "template", "project", "resume", "design")


class Checklist(db.Model):
    __tablename__ = "checklists"

    user_id = db.Column(db.String(36), db.ForeignKey("users.id", ondelete="CASCADE"), primary_key=True)
    # raw JSON text, returned exactly as it was saved
    data = db.Column(db.Text, nullable=False, default="{}")
    updated_at = db.Column(db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    user = db.relationship("User", back_populates="checklist")
