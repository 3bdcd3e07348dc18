from portfolio_app.extensions import db
from portfolio_app.models import Checklist, User
from datetime import datetime
from flask_bcrypt import generate_password_hash

DEMO_USERNAME = "demo"


def seed():
    print("🌱 Seeding users...")

    users = [
        User(
            username=DEMO_USERNAME,
            email="demo@example.com",
            password=generate_password_hash("password123").decode("utf-8"),
            created_at=datetime.utcnow(),
        ),
        User(
            username="alice",
            email="alice@example.com",
            password=generate_password_hash("password123").decode("utf-8"),
            created_at=datetime.utcnow(),
        ),
    ]

    # prevent duplicates
    for user in users:
        existing = User.query.filter_by(username=user.username).first()
        if not existing:
            user.checklist = Checklist(data="{}")
            db.session.add(user)

    db.session.commit()
    print("✅ Users seeded successfully!")
