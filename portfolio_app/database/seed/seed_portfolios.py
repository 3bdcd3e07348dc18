from portfolio_app.extensions import db
from portfolio_app.models import Portfolio, User
from portfolio_app.builder.starters import default_components
from portfolio_app.database.seed.seed_users import DEMO_USERNAME


def seed():
    print("🌱 Seeding portfolios...")

    user = User.query.filter_by(username=DEMO_USERNAME).first()
    if not user:
        print("⚠️ Demo user missing, run the user seeder first")
        return

    for template in ("minimal", "modern"):
        name = f"My {template.title()} Portfolio"
        if Portfolio.query.filter_by(user_id=user.id, name=name).first():
            continue
        db.session.add(Portfolio(
            user_id=user.id,
            name=name,
            template=template,
            components=[c.to_dict() for c in default_components(template)],
        ))

    db.session.commit()
    print("✅ Portfolios seeded successfully!")
