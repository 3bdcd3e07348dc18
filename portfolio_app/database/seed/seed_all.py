from flask.cli import with_appcontext
from portfolio_app.database.seed.seed_users import seed as seed_users
from portfolio_app.database.seed.seed_portfolios import seed as seed_portfolios

import click

@click.command("seed-all")
@with_appcontext
def seed_all():
    """Run all database seeders."""
    click.echo("🌱 Seeding database...")
    seed_users()
    seed_portfolios()
    click.echo("✅ All seeders completed!")
