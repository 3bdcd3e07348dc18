import json
import logging

from portfolio_app.extensions import db
from portfolio_app.models import Checklist, CHECKLIST_STEPS, Portfolio
from portfolio_app.builder.components import PortfolioDocument

logger = logging.getLogger(__name__)


class NotFound(Exception):
    pass


# ==================== CHECKLIST ====================

def validate_checklist(raw_text):
    """
    Parse a checklist body. It must be a JSON object mapping known onboarding
    steps to booleans. Raises ValueError otherwise.
    """
    try:
        data = json.loads(raw_text)
    except (TypeError, ValueError):
        raise ValueError("Checklist must be valid JSON")
    if not isinstance(data, dict):
        raise ValueError("Checklist must be a JSON object")
    for key, value in data.items():
        if key not in CHECKLIST_STEPS:
            raise ValueError(f"Unknown checklist step: {key}")
        if not isinstance(value, bool):
            raise ValueError(f"Checklist step '{key}' must be true or false")
    return data


def get_checklist_text(user_id):
    """The checklist exactly as it was last saved ("{}" when never saved)."""
    checklist = db.session.get(Checklist, user_id)
    return checklist.data if checklist else "{}"


def save_checklist_text(user_id, raw_text):
    """Replace the whole checklist with ``raw_text`` (validated first)."""
    validate_checklist(raw_text)
    checklist = db.session.get(Checklist, user_id)
    if checklist is None:
        checklist = Checklist(user_id=user_id)
        db.session.add(checklist)
    checklist.data = raw_text
    db.session.commit()


# ==================== PORTFOLIOS ====================

def list_portfolios(user_id):
    portfolios = (
        Portfolio.query.filter_by(user_id=user_id)
        .order_by(Portfolio.updated_at.desc())
        .all()
    )
    return [portfolio_summary(p) for p in portfolios]


def get_portfolio(user_id, portfolio_id):
    """A portfolio owned by ``user_id``; anyone else's is reported as missing."""
    portfolio = Portfolio.query.filter_by(id=portfolio_id, user_id=user_id).first()
    if portfolio is None:
        raise NotFound(portfolio_id)
    return portfolio


def save_portfolio(user_id, payload):
    """
    Upsert a whole portfolio document. Updates the owned portfolio named by
    ``payload['id']``, or creates a new one when no id is given.
    Raises ValueError on an invalid document and NotFound on a foreign id.
    """
    document = PortfolioDocument.model_validate(payload or {})
    name = document.name.strip()
    if not name:
        raise ValueError("Portfolio name is required")

    components = [c.to_dict() for c in document.components]

    if document.id:
        portfolio = get_portfolio(user_id, document.id)
        portfolio.name = name
        portfolio.template = document.template
        portfolio.components = components
        action = "updated"
    else:
        portfolio = Portfolio(
            user_id=user_id,
            name=name,
            template=document.template,
            components=components,
        )
        db.session.add(portfolio)
        action = "created"

    db.session.commit()
    logger.info(f"✅ Portfolio {action}: {portfolio.id} ({len(components)} components)")
    return portfolio


def delete_portfolio(user_id, portfolio_id):
    portfolio = get_portfolio(user_id, portfolio_id)
    db.session.delete(portfolio)
    db.session.commit()
    logger.info(f"🗑️ Portfolio deleted: {portfolio_id}")


# ==================== HELPER FUNCTIONS ====================

def portfolio_summary(portfolio: Portfolio):
    return {
        "id": portfolio.id,
        "name": portfolio.name,
        "template": portfolio.template,
        "created_at": portfolio.created_at.isoformat() if portfolio.created_at else None,
        "updated_at": portfolio.updated_at.isoformat() if portfolio.updated_at else None,
    }


def portfolio_to_dict(portfolio: Portfolio):
    data = portfolio_summary(portfolio)
    data["components"] = portfolio.components or []
    return data
