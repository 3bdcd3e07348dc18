# portfolio_app/routes/portfolio_routes.py
import logging

from flask import Blueprint, Response, jsonify, request

from portfolio_app.extensions import db
from portfolio_app.services.auth import current_user, login_required
from portfolio_app.builder.renderers import render_portfolio
from portfolio_app.builder.components import parse_components
import portfolio_app.databases as databases

logger = logging.getLogger(__name__)

portfolio_bp = Blueprint("portfolio_api", __name__, url_prefix="/api")


@portfolio_bp.route("/portfolios", methods=["GET"])
@login_required
def list_portfolios():
    try:
        portfolios = databases.list_portfolios(current_user()["id"])
        return jsonify({"portfolios": portfolios}), 200
    except Exception:
        logger.exception("❌ Error listing portfolios")
        return jsonify({"error": "Failed to load portfolios"}), 500


@portfolio_bp.route("/portfolio/<portfolio_id>", methods=["GET"])
@login_required
def get_portfolio(portfolio_id):
    try:
        portfolio = databases.get_portfolio(current_user()["id"], portfolio_id)
        return jsonify(databases.portfolio_to_dict(portfolio)), 200
    except databases.NotFound:
        return jsonify({"error": "Portfolio not found"}), 404
    except Exception:
        logger.exception(f"❌ Error loading portfolio {portfolio_id}")
        return jsonify({"error": "Failed to load portfolio"}), 500


@portfolio_bp.route("/save-portfolio", methods=["POST"])
@login_required
def save_portfolio():
    payload = request.get_json(silent=True)
    if not isinstance(payload, dict):
        return jsonify({"error": "No JSON data provided"}), 400

    try:
        portfolio = databases.save_portfolio(current_user()["id"], payload)
    except databases.NotFound:
        return jsonify({"error": "Portfolio not found"}), 404
    except ValueError as e:
        return jsonify({"error": f"Invalid portfolio: {e}"}), 400
    except Exception:
        db.session.rollback()
        logger.exception("❌ Error saving portfolio")
        return jsonify({"error": "Failed to save portfolio"}), 500

    return jsonify({
        "success": True,
        "id": portfolio.id,
        "message": "Portfolio saved successfully",
    }), 200


@portfolio_bp.route("/portfolio/<portfolio_id>", methods=["DELETE"])
@login_required
def delete_portfolio(portfolio_id):
    try:
        databases.delete_portfolio(current_user()["id"], portfolio_id)
    except databases.NotFound:
        return jsonify({"error": "Portfolio not found"}), 404
    except Exception:
        db.session.rollback()
        logger.exception(f"❌ Error deleting portfolio {portfolio_id}")
        return jsonify({"error": "Failed to delete portfolio"}), 500

    return jsonify({"success": True}), 200


@portfolio_bp.route("/portfolio/<portfolio_id>/preview", methods=["GET"])
@login_required
def preview_portfolio(portfolio_id):
    """The saved portfolio rendered the way the builder's preview mode shows it."""
    try:
        portfolio = databases.get_portfolio(current_user()["id"], portfolio_id)
        components = parse_components(portfolio.components)
        html = render_portfolio(components, portfolio.template, edit_mode=False)
    except databases.NotFound:
        return jsonify({"error": "Portfolio not found"}), 404
    except Exception:
        logger.exception(f"❌ Error rendering portfolio {portfolio_id}")
        return jsonify({"error": "Failed to render portfolio"}), 500

    return Response(str(html), status=200, mimetype="text/html")
