import logging

from flask import Blueprint, Response, jsonify, request

from portfolio_app.extensions import db
from portfolio_app.services.auth import current_user, login_required
import portfolio_app.databases as databases

logger = logging.getLogger(__name__)

checklist_bp = Blueprint("checklist", __name__)


@checklist_bp.route("/getChecklist", methods=["GET"])
@login_required
def get_checklist():
    try:
        text = databases.get_checklist_text(current_user()["id"])
    except Exception:
        logger.exception("❌ Error loading checklist")
        return jsonify({"error": "Failed to load checklist"}), 500
    # stored text is returned untouched so a save/load round-trip is byte-identical
    return Response(text, status=200, mimetype="application/json")


@checklist_bp.route("/saveChecklist", methods=["POST"])
@login_required
def save_checklist():
    raw_text = request.get_data(as_text=True)
    try:
        databases.save_checklist_text(current_user()["id"], raw_text)
    except ValueError as e:
        return jsonify({"error": str(e)}), 400
    except Exception:
        db.session.rollback()
        logger.exception("❌ Error saving checklist")
        return jsonify({"error": "Failed to save checklist"}), 500

    return jsonify({"success": True}), 200
