from flask import Blueprint, request, jsonify

from portfolio_app.services.auth import login_required
from portfolio_app.services import openai_service

ai_bp = Blueprint("ai_api", __name__, url_prefix="/api/ai")

MAX_ASSIST_CHARS = 5000


@ai_bp.route("/text-assist", methods=["POST"])
@login_required
def text_assist():
    data = request.get_json(silent=True)
    if not isinstance(data, dict) or not data:
        return jsonify({"error": "No JSON data provided"}), 400

    text = str(data.get("text") or "").strip()
    mode = str(data.get("mode") or "improve")
    component_type = str(data.get("componentType") or "")
    field = str(data.get("field") or "")

    if not text:
        return jsonify({"error": "Text is required"}), 400
    if len(text) > MAX_ASSIST_CHARS:
        return jsonify({"error": f"Text must be at most {MAX_ASSIST_CHARS} characters"}), 400
    if mode not in openai_service.MODE_PROMPTS:
        return jsonify({"error": f"Unknown mode. Choose one of: {', '.join(openai_service.MODE_PROMPTS)}"}), 400

    try:
        rewritten = openai_service.rewrite_text(text, mode, component_type, field)
    except openai_service.ProviderNotConfigured:
        return jsonify({"error": "Text assist is not available"}), 503
    except openai_service.TextAssistError:
        return jsonify({"error": "Text assist failed. Please try again."}), 500

    return jsonify({"text": rewritten}), 200
