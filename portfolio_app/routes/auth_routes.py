import logging

from flask import Blueprint, current_app, jsonify, redirect, request

from portfolio_app.extensions import db
from portfolio_app.services.auth import AuthService, current_user

logger = logging.getLogger(__name__)

auth_bp = Blueprint("auth", __name__)


def _request_data():
    """Login and register accept JSON objects as well as classic form posts."""
    data = request.get_json(silent=True)
    if isinstance(data, dict):
        return data
    return request.form


def _field(data, *names):
    """First non-empty value among ``names``, as a string."""
    for name in names:
        value = data.get(name)
        if value is not None and value != "":
            return str(value)
    return ""


@auth_bp.route("/login", methods=["POST"])
def login():
    data = _request_data()
    username = _field(data, "username").strip()
    password = _field(data, "password", "input_password")

    if not username or not password:
        return "Username and password are required.", 400

    try:
        user, error = AuthService.authenticate_user(username, password)
        if user:
            AuthService.start_session(user)
    except Exception:
        db.session.rollback()
        logger.exception("❌ Login error")
        return "An error occurred during authentication.", 500

    if not user:
        return error, 401

    return redirect(current_app.config["LOGIN_REDIRECT"])


@auth_bp.route("/register", methods=["POST"])
def register():
    data = _request_data()
    username = _field(data, "username").strip()
    email = _field(data, "email").strip()
    password = _field(data, "password", "input_password")
    confirm_password = _field(data, "confirm_password")

    user, error = AuthService.register(username, email, password, confirm_password)
    if not user:
        status = 500 if error == AuthService.REGISTRATION_FAILED else 400
        return error, status

    return redirect(current_app.config["REGISTER_REDIRECT"])


@auth_bp.route("/logout", methods=["POST"])
def logout():
    user = current_user()
    AuthService.end_session()
    if user:
        logger.info(f"👋 Logged out: {user['username']}")
    return jsonify({"success": True}), 200


@auth_bp.route("/checkSession", methods=["GET"])
def check_session():
    return jsonify({"loggedIn": current_user() is not None})


@auth_bp.route("/getUserInfo", methods=["GET"])
def get_user_info():
    user = current_user()
    if not user:
        return jsonify({"loggedIn": False})
    return jsonify({
        "loggedIn": True,
        "username": user["username"],
        "email": user["email"],
    })
