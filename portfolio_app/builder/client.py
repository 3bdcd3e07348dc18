# portfolio_app/builder/client.py

import logging

import requests

logger = logging.getLogger(__name__)

# Base URL of the Flask backend
DEFAULT_BASE_URL = "http://localhost:5000"


class ApiError(Exception):
    def __init__(self, message, status_code=None):
        super().__init__(message)
        self.status_code = status_code


class AuthRequired(ApiError):
    """No valid session; the caller should send the user to the login page."""

    login_url = "/login.html"


class PortfolioApiClient:
    """
    Talks to the backend on behalf of the builder. Cookies (the session) live
    on the underlying ``requests.Session``.
    """

    def __init__(self, base_url=DEFAULT_BASE_URL, session=None, timeout=10):
        self.base_url = base_url.rstrip("/")
        self.http = session or requests.Session()
        self.timeout = timeout

    def _url(self, path):
        return f"{self.base_url}{path}"

    def _request(self, method, path, **kwargs):
        kwargs.setdefault("timeout", self.timeout)
        try:
            return self.http.request(method, self._url(path), **kwargs)
        except requests.RequestException as e:
            logger.error(f"❌ {method} {path} failed: {e}")
            raise ApiError(f"Network error: {e}") from e

    @staticmethod
    def _error_message(response, fallback):
        try:
            body = response.json()
        except ValueError:
            return response.text or fallback
        if isinstance(body, dict):
            return body.get("error") or body.get("message") or fallback
        return fallback

    def _json(self, response, fallback):
        if response.status_code == 401:
            raise AuthRequired(self._error_message(response, "Not authenticated"), 401)
        if not response.ok:
            raise ApiError(self._error_message(response, fallback), response.status_code)
        return response.json()

    # -------------------------------
    # Authentication
    # -------------------------------

    def login(self, username, password):
        """Returns True on success; the session cookie is kept on ``self.http``."""
        response = self._request(
            "POST", "/login",
            json={"username": username, "password": password},
            allow_redirects=False,
        )
        if response.status_code in (301, 302, 303):
            return True
        if response.status_code == 401:
            return False
        raise ApiError(response.text or "Login failed", response.status_code)

    def logout(self):
        return self._json(self._request("POST", "/logout"), "Logout failed.")

    def check_session(self):
        return bool(self._json(self._request("GET", "/checkSession"), "Session check failed").get("loggedIn"))

    def require_auth(self):
        """
        The one authentication guard for every protected page. Raises
        ``AuthRequired`` when there is no session or the check itself fails.
        """
        try:
            logged_in = self.check_session()
        except ApiError as e:
            logger.warning(f"⚠️ Session check failed: {e}")
            raise AuthRequired("Session check failed") from e
        if not logged_in:
            raise AuthRequired("Not logged in")
        return True

    def get_user_info(self):
        return self._json(self._request("GET", "/getUserInfo"), "Failed to fetch user info")

    # -------------------------------
    # Checklist
    # -------------------------------

    def get_checklist(self):
        return self._json(self._request("GET", "/getChecklist"), "Failed to load checklist")

    def save_checklist(self, checklist):
        return self._json(self._request("POST", "/saveChecklist", json=checklist), "Failed to save checklist")

    # -------------------------------
    # Portfolios
    # -------------------------------

    def list_portfolios(self):
        data = self._json(self._request("GET", "/api/portfolios"), "Failed to load portfolios")
        return data.get("portfolios", [])

    def get_portfolio(self, portfolio_id):
        return self._json(self._request("GET", f"/api/portfolio/{portfolio_id}"), "Failed to load portfolio")

    def save_portfolio(self, document):
        """Upsert the whole document; returns the server's reply (with ``id``)."""
        return self._json(
            self._request("POST", "/api/save-portfolio", json=document),
            "Failed to save portfolio. Please try again.",
        )

    def delete_portfolio(self, portfolio_id):
        return self._json(
            self._request("DELETE", f"/api/portfolio/{portfolio_id}"),
            "Failed to delete portfolio. Please try again.",
        )

    def duplicate_portfolio(self, portfolio_id):
        """Copy a saved portfolio under the name ``"<name> (Copy)"``."""
        original = self.get_portfolio(portfolio_id)
        copy = {
            "name": f"{original['name']} (Copy)",
            "template": original["template"],
            "components": original["components"],
        }
        return self.save_portfolio(copy)

    # -------------------------------
    # AI text assist
    # -------------------------------

    def text_assist(self, text, mode, component_type, field):
        data = self._json(
            self._request("POST", "/api/ai/text-assist", json={
                "text": text,
                "mode": mode,
                "componentType": component_type,
                "field": field,
            }),
            "Text assist failed",
        )
        return data["text"]
