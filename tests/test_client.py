from unittest.mock import Mock

import pytest
import requests

from portfolio_app.builder.client import ApiError, AuthRequired, PortfolioApiClient


def _response(status_code=200, json_data=None, text=""):
    response = Mock()
    response.status_code = status_code
    response.ok = status_code < 400
    response.text = text
    if json_data is None:
        response.json.side_effect = ValueError("no json")
    else:
        response.json.return_value = json_data
    return response


@pytest.fixture
def http():
    return Mock()


@pytest.fixture
def api(http):
    return PortfolioApiClient("http://backend/", session=http)


def test_login_success_is_a_redirect(api, http):
    http.request.return_value = _response(302)

    assert api.login("alice", "secret") is True
    method, url = http.request.call_args.args
    assert (method, url) == ("POST", "http://backend/login")
    assert http.request.call_args.kwargs["allow_redirects"] is False


def test_login_bad_credentials(api, http):
    http.request.return_value = _response(401, text="Invalid username or password.")
    assert api.login("alice", "nope") is False


def test_require_auth_raises_when_logged_out(api, http):
    http.request.return_value = _response(200, {"loggedIn": False})
    with pytest.raises(AuthRequired) as exc:
        api.require_auth()
    assert exc.value.login_url == "/login.html"


def test_require_auth_treats_network_failure_as_logged_out(api, http):
    http.request.side_effect = requests.ConnectionError("refused")
    with pytest.raises(AuthRequired):
        api.require_auth()


def test_unauthorized_response_raises_auth_required(api, http):
    http.request.return_value = _response(401, {"error": "Not authenticated"})
    with pytest.raises(AuthRequired):
        api.list_portfolios()


def test_list_portfolios_unwraps(api, http):
    http.request.return_value = _response(200, {"portfolios": [{"id": "p1"}]})
    assert api.list_portfolios() == [{"id": "p1"}]


def test_server_error_message_is_surfaced(api, http):
    http.request.return_value = _response(404, {"error": "Portfolio not found"})
    with pytest.raises(ApiError) as exc:
        api.get_portfolio("nope")
    assert str(exc.value) == "Portfolio not found"
    assert exc.value.status_code == 404


def test_duplicate_portfolio(api, http):
    original = {
        "id": "p1", "name": "Site", "template": "modern",
        "components": [{"id": "1", "type": "text", "content": {"text": "x"}}],
    }
    http.request.side_effect = [
        _response(200, original),
        _response(200, {"success": True, "id": "p2"}),
    ]

    assert api.duplicate_portfolio("p1")["id"] == "p2"
    sent = http.request.call_args.kwargs["json"]
    assert sent["name"] == "Site (Copy)"
    assert "id" not in sent
    assert sent["components"] == original["components"]


def test_text_assist_payload(api, http):
    http.request.return_value = _response(200, {"text": "Better."})

    assert api.text_assist("ok", "improve", "hero", "bio") == "Better."
    assert http.request.call_args.kwargs["json"] == {
        "text": "ok", "mode": "improve", "componentType": "hero", "field": "bio",
    }
