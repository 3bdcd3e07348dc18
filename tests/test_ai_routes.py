from types import SimpleNamespace
from unittest import mock

import pytest

from portfolio_app.services import openai_service


def _fake_client(reply="Rewritten text"):
    completion = SimpleNamespace(choices=[SimpleNamespace(message=SimpleNamespace(content=f"  {reply}  "))])
    client = mock.Mock()
    client.chat.completions.create.return_value = completion
    return client


@pytest.fixture
def fake_client(monkeypatch):
    client = _fake_client()
    monkeypatch.setattr(openai_service, "get_client", lambda: client)
    return client


def _assist(client, **body):
    payload = {"text": "i build web apps", "mode": "improve", "componentType": "hero", "field": "bio"}
    payload.update(body)
    return client.post("/api/ai/text-assist", json=payload)


def test_text_assist_requires_login(client):
    assert _assist(client).status_code == 401


def test_text_assist_returns_rewritten_text(logged_in, fake_client):
    response = _assist(logged_in)

    assert response.status_code == 200
    assert response.get_json() == {"text": "Rewritten text"}
    prompt = fake_client.chat.completions.create.call_args.kwargs["messages"][1]["content"]
    assert "i build web apps" in prompt
    assert "'bio' field" in prompt


def test_text_assist_rejects_empty_text(logged_in, fake_client):
    assert _assist(logged_in, text="   ").status_code == 400
    fake_client.chat.completions.create.assert_not_called()


def test_text_assist_rejects_unknown_mode(logged_in, fake_client):
    assert _assist(logged_in, mode="pirate").status_code == 400


def test_text_assist_without_api_key(logged_in):
    response = _assist(logged_in)
    assert response.status_code == 503


def test_text_assist_provider_failure(logged_in, fake_client):
    fake_client.chat.completions.create.side_effect = RuntimeError("boom")

    response = _assist(logged_in)

    assert response.status_code == 500
    assert "boom" not in response.get_data(as_text=True)


@pytest.mark.parametrize("body", [["i build web apps"], "i build web apps", 42])
def test_text_assist_rejects_non_object_body(logged_in, fake_client, body):
    response = logged_in.post("/api/ai/text-assist", json=body)

    assert response.status_code == 400
    fake_client.chat.completions.create.assert_not_called()


def test_text_assist_coerces_non_string_fields(logged_in, fake_client):
    response = _assist(logged_in, text=12345, field=["bio"])

    assert response.status_code == 200
    prompt = fake_client.chat.completions.create.call_args.kwargs["messages"][1]["content"]
    assert "12345" in prompt


def test_text_assist_unknown_non_string_mode(logged_in, fake_client):
    assert _assist(logged_in, mode={"x": 1}).status_code == 400
