from portfolio_app.builder.starters import default_components

from conftest import login, register


def _document(name="My Portfolio", template="minimal", **extra):
    doc = {
        "name": name,
        "template": template,
        "components": [c.to_dict() for c in default_components(template)],
    }
    doc.update(extra)
    return doc


def _save(client, document):
    return client.post("/api/save-portfolio", json=document)


def test_portfolio_routes_require_login(client):
    assert client.get("/api/portfolios").status_code == 401
    assert client.get("/api/portfolio/abc").status_code == 401
    assert client.post("/api/save-portfolio", json=_document()).status_code == 401
    assert client.delete("/api/portfolio/abc").status_code == 401


def test_save_creates_and_returns_id(logged_in):
    response = _save(logged_in, _document())

    assert response.status_code == 200
    body = response.get_json()
    assert body["success"] is True
    assert body["id"]


def test_get_returns_full_document(logged_in):
    document = _document()
    portfolio_id = _save(logged_in, document).get_json()["id"]

    data = logged_in.get(f"/api/portfolio/{portfolio_id}").get_json()

    assert data["id"] == portfolio_id
    assert data["name"] == "My Portfolio"
    assert data["template"] == "minimal"
    assert data["components"] == document["components"]
    assert data["created_at"] and data["updated_at"]


def test_save_with_id_replaces_document(logged_in):
    portfolio_id = _save(logged_in, _document()).get_json()["id"]
    replacement = {
        "id": portfolio_id,
        "name": "Renamed",
        "template": "modern",
        "components": [{"id": "x", "type": "header", "content": {"text": "Only"}}],
    }

    response = _save(logged_in, replacement)

    assert response.get_json()["id"] == portfolio_id
    data = logged_in.get(f"/api/portfolio/{portfolio_id}").get_json()
    assert data["name"] == "Renamed"
    assert data["template"] == "modern"
    assert data["components"] == [{"id": "x", "type": "header", "content": {"text": "Only"}}]
    assert len(logged_in.get("/api/portfolios").get_json()["portfolios"]) == 1


def test_list_portfolios(logged_in):
    _save(logged_in, _document(name="One"))
    _save(logged_in, _document(name="Two", template="creative"))

    portfolios = logged_in.get("/api/portfolios").get_json()["portfolios"]

    assert sorted(p["name"] for p in portfolios) == ["One", "Two"]
    assert set(portfolios[0]) == {"id", "name", "template", "created_at", "updated_at"}


def test_save_rejects_unknown_component_type(logged_in):
    document = _document(components=[{"id": "1", "type": "marquee", "content": {}}])
    assert _save(logged_in, document).status_code == 400


def test_save_rejects_duplicate_component_ids(logged_in):
    document = _document(components=[
        {"id": "1", "type": "text", "content": {"text": "a"}},
        {"id": "1", "type": "text", "content": {"text": "b"}},
    ])
    assert _save(logged_in, document).status_code == 400


def test_save_rejects_bad_enum_value(logged_in):
    document = _document(components=[
        {"id": "1", "type": "image", "content": {"url": "", "width": "huge"}},
    ])
    assert _save(logged_in, document).status_code == 400


def test_save_requires_name(logged_in):
    assert _save(logged_in, _document(name="  ")).status_code == 400


def test_save_with_unknown_id_is_not_found(logged_in):
    assert _save(logged_in, _document(id="does-not-exist")).status_code == 404


def test_delete_portfolio(logged_in):
    portfolio_id = _save(logged_in, _document()).get_json()["id"]

    assert logged_in.delete(f"/api/portfolio/{portfolio_id}").status_code == 200
    assert logged_in.get(f"/api/portfolio/{portfolio_id}").status_code == 404
    assert logged_in.delete(f"/api/portfolio/{portfolio_id}").status_code == 404


def test_other_users_portfolio_is_invisible(app):
    owner = app.test_client()
    register(owner)
    login(owner)
    portfolio_id = _save(owner, _document()).get_json()["id"]

    intruder = app.test_client()
    register(intruder, username="mallory", email="mallory@example.com")
    login(intruder, username="mallory")

    assert intruder.get(f"/api/portfolio/{portfolio_id}").status_code == 404
    assert intruder.delete(f"/api/portfolio/{portfolio_id}").status_code == 404
    assert _save(intruder, _document(id=portfolio_id, name="Hijacked")).status_code == 404
    assert intruder.get("/api/portfolios").get_json() == {"portfolios": []}
    assert owner.get(f"/api/portfolio/{portfolio_id}").get_json()["name"] == "My Portfolio"


def test_preview_renders_html(logged_in):
    portfolio_id = _save(logged_in, _document()).get_json()["id"]

    response = logged_in.get(f"/api/portfolio/{portfolio_id}/preview")

    assert response.status_code == 200
    assert response.mimetype == "text/html"
    html = response.get_data(as_text=True)
    assert 'class="portfolio-wrapper template-minimal"' in html
    assert "Alex Morgan" in html
    assert "component-wrapper" not in html
