from portfolio_app.models import Portfolio, User

from conftest import login


def test_seed_all_is_idempotent(app, client):
    runner = app.test_cli_runner()

    assert runner.invoke(args=["seed-all"]).exit_code == 0
    assert runner.invoke(args=["seed-all"]).exit_code == 0

    assert User.query.count() == 2
    demo = User.query.filter_by(username="demo").one()
    assert demo.checklist.data == "{}"
    assert Portfolio.query.filter_by(user_id=demo.id).count() == 2


def test_seeded_user_can_log_in(app, client):
    app.test_cli_runner().invoke(args=["seed-all"])

    assert login(client, "demo", "password123").status_code == 302
    portfolios = client.get("/api/portfolios").get_json()["portfolios"]
    assert sorted(p["template"] for p in portfolios) == ["minimal", "modern"]
