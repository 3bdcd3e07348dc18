import json


def test_checklist_requires_login(client):
    assert client.get("/getChecklist").status_code == 401
    assert client.post("/saveChecklist", json={"domain": True}).status_code == 401


def test_new_user_has_empty_checklist(logged_in):
    response = logged_in.get("/getChecklist")
    assert response.status_code == 200
    assert response.get_json() == {}


def test_checklist_round_trip_is_byte_identical(logged_in):
    body = '{"domain": true, "template": false,  "design": true}'
    response = logged_in.post("/saveChecklist", data=body, content_type="application/json")
    assert response.status_code == 200

    loaded = logged_in.get("/getChecklist")
    assert loaded.get_data(as_text=True) == body
    assert loaded.mimetype == "application/json"


def test_checklist_save_replaces_whole_document(logged_in):
    logged_in.post("/saveChecklist", json={"domain": True, "resume": True})
    logged_in.post("/saveChecklist", json={"project": True})

    assert logged_in.get("/getChecklist").get_json() == {"project": True}


def test_checklist_rejects_unknown_steps(logged_in):
    response = logged_in.post("/saveChecklist", json={"taxes": True})
    assert response.status_code == 400


def test_checklist_rejects_non_boolean_values(logged_in):
    response = logged_in.post("/saveChecklist", json={"domain": "yes"})
    assert response.status_code == 400


def test_checklist_rejects_non_object(logged_in):
    response = logged_in.post("/saveChecklist", data=json.dumps([1, 2]), content_type="application/json")
    assert response.status_code == 400
