import app_web


def test_hop_payload_is_not_cacheable(client):
    response = client.get("/hop?mission=cross-country&aircraft=c150")
    assert response.status_code == 200
    assert response.headers["Cache-Control"] == "no-store"

    data = response.get_json()
    assert set(data) == {"sequence", "brief", "wxConditions", "mode"}
    assert data["mode"]["mission"] == "cross-country"
    assert data["mode"]["aircraftLabel"] == "Cessna 150"
    assert data["sequence"][0]["phase"] == "preflight"
    assert data["brief"]["metar"]["raw"].startswith("METAR")


def test_unknown_mission_falls_back_to_local(client):
    data = client.get("/hop?mission=aerobatics&aircraft=f16").get_json()
    assert data["mode"]["mission"] == "local"
    assert data["mode"]["aircraft"] == "C172"


def test_sim_grading_records_known_questions(client):
    response = client.post("/sim", json={"responses": [
        {"questionId": "1.01", "selectedOption": 1},
        {"questionId": "99.99", "selectedOption": 1},
    ]})
    assert response.status_code == 200
    data = response.get_json()
    assert data["total"] == 2
    assert data["correct"] == 1
    assert data["passed"] is False
    assert data["results"][1]["correctOption"] == 0

    progress = client.get("/progress").get_json()
    assert progress["questions"]["1.01"]["attempts"] == 1
    assert "99.99" not in progress["questions"]
    assert progress["totals"]["attempts"] == 1


def test_sim_malformed_body_grades_nothing(client):
    response = client.post("/sim", data="not json", content_type="application/json")
    assert response.status_code == 200
    assert response.get_json()["total"] == 0

    response = client.post("/sim", json={"responses": "1.01"})
    assert response.get_json()["score"] == 0


def test_sim_questions_are_capped(client):
    data = client.get("/sim").get_json()
    assert data["count"] == len(data["questions"]) <= app_web.SIM_QUESTION_LIMIT
    assert len({q["id"] for q in data["questions"]}) == data["count"]


def test_question_browser(client):
    data = client.get("/questions?q=2.02").get_json()
    assert [q["id"] for q in data["questions"]] == ["2.02"]

    data = client.get("/questions?section=13").get_json()
    assert data["count"] > 0
    assert all(q["id"].startswith("13.") for q in data["questions"])

    assert client.get("/questions?section=abc").status_code == 400


def test_references(client):
    assert client.get("/refs").status_code == 400
    assert client.get("/refs?questionId=99.99").status_code == 404

    data = client.get("/refs?questionId=1.01").get_json()
    assert data["questionId"] == "1.01"
    assert data["references"][0]["docId"] == "CARS"


def test_progress_starts_empty(client):
    data = client.get("/progress").get_json()
    assert data["questions"] == {}
    assert data["totals"]["attempts"] == 0


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.get_json() == {"status": "ok", "database": "connected"}


def test_join_hop_over_socket(client, tmp_path, monkeypatch):
    monkeypatch.setattr(app_web, "LOG_DIR", str(tmp_path))
    socket_client = app_web.socketio.test_client(app_web.app, flask_test_client=client)

    socket_client.emit("join_hop", {"session_id": "hop-1", "mission": "local", "aircraft": "C172"})
    received = socket_client.get_received()
    ready = [msg for msg in received if msg["name"] == "hop_ready"]
    assert ready
    assert ready[0]["args"][0]["state"]["status"] == "briefing"
    assert "hop-1" in app_web.sessions

    log_files = list(tmp_path.glob("hop_hop-1_*.jsonl"))
    assert len(log_files) == 1
    assert "session_created" in log_files[0].read_text(encoding="utf-8")

    socket_client.disconnect()
    assert "hop-1" not in app_web.sessions
