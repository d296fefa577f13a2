def test_defaults_and_options_round_trip(client, make_user):
    user_id = make_user()
    quiz = client.post("/api/quizzes", json={"userId": user_id, "question": "2+2?"}).json()

    assert quiz["category"] == "voice-technology"
    assert quiz["difficulty"] == "easy"
    assert quiz["language"] == "en"
    assert quiz["type"] == "voice-mcq"
    assert quiz["points"] == 10
    assert quiz["options"] == []

    updated = client.put(f"/api/quizzes/{quiz['id']}", json={"options": ["3", "4"], "correctAnswers": 1}).json()
    assert updated["options"] == ["3", "4"]
    assert updated["correctAnswers"] == 1


def test_list_by_user(client, make_user):
    a = make_user("a@x.com")
    b = make_user("b@x.com")
    client.post("/api/quizzes", json={"userId": a})
    client.post("/api/quizzes", json={"userId": b})

    assert len(client.get("/api/quizzes").json()) == 2
    assert [q["userId"] for q in client.get("/api/quizzes", params={"userId": str(a)}).json()] == [a]


def test_identity_uuid_matches_nothing(client, make_user):
    client.post("/api/quizzes", json={"userId": make_user()})
    resp = client.get("/api/quizzes", params={"userId": "3f1c2a9e-0000-4000-8000-000000000000"})
    assert resp.status_code == 200
    assert resp.json() == []


def test_delete_all_for_user(client, make_user):
    a = make_user("a@x.com")
    b = make_user("b@x.com")
    for _ in range(3):
        client.post("/api/quizzes", json={"userId": a})
    client.post("/api/quizzes", json={"userId": b})

    assert client.delete("/api/quizzes", params={"userId": a}).json() == {"success": True}
    assert [q["userId"] for q in client.get("/api/quizzes").json()] == [b]


def test_delete_all_needs_user(client):
    resp = client.delete("/api/quizzes")
    assert resp.status_code == 400
    assert resp.json() == {"error": "userId required"}


def test_single_quiz_lifecycle(client, make_user):
    quiz_id = client.post("/api/quizzes", json={"userId": make_user()}).json()["id"]
    assert client.get(f"/api/quizzes/{quiz_id}").json()["user"]["email"] == "ana@example.com"
    assert client.delete(f"/api/quizzes/{quiz_id}").json() == {"success": True}
    assert client.get(f"/api/quizzes/{quiz_id}").json() == {"error": "Quiz not found"}
