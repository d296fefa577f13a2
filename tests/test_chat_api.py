from datetime import datetime


def _session(client, *user_ids, name=None):
    participants = [{"userId": uid, "role": "student", "language": "en"} for uid in user_ids]
    resp = client.post("/api/chat/sessions", json={"name": name, "participants": participants})
    assert resp.status_code == 200, resp.text
    return resp.json()


def _message(client, session_id, sender_id, text="hello"):
    resp = client.post("/api/chat/messages", json={
        "sessionId": session_id,
        "senderId": sender_id,
        "originalText": text,
        "originalLanguage": "en",
        "translatedText": f"[hi] {text}",
        "translatedLanguage": "hi",
    })
    assert resp.status_code == 200, resp.text
    return resp.json()


def test_session_needs_a_participant(client):
    resp = client.post("/api/chat/sessions", json={"participants": []})
    assert resp.status_code == 400
    assert resp.json() == {"error": "At least one participant required"}


def test_participants_are_stored_verbatim(client, make_user, clock):
    mentor = make_user("m@x.com", "M")
    student = make_user("s@x.com", "S")
    resp = client.post("/api/chat/sessions", json={"participants": [
        {"userId": mentor, "role": "mentor", "language": "hi-IN"},
        {"userId": student, "role": "student", "language": "ta-IN"},
    ]})

    body = resp.json()
    assert [(p["role"], p["language"]) for p in body["participants"]] == [("mentor", "hi-IN"), ("student", "ta-IN")]
    assert body["name"] == "Chat Session 2024-06-01 12:00:01"


def test_message_touches_session(client, make_user, clock):
    user_id = make_user()
    session = _session(client, user_id, name="Practice")
    message = _message(client, session["id"], user_id)

    listed = client.get("/api/chat/sessions", params={"userId": user_id}).json()[0]
    assert datetime.fromisoformat(listed["updatedAt"]) >= datetime.fromisoformat(message["createdAt"])
    assert listed["messages"][0]["id"] == message["id"]
    assert message["sender"]["id"] == user_id


def test_sessions_ordered_by_latest_activity(client, make_user, clock):
    user_id = make_user()
    older = _session(client, user_id, name="older")
    newer = _session(client, user_id, name="newer")

    ids = [s["id"] for s in client.get("/api/chat/sessions", params={"userId": user_id}).json()]
    assert ids == [newer["id"], older["id"]]

    _message(client, older["id"], user_id)
    ids = [s["id"] for s in client.get("/api/chat/sessions", params={"userId": user_id}).json()]
    assert ids == [older["id"], newer["id"]]


def test_only_own_sessions_are_listed(client, make_user, clock):
    a = make_user("a@x.com")
    b = make_user("b@x.com")
    _session(client, a)

    assert client.get("/api/chat/sessions", params={"userId": b}).json() == []


def test_listing_carries_latest_message_only(client, make_user, clock):
    user_id = make_user()
    session = _session(client, user_id)
    _message(client, session["id"], user_id, "one")
    last = _message(client, session["id"], user_id, "two")

    listed = client.get("/api/chat/sessions", params={"userId": user_id}).json()[0]
    assert [m["id"] for m in listed["messages"]] == [last["id"]]


def test_messages_in_send_order(client, make_user, clock):
    user_id = make_user()
    session = _session(client, user_id)
    for text in ("one", "two", "three"):
        _message(client, session["id"], user_id, text)

    messages = client.get("/api/chat/messages", params={"sessionId": session["id"]}).json()
    assert [m["originalText"] for m in messages] == ["one", "two", "three"]
    assert messages[0]["translatedText"] == "[hi] one"
    assert messages[0]["isVoice"] is False


def test_message_to_unknown_session(client, make_user):
    resp = client.post("/api/chat/messages", json={
        "sessionId": 123, "senderId": make_user(), "originalText": "a", "translatedText": "b",
    })
    assert resp.status_code == 404
    assert resp.json() == {"error": "Chat session not found"}


def test_message_needs_both_texts(client, make_user, clock):
    user_id = make_user()
    session = _session(client, user_id)
    resp = client.post("/api/chat/messages", json={
        "sessionId": session["id"], "senderId": user_id, "originalText": "a",
    })
    assert resp.status_code == 400
    assert resp.json() == {"error": "Missing required fields: translatedText"}


def test_required_query_params(client):
    assert client.get("/api/chat/sessions").json() == {"error": "userId required"}
    assert client.get("/api/chat/messages").json() == {"error": "sessionId required"}
