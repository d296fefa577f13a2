def test_crud(client, make_user):
    user_id = make_user()

    created = client.post("/api/achievements", json={"userId": user_id, "title": "7-day streak"}).json()
    assert created["title"] == "7-day streak"

    listed = client.get("/api/achievements", params={"userId": user_id}).json()
    assert [a["id"] for a in listed] == [created["id"]]
    assert listed[0]["user"]["id"] == user_id

    updated = client.put(f"/api/achievements/{created['id']}", json={"title": "30-day streak"}).json()
    assert updated["title"] == "30-day streak"

    assert client.delete(f"/api/achievements/{created['id']}").json() == {"success": True}
    assert client.get(f"/api/achievements/{created['id']}").status_code == 404


def test_title_required(client, make_user):
    resp = client.post("/api/achievements", json={"userId": make_user()})
    assert resp.status_code == 400
    assert resp.json() == {"error": "Missing required fields: title"}


def test_other_users_are_filtered_out(client, make_user):
    a = make_user("a@x.com")
    b = make_user("b@x.com")
    client.post("/api/achievements", json={"userId": a, "title": "A"})
    client.post("/api/achievements", json={"userId": b, "title": "B"})

    assert [x["title"] for x in client.get("/api/achievements", params={"userId": b}).json()] == ["B"]
    assert len(client.get("/api/achievements").json()) == 2
