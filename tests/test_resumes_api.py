from urllib.parse import quote

from lingomentor.api.routes.resumes import content_disposition


RESUME = {
    "fullName": "Asha Rao",
    "title": "Backend Developer",
    "email": "asha@example.com",
    "skills": ["Python"],
    "projects": [{"title": "Bot", "description": "Chat bot"}],
}


def test_post_twice_keeps_one_resume(client, make_user):
    user_id = make_user()

    first = client.post("/api/resumes", json={"userId": user_id, **RESUME}).json()
    second = client.post("/api/resumes", json={"userId": user_id, **RESUME, "title": "Staff Engineer"}).json()

    assert second["id"] == first["id"]
    assert second["title"] == "Staff Engineer"
    assert client.get("/api/resumes", params={"userId": user_id}).json()["id"] == first["id"]


def test_list_fields_round_trip(client, make_user):
    user_id = make_user()
    body = client.post("/api/resumes", json={"userId": user_id, **RESUME}).json()

    assert body["skills"] == ["Python"]
    assert body["projects"] == [{"title": "Bot", "description": "Chat bot"}]
    assert body["achievements"] == []
    assert body["certifications"] == []
    assert body["phone"] == ""


def test_get_without_resume_is_null(client, make_user):
    resp = client.get("/api/resumes", params={"userId": make_user()})
    assert resp.status_code == 200
    assert resp.json() is None


def test_get_requires_user(client):
    assert client.get("/api/resumes").json() == {"error": "userId required"}


def test_put_by_id(client, make_user):
    resume_id = client.post("/api/resumes", json={"userId": make_user(), **RESUME}).json()["id"]

    body = client.put("/api/resumes", json={"id": resume_id, "certifications": ["CKA"], "isComplete": True}).json()
    assert body["certifications"] == ["CKA"]
    assert body["isComplete"] is True
    assert body["skills"] == ["Python"]


def test_put_requires_id(client):
    resp = client.put("/api/resumes", json={"title": "x"})
    assert resp.status_code == 400
    assert resp.json() == {"error": "Resume ID required"}


def test_put_unknown_id(client):
    assert client.put("/api/resumes", json={"id": 404}).status_code == 404


def test_resume_for_unknown_user(client):
    assert client.post("/api/resumes", json={"userId": 77, **RESUME}).status_code == 400


def test_pdf_download(client, make_user):
    user_id = make_user()
    client.post("/api/resumes", json={"userId": user_id, **RESUME})

    resp = client.get("/api/resumes/pdf", params={"userId": user_id})
    assert resp.status_code == 200
    assert resp.headers["content-type"] == "application/pdf"
    assert 'filename="Asha Rao_resume.pdf"' in resp.headers["content-disposition"]
    assert resp.content.startswith(b"%PDF-")


def test_pdf_without_resume(client, make_user):
    resp = client.get("/api/resumes/pdf", params={"userId": make_user()})
    assert resp.status_code == 404
    assert resp.json() == {"error": "Resume not found"}


def test_pdf_download_with_non_latin_name(client, make_user):
    user_id = make_user()
    client.post("/api/resumes", json={"userId": user_id, **RESUME, "fullName": "आशा राव"})

    resp = client.get("/api/resumes/pdf", params={"userId": user_id})
    assert resp.status_code == 200
    assert resp.content.startswith(b"%PDF-")
    disposition = resp.headers["content-disposition"]
    assert "filename*=UTF-8''" + quote("आशा राव_resume.pdf", safe="") in disposition
    assert 'filename="_ __resume.pdf"' in disposition


def test_quotes_in_name_do_not_break_the_header():
    assert content_disposition('Ana "AJ" Lee_resume.pdf') == (
        "attachment; filename=\"Ana _AJ_ Lee_resume.pdf\"; "
        "filename*=UTF-8''Ana%20%22AJ%22%20Lee_resume.pdf"
    )
