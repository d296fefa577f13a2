from lingomentor.translation import TranslationError


def test_post(client, translator):
    resp = client.post("/api/translate", json={"text": "hello", "fromLang": "en", "toLang": "hi"})

    body = resp.json()
    assert resp.status_code == 200
    assert body["success"] is True
    assert body["originalText"] == "hello"
    assert body["translatedText"] == "[hi] hello"
    assert (body["fromLang"], body["toLang"]) == ("en", "hi")
    assert body["timestamp"]
    assert translator.calls == [("hello", "en", "hi")]


def test_get(client):
    resp = client.get("/api/translate", params={"text": "hola", "from": "es", "to": "en"})
    assert resp.json()["translatedText"] == "[en] hola"


def test_missing_parameters(client, translator):
    resp = client.post("/api/translate", json={"text": "hello", "fromLang": "en"})
    assert resp.status_code == 400
    assert resp.json() == {"error": "Missing required parameters: text, fromLang, toLang"}

    resp = client.get("/api/translate", params={"text": "hello"})
    assert resp.json() == {"error": "Missing required parameters: text, from, to"}
    assert translator.calls == []


def test_provider_failure_is_500_with_details(client, translator):
    translator.fail_for = {"xx"}
    resp = client.post("/api/translate", json={"text": "hello", "fromLang": "en", "toLang": "xx"})
    assert resp.status_code == 500
    assert resp.json() == {"error": "Translation failed", "details": "quota exceeded for xx"}


def test_translation_error_body():
    assert TranslationError("boom").to_body() == {"error": "Translation failed", "details": "boom"}
