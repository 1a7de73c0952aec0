import pytest

from studytrack.assistant.categories import DEFAULT_TEXT, STUDY_TEXT

pytestmark = pytest.mark.testclient


def test_assistant_study_reply(client):
    resp = client.post("/api/assistant", json={"message": "I need help with my study notes for the exam"})

    assert resp.status_code == 200, resp.text
    body = resp.json()
    assert body["success"] is True
    assert body["provider"] == "fallback"
    assert body["reply"] == STUDY_TEXT
    assert body["links"] == [
        {
            "title": "Effective Study Techniques",
            "url": "https://www.youtube.com/results?search_query=effective+study+techniques",
        }
    ]


def test_assistant_default_reply(client):
    resp = client.post("/api/assistant", json={"message": "what time is it"})
    assert resp.status_code == 200
    assert resp.json()["reply"] == DEFAULT_TEXT
    assert resp.json()["links"] == []


def test_assistant_youtube_links(client):
    resp = client.post(
        "/api/assistant",
        json={"message": "find videos", "action": "youtube", "topic": "calculus"},
    )
    assert resp.status_code == 200
    links = resp.json()["links"]
    assert len(links) == 4
    for link, suffix in zip(links, ["tutorial", "explained", "for+beginners", "step+by+step"]):
        assert "calculus" in link["url"]
        assert link["url"].endswith(suffix)


def test_assistant_accepts_inert_fields(client):
    plain = client.post("/api/assistant", json={"message": "new project"}).json()
    decorated = client.post(
        "/api/assistant",
        json={
            "message": "new project",
            "text": "selected text",
            "history": [{"role": "user", "content": "hi"}],
            "userRole": "teacher",
            "relevantNotes": ["note 1"],
        },
    ).json()
    assert decorated == plain


@pytest.mark.parametrize("payload", [{}, {"message": ""}, {"message": "   \n"}, {"message": None}])
def test_assistant_requires_message(client, payload):
    resp = client.post("/api/assistant", json=payload)
    assert resp.status_code == 400
    body = resp.json()
    assert body["error"] == "Message is required"
    assert body["details"] == "Please provide a message to the assistant"
    assert body["code"] == "MissingMessage"


def test_assistant_fault_still_returns_reply(client, monkeypatch):
    def boom(request):
        raise RuntimeError("keyword table missing")

    monkeypatch.setattr("studytrack.api.routes.assistant.generate_reply", boom)

    resp = client.post("/api/assistant", json={"message": "hello"})

    assert resp.status_code == 500
    body = resp.json()
    assert body["error"] == "Failed to process request"
    assert body["details"] == "The AI assistant encountered an error"
    assert body["reply"] == "Sorry, I encountered an error. Please try again."


@pytest.mark.parametrize(
    "extra",
    [
        {"history": "previous chat"},
        {"history": {"a": 1}},
        {"userRole": 5},
        {"userRole": None},
        {"relevantNotes": {"id": 3}},
        {"text": 12},
        {"action": 1},
        {"topic": ["calculus"]},
    ],
)
def test_assistant_ignores_off_type_fields(client, extra):
    plain = client.post("/api/assistant", json={"message": "new project"}).json()

    resp = client.post("/api/assistant", json={"message": "new project", **extra})

    assert resp.status_code == 200, resp.text
    assert resp.json() == plain


def test_assistant_numeric_topic_still_gets_links(client):
    resp = client.post(
        "/api/assistant",
        json={"message": "videos", "action": "youtube", "topic": 42},
    )
    assert resp.status_code == 200, resp.text
    links = resp.json()["links"]
    assert len(links) == 4
    assert links[0] == {
        "title": "42 - Complete Tutorial",
        "url": "https://www.youtube.com/results?search_query=42+tutorial",
    }


def test_assistant_accepts_form_posts(client):
    resp = client.post(
        "/api/assistant",
        data={"message": "videos", "action": "youtube", "topic": "cell biology"},
    )
    assert resp.status_code == 200, resp.text
    assert resp.json()["links"][0]["url"] == (
        "https://www.youtube.com/results?search_query=cell%20biology+tutorial"
    )


def test_assistant_form_without_message_is_rejected(client):
    resp = client.post("/api/assistant", data={"topic": "algebra"})
    assert resp.status_code == 400
    assert resp.json()["code"] == "MissingMessage"
