import json

from guiderbooks.errors import GenerationError

from conftest import assessment_payload


def test_inline_content_scenario(client, completion):
    completion.responses = [json.dumps(assessment_payload(10))]
    r = client.post(
        "/api/assessment",
        json={"chapterContent": {"content": "Photosynthesis is...", "title": "Ch1"}},
    )
    assert r.status_code == 200
    body = r.json()
    assert body["chapterTitle"] == "Ch1"
    assert len(body["assessment"]["mcqs"]) == 10
    assert len(body["assessment"]["trueFalse"]) == 10
    assert body["assessment"]["fillups"][0] == {"sentence": "Plants use _____ (0)", "answer": "light"}
    assert body["timestamp"]
    prompt, options = completion.calls[0]
    assert "Content: Photosynthesis is..." in prompt.user
    assert options.temperature == 0.7


def test_count_follows_model_output(client, completion):
    completion.responses = [json.dumps(assessment_payload(3))]
    r = client.post("/api/assessment", json={"chapterContent": {"content": "text"}})
    assert r.status_code == 200
    assert len(r.json()["assessment"]["qa"]) == 3
    assert r.json()["chapterTitle"] == ""


def test_prose_wrapped_output_is_salvaged(client, completion):
    completion.responses = ["Here you go:\n```json\n" + json.dumps(assessment_payload(2)) + "\n```"]
    r = client.post("/api/assessment", json={"chapterId": "bio-ch1"})
    assert r.status_code == 200
    assert r.json()["chapterTitle"] == "Photosynthesis"


def test_malformed_output_is_not_returned(client, completion):
    payload = assessment_payload(2)
    del payload["qa"]
    completion.responses = [json.dumps(payload)]
    r = client.post("/api/assessment", json={"chapterId": "bio-ch1"})
    assert r.status_code == 500
    assert r.json() == {"error": "Failed to extract valid assessment JSON from response."}


def test_requires_chapter_id_or_content(client):
    r = client.post("/api/assessment", json={})
    assert r.status_code == 400
    assert r.json() == {"error": "chapterId or chapterContent is required"}


def test_empty_inline_content_without_id(client):
    r = client.post("/api/assessment", json={"chapterContent": {"content": "", "title": "x"}})
    assert r.status_code == 400


def test_unknown_chapter(client):
    r = client.post("/api/assessment", json={"chapterId": "missing"})
    assert r.status_code == 404
    assert r.json() == {"error": "Chapter not found"}


def test_generation_failure(client, completion):
    completion.error = GenerationError()
    r = client.post("/api/assessment", json={"chapterId": "bio-ch1"})
    assert r.status_code == 500
    assert r.json() == {"error": "Failed to generate response. Please try again."}
