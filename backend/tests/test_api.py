from fastapi.testclient import TestClient

from config import settings
from main import app

client = TestClient(app)


def test_health():
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "ok"


def test_keywords():
    response = client.post("/keywords", json={"text": "Python developer on AWS"})
    assert response.status_code == 200
    categories = response.json()["categories"]
    assert "python" in categories["skills"]
    assert categories["tools"] == ["aws"]


def test_parse_jd(sample_jd):
    response = client.post("/jd/parse", json={"job_description": sample_jd})
    assert response.status_code == 200
    data = response.json()
    assert data["seniority_level"] == "senior"
    assert data["industry"] == "technology"
    assert data["detected_role"] == "Senior Backend Engineer"


def test_parse_jd_too_long_is_rejected():
    response = client.post("/jd/parse", json={"job_description": "x" * 10001})
    assert response.status_code == 422


def test_match(sample_resume, sample_jd):
    response = client.post(
        "/match", json={"resume_text": sample_resume, "job_description": sample_jd}
    )
    assert response.status_code == 200
    data = response.json()
    assert 0 <= data["score"] <= 100
    assert any(m["keyword"] == "python" for m in data["matched"])


def test_match_requires_job_description(sample_resume):
    response = client.post("/match", json={"resume_text": sample_resume})
    assert response.status_code == 400


def test_match_strength(sample_resume):
    response = client.post("/match/strength", json={"resume_text": sample_resume})
    assert response.status_code == 200
    assert response.json()["score"] == 100


def test_structure():
    response = client.post("/structure", json={"resume_text": ""})
    assert response.status_code == 200
    data = response.json()
    assert data["score"] == 0
    assert not any(s["present"] for s in data["sections"])


def test_industry():
    response = client.post(
        "/industry", json={"text": "patient care, triage and medication in a clinical unit"}
    )
    assert response.status_code == 200
    assert response.json() == {"industry": "healthcare", "name": "Healthcare & Medical"}


def test_roles_suggest():
    response = client.get("/roles/suggest", params={"q": "swe", "limit": 3})
    assert response.status_code == 200
    data = response.json()
    assert data[0] == "Software Engineer"
    assert len(data) <= 3


def test_roles_suggest_default_limit():
    response = client.get("/roles/suggest")
    assert response.status_code == 200
    assert len(response.json()) == settings.role_suggestion_limit


def test_roles_suggest_bad_limit():
    response = client.get("/roles/suggest", params={"q": "data", "limit": 0})
    assert response.status_code == 400


def test_roles_correct():
    response = client.get("/roles/correct", params={"q": "Sofware Engineer"})
    assert response.json() == {"query": "Sofware Engineer", "correction": "Software Engineer"}


def test_roles_find():
    response = client.get("/roles/find", params={"q": "RN"})
    assert response.status_code == 200
    assert response.json()["id"] == "registered-nurse"

    missing = client.get("/roles/find", params={"q": "zzzz zzzz"})
    assert missing.status_code == 404


def test_recommend_templates():
    response = client.post(
        "/recommend/templates", json={"role": "Software Engineer", "flags": ["fresher"]}
    )
    assert response.status_code == 200
    data = response.json()
    assert {r["option_id"] for r in data} == {"template1free", "template2"}


def test_recommend_guidance():
    response = client.post(
        "/recommend/guidance", json={"role": "Registered Nurse", "region": "US"}
    )
    assert response.status_code == 200
    data = response.json()
    assert data["industry"] == "healthcare"
    assert data["profile"]["option_id"] == "credential-led"
    assert data["photo_advice"]["recommendation"] == "optional"


def test_analyze(sample_resume, sample_jd):
    response = client.post(
        "/analyze", json={"resume_text": sample_resume, "job_description": sample_jd}
    )
    assert response.status_code == 200
    data = response.json()
    assert data["scoring_method"] == "keyword"
    assert "overall_score" in data
    assert isinstance(data["keyword_density"], dict)
    assert data["jd_analysis"]["seniority_level"] == "senior"


def test_analyze_resume_only(sample_resume):
    response = client.post("/analyze", json={"resume_text": sample_resume})
    assert response.status_code == 200
    assert response.json()["scoring_method"] == "strength"


def test_analyze_rejects_empty_resume():
    response = client.post("/analyze", json={"resume_text": "   ", "job_description": "Python"})
    assert response.status_code == 400
