import pytest
import requests

from career_advisor.tools.adzuna import AdzunaConfig, AdzunaError, make_adzuna_tool
from career_advisor.tools.job_board import search_jobs
from career_advisor.tools.skill_gap import analyze_skill_gap, difficulty_for
from career_advisor.tools.timeline import estimate_learning_timeline, feasibility_for


def test_skill_gap_basic():
    out = analyze_skill_gap(["Python"], ["Python", "Statistics", "SQL"])
    assert out["transferable_skills"] == ["Python"]
    assert out["skill_gaps"] == ["Statistics", "SQL"]
    assert out["gap_count"] == 2
    assert out["difficulty_level"] == "Easy - Transition"
    assert out["summary"] == "You have 1 transferable skills and need to learn 2 new skills."


def test_skill_gap_matching_is_case_insensitive_substring():
    out = analyze_skill_gap(["machine learning", "SQL"], ["Machine Learning Ops", "sql"])
    assert out["skill_gaps"] == []
    assert out["transferable_skills"] == ["machine learning", "SQL"]


def test_difficulty_thresholds():
    assert difficulty_for(0) == "Easy - Transition"
    assert difficulty_for(3) == "Moderate - Achievable"
    assert difficulty_for(6) == "Challenging - Doable"
    assert difficulty_for(7) == "Very Challenging - Long-term"


def test_timeline_known_and_unknown_skills():
    out = estimate_learning_timeline(["SQL", "Rust"], hours_per_week=20)
    assert out["skills_breakdown"] == [
        {"skill": "SQL", "hours_needed": 40, "weeks_needed": 2},
        {"skill": "Rust", "hours_needed": 100, "weeks_needed": 5},
    ]
    assert out["total_hours"] == 140
    assert out["total_weeks"] == 7
    assert out["total_months"] == 2
    assert out["realistic_timeline"] == "Very Achievable"


def test_timeline_default_hours_per_week():
    out = estimate_learning_timeline(["Deep Learning", "Kubernetes"])
    assert out["hours_per_week"] == 10
    assert out["total_weeks"] == 32
    assert out["total_months"] == 8
    assert out["realistic_timeline"] == "Challenging but Doable"


def test_timeline_rejects_non_positive_hours():
    with pytest.raises(ValueError):
        estimate_learning_timeline(["SQL"], hours_per_week=0)


def test_feasibility_thresholds():
    assert feasibility_for(3) == "Very Achievable"
    assert feasibility_for(6) == "Achievable"
    assert feasibility_for(12) == "Challenging but Doable"
    assert feasibility_for(13) == "Long-term Commitment"


def test_job_board_known_role():
    out = search_jobs("Data Scientist")
    assert out["status"] == "success"
    assert out["total_jobs"] == 3
    assert out["jobs"][0]["company"] == "Google"


def test_job_board_unknown_role_is_not_an_error():
    out = search_jobs("Astronaut")
    assert out["status"] == "no_results"
    assert "ai engineer" in out["available_roles"]


class FakeResponse:
    def __init__(self, status_code, payload):
        self.status_code = status_code
        self._payload = payload
        self.text = str(payload)

    def json(self):
        return self._payload


def _adzuna_tool():
    return make_adzuna_tool(AdzunaConfig(app_id="id", api_key="key"))


def test_adzuna_success(monkeypatch):
    seen = {}

    def fake_get(url, params=None, timeout=None):
        seen.update(url=url, params=params, timeout=timeout)
        return FakeResponse(200, {
            "count": 1234,
            "results": [{
                "title": "Data Scientist",
                "company": {"display_name": "Acme"},
                "location": {"display_name": "New York"},
                "salary_min": 100000,
                "salary_max": 150000,
                "description": "x" * 400,
                "created": "2026-01-02T10:00:00Z",
                "redirect_url": "https://example.com/job/1",
            }],
        })

    monkeypatch.setattr(requests, "get", fake_get)
    out = _adzuna_tool().fn(job_title="Data Scientist", location="New York")

    assert seen["url"] == "https://api.adzuna.com/v1/api/jobs/us/search/1"
    assert seen["params"]["where"] == "new_york"
    assert seen["params"]["what"] == "Data Scientist"
    assert seen["timeout"] == 10.0
    assert out["status"] == "success"
    assert out["total_jobs_available"] == 1234
    job = out["jobs"][0]
    assert job["company"] == "Acme"
    assert job["posted_date"] == "2026-01-02"
    assert job["description"].endswith("...")
    assert len(job["description"]) == 303


def test_adzuna_no_results(monkeypatch):
    monkeypatch.setattr(requests, "get", lambda url, params=None, timeout=None: FakeResponse(200, {"count": 0, "results": []}))
    out = _adzuna_tool().fn(job_title="Unicorn Wrangler")
    assert out["status"] == "no_results"


def test_adzuna_http_error_raises(monkeypatch):
    monkeypatch.setattr(requests, "get", lambda url, params=None, timeout=None: FakeResponse(401, {"error": "bad key"}))
    with pytest.raises(AdzunaError):
        _adzuna_tool().fn(job_title="Data Scientist")


def test_adzuna_connection_error_raises(monkeypatch):
    def boom(url, params=None, timeout=None):
        raise requests.ConnectionError("dns failure")

    monkeypatch.setattr(requests, "get", boom)
    with pytest.raises(AdzunaError):
        _adzuna_tool().fn(job_title="Data Scientist")


def test_adzuna_config_requires_credentials(monkeypatch):
    monkeypatch.delenv("ADZUNA_APP_ID", raising=False)
    monkeypatch.delenv("ADZUNA_API_KEY", raising=False)
    with pytest.raises(AdzunaError):
        AdzunaConfig.from_env()
