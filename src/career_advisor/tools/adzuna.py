from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Any

import requests

from career_advisor.tools.definitions import ToolDescriptor, ToolParam, ToolSpec

logger = logging.getLogger(__name__)


class AdzunaError(RuntimeError):
    pass


@dataclass(frozen=True)
class AdzunaConfig:
    app_id: str
    api_key: str
    country: str = "us"
    results_per_page: int = 5
    base_url: str = "https://api.adzuna.com/v1/api/jobs"

    @staticmethod
    def from_env() -> "AdzunaConfig":
        app_id = os.getenv("ADZUNA_APP_ID", "").strip()
        api_key = os.getenv("ADZUNA_API_KEY", "").strip()
        if not app_id or not api_key:
            raise AdzunaError("Missing ADZUNA_APP_ID or ADZUNA_API_KEY in environment.")
        country = os.getenv("ADZUNA_COUNTRY", "us").strip().lower() or "us"
        return AdzunaConfig(app_id=app_id, api_key=api_key, country=country)


def _trim(text: str, limit: int) -> str:
    text = (text or "").strip()
    return text if len(text) <= limit else text[:limit] + "..."


def _job_summary(job: dict[str, Any]) -> dict[str, Any]:
    return {
        "title": job.get("title"),
        "company": (job.get("company") or {}).get("display_name"),
        "location": (job.get("location") or {}).get("display_name"),
        "salary_min": job.get("salary_min"),
        "salary_max": job.get("salary_max"),
        "description": _trim(job.get("description", ""), 300),
        "posted_date": (job.get("created") or "")[:10],
        "job_url": job.get("redirect_url"),
    }


def make_adzuna_tool(config: AdzunaConfig, timeout_s: float = 10.0) -> ToolSpec:
    """Factory that creates a job search tool backed by the Adzuna API."""

    def search_adzuna_jobs(job_title: str, location: str = "United States") -> dict[str, Any]:
        url = f"{config.base_url.rstrip('/')}/{config.country}/search/1"
        params = {
            "app_id": config.app_id,
            "app_key": config.api_key,
            "what": job_title,
            "where": "_".join(location.lower().split()),
            "results_per_page": config.results_per_page,
        }
        logger.info("Searching Adzuna for %r in %r", job_title, location)

        try:
            resp = requests.get(url, params=params, timeout=timeout_s)
        except requests.RequestException as e:
            raise AdzunaError(f"Failed to reach Adzuna: {e}") from e

        if resp.status_code >= 400:
            raise AdzunaError(f"Adzuna error {resp.status_code}: {resp.text[:200]}")

        try:
            data = resp.json()
        except ValueError as e:
            raise AdzunaError("Adzuna returned a non-JSON response.") from e

        jobs = data.get("results") or []
        if not jobs:
            return {
                "status": "no_results",
                "message": f'No jobs found for "{job_title}" in {location}',
                "total_available": data.get("count", 0),
            }

        return {
            "status": "success",
            "total_jobs_available": data.get("count", len(jobs)),
            "showing": len(jobs),
            "jobs": [_job_summary(j) for j in jobs],
        }

    return ToolSpec(
        descriptor=ToolDescriptor(
            name="search_adzuna_jobs",
            description="Search real job postings from the Adzuna job board.",
            params={
                "job_title": ToolParam(
                    type="string", required=True,
                    description="Job title, e.g. 'Data Scientist' or 'Python Developer'",
                ),
                "location": ToolParam(
                    type="string",
                    description="Location such as 'United States' or 'New York'. Default: United States",
                ),
            },
        ),
        fn=search_adzuna_jobs,
    )
