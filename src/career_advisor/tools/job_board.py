from __future__ import annotations

from typing import Any

from career_advisor.tools.definitions import ToolDescriptor, ToolParam, ToolSpec

# Static postings used when no live job board is configured.
JOB_DATABASE: dict[str, list[dict[str, Any]]] = {
    "data scientist": [
        {
            "title": "Data Scientist",
            "company": "Google",
            "location": "Mountain View, CA",
            "salary": "$150k-$200k",
            "description": "Build ML models for search and recommendation systems.",
            "requirements": ["Python", "Machine Learning", "Statistics", "SQL"],
        },
        {
            "title": "Senior Data Scientist",
            "company": "Meta",
            "location": "Menlo Park, CA",
            "salary": "$160k-$220k",
            "description": "Work on AI systems for billions of users.",
            "requirements": ["Python", "Deep Learning", "TensorFlow", "Big Data"],
        },
        {
            "title": "ML Data Scientist",
            "company": "Apple",
            "location": "Cupertino, CA",
            "salary": "$140k-$190k",
            "description": "Build machine learning systems for iOS.",
            "requirements": ["Python", "Machine Learning", "Statistics", "System Design"],
        },
    ],
    "ai engineer": [
        {
            "title": "AI Engineer",
            "company": "OpenAI",
            "location": "San Francisco, CA",
            "salary": "$180k-$250k",
            "description": "Build large language models and AI systems.",
            "requirements": ["Python", "Deep Learning", "LLMs", "Transformers"],
        },
        {
            "title": "Machine Learning Engineer",
            "company": "Anthropic",
            "location": "San Francisco, CA",
            "salary": "$170k-$230k",
            "description": "Develop and deploy AI models.",
            "requirements": ["Python", "Deep Learning", "LLMs", "MLOps"],
        },
    ],
    "ml engineer": [
        {
            "title": "ML Engineer",
            "company": "LinkedIn",
            "location": "Sunnyvale, CA",
            "salary": "$160k-$210k",
            "description": "Build recommendation systems at scale.",
            "requirements": ["Python", "TensorFlow", "System Design", "Cloud"],
        },
    ],
}


def search_jobs(job_title: str) -> dict[str, Any]:
    """Look up sample postings for a role. An unknown role is a normal empty result."""
    key = job_title.strip().lower()
    jobs = JOB_DATABASE.get(key, [])

    if not jobs:
        return {
            "status": "no_results",
            "message": f"No jobs found for: {job_title}",
            "available_roles": sorted(JOB_DATABASE),
        }

    return {
        "status": "success",
        "query": job_title,
        "total_jobs": len(jobs),
        "jobs": [dict(j) for j in jobs],
    }


JOB_SEARCH_TOOL_SPEC = ToolSpec(
    descriptor=ToolDescriptor(
        name="search_jobs",
        description="Search sample job postings for a role. Returns titles, companies, salaries and requirements.",
        params={
            "job_title": ToolParam(
                type="string", required=True,
                description="Job title, e.g. 'Data Scientist', 'AI Engineer' or 'ML Engineer'",
            ),
        },
    ),
    fn=search_jobs,
)
