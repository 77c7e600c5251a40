"""Bundled career records used when no career file is configured."""

from __future__ import annotations

from career_advisor.context.records import ContextRecord

SEED_CAREERS: tuple[ContextRecord, ...] = (
    ContextRecord(
        title="Data Scientist",
        description="Analyze data and build statistical and machine learning models to answer business questions.",
        required_skills=("Python", "Statistics", "SQL", "Machine Learning", "Data Visualization"),
        timeline="6-12 months",
        salary_range="$120K-$180K",
        job_growth="35% (much faster than average)",
        common_transitions=("Data Analyst", "Software Engineer", "Statistician"),
    ),
    ContextRecord(
        title="Machine Learning Engineer",
        description="Design, train and deploy machine learning systems in production.",
        required_skills=("Python", "Machine Learning", "Deep Learning", "MLOps", "System Design"),
        timeline="9-15 months",
        salary_range="$140K-$220K",
        job_growth="40% (much faster than average)",
        common_transitions=("Data Scientist", "Backend Developer"),
    ),
    ContextRecord(
        title="AI Engineer",
        description="Build applications on top of large language models, retrieval and agent frameworks.",
        required_skills=("Python", "LLMs", "Transformers", "PyTorch", "Cloud"),
        timeline="6-12 months",
        salary_range="$150K-$250K",
        job_growth="Very high demand",
        common_transitions=("Machine Learning Engineer", "Software Engineer"),
    ),
    ContextRecord(
        title="Data Analyst",
        description="Turn raw data into reports and dashboards that drive decisions.",
        required_skills=("SQL", "Excel", "Data Visualization", "Statistics", "Python"),
        timeline="3-6 months",
        salary_range="$65K-$100K",
        job_growth="23% (much faster than average)",
        common_transitions=("Business Analyst", "Accountant", "Marketing Analyst"),
    ),
    ContextRecord(
        title="DevOps Engineer",
        description="Automate build, deployment and infrastructure so teams can ship reliably.",
        required_skills=("Linux", "Docker", "Kubernetes", "CI/CD", "Cloud", "Terraform"),
        timeline="6-12 months",
        salary_range="$110K-$170K",
        job_growth="20% (much faster than average)",
        common_transitions=("System Administrator", "Backend Developer"),
    ),
    ContextRecord(
        title="Cloud Engineer",
        description="Design and operate workloads on AWS, Azure or GCP.",
        required_skills=("Cloud", "Networking", "Linux", "Terraform", "Python"),
        timeline="6-9 months",
        salary_range="$115K-$175K",
        job_growth="High demand",
        common_transitions=("System Administrator", "DevOps Engineer"),
    ),
    ContextRecord(
        title="Backend Developer",
        description="Build APIs, services and data stores behind web and mobile applications.",
        required_skills=("Python", "SQL", "Django", "Flask", "System Design", "Docker"),
        timeline="6-12 months",
        salary_range="$100K-$160K",
        job_growth="25% (much faster than average)",
        common_transitions=("Frontend Developer", "QA Engineer"),
    ),
    ContextRecord(
        title="Frontend Developer",
        description="Build user interfaces for the web with modern JavaScript frameworks.",
        required_skills=("JavaScript", "React", "HTML", "CSS", "TypeScript"),
        timeline="4-8 months",
        salary_range="$90K-$150K",
        job_growth="16% (much faster than average)",
        common_transitions=("Web Designer", "Backend Developer"),
    ),
)
