"""Global pytest fixtures for deterministic test environment."""

from __future__ import annotations

import pytest

GOOD_RESUME = """Jane Smith
jane.smith@example.com | 555-123-4567

SUMMARY
Backend engineer and team player with eight years building scalable web services.

EXPERIENCE
Acme Corp
Senior Software Engineer
2020 - Present
- Led a team of five engineers delivering a microservices platform on AWS with Docker and Kubernetes.
Startup Co
Software Engineer
2016 - 2019
- Built REST API services in Python and JavaScript, improving response times by 35 percent.

EDUCATION
Bachelor of Science in Computer Science
State University, 2016

SKILLS
Python, JavaScript, React, Node.js, SQL, AWS, Docker, Git, Agile, Communication, Leadership
"""

BACKEND_JOB_DESCRIPTION = """Backend Engineer
We are hiring a backend engineer to build Python services on AWS.
You will design REST API endpoints, run Docker containers and deploy with Kubernetes.
Python experience and strong communication skills are required. Team player with problem solving ability."""


@pytest.fixture(autouse=True)
def _isolate_runtime_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Clear local runtime env that can leak into tests on developer machines."""
    for key in (
        "ATS_CHECKER_CONFIG",
        "ATS_CHECKER_MAX_UPLOAD_BYTES",
    ):
        monkeypatch.delenv(key, raising=False)


@pytest.fixture
def good_resume_text() -> str:
    """Well-structured resume: every section present, under 300 words."""
    return GOOD_RESUME


@pytest.fixture
def backend_job_description() -> str:
    return BACKEND_JOB_DESCRIPTION


@pytest.fixture
def good_resume_file(tmp_path):
    path = tmp_path / "jane_smith.txt"
    path.write_text(GOOD_RESUME, encoding="utf-8")
    return path
