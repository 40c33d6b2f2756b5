"""Shared test configuration, fixtures, and pytest markers."""

import pytest

SAMPLE_RESUME = """Jane Doe
jane.doe@email.com | (555) 123-4567 | github.com/janedoe

Summary
Backend engineer with 6 years of experience building Python services on AWS.

Experience
Senior Software Engineer | Acme Corp | 2021 - Present
- Developed REST APIs in Python and FastAPI serving 2M requests per day
- Reduced deployment time by 40% with Docker and GitHub Actions
- Led a team of 4 engineers and mentored two interns

Software Engineer | Startup Inc | 2018 - 2021
- Built data pipelines with PostgreSQL and Redis
- Implemented monitoring that improved reliability by 25%

Education
B.S. Computer Science | State University | 2018

Skills
Python, FastAPI, PostgreSQL, Redis, Docker, AWS, Git, Linux

Projects
Open source contributor to a Python task queue

Certifications
AWS Certified Solutions Architect
"""

SAMPLE_JD = """Senior Backend Engineer
Location: Austin, TX

You will design and maintain scalable backend services.
You will collaborate with product managers and mentor junior engineers.
Responsible for building REST APIs and improving system reliability.

Requirements:
5+ years of experience with Python and SQL is required.
Strong experience with AWS and Docker.
Bachelor's degree in Computer Science or equivalent.

Nice to have: Kubernetes, Terraform, and Kafka experience.
Competitive salary and hybrid work.
"""


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "scenario: end-to-end behaviour on realistic resume and JD text"
    )


@pytest.fixture
def sample_resume() -> str:
    return SAMPLE_RESUME


@pytest.fixture
def sample_jd() -> str:
    return SAMPLE_JD
