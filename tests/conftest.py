import pytest

from jobforyou.ai.base import Provider
from jobforyou.profile import UserProfile


class QuotaError(Exception):
    """Looks like an SDK rate-limit error."""

    def __init__(self, message="Rate limit reached", status_code=429):
        super().__init__(message)
        self.status_code = status_code


class BadRequestError(Exception):
    def __init__(self, message="Invalid request: messages must not be empty", status_code=400):
        super().__init__(message)
        self.status_code = status_code


class FakeProvider(Provider):
    """Scripted provider: returns `reply` or raises `error`, recording calls."""

    def __init__(self, name, reply="hello", error=None, api_key="test-key", timeout=None):
        super().__init__(api_key=api_key, timeout=timeout)
        self.name = name
        self.reply = reply
        self.error = error
        self.calls = []

    async def complete(self, prompt):
        self.calls.append(prompt)
        if self.error is not None:
            raise self.error
        return self.reply


class ScriptedFallback:
    """Stands in for ProviderFallback in flow and app tests."""

    def __init__(self, reply=None, error=None):
        self.reply = reply
        self.error = error
        self.prompts = []
        self.providers = ()
        self.configured = []

    async def generate(self, prompt):
        self.prompts.append(prompt)
        if self.error is not None:
            raise self.error
        return self.reply


@pytest.fixture
def profile_data():
    return {
        "contactInfo": {
            "name": "Ada Lovelace",
            "email": "ada@example.com",
            "phone": "+44 20 7946 0000",
            "linkedin": "https://linkedin.com/in/ada",
            "github": "https://github.com/ada",
        },
        "education": [
            {
                "qualification": "BSc Mathematics",
                "institute": "University of London",
                "startDate": "2015",
                "endDate": "2018",
                "achievements": "First-class honours",
            }
        ],
        "experience": [
            {
                "title": "Software Engineer",
                "company": "Analytical Engines & Co",
                "startDate": "2019",
                "endDate": "Present",
                "responsibilities": "Built data pipelines processing 10M rows/day",
            }
        ],
        "projects": [
            {"name": "Bernoulli", "date": "2021", "achievements": "Computed Bernoulli numbers at 100% accuracy"},
        ],
        "certifications": [
            {"name": "AWS Solutions Architect", "organization": "Amazon", "skillsAchieved": "Cloud design"},
        ],
        "skills": ["Python", "SQL", "C_plus_plus"],
    }


@pytest.fixture
def profile(profile_data):
    return UserProfile.from_dict(profile_data)
