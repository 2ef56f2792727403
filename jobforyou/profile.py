"""
User profile schemas for resume and cover letter requests.

Keys are camelCase on the wire, matching what the web app stores.
"""

from typing import List, Tuple

from pydantic import BaseModel, ConfigDict, EmailStr, Field, ValidationError, field_validator
from pydantic.alias_generators import to_camel


class ProfileModel(BaseModel):
    """Base schema: camelCase aliases, stripped strings, null read as the default."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, str_strip_whitespace=True)

    @field_validator("*", mode="before")
    @classmethod
    def null_as_default(cls, v, info):
        field = cls.model_fields[info.field_name]
        if v is None and not field.is_required():
            return field.get_default(call_default_factory=True)
        return v


class ContactInfo(ProfileModel):
    name: str = Field(..., min_length=1, description="Name of the person")
    email: EmailStr = Field(..., description="Email address")
    phone: str = Field(..., min_length=1, description="Phone number")
    linkedin: str = Field("", description="LinkedIn profile URL")
    github: str = Field("", description="GitHub profile URL")
    instagram: str = Field("", description="Instagram profile URL")
    portfolio: str = Field("", description="Portfolio URL")
    other: str = Field("", description="Other relevant URL")


class Education(ProfileModel):
    qualification: str = Field(..., min_length=1)
    institute: str = Field(..., min_length=1)
    start_date: str = ""
    end_date: str = ""
    achievements: str = ""


class Experience(ProfileModel):
    title: str = Field(..., min_length=1)
    company: str = Field(..., min_length=1)
    start_date: str = ""
    end_date: str = ""
    responsibilities: str = Field(..., min_length=1)


class Project(ProfileModel):
    name: str = Field(..., min_length=1)
    date: str = ""
    achievements: str = Field(..., min_length=1)


class Certification(ProfileModel):
    name: str = Field(..., min_length=1)
    organization: str = Field(..., min_length=1)
    date: str = ""
    link: str = ""
    achievements: str = ""
    skills_achieved: str = ""


class UserProfile(ProfileModel):
    contact_info: ContactInfo
    education: List[Education] = Field(..., min_length=1, description="At least one education entry")
    experience: List[Experience] = Field(default_factory=list)
    projects: List[Project] = Field(default_factory=list)
    certifications: List[Certification] = Field(default_factory=list)
    skills: List[str] = Field(..., description="At least three skills")

    @field_validator("skills")
    @classmethod
    def validate_skills(cls, v):
        if any(not skill for skill in v):
            raise ValueError("Skill entry can't be empty.")
        if len(v) < 3:
            raise ValueError("At least three skills are required.")
        return v

    @classmethod
    def from_dict(cls, data):
        return cls.model_validate(data)

    def to_dict(self):
        return self.model_dump(by_alias=True)


def format_validation_errors(exc: ValidationError) -> List[str]:
    """Flatten a ValidationError into "field.path: message" lines."""
    details = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error["loc"]) or "profileData"
        message = error["msg"].removeprefix("Value error, ")
        details.append(f"{location}: {message}")
    return details


def parse_profile(data) -> Tuple[UserProfile, List[str]]:
    """Validate raw profile data; returns (profile, []) or (None, problems)."""
    try:
        return UserProfile.from_dict(data), []
    except ValidationError as exc:
        return None, format_validation_errors(exc)
