"""Tests for the profile schemas."""
import pytest
from pydantic import ValidationError

from jobforyou.profile import UserProfile, parse_profile


def test_from_dict_reads_camel_case(profile):
    assert profile.contact_info.name == "Ada Lovelace"
    assert profile.education[0].start_date == "2015"
    assert profile.certifications[0].skills_achieved == "Cloud design"
    assert profile.skills == ["Python", "SQL", "C_plus_plus"]


def test_round_trip_keeps_web_keys(profile_data, profile):
    data = profile.to_dict()
    assert data["experience"][0]["startDate"] == "2019"
    assert data["contactInfo"]["github"] == "https://github.com/ada"
    assert data["contactInfo"]["instagram"] == ""
    assert UserProfile.from_dict(data) == profile


def test_optional_sections_and_nulls_default_empty(profile_data):
    del profile_data["experience"]
    profile_data["projects"] = None
    profile_data["contactInfo"]["linkedin"] = None

    profile = UserProfile.from_dict(profile_data)

    assert profile.experience == []
    assert profile.projects == []
    assert profile.contact_info.linkedin == ""


def test_strings_are_stripped(profile_data):
    profile_data["contactInfo"]["name"] = "  Ada Lovelace \n"
    assert UserProfile.from_dict(profile_data).contact_info.name == "Ada Lovelace"


def test_complete_profile_parses(profile_data):
    profile, errors = parse_profile(profile_data)
    assert errors == []
    assert profile.contact_info.email == "ada@example.com"


@pytest.mark.parametrize(
    "field, value",
    [
        ("skills", "Python"),
        ("education", ["BSc Maths"]),
        ("contactInfo", "Ada Lovelace"),
        ("experience", {"title": "Engineer"}),
    ],
)
def test_wrong_types_raise_validation_error(profile_data, field, value):
    profile_data[field] = value
    with pytest.raises(ValidationError):
        UserProfile.from_dict(profile_data)


def test_string_skills_are_not_split_into_characters(profile_data):
    profile_data["skills"] = "Python"

    profile, errors = parse_profile(profile_data)

    assert profile is None
    assert [error.split(":")[0] for error in errors] == ["skills"]


def test_non_object_entry_is_located(profile_data):
    profile_data["education"] = ["BSc Maths"]

    _, errors = parse_profile(profile_data)

    assert len(errors) == 1
    assert errors[0].startswith("education.0: ")


def test_incomplete_profile_reports_each_problem():
    _, errors = parse_profile(
        {
            "contactInfo": {"name": "", "email": "not-an-email", "phone": "1"},
            "education": [],
            "experience": [{"title": "Engineer"}],
            "projects": [{"name": "X"}],
            "skills": ["Python", ""],
        }
    )
    locations = {error.split(": ")[0] for error in errors}

    assert {
        "contactInfo.name",
        "contactInfo.email",
        "education",
        "experience.0.company",
        "experience.0.responsibilities",
        "projects.0.achievements",
        "skills",
    } <= locations
    assert "skills: Skill entry can't be empty." in errors


def test_too_few_skills_message(profile_data):
    profile_data["skills"] = ["Python"]
    _, errors = parse_profile(profile_data)
    assert errors == ["skills: At least three skills are required."]


def test_non_object_profile_is_rejected():
    _, errors = parse_profile("Ada Lovelace")
    assert len(errors) == 1
    assert errors[0].startswith("profileData: ")
