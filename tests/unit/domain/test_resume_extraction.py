"""Tests for basic resume text extraction."""

from recruitai.domain.services.resume_extraction import extract_basic_info

RESUME = """
Grace Hopper
grace.hopper@navy.example.org | +1 (555) 123-4567

Senior engineer: Python, Django and PostgreSQL on AWS. Some javascript.
"""


def test_extracts_contact_details():
    info = extract_basic_info(RESUME)
    assert info.email == "grace.hopper@navy.example.org"
    assert info.phone is not None and "555" in info.phone


def test_extracts_known_skills_case_insensitively():
    info = extract_basic_info(RESUME)
    for skill in ("Python", "Django", "PostgreSQL", "AWS", "JavaScript", "SQL", "Java"):
        assert skill in info.skills


def test_plain_text_has_nothing_to_extract():
    info = extract_basic_info("Looking for a role in gardening.")
    assert info.skills == []
    assert info.email is None
    assert info.phone is None
