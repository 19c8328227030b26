import json

import pytest

from hireai.errors import FormatParseError
from hireai.models import SearchSource
from hireai.normalizer import collect_sources, format_description, normalize_deadline, parse_job_response


def _payload(**overrides):
    data = {
        "title": "Data Analyst",
        "company": "Acme",
        "location": "Lahore",
        "type": "Full-time",
        "salary": "Negotiable",
        "summary": "Analyse sales data.",
        "responsibilities": ["Build dashboards", "Clean data"],
        "requirements": ["SQL", "Excel"],
        "applyLink": "jobs@acme.pk",
    }
    data.update(overrides)
    return json.dumps(data)


def test_description_sections_in_order():
    result = parse_job_response(_payload())
    desc = result.description
    assert desc.index("Summary:") < desc.index("Responsibilities:")
    assert "Summary:\nAnalyse sales data.\n\n" in desc
    assert "Responsibilities:\n- Build dashboards\n- Clean data\n\n" in desc
    assert desc.index("Responsibilities:") < desc.index("Experience:") < desc.index("Education:") < desc.index("Category:")


def test_description_defaults_for_missing_optional_fields():
    desc = format_description({"summary": "S", "responsibilities": []})
    assert "Experience: Not specified\n" in desc
    assert "Education: Not specified\n" in desc
    assert desc.endswith("Category: General\n")


def test_description_uses_optional_fields_when_present():
    desc = format_description({"summary": "S", "experience": "3 years", "education": "BSc", "category": "IT"})
    assert "Experience: 3 years" in desc
    assert "Education: BSc" in desc
    assert "Category: IT" in desc


def test_fields_are_mapped():
    result = parse_job_response(_payload(imageUrl="https://x.pk/poster.png", deadline="2025-01-31"))
    assert result.title == "Data Analyst"
    assert result.salary == "Negotiable"
    assert result.requirements == ["SQL", "Excel"]
    assert result.apply_link == "jobs@acme.pk"
    assert result.deadline == "2025-01-31"
    assert result.image_url == "https://x.pk/poster.png"


@pytest.mark.parametrize("deadline", ["ASAP", "As soon as possible", "Until filled", "Check original advertisement", "", None])
def test_relative_deadlines_become_empty(deadline):
    assert parse_job_response(_payload(deadline=deadline)).deadline == ""


@pytest.mark.parametrize("deadline", ["2024-12-31", "December 31, 2024", "31/12/2024", "15th March 2025"])
def test_calendar_deadlines_are_kept(deadline):
    assert normalize_deadline(deadline) == deadline


@pytest.mark.parametrize("deadline, expected", [
    ("ASAP, or by 5 March", "5 March"),
    ("Apply before December 31, 2024 (extended)", "December 31, 2024"),
    ("Closing date: 31/12/2024 or until filled", "31/12/2024"),
])
def test_relative_wording_around_a_date_is_dropped(deadline, expected):
    assert normalize_deadline(deadline) == expected


def test_invalid_json_raises_with_raw_payload():
    with pytest.raises(FormatParseError) as info:
        parse_job_response("Sorry, I can't help with that.")
    assert info.value.raw == "Sorry, I can't help with that."


def test_non_object_json_raises():
    with pytest.raises(FormatParseError):
        parse_job_response("[1, 2, 3]")


def test_empty_reply_reads_as_empty_object():
    result = parse_job_response("")
    assert result.title == ""
    assert result.requirements == []
    assert result.description.startswith("Summary:\n")


def test_sources_deduplicated_first_wins():
    sources = collect_sources([
        {"title": "First A", "uri": "a"},
        {"title": "B", "uri": "b"},
        {"title": "Second A", "uri": "a"},
    ])
    assert sources == [SearchSource("First A", "a"), SearchSource("B", "b")]


def test_sources_without_real_uri_dropped():
    assert len(collect_sources([{"uri": "#"}, {"uri": "http://x"}])) == 1
    assert collect_sources([{"title": "No uri"}, {"uri": None}, {"uri": ""}]) == []


def test_source_title_defaults():
    assert collect_sources([{"uri": "http://x", "title": None}]) == [SearchSource("Job Source", "http://x")]
