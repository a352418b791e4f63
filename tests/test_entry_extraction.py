"""Tests for experience and education entry construction."""

from profile_parser.core.entry_parser import (
    MAX_EDUCATION_ENTRIES,
    MAX_EXPERIENCE_ENTRIES,
    build_education_entries,
    build_experience_entries,
    chunk_by_blank_lines,
)


def test_chunking_on_blank_lines():
    lines = ["Engineer", "Acme", "", "", "Intern", "Beta", ""]
    assert chunk_by_blank_lines(lines) == [["Engineer", "Acme"], ["Intern", "Beta"]]


def test_chunking_without_blank_lines_is_one_chunk():
    assert chunk_by_blank_lines(["Engineer", "Acme", "Intern"]) == [["Engineer", "Acme", "Intern"]]


def test_experience_entry_fields():
    lines = ["Senior Engineer", "Acme Corp", "2021 - Present", "Led platform rewrite."]
    [entry] = build_experience_entries(lines)

    assert entry.role == "Senior Engineer"
    assert entry.organization == "Acme Corp"
    assert entry.duration == "2021 - Present"
    assert entry.summary == "2021 - Present Led platform rewrite."


def test_duration_is_first_line_with_a_year_anywhere_in_chunk():
    lines = ["Consultant", "Self-employed", "Advised startups", "Jan 2018 - Dec 2020", "Again in 2022"]
    [entry] = build_experience_entries(lines)
    assert entry.duration == "Jan 2018 - Dec 2020"


def test_duration_can_come_from_role_line():
    [entry] = build_experience_entries(["Intern 2019", "Beta"])
    assert entry.duration == "Intern 2019"


def test_missing_fields_default_to_empty():
    [entry] = build_experience_entries(["Founder"])

    assert entry.role == "Founder"
    assert entry.organization == ""
    assert entry.duration == ""
    assert entry.summary == ""


def test_experience_capped_at_six():
    lines = []
    for i in range(9):
        lines += [f"Role {i}", f"Company {i}", ""]
    entries = build_experience_entries(lines)

    assert len(entries) == MAX_EXPERIENCE_ENTRIES
    assert [e.role for e in entries] == [f"Role {i}" for i in range(6)]


def test_education_entry_fields_and_cap():
    lines = []
    for i in range(7):
        lines += [f"University {i}", "BSc, Computer Science", f"201{i} - 201{i + 1}", ""]
    entries = build_education_entries(lines)

    assert len(entries) == MAX_EDUCATION_ENTRIES
    assert entries[0].institution == "University 0"
    assert entries[0].degree == "BSc, Computer Science"
    assert entries[0].duration == "2010 - 2011"
    assert entries[0].model_dump() == {
        "institution": "University 0",
        "degree": "BSc, Computer Science",
        "duration": "2010 - 2011",
        "summary": "2010 - 2011",
    }


def test_empty_section():
    assert build_experience_entries([]) == []
    assert build_education_entries(()) == []
    assert build_experience_entries(["", ""]) == []


def test_duration_needs_ascii_digits():
    [entry] = build_experience_entries(["Engineer", "Acme", "٢٠٢١ - Present"])
    assert entry.duration == ""
