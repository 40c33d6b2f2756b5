from services.section_parser import (
    MISSING_SECTIONS_SUGGESTION,
    SECTION_RULES,
    check_structure,
    content_quality_suggestions,
    has_contact_info,
    scan_ats_artifacts,
)


def test_full_resume_has_every_section(sample_resume):
    report = check_structure(sample_resume)
    assert report.score == 100
    assert all(s.present for s in report.sections)
    assert report.missing_sections == []
    assert MISSING_SECTIONS_SUGGESTION not in report.suggestions


def test_sections_reported_in_canonical_order(sample_resume):
    report = check_structure(sample_resume)
    assert [s.section_name for s in report.sections] == [name for name, _, _ in SECTION_RULES]


def test_empty_resume():
    report = check_structure("")
    assert report.score == 0
    assert not any(s.present for s in report.sections)
    assert len(report.warnings) == sum(1 for _, _, required in SECTION_RULES if required)
    assert report.suggestions == [MISSING_SECTIONS_SUGGESTION]


def test_missing_required_section_warns():
    text = "jane@example.com\nExperience\nBuilt things in 2020\nSkills\nPython"
    report = check_structure(text)
    education = next(s for s in report.sections if s.section_name == "Education")
    assert not education.present
    assert education.required
    assert education.warning == "Missing Education section - most ATS systems expect this"
    assert education.warning in report.warnings


def test_optional_sections_do_not_warn():
    text = "jane@example.com\nExperience\nEducation\nSkills\n2020 2021"
    report = check_structure(text)
    projects = next(s for s in report.sections if s.section_name == "Projects")
    assert not projects.present
    assert projects.warning is None
    # 4 of 7 sections present
    assert report.score == 57


def test_section_keywords_need_word_boundaries():
    report = check_structure("Reprojection of the deskills cube")
    present = {s.section_name for s in report.sections if s.present}
    assert "Projects" not in present
    assert "Skills" not in present


class TestContactInfo:
    def test_email(self):
        assert has_contact_info("reach me at jane@example.com")

    def test_label(self):
        assert has_contact_info("Phone: call the front desk")

    def test_phone_digits(self):
        assert has_contact_info("(555) 123-4567")

    def test_short_number_is_not_phone(self):
        assert not has_contact_info("Room 12-34")


class TestAtsArtifacts:
    def test_images_and_pipes(self):
        text = "photo.png " + "a | " * 11 + " 2020"
        warnings, _ = scan_ats_artifacts(text)
        assert "Images detected - ATS cannot read embedded images" in warnings
        assert "Heavy use of pipe characters - may cause ATS parsing issues" in warnings

    def test_special_characters(self):
        warnings, _ = scan_ats_artifacts("★★★ ✓✓✓ 2021")
        assert "Special characters detected - some ATS may not parse correctly" in warnings

    def test_table_layout_and_length(self):
        _, suggestions = scan_ats_artifacts("Skill\t\tLevel 2019")
        assert "Complex formatting detected - consider using simple single-column layout" in suggestions
        assert "Resume appears short - consider adding more detail" in suggestions

    def test_long_resume(self):
        _, suggestions = scan_ats_artifacts("word " * 1001 + "2020")
        assert "Resume appears long - consider condensing to 1-2 pages" in suggestions

    def test_no_dates(self):
        warnings, _ = scan_ats_artifacts("no years mentioned anywhere")
        assert "No dates found - include dates for experience and education" in warnings


def test_content_quality_on_sample_is_quiet(sample_resume):
    suggestions = content_quality_suggestions(sample_resume)
    assert not any("email" in s for s in suggestions)
    assert not any("phone" in s for s in suggestions)
    assert not any("metrics" in s for s in suggestions)
    assert not any("bullet points" in s for s in suggestions)


def test_content_quality_on_thin_text():
    suggestions = content_quality_suggestions("I did some work")
    assert "Resume likely missing a valid email address." in suggestions
    assert "Resume likely missing a phone number." in suggestions
    assert any(s.startswith("Found only 0 strong action verbs") for s in suggestions)
