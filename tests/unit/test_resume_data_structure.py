"""
Unit tests for the ResumeRecord data model.

Tests coercion, defaults and serialization in
resumate.contexts.intake.resume_data_structure.
"""

from omegaconf import OmegaConf

from resumate.contexts.intake.defaults import (
    EXPERIENCE_ACHIEVEMENT_PLACEHOLDER,
    EXPERIENCE_PLACEHOLDERS,
    NAME_PLACEHOLDER,
)
from resumate.contexts.intake.patterns import PRESENT
from resumate.contexts.intake.resume_data_structure import ResumeRecord


class TestFromDict:
    """Tests for ResumeRecord.from_dict coercion."""

    def test_empty_dict(self):
        """Test empty data yields a well-formed empty record."""
        record = ResumeRecord.from_dict({})

        assert record.personal_info.full_name == NAME_PLACEHOLDER
        assert record.skills == []
        assert record.experience == []
        assert record.education == []
        assert record.projects is None
        assert record.languages is None

    def test_not_a_dict(self):
        """Test non-dict input is treated as empty."""
        assert ResumeRecord.from_dict(None) == ResumeRecord.from_dict({})

    def test_camel_case_keys(self):
        """Test camelCase keys from the AI path are accepted."""
        record = ResumeRecord.from_dict(
            {
                'personalInfo': {'fullName': 'Jane Doe', 'website': 'https://jane.dev'},
                'experience': [
                    {'title': 'Engineer', 'company': 'Acme', 'startDate': '2020', 'current': True},
                ],
                'education': [{'degree': 'BS Physics', 'graduationDate': '2019'}],
            }
        )

        assert record.personal_info.full_name == 'Jane Doe'
        assert record.personal_info.portfolio == 'https://jane.dev'
        assert record.experience[0].start_date == '2020'
        assert record.experience[0].end_date == PRESENT
        assert record.experience[0].is_current is True
        assert record.education[0].graduation_date == '2019'
        assert record.education[0].institution == 'University Name'

    def test_placeholders_for_missing_fields(self):
        """Test partial entries are completed with placeholders."""
        record = ResumeRecord.from_dict({'experience': [{'title': 'Engineer'}]})
        entry = record.experience[0]

        assert entry.company == EXPERIENCE_PLACEHOLDERS['company']
        assert entry.end_date == EXPERIENCE_PLACEHOLDERS['end_date']
        assert entry.achievements == [EXPERIENCE_ACHIEVEMENT_PLACEHOLDER]

    def test_malformed_items_skipped(self):
        """Test non-dict items and nameless optional items are dropped."""
        record = ResumeRecord.from_dict(
            {
                'experience': ['not an entry', {'title': 'Engineer'}],
                'certifications': [{'issuer': 'CNCF'}],
                'skills': 'Python',
            }
        )

        assert len(record.experience) == 1
        assert record.certifications is None
        assert record.skills == []


class TestDefault:
    """Tests for the placeholder record."""

    def test_default_record(self):
        """Test the default record's shape."""
        record = ResumeRecord.default()

        assert record.personal_info.full_name == NAME_PLACEHOLDER
        assert record.skills[0].category == 'Example Skills'
        assert record.experience[0].is_current is True
        assert record.experience[0].end_date == PRESENT
        assert record.projects is None

    def test_default_is_fresh_copy(self):
        """Test mutating one default record does not leak into the next."""
        first = ResumeRecord.default()
        first.skills[0].items.append('Skill 6')
        first.personal_info.full_name = 'Changed'

        second = ResumeRecord.default()
        assert len(second.skills[0].items) == 5
        assert second.personal_info.full_name == NAME_PLACEHOLDER


class TestSerialization:
    """Tests for to_dict, to_yaml and save."""

    def test_to_dict_drops_none(self):
        """Test optional None values are omitted."""
        data = ResumeRecord.from_dict({'personalInfo': {'fullName': 'Jane Doe'}}).to_dict()

        assert 'projects' not in data
        assert 'linkedin' not in data['personal_info']
        assert data['personal_info']['full_name'] == 'Jane Doe'

    def test_to_dict_camel_case(self):
        """Test camelCase output keys."""
        data = ResumeRecord.default().to_dict(camel_case=True)

        assert data['personalInfo']['fullName'] == NAME_PLACEHOLDER
        assert data['experience'][0]['isCurrent'] is True
        assert 'startDate' in data['experience'][0]

    def test_round_trip_through_dict(self):
        """Test to_dict output is accepted by from_dict unchanged."""
        record = ResumeRecord.default()
        assert ResumeRecord.from_dict(record.to_dict()) == record

    def test_to_yaml(self):
        """Test YAML rendering."""
        assert 'full_name: Your Name' in ResumeRecord.default().to_yaml()

    def test_save(self, tmp_path):
        """Test saving to a YAML file."""
        output_path = tmp_path / 'resume.yaml'
        ResumeRecord.default().save(output_path)

        loaded = OmegaConf.load(output_path)
        assert loaded.personal_info.full_name == NAME_PLACEHOLDER

    def test_from_text(self):
        """Test from_text delegates to the parser."""
        record = ResumeRecord.from_text('Jane Doe\njane@x.com')

        assert record.personal_info.full_name == 'Jane Doe'
        assert record.personal_info.email == 'jane@x.com'
