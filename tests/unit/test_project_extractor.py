"""
Unit tests for project entry extraction.

Tests resumate.contexts.intake.project_extractor.
"""

from resumate.contexts.intake.defaults import (
    PROJECT_ACHIEVEMENT_PLACEHOLDER,
    PROJECT_PLACEHOLDERS,
)
from resumate.contexts.intake.project_extractor import (
    clean_project_name,
    extract_project_entry,
    extract_projects,
)


class TestCleanProjectName:
    """Tests for clean_project_name function."""

    def test_numbered_with_prefix(self):
        """Test numbering and 'Project:' prefix are removed."""
        assert clean_project_name('1. Project: Weather App') == 'Weather App'

    def test_bulleted(self):
        """Test bullet glyph is removed."""
        assert clean_project_name('• Resumate') == 'Resumate'


class TestExtractProjectEntry:
    """Tests for extract_project_entry function."""

    def test_labeled_technologies(self):
        """Test 'Technologies:' line feeds the technology list."""
        project = extract_project_entry('Resumate\nTechnologies: React, Node.js')

        assert project.name == 'Resumate'
        assert project.technologies == ['React', 'Node.js']
        assert project.description == PROJECT_PLACEHOLDERS['description']

    def test_link_description_and_bullets(self):
        """Test a fully described project."""
        project = extract_project_entry(
            'Resumate\n'
            'https://github.com/jane/resumate\n'
            'Parses resumes into structured records\n'
            '• Handles forty layouts'
        )

        assert project.link == 'https://github.com/jane/resumate'
        assert project.description == 'Parses resumes into structured records'
        assert project.achievements == ['Handles forty layouts']

    def test_bracketed_technologies(self):
        """Test '(React, Node.js)' line is a technology list."""
        project = extract_project_entry('Chat App\n(React, Node.js)')
        assert project.technologies == ['React', 'Node.js']

    def test_continuation_lines_become_achievements(self):
        """Test long lines after the description are achievements."""
        project = extract_project_entry(
            'Chat App\nReal-time chat with websocket rooms\nSupports 10k concurrent users'
        )

        assert project.description == 'Real-time chat with websocket rooms'
        assert project.achievements == ['Supports 10k concurrent users']

    def test_label_is_not_description(self):
        """Test 'Role: ...' lines are not taken as the description."""
        project = extract_project_entry('Chat App\nRole: Lead developer on the team')
        assert project.description == PROJECT_PLACEHOLDERS['description']

    def test_placeholders(self):
        """Test a bare name gets placeholders and no link."""
        project = extract_project_entry('Solo')

        assert project.name == 'Solo'
        assert project.technologies == []
        assert project.link is None
        assert project.achievements == [PROJECT_ACHIEVEMENT_PLACEHOLDER]

    def test_extract_projects_skips_blank(self):
        """Test blank entries are dropped."""
        assert [p.name for p in extract_projects(['A1 Tool', ''])] == ['A1 Tool']
