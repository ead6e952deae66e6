"""
Unit tests for skills categorization.

Tests resumate.contexts.intake.skills_extractor.
"""

from resumate.contexts.intake.resume_data_structure import SkillGroup
from resumate.contexts.intake.skills_extractor import categorize_skills


class TestCategorizeSkills:
    """Tests for categorize_skills function."""

    def test_empty_block(self):
        """Test empty block yields no groups."""
        assert categorize_skills('') == []
        assert categorize_skills('\n  \n') == []

    def test_uncategorized_list(self):
        """Test a plain list becomes one 'Skills' group."""
        assert categorize_skills('Python, Go, Rust') == [
            SkillGroup(category='Skills', items=['Python', 'Go', 'Rust'])
        ]

    def test_categories(self):
        """Test 'Category: items' lines with mixed delimiters."""
        groups = categorize_skills('Languages: Python, Go\nTools: Docker | Kubernetes')

        assert groups == [
            SkillGroup(category='Languages', items=['Python', 'Go']),
            SkillGroup(category='Tools', items=['Docker', 'Kubernetes']),
        ]

    def test_bullets_and_inline_bullets(self):
        """Test bullet glyphs are stripped and used as delimiters."""
        groups = categorize_skills('• Python • Go')
        assert groups == [SkillGroup(category='Skills', items=['Python', 'Go'])]

    def test_uncategorized_lines_pooled_in_place(self):
        """Test loose lines share one group at the first loose line's position."""
        groups = categorize_skills('Python, Go\nCloud: AWS\nRust')

        assert groups == [
            SkillGroup(category='Skills', items=['Python', 'Go', 'Rust']),
            SkillGroup(category='Cloud', items=['AWS']),
        ]

    def test_fallback_group(self):
        """Test a non-empty block never loses its content."""
        groups = categorize_skills('Frameworks:')

        assert len(groups) == 1
        assert groups[0].category == 'Technical Skills'
