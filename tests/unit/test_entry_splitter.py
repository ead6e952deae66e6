"""
Unit tests for splitting section blocks into entries.

Tests resumate.contexts.intake.entry_splitter.
"""

from resumate.contexts.intake.entry_splitter import (
    EXPERIENCE_BOUNDARIES,
    find_boundary,
    split_entries,
)


class TestBlankLineSplit:
    """Tests for the blank-line primary boundary."""

    def test_blank_lines_separate_entries(self):
        """Test blank-line runs split a block."""
        block = 'Engineer - Acme\nJan 2020 - Present\n\n\nAnalyst - Beta\n2018 - 2019'
        entries = split_entries(block, 'experience')

        assert entries == ['Engineer - Acme\nJan 2020 - Present', 'Analyst - Beta\n2018 - 2019']

    def test_empty_block(self):
        """Test empty or whitespace-only blocks yield no entries."""
        assert split_entries('', 'experience') == []
        assert split_entries('  \n \n', 'projects') == []

    def test_single_line(self):
        """Test one line is one entry."""
        assert split_entries('Freelance', 'experience') == ['Freelance']


class TestExperienceBoundaries:
    """Tests for the experience line-scan rules."""

    def test_role_title_starts_new_entry(self):
        """Test a titled line after dates and bullets opens a new job."""
        block = (
            'Software Engineer - Acme Corp\n'
            'Jan 2021 - Present\n'
            '• Built X\n'
            'Data Analyst - Beta LLC\n'
            '2018 - 2020\n'
            '• Did Y'
        )
        entries = split_entries(block, 'experience')

        assert len(entries) == 2
        assert entries[1].startswith('Data Analyst - Beta LLC')

    def test_company_then_title_kept_together(self):
        """Test a company line followed by the title is one entry."""
        block = 'Acme Corp\nSoftware Engineer\nJan 2021 - Present\n• Built X'
        assert split_entries(block, 'experience') == [block]

    def test_company_line_looks_ahead_to_title(self):
        """Test 'Company' + 'Title' after a finished entry opens a new one."""
        block = (
            'Engineer - Initech\n'
            '2019 - 2020\n'
            '• Wrote reports\n'
            'Beta Inc\n'
            'Senior Developer\n'
            '2017 - 2019\n'
            '• Shipped Y'
        )
        entries = split_entries(block, 'experience')

        assert entries == [
            'Engineer - Initech\n2019 - 2020\n• Wrote reports',
            'Beta Inc\nSenior Developer\n2017 - 2019\n• Shipped Y',
        ]

    def test_find_boundary_reports_rule(self):
        """Test the firing rule's name is returned."""
        lines = ['Engineer - Acme', '2020 - 2021', 'Backend Developer at Globex']
        entry = lines[:2]

        assert find_boundary(lines, 2, entry, EXPERIENCE_BOUNDARIES) == 'role_title'
        assert find_boundary(lines, 1, lines[:1], EXPERIENCE_BOUNDARIES) == ''


class TestEducationBoundaries:
    """Tests for the education line-scan rules."""

    def test_repeated_degree_starts_new_entry(self):
        """Test a second degree line opens a new entry."""
        block = 'BS Computer Science\nState University\nMS Data Science\nTech Institute'
        entries = split_entries(block, 'education')

        assert entries == ['BS Computer Science\nState University', 'MS Data Science\nTech Institute']

    def test_repeated_institution_starts_new_entry(self):
        """Test a second institution line opens a new entry."""
        block = 'State University\nBachelor of Arts\nCity College\nAssociate of Science'
        entries = split_entries(block, 'education')

        assert entries == ['State University\nBachelor of Arts', 'City College\nAssociate of Science']


class TestProjectBoundaries:
    """Tests for the project line-scan rules."""

    def test_title_after_body_starts_new_project(self):
        """Test a short capitalized line opens a project once one has content."""
        block = (
            'Resumate\n'
            'A tool that parses resumes into records\n'
            'Technologies: Python\n'
            'Weather App\n'
            'Forecast dashboard built with React'
        )
        entries = split_entries(block, 'projects')

        assert len(entries) == 2
        assert entries[1] == 'Weather App\nForecast dashboard built with React'

    def test_sentence_line_stays_in_project(self):
        """Test a lowercase description line is not taken as a new title."""
        block = 'Resumate\nhttps://github.com/jane/resumate\nParses resumes into structured records'
        assert split_entries(block, 'projects') == [block]

    def test_numbered_projects(self):
        """Test numbered lines always open a project."""
        assert split_entries('1. Alpha\n2. Beta', 'projects') == ['1. Alpha', '2. Beta']

    def test_no_line_is_lost(self):
        """Test every non-blank line lands in exactly one entry."""
        block = 'Project: One\nDoes a thing well enough\nhttps://one.dev\nProject: Two\nAnother thing'
        entries = split_entries(block, 'projects')
        rejoined = [line for entry in entries for line in entry.split('\n')]

        assert rejoined == block.split('\n')
