"""
Unit tests for résumé line recognizers.

Tests date, location, bullet, contact and keyword helpers in
resumate.contexts.intake.patterns.
"""

import time

from resumate.contexts.intake.patterns import (
    PRESENT,
    ContactPatterns,
    find_date_range,
    find_gpa,
    find_graduation_date,
    find_honors,
    find_location,
    find_url,
    has_company_suffix,
    has_role_keyword,
    is_bullet,
    is_degree,
    is_institution,
    is_known_location,
    is_location_line,
    looks_like_date,
    split_items,
    starts_with_degree,
    strip_bullet,
    strip_date_range,
)


class TestFindDateRange:
    """Tests for find_date_range function."""

    def test_month_year_to_present(self):
        """Test open-ended range is flagged current and normalized."""
        result = find_date_range('Jan 2021 - Present')

        assert result.start == 'Jan 2021'
        assert result.end == PRESENT
        assert result.is_current is True

    def test_year_only_range(self):
        """Test bare year range without spaces around the dash."""
        result = find_date_range('2019-2021')

        assert result.start == '2019'
        assert result.end == '2021'
        assert result.is_current is False

    def test_numeric_range_with_to(self):
        """Test MM/YYYY dates joined by 'to'."""
        result = find_date_range('05/2018 to 06/2020')

        assert result.start == '05/2018'
        assert result.end == '06/2020'

    def test_lowercase_current_marker(self):
        """Test 'current' end marker becomes Present."""
        result = find_date_range('Sept 2019 - current')

        assert result.start == 'Sept 2019'
        assert result.end == PRESENT
        assert result.is_current is True

    def test_no_range(self):
        """Test line without dates returns None."""
        assert find_date_range('Software Engineer at Acme') is None

    def test_text_property(self):
        """Test DateRange.text joins start and end."""
        assert find_date_range('Jun 2018 - Dec 2020').text == 'Jun 2018 - Dec 2020'


class TestStripDateRange:
    """Tests for strip_date_range function."""

    def test_removes_trailing_range_and_separator(self):
        """Test dangling pipe is removed with the range."""
        line = 'Engineer | Acme | Jan 2020 - Present'
        result = strip_date_range(line, find_date_range(line))

        assert result == 'Engineer | Acme'

    def test_removes_empty_parentheses(self):
        """Test parentheses left empty by the removal are dropped."""
        line = 'Engineer - Acme (2019 - 2021)'
        result = strip_date_range(line, find_date_range(line))

        assert result == 'Engineer - Acme'


class TestDateHelpers:
    """Tests for looks_like_date and find_graduation_date."""

    def test_looks_like_date(self):
        """Test lines opening with a date or ongoing marker."""
        assert looks_like_date('May 2020')
        assert looks_like_date('2019 - 2021')
        assert looks_like_date('Present')
        assert not looks_like_date('Acme Corp')

    def test_expected_graduation(self):
        """Test 'Expected' prefix is kept with the date."""
        assert find_graduation_date('Expected May 2025') == 'Expected May 2025'

    def test_class_of(self):
        """Test 'Class of YYYY' form."""
        assert find_graduation_date('Class of 2019') == 'Class of 2019'

    def test_graduated_label_dropped(self):
        """Test 'Graduated:' label is not part of the date."""
        assert find_graduation_date('Graduated: June 2019') == 'June 2019'

    def test_range_wins(self):
        """Test ranges are returned whole."""
        assert find_graduation_date('2016 - 2020') == '2016 - 2020'

    def test_no_date(self):
        """Test text without dates."""
        assert find_graduation_date('State University') is None


class TestLocations:
    """Tests for location helpers."""

    def test_find_location_with_zip(self):
        """Test City, ST is found inside a longer string."""
        assert find_location('Boston, MA 02115') == 'Boston, MA'

    def test_is_location_line(self):
        """Test whole-line City, Region shape."""
        assert is_location_line('Springfield, IL')
        assert is_location_line('Hyderabad, India')
        assert not is_location_line('Built a compiler, in Rust')

    def test_known_location_accepts_states_and_countries(self):
        """Test recognizable regions."""
        assert is_known_location('Austin, Texas')
        assert is_known_location('Baltimore, MD')
        assert is_known_location('Hyderabad, India')

    def test_known_location_rejects_company_city(self):
        """Test 'Company, City' is not a known location."""
        assert not is_known_location('Acme Corp, Boston')

    def test_long_capitalized_run(self):
        """Test a long comma-free run of capitalized words is scanned quickly."""
        text = 'Aaaa ' * 20000
        started = time.perf_counter()

        assert find_location(text) is None
        assert time.perf_counter() - started < 5

    def test_many_word_city(self):
        """Test multi-word cities and regions."""
        assert find_location('Salt Lake City, Utah') == 'Salt Lake City, Utah'
        assert is_location_line('Ho Chi Minh City, Vietnam')


class TestContactPatterns:
    """Tests for contact regexes."""

    def test_email_after_prefix(self):
        """Test emails are found after labels and inside sentences."""
        assert ContactPatterns.EMAIL.search('Email: jane.doe+cv@example.co.uk').group(0) == 'jane.doe+cv@example.co.uk'
        assert ContactPatterns.EMAIL.search('reach me at jane@x.com today').group(0) == 'jane@x.com'

    def test_long_unbroken_text(self):
        """Test a long run with no @ is scanned quickly."""
        text = 'a' * 100000
        started = time.perf_counter()

        assert ContactPatterns.EMAIL.search(text) is None
        assert time.perf_counter() - started < 5


class TestMarkers:
    """Tests for bullet and URL helpers."""

    def test_glyph_bullets(self):
        """Test glyph bullets with and without a space."""
        assert is_bullet('• Built X')
        assert is_bullet('▪Built X')
        assert strip_bullet('•Built X') == 'Built X'

    def test_ascii_bullets_need_space(self):
        """Test '-' and '*' only count when followed by whitespace."""
        assert is_bullet('- Built X')
        assert is_bullet('* Built X')
        assert not is_bullet('-Built X')

    def test_find_url(self):
        """Test URL token is returned without trailing punctuation."""
        assert find_url('Demo: https://example.com/app.') == 'https://example.com/app'
        assert find_url('No link here') is None


class TestKeywords:
    """Tests for keyword vocabularies."""

    def test_degree_words(self):
        """Test full degree words and abbreviations."""
        assert is_degree('Bachelor of Science in Physics')
        assert is_degree('B.Sc. in Computer Science')
        assert is_degree('MBA')

    def test_bare_abbreviation_only_at_start(self):
        """Test two-letter degrees are recognized only as a line prefix."""
        assert starts_with_degree('BS in Computer Science')
        assert starts_with_degree('MS Data Science')
        assert not starts_with_degree('As a lead engineer')
        assert not is_degree('Boston, MA')

    def test_institution(self):
        """Test institution keywords."""
        assert is_institution('State University')
        assert is_institution('Boston College')
        assert not is_institution('Acme Corp')

    def test_role_and_company(self):
        """Test job title and company suffix vocabularies."""
        assert has_role_keyword('Senior Data Analyst')
        assert not has_role_keyword('Acme Corp')
        assert has_company_suffix('Acme Inc.')
        assert has_company_suffix('Beta LLC')
        assert not has_company_suffix('Globex')

    def test_honors(self):
        """Test honors phrases are returned in order."""
        assert find_honors('Magna Cum Laude, Dean\'s List') == ['Magna Cum Laude', 'Dean\'s List']
        assert find_honors('Graduated 2020') == []


class TestGpa:
    """Tests for find_gpa function."""

    def test_labeled_with_scale(self):
        """Test 'GPA: x/y' form."""
        assert find_gpa('GPA: 3.8/4.0') == '3.8/4.0'

    def test_labeled_without_scale(self):
        """Test 'Cumulative GPA 3.8' form."""
        assert find_gpa('Cumulative GPA 3.8') == '3.8'

    def test_trailing_label(self):
        """Test 'x/y GPA' form."""
        assert find_gpa('3.9/4.0 GPA') == '3.9/4.0'

    def test_no_gpa(self):
        """Test text without GPA."""
        assert find_gpa('B.Sc. in Physics, 2020') is None


class TestSplitItems:
    """Tests for split_items function."""

    def test_mixed_delimiters(self):
        """Test commas, semicolons and pipes."""
        assert split_items('Python, Go; Rust | C') == ['Python', 'Go', 'Rust', 'C']

    def test_drops_empty_items(self):
        """Test doubled delimiters don't create empty items."""
        assert split_items('Python,, ,Go') == ['Python', 'Go']
