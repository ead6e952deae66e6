"""
Unit tests for AI-assisted fill with heuristic fallback.

Tests resumate.contexts.assist.intelligent_fill with stand-in providers.
"""

import json
from types import SimpleNamespace

from resumate.contexts.assist import build_fill_prompt, coerce_reply, intelligent_fill
from resumate.contexts.intake import ResumeRecord, parse_resume_text

RESUME_TEXT = 'Jane Doe\njane@x.com\n\nEXPERIENCE\nSoftware Engineer - Acme Corp\nJan 2021 - Present\n'

AI_REPLY = {
    'personalInfo': {'fullName': 'Jane A. Doe', 'email': 'jane@x.com'},
    'experience': [
        {'title': 'Engineer', 'company': 'Acme', 'startDate': '2021', 'endDate': 'Present'},
    ],
}


class FakeProvider:
    """Provider with the generate(system_prompt, user_prompt) interface."""

    def __init__(self, content):
        self.content = content
        self.calls = []

    def generate(self, system_prompt, user_prompt):
        self.calls.append((system_prompt, user_prompt))
        return SimpleNamespace(content=self.content)


class TestBuildFillPrompt:
    """Tests for build_fill_prompt function."""

    def test_includes_schema_and_text(self):
        """Test prompt carries the schema and the résumé."""
        prompt = build_fill_prompt(RESUME_TEXT)

        assert 'personalInfo' in prompt
        assert 'Software Engineer - Acme Corp' in prompt

    def test_truncates_long_text(self):
        """Test very long résumés are cut."""
        prompt = build_fill_prompt('x' * 20000)
        assert 'x' * 16001 not in prompt


class TestCoerceReply:
    """Tests for coerce_reply function."""

    def test_fenced_json(self):
        """Test JSON inside a markdown code fence."""
        record = coerce_reply('```json\n' + json.dumps(AI_REPLY) + '\n```')

        assert record.personal_info.full_name == 'Jane A. Doe'
        assert record.experience[0].is_current is True

    def test_json_in_prose(self):
        """Test JSON object surrounded by chatter."""
        record = coerce_reply('Here you go: {"summary": "Builds things"} Hope that helps!')
        assert record.summary == 'Builds things'

    def test_dict_and_record(self):
        """Test dict replies are coerced and records pass through."""
        assert coerce_reply(AI_REPLY).experience[0].company == 'Acme'
        record = ResumeRecord.default()
        assert coerce_reply(record) is record

    def test_not_a_resume(self):
        """Test replies without résumé keys are rejected."""
        assert coerce_reply('I cannot help with that.') is None
        assert coerce_reply('[1, 2, 3]') is None
        assert coerce_reply({'answer': 42}) is None
        assert coerce_reply(None) is None


class TestIntelligentFill:
    """Tests for intelligent_fill function."""

    def test_no_provider(self):
        """Test missing provider goes straight to the parser."""
        result = intelligent_fill(RESUME_TEXT)

        assert result.source == 'heuristic'
        assert result.record == parse_resume_text(RESUME_TEXT)

    def test_callable_provider(self):
        """Test plain callables receive the prompt."""
        prompts = []

        def provider(prompt):
            prompts.append(prompt)
            return json.dumps(AI_REPLY)

        result = intelligent_fill(RESUME_TEXT, provider)

        assert result.source == 'ai'
        assert result.record.personal_info.full_name == 'Jane A. Doe'
        assert 'Software Engineer - Acme Corp' in prompts[0]

    def test_generate_provider(self):
        """Test providers exposing generate() get system and user prompts."""
        provider = FakeProvider(json.dumps(AI_REPLY))
        result = intelligent_fill(RESUME_TEXT, provider)

        assert result.source == 'ai'
        system_prompt, user_prompt = provider.calls[0]
        assert 'resume parser' in system_prompt
        assert 'Jane Doe' in user_prompt

    def test_failing_provider_falls_back(self):
        """Test provider exceptions never propagate."""

        def provider(prompt):
            raise TimeoutError('model took too long')

        result = intelligent_fill(RESUME_TEXT, provider)

        assert result.source == 'heuristic'
        assert result.record.experience[0].company == 'Acme Corp'

    def test_unusable_reply_falls_back(self):
        """Test replies that aren't résumés fall back to the parser."""
        result = intelligent_fill(RESUME_TEXT, FakeProvider('Sorry, no.'))

        assert result.source == 'heuristic'
        assert result.record.personal_info.full_name == 'Jane Doe'
