import asyncio
import json

import aiohttp
import pytest

from resumefolio.services.resume import (
    GeminiResumeParser,
    MalformedJsonError,
    NoJsonFoundError,
    UpstreamError,
    build_prompt,
    extract_json_block,
    parse_json_reply,
)
from resumefolio.services.resume_service import coerce_parsed_resume


class CannedParser(GeminiResumeParser):
    def __init__(self, reply=None, error=None):
        super().__init__(api_key="k", base_url="http://gemini.invalid", model="m", timeout=1)
        self.reply = reply
        self.error = error
        self.prompts = []

    async def _generate(self, prompt):
        self.prompts.append(prompt)
        if self.error is not None:
            raise self.error
        return self.reply


def test_prompt_embeds_resume_text_and_schema():
    prompt = build_prompt("Jane Roe, jane@example.com")

    assert '"""Jane Roe, jane@example.com"""' in prompt
    for key in ("skills", "achievements", "projects", "education", "experience", "linkedin"):
        assert f'"{key}"' in prompt


def test_extract_json_block_from_prose():
    text = 'Sure! Here is the data:\n```json\n{"name": "A", "skills": ["x"]}\n```\nLet me know.'

    assert extract_json_block(text) == '{"name": "A", "skills": ["x"]}'


def test_extract_json_block_takes_the_first_balanced_block():
    text = '{"a": {"b": 1}} and later {"c": 2}'

    assert extract_json_block(text) == '{"a": {"b": 1}}'


def test_extract_json_block_ignores_braces_inside_strings():
    text = 'x {"summary": "uses } and { freely", "n": "\\"q\\""} y'

    block = extract_json_block(text)
    assert json.loads(block) == {"summary": "uses } and { freely", "n": '"q"'}


def test_extract_json_block_skips_unbalanced_prefix():
    assert extract_json_block('{ broken then {"ok": true}') == '{"ok": true}'
    assert extract_json_block("no braces at all") is None
    assert extract_json_block("only { open") is None


def test_extract_json_block_handles_long_unbalanced_input():
    assert extract_json_block("{" * 200000) is None
    assert extract_json_block("{" * 50000 + '{"a": 1}') == '{"a": 1}'
    assert extract_json_block('"' + "{" * 50000) is None


def test_parse_json_reply_errors():
    with pytest.raises(NoJsonFoundError):
        parse_json_reply("I could not find any resume details.")
    with pytest.raises(MalformedJsonError):
        parse_json_reply("{name: 'single quotes'}")


def test_parser_returns_object_from_reply():
    parser = CannedParser(reply='Result: {"name": "John Doe", "email": "john@x.com", "phone": "555-1234"}')

    parsed = asyncio.run(parser.parse("John Doe, john@x.com, 555-1234, built X, Y, Z"))

    assert parsed == {"name": "John Doe", "email": "john@x.com", "phone": "555-1234"}
    assert "John Doe, john@x.com" in parser.prompts[0]


def test_parser_prose_only_reply_is_no_json_found():
    parser = CannedParser(reply="Sorry, I cannot help with that.")

    with pytest.raises(NoJsonFoundError):
        asyncio.run(parser.parse("text"))


def test_parser_propagates_upstream_errors():
    parser = CannedParser(error=UpstreamError("down"))

    with pytest.raises(UpstreamError):
        asyncio.run(parser.parse("text"))


def test_network_failure_becomes_upstream_error(monkeypatch):
    class BrokenSession:
        def __init__(self, *args, **kwargs):
            pass

        async def __aenter__(self):
            raise aiohttp.ClientConnectionError("connection refused")

        async def __aexit__(self, *exc):
            return False

    monkeypatch.setattr(aiohttp, "ClientSession", BrokenSession)
    parser = GeminiResumeParser(api_key="k", base_url="http://gemini.invalid", model="m", timeout=1)

    with pytest.raises(UpstreamError):
        asyncio.run(parser.parse("text"))


def test_unreadable_json_body_becomes_upstream_error(monkeypatch):
    class GarbledResponse:
        status = 200

        async def json(self):
            return json.loads("<html>not json</html>")

        async def __aenter__(self):
            return self

        async def __aexit__(self, *exc):
            return False

    class GarbledSession:
        def __init__(self, *args, **kwargs):
            pass

        async def __aenter__(self):
            return self

        async def __aexit__(self, *exc):
            return False

        def post(self, *args, **kwargs):
            return GarbledResponse()

    monkeypatch.setattr(aiohttp, "ClientSession", GarbledSession)
    parser = GeminiResumeParser(api_key="k", base_url="http://gemini.invalid", model="m", timeout=1)

    with pytest.raises(UpstreamError):
        asyncio.run(parser.parse("text"))


def test_response_text_is_read_from_first_candidate():
    data = {"candidates": [{"content": {"parts": [{"text": '{"name": "A"}'}]}}]}

    assert GeminiResumeParser._response_text(data) == '{"name": "A"}'
    assert GeminiResumeParser._response_text({"candidates": [{"content": {"parts": [{"text": ""}]}}]}) == ""


def test_reply_without_candidates_is_upstream_error():
    with pytest.raises(UpstreamError):
        GeminiResumeParser._response_text({})
    with pytest.raises(UpstreamError):
        GeminiResumeParser._response_text({"candidates": []})
    with pytest.raises(UpstreamError):
        GeminiResumeParser._response_text({"promptFeedback": {"blockReason": "SAFETY"}})


def test_coerce_fills_missing_fields_with_defaults():
    result = coerce_parsed_resume({"name": "John Doe", "email": "john@x.com", "phone": "555-1234"})

    assert result["name"] == "John Doe"
    assert result["summary"] == ""
    assert result["skills"] == []
    assert result["achievements"] == []
    assert result["projects"] == []
    assert result["education"] == []
    assert result["experience"] == []
    assert result["links"] == {"github": "", "linkedin": ""}


def test_coerce_normalizes_entry_shapes_and_types():
    result = coerce_parsed_resume({
        "skills": ["Go", 3, None, ""],
        "education": [{"degree": "BSc", "year": 2020}, "garbage"],
        "projects": "not a list",
        "links": {"github": "https://github.com/jd"},
        "summary": None,
    })

    assert result["skills"] == ["Go", "3"]
    assert result["education"] == [{"degree": "BSc", "institution": "", "year": "2020"}]
    assert result["projects"] == []
    assert result["links"] == {"github": "https://github.com/jd", "linkedin": ""}
    assert result["summary"] == ""
