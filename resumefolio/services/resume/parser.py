import asyncio
import json
from typing import Any, Dict, Optional

import aiohttp

from ...config import settings
from ...core.logger import logger
from .exceptions import MalformedJsonError, NoJsonFoundError, UpstreamError

RESUME_SCHEMA = """{
  "name": "Full Name",
  "email": "user@example.com",
  "phone": "1234567890",
  "summary": "Brief professional summary",
  "skills": ["Skill1", "Skill2"],
  "achievements": ["Achievement1", "Achievement2"],
  "projects": [
    {"title": "Project Title", "description": "Short description", "link": "https://link-to-project.com"}
  ],
  "education": [
    {"degree": "Degree Name", "institution": "University or College Name", "year": "Year of completion"}
  ],
  "experience": [
    {"company": "Company Name", "title": "Job Title", "duration": "Start - End", "description": "Responsibilities and results"}
  ],
  "links": {"github": "https://github.com/username", "linkedin": "https://linkedin.com/in/username"}
}"""

PROMPT_TEMPLATE = """You are an expert resume parser. Read the resume text below and return its fields as one minified JSON object matching this schema:

{schema}

Use empty strings or empty arrays for anything the resume does not mention.
Return only the JSON object, with no explanation or markdown.

Resume Text:
\"\"\"{resume_text}\"\"\"
"""


def build_prompt(resume_text: str) -> str:
    return PROMPT_TEMPLATE.format(schema=RESUME_SCHEMA, resume_text=resume_text)


def extract_json_block(text: str) -> Optional[str]:
    """Return the first balanced ``{...}`` block in ``text``.

    Braces inside JSON string literals do not count towards the balance.
    An opening brace that never closes is skipped, so a later balanced
    block is still found. ``None`` when no block opens and closes.
    Runs in a single pass over ``text``.
    """
    open_braces = []
    best = None
    in_string = False
    escaped = False
    for index, char in enumerate(text):
        if in_string:
            if escaped:
                escaped = False
            elif char == "\\":
                escaped = True
            elif char == '"':
                in_string = False
            continue
        if char == '"':
            # quotes outside any block are prose, not JSON strings
            in_string = bool(open_braces)
        elif char == "{":
            open_braces.append(index)
        elif char == "}" and open_braces:
            start = open_braces.pop()
            if best is None or start < best[0]:
                best = (start, index)
            if not open_braces:
                break
    if best is None:
        return None
    return text[best[0]:best[1] + 1]


def parse_json_reply(raw_text: str) -> Dict[str, Any]:
    block = extract_json_block(raw_text or "")
    if block is None:
        raise NoJsonFoundError("No JSON found in the model response")
    try:
        parsed = json.loads(block)
    except json.JSONDecodeError as e:
        raise MalformedJsonError(f"Model returned malformed JSON: {e.msg}") from e
    if not isinstance(parsed, dict):
        raise MalformedJsonError("Model returned JSON that is not an object")
    return parsed


class GeminiResumeParser:
    """Turns résumé text into portfolio fields through the Gemini REST API.

    One request per call, no retry; the request is bounded by
    ``settings.GEMINI_TIMEOUT_SECONDS``.
    """

    def __init__(
        self,
        api_key: str = settings.GEMINI_API_KEY,
        base_url: str = settings.GEMINI_API_URL,
        model: str = settings.GEMINI_MODEL,
        timeout: float = settings.GEMINI_TIMEOUT_SECONDS,
    ):
        self.api_key = api_key
        self.base_url = base_url.rstrip("/")
        self.model = model
        self.timeout = timeout

    async def parse(self, resume_text: str) -> Dict[str, Any]:
        raw_text = await self._generate(build_prompt(resume_text))
        try:
            return parse_json_reply(raw_text)
        except (NoJsonFoundError, MalformedJsonError) as e:
            logger.warning(f"Could not read model response: {e}")
            raise

    async def _generate(self, prompt: str) -> str:
        url = f"{self.base_url}/models/{self.model}:generateContent"
        body = {"contents": [{"parts": [{"text": prompt}]}]}
        timeout = aiohttp.ClientTimeout(total=self.timeout)

        try:
            async with aiohttp.ClientSession(timeout=timeout) as session:
                async with session.post(url, params={"key": self.api_key}, json=body) as response:
                    if response.status != 200:
                        logger.error(f"Gemini API error: {response.status}")
                        raise UpstreamError("Failed to parse resume with the AI service")
                    data = await response.json()
        except aiohttp.ClientError as e:
            logger.error(f"Network error calling Gemini: {e}")
            raise UpstreamError("Failed to parse resume with the AI service") from e
        except asyncio.TimeoutError as e:
            logger.error("Gemini request timed out")
            raise UpstreamError("The AI service did not answer in time") from e
        except ValueError as e:
            logger.error(f"Gemini returned an unreadable body: {e}")
            raise UpstreamError("Failed to parse resume with the AI service") from e

        return self._response_text(data)

    @staticmethod
    def _response_text(data: Any) -> str:
        try:
            return data["candidates"][0]["content"]["parts"][0]["text"] or ""
        except (KeyError, IndexError, TypeError) as e:
            # blocked prompts and quota replies carry no candidates
            logger.error(f"Gemini reply has no candidate text: {str(data)[:200]}")
            raise UpstreamError("Failed to parse resume with the AI service") from e
