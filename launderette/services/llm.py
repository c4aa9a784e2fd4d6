"""FAQ and blog content generation with OpenAI."""

from __future__ import annotations

import json
import re
from typing import Any

from openai import OpenAI
from pydantic import ValidationError

from launderette.core.config import settings
from launderette.schemas.faq import FaqItem

FAQ_COUNT = 5

_FENCE_RE = re.compile(r"^```(?:json)?\s*|\s*```$")


def strip_code_fences(content: str) -> str:
    """Remove a surrounding ```json ... ``` block if the model added one."""
    return _FENCE_RE.sub("", content.strip()).strip()


def parse_faq_items(content: str, expected: int = FAQ_COUNT) -> list[FaqItem]:
    """Parse the model output into exactly ``expected`` FAQ items."""
    data: Any = json.loads(strip_code_fences(content))
    # json_object mode wraps arrays in an object, e.g. {"faqs": [...]}.
    if isinstance(data, dict):
        data = next((v for v in data.values() if isinstance(v, list)), None)
    if not isinstance(data, list) or len(data) != expected:
        count = len(data) if isinstance(data, list) else 0
        raise ValueError(f"Expected {expected} FAQs, got {count}")
    try:
        return [FaqItem.model_validate(item) for item in data]
    except ValidationError as exc:
        raise ValueError("Invalid FAQ structure") from exc


def _client() -> OpenAI:
    if not settings.openai_api_key:
        raise RuntimeError("OPENAI_API_KEY is not configured.")
    return OpenAI(api_key=settings.openai_api_key, base_url=settings.openai_base_url)


class FaqGenerator:
    """Wrapper around the chat completions API for city FAQs."""

    def __init__(self) -> None:
        self._client = _client()

    def generate(self, city_name: str) -> list[FaqItem]:
        """Ask the model for five launderette FAQs about ``city_name``."""
        system_prompt = (
            "You are a helpful assistant that generates FAQ content for launderette "
            "directory websites. Always respond with valid JSON only, no additional text."
        )
        user_prompt = (
            f"Generate {FAQ_COUNT} frequently asked questions and answers about using "
            f"launderettes in {city_name}, UK.\n\n"
            "Focus on general launderette topics, such as:\n"
            "- What services do launderettes offer?\n"
            "- How much does it cost to use a launderette?\n"
            "- Do I need to stay while my laundry is washing?\n"
            "- What payment methods do launderettes accept?\n"
            "- What's the difference between self-service and service wash?\n"
            "- How long does it take to wash and dry clothes?\n"
            "- What should I bring to a launderette?\n\n"
            'Return a JSON object {"faqs": [...]} with exactly '
            f'{FAQ_COUNT} objects, each with "question" and "answer" fields. '
            "Keep answers concise (2-3 sentences) and helpful."
        )
        response = self._client.chat.completions.create(
            model=settings.openai_response_model,
            messages=[
                {"role": "system", "content": system_prompt},
                {"role": "user", "content": user_prompt},
            ],
            response_format={"type": "json_object"},
            temperature=0.7,
            max_tokens=1500,
        )
        content = response.choices[0].message.content or "[]"
        return parse_faq_items(content)


class BlogWriter:
    """Long-form articles for the blog, returned as Markdown."""

    system_prompt = (
        "You are a professional laundry and fabric care expert writing for a UK "
        "audience. Write engaging, practical blog posts that are genuinely helpful, "
        "in a friendly, conversational but authoritative tone. Include UK pricing, "
        "brands and context where relevant. Use ## for main sections and ### for "
        "subsections, with bullet points and numbered lists where they help. Do not "
        "include a title or meta description: start with an engaging introduction."
    )

    def __init__(self) -> None:
        self._client = _client()

    def write(self, prompt: str) -> str:
        response = self._client.chat.completions.create(
            model=settings.openai_response_model,
            messages=[
                {"role": "system", "content": self.system_prompt},
                {"role": "user", "content": prompt},
            ],
            temperature=0.7,
            max_tokens=2000,
        )
        content = strip_code_fences(response.choices[0].message.content or "")
        if not content:
            raise ValueError("Model returned an empty article")
        return content
