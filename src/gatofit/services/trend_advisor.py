"""Natural-language weight trend assessment via the Gemini API."""

import asyncio
import json
import logging
from typing import Sequence

import requests

from ..config import Config
from ..models.analysis import (
    ANALYSIS_UNAVAILABLE,
    INSUFFICIENT_DATA,
    AnalysisResult,
    AnalysisStatus,
)
from ..models.weight import WeightRecord
from .series import normalize

logger = logging.getLogger(__name__)

GEMINI_URL = "https://generativelanguage.googleapis.com/v1beta/models/{model}:generateContent"

# Number of most recent records sent to the model
RECENT_LIMIT = 15

PROMPT_TEMPLATE = """Analyse the weight history of this cat.
Consider that sudden weight changes can be dangerous.
If the weight is stable, that is good. Rapid loss or gain is a warning sign.

Data:
{data}

Reply in JSON following this schema:
- status: 'healthy' (stable/good), 'warning' (needs attention), or 'unknown'.
- message: A short observation about the trend (e.g. "Weight has been stable over the last months").
- recommendation: A short recommendation (e.g. "Keep monitoring" or "See a vet if the loss continues").

Reply in {language}."""

RESPONSE_SCHEMA = {
    "type": "OBJECT",
    "properties": {
        "status": {"type": "STRING", "enum": [s.value for s in AnalysisStatus]},
        "message": {"type": "STRING"},
        "recommendation": {"type": "STRING"},
    },
    "required": ["status", "message", "recommendation"],
}


def format_records(records: Sequence[WeightRecord]) -> str:
    """Render records one per line for the prompt."""
    lines = []
    for r in records:
        line = f"Date: {r.date.isoformat()}, Weight: {r.weight}kg"
        if r.note:
            line += f" (Note: {r.note})"
        lines.append(line)
    return "\n".join(lines)


def build_prompt(records: Sequence[WeightRecord], language: str = "English") -> str:
    """Build the instruction prompt from the most recent records."""
    recent = normalize(records)[-RECENT_LIMIT:]
    return PROMPT_TEMPLATE.format(data=format_records(recent), language=language)


def parse_reply(text: str | None) -> AnalysisResult:
    """Parse the model's JSON reply.

    Raises:
        ValueError: if the reply is empty, not JSON, or missing fields
    """
    if not text:
        raise ValueError("Empty reply from model")

    # Strip markdown code fences if the model added them
    if "```json" in text:
        text = text.split("```json")[1].split("```")[0]
    elif "```" in text:
        text = text.split("```")[1].split("```")[0]

    data = json.loads(text.strip())
    if not isinstance(data, dict):
        raise ValueError("Reply is not a JSON object")
    return AnalysisResult.from_dict(data)


class TrendAdvisor:
    """Requests a trend assessment for a record collection.

    ``analyze`` never raises: any failure gives the ``unknown`` fallback.
    """

    def __init__(self, config: Config | None = None):
        self.config = config or Config.from_env()

    async def analyze(self, records: Sequence[WeightRecord]) -> AnalysisResult:
        """Assess the weight trend of ``records``.

        Returns:
            The model's assessment, INSUFFICIENT_DATA for fewer than two
            records, or ANALYSIS_UNAVAILABLE when the call fails
        """
        if len(records) < 2:
            return INSUFFICIENT_DATA

        prompt = build_prompt(records, self.config.advisor_language)
        try:
            text = await asyncio.to_thread(self._generate, prompt)
            return parse_reply(text)
        except (
            requests.RequestException,
            ValueError,
            KeyError,
            IndexError,
            TypeError,
            AttributeError,
        ) as e:
            logger.error(f"Error analyzing weight: {e}")
            return ANALYSIS_UNAVAILABLE

    def _generate(self, prompt: str) -> str | None:
        """Send the prompt and return the reply text."""
        if not self.config.gemini_api_key:
            raise ValueError("GEMINI_API_KEY is not set")

        response = requests.post(
            GEMINI_URL.format(model=self.config.model),
            headers={
                "x-goog-api-key": self.config.gemini_api_key,
                "Content-Type": "application/json",
            },
            json={
                "contents": [{"parts": [{"text": prompt}]}],
                "generationConfig": {
                    "responseMimeType": "application/json",
                    "responseSchema": RESPONSE_SCHEMA,
                },
            },
            timeout=self.config.advisor_timeout,
        )
        response.raise_for_status()
        data = response.json()

        parts = data["candidates"][0]["content"]["parts"]
        if not isinstance(parts, list) or not all(isinstance(p, dict) for p in parts):
            raise ValueError("Malformed reply from model")
        return "".join(p.get("text", "") for p in parts) or None


class AssessmentSlot:
    """Holds the most recent assessment.

    Overlapping refreshes are not ordered; whichever completes last is kept.
    """

    def __init__(self, advisor: TrendAdvisor | None = None):
        self.advisor = advisor or TrendAdvisor()
        self.latest: AnalysisResult | None = None
        self.analyzed_count = 0

    def should_auto_analyze(self, count: int) -> bool:
        """Whether a new collection size warrants a first automatic analysis."""
        return count >= 2 and count != self.analyzed_count and self.latest is None

    async def refresh(self, records: Sequence[WeightRecord]) -> AnalysisResult:
        """Run the advisor and store its result."""
        result = await self.advisor.analyze(records)
        self.latest = result
        self.analyzed_count = len(records)
        return result
