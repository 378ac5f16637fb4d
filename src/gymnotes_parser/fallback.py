"""Optional AI completion fallback for lines the grammars cannot parse.

Best-effort only: every network, auth or format problem is logged and
reported as "no match" so the regex path never depends on it.
"""
import json
import logging
import re
from typing import Any, Dict, Optional

from gymnotes_parser.ai import AIClientFactory, AIRequestContext, retry_sync_call
from gymnotes_parser.config import settings
from gymnotes_parser.models import ParsedEntry
from gymnotes_parser.utils import to_float, to_int

logger = logging.getLogger(__name__)

_CODE_FENCE = re.compile(r"^```(?:json)?\s*|\s*```$")


class AIFallbackParser:
    """Parses one workout line through an OpenAI-compatible chat completion."""

    SYSTEM_PROMPT = """You are a workout parsing assistant. Parse user workout inputs into structured JSON format.

RULES:
1. Extract exercise name, sets, reps, weight, and any additional info
2. Handle various formats: "3x10 bench press @60kg", "squat 100x5", "deadlift 3 sets 5 reps 120kg"
3. Default weight unit is kg unless specified otherwise
4. RPE should be a number 1-10 if mentioned
5. Extract any notes/feelings from the input
6. If input is unclear, suggest corrections

RESPONSE FORMAT (JSON only):
{
  "success": true|false,
  "exercise": "Exercise Name",
  "sets": number,
  "reps": number,
  "weight": number|null,
  "unit": "kg"|"lbs",
  "rpe": number|null,
  "notes": "any additional notes",
  "restTime": number|null,
  "tempo": "string"|null,
  "suggestions": ["suggestion1", "suggestion2"]
}

EXAMPLES:
Input: "3x10 bench press @60kg"
Output: {"success": true, "exercise": "Bench Press", "sets": 3, "reps": 10, "weight": 60, "unit": "kg"}

Input: "squat 100x5 rpe 8"
Output: {"success": true, "exercise": "Squat", "sets": 1, "reps": 5, "weight": 100, "unit": "kg", "rpe": 8}

Input: "did 5 sets of 8 reps deadlift with 120kg felt heavy"
Output: {"success": true, "exercise": "Deadlift", "sets": 5, "reps": 8, "weight": 120, "unit": "kg", "notes": "felt heavy"}"""

    def __init__(self, client: Any = None, model: Optional[str] = None, user_id: Optional[str] = None):
        self._client = client
        self.model = model or settings.AI_FALLBACK_MODEL
        self.user_id = user_id

    def _get_client(self) -> Any:
        if self._client is None:
            context = AIRequestContext(user_id=self.user_id, feature_name="workout_line_fallback")
            self._client = AIClientFactory.create_openai_client(context=context)
        return self._client

    def try_parse(self, text: str) -> Optional[ParsedEntry]:
        """Return a ParsedEntry, or None on any failure."""
        if not text or not text.strip():
            return None

        try:
            client = self._get_client()
        except (ImportError, ValueError) as e:
            logger.warning(f"AI fallback unavailable: {e}")
            return None

        user_content = f'Parse this workout input: "{text.strip()}"\n\nReturn only valid JSON with the workout data.'

        def _make_api_call() -> str:
            response = client.chat.completions.create(
                model=self.model,
                max_tokens=500,
                temperature=0.1,
                messages=[
                    {"role": "system", "content": self.SYSTEM_PROMPT},
                    {"role": "user", "content": user_content},
                ],
            )
            return response.choices[0].message.content or ""

        try:
            content = retry_sync_call(_make_api_call)
        except Exception as e:
            logger.warning(f"AI fallback request failed: {e}")
            return None

        return self.parse_response(content)

    @staticmethod
    def parse_response(content: str) -> Optional[ParsedEntry]:
        """Turn the model's JSON reply into a ParsedEntry, or None if malformed."""
        cleaned = _CODE_FENCE.sub("", (content or "").strip())

        try:
            data: Dict[str, Any] = json.loads(cleaned)
        except json.JSONDecodeError as e:
            logger.warning(f"AI fallback returned invalid JSON: {e}")
            return None

        if not isinstance(data, dict) or not data.get("success"):
            return None

        exercise = data.get("exercise")
        sets = to_int(data.get("sets"))
        reps = to_int(data.get("reps"))
        if not exercise or not isinstance(exercise, str) or not sets or not reps:
            logger.warning("AI fallback response missing exercise, sets or reps")
            return None

        unit = str(data.get("unit") or "kg").lower()
        tempo = data.get("tempo")
        notes = data.get("notes")

        return ParsedEntry(
            exercise=exercise.strip(),
            sets=sets,
            reps=reps,
            weight=to_float(data.get("weight")),
            unit="lbs" if unit.startswith(("lb", "pound")) else "kg",
            rpe=to_int(data.get("rpe")),
            rest_seconds=to_int(data.get("restTime")),
            tempo=str(tempo) if tempo else None,
            notes=str(notes) if notes else None,
            strategy="ai",
        )


def build_default_fallback() -> Optional[AIFallbackParser]:
    """The configured fallback, or None when it is disabled or has no key."""
    if not settings.AI_FALLBACK_ENABLED:
        return None
    if not settings.OPENROUTER_API_KEY:
        logger.warning("AI_FALLBACK_ENABLED=true but OPENROUTER_API_KEY not set, fallback disabled")
        return None
    return AIFallbackParser()
