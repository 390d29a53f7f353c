import json
import re
from typing import Any, Optional

# ```json ... ``` or bare ``` ... ```
_FENCE_RE = re.compile(r"```(?:json|JSON)?\s*\n?(.*?)\n?\s*```", re.DOTALL)


def extract_json_candidate(raw_text: str) -> str:
    """
    Best-effort extraction of a JSON object from free-form model output.

    1. If the text contains a fenced code block, keep only its content.
    2. Slice from the first "{" to the last "}" inclusive. A fence with no
       braces inside (e.g. ```ls``` quoted in a string) is ignored and the
       whole text is sliced instead.
    3. Without braces, return the text untouched so that the parser
       reports a real syntax error instead of an empty result.

    Never raises; all failures are left to the parse step.
    """
    if not raw_text:
        return raw_text or ""

    fence_match = _FENCE_RE.search(raw_text)
    if fence_match:
        block = _brace_block(fence_match.group(1))
        if block is not None:
            return block

    block = _brace_block(raw_text)
    return raw_text if block is None else block


def _brace_block(text: str) -> Optional[str]:
    start = text.find("{")
    end = text.rfind("}")
    if start == -1 or end < start:
        return None
    return text[start:end + 1]


def parse_model_output(raw_text: str) -> Any:
    """Extract and parse; json.JSONDecodeError propagates."""
    return json.loads(extract_json_candidate(raw_text))
