"""Shared utility for parsing JSON from LLM responses."""

import json
import logging
import re

logger = logging.getLogger(__name__)

# Greedy: first "{" to last "}" so nested objects survive intact.
_OBJECT_SPAN = re.compile(r"\{.*\}", re.DOTALL)


def parse_json_object_from_llm_response(content: str) -> dict | None:
    """Parse a JSON object from an LLM response.

    Handles two formats:
    1. Direct JSON: {"key": "value"}
    2. Embedded JSON: prose or markdown fences around {"key": "value"}

    Returns None when no JSON object can be recovered.
    """
    if not isinstance(content, str):
        return None

    try:
        data = json.loads(content)
        if isinstance(data, dict):
            return data
    except (ValueError, RecursionError):
        pass

    match = _OBJECT_SPAN.search(content)
    if match:
        try:
            data = json.loads(match.group(0))
            if isinstance(data, dict):
                return data
        except (ValueError, RecursionError):
            pass

    logger.warning("Could not parse JSON object from LLM response: %s", content[:200])
    return None
