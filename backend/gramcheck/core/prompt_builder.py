"""Instruction templates for grammar check providers."""

SYSTEM_PROMPT = (
    "You are a professional grammar checker. "
    "Analyze text and return detailed error information in JSON format."
)

_RESPONSE_SHAPE = """{
  "errors": [
    {
      "id": "error-1",
      "type": "grammar|spelling|punctuation|style",
      "start": 2,
      "end": 8,
      "context": "I goes",
      "message": "Subject-verb disagreement",
      "suggestions": ["I go"]
    }
  ],
  "correctedText": "fully corrected version of the entire text",
  "confidence": 0.95
}"""


def escape_quotes(text: str) -> str:
    """Escape double quotes so the quoted text cannot close the instruction early."""
    return text.replace('"', '\\"')


def build_grammar_prompt(text: str) -> str:
    """Build the user instruction asking for the structured error report."""
    prompt_parts = [
        "Analyze the following text for grammar, spelling, and punctuation errors.",
        "",
        'CRITICAL: The "suggestions" field must contain the COMPLETE replacement text '
        'that should replace the "context", not a fragment or a diff.',
        '"start" and "end" are character offsets into the text (end exclusive), and '
        '"context" must be copied exactly from the text.',
        "",
        "Return JSON in this exact format:",
        _RESPONSE_SHAPE,
        "",
        f'Text to analyze: "{escape_quotes(text)}"',
        "",
        "Only flag actual errors, not stylistic preferences unless they significantly impact clarity.",
        "Return only the JSON response.",
    ]
    return "\n".join(prompt_parts)


def build_chat_messages(text: str) -> list[dict]:
    """Role-tagged messages for chat-completion providers."""
    return [
        {"role": "system", "content": SYSTEM_PROMPT},
        {"role": "user", "content": build_grammar_prompt(text)},
    ]


def build_generative_contents(text: str) -> list[dict]:
    """Nested content parts for generative-content providers (no system role)."""
    prompt = f"{SYSTEM_PROMPT}\n\n{build_grammar_prompt(text)}"
    return [{"parts": [{"text": prompt}]}]
