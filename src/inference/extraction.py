from __future__ import annotations

ANSWER_MARKER = "### Respuesta:"


def extract_answer(raw_text: str, marker: str = ANSWER_MARKER) -> str:
    """
    Return the text after the last ``marker`` in ``raw_text``, stripped.

    When the marker does not occur the raw text comes back untouched,
    surrounding whitespace included.
    """
    idx = raw_text.rfind(marker)
    if idx == -1:
        return raw_text
    return raw_text[idx + len(marker):].strip()
