"""Redaction of sensitive values from raw XML transcripts."""

import re

FILTERED = "[FILTERED]"

SCRUBBED_ELEMENTS = (
    "user",
    "password",
    "number",
    "cardValidationNum",
    "accountNumber",
    "paypageRegistrationId",
    "authenticationValue",
)

# Content is matched lazily up to the first matching close tag, across lines.
SCRUBBED_PATTERNS = tuple(
    re.compile(rf"(<{name}>)(.*?)(</{name}>)", re.DOTALL) for name in SCRUBBED_ELEMENTS
)


def scrub(transcript: str) -> str:
    """
    Replace the text of credential and account elements with `[FILTERED]`.

    Works on raw text rather than parsed XML so it can be applied to
    partial transcripts and log lines. Tags are preserved.

    Example:
        >>> scrub("<number>4111111111111111</number>")
        '<number>[FILTERED]</number>'
    """
    for pattern in SCRUBBED_PATTERNS:
        transcript = pattern.sub(rf"\g<1>{FILTERED}\g<3>", transcript)
    return transcript
