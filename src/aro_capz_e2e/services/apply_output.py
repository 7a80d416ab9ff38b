"""Classification of captured ``kubectl apply`` output."""

import re

FAILURE_PATTERNS = (
    "error",
    "failed",
    "invalid",
    "unable to",
    "forbidden",
    "unauthorized",
)

# "not found" only counts as a failure after an error context on the same line.
NOT_FOUND_PATTERN = re.compile(r"(error|from server).*\bnot found\b")
WARNING_LINE_PATTERN = re.compile(r"^\s*warning", re.MULTILINE)
SUCCESS_PATTERN = re.compile(r"(?<![\w-])(created|configured|unchanged)(?![\w-])")


def has_failure_indicator(output: str) -> bool:
    text = output.lower()
    if any(pattern in text for pattern in FAILURE_PATTERNS):
        return True

    if WARNING_LINE_PATTERN.search(text):
        return True

    return any(NOT_FOUND_PATTERN.search(line) for line in text.splitlines())


def is_kubectl_apply_success(output: str) -> bool:
    """Return True only when ``output`` reports applied resources and no failure.

    Failure indicators win over success words anywhere in the output, and
    output without any recognised status is treated as a failure.
    """
    text = (output or "").lower()
    if not text.strip():
        return False

    if has_failure_indicator(text):
        return False

    return SUCCESS_PATTERN.search(text) is not None
