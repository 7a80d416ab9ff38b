"""Actionable error catalog for the ARO CAPZ end-to-end helpers."""

from typing import Dict

_ERROR_MESSAGES: Dict[str, Dict[str, str]] = {
    "file_not_accessible": {
        "what": "file not accessible: {path} ({reason})",
        "next": "Check that the path exists, is a regular file and is readable.",
    },
    "empty_file": {
        "what": "file is empty: {path}",
        "next": "Re-run the generation script and check that it wrote its output.",
    },
    "invalid_yaml_syntax": {
        "what": "invalid YAML syntax in {path}: {reason}",
        "next": "Fix the indentation or the missing `key: value` separator reported above.",
    },
    "no_yaml_data": {
        "what": "YAML file contains no data: {path}",
        "next": "The file only holds comments or document markers; regenerate it.",
    },
    "apply_failed": {
        "what": "kubectl apply did not succeed for {path}.",
        "next": "Inspect the kubectl output below and the cluster events, then retry.",
    },
}


def actionable_error(code: str, **kwargs: str) -> str:
    if code not in _ERROR_MESSAGES:
        raise KeyError(f"Unknown error catalog key: {code}")

    template = _ERROR_MESSAGES[code]
    what = template["what"].format(**kwargs)
    next_step = template["next"].format(**kwargs)
    return f"{what} Suggested action: {next_step}"
