"""
Invisible markdown metadata used to tag comments.

A label is a markdown link reference that renders as nothing:

    [//]: # (key=value)
"""

from typing import Dict, Mapping

LABEL_PREFIX = "[//]: # ("
LABEL_SUFFIX = ")"

def format_label(key: str, value: str) -> str:
    return f"{LABEL_PREFIX}{key}={value}{LABEL_SUFFIX}"

def parse_label(line: str):
    """Parse a single label line into (key, value), or None if it is not one."""
    line = line.rstrip()
    if not line.startswith(LABEL_PREFIX) or not line.endswith(LABEL_SUFFIX):
        return None

    inner = line[len(LABEL_PREFIX):-len(LABEL_SUFFIX)]
    key, sep, value = inner.partition("=")
    key = key.strip()
    if not sep or not key:
        return None

    return key, value.strip()

def extract_labels(body: str) -> Dict[str, str]:
    """Collect every label in a comment body. Later keys overwrite earlier ones."""
    labels = {}
    for line in body.splitlines():
        parsed = parse_label(line)
        if parsed:
            key, value = parsed
            labels[key] = value
    return labels

def has_labels(body: str, labels: Mapping[str, str]) -> bool:
    """
    Check that every given label is present in the comment body with the
    same value. Extra labels in the body are ignored.
    """
    extracted = extract_labels(body)
    return all(extracted.get(key) == value for key, value in labels.items())
