from __future__ import annotations

import logging
from typing import Dict, Iterable, List, Optional

from mapping.config import FieldMapperConfiguration
from mapping.errors import (
    BLANK_LABEL,
    DUPLICATE_LABELS,
    EMPTY_CONTENT,
    EMPTY_LABELS,
    INVALID_LABELS,
    ArgumentError,
)
from mapping.normalizer import LINE_BREAK, normalize
from parsers.text_sections import SectionParser

LOGGER = logging.getLogger(__name__)


def validate(content: Optional[str], labels: Optional[Iterable[str]]) -> List[str]:
    """
    Check the arguments of FieldMapper.get and return the labels as a list.
    """
    if content is None or not content.strip():
        raise ArgumentError("Content cannot be null or empty.", EMPTY_CONTENT, "content")

    if isinstance(labels, str):
        raise ArgumentError(
            "Labels must be a sequence of strings, not a single string.",
            INVALID_LABELS,
            "labels",
        )

    label_list = list(labels) if labels is not None else []
    if not label_list:
        raise ArgumentError("Labels cannot be null or empty.", EMPTY_LABELS, "labels")

    if any(not isinstance(label, str) or not label.strip() for label in label_list):
        raise ArgumentError(
            "Labels cannot contain any empty values.", BLANK_LABEL, "labels"
        )

    seen = set()
    duplicates = []
    for label in label_list:
        if label in seen and label not in duplicates:
            duplicates.append(label)
        seen.add(label)
    if duplicates:
        raise ArgumentError(
            f"Duplicate labels found: {duplicates!r}. Please make sure they are all unique.",
            DUPLICATE_LABELS,
            "labels",
        )

    return label_list


class FieldMapper:
    """
    Maps known label strings in a loosely structured document to the text that
    follows them.

        >>> FieldMapper().get("First Name: Ada Last Name: Lovelace",
        ...                   ["First Name:", "Last Name:"])
        {'First Name:': 'Ada', 'Last Name:': 'Lovelace'}

    Instances only hold their configuration and can be shared between threads.
    """

    def __init__(self, configuration: Optional[FieldMapperConfiguration] = None) -> None:
        self.configuration = configuration or FieldMapperConfiguration()

    def preview_content(
        self, content: Optional[str], labels: Optional[Iterable[str]]
    ) -> str:
        """
        Return the content as `get` sees it: markup stripped (if configured),
        line breaks flattened and one label occurrence per line.
        """
        return normalize(content or "", list(labels or []), self.configuration)

    def get(self, content: Optional[str], labels: Optional[Iterable[str]]) -> Dict[str, str]:
        label_list = validate(content, labels)
        normalized = normalize(content, label_list, self.configuration)

        result = SectionParser(label_list, line_break=LINE_BREAK).parse(normalized)
        LOGGER.debug("Mapped %d of %d label(s)", len(result), len(label_list))
        return result
