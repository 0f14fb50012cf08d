from __future__ import annotations

import logging
import os
from typing import Sequence

from mapping.config import FieldMapperConfiguration
from mapping.labels import LabelMatcher

LOGGER = logging.getLogger(__name__)

LINE_BREAK = "\n"
# \r\n must go before its parts
LINE_BREAK_SEQUENCES = ("\r\n", "\n", "\r", os.linesep)


def flatten_line_breaks(text: str) -> str:
    for sequence in LINE_BREAK_SEQUENCES:
        text = text.replace(sequence, " ")
    return text


def insert_break(text: str, index: int) -> str:
    return text[:index] + LINE_BREAK + text[index:]


def break_around_label(
    text: str, label: str, labels: Sequence[str], matcher: LabelMatcher
) -> str:
    """
    Place line breaks around the first occurrence of `label`.

    The very first break in the document goes right before the label; after
    that, the label's line is closed by a break in front of the nearest other
    label following it. Returns the new text.
    """
    start = matcher.find(text, label)
    if start == -1:
        LOGGER.debug("Label %r not found in content", label)
        return text

    if LINE_BREAK not in text:
        text = insert_break(text, start)
        start += len(LINE_BREAK)

    end = start + len(label)
    following = [
        text.find(other, end) for other in labels if other and other != label
    ]
    following = [pos for pos in following if pos != -1]
    if following:
        text = insert_break(text, min(following))
    return text


def separate_labels(text: str, labels: Sequence[str]) -> str:
    """
    Rewrite flattened text so every located label starts its own line.

    Labels are handled in the given order and each step works on the output of
    the previous one, so earlier insertions shift later positions.
    """
    matcher = LabelMatcher(labels)
    for label in labels:
        if not label:
            continue
        text = break_around_label(text, label, labels, matcher)
    return text


def normalize(
    content: str,
    labels: Sequence[str],
    configuration: FieldMapperConfiguration,
) -> str:
    if configuration.de_entitize_content:
        content = configuration.markup_stripper(content)
    content = flatten_line_breaks(content)
    return separate_labels(content, labels)
