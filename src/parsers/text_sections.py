from __future__ import annotations

from typing import Dict, Iterable, List


class SectionParser:
    """
    Reads label/value pairs from text laid out with one label per line.

    A line belongs to the first label (in the given order) that it starts with
    and that has not been seen on an earlier line; the value is the rest of the
    line. Lines starting with no pending label are ignored.
    """

    def __init__(self, labels: Iterable[str], line_break: str = "\n") -> None:
        self.labels: List[str] = list(labels)
        self.line_break = line_break

    def parse(self, text: str) -> Dict[str, str]:
        sections: Dict[str, str] = {}

        for raw_line in text.split(self.line_break):
            line = raw_line.strip()
            if not line:
                continue

            for label in self.labels:
                if label in sections:
                    continue
                # breaks sit right before labels, so a label may keep its own
                # leading whitespace
                if raw_line.startswith(label):
                    sections[label] = raw_line[len(label):].strip()
                    break
                if line.startswith(label):
                    sections[label] = line[len(label):].strip()
                    break

        return sections
