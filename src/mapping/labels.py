from __future__ import annotations

from typing import Dict, Iterable, List, Tuple


def offsets_within(label: str, container: str) -> List[int]:
    """
    Every index at which `label` occurs inside `container`.
    """
    offsets = []
    pos = container.find(label)
    while pos != -1:
        offsets.append(pos)
        pos = container.find(label, pos + 1)
    return offsets


class LabelMatcher:
    """
    Locates label occurrences in flattened text.

    A label that is part of a longer label ("Name:" inside "First Name:") is
    only reported where it stands on its own: an occurrence is skipped when it
    sits inside an occurrence of a longer label containing it. Labels no other
    label contains are found with a plain substring search.
    """

    def __init__(self, labels: Iterable[str]) -> None:
        self.labels: Tuple[str, ...] = tuple(label for label in labels if label)
        self._containers: Dict[str, Tuple[Tuple[str, int], ...]] = {
            label: self._find_containers(label) for label in self.labels
        }

    def containers_of(self, label: str) -> Tuple[Tuple[str, int], ...]:
        """
        (longer label, offset of `label` within it) pairs.
        """
        if label in self._containers:
            return self._containers[label]
        return self._find_containers(label)

    def _find_containers(self, label: str) -> Tuple[Tuple[str, int], ...]:
        return tuple(
            (other, offset)
            for other in set(self.labels)
            if len(other) > len(label)
            for offset in offsets_within(label, other)
        )

    def is_enclosed(self, text: str, label: str, pos: int) -> bool:
        return any(
            pos >= offset and text.startswith(container, pos - offset)
            for container, offset in self.containers_of(label)
        )

    def find(self, text: str, label: str, start: int = 0) -> int:
        """
        Index of the first standalone occurrence of `label` at or after
        `start`, or -1.
        """
        pos = text.find(label, start)
        if not self.containers_of(label):
            return pos

        while pos != -1 and self.is_enclosed(text, label, pos):
            pos = text.find(label, pos + 1)
        return pos
