from __future__ import annotations

EMPTY_CONTENT = "empty_content"
EMPTY_LABELS = "empty_labels"
INVALID_LABELS = "invalid_labels"
BLANK_LABEL = "blank_label"
DUPLICATE_LABELS = "duplicate_labels"


class ArgumentError(ValueError):
    """
    Raised when the content or label list handed to FieldMapper.get is unusable.

    `reason` names the failed precondition, `param` the offending argument.
    """

    def __init__(self, message: str, reason: str, param: str) -> None:
        super().__init__(message)
        self.reason = reason
        self.param = param
