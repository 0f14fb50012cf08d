from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

from parsers.html_text import html_to_text


@dataclass(frozen=True)
class FieldMapperConfiguration:
    """
    Options fixed at FieldMapper construction.

    de_entitize_content: run the content through `markup_stripper` (tag stripping
    and entity decoding) before label separation.
    """

    de_entitize_content: bool = True
    markup_stripper: Callable[[str], str] = html_to_text
