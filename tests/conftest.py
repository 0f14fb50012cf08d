from __future__ import annotations

import sys
from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).resolve().parents[1]
SRC_PATH = PROJECT_ROOT / "src"
if str(SRC_PATH) not in sys.path:
    sys.path.insert(0, str(SRC_PATH))

from mapping.config import FieldMapperConfiguration  # noqa: E402
from mapping.field_mapper import FieldMapper  # noqa: E402


@pytest.fixture(scope="session")
def mapper() -> FieldMapper:
    return FieldMapper()


@pytest.fixture(scope="session")
def plain_mapper() -> FieldMapper:
    return FieldMapper(FieldMapperConfiguration(de_entitize_content=False))
