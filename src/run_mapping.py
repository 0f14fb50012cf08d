from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path
from typing import List, Optional, Sequence

from mapping.config import FieldMapperConfiguration
from mapping.errors import ArgumentError
from mapping.field_mapper import FieldMapper

LOGGER = logging.getLogger(__name__)


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Map known field labels in a text or HTML document to their values."
    )
    parser.add_argument(
        "--content-file",
        type=Path,
        required=True,
        help="Document to read the field values from",
    )
    parser.add_argument(
        "--label",
        dest="labels",
        action="append",
        default=[],
        help="Field label to look for, e.g. 'First Name:' (repeatable)",
    )
    parser.add_argument(
        "--labels-file",
        type=Path,
        default=None,
        help="File with one label per line; appended after any --label values",
    )
    parser.add_argument(
        "--preview",
        action="store_true",
        help="Print the normalized content (one label per line) instead of the mapping",
    )
    parser.add_argument(
        "--keep-markup",
        action="store_true",
        help="Do not strip HTML tags or decode entities before mapping",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
    )
    return parser.parse_args(argv)


def read_labels_file(path: Path) -> List[str]:
    labels = []
    for line in path.read_text(encoding="utf-8").splitlines():
        if line.strip():
            labels.append(line)
    return labels


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level))

    labels = list(args.labels)
    if args.labels_file is not None:
        labels.extend(read_labels_file(args.labels_file))

    content = args.content_file.read_text(encoding="utf-8")
    mapper = FieldMapper(FieldMapperConfiguration(de_entitize_content=not args.keep_markup))

    if args.preview:
        print(mapper.preview_content(content, labels))
        return 0

    try:
        values = mapper.get(content, labels)
    except ArgumentError as exc:
        LOGGER.error("Cannot map %s: %s", args.content_file, exc)
        return 2

    LOGGER.info("Mapped %d of %d label(s) from %s", len(values), len(labels), args.content_file)
    print(json.dumps(values, ensure_ascii=False, indent=2))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
