"""Merge several namespace dictionaries into one.

Files are processed in the order given. For each key the first non-empty
value wins; an empty value is only kept while nothing better has been seen.
"""

from __future__ import annotations

import json
import secrets
from pathlib import Path
from typing import Iterable, Sequence

from pydantic import ValidationError

from metadev.exceptions import MergeInputError, OutputWriteError
from metadev.json_types import TranslationMap
from metadev.runtime.json_io import dump_json_pretty, load_json_object_text
from metadev.schema import TranslationTable

JSON_SUFFIX = ".json"
MERGED_NAME_PREFIX = "merged_i18n_"


def validate_inputs(paths: Sequence[Path]) -> None:
    for path in paths:
        if not str(path).endswith(JSON_SUFFIX):
            raise MergeInputError(path, "is not a JSON file")
        if not path.exists():
            raise MergeInputError(path, "does not exist")


def load_translation_table(path: Path) -> TranslationMap:
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeError) as exc:
        raise MergeInputError(path, f"failed to read file: {exc}") from exc
    try:
        payload = load_json_object_text(text)
    except (json.JSONDecodeError, ValueError) as exc:
        raise MergeInputError(path, f"failed to parse JSON: {exc}") from exc
    try:
        return TranslationTable.model_validate(payload).as_dict()
    except ValidationError as exc:
        raise MergeInputError(
            path, f"expected a flat object of string values ({exc.error_count()} errors)"
        ) from exc


def merge_tables(tables: Iterable[TranslationMap]) -> TranslationMap:
    merged: TranslationMap = {}
    for table in tables:
        for key, value in table.items():
            if key not in merged:
                merged[key] = value
            elif merged[key] == "" and value != "":
                merged[key] = value
    return merged


def merge_files(paths: Sequence[Path]) -> TranslationMap:
    validate_inputs(paths)
    return merge_tables(load_translation_table(path) for path in paths)


def default_output_name() -> str:
    return MERGED_NAME_PREFIX + secrets.token_hex(8)


def resolve_output_path(output: Path | None) -> Path:
    name = str(output) if output is not None else default_output_name()
    if not name.endswith(JSON_SUFFIX):
        name += JSON_SUFFIX
    return Path(name)


def write_merged(path: Path, table: TranslationMap) -> None:
    try:
        path.write_text(dump_json_pretty(table), encoding="utf-8")
    except OSError as exc:
        raise OutputWriteError(path, str(exc)) from exc
