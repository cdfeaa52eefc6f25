from metadev.i18n.declarations import (
    AliasConflict,
    DeclarationIndex,
    collect_declarations,
    collect_project_declarations,
)
from metadev.i18n.extract import ExtractionResult, ExtractionRun, extract_translation_keys, run_extraction
from metadev.i18n.merge import merge_files, merge_tables
from metadev.i18n.resolver import TranslationKey, extract_keys, resolve_namespace
from metadev.i18n.walk import iter_source_paths
from metadev.i18n.writer import group_by_namespace, update_gitignore, write_namespace_files

__all__ = [
    "AliasConflict",
    "DeclarationIndex",
    "ExtractionResult",
    "ExtractionRun",
    "TranslationKey",
    "collect_declarations",
    "collect_project_declarations",
    "extract_keys",
    "extract_translation_keys",
    "group_by_namespace",
    "iter_source_paths",
    "merge_files",
    "merge_tables",
    "resolve_namespace",
    "run_extraction",
    "update_gitignore",
    "write_namespace_files",
]
