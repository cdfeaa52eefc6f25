from __future__ import annotations

from pathlib import Path
from typing import Callable, List, Mapping, Optional

import typer

from metadev.config import load_i18n_settings
from metadev.exceptions import ExtractionError, MergeInputError, MetadevError
from metadev.i18n.extract import ExtractionRun, run_extraction
from metadev.i18n.merge import merge_files, resolve_output_path, write_merged

app = typer.Typer(
    add_completion=False,
    help="metadev is a CLI tool designed to help developers with various development tasks.",
)


def _context_run_extraction(ctx: typer.Context) -> Callable[..., ExtractionRun]:
    obj = ctx.obj
    if isinstance(obj, Mapping):
        candidate = obj.get("run_extraction")
        if callable(candidate):
            return candidate
    return run_extraction


def _fail(prefix: str, exc: BaseException) -> typer.Exit:
    typer.echo(f"Error {prefix}: {exc}", err=True)
    return typer.Exit(code=1)


def _resolve_root(root: Optional[Path]) -> Path:
    if root is not None:
        return root
    try:
        return Path.cwd()
    except OSError as exc:
        raise ExtractionError(f"cannot get working directory: {exc}") from exc


@app.command("extract")
def extract(
    ctx: typer.Context,
    root: Optional[Path] = typer.Option(
        None,
        "--root",
        help="Directory to scan (default: current working directory).",
    ),
    config: Optional[Path] = typer.Option(None, "--config", help="Path to metadev.toml."),
) -> None:
    """Extract translation keys from .tsx files into per-namespace JSON files."""
    try:
        scan_root = _resolve_root(root)
    except ExtractionError as exc:
        raise _fail("getting working directory", exc) from exc
    settings = load_i18n_settings(root=scan_root, config_path=config)
    run_extraction_fn = _context_run_extraction(ctx)
    try:
        run = run_extraction_fn(scan_root, settings=settings)
    except ExtractionError as exc:
        raise _fail("extracting translation keys", exc) from exc
    except MetadevError as exc:
        raise _fail("generating translation files", exc) from exc
    typer.echo(
        f"Successfully extracted {len(run.result.keys)} translation keys "
        "and generated translation files"
    )


@app.command("merge")
def merge(
    files: List[Path] = typer.Argument(..., help="Input JSON files, in priority order."),
    output: Optional[Path] = typer.Option(
        None,
        "-o",
        "--output",
        help="Output file path (defaults to a random name if not specified).",
    ),
) -> None:
    """Merge i18n JSON files, keeping the first non-empty value per key."""
    try:
        merged = merge_files(files)
    except MergeInputError as exc:
        raise _fail("merging files", exc) from exc
    target = resolve_output_path(output)
    try:
        write_merged(target, merged)
    except MetadevError as exc:
        raise _fail("writing output file", exc) from exc
    typer.echo(f"Successfully merged {len(files)} files into {target} with {len(merged)} keys")


app.command("i18n", hidden=True)(extract)
app.command("join_i18n", hidden=True)(merge)


def main() -> None:
    app()


if __name__ == "__main__":
    main()
