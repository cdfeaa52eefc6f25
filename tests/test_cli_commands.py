from __future__ import annotations

import json
from pathlib import Path

from typer.testing import CliRunner

from metadev import cli
from metadev.exceptions import OutputWriteError


def test_cli_help_lists_commands() -> None:
    result = CliRunner().invoke(cli.app, ["--help"])
    assert result.exit_code == 0
    assert "extract" in result.output
    assert "merge" in result.output


def test_cli_extract_generates_files(tmp_path: Path) -> None:
    (tmp_path / "Page.tsx").write_text(
        "const { t: tUser } = useTranslation('user')\ntUser('title')\ntOther('msg')\n",
        encoding="utf-8",
    )

    result = CliRunner().invoke(cli.app, ["extract", "--root", str(tmp_path)])

    assert result.exit_code == 0, result.output
    assert f"Generated {tmp_path / '.i18n' / 'user.json'} with 1 keys" in result.output
    assert "Successfully extracted 2 translation keys" in result.output
    assert json.loads((tmp_path / ".i18n" / "other.json").read_text(encoding="utf-8")) == {"msg": ""}


def test_cli_extract_legacy_alias(tmp_path: Path) -> None:
    (tmp_path / "A.tsx").write_text("tHome('hi')", encoding="utf-8")
    result = CliRunner().invoke(cli.app, ["i18n", "--root", str(tmp_path)])
    assert result.exit_code == 0, result.output
    assert (tmp_path / ".i18n" / "home.json").exists()


def test_cli_extract_output_failure_exits_nonzero(tmp_path: Path) -> None:
    def _failing_run(root: Path, **_kwargs):
        raise OutputWriteError(root / ".i18n", "read-only file system")

    result = CliRunner().invoke(
        cli.app,
        ["extract", "--root", str(tmp_path)],
        obj={"run_extraction": _failing_run},
    )

    assert result.exit_code == 1
    assert "read-only file system" in result.output


def test_cli_extract_missing_root_exits_nonzero(tmp_path: Path) -> None:
    result = CliRunner().invoke(cli.app, ["extract", "--root", str(tmp_path / "absent")])
    assert result.exit_code == 1
    assert "Error extracting translation keys" in result.output


def test_cli_merge_writes_output(tmp_path: Path) -> None:
    first = tmp_path / "common.json"
    second = tmp_path / "common2.json"
    first.write_text(json.dumps({"a": "", "b": "x"}), encoding="utf-8")
    second.write_text(json.dumps({"a": "y", "b": "z"}), encoding="utf-8")
    target = tmp_path / "merged"

    result = CliRunner().invoke(cli.app, ["merge", str(first), str(second), "-o", str(target)])

    assert result.exit_code == 0, result.output
    written = tmp_path / "merged.json"
    assert json.loads(written.read_text(encoding="utf-8")) == {"a": "y", "b": "x"}
    assert f"Successfully merged 2 files into {written} with 2 keys" in result.output


def test_cli_merge_rejects_invalid_input_without_output(tmp_path: Path) -> None:
    good = tmp_path / "good.json"
    good.write_text("{}", encoding="utf-8")
    target = tmp_path / "out.json"

    result = CliRunner().invoke(
        cli.app, ["merge", str(good), str(tmp_path / "notes.txt"), "--output", str(target)]
    )

    assert result.exit_code == 1
    assert "is not a JSON file" in result.output
    assert not target.exists()


def test_cli_merge_requires_files() -> None:
    result = CliRunner().invoke(cli.app, ["merge"])
    assert result.exit_code != 0


def test_cli_join_i18n_alias(tmp_path: Path) -> None:
    source = tmp_path / "a.json"
    source.write_text('{"k": "v"}', encoding="utf-8")
    target = tmp_path / "joined.json"

    result = CliRunner().invoke(cli.app, ["join_i18n", str(source), "-o", str(target)])

    assert result.exit_code == 0, result.output
    assert json.loads(target.read_text(encoding="utf-8")) == {"k": "v"}
