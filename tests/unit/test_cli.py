import logging
from pathlib import Path

import pytest

import main

ASSET = """
tag_definitions:
  - tag_name: Ability.Fire
  - tag_name: Character.Player
  - tag_name: Status.Stunned
"""


@pytest.fixture(autouse=True)
def _restore_root_logging():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture
def settings_file(tmp_path: Path, monkeypatch) -> Path:
    monkeypatch.delenv("GAMEPLAY_TAGS_DIR", raising=False)
    monkeypatch.delenv("GAMEPLAY_TAGS_LOG_LEVEL", raising=False)
    tags_dir = tmp_path / "tags"
    tags_dir.mkdir()
    (tags_dir / "core.yaml").write_text(ASSET, encoding="utf-8")
    path = tmp_path / "settings.yaml"
    path.write_text(f"tags_dir: {tags_dir.as_posix()}\nconsole_level: ERROR\n", encoding="utf-8")
    return path


def _base_args(settings_file: Path, tmp_path: Path) -> list[str]:
    return ["--settings", str(settings_file), "--env", str(tmp_path / "missing.env")]


def test_tree_command(settings_file: Path, tmp_path: Path, capsys) -> None:
    code = main.main([*_base_args(settings_file, tmp_path), "tree"])

    out = capsys.readouterr().out
    assert code == 0
    assert "Ability\n  Fire" in out


def test_check_command_match_and_no_match(settings_file: Path, tmp_path: Path, capsys) -> None:
    args = [
        *_base_args(settings_file, tmp_path),
        "check",
        "--mode",
        "All",
        "--required",
        "Ability",
        "Character",
        "--blocked",
        "Status.Stunned",
        "--tags",
    ]

    assert main.main([*args, "Ability.Fire", "Character.Player"]) == 0
    out = capsys.readouterr().out.strip().splitlines()
    assert out[0] == "Query Type: All"
    assert out[-1] == "MATCH"

    assert main.main([*args, "Ability.Fire", "Character.Player", "Status.Stunned"]) == 1
    assert capsys.readouterr().out.strip().splitlines()[-1] == "NO MATCH"


def test_env_file_overrides_settings(settings_file: Path, tmp_path: Path, capsys, monkeypatch) -> None:
    other = tmp_path / "other_tags"
    other.mkdir()
    (other / "x.yaml").write_text("tag_definitions:\n  - tag_name: Item.Key\n", encoding="utf-8")
    env_file = tmp_path / ".env"
    env_file.write_text(f"GAMEPLAY_TAGS_DIR={other.as_posix()}\n", encoding="utf-8")
    # load_dotenv writes os.environ directly; register the key so teardown removes it.
    monkeypatch.setenv("GAMEPLAY_TAGS_DIR", "")

    code = main.main(["--settings", str(settings_file), "--env", str(env_file), "tree"])

    out = capsys.readouterr().out
    assert code == 0
    assert out.strip() == "Item\n  Key"
