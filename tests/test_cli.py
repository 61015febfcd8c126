from pathlib import Path

import pytest

from tedit import cli
from tedit.buffer import Document
from tedit.cli import LaunchError, main, resolve_launch


def test_no_argument_starts_unnamed() -> None:
    document = resolve_launch(None)

    assert document.location is None
    assert document.fallback_directory is None
    assert document.snapshot() == ("",)


def test_existing_file_is_opened(tmp_path: Path) -> None:
    target = tmp_path / "notes.txt"
    target.write_text("one\ntwo")

    document = resolve_launch(str(target))

    assert document.location == target
    assert document.fallback_directory == tmp_path
    assert document.snapshot() == ("one", "two")
    assert document.dirty is False


def test_directory_becomes_fallback(tmp_path: Path) -> None:
    document = resolve_launch(str(tmp_path))

    assert document.location is None
    assert document.fallback_directory == tmp_path


def test_new_path_is_prenamed(tmp_path: Path) -> None:
    target = tmp_path / "new.txt"

    document = resolve_launch(str(target))

    assert document.location == target
    assert document.display_name == "new.txt"
    assert not target.exists()


def test_new_path_requires_parent(tmp_path: Path) -> None:
    with pytest.raises(LaunchError):
        resolve_launch(str(tmp_path / "missing" / "new.txt"))


def test_main_reports_launch_error(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    code = main([str(tmp_path / "missing" / "new.txt")])

    assert code == 1
    assert capsys.readouterr().err.startswith("tedit: Parent directory")


def test_main_starts_empty_when_file_unreadable(
    tmp_path: Path,
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    target = tmp_path / "locked.txt"
    target.write_text("secret")
    started: list[tuple[str, Document]] = []

    def deny(self: Path) -> bytes:
        raise PermissionError(13, "Permission denied", str(self))

    monkeypatch.setattr(Path, "read_bytes", deny)
    monkeypatch.setattr(
        cli, "_run_host", lambda ui, document, settings: started.append((ui, document))
    )

    code = main([str(target)])

    assert code == 0
    assert len(started) == 1
    ui, document = started[0]
    assert ui == "terminal"
    assert document.location == target
    assert document.fallback_directory == tmp_path
    assert document.snapshot() == ("",)
    assert document.dirty is False
    err = capsys.readouterr().err
    assert "Permission denied" in err
    assert "starting with empty buffer instead" in err


def test_main_hands_opened_document_to_host(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    target = tmp_path / "notes.txt"
    target.write_text("hello")
    started: list[Document] = []
    monkeypatch.setattr(
        cli, "_run_host", lambda ui, document, settings: started.append(document)
    )

    assert main([str(target)]) == 0
    assert started[0].snapshot() == ("hello",)
