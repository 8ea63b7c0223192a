"""Tests for async filesystem helpers."""

from __future__ import annotations

from pathlib import Path

import anyio
import pytest

from helper_utils.system.filesystem import (
    create_directory,
    file_exists,
    is_directory,
    list_directory_contents,
    read_file_async,
    remove_directory,
    write_file_async,
)


async def _collect(path: Path) -> list[str]:
    return [name async for name in list_directory_contents(path)]


class TestCreateDirectory:
    def test_recursive_returns_first_created(self, tmp_path: Path) -> None:
        target = tmp_path / "a" / "b" / "c"
        first = anyio.run(create_directory, target)
        assert first == str(tmp_path / "a")
        assert target.is_dir()

    def test_recursive_existing_returns_none(self, tmp_path: Path) -> None:
        assert anyio.run(create_directory, tmp_path) is None

    def test_non_recursive(self, tmp_path: Path) -> None:
        async def run() -> str | None:
            return await create_directory(tmp_path / "one", recursive=False)

        assert anyio.run(run) is None
        assert (tmp_path / "one").is_dir()

    def test_non_recursive_missing_parent(self, tmp_path: Path) -> None:
        async def run() -> None:
            await create_directory(tmp_path / "x" / "y", recursive=False)

        with pytest.raises(FileNotFoundError):
            anyio.run(run)

    def test_non_recursive_existing(self, tmp_path: Path) -> None:
        async def run() -> None:
            await create_directory(tmp_path, recursive=False)

        with pytest.raises(FileExistsError):
            anyio.run(run)


class TestRemoveDirectory:
    def test_recursive(self, tmp_path: Path) -> None:
        target = tmp_path / "tree"
        (target / "sub").mkdir(parents=True)
        (target / "sub" / "file.txt").write_text("x")
        anyio.run(remove_directory, target)
        assert not target.exists()

    def test_missing_raises(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            anyio.run(remove_directory, tmp_path / "missing")

    def test_missing_with_force(self, tmp_path: Path) -> None:
        async def run() -> None:
            await remove_directory(tmp_path / "missing", force=True)

        anyio.run(run)

    def test_not_a_directory(self, tmp_path: Path) -> None:
        file_path = tmp_path / "file.txt"
        file_path.write_text("x")
        with pytest.raises(NotADirectoryError, match="Path is not a directory"):
            anyio.run(remove_directory, file_path)
        assert file_path.exists()

    def test_force_removes_non_directory(self, tmp_path: Path) -> None:
        file_path = tmp_path / "file.txt"
        file_path.write_text("x")

        async def run() -> None:
            await remove_directory(file_path, force=True)

        anyio.run(run)
        assert not file_path.exists()

    def test_non_recursive_non_empty(self, tmp_path: Path) -> None:
        (tmp_path / "d").mkdir()
        (tmp_path / "d" / "f").write_text("x")

        async def run() -> None:
            await remove_directory(tmp_path / "d", recursive=False)

        with pytest.raises(OSError):
            anyio.run(run)
        assert (tmp_path / "d").is_dir()


class TestExistenceChecks:
    def test_file_exists(self, tmp_path: Path) -> None:
        (tmp_path / "f").write_text("x")
        assert anyio.run(file_exists, tmp_path / "f") is True
        assert anyio.run(file_exists, tmp_path) is True
        assert anyio.run(file_exists, tmp_path / "nope") is False

    def test_is_directory(self, tmp_path: Path) -> None:
        (tmp_path / "f").write_text("x")
        assert anyio.run(is_directory, tmp_path) is True
        assert anyio.run(is_directory, tmp_path / "f") is False
        assert anyio.run(is_directory, tmp_path / "nope") is False

    def test_list_directory_contents(self, tmp_path: Path) -> None:
        (tmp_path / "a.txt").write_text("x")
        (tmp_path / "sub").mkdir()
        assert sorted(anyio.run(_collect, tmp_path)) == ["a.txt", "sub"]

    def test_list_missing_directory(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            anyio.run(_collect, tmp_path / "nope")


class TestFileIO:
    def test_text_round_trip(self, tmp_path: Path) -> None:
        path = tmp_path / "note.txt"
        anyio.run(write_file_async, path, "héllo")
        assert anyio.run(read_file_async, path) == "héllo"

    def test_bytes(self, tmp_path: Path) -> None:
        path = tmp_path / "blob.bin"
        anyio.run(write_file_async, path, b"\x00\x01")
        assert anyio.run(read_file_async, path, None) == b"\x00\x01"

    def test_overwrites(self, tmp_path: Path) -> None:
        path = tmp_path / "f.txt"
        path.write_text("old content")
        anyio.run(write_file_async, path, "new")
        assert path.read_text() == "new"

    def test_read_missing(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            anyio.run(read_file_async, tmp_path / "missing.txt")
