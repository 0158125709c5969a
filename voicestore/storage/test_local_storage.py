"""Tests for the local file store."""

import builtins
import os
import threading
from pathlib import Path
from unittest.mock import patch

import pytest

from voicestore.domain.exceptions import (
    FileAlreadyExistsError,
    InvalidDeviceIdError,
    StorageError,
)
from voicestore.storage.local_storage import LocalFileStore

_real_open = builtins.open


class _FailingFile:
    """File wrapper that fails halfway through a write."""

    def __init__(self, f):
        self._f = f
        self.closed = False

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self._f.close()
        self.closed = True
        return False

    def write(self, data):
        self._f.write(data[: len(data) // 2])
        self._f.flush()
        raise OSError(28, "No space left on device")


@pytest.fixture
def store(tmp_path):
    """Create store rooted in a temp directory."""
    return LocalFileStore(base_path=tmp_path / "voiceprints")


class TestLocalFileStore:
    """Tests for LocalFileStore."""

    def test_base_path_created_lazily(self, store):
        """Test construction does not touch the file system."""
        assert not store.base_path.exists()

    def test_path_for(self, store):
        """Test files live under <root>/<device_id>/."""
        path = store.path_for("dev-1", "a.wav")
        assert path == store.base_path / "dev-1" / "a.wav"

    @pytest.mark.parametrize(
        "device_id", ["", "   ", ".", "..", "a/b", "../escape", "a\\b", "a\x00b"]
    )
    def test_rejects_unsafe_device_ids(self, store, device_id):
        """Test device ids cannot escape the root directory."""
        with pytest.raises(InvalidDeviceIdError):
            store.path_for(device_id, "a.wav")
        with pytest.raises(InvalidDeviceIdError):
            store.ensure_directory(device_id)
        assert not store.base_path.exists()

    def test_ensure_directory(self, store):
        """Test device directory is created with parents."""
        path = store.ensure_directory("dev-1")
        assert path.is_dir()
        assert path == store.base_path / "dev-1"

    def test_ensure_directory_is_idempotent(self, store):
        """Test existing directory is accepted."""
        first = store.ensure_directory("dev-1")
        (first / "keep.wav").write_bytes(b"data")
        second = store.ensure_directory("dev-1")
        assert first == second
        assert (second / "keep.wav").exists()

    def test_ensure_directory_concurrent(self, store):
        """Test concurrent creators for the same device all succeed."""
        errors: list[Exception] = []
        barrier = threading.Barrier(16)

        def create():
            barrier.wait()
            try:
                store.ensure_directory("dev-1")
            except Exception as e:
                errors.append(e)

        threads = [threading.Thread(target=create) for _ in range(16)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert errors == []
        assert (store.base_path / "dev-1").is_dir()

    def test_ensure_directory_failure(self, store):
        """Test mkdir failure is wrapped in StorageError."""
        store.base_path.parent.mkdir(parents=True, exist_ok=True)
        store.base_path.write_bytes(b"not a directory")
        with pytest.raises(StorageError):
            store.ensure_directory("dev-1")

    def test_write(self, store):
        """Test bytes are written and size returned."""
        store.ensure_directory("dev-1")
        path = store.path_for("dev-1", "a.wav")

        size = store.write(path, b"test audio data")

        assert size == len(b"test audio data")
        assert path.read_bytes() == b"test audio data"

    def test_write_never_overwrites(self, store):
        """Test existing file is left untouched."""
        store.ensure_directory("dev-1")
        path = store.path_for("dev-1", "a.wav")
        store.write(path, b"original")

        with pytest.raises(FileAlreadyExistsError):
            store.write(path, b"new data")

        assert path.read_bytes() == b"original"

    def test_write_missing_directory(self, store):
        """Test write without the device directory fails cleanly."""
        path = store.path_for("dev-1", "a.wav")
        with pytest.raises(StorageError):
            store.write(path, b"data")
        assert not path.exists()

    def test_write_failure_removes_partial_file(self, store):
        """Test partially written file is deleted and handle closed."""
        store.ensure_directory("dev-1")
        path = store.path_for("dev-1", "a.wav")
        opened: list[_FailingFile] = []

        def failing_open(file, mode="r", *args, **kwargs):
            wrapper = _FailingFile(_real_open(file, mode, *args, **kwargs))
            opened.append(wrapper)
            return wrapper

        with patch("voicestore.storage.local_storage.open", failing_open, create=True):
            with pytest.raises(StorageError, match="No space left"):
                store.write(path, b"x" * 1024)

        assert not path.exists()
        assert len(opened) == 1
        assert opened[0].closed

    def test_unexpected_error_removes_partial_file(self, store):
        """Test cleanup also happens for non-I/O errors."""
        store.ensure_directory("dev-1")
        path = store.path_for("dev-1", "a.wav")

        with pytest.raises(TypeError):
            store.write(path, "not bytes")  # type: ignore[arg-type]

        assert not path.exists()

    def test_delete(self, store):
        """Test existing file is removed."""
        store.ensure_directory("dev-1")
        path = store.path_for("dev-1", "a.wav")
        store.write(path, b"data")

        assert store.delete(path) is True
        assert not path.exists()

    def test_delete_accepts_string_path(self, store):
        """Test delete works with str paths."""
        store.ensure_directory("dev-1")
        path = store.path_for("dev-1", "a.wav")
        store.write(path, b"data")

        assert store.delete(str(path)) is True
        assert not path.exists()

    def test_delete_missing_file(self, store):
        """Test missing file is reported, not raised."""
        assert store.delete(store.base_path / "dev-1" / "missing.wav") is False

    def test_delete_failure_is_not_raised(self, store):
        """Test unlink failure is logged and swallowed."""
        store.ensure_directory("dev-1")
        path = store.path_for("dev-1", "a.wav")
        store.write(path, b"data")

        with patch.object(Path, "unlink", side_effect=PermissionError("denied")):
            assert store.delete(path) is False

        assert path.exists()

    def test_no_descriptor_leak(self, store):
        """Test repeated failing writes do not leak file handles."""
        if not Path("/proc/self/fd").exists():
            pytest.skip("requires /proc")
        store.ensure_directory("dev-1")
        before = len(os.listdir("/proc/self/fd"))

        for i in range(50):
            with pytest.raises(TypeError):
                store.write(store.path_for("dev-1", f"{i}.wav"), "bad")  # type: ignore[arg-type]

        assert len(os.listdir("/proc/self/fd")) <= before
