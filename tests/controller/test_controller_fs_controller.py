import errno
import io
import os
import tempfile
import unittest
from unittest.mock import patch

from localdrive.controller.fs_controller import FileSystemController
from localdrive.errors import AccessDeniedError, DriveIOError, NotFoundError


class TestFileSystemController(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.root = os.path.realpath(self._tmp.name)
        self.fs = FileSystemController()

    def tearDown(self) -> None:
        self._tmp.cleanup()

    def _path(self, *parts: str) -> str:
        return os.path.join(self.root, *parts)

    def test_stat_file_and_folder(self) -> None:
        self.fs.write_stream(self._path("f.txt"), b"hello")
        st = self.fs.stat(self._path("f.txt"))
        self.assertFalse(st.is_directory)
        self.assertEqual(st.size, 5)
        self.assertIsNotNone(st.modified_at.tzinfo)

        self.assertTrue(self.fs.stat(self.root).is_directory)

    def test_missing_path_is_not_found(self) -> None:
        with self.assertRaises(NotFoundError):
            self.fs.stat(self._path("missing"))
        with self.assertRaises(NotFoundError):
            self.fs.read_dir(self._path("missing"))
        with self.assertRaises(NotFoundError):
            self.fs.realpath(self._path("missing"))
        with self.assertRaises(NotFoundError):
            self.fs.remove(self._path("missing"))

    def test_write_stream_accepts_bytes_and_streams(self) -> None:
        self.fs.write_stream(self._path("a.bin"), b"abc")
        self.fs.write_stream(self._path("b.bin"), io.BytesIO(b"xyz"))

        with self.fs.open_read(self._path("a.bin")) as f:
            self.assertEqual(f.read(), b"abc")
        with self.fs.open_read(self._path("b.bin")) as f:
            self.assertEqual(f.read(), b"xyz")

    def test_copy_and_move_folder(self) -> None:
        self.fs.ensure_dir(self._path("src", "inner"))
        self.fs.write_stream(self._path("src", "inner", "x.txt"), b"x")

        self.fs.copy(self._path("src"), self._path("copy"))
        self.assertTrue(self.fs.path_exists(self._path("copy", "inner", "x.txt")))

        self.fs.move(self._path("copy"), self._path("moved"))
        self.assertFalse(self.fs.path_exists(self._path("copy")))
        self.assertTrue(self.fs.is_dir(self._path("moved", "inner")))

    def test_copy_onto_existing_folder_rejected(self) -> None:
        self.fs.write_stream(self._path("x.txt"), b"x")
        self.fs.ensure_dir(self._path("dir"))
        with self.assertRaises(DriveIOError):
            self.fs.copy(self._path("x.txt"), self._path("dir"))
        with self.assertRaises(DriveIOError):
            self.fs.move(self._path("x.txt"), self._path("dir"))

    def test_remove_file_and_tree(self) -> None:
        self.fs.ensure_dir(self._path("tree", "a", "b"))
        self.fs.write_stream(self._path("tree", "a", "f.txt"), b"")
        self.fs.remove(self._path("tree"))
        self.assertFalse(self.fs.path_exists(self._path("tree")))

    def test_is_dir(self) -> None:
        self.fs.write_stream(self._path("f"), b"")
        self.assertTrue(self.fs.is_dir(self.root))
        self.assertFalse(self.fs.is_dir(self._path("f")))
        self.assertFalse(self.fs.is_dir(self._path("missing")))
        self.assertFalse(self.fs.is_dir(self._path("f", "below")))

    def test_os_errors_are_mapped(self) -> None:
        denied = PermissionError(errno.EACCES, "Permission denied")
        with patch("localdrive.controller.fs_controller.os.listdir", side_effect=denied):
            with self.assertRaises(AccessDeniedError) as ctx:
                self.fs.read_dir(self.root)
        self.assertIs(ctx.exception.cause, denied)
        self.assertEqual(ctx.exception.details["path"], self.root)

        full = OSError(errno.ENOSPC, "No space left on device")
        with patch("localdrive.controller.fs_controller.os.makedirs", side_effect=full):
            with self.assertRaises(DriveIOError):
                self.fs.ensure_dir(self._path("new"))

    def test_disk_usage(self) -> None:
        used, free = self.fs.disk_usage(self.root)
        self.assertGreaterEqual(used, 0)
        self.assertGreaterEqual(free, 0)


if __name__ == "__main__":
    unittest.main()
