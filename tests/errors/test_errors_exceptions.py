import errno
import unittest

from localdrive.errors.exceptions import (
    AccessDeniedError,
    DriveIOError,
    LocalDriveError,
    NotFoundError,
    map_os_error,
)


class TestExceptions(unittest.TestCase):
    def test_base_error_keeps_details_and_cause(self) -> None:
        cause = RuntimeError("root")
        err = LocalDriveError("msg", details={"k": "v"}, cause=cause)
        self.assertEqual(str(err), "msg")
        self.assertEqual(err.details["k"], "v")
        self.assertIs(err.cause, cause)

    def test_map_os_error_by_subclass(self) -> None:
        err = map_os_error(FileNotFoundError(errno.ENOENT, "No such file", "/x"))
        self.assertIsInstance(err, NotFoundError)
        self.assertEqual(err.details["path"], "/x")

        err = map_os_error(PermissionError(errno.EACCES, "Permission denied"))
        self.assertIsInstance(err, AccessDeniedError)

    def test_map_os_error_by_errno(self) -> None:
        err = map_os_error(OSError(errno.ENOTDIR, "Not a directory"))
        self.assertIsInstance(err, NotFoundError)

        err = map_os_error(OSError(errno.EROFS, "Read-only file system"))
        self.assertIsInstance(err, AccessDeniedError)

    def test_map_os_error_other_is_io_error(self) -> None:
        cause = OSError(errno.ENOSPC, "No space left on device")
        err = map_os_error(cause, path="/data/f")
        self.assertIsInstance(err, DriveIOError)
        self.assertIs(err.cause, cause)
        self.assertEqual(err.details["errno"], errno.ENOSPC)
        self.assertEqual(err.details["path"], "/data/f")
        self.assertEqual(str(err), "No space left on device")


if __name__ == "__main__":
    unittest.main()
