import unittest

from localdrive.local.naming import resolve_name, split_name


class TestSplitName(unittest.TestCase):
    def test_split_name(self) -> None:
        self.assertEqual(split_name("archive.tar.gz", False), ("archive", ".tar.gz"))
        self.assertEqual(split_name("README", False), ("README", ""))
        self.assertEqual(split_name(".env", False), (".env", ""))
        self.assertEqual(split_name(".config.json", False), (".config", ".json"))
        self.assertEqual(split_name("v1.2", True), ("v1.2", ""))


class TestResolveName(unittest.TestCase):
    def test_free_name_unchanged(self) -> None:
        self.assertEqual(resolve_name(set(), "x", False), "x")
        self.assertEqual(resolve_name({"b.txt"}, "a.txt", False), "a.txt")

    def test_first_collision_gets_counter_one(self) -> None:
        self.assertEqual(resolve_name({"a.txt"}, "a.txt", False), "a(1).txt")
        self.assertEqual(resolve_name({"docs"}, "docs", True), "docs(1)")

    def test_skips_taken_counters(self) -> None:
        self.assertEqual(resolve_name({"a.txt", "a(1).txt"}, "a.txt", False), "a(2).txt")

    def test_existing_counter_suffix_continues(self) -> None:
        self.assertEqual(resolve_name({"a(1).txt"}, "a(1).txt", False), "a(2).txt")
        self.assertEqual(resolve_name({"x(9)"}, "x(9)", True), "x(10)")

    def test_multi_dot_extension_kept(self) -> None:
        existing = {"archive.tar.gz"}
        self.assertEqual(resolve_name(existing, "archive.tar.gz", False), "archive(1).tar.gz")

    def test_folder_dots_are_not_extension(self) -> None:
        self.assertEqual(resolve_name({"v1.2"}, "v1.2", True), "v1.2(1)")

    def test_repeated_application_never_reuses_name(self) -> None:
        existing = {"a.txt"}
        produced = []
        for _ in range(5):
            name = resolve_name(existing, "a.txt", False)
            self.assertNotIn(name, existing)
            existing.add(name)
            produced.append(name)
        self.assertEqual(produced, ["a(1).txt", "a(2).txt", "a(3).txt", "a(4).txt", "a(5).txt"])


if __name__ == "__main__":
    unittest.main()
