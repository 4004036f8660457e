import os
import shutil
import tempfile
import unittest
from pathlib import Path

from baller.classifier import classify_entries, snapshot_entries
from baller.payload import ReservedNames


class TestClassifier(unittest.TestCase):
    def setUp(self):
        self.reserved = ReservedNames(scaffold=frozenset({".baller", "README.md", "backup", "hooks"}))

    def test_reserved_and_vcs_entries_are_managed(self):
        entries = [".baller", ".git", "README.md", "backup", "hooks", "notes.txt", "photos"]
        result = classify_entries(entries, self.reserved)

        self.assertEqual(result.managed, (".baller", ".git", "README.md", "backup", "hooks"))
        self.assertEqual(result.user, ("notes.txt", "photos"))

    def test_files_named_entry_is_user_content(self):
        """An entry called `files` is relocated like anything else."""
        result = classify_entries(["files", "a"], self.reserved)
        self.assertEqual(result.user, ("files", "a"))
        self.assertEqual(result.managed, ())

    def test_classification_is_idempotent(self):
        tmpdir = Path(tempfile.mkdtemp())
        try:
            for name in ["one", "README.md", ".git", "zeta"]:
                (tmpdir / name).touch()
            (tmpdir / "sub").mkdir()

            first = classify_entries(snapshot_entries(tmpdir), self.reserved)
            second = classify_entries(snapshot_entries(tmpdir), self.reserved)

            self.assertEqual(first, second)
            self.assertEqual(set(first.user), {"one", "zeta", "sub"})
        finally:
            shutil.rmtree(tmpdir)

    def test_snapshot_is_sorted(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            for name in ["b", "a", "c"]:
                open(os.path.join(tmpdir, name), "w").close()
            self.assertEqual(snapshot_entries(Path(tmpdir)), ["a", "b", "c"])

if __name__ == "__main__":
    unittest.main()
