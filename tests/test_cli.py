import io
import os
import shutil
import tempfile
import unittest
from contextlib import redirect_stdout
from pathlib import Path
from unittest.mock import patch

from baller import __main__ as cli
from baller.config import Settings
from tests.helpers import make_settings


class TestCli(unittest.TestCase):
    def setUp(self):
        self.tmp = Path(tempfile.mkdtemp())
        self.previous = os.getcwd()
        os.chdir(self.tmp)
        patcher = patch("baller.__main__.load_settings", return_value=make_settings())
        patcher.start()
        self.addCleanup(patcher.stop)

    def tearDown(self):
        os.chdir(self.previous)
        shutil.rmtree(self.tmp)

    def run_cli(self, *argv):
        with patch("baller.__main__.print_success") as success, \
             patch("baller.__main__.print_error") as error:
            code = cli.main(list(argv))
        return code, success, error

    def test_no_command_prints_help(self):
        out = io.StringIO()
        with redirect_stdout(out):
            code = cli.main([])
        self.assertEqual(code, 0)
        self.assertIn("create", out.getvalue())

    def test_create_reports_success(self):
        code, success, error = self.run_cli("create", "foo")

        self.assertEqual(code, 0)
        success.assert_called_once_with('Created "foo" ball')
        error.assert_not_called()
        self.assertTrue((self.tmp / "foo" / ".baller" / "version").exists())

    def test_create_existing_reports_error(self):
        (self.tmp / "foo").mkdir()
        code, success, error = self.run_cli("create", "foo")

        self.assertEqual(code, 1)
        success.assert_not_called()
        error.assert_called_once_with('Could not create ball: Directory "foo" already exists')

    def test_init_then_unball(self):
        (self.tmp / "one").write_text("1")

        code, success, _ = self.run_cli("init")
        self.assertEqual(code, 0)
        self.assertEqual(os.listdir(self.tmp / "files"), ["one"])

        code, success, _ = self.run_cli("unball")
        self.assertEqual(code, 0)
        success.assert_called_once_with(f'Destroyed "{self.tmp.resolve().name}" ball')
        self.assertEqual(os.listdir(self.tmp), ["one"])

    def test_destroy_outside_ball_fails(self):
        code, _, error = self.run_cli("destroy")
        self.assertEqual(code, 1)
        error.assert_called_once_with("Could not destroy ball: not a ball")

    def test_stub_commands_fail(self):
        for command in ("update", "deploy"):
            code, _, error = self.run_cli(command)
            self.assertEqual(code, 1)
            self.assertIn("not yet implemented", error.call_args[0][0])

    def test_verbose_flag_reaches_settings(self):
        with patch("baller.__main__.core.init", return_value="ok") as mock_init, \
             patch("baller.__main__.print_header") as mock_header:
            code, _, _ = self.run_cli("-v", "init")
        self.assertEqual(code, 0)
        mock_header.assert_called_once_with("BALLER INIT", str(Path.cwd()))
        self.assertTrue(mock_init.call_args.kwargs["settings"].verbose)
        self.assertIn(".baller", mock_init.call_args.kwargs["reserved"])

    def test_tree_flag_prints_layout(self):
        with patch("baller.__main__.print_ball_tree") as mock_tree:
            code, _, _ = self.run_cli("create", "bar", "--tree")
        self.assertEqual(code, 0)
        mock_tree.assert_called_once_with(Path.cwd() / "bar")

    def test_missing_payload_fails_cleanly(self):
        bad = Settings(username="tester", payload_dir=self.tmp / "nope")
        with patch("baller.__main__.load_settings", return_value=bad):
            code, _, error = self.run_cli("init")
        self.assertEqual(code, 1)
        self.assertIn("Could not read payload", error.call_args[0][0])

if __name__ == "__main__":
    unittest.main()
