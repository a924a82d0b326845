import os
import tempfile
import unittest

from shell_state import ShellState


class TestShellState(unittest.TestCase):
    def setUp(self):
        self.tmpdir = tempfile.TemporaryDirectory()
        self.addCleanup(self.tmpdir.cleanup)
        self.old_cwd = os.getcwd()
        self.addCleanup(lambda: os.chdir(self.old_cwd))
        self.root = os.path.realpath(self.tmpdir.name)

    def test_defaults_to_process_cwd(self):
        self.assertEqual(os.getcwd(), ShellState().cwd)

    def test_resolve_relative_and_absolute(self):
        state = ShellState(self.root)
        self.assertEqual(os.path.join(self.root, "a.txt"), state.resolve("a.txt"))
        self.assertEqual("/etc/passwd", state.resolve("/etc/passwd"))

    def test_chdir_updates_process_and_state(self):
        os.mkdir(os.path.join(self.root, "sub"))
        state = ShellState(self.root)

        state.chdir("sub")

        expected = os.path.join(self.root, "sub")
        self.assertEqual(expected, state.cwd)
        self.assertEqual(expected, os.getcwd())

    def test_chdir_is_relative_to_state_cwd(self):
        os.mkdir(os.path.join(self.root, "sub"))
        state = ShellState(self.root)
        os.chdir("/")

        state.chdir("sub")

        self.assertEqual(os.path.join(self.root, "sub"), os.getcwd())

    def test_chdir_failure_raises_and_keeps_cwd(self):
        state = ShellState(self.root)
        with self.assertRaises(OSError):
            state.chdir("missing")
        self.assertEqual(self.root, state.cwd)


if __name__ == "__main__":
    unittest.main()
