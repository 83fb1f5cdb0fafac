import argparse
import io
import unittest
import sys
import os
from contextlib import redirect_stderr, redirect_stdout
from unittest import mock

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from dfs_maze.core.errors import InvalidSizeError
from dfs_maze.main import INVALID_SIZE_MESSAGE, main, parse_size, positive_int

class TestCLI(unittest.TestCase):
    def test_parse_size(self):
        self.assertEqual(parse_size("5"), 5)
        self.assertEqual(parse_size(" 12 \n"), 12)
        for bad in ("", "abc", "2.5", "0", "-4"):
            with self.assertRaises(InvalidSizeError):
                parse_size(bad)

    def run_main(self, argv):
        out = io.StringIO()
        with redirect_stdout(out):
            code = main(argv)
        return code, out.getvalue()

    def test_headless_run(self):
        code, output = self.run_main(["4", "--headless", "--seed", "3"])
        self.assertEqual(code, 0)
        self.assertIn("*", output)
        self.assertIn("Path Length:", output)

    def test_headless_is_deterministic(self):
        _, first = self.run_main(["6", "--headless", "--seed", "10"])
        _, second = self.run_main(["6", "--headless", "--seed", "10"])
        self.assertEqual(first, second)

    def test_invalid_size_rejected(self):
        with mock.patch("dfs_maze.core.grid.Grid") as grid_cls:
            code, output = self.run_main(["zero", "--headless"])
        self.assertEqual(code, 2)
        self.assertIn(INVALID_SIZE_MESSAGE, output)
        grid_cls.assert_not_called()

    def test_prompts_for_size(self):
        with mock.patch("builtins.input", return_value="3") as prompt:
            code, output = self.run_main(["--headless", "--seed", "1"])
        prompt.assert_called_once()
        self.assertEqual(code, 0)
        self.assertIn("Path Length: ", output)

    def test_rejects_non_positive_window_settings(self):
        for flag in ("--cell-size", "--steps-per-frame"):
            for bad in ("0", "-3", "x"):
                with redirect_stderr(io.StringIO()) as err:
                    with self.assertRaises(SystemExit) as ctx:
                        main(["5", flag, bad])
                self.assertEqual(ctx.exception.code, 2)
                self.assertIn(flag, err.getvalue())

    def test_positive_int(self):
        self.assertEqual(positive_int("3"), 3)
        for bad in ("0", "-1", "1.5"):
            with self.assertRaises(argparse.ArgumentTypeError):
                positive_int(bad)

    def test_prompt_rejects_negative(self):
        with mock.patch("builtins.input", return_value="-2"):
            code, output = self.run_main(["--headless"])
        self.assertEqual(code, 2)
        self.assertIn(INVALID_SIZE_MESSAGE, output)

if __name__ == '__main__':
    unittest.main()
