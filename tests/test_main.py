import io
import logging
import sys
import unittest
from unittest.mock import patch

import main


class TestMain(unittest.TestCase):
    def test_single_command_exits_with_its_status(self):
        with patch.object(sys, "stdout", io.StringIO()) as out:
            with self.assertRaises(SystemExit) as ctx:
                main.main(["-c", "echo hi there"])
        self.assertEqual(0, ctx.exception.code)
        self.assertEqual("hi there\n", out.getvalue())

    def test_single_command_lex_error_status(self):
        with patch.object(sys, "stdout", io.StringIO()) as out:
            with self.assertRaises(SystemExit) as ctx:
                main.main(["-c", "echo 'oops"])
        self.assertEqual(2, ctx.exception.code)
        self.assertIn("mismatched quotes", out.getvalue())

    def test_single_exit_line(self):
        with self.assertRaises(SystemExit) as ctx:
            main.main(["-c", "exit 0"])
        self.assertEqual(0, ctx.exception.code)

    def test_interactive_runs_shell_loop(self):
        with patch.object(main.Shell, "run", return_value=0) as mock_run:
            with self.assertRaises(SystemExit) as ctx:
                main.main([])
        self.assertEqual(0, ctx.exception.code)
        mock_run.assert_called_once_with()

    def test_debug_flag_sets_log_level(self):
        with patch.object(main.logging, "basicConfig") as mock_config, \
             patch.object(main.Shell, "run", return_value=0):
            with self.assertRaises(SystemExit):
                main.main(["--debug"])
        self.assertEqual(logging.DEBUG, mock_config.call_args.kwargs["level"])


if __name__ == "__main__":
    unittest.main()
