""" Implement the core of the shell. """
import logging

from constants import CONTINUATION_PROMPT, EXIT_LINE, PROMPT, SYNTAX_ERROR_STATUS
from dispatcher import build_command, dispatch
from exceptions import LexError, ShellExit
from lexer import tokenize
from shell_state import ShellState

logger = logging.getLogger(__name__)


def read_command(prompt=PROMPT):
    """ Read a command with support for line continuation. """
    lines = []
    while True:
        line = input(prompt)
        # an odd run of trailing backslashes ends in an unescaped one
        trailing = len(line) - len(line.rstrip("\\"))
        if trailing % 2 == 1:
            lines.append(line[:-1])
            prompt = CONTINUATION_PROMPT
        else:
            lines.append(line)
            break
    return "".join(lines)


class Shell:
    def __init__(self, state=None):
        self.state = state if state is not None else ShellState()

    def run_line(self, line: str) -> int:
        """ Lex and run one line. Raises ShellExit for the exit line. """
        line = line.strip()
        if line == EXIT_LINE:
            raise ShellExit(0)

        try:
            tokens, redirects = tokenize(line)
            cmd = build_command(tokens, redirects)
        except LexError as e:
            print(e)
            self.state.set_status(SYNTAX_ERROR_STATUS)
            return SYNTAX_ERROR_STATUS

        if cmd is None:
            return self.state.last_status

        status = dispatch(cmd, self.state)
        self.state.set_status(status)
        return status

    def read_line(self):
        """ Read the next line; None if it could not be read. """
        try:
            return read_command()
        except (UnicodeDecodeError, OSError):
            logger.debug("could not read input line", exc_info=True)
            print("myshell: could not read input")
            return None

    def run(self):
        while True:
            try:
                line = self.read_line()
                if line is not None:
                    self.run_line(line)
            except ShellExit as e:
                return e.status

            except EOFError:
                # end of input ends the session cleanly
                print()
                return 0

            except KeyboardInterrupt:
                print()
