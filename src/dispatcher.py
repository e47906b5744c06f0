""" Route a lexed command line to a builtin or an external program. """
import logging

from command import Command, RedirectSet
from constants import ERROR_STATUS, NOT_FOUND_STATUS
from exceptions import CommandNotFound, MissingCommandError, ShellError
from path_resolver import resolve
from runner import run_builtin, run_external
from shell_builtins import BUILTINS, BuiltinKind
from shell_state import ShellState

logger = logging.getLogger(__name__)


class Builtin:
    """ A verb implemented by the shell itself. """
    def __init__(self, kind: BuiltinKind):
        self.kind = kind

    def __eq__(self, other):
        return isinstance(other, Builtin) and other.kind is self.kind

    def __repr__(self):
        return f"Builtin({self.kind.value!r})"


class External:
    """ A verb to be looked up on the search path. """
    def __init__(self, name: str):
        self.name = name

    def __eq__(self, other):
        return isinstance(other, External) and other.name == self.name

    def __repr__(self):
        return f"External({self.name!r})"


def classify(name: str) -> Builtin | External:
    kind = BuiltinKind.lookup(name)
    if kind is not None:
        return Builtin(kind)
    return External(name)


def build_command(tokens: list[str], redirects: RedirectSet) -> Command | None:
    """ Turn lexer output into a Command; None for a blank line. """
    if not tokens:
        if redirects:
            raise MissingCommandError()
        return None
    return Command(tokens[0], tokens[1:], redirects)


def dispatch(cmd: Command, state: ShellState) -> int:
    """
    Run a command and return its status. Failures are printed to stdout
    and turned into a status; they never propagate.
    """
    target = classify(cmd.name)
    logger.debug("dispatching %r as %r", cmd, target)
    try:
        if isinstance(target, Builtin):
            return run_builtin(BUILTINS[target.kind], cmd, state)
        path = resolve(target.name, state.search_path())
        return run_external(path, cmd, state)
    except CommandNotFound as e:
        print(e)
        return NOT_FOUND_STATUS
    except ShellError as e:
        print(e)
        return ERROR_STATUS
