""" Run builtins and external programs with their redirections applied. """
import contextlib
import logging
import subprocess
import sys

from command import Command
from constants import STDERR, STDOUT
from exceptions import ExecutionError, RedirectOpenError, reason
from shell_state import ShellState

logger = logging.getLogger(__name__)


def open_redirect(cmd: Command, stream: str):
    """ Open the redirect target for a stream, or return None if there is none. """
    redirect = cmd.redirects.for_stream(stream)
    if redirect is None:
        return None

    target, append = redirect
    mode = "a" if append else "w"
    try:
        return open(target, mode, encoding="utf-8")
    except (OSError, ValueError) as e:
        raise RedirectOpenError(
            f"failed to open file for {stream} redirection: {target}: {reason(e)}") from e


@contextlib.contextmanager
def redirect_stream(name, handle):
    """ Point sys.<name> at handle for the duration of the block. """
    if handle is None:
        yield
        return

    old = getattr(sys, name)
    setattr(sys, name, handle)
    try:
        yield
    finally:
        handle.flush()
        setattr(sys, name, old)


def run_builtin(handler, cmd: Command, state: ShellState) -> int:
    with contextlib.ExitStack() as stack:
        out = open_redirect(cmd, STDOUT)
        if out is not None:
            stack.enter_context(out)
        err = open_redirect(cmd, STDERR)
        if err is not None:
            stack.enter_context(err)

        with redirect_stream("stdout", out), redirect_stream("stderr", err):
            return handler(cmd.args, state) or 0


def run_external(path: str, cmd: Command, state: ShellState) -> int:
    """ Spawn `path` with argv[0] set to the typed name and wait for it. """
    with contextlib.ExitStack() as stack:
        out = open_redirect(cmd, STDOUT)
        if out is not None:
            stack.enter_context(out)
        err = open_redirect(cmd, STDERR)
        if err is not None:
            stack.enter_context(err)

        # our own buffered output must land before the child's
        sys.stdout.flush()
        logger.debug("spawning %s as %r", path, [cmd.name] + cmd.args)
        try:
            completed = subprocess.run(
                [cmd.name] + cmd.args,
                executable=path,
                stdout=out,
                stderr=err,
                env=state.env,
            )
        except (OSError, ValueError) as e:
            raise ExecutionError(f"{cmd.name}: command execution failed: {reason(e)}") from e

    logger.debug("%s exited with %d", cmd.name, completed.returncode)
    return completed.returncode
