""" Registry of builtin commands. """
import enum
import os
import sys

from exceptions import BuiltinError, CommandNotFound, reason
from path_resolver import resolve


class BuiltinKind(enum.Enum):
    CAT = "cat"
    CD = "cd"
    ECHO = "echo"
    EXIT = "exit"
    PWD = "pwd"
    TYPE = "type"

    @classmethod
    def lookup(cls, name):
        """ Return the kind for a verb, or None if it is not a builtin. """
        try:
            return cls(name)
        except ValueError:
            return None


BUILTINS = {}


def builtin(kind):
    """Decorator to register builtins"""
    def wrapper(func):
        BUILTINS[kind] = func
        return func
    return wrapper


def is_builtin(name) -> bool:
    return BuiltinKind.lookup(name) is not None


@builtin(BuiltinKind.CAT)
def builtin_cat(args, state):
    if not args:
        raise BuiltinError("cat: missing file operand")

    # read everything first so a bad operand produces no partial output
    chunks = []
    for path in args:
        try:
            with open(path, "rb") as f:
                chunks.append(f.read())
        except (OSError, ValueError) as e:
            raise BuiltinError(f"cat: cannot open '{path}': {reason(e)}") from e

    data = b"".join(chunks)
    buffer = getattr(sys.stdout, "buffer", None)
    if buffer is not None:
        # pass bytes through untouched
        sys.stdout.flush()
        buffer.write(data)
        buffer.flush()
    else:
        sys.stdout.write(data.decode("utf-8", errors="replace"))
    return 0


@builtin(BuiltinKind.CD)
def builtin_cd(args, state):
    if not args or args[0] == "~":
        target = state.home()
    elif args[0].startswith("~/"):
        target = os.path.join(state.home(), args[0][2:])
    else:
        target = args[0]

    try:
        os.chdir(target)
    except FileNotFoundError as e:
        raise BuiltinError(f"cd: {target}: No such file or directory") from e
    except NotADirectoryError as e:
        raise BuiltinError(f"cd: {target}: Not a directory") from e
    except PermissionError as e:
        raise BuiltinError(f"cd: {target}: Permission denied") from e
    except (OSError, ValueError) as e:
        raise BuiltinError(f"cd: {target}: {reason(e)}") from e
    return 0


@builtin(BuiltinKind.ECHO)
def builtin_echo(args, state) -> int:
    print(" ".join(args))
    return 0


@builtin(BuiltinKind.EXIT)
def builtin_exit(args, state):
    # Leaving the shell is decided on the raw line before lexing.
    raise BuiltinError("exit: only 'exit 0' is supported")


@builtin(BuiltinKind.PWD)
def builtin_pwd(args, state):
    try:
        print(os.getcwd())
    except OSError as e:
        raise BuiltinError(f"pwd: {e.strerror or e}") from e
    return 0


@builtin(BuiltinKind.TYPE)
def builtin_type(args, state):
    if len(args) != 1:
        raise BuiltinError("type: missing operand")

    name = args[0]
    if is_builtin(name):
        print(f"{name} is a shell builtin")
        return 0

    try:
        path = resolve(name, state.search_path())
    except CommandNotFound:
        print(f"{name}: not found")
        return 1
    print(f"{name} is {path}")
    return 0
