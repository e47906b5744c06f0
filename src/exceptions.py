""" Errors raised while reading, lexing and running a command line. """


class ShellExit(Exception):
    """ Raised to leave the read loop. """
    def __init__(self, status=0):
        super().__init__(status)
        self.status = status


class ShellError(Exception):
    """ Base class for errors reported to the user as a single line. """


class LexError(ShellError):
    """ The line could not be split into words and redirects. """


class MismatchedQuoteError(LexError):
    def __init__(self):
        super().__init__("parse error: mismatched quotes")


class MissingRedirectTargetError(LexError):
    def __init__(self, operator=">"):
        super().__init__(f"parse error: missing redirection target after '{operator}'")
        self.operator = operator


class MissingCommandError(LexError):
    def __init__(self):
        super().__init__("parse error: redirection without a command")


class CommandNotFound(ShellError):
    def __init__(self, name):
        super().__init__(f"{name}: command not found")
        self.name = name


class RedirectOpenError(ShellError):
    """ A redirection target could not be opened or created. """


class ExecutionError(ShellError):
    """ An external program could not be started. """


class BuiltinError(ShellError):
    """ A builtin could not do what it was asked. """


def reason(e):
    """ Short text for an OS-level failure; ValueError (embedded NUL) has no strerror. """
    return getattr(e, "strerror", None) or e
