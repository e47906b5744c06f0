""" Command to be executed. """
from constants import REDIRECT_KINDS


class RedirectSet(dict):
    """
    Redirection targets keyed by kind: stdout, stdout_append, stderr,
    stderr_append. A stream holds at most one target, so setting one kind
    drops its truncate/append sibling.
    """
    def add(self, stream: str, target: str, append: bool = False):
        truncate_kind, append_kind = REDIRECT_KINDS[stream]
        self.pop(truncate_kind, None)
        self.pop(append_kind, None)
        self[append_kind if append else truncate_kind] = target

    def for_stream(self, stream: str) -> tuple[str, bool] | None:
        """ Return (target, append) for a stream, or None if it is not redirected. """
        truncate_kind, append_kind = REDIRECT_KINDS[stream]
        if truncate_kind in self:
            return self[truncate_kind], False
        if append_kind in self:
            return self[append_kind], True
        return None


class Command:
    """ A lexed command line: verb, arguments and redirections. """
    def __init__(self, name, args, redirects=None):
        self.name = name
        self.args = args
        self.redirects = redirects if redirects is not None else RedirectSet()

    def __repr__(self):
        return f"Command({self.name!r}, {self.args!r}, {dict(self.redirects)!r})"
