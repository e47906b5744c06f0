""" Lexical analysis for shell commands. """
import enum
import logging
import shlex

from command import RedirectSet
from constants import (BACKSLASH, DOUBLE_QUOTE, DQUOTE_ESCAPABLE, FD_STREAMS,
                       REDIRECT_OP, SINGLE_QUOTE, STDOUT, WORD_SEPARATORS)
from exceptions import MismatchedQuoteError, MissingRedirectTargetError

logger = logging.getLogger(__name__)


class Mode(enum.Enum):
    NORMAL = "normal"
    IN_SINGLE = "single"
    IN_DOUBLE = "double"


class LexState:
    """
    Scan state for one input line.

    Characters are fed one at a time. Until the first redirection operator
    the accumulator builds argument words. After it, the accumulator builds
    a redirection target, which runs up to the next operator or the end of
    the line; no further arguments are produced.
    """
    def __init__(self, line: str):
        self.line = line
        self.pos = 0
        self.mode = Mode.NORMAL
        self.escape_pending = False
        self.buf: list[str] = []
        self.tokens: list[str] = []
        self.redirects = RedirectSet()

        # Start of the current word in buf, and where to cut if that word
        # turns out to be an fd number in front of '>'.
        self.word_start = 0
        self.cut_at = 0
        self.word_quoted = False
        # whitespace inside a target, kept only if more text follows
        self.pending_space: list[str] = []

        # None while collecting arguments
        self.target_stream: str | None = None
        self.target_append = False
        self.operator = REDIRECT_OP

    def peek(self) -> str:
        nxt = self.pos + 1
        return self.line[nxt] if nxt < len(self.line) else ""

    def feed(self, ch: str):
        """ Consume the character at self.pos. """
        if self.escape_pending:
            self.escape_pending = False
            self._append(ch, quoted=True)
        elif self.mode is Mode.IN_SINGLE:
            if ch == SINGLE_QUOTE:
                self.mode = Mode.NORMAL
            else:
                self._append(ch, quoted=True)
        elif self.mode is Mode.IN_DOUBLE:
            if ch == DOUBLE_QUOTE:
                self.mode = Mode.NORMAL
            elif ch == BACKSLASH and self.peek() in DQUOTE_ESCAPABLE:
                self.escape_pending = True
            else:
                self._append(ch, quoted=True)
        elif ch == BACKSLASH:
            self._start_word()
            self.escape_pending = True
        elif ch == SINGLE_QUOTE:
            self._start_word(quoted=True)
            self.mode = Mode.IN_SINGLE
        elif ch == DOUBLE_QUOTE:
            self._start_word(quoted=True)
            self.mode = Mode.IN_DOUBLE
        elif ch in WORD_SEPARATORS:
            self._separate(ch)
        elif ch == REDIRECT_OP:
            self._redirect()
        else:
            self._append(ch, quoted=False)

    def finish(self) -> tuple[list[str], RedirectSet]:
        if self.escape_pending:
            # trailing backslash stands for itself
            self.escape_pending = False
            self._append(BACKSLASH, quoted=True)
        if self.mode is not Mode.NORMAL:
            raise MismatchedQuoteError()
        self._finish_segment()
        return self.tokens, self.redirects

    def _start_word(self, quoted=False):
        if self.pending_space:
            self.cut_at = len(self.buf)
            self.buf.extend(self.pending_space)
            self.pending_space = []
            self.word_start = len(self.buf)
            self.word_quoted = False
        if quoted:
            self.word_quoted = True

    def _append(self, ch: str, quoted: bool):
        self._start_word(quoted)
        self.buf.append(ch)

    def _separate(self, ch: str):
        if self.target_stream is None:
            self._emit_token()
        elif self.buf:
            self.pending_space.append(ch)
        else:
            self.word_quoted = False

    def _emit_token(self):
        if self.buf:
            self.tokens.append("".join(self.buf))
            self.buf = []
        self.word_quoted = False

    def _finish_segment(self):
        if self.target_stream is None:
            self._emit_token()
            return
        target = "".join(self.buf)
        if not target:
            raise MissingRedirectTargetError(self.operator)
        self.redirects.add(self.target_stream, target, self.target_append)

    def _redirect(self):
        fd = ""
        stream = STDOUT
        word = "".join(self.buf[self.word_start:])
        # a digit counts as an fd only when nothing separates it from ">"
        if not self.word_quoted and not self.pending_space and word in FD_STREAMS:
            fd = word
            stream = FD_STREAMS[word]
            del self.buf[self.cut_at:]

        self._finish_segment()

        append = self.peek() == REDIRECT_OP
        if append:
            self.pos += 1
        self.target_stream = stream
        self.target_append = append
        self.operator = fd + (REDIRECT_OP * 2 if append else REDIRECT_OP)

        self.buf = []
        self.pending_space = []
        self.word_start = 0
        self.cut_at = 0
        self.word_quoted = False


def tokenize(line: str) -> tuple[list[str], RedirectSet]:
    """
    Split a command line into argument words and redirections.

    Raises a LexError subclass for unbalanced quotes or a redirection with
    no target; nothing is returned in that case.
    """
    state = LexState(line)
    while state.pos < len(line):
        state.feed(line[state.pos])
        state.pos += 1
    tokens, redirects = state.finish()
    logger.debug("tokenized %r -> %r %r", line, tokens, dict(redirects))
    return tokens, redirects


def join_tokens(tokens: list[str]) -> str:
    """ Quote words so that tokenize() gives them back unchanged. """
    return " ".join(shlex.quote(tok) for tok in tokens)
