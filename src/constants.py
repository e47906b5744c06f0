PROMPT = "$ "
CONTINUATION_PROMPT = "> "

# the only line that ends the session
EXIT_LINE = "exit 0"

SINGLE_QUOTE = "'"
DOUBLE_QUOTE = '"'
BACKSLASH = "\\"
REDIRECT_OP = ">"
WORD_SEPARATORS = set(" \t")
# characters a backslash still escapes inside double quotes
DQUOTE_ESCAPABLE = set('\\"$`')

STDOUT = "stdout"
STDOUT_APPEND = "stdout_append"
STDERR = "stderr"
STDERR_APPEND = "stderr_append"

# stream -> (truncate kind, append kind)
REDIRECT_KINDS = {
    STDOUT: (STDOUT, STDOUT_APPEND),
    STDERR: (STDERR, STDERR_APPEND),
}
FD_STREAMS = {"1": STDOUT, "2": STDERR}

NOT_FOUND_STATUS = 127
ERROR_STATUS = 1
SYNTAX_ERROR_STATUS = 2
