""" Current state of the shell. """
import os


class ShellState:
    def __init__(self, env=None):
        # environment handed to child processes; also the source of PATH and HOME
        self.env = dict(os.environ if env is None else env)
        self.last_status = 0

    def set_status(self, status: int):
        self.last_status = int(status) if status is not None else 0

    def search_path(self) -> str:
        return self.env.get("PATH", "")

    def home(self) -> str:
        return self.env.get("HOME") or os.path.expanduser("~")
