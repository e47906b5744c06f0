""" Find external programs on the search path. """
import logging
import os

from exceptions import CommandNotFound

logger = logging.getLogger(__name__)


def resolve(name: str, search_path: str | None = None) -> str:
    """
    Return the first file called `name` in the directories of `search_path`
    (PATH syntax; defaults to $PATH). A name containing a slash is checked
    as given instead of being searched for.
    """
    if os.sep in name:
        if os.path.exists(name) and not os.path.isdir(name):
            return name
        raise CommandNotFound(name)

    if search_path is None:
        search_path = os.environ.get("PATH", "")
    if not search_path:
        logger.debug("no search path set while resolving %s", name)
        raise CommandNotFound(name)

    for directory in search_path.split(os.pathsep):
        candidate = os.path.join(directory, name)
        if os.path.exists(candidate) and not os.path.isdir(candidate):
            logger.debug("resolved %s -> %s", name, candidate)
            return candidate

    raise CommandNotFound(name)
