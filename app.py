import logging
import sys

from presentation.cli import handle_command
from utils.config import LOG_LEVEL
from utils.helpers import configure_logging

logger = logging.getLogger(__name__)


def main(argv=None):
    """
    Runs every exercise in order, or the single command given on the command line.
    """
    argv = sys.argv[1:] if argv is None else argv
    configure_logging(LOG_LEVEL)
    command = " ".join(argv) if argv else "all"
    logger.debug(f"Running command: {command}")
    handle_command(command)
    return 0


if __name__ == "__main__":
    sys.exit(main())
