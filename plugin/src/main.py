"""
drone-github-comment - Main entry point.
"""

import logging
import sys
from importlib.metadata import version, PackageNotFoundError

from plugin.src.config import get_settings
from plugin.src.errors import PluginError
from plugin.src.services.lifecycle import run

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    handlers=[logging.StreamHandler(sys.stdout)]
)

logger = logging.getLogger(__name__)

PROGRAM = "drone-github-comment"

def get_version() -> str:
    try:
        return version(PROGRAM)
    except PackageNotFoundError:
        return "development"

def main() -> int:
    """Main entry point."""
    logger.info(f"{PROGRAM} version {get_version()}")

    try:
        outcome = run(get_settings())
    except PluginError as e:
        print(f"{PROGRAM}: {e}", file=sys.stderr)
        return 1

    logger.info(f"finished: {outcome.value}")
    return 0

if __name__ == "__main__":
    sys.exit(main())
