"""
bandcamp-download - Bandcamp album downloader
Console entry point.
"""

from .core import setup_logging
from .core.validation import validate_and_raise
from .ui.cli import BandcampDownloadCLI

logger = setup_logging()


def main(args=None):
    """Validate the configuration, then hand the command line to the CLI."""
    try:
        validate_and_raise()
    except Exception as e:
        logger.error(f"Configuration validation failed: {e}")
        raise

    try:
        BandcampDownloadCLI().run(args)
    except KeyboardInterrupt:
        logger.debug("Application interrupted by user")
        raise
    except Exception:
        logger.exception("Unhandled exception occurred")
        raise


if __name__ == "__main__":
    main()
