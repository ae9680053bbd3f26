import logging
import sys


def setup_logging(level: str = "INFO") -> None:
    """
    Configures the root logger for the service.
    Runs from the app lifespan and from run(); once the root logger has
    handlers, later calls leave it alone.
    """
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s - %(name)s - [%(levelname)s] - %(message)s",
        stream=sys.stdout,
    )
    # Silence noisy libraries
    logging.getLogger("multipart").setLevel(logging.WARNING)
    logging.getLogger("python_multipart").setLevel(logging.WARNING)
