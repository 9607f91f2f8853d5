import logging
import sys

logger = logging.getLogger("gitlab_sdk")


def setup_logging(should_debug: bool = False) -> None:
    """Attach a stream handler to the SDK logger.

    Calling it again only updates the level; the handler is added once.
    """
    level = logging.DEBUG if should_debug else logging.INFO
    logger.setLevel(level)

    if not any(getattr(h, "_gitlab_sdk", False) for h in logger.handlers):
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(
            logging.Formatter("%(asctime)s [%(levelname)s] %(name)s: %(message)s")
        )
        handler._gitlab_sdk = True  # type: ignore[attr-defined]
        logger.addHandler(handler)

    # httpx logs every request at INFO
    http_level = logging.DEBUG if should_debug else logging.WARNING
    logging.getLogger("httpx").setLevel(http_level)
    logging.getLogger("httpcore").setLevel(http_level)
