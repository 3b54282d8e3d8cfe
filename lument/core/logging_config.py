import logging

LOG_FORMAT = "[%(asctime)s] [%(levelname)s] [%(name)s]: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(format=LOG_FORMAT, datefmt=DATE_FORMAT, level=level.upper())
    logging.getLogger("httpx").setLevel(logging.WARNING)
