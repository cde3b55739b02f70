import logging

WIRE_LOGGER = "zabbix_api.wire"


def setup_logging(log_level: str = "INFO", log_requests: bool = False):
    """
    Set up logging for the application.
    Args:
        log_level (str): Logging level as a string (e.g., 'DEBUG', 'INFO').
        log_requests (bool): Show raw JSON-RPC requests and responses even
            when log_level is above INFO.
    """
    numeric_level = getattr(logging, log_level.upper(), None)
    if not isinstance(numeric_level, int):
        raise ValueError(f"Invalid log level: {log_level}")
    logging.basicConfig(
        level=numeric_level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    if log_requests:
        logging.getLogger(WIRE_LOGGER).setLevel(logging.INFO)
