"""Logging configuration for the browser DOM server."""

import logging
import sys
from pathlib import Path
from typing import Optional, TextIO
import structlog


def setup_logging(
    level: str = "INFO",
    log_file: Optional[str] = None,
    json_logs: bool = False,
    stream: TextIO = sys.stderr,
) -> logging.Logger:
    """
    Set up logging configuration for the server.

    Console output goes to stderr by default because stdout carries
    the MCP stdio transport.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Optional file path for logging
        json_logs: Whether to output JSON formatted logs
        stream: Stream for the console handler

    Returns:
        Configured logger instance
    """
    numeric_level = getattr(logging, level.upper(), logging.INFO)

    processors = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso" if json_logs else "%Y-%m-%d %H:%M:%S"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]
    if json_logs:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=False))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    root_logger = logging.getLogger()
    root_logger.setLevel(numeric_level)
    root_logger.handlers.clear()

    console_handler = logging.StreamHandler(stream)
    console_handler.setLevel(numeric_level)

    if not json_logs:
        console_handler.setFormatter(logging.Formatter(
            fmt="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S"
        ))

    root_logger.addHandler(console_handler)

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)

        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(numeric_level)
        file_handler.setFormatter(logging.Formatter(
            fmt="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S"
        ))
        root_logger.addHandler(file_handler)

    # Quiet down noisy libraries
    logging.getLogger("asyncio").setLevel(logging.WARNING)
    logging.getLogger("mcp").setLevel(logging.WARNING)
    logging.getLogger("playwright").setLevel(logging.WARNING)

    logger = logging.getLogger("playwright_dom_mcp")
    logger.setLevel(numeric_level)

    return logger


def get_logger(name: str = "playwright_dom_mcp") -> structlog.stdlib.BoundLogger:
    """
    Get a structlog logger instance.

    Args:
        name: Logger name (usually module name)

    Returns:
        Bound logger instance
    """
    return structlog.get_logger(name)


def log_browser_event(event_type: str, **details):
    """
    Log browser events with consistent formatting.

    Args:
        event_type: Type of browser event
        **details: Additional event details
    """
    logger = get_logger("playwright_dom_mcp.browser")
    logger.debug(f"Browser event: {event_type}", event_type=event_type, **details)


def log_dom_extraction(
    element_count: int,
    payload_chars: int,
    output_format: str,
    max_chars: int,
):
    """
    Log a finished DOM extraction, warning when the payload is oversized.

    Args:
        element_count: Number of element nodes in the extracted tree
        payload_chars: Length of the serialized payload
        output_format: Serialization format used
        max_chars: Size threshold above which the payload counts as oversized
    """
    logger = get_logger("playwright_dom_mcp.dom")
    if payload_chars > max_chars:
        logger.warning(
            "Oversized DOM payload",
            elements=element_count,
            chars=payload_chars,
            max_chars=max_chars,
            format=output_format,
        )
    else:
        logger.debug(
            "DOM extracted",
            elements=element_count,
            chars=payload_chars,
            format=output_format,
        )
