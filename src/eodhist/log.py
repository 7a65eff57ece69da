"""loguru integration for the eodhist client

The library logs through loguru and is disabled by default; applications
opt in with ``logger.enable("eodhist")``.
"""

import logging
import re

import httpx
from loguru import logger

MASK = "***"
_TOKEN_PATTERN = re.compile(r"(api_token=)[^&\s]+")

_bridge_installed = False


class _LoguruHandler(logging.Handler):
    """Bridge stdlib logging into loguru"""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            level = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno
        message = _TOKEN_PATTERN.sub(rf"\g<1>{MASK}", record.getMessage())
        logger.opt(depth=6, exception=record.exc_info).log(level, message)


def install_logging_bridge() -> None:
    """Route the stdlib httpx logger into loguru once.

    httpx reports through the stdlib ``logging`` module; call this from an
    application that collects everything with loguru.
    """
    global _bridge_installed
    if _bridge_installed:
        return

    handler = _LoguruHandler()
    std_logger = logging.getLogger("httpx")
    std_logger.setLevel(logging.DEBUG)
    std_logger.addHandler(handler)
    std_logger.propagate = False

    _bridge_installed = True


def mask_token(url: httpx.URL) -> str:
    """Return the URL as text with the api_token parameter masked"""
    if "api_token" not in url.params:
        return str(url)
    return str(url.copy_set_param("api_token", MASK))


async def log_request(request: httpx.Request) -> None:
    """httpx request hook: log the outbound call without the token."""
    logger.debug(f"HTTPX request: {request.method} {mask_token(request.url)}")


async def log_response(response: httpx.Response) -> None:
    """httpx response hook: log status and target."""
    logger.debug(
        f"HTTPX response: status={response.status_code} "
        f"url={mask_token(response.request.url)}"
    )
