"""Structlog configuration and logger setup.

Every event emitted during a locale transition carries the transition id,
language and market bound by ``bind_locale_context``; ``add_locale_tag``
folds the last two into a single ``locale`` field ("ar-MA") so production
logs can be filtered per pair.

Usage:
    from localization.logging import configure_logging, get_module_logger

    configure_logging()

    logger = get_module_logger()
    logger.info("bundle_loaded", language="fr", market="FR")
"""

import inspect
import logging
import sys
from typing import Any, List, MutableMapping, Optional

import structlog
from structlog.stdlib import BoundLogger
from structlog.typing import Processor

from localization.configuration import get_settings

SILENT_LEVEL = logging.CRITICAL + 1


def _is_test_environment() -> bool:
    return "pytest" in sys.modules


def add_locale_tag(
    _logger: Any, _method_name: str, event_dict: MutableMapping[str, Any]
) -> MutableMapping[str, Any]:
    """Add ``locale`` as "<language>-<MARKET>" when both fields are present.

    An explicit ``locale`` field on the event is left untouched.
    """
    language = event_dict.get("language")
    market = event_dict.get("market")
    if language and market and "locale" not in event_dict:
        event_dict["locale"] = f"{language}-{market}"
    return event_dict


def build_processors(production: bool) -> List[Processor]:
    """Processor chain: context, level, time, callsite, locale, renderer.

    Args:
        production: Render JSON lines instead of the colored console output.
    """
    processors: List[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.CallsiteParameterAdder(
            parameters=[
                structlog.processors.CallsiteParameter.FILENAME,
                structlog.processors.CallsiteParameter.LINENO,
                structlog.processors.CallsiteParameter.FUNC_NAME,
            ]
        ),
        add_locale_tag,
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]
    if production:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer())
    return processors


def _configure_silent() -> BoundLogger:
    # Nothing reaches a handler at SILENT_LEVEL
    logging.root.setLevel(SILENT_LEVEL)
    structlog.configure(
        processors=[
            structlog.stdlib.add_log_level,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
    logging.basicConfig(format="%(message)s", level=SILENT_LEVEL, force=True)
    return structlog.stdlib.get_logger()


def configure_logging(
    log_level: Optional[str] = None,
    is_production: Optional[bool] = None,
) -> BoundLogger:
    """Configure structlog for the process.

    Output is suppressed entirely under pytest.

    Args:
        log_level: Level name overriding settings.LOG_LEVEL.
        is_production: Overrides settings.is_production (JSON vs console).

    Returns:
        Configured logger instance.
    """
    if _is_test_environment():
        return _configure_silent()

    settings = get_settings()
    production = settings.is_production if is_production is None else is_production

    structlog.configure(
        processors=build_processors(production),
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    level_name = (log_level or settings.LOG_LEVEL).upper()
    logging.basicConfig(
        format="%(message)s",
        level=getattr(logging, level_name, logging.INFO),
    )
    return structlog.stdlib.get_logger()


logger: BoundLogger = configure_logging()


def _caller_module_name() -> Optional[str]:
    # Two frames up: the caller of get_logger/get_module_logger
    frame = inspect.currentframe()
    caller = frame.f_back.f_back if frame and frame.f_back else None
    module = inspect.getmodule(caller) if caller else None
    return module.__name__ if module else None


def get_logger(name: Optional[str] = None) -> BoundLogger:
    """Logger bound to ``logger_name`` (``name`` or the calling module)."""
    return logger.bind(logger_name=name or _caller_module_name() or "unknown")


def get_module_logger() -> BoundLogger:
    """Logger bound with ``component`` and ``module_path`` of the caller.

    Example:
        # In localization/i18n/cache.py
        logger = get_module_logger()
        # context: {"component": "cache", "module_path": "localization.i18n.cache"}
    """
    module_name = _caller_module_name()
    if module_name is None:
        return logger.bind(component="unknown")
    return logger.bind(component=module_name.split(".")[-1], module_path=module_name)
