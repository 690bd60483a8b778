"""Locale context binding for structured logging.

Binds the language and market being switched to into structlog context
variables so every event emitted during a transition carries them.

Usage:
    from localization.logging import bind_locale_context

    with bind_locale_context(language="ar", market="MA"):
        logger.info("bundle_loaded")
"""

import uuid
from contextlib import contextmanager
from typing import Any, Generator, Optional

import structlog


@contextmanager
def bind_locale_context(
    language: Optional[str] = None,
    market: Optional[str] = None,
    transition_id: Optional[str] = None,
    **extra_context: Any,
) -> Generator[None, None, None]:
    """Bind locale-transition context to all logs within the block.

    Args:
        language: Target language code.
        market: Target market code.
        transition_id: Identifier shared by all events of one transition.
            Auto-generated if not provided.
        **extra_context: Additional key-value pairs to include in logs.

    Yields:
        None - context is bound to structlog's context vars.
    """
    context: dict[str, Any] = {"transition_id": transition_id or str(uuid.uuid4())}
    if language is not None:
        context["language"] = language
    if market is not None:
        context["market"] = market
    context.update(extra_context)

    structlog.contextvars.bind_contextvars(**context)
    try:
        yield
    finally:
        structlog.contextvars.unbind_contextvars(*context.keys())


def get_transition_id() -> Optional[str]:
    """Get the transition id bound in the current logging context.

    Returns:
        The transition id if set, None otherwise.
    """
    return structlog.contextvars.get_contextvars().get("transition_id")
