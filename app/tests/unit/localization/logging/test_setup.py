"""Unit tests for localization.logging.setup module."""

import pytest
import structlog

from localization.logging import get_logger, get_module_logger
from localization.logging.setup import _is_test_environment, add_locale_tag, build_processors


@pytest.mark.unit
class TestLoggerHelpers:
    def test_detects_pytest(self):
        assert _is_test_environment() is True

    def test_get_logger_with_name(self):
        logger = get_logger("localization.custom")
        assert logger is not None
        logger.info("test_event", key="value")

    def test_get_module_logger_binds_component(self):
        logger = get_module_logger()

        context = structlog.get_context(logger)
        assert "component" in context


@pytest.mark.unit
class TestAddLocaleTag:
    def test_combines_language_and_market(self):
        event = add_locale_tag(None, "info", {"event": "locale_changed", "language": "ar", "market": "MA"})
        assert event["locale"] == "ar-MA"

    def test_requires_both_fields(self):
        event = add_locale_tag(None, "info", {"event": "x", "language": "ar"})
        assert "locale" not in event

    def test_explicit_locale_is_kept(self):
        event = add_locale_tag(
            None, "info", {"event": "x", "language": "ar", "market": "MA", "locale": "custom"}
        )
        assert event["locale"] == "custom"


@pytest.mark.unit
class TestBuildProcessors:
    def test_production_renders_json(self):
        processors = build_processors(production=True)

        assert isinstance(processors[-1], structlog.processors.JSONRenderer)
        assert add_locale_tag in processors

    def test_development_renders_console(self):
        processors = build_processors(production=False)
        assert isinstance(processors[-1], structlog.dev.ConsoleRenderer)


@pytest.mark.unit
def test_module_loggers_carry_component():
    from localization.i18n import cache

    context = structlog.get_context(cache.logger)

    assert context["component"] == "cache"
    assert context["module_path"] == "localization.i18n.cache"
