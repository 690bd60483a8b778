"""Localization engine.

Packages:
- configuration: Settings management (Settings, get_settings)
- logging: Structured logging setup (configure_logging, get_module_logger)
- operations: Operation results and status codes
- integrations: DynamoDB client helpers
- i18n: Locale registry, bundle cache, translation stores and resolver
- formatting: Locale-aware currency, number, date, phone and address output
- direction: LTR/RTL direction adaptor and style sinks
- management: Translation validation, quality scoring and import/export

Modules:
- service: LocalizationService facade
- factory: create_localization_service(), create_translation_manager()
"""
