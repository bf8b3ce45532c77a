"""Infrastructure modules for the lingua application.

Centralized infrastructure components:
- configuration: Settings management (Settings, LinguaSettings, ServerSettings)
- i18n: Locale negotiation and resource resolution
- logging: Structured logging (configure_logging, get_module_logger)
- services: Dependency injection services (SettingsDep, LinguaDep, get_settings)
"""
