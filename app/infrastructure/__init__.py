"""Infrastructure modules for the geo-language application.

Centralized infrastructure components:
- configuration: Settings management (Settings, load_settings, ConfigurationError)
- logging: Structured logging (configure_logging, get_module_logger)
- operations: Operation results (OperationResult, OperationStatus)
- clients: External data sources (MaxMindClient)
- services: Dependency injection services (SettingsDep, get_settings)
"""
