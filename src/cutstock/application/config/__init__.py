"""Job configuration schema, loading and validation.

Public API:
    - JobConfiguration: Root configuration model
    - BarJobConfig / PanelJobConfig: Job sections
    - load_config: Load configuration from a JSON file
    - load_config_from_dict: Load configuration from a dictionary
    - ConfigError: Exception for configuration errors
    - validate_config: Advisory checks over a loaded configuration
    - config_to_bar_job / config_to_panel_job: Convert sections to DTOs

Example:
    >>> from pathlib import Path
    >>> from cutstock.application.config import load_config, ConfigError
    >>>
    >>> try:
    ...     config = load_config(Path("job.json"))
    ... except ConfigError as e:
    ...     print(f"Error: {e}")
"""

from cutstock.application.config.adapter import (
    config_to_bar_job,
    config_to_panel_job,
)
from cutstock.application.config.loader import (
    ConfigError,
    load_config,
    load_config_from_dict,
)
from cutstock.application.config.schema import (
    SUPPORTED_VERSIONS,
    BarJobConfig,
    BarSearchConfig,
    BarStockConfig,
    JobConfiguration,
    PanelConfig,
    PanelJobConfig,
    PartConfig,
    SheetSearchConfig,
    SheetStockConfig,
)
from cutstock.application.config.validator import (
    ValidationError,
    ValidationResult,
    ValidationWarning,
    check_bar_job,
    check_panel_job,
    validate_config,
)

__all__ = [
    # Schema
    "SUPPORTED_VERSIONS",
    "BarJobConfig",
    "BarSearchConfig",
    "BarStockConfig",
    "JobConfiguration",
    "PanelConfig",
    "PanelJobConfig",
    "PartConfig",
    "SheetSearchConfig",
    "SheetStockConfig",
    # Loading
    "ConfigError",
    "load_config",
    "load_config_from_dict",
    # Validation
    "ValidationError",
    "ValidationResult",
    "ValidationWarning",
    "check_bar_job",
    "check_panel_job",
    "validate_config",
    # Adapters
    "config_to_bar_job",
    "config_to_panel_job",
]
