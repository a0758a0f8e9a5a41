"""Prima Calc SDK - Core functionality for prima calculations."""

from .config import (
    get_config_dir,
    get_settings_path,
    load_settings,
    save_settings,
    get_setting,
    set_setting,
    clear_setting,
    get_rules_dirs,
    get_bundled_rules_dir,
)

from .prima import (
    calculate,
    CalculationResult,
    FiscalYearRules,
    PrimaServiceError,
    MissingDataError,
    InvalidDataError,
    RulesNotFoundError,
    DEFAULT_RULES,
    load_fiscal_rules,
    get_fiscal_rules,
)

__all__ = [
    # Config
    "get_config_dir",
    "get_settings_path",
    "load_settings",
    "save_settings",
    "get_setting",
    "set_setting",
    "clear_setting",
    "get_rules_dirs",
    "get_bundled_rules_dir",
    # Prima
    "calculate",
    "CalculationResult",
    "FiscalYearRules",
    "PrimaServiceError",
    "MissingDataError",
    "InvalidDataError",
    "RulesNotFoundError",
    "DEFAULT_RULES",
    "load_fiscal_rules",
    "get_fiscal_rules",
]
