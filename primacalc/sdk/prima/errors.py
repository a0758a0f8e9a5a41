"""Error types raised by the prima calculation pipeline."""


class PrimaServiceError(Exception):
    """Base class for all prima calculation failures."""
    pass


class MissingDataError(PrimaServiceError):
    """Raised when a required key or a needed month salary is absent."""
    pass


class InvalidDataError(PrimaServiceError):
    """Raised when a value is present but malformed (dates, salaries)."""
    pass


class RulesNotFoundError(PrimaServiceError):
    """Raised when no fiscal rules file exists for a requested year."""
    pass
