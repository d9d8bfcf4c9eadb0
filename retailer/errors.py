"""Exceptions raised by the retail analytics toolkit."""


class RetailerError(Exception):
    """Base class for every error the toolkit raises."""


class ConfigurationError(RetailerError, ValueError):
    """A column, format string or option does not fit the input table."""


class EmptyGroupError(RetailerError, ZeroDivisionError):
    """A ratio was asked to divide by an empty count."""


class FittingError(RetailerError):
    """The sales trend could not be fitted."""


class InsufficientDataError(FittingError):
    """Fewer than two distinct dates were available for the trend fit."""
