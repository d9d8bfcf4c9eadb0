"""retailer: analytics for unitary point-of-sale exports."""

from retailer.config import AnalyticsConfig, SalesColumns, load_config, load_config_file
from retailer.errors import (
    ConfigurationError,
    EmptyGroupError,
    FittingError,
    InsufficientDataError,
    RetailerError,
)

__version__ = "0.1.0"
