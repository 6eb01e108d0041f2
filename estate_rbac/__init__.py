"""Role-based access control core for the brokerage admin dashboard."""

__version__ = "0.1.0"
