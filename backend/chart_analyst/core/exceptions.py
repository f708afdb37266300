"""Core exception classes for the Chart Analyst application."""


class AnalysisServiceError(Exception):
    """Base exception for analysis service operations."""

    pass


class PriceDataValidationError(AnalysisServiceError):
    """Raised when supplied price bars cannot be turned into a price series."""

    pass
