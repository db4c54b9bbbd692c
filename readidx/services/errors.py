# Path: readidx/services/errors.py
"""
Service Errors

User input errors raised by the services. Their message is shown to
the end user as-is.
"""


class ReportValidationError(ValueError):
    """Rejected user input (ticker, period, company name, upload)."""


class ReportNotFoundError(ReportValidationError):
    """No report stored for the requested ticker and period."""


__all__ = ['ReportValidationError', 'ReportNotFoundError']
