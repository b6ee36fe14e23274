class ValidationError(Exception):
    """Raised for malformed request payloads."""
