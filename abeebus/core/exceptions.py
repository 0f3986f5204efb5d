"""
Custom exceptions for Abeebus
"""

class AbeebusError(Exception):
    """Base exception for all Abeebus errors"""
    pass

class ConfigurationError(AbeebusError):
    """Error in configuration settings"""
    pass

class UsageError(AbeebusError):
    """Malformed command line"""
    pass

class ValidationError(AbeebusError):
    """Error validating input data"""
    pass

class FileAccessError(AbeebusError):
    """Input file could not be opened or read"""
    def __init__(self, path, reason=None):
        self.path = path
        self.reason = reason
        super().__init__(f"{path} (error opening file)")

class LookupError(AbeebusError):
    """Error during lookup operations"""
    pass

class NetworkError(LookupError):
    """Network connectivity issues"""
    def __init__(self, message, service=None):
        self.service = service
        super().__init__(message)

class APIError(LookupError):
    """Errors from external APIs"""
    def __init__(self, service, message, status_code=None):
        self.service = service
        self.status_code = status_code
        super().__init__(f"{service} API error: {message}")

class DataParsingError(LookupError):
    """Error parsing data from external sources"""
    def __init__(self, message, source=None):
        self.source = source
        super().__init__(message)

class CredentialError(AbeebusError):
    """Lookups failed while an API token was in use"""
    def __init__(self, message="Could not get results. Invalid API key?"):
        super().__init__(message)

class OutputWriteError(AbeebusError):
    """Report file could not be written"""
    def __init__(self, path):
        self.path = path
        super().__init__(f"Could not write the specified file: {path}")
