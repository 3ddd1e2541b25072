
class SkiError(Exception):
    """ Base class for all skicalc errors"""
    pass

class SkiTypeError(SkiError):
    """ Raised when a value that is not a term is used where a term is required"""

class SkiConfigError(SkiError):
    """ Raised when a configuration value cannot be used"""

class MalformedApplication(SkiError):
    """ Raised when a term does not have the shape reduction should have produced"""

class ReductionDepthExceeded(SkiError):
    """ Raised when resolving a term needs more nested rewrites than the budget allows"""

    def __init__(self, max_depth: int, term=None, reason: str | None = None):
        self.max_depth = max_depth
        self.term = term
        message = reason or f"no normal form within depth budget {max_depth}"
        if term is not None:
            message = f"{message}: {term}"
        super().__init__(message)
