"""
Exception hierarchy for hinge calculation and model-file patching.

Callers can catch HingeError for anything raised deliberately by this package.
Input problems also subclass ValueError so that code written against plain
ValueError keeps working.
"""


class HingeError(Exception):
    """Base class for all steelhinge errors."""
    pass


class InputValidationError(HingeError, ValueError):
    """Raised when inputs make a calculation undefined (e.g. Fy <= 0)."""
    pass


class SectionLookupError(HingeError, LookupError):
    """Raised by a section source when a section cannot be resolved."""
    pass


class PersistenceError(HingeError):
    """Raised when a model text file cannot be parsed or written back."""
    pass


class ExportError(HingeError):
    """Raised when the results workbook cannot be written."""
    pass
