"""
Type registry exception classes.
"""


class TypeMapError(Exception):
    """Base class for all typemap errors.
    """


class ValidationError(TypeMapError):
    """Error in input validation.
    """
