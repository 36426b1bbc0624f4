"""
Common exception classes.
"""


class InputTypeError(TypeError):
    """A numeric argument is neither a big integer nor a decimal/hex string."""


class MissingParameterError(Exception):
    """Group modulus or generator cannot be resolved."""


class ValidationError(Exception):
    """Error during validation."""
