"""Configuration errors raised while preparing an expansion.

Any of these aborts the whole expansion; the executor turns them into a
single error outcome for the test function.
"""


class ConfigurationError(Exception):
    """Raised when a test function's bindings or values are unusable."""

    def __init__(self, message: str, parameter: str | None = None):
        self.parameter = parameter
        super().__init__(message)


class BindingCountError(ConfigurationError):
    """Raised when the number of bindings differs from the parameter count."""


class UnresolvedBindingError(ConfigurationError):
    """Raised when a binding's index or name matches no parameter."""


class DuplicateBindingError(ConfigurationError):
    """Raised when two bindings target the same parameter."""


class MissingBindingError(ConfigurationError):
    """Raised when a parameter has no binding."""


class TypeMismatchError(ConfigurationError):
    """Raised when a candidate value does not fit its parameter's type."""


class EmptyValuesError(ConfigurationError):
    """Raised when a provider produces no values."""


class NotAnEnumerationError(ConfigurationError):
    """Raised when an enumeration provider is given a non-enum type."""


class FactoryResolutionError(ConfigurationError):
    """Raised when a factory function is missing or has the wrong shape."""


class FactoryResultError(ConfigurationError):
    """Raised when a factory function returns no usable collection."""


class UnorderedValuesError(ConfigurationError):
    """Raised when a provider's values are not an ordered sequence."""
