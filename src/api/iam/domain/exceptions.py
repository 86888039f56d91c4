"""Domain exceptions for IAM bounded context.

Aggregates and value objects only ever raise ValidationError, and always
at construction time, before any side effect has happened.
"""


class ValidationError(ValueError):
    """Raised when a value object or aggregate receives malformed input.

    Examples are a malformed email, a blank tenant name or role, or a
    missing identifier. Subclasses ValueError so callers parsing raw
    input can treat it like any other bad value.
    """

    pass
