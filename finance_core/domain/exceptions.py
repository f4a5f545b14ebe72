"""Domain-specific exceptions"""


class DomainException(Exception):
    """Base exception for domain layer"""

    pass


class InvalidDateError(DomainException):
    """Date input is malformed or of an unsupported type"""

    pass


class InvalidTemplateError(DomainException):
    """Stored interest template holds a value that cannot be parsed"""

    pass


class UnsupportedLocaleError(DomainException):
    """No breakdown labels exist for the requested locale"""

    pass
