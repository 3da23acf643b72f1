"""Base domain exception."""


class DomainException(Exception):
    """
    Base exception for all wallet client errors.

    Every failure raised by the client is a subclass, so callers can
    catch a single type when they only need a printable diagnostic.
    """

    def __init__(self, message: str, code: str = "DOMAIN_ERROR"):
        self.message = message
        self.code = code
        super().__init__(self.message)
