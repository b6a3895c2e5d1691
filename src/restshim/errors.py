"""restshim exception hierarchy.

Shared across the message façades, the host model, and the builders so
every module raises and catches the same types. Validation errors are
raised synchronously at the offending call and never leave a message
half-modified.
"""

from collections.abc import Iterable


class RestShimError(Exception):
    """Base for all restshim-specific errors."""


class ConfigurationError(RestShimError):
    """Raised when the host or a registration is set up incorrectly."""


class InvalidArgument(RestShimError, ValueError):
    """An argument passed to a restshim API is unusable."""


class InvalidHeader(InvalidArgument):
    """Base for header name and header value errors."""


class InvalidHeaderName(InvalidHeader):
    """The header name is not a string."""


class InvalidHeaderValue(InvalidHeader):
    """The header value is neither a scalar nor a list of scalars."""


class InvalidMethod(InvalidArgument):
    """The HTTP method is not in the allowed set.

    The rejected method and the allowed set are kept for error reporting.
    """

    def __init__(self, method: str, allowed: Iterable[str]) -> None:
        self.method = method
        self.allowed = tuple(allowed)
        super().__init__(
            f"{method!r} is not an allowed HTTP method. Allowed methods: {', '.join(self.allowed)}"
        )


class InvalidRequestTarget(InvalidArgument):
    """The request target contains whitespace."""


class InvalidUri(InvalidArgument):
    """The URI cannot be resolved against the host's REST routing rules."""


class InvalidStatusCode(InvalidArgument):
    """The status code is not in the known status table."""

    def __init__(self, status: object) -> None:
        self.status = status
        super().__init__(f"{status!r} is no valid HTTP status code.")


class InvalidClass(RestShimError, TypeError):
    """A factory was asked to create an object of an unsuitable class."""
