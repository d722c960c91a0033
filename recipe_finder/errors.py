"""
Error taxonomy for recipe API calls.

These exceptions never escape the API client: SpoonacularClient raises them internally
and converts them into its shared `last error` message at the client boundary. They
exist so that each failure kind carries its own message format and data.

- MissingCredentialError: an operation was attempted with no API key set
- RecipeHttpError: the API answered with a non-success status code
- RecipeTransportError: the request never produced a response (DNS, connection, timeout)

An empty result set is NOT an error and has no exception type.
"""


class RecipeApiError(Exception):
    """Base class for all recipe API failures."""
    pass


class MissingCredentialError(RecipeApiError):
    """Raised when a call is attempted without an API key. No request is made."""

    def __init__(self, message: str = "API key is required"):
        super().__init__(message)


class RecipeHttpError(RecipeApiError):
    """
    Raised when the API returns a non-success HTTP status.

    Attributes:
        status_code: HTTP status code returned by the API (e.g. 401, 402)
    """

    def __init__(self, status_code: int):
        self.status_code = status_code
        super().__init__(f"API Error: {status_code}")


class RecipeTransportError(RecipeApiError):
    """Raised when the request fails below HTTP; the message is the underlying failure."""
    pass
