from typing import Any


class InvalidIdentifierError(ValueError):
    """Raised when an ID or UID argument is missing or malformed.

    Raised before any request is built, so nothing reaches the network.
    """

    def __init__(self, param_name: str, value: Any, message: str):
        self.param_name = param_name
        self.value = value
        self.message = message
        super().__init__(self.message)
