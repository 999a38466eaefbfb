import re
from typing import Any, Union

from ..errors import InvalidIdentifierError

_UUID = r"[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{12}"

ID_PATTERN = re.compile(rf"^{_UUID}$")
UID_PATTERN = re.compile(rf"^[0-9]+-{_UUID}$")


def _require(value: Any, param_name: str) -> None:
    if value is None or value == "":
        raise InvalidIdentifierError(param_name, value, f"{param_name} is required")


def validate_required(value: Any, param_name: str) -> None:
    """Check that a free-form path argument (comment ID, slug, ...) is set.

    Raises:
        InvalidIdentifierError: If the value is ``None``, empty or blank.
    """
    _require(value, param_name)
    if isinstance(value, str) and not value.strip():
        raise InvalidIdentifierError(param_name, value, f"{param_name} is required")


def validate_path(value: Any, param_name: str) -> None:
    """Check that ``value`` is a relative file path such as ``common/schemas.yaml``.

    Raises:
        InvalidIdentifierError: If the value is missing, is not a string or
            has an empty, ``.`` or ``..`` segment.
    """
    _require(value, param_name)
    if not isinstance(value, str) or any(
        segment in ("", ".", "..") for segment in value.split("/")
    ):
        raise InvalidIdentifierError(
            param_name, value, f"{param_name} must be a valid file path"
        )


def validate_id(value: Any, param_name: str) -> None:
    """Check that ``value`` is a plain Postman ID (a UUID).

    Raises:
        InvalidIdentifierError: If the value is missing, is not a string or
            does not have the ID shape (a UID is rejected too).
    """
    _require(value, param_name)
    if not isinstance(value, str) or not ID_PATTERN.match(value):
        raise InvalidIdentifierError(
            param_name, value, f"{param_name} must be a valid ID format"
        )


def validate_uid(value: Any, param_name: str) -> None:
    """Check that ``value`` is a Postman UID (``<ownerId>-<ID>``).

    Raises:
        InvalidIdentifierError: If the value is missing, is not a string or
            does not have the UID shape (a bare ID is rejected too).
    """
    _require(value, param_name)
    if not isinstance(value, str) or not UID_PATTERN.match(value):
        raise InvalidIdentifierError(
            param_name, value, f"{param_name} must be a valid UID format"
        )


def build_uid(owner_id: Union[int, str], object_id: str) -> str:
    """Compose a UID from the owner's user ID and an object ID.

    An ``object_id`` that already is a UID is returned unchanged.

    Examples:
        >>> build_uid(12345678, "12345678-1234-1234-1234-123456789abc")
        '12345678-12345678-1234-1234-1234-123456789abc'
    """
    if isinstance(object_id, str) and UID_PATTERN.match(object_id):
        return object_id
    validate_id(object_id, "object_id")
    return f"{owner_id}-{object_id}"
