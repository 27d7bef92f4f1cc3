import re
from typing import Annotated

from pydantic import BeforeValidator

MAX_NAME_LENGTH = 128

_NAME_PATTERN = re.compile(r"[A-Za-z0-9_-][A-Za-z0-9._-]*")


def validate_series_id(series_id: object, *, kind: str = "series id") -> str:
    """@brief Validate a name that becomes a file or folder under a data folder.

    @details Stored series use it as `<id>/<id>.json` and saved charts as
    `<title>.html`, so the name must stay a single path component.

    @param series_id Raw name, stripped of surrounding whitespace.
    @param kind Label used in error messages, e.g. `"plot title"`.
    @return The stripped name.
    @throws ValueError If the name is empty, too long, starts with a dot,
    contains `..` or a character outside `[A-Za-z0-9._-]`.
    """
    if isinstance(series_id, bool) or not isinstance(series_id, (str, int)):
        raise ValueError(f"{kind} must be a string.")

    value = str(series_id).strip()
    if not value:
        raise ValueError(f"{kind} must be a non-empty string.")

    if len(value) > MAX_NAME_LENGTH:
        raise ValueError(f"{kind} must be at most {MAX_NAME_LENGTH} characters.")

    if not _NAME_PATTERN.fullmatch(value):
        raise ValueError(
            f"{kind} '{value}' must start with a letter, digit, '_' or '-' "
            "and contain only letters, digits, '.', '_' or '-'."
        )

    if ".." in value:
        raise ValueError(f"{kind} '{value}' cannot contain consecutive dots.")

    return value


SeriesId = Annotated[str, BeforeValidator(validate_series_id)]
