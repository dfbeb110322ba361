"""
Explicit validation of speedboat records before they get persisted

Validators return a mapping of field names to lists of error messages.
An empty mapping means the values are valid. This is also the exact
structure sent to clients in the body of a 422 response.
"""

from typing import Any, Dict, Iterable, List, Mapping


BLANK_MESSAGE = "can't be blank"

SPEEDBOAT_REQUIRED_FIELDS = ("model_number",)


def is_blank(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, str):
        return value.strip() == ""
    return False


def validate_presence(values: Mapping[str, Any], fields: Iterable[str]) -> Dict[str, List[str]]:
    return {field: [BLANK_MESSAGE] for field in fields if is_blank(values.get(field))}


def validate_speedboat(values: Mapping[str, Any]) -> Dict[str, List[str]]:
    """
    Validate the complete set of writable values of a speedboat

    :param values: all writable attributes of the record (for updates,
        the stored values merged with the requested changes)
    :return: mapping of invalid field names to error messages (empty if valid)
    """

    return validate_presence(values, SPEEDBOAT_REQUIRED_FIELDS)
