"""
Query flags like ?published=true. Taken as strings so "false" or "0" are not
truthy and an unknown value simply means off.
"""
from typing import Optional, Union

TRUE_VALUES = ("true", "1", "yes")


def ensure_bool_query(value: Union[bool, str, None]) -> bool:
    """True only for True or "true"/"1"/"yes" (any case); everything else is False."""
    if value is None:
        return False
    if isinstance(value, bool):
        return value
    return str(value).strip().lower() in TRUE_VALUES
