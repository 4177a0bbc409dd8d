import re

import pendulum
from pendulum import parse

NON_DIGITS = re.compile(r"[^0-9]")


def parse_datetime(value):
    if value is None or value == "":
        return None
    if isinstance(value, str):
        return parse(value)
    return pendulum.instance(value)

def digits_only(phone) -> str:
    if not phone:
        return ""
    return NON_DIGITS.sub("", str(phone))

def normalize_country_name(name):
    """NetSuite Country enum to a display name.

        _unitedStates => UnitedStates
    """
    if not isinstance(name, str) or not name:
        return None
    name = name[1:] if name.startswith("_") else name
    return f"{name[:1].upper()}{name[1:]}"

def strip_enum_prefix(value):
    if isinstance(value, str) and value.startswith("_"):
        return value[1:]
    return value

def next_watermark(dates):
    """Latest of `dates` plus one second, in UTC, as an ISO string."""
    parsed = [parse_datetime(date) for date in dates if date]
    if not parsed:
        return None
    return max(parsed).in_timezone("UTC").add(seconds=1).to_iso8601_string()

def iso_string(value):
    parsed = parse_datetime(value)
    return parsed.to_iso8601_string() if parsed is not None else None
