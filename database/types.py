"""
Primitive value types used by the dataset loaders and the queries
Dates, times, airport codes and identifiers are packed into integers
"""
from typing import Tuple


class NonNumericIdError(ValueError):
    """Raised when an identifier has the right shape but non-digit characters"""


# Bit layout of a packed date: year << 9 | month << 5 | day
_MONTH_SHIFT = 5
_YEAR_SHIFT = 9
_DAY_MASK = 0x1F
_MONTH_MASK = 0x0F

# A timed date keeps the seconds of the day in the low 17 bits
_TIME_SHIFT = 17
_TIME_MASK = (1 << _TIME_SHIFT) - 1

SECONDS_PER_DAY = 24 * 60 * 60

FLIGHT_ID_LENGTH = 10
RESERVATION_ID_PREFIX = "Book"
HOTEL_ID_PREFIX = "HTL"


def _is_digits(text: str) -> bool:
    return text.isascii() and text.isdigit()


def _is_letters(text: str) -> bool:
    return text.isascii() and text.isalpha()


def parse_positive_int(text: str) -> int:
    """
    Parse a non-empty run of ASCII digits

    Args:
        text: Text to parse

    Returns:
        The parsed integer (zero included)
    """
    if not _is_digits(text):
        raise ValueError(f"Not an unsigned integer: {text!r}")
    return int(text)


def _parse_fixed_digits(text: str, length: int) -> int:
    if len(text) != length or not _is_digits(text):
        raise ValueError(f"Expected {length} digits, got {text!r}")
    return int(text)


# Date


def date_from_values(year: int, month: int, day: int) -> int:
    """Pack a date, validating the ranges of each component"""
    if not 1 <= year <= 9999:
        raise ValueError(f"Year out of range: {year}")
    if not 1 <= month <= 12:
        raise ValueError(f"Month out of range: {month}")
    if not 1 <= day <= 31:
        raise ValueError(f"Day out of range: {day}")
    return (year << _YEAR_SHIFT) | (month << _MONTH_SHIFT) | day


def date_from_string(text: str) -> int:
    """
    Parse a date in the YYYY/MM/DD format

    Args:
        text: Date text

    Returns:
        Packed date, ordered the same way as the calendar
    """
    parts = text.split("/")
    if len(parts) != 3:
        raise ValueError(f"Invalid date: {text!r}")

    year = _parse_fixed_digits(parts[0], 4)
    month = _parse_fixed_digits(parts[1], 2)
    day = _parse_fixed_digits(parts[2], 2)
    return date_from_values(year, month, day)


def date_get_year(date: int) -> int:
    return date >> _YEAR_SHIFT


def date_get_month(date: int) -> int:
    return (date >> _MONTH_SHIFT) & _MONTH_MASK


def date_get_day(date: int) -> int:
    return date & _DAY_MASK


def date_to_string(date: int) -> str:
    return f"{date_get_year(date):04d}/{date_get_month(date):02d}/{date_get_day(date):02d}"


def _date_to_days(date: int) -> int:
    return date_get_year(date) * 12 * 31 + date_get_month(date) * 31 + date_get_day(date)


def date_diff(a: int, b: int) -> int:
    """Days from b to a, assuming every month has 31 days"""
    return _date_to_days(a) - _date_to_days(b)


# Time of day


def daytime_from_values(hours: int, minutes: int, seconds: int) -> int:
    if not 0 <= hours <= 23:
        raise ValueError(f"Hours out of range: {hours}")
    if not 0 <= minutes <= 59:
        raise ValueError(f"Minutes out of range: {minutes}")
    if not 0 <= seconds <= 59:
        raise ValueError(f"Seconds out of range: {seconds}")
    return hours * 3600 + minutes * 60 + seconds


def daytime_from_string(text: str) -> int:
    """Parse a time of day in the HH:MM:SS format into seconds since midnight"""
    parts = text.split(":")
    if len(parts) != 3:
        raise ValueError(f"Invalid time: {text!r}")

    return daytime_from_values(*(_parse_fixed_digits(part, 2) for part in parts))


def daytime_to_string(daytime: int) -> str:
    hours, rest = divmod(daytime, 3600)
    minutes, seconds = divmod(rest, 60)
    return f"{hours:02d}:{minutes:02d}:{seconds:02d}"


def daytime_diff(a: int, b: int) -> int:
    return a - b


# Date and time


def date_and_time_from_values(date: int, daytime: int) -> int:
    return (date << _TIME_SHIFT) | daytime


def date_and_time_from_string(text: str) -> int:
    """
    Parse a timed date in the YYYY/MM/DD HH:MM:SS format

    Args:
        text: Timed date text

    Returns:
        Packed timed date, ordered chronologically
    """
    date_text, separator, time_text = text.partition(" ")
    if not separator:
        raise ValueError(f"Invalid date and time: {text!r}")
    return date_and_time_from_values(date_from_string(date_text), daytime_from_string(time_text))


def date_and_time_get_date(date_and_time: int) -> int:
    return date_and_time >> _TIME_SHIFT


def date_and_time_get_time(date_and_time: int) -> int:
    return date_and_time & _TIME_MASK


def date_and_time_to_string(date_and_time: int) -> str:
    return (f"{date_to_string(date_and_time_get_date(date_and_time))} "
            f"{daytime_to_string(date_and_time_get_time(date_and_time))}")


def date_and_time_diff(a: int, b: int) -> int:
    """Seconds from b to a"""
    days = date_diff(date_and_time_get_date(a), date_and_time_get_date(b))
    seconds = daytime_diff(date_and_time_get_time(a), date_and_time_get_time(b))
    return days * SECONDS_PER_DAY + seconds


# Airport codes


def airport_code_from_string(text: str) -> int:
    """
    Parse a three letter airport code (case-insensitive)

    The letters are packed big-endian, so comparing two codes as integers
    gives the same result as comparing them alphabetically.
    """
    if len(text) != 3 or not _is_letters(text):
        raise ValueError(f"Invalid airport code: {text!r}")

    code = 0
    for letter in text.upper():
        code = (code << 8) | ord(letter)
    return code


def airport_code_to_string(code: int) -> str:
    return "".join(chr((code >> shift) & 0xFF) for shift in (16, 8, 0))


# Identifiers


def flight_id_from_string(text: str) -> int:
    """
    Parse a flight identifier (exactly 10 decimal digits)

    Raises:
        NonNumericIdError: The identifier contains non-digit characters
        ValueError: The identifier is empty or has the wrong length
    """
    if not text:
        raise ValueError("Empty flight ID")
    if not _is_digits(text):
        raise NonNumericIdError(f"Non-numeric flight ID: {text!r}")
    if len(text) != FLIGHT_ID_LENGTH:
        raise ValueError(f"Flight ID must have {FLIGHT_ID_LENGTH} digits: {text!r}")
    return int(text)


def flight_id_to_string(flight_id: int) -> str:
    return f"{flight_id:010d}"


def reservation_id_from_string(text: str) -> int:
    """
    Parse a reservation identifier (Book followed by exactly 10 digits)

    Raises:
        NonNumericIdError: The digits after the prefix are not numeric
        ValueError: Missing prefix or wrong length
    """
    if not text.startswith(RESERVATION_ID_PREFIX):
        raise ValueError(f"Reservation ID must start with {RESERVATION_ID_PREFIX}: {text!r}")

    digits = text[len(RESERVATION_ID_PREFIX):]
    if not _is_digits(digits):
        raise NonNumericIdError(f"Non-numeric reservation ID: {text!r}")
    if len(digits) != FLIGHT_ID_LENGTH:
        raise ValueError(f"Reservation ID must have {FLIGHT_ID_LENGTH} digits: {text!r}")
    return int(digits)


def reservation_id_to_string(reservation_id: int) -> str:
    return f"{RESERVATION_ID_PREFIX}{reservation_id:010d}"


def hotel_id_from_string(text: str) -> str:
    """Validate a hotel identifier (HTL followed by digits) and return it as HTL<number>"""
    if not text.startswith(HOTEL_ID_PREFIX):
        raise ValueError(f"Hotel ID must start with {HOTEL_ID_PREFIX}: {text!r}")
    if not _is_digits(text[len(HOTEL_ID_PREFIX):]):
        raise NonNumericIdError(f"Non-numeric hotel ID: {text!r}")
    return HOTEL_ID_PREFIX + str(int(text[len(HOTEL_ID_PREFIX):]))


# Misc fields


def validate_email(text: str) -> str:
    """
    Validate an email address of the form user@domain.tld

    Args:
        text: Email to validate

    Returns:
        The email, unchanged
    """
    parts = text.split("@")
    if len(parts) != 2 or not parts[0]:
        raise ValueError(f"Invalid email: {text!r}")

    domain = parts[1].split(".")
    if len(domain) != 2 or not domain[0] or len(domain[1]) < 2:
        raise ValueError(f"Invalid email domain: {text!r}")
    return text


def country_code_from_string(text: str) -> str:
    """Validate a two-letter country code, returned in uppercase"""
    if len(text) != 2 or not _is_letters(text):
        raise ValueError(f"Invalid country code: {text!r}")
    return text.upper()


_BREAKFAST_VALUES = {
    "": False, "0": False, "f": False, "false": False,
    "1": True, "t": True, "true": True,
}


def includes_breakfast_from_string(text: str) -> bool:
    try:
        return _BREAKFAST_VALUES[text.lower()]
    except KeyError:
        raise ValueError(f"Invalid includes_breakfast value: {text!r}") from None


def includes_breakfast_to_string(value: bool) -> str:
    return "True" if value else "False"


def split_date(date: int) -> Tuple[int, int, int]:
    return date_get_year(date), date_get_month(date), date_get_day(date)
