import re

# [0-9] rather than \d so that non-ASCII digits never match.
TOTAL_PATTERN = re.compile(r'[0-9]+\.[0-9]{2}')
DATE_PATTERN = re.compile(r'[0-9]{4}-([0-9]{2})-([0-9]{2})')
TIME_PATTERN = re.compile(r'([0-9]{2}):([0-9]{2})')

AFTERNOON_START_HOUR = 14
AFTERNOON_END_HOUR = 16


def is_valid_total(total) -> bool:
    return isinstance(total, str) and TOTAL_PATTERN.fullmatch(total) is not None


def is_odd_day(date) -> bool:
    if not isinstance(date, str):
        return False
    match = DATE_PATTERN.fullmatch(date)
    if not match:
        return False
    return int(match.group(2)) % 2 == 1


def is_afternoon(time) -> bool:
    """True for 14:00 up to 15:59; the minutes are not looked at."""
    if not isinstance(time, str):
        return False
    match = TIME_PATTERN.fullmatch(time)
    if not match:
        return False
    return AFTERNOON_START_HOUR <= int(match.group(1)) < AFTERNOON_END_HOUR
