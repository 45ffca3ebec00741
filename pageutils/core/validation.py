import logging
import re
from typing import Callable, Optional, Union

from .config import Config


logger = logging.getLogger(__name__)

ID_CARD_NEW_PATTERN = re.compile(r"\d{6}(18|19|20)\d{2}(0\d|10|11|12)([0-2]\d|30|31)\d{3}[\dXx]", re.ASCII)
ID_CARD_OLD_PATTERN = re.compile(r"\d{6}\d{2}(0\d|10|11|12)([0-2]\d|30|31)\d{3}", re.ASCII)

ID_CARD_WEIGHTS = (7, 9, 10, 5, 8, 4, 2, 1, 6, 3, 7, 9, 10, 5, 8, 4, 2)
ID_CARD_CHECK_CODES = "10X98765432"

_PLATE_REGION = "京津沪渝冀豫云辽黑湘皖鲁新苏浙赣鄂桂甘晋蒙陕吉闽贵粤青藏川宁琼使领 A-Z"
_NEW_ENERGY_PLATE = (
    f"[{_PLATE_REGION}][A-HJ-NP-Z]"
    r"(?:(?:[0-9]{5}[DF])|(?:[DF][A-HJ-NP-Z0-9][0-9]{4}))"
)
_STANDARD_PLATE = f"[{_PLATE_REGION}][A-Z][A-HJ-NP-Z0-9]{{4}}[A-HJ-NP-Z0-9 挂学警港澳]"
# The new-energy branch is anchored only at the start and the standard
# branch only at the end; the pattern is searched, not fully matched.
LICENSE_PLATE_PATTERN = re.compile(rf"^(?:{_NEW_ENERGY_PLATE})|(?:{_STANDARD_PLATE})\Z")

# Fourth digit is a literal 9.
MOBILE_PATTERN = re.compile(r"1[3-9]\d9", re.ASCII)


def is_id_card_new(value: Union[str, int]) -> bool:
    """18-digit resident ID card shape check.

    Year must start with 18, 19 or 20, month 01-12, day 01-31 with no
    per-month day count. The last character may be a digit, ``X`` or ``x``.
    """
    return ID_CARD_NEW_PATTERN.fullmatch(str(value)) is not None


def is_id_card_old(value: Union[str, int]) -> bool:
    """Legacy 15-digit ID card shape check (two-digit year, no check character)."""
    return ID_CARD_OLD_PATTERN.fullmatch(str(value)) is not None


def is_chinese_id_card_number(value: Union[str, int]) -> bool:
    """18-digit ID card shape check plus the ISO 7064 MOD 11-2 check character."""
    text = str(value)
    if not is_id_card_new(text):
        return False
    total = sum(int(digit) * weight for digit, weight in zip(text[:17], ID_CARD_WEIGHTS))
    return ID_CARD_CHECK_CODES[total % 11] == text[17].upper()


def _trace_plate(value: str) -> None:
    if Config.LICENSE_PLATE_TRACE:
        logger.info(f"License plate number: {value}")


def is_license_plate_number(
    value: Optional[str],
    trace: Optional[Callable[[str], None]] = None,
) -> Union[bool, str, None]:
    """Check a license plate, new-energy or standard.

    Every call is traced through ``trace``. The default trace logs at INFO on
    this module's logger, which the service's default ``LOG_LEVEL`` of
    WARNING hides; set ``LOG_LEVEL=INFO`` to see it, or
    ``LICENSE_PLATE_TRACE=false`` to turn it off.
    Falsy input is returned unchanged rather than ``False``.
    """
    (trace or _trace_plate)(value)
    if not value:
        return value
    return LICENSE_PLATE_PATTERN.search(value.upper()) is not None


def is_mobile_number(value: Union[str, int]) -> bool:
    return MOBILE_PATTERN.match(str(value)) is not None
