"""Persian/ASCII numeral conversion: pure string helpers."""

ASCII_DIGITS = "0123456789"
PERSIAN_DIGITS = "۰۱۲۳۴۵۶۷۸۹"
ARABIC_INDIC_DIGITS = "٠١٢٣٤٥٦٧٨٩"

_TO_PERSIAN = str.maketrans(ASCII_DIGITS, PERSIAN_DIGITS)
_TO_ASCII = str.maketrans(PERSIAN_DIGITS + ARABIC_INDIC_DIGITS, ASCII_DIGITS * 2)


def to_persian_digits(s) -> str:
    """Replace ASCII digits with Persian-script digits; leave the rest alone."""
    return str(s).translate(_TO_PERSIAN)


def to_ascii_digits(s) -> str:
    """Replace Persian (and Arabic-Indic) digits with ASCII 0-9."""
    return str(s).translate(_TO_ASCII)
