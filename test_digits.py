from digits import to_ascii_digits, to_persian_digits


def test_ascii_to_persian():
    assert to_persian_digits("1403/05/09") == "۱۴۰۳/۰۵/۰۹"


def test_persian_to_ascii():
    assert to_ascii_digits("۱۴۰۳/۰۵/۰۹") == "1403/05/09"


def test_arabic_indic_digits_are_read_too():
    assert to_ascii_digits("٢٠٢٤") == "2024"


def test_non_digits_pass_through():
    assert to_persian_digits("") == ""
    assert to_persian_digits("تاریخ: abc") == "تاریخ: abc"
    assert to_ascii_digits("no digits") == "no digits"


def test_non_string_input_is_stringified():
    assert to_persian_digits(42) == "۴۲"


def test_round_trip():
    for s in ("", "0123456789", "a1b2/c3", "12:30 - 7"):
        assert to_ascii_digits(to_persian_digits(s)) == s
