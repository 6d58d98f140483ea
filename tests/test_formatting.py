import io

import pytest

from solong.formatting import printf, put_endl, put_nbr, put_str, sprintf


def test_plain_text_count_and_output():
    buf = io.StringIO()
    count = printf("Hello 42\n", stream=buf)
    assert buf.getvalue() == "Hello 42\n"
    assert count == len("Hello 42\n")


def test_char_conversion():
    assert sprintf("Hello %c 42\n", "A") == "Hello A 42\n"
    assert sprintf("%c", ord("A")) == "A"


def test_string_conversion():
    assert sprintf("Hello 42 %s\n", "Prague") == "Hello 42 Prague\n"


def test_null_string():
    assert sprintf("NULL %s NULL\n", None) == "NULL (null) NULL\n"


def test_signed_decimal_matches_python():
    expected = "Hello %d Prague, I like n %d\n" % (42, -2147483648)
    assert sprintf("Hello %d Prague, I like n %i\n", 42, -2147483648) == expected


def test_signed_wraps_to_32_bits():
    assert sprintf("%d", 2147483648) == "-2147483648"
    assert sprintf("%d", 2**32 + 7) == sprintf("%d", 7)


def test_unsigned_matches_python():
    expected = "Hello %u Prague, I like n %u\n" % (42, 2147483648)
    assert sprintf("Hello %u Prague, I like n %u\n", 42, 2147483648) == expected


def test_unsigned_of_negative_is_wrapped():
    assert sprintf("%u", -1) == sprintf("%u", 2**32 - 1)


def test_hex_lower_and_upper():
    value = 3147483648
    assert sprintf("%x", value) == format(value, "x")
    assert sprintf("%X", value) == sprintf("%x", value).upper()
    assert int(sprintf("%x", 42), 16) == 42


def test_hex_negative_wraps():
    assert sprintf("%x", -1) == sprintf("%x", 2**32 - 1)


def test_pointer():
    address = 0x7FFFFFFFFFFFFFFF
    assert sprintf("pointer %p\n", address) == "pointer 0x" + format(address, "x") + "\n"


def test_nil_pointer():
    assert sprintf("%p", None) == "(nil)"
    assert sprintf("%p", 0) == "(nil)"


def test_percent_literal_consumes_no_argument():
    assert sprintf("%%%d", 5) == "%5"


def test_unknown_conversion_prints_nothing():
    assert sprintf("a%zb%d", 3) == "ab3"


def test_trailing_percent_stops_output():
    assert sprintf("abc%") == "abc"
    buf = io.StringIO()
    assert printf("xy%", stream=buf) == 2
    assert buf.getvalue() == "xy"


def test_missing_argument_raises():
    with pytest.raises(TypeError):
        sprintf("%d %d", 1)


def test_bad_char_argument_raises():
    with pytest.raises(TypeError):
        sprintf("%c", "ab")


def test_printf_count_matches_written_length():
    buf = io.StringIO()
    count = printf("%s-%d-%x-%p", "abc", -12, 255, 4096, stream=buf)
    assert count == len(buf.getvalue())
    assert buf.getvalue() == sprintf("%s-%d-%x-%p", "abc", -12, 255, 4096)


def test_printf_default_stdout(capsys):
    count = printf("You walked %d steps\n", 3)
    out = capsys.readouterr().out
    assert out == "You walked 3 steps\n"
    assert count == len(out)


def test_put_str():
    buf = io.StringIO()
    put_str("Error", stream=buf)
    put_str(None, stream=buf)
    assert buf.getvalue() == "Error"


def test_put_endl():
    buf = io.StringIO()
    put_endl("Failed to read the map!", stream=buf)
    put_endl(None, stream=buf)
    assert buf.getvalue() == "Failed to read the map!\n"


@pytest.mark.parametrize("n", [0, 7, 42, -42, 2147483647, -2147483648])
def test_put_nbr(n):
    buf = io.StringIO()
    put_nbr(n, stream=buf)
    assert buf.getvalue() == str(n)
    assert int(buf.getvalue()) == n


def test_put_nbr_stdout(capsys):
    put_nbr(-2147483648)
    assert capsys.readouterr().out == "-2147483648"