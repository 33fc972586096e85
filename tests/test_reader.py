"""Tests for the character-level input reader"""
import unittest
from io import BytesIO, StringIO, TextIOWrapper

import pytest

from nginx_proxygen.reader import InputReader, use_tolerant_decoding
from nginx_proxygen.validation import NUM_CHAR


def make_reader(text: str) -> InputReader:
    return InputReader(StringIO(text))


class ReadLineTests(unittest.TestCase):
    def test_reads_token_up_to_newline(self):
        result = make_reader("a.example.com\n8080\n").read_line()
        self.assertEqual(result.text, "a.example.com")
        self.assertEqual(result.length, 13)
        self.assertEqual(result.overflow, 0)

    def test_skips_leading_non_alphabetic(self):
        result = make_reader("  \n\t123-_example.org\n").read_line()
        self.assertEqual(result.text, "example.org")

    def test_keeps_characters_after_first_letter(self):
        result = make_reader("web-01.example.com:80\n").read_line()
        self.assertEqual(result.text, "web-01.example.com:80")

    def test_stops_at_carriage_return(self):
        reader = make_reader("host.local\r\n443\n")
        self.assertEqual(reader.read_line().text, "host.local")
        self.assertEqual(reader.read_int(), 443)

    def test_empty_stream_returns_zero_length(self):
        result = make_reader("").read_line()
        self.assertEqual(result.length, 0)
        self.assertEqual(result.text, "")

    def test_only_non_alphabetic_returns_zero_length(self):
        result = make_reader("   \n 123 \n\t...\n").read_line()
        self.assertEqual(result.length, 0)

    def test_end_of_stream_ends_token(self):
        result = make_reader("no-newline.example").read_line()
        self.assertEqual(result.text, "no-newline.example")

    def test_truncates_and_counts_overflow(self):
        token = "a" * 150
        result = make_reader(token + "\n").read_line()
        self.assertEqual(result.length, NUM_CHAR - 1)
        self.assertEqual(result.text, "a" * (NUM_CHAR - 1))
        self.assertEqual(result.overflow, 150 - (NUM_CHAR - 1))

    def test_exact_capacity_has_no_overflow(self):
        token = "b" * (NUM_CHAR - 1)
        result = make_reader(token + "\n").read_line()
        self.assertEqual(result.text, token)
        self.assertEqual(result.overflow, 0)

    def test_custom_capacity(self):
        result = make_reader("abcdefgh\n").read_line(max_len=5)
        self.assertEqual(result.text, "abcd")
        self.assertEqual(result.overflow, 4)

    def test_rejects_capacity_without_room(self):
        with self.assertRaises(ValueError):
            make_reader("abc\n").read_line(max_len=1)

    def test_non_ascii_letters_are_skipped(self):
        result = make_reader("ééexample.com\n").read_line()
        self.assertEqual(result.text, "example.com")


class ReadIntTests(unittest.TestCase):
    def test_parses_number(self):
        self.assertEqual(make_reader("8080\n").read_int(), 8080)

    def test_skips_leading_whitespace_and_newlines(self):
        self.assertEqual(make_reader("\n\n   443\n").read_int(), 443)

    def test_signed_numbers(self):
        self.assertEqual(make_reader("-5\n").read_int(), -5)
        self.assertEqual(make_reader("+7\n").read_int(), 7)

    def test_non_numeric_returns_none(self):
        self.assertIsNone(make_reader("abc\n").read_int())
        self.assertIsNone(make_reader("").read_int())
        self.assertIsNone(make_reader("-\n").read_int())

    def test_stops_at_first_non_digit(self):
        reader = make_reader("80abc\n")
        self.assertEqual(reader.read_int(), 80)
        self.assertEqual(reader.read_line().text, "abc")

    def test_leaves_remaining_line_for_next_read(self):
        reader = make_reader("443\nb.internal\n")
        self.assertEqual(reader.read_int(), 443)
        self.assertEqual(reader.read_line().text, "b.internal")


def test_pushback_holds_single_character():
    reader = make_reader("xyz")
    first = reader.getchar()
    reader.ungetchar(first)
    assert reader.getchar() == "x"
    reader.ungetchar("x")
    with pytest.raises(RuntimeError):
        reader.ungetchar("y")


def test_defaults_to_current_stdin(monkeypatch):
    monkeypatch.setattr("sys.stdin", StringIO("stdin.example\n"))
    assert InputReader().read_line().text == "stdin.example"


def test_undecodable_bytes_are_skipped():
    stream = TextIOWrapper(BytesIO(b"\xff\xfea.example.com\n8080\n"), encoding="utf-8")
    use_tolerant_decoding(stream)
    reader = InputReader(stream)
    assert reader.read_line().text == "a.example.com"
    assert reader.read_int() == 8080


def test_tolerant_decoding_ignores_plain_buffers():
    stream = StringIO("a.example.com\n")
    use_tolerant_decoding(stream)
    assert InputReader(stream).read_line().text == "a.example.com"


if __name__ == "__main__":
    unittest.main()
