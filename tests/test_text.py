"""Tests for the text tokenizer and string helpers."""

import unittest

from pagescan.parse.source import ByteSource
from pagescan.parse.text import (
    int_from_string,
    iter_texts,
    next_text,
    nth_text_from_string,
    text_from_string,
)


def text(html: bytes, utf8: bool = True) -> bytes | None:
    return next_text(ByteSource(html), utf8=utf8)


class TestNextText(unittest.TestCase):
    def test_empty_input(self) -> None:
        self.assertIsNone(text(b""))

    def test_only_tags(self) -> None:
        self.assertIsNone(text(b"<a><b></b>"))

    def test_whitespace_collapsed_and_trimmed(self) -> None:
        self.assertEqual(text(b"  a \t\n\r\v b  "), b"a b")

    def test_runs_between_tags(self) -> None:
        source = ByteSource(b"<p>Hello <b>world</b></p>")
        self.assertEqual(list(iter_texts(source, utf8=True)), [b"Hello", b"world"])

    def test_stops_before_tag(self) -> None:
        source = ByteSource(b"abc<b>")
        self.assertEqual(next_text(source, utf8=True), b"abc")
        self.assertEqual(source.data[source.pos:], b"<b>")

    def test_nbsp_bytes_are_spaces(self) -> None:
        self.assertEqual(text(b"a\xa0\xa0b"), b"a b")
        self.assertEqual(text(b"a\xc2\xa0b", utf8=False), b"a b")

    def test_utf8_lead_byte_depends_on_mode(self) -> None:
        self.assertEqual(text(b"\xc3\xa4"), b"\xc3\xa4")
        self.assertEqual(text(b"x\xc3y", utf8=False), b"x y")


class TestEntityDecoding(unittest.TestCase):
    def test_symbolic(self) -> None:
        self.assertEqual(text(b"&amp;"), b"&")
        self.assertEqual(text(b"&lt;"), b"<")
        self.assertEqual(text(b"a &gt; b"), b"a > b")

    def test_numeric(self) -> None:
        self.assertEqual(text(b"&#65;"), b"A")
        self.assertEqual(text(b"&#x41;"), b"A")
        self.assertEqual(text(b"&#65;", utf8=False), b"A")

    def test_numeric_utf8_multibyte(self) -> None:
        self.assertEqual(text(b"&#228;"), b"\xc3\xa4")
        self.assertEqual(text(b"&#228;", utf8=False), b"\xe4")

    def test_family_entity_output_modes(self) -> None:
        self.assertEqual(text(b"&auml;"), b"\xc3\xa4")
        self.assertEqual(text(b"&auml;", utf8=False), b"\xe4")
        self.assertEqual(text(b"Caf&eacute; cr&egrave;me"), "Café crème".encode())

    def test_trade(self) -> None:
        self.assertEqual(text(b"Brand&trade;"), b"Brand\xe2\x84\xa2")

    def test_outside_latin1_in_single_byte_mode(self) -> None:
        self.assertEqual(text(b"A&trade;", utf8=False), b"A?")
        self.assertEqual(text(b"&#8364;", utf8=False), b"?")
        self.assertEqual(text(b"&#x1F600;", utf8=False), b"?")
        self.assertEqual(text(b"&#8364;"), b"\xe2\x82\xac")

    def test_quot_decodes_to_ampersand(self) -> None:
        self.assertEqual(text(b"&quot;"), b"&")

    def test_nbsp_is_collapsible_space(self) -> None:
        for utf8 in (True, False):
            self.assertEqual(text(b"a&nbsp;b", utf8=utf8), b"a b")
            self.assertEqual(text(b"a &nbsp; b", utf8=utf8), b"a b")
            self.assertEqual(text(b"&nbsp;x&nbsp;", utf8=utf8), b"x")

    def test_decoded_space_before_tag_keeps_scanning(self) -> None:
        source = ByteSource(b"&#32;<b>x</b><i>y</i>")
        self.assertEqual(list(iter_texts(source, utf8=True)), [b"x", b"y"])

    def test_decoded_whitespace_collapses(self) -> None:
        self.assertEqual(text(b"x &#32; y"), b"x y")
        self.assertEqual(text(b"a&#x20;&#32;b"), b"a b")
        self.assertEqual(text(b"a&#9;b", utf8=False), b"a b")
        self.assertEqual(text(b"x&#32;"), b"x")

    def test_only_nbsp_is_no_text(self) -> None:
        self.assertIsNone(text(b"&nbsp;"))

    def test_unknown_entity_left_literal(self) -> None:
        self.assertEqual(text(b"&copy; 2024"), b"&copy; 2024")
        self.assertEqual(text(b"&buml;"), b"&buml;")

    def test_semicolon_without_entity(self) -> None:
        self.assertEqual(text(b"a;b"), b"a;b")
        self.assertEqual(text(b"AT&T rules; ok"), b"AT&T rules; ok")

    def test_last_ampersand_wins(self) -> None:
        self.assertEqual(text(b"&&amp;"), b"&&")

    def test_zero_code_point(self) -> None:
        self.assertEqual(text(b"x&#0;"), b"x?")

    def test_numeric_without_digits(self) -> None:
        self.assertEqual(text(b"&#;"), b"&#;")
        self.assertEqual(text(b"&#xg;"), b"&#xg;")


class TestStringHelpers(unittest.TestCase):
    def test_text_from_string(self) -> None:
        self.assertEqual(text_from_string("<b> 42 </b>", utf8=True), b"42")
        self.assertIsNone(text_from_string("<br>", utf8=True))

    def test_nth_text_from_string(self) -> None:
        html = "<td>a</td><td>b</td><td>c</td>"
        self.assertEqual(nth_text_from_string(html, 1, utf8=True), b"a")
        self.assertEqual(nth_text_from_string(html, 3, utf8=True), b"c")
        self.assertIsNone(nth_text_from_string(html, 4, utf8=True))

    def test_int_from_string(self) -> None:
        self.assertEqual(int_from_string("<td> -17 items</td>"), -17)
        self.assertEqual(int_from_string(b"<b>+3</b>"), 3)
        self.assertEqual(int_from_string("<td>n/a</td>"), 0)
        self.assertEqual(int_from_string(""), 0)


if __name__ == "__main__":
    unittest.main()
