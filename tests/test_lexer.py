from unittest import TestCase, main

from scribeconf import Lexer, Token, lex
from scribeconf.enums import TokenType as T


def types(text):
    return [t.type for t in lex(text)]


class TestLexer(TestCase):
    def test_empty(self):
        res = list(lex(""))
        self.assertEqual(res, [Token(T.EOF, "")])

    def test_field(self):
        res = list(lex("port=1463"))
        self.assertEqual([t.type for t in res], [T.KEY, T.EQUAL, T.VALUE, T.EOF])
        self.assertEqual(res[0], "port")
        self.assertEqual(res[1], "=")
        self.assertEqual(res[2], "1463")

    def test_value_keeps_raw_text(self):
        res = list(lex("category = ignore* and more  \n"))
        self.assertEqual(res[0], "category")
        self.assertEqual(res[1].type, T.EQUAL)
        # the value runs up to and including the line end; the parser trims it
        self.assertEqual(res[2].strip(), "ignore* and more")
        self.assertEqual(res[2].type, T.VALUE)

    def test_value_may_contain_equals(self):
        res = list(lex("url=http://x/?a=b\n"))
        self.assertEqual(res[2].strip(), "http://x/?a=b")

    def test_blocks(self):
        res = list(lex("<store>\n</store>\n"))
        self.assertEqual(res, [Token(T.BLOCK_OPEN, "<store>"), Token(T.BLOCK_CLOSE, "</store>"), Token(T.EOF, "")])

    def test_comments_and_whitespace_are_skipped(self):
        text = "# a comment\n\t  \r\n## another = one\n"
        self.assertEqual(types(text), [T.EOF])

    def test_comment_at_end_of_input(self):
        self.assertEqual(types("a=1\n# trailing"), [T.KEY, T.EQUAL, T.VALUE, T.EOF])

    def test_unicode_identifiers(self):
        res = list(lex(u"<магазин>\nключ_1=значение\n</магазин>"))
        self.assertEqual(res[0], u"<магазин>")
        self.assertEqual(res[1], u"ключ_1")
        self.assertEqual(res[3].strip(), u"значение")

    def test_token_equality_checks_type(self):
        assert Token(T.KEY, "a") == Token(T.KEY, "a")
        assert Token(T.KEY, "a") != Token(T.VALUE, "a")
        assert Token(T.KEY, "a") == "a"
        assert not (Token(T.KEY, "a") != Token(T.KEY, "a"))
        self.assertTrue(Token(T.KEY, "a") != Token(T.VALUE, "a"))
        self.assertNotEqual([Token(T.KEY, "a")], [Token(T.VALUE, "a")])

    def test_positions(self):
        res = list(lex("a=1\n  <b>\n</b>"))
        key, eq, val, open_, close, eof = res
        self.assertEqual((key.line, key.column, key.pos_in_stream), (1, 1, 0))
        self.assertEqual((eq.line, eq.column), (1, 2))
        self.assertEqual((open_.line, open_.column, open_.pos_in_stream), (2, 3, 6))
        self.assertEqual((close.line, close.column), (3, 1))
        self.assertEqual(eof.line, 3)

    def test_stops_after_error(self):
        res = list(lex("a=1\n$ b=2\n"))
        self.assertEqual([t.type for t in res], [T.KEY, T.EQUAL, T.VALUE, T.ERROR])

    def test_is_lazy(self):
        lexer = Lexer("a=1\n@")
        tokens = lexer.lex()
        self.assertEqual(next(tokens).type, T.KEY)
        self.assertEqual(lexer.pos, 1)
        self.assertEqual(next(tokens).type, T.EQUAL)
        self.assertEqual(lexer.pos, 2)


class TestLexerErrors(TestCase):
    def error_of(self, text):
        res = list(lex(text))
        self.assertEqual(res[-1].type, T.ERROR)
        return res[-1]

    def test_unrecognized_character(self):
        err = self.error_of("port=1\n$x=1\n")
        self.assertEqual(err, "unrecognized character in action: U+0024 '$'")
        self.assertEqual((err.line, err.column, err.pos_in_stream), (2, 1, 7))

    def test_key_must_start_with_letter(self):
        err = self.error_of("1a=2")
        self.assertIn("U+0031 '1'", err)

    def test_unprintable_character(self):
        err = self.error_of("\x00")
        self.assertEqual(err, "unrecognized character in action: U+0000")

    def test_unclosed_meta_tag(self):
        err = self.error_of("<store")
        self.assertEqual(err, "unclosed meta tag at end of input")

        err = self.error_of("<store name>")
        self.assertEqual(err, "unclosed meta tag U+0020 ' '")
        self.assertEqual(err.column, 7)

        err = self.error_of("<a/>")
        self.assertIn("unclosed meta tag", err)

    def test_empty_meta_tag(self):
        self.assertEqual(self.error_of("<>"), "empty meta tag")
        self.assertEqual(self.error_of("</>"), "empty meta tag")

    def test_double_equals(self):
        self.assertEqual(self.error_of("key == value"), "error equal symbol occurrence: 2")
        self.assertEqual(self.error_of("key= =value"), "error equal symbol occurrence: 2")

    def test_missing_equals(self):
        self.assertEqual(self.error_of("key value"), "error equal symbol occurrence: 0")
        self.assertEqual(self.error_of("key\nvalue=1"), "error equal symbol occurrence: 0")
        self.assertEqual(self.error_of("key"), "error equal symbol occurrence: 0")


if __name__ == '__main__':
    main()
