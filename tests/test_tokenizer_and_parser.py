import pytest

from schemer.errors import SchemerSyntaxError
from schemer.reader.parser import Parser, TokenStream, parse
from schemer.reader.tokenizer import Token, tokenize
from schemer.types import Combination, Identifier, Number, NumberLiteral, StringLiteral, number


def _kinds(source):
    return [(t.kind, t.value) for t in tokenize(source)]


@pytest.mark.parametrize(
    "source,expected",
    [
        ("a", [("identifier", "a")]),
        ("(a b)", [("lparen", "("), ("identifier", "a"), ("identifier", "b"), ("rparen", ")")]),
        ('"hello world"', [("string", "hello world")]),
        ('"unterminated', [("string", "unterminated")]),
        ('"', [("string", "")]),
        ('ab"c', [("identifier", 'ab"c')]),
        ('"a"b', [("string", "a"), ("identifier", "b")]),
        ("  \n\t x  ", [("identifier", "x")]),
        ("", []),
        ("   ", []),
        ("+ - #t", [("identifier", "+"), ("identifier", "-"), ("identifier", "#t")]),
    ]
)
def test_tokenizer(source, expected):
    assert _kinds(source) == expected


def test_tokenizer_basics():
    tokens = list(tokenize("(quote (testing 1 (2.0) -3.14e159))"))
    assert [t.kind for t in tokens] == [
        "lparen", "identifier", "lparen", "identifier", "number",
        "lparen", "number", "rparen", "number", "rparen", "rparen",
    ]
    assert tokens[4].value.is_exact and tokens[4].value == Number(1)
    assert not tokens[6].value.is_exact
    assert tokens[8].value == Number(-3.14e159)


def test_tokens_display_as_source():
    tokens = list(tokenize('( x "s" 42 1.5 )'))
    assert [str(t) for t in tokens] == ["(", "x", '"s"', "42", "+1.5000e0", ")"]


def test_tokenizer_is_lazy():
    stream = tokenize("a b c")
    assert next(stream) == Token("identifier", "a")


@pytest.mark.parametrize(
    "source,expected",
    [
        ("123", number(123)),
        ("-4.5", number(-4.5)),
        ('"hi"', StringLiteral("hi")),
        ("foo", Identifier("foo")),
        ("()", Combination(())),
        ("(+ 1 2)", Combination((Identifier("+"), number(1), number(2)))),
        ("(a (b 1))", Combination((Identifier("a"), Combination((Identifier("b"), number(1)))))),
    ]
)
def test_parser(source, expected):
    result = list(parse(source))
    assert result == [expected]


def test_parser_yields_each_top_level_form():
    forms = list(parse("(define x 1) x 2"))
    assert len(forms) == 3
    assert forms[1] == Identifier("x")
    assert isinstance(forms[2], NumberLiteral)


def test_unexpected_close_paren():
    with pytest.raises(SchemerSyntaxError, match=r"Unexpected '\)'"):
        list(parse(")"))


def test_unexpected_end_of_input():
    with pytest.raises(SchemerSyntaxError, match="Unexpected end of input"):
        list(parse("(define (f x) (* x x)"))


def test_parser_is_lazy():
    forms = parse("1 )")
    assert next(forms) == number(1)
    with pytest.raises(SchemerSyntaxError):
        next(forms)


def test_token_stream_parse_all():
    stream = TokenStream(tokenize("a (b)"))
    assert list(stream.parse_all()) == [Identifier("a"), Combination((Identifier("b"),))]
    assert list(Parser(iter([]))) == []


def test_non_ascii_digits_are_identifiers():
    assert _kinds("١") == [("identifier", "١")]
    assert list(parse("١")) == [Identifier("١")]
