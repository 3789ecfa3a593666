import io

import mock
import pytest

import sconf
from sconf.errors import ErrorCode, NestingError, SexprError, UnexpectedEofError, last_error, set_error
from sconf.node import Kind
from sconf.sexpr import SexprParser


def test_parse_empty_list():
    s = sconf.parse('()')
    assert s is not None
    assert s.kind == Kind.LIST
    assert s.value is None
    sconf.destroy(s)


def test_parse_comment_nil():
    s = sconf.parse('; just nil with comment\nnil ; :)')
    assert s is not None
    assert s.kind == Kind.NIL


@pytest.mark.parametrize('text,expected', [
    ('true', 1),
    ('yes', 1),
    ('false', 0),
    ('no', 0),
])
def test_parse_bool(text, expected):
    s = sconf.parse(text)
    assert s.kind == Kind.BOOL
    assert s.value == expected


def test_parse_symbol():
    s = sconf.parse('marx')
    assert s.kind == Kind.SYMBOL
    assert sconf.get_symbol_value(s) == 'marx'


def test_keywords_are_whole_tokens():
    assert sconf.is_symbol(sconf.parse('nil?'))
    assert sconf.is_symbol(sconf.parse('yesterday'))
    assert sconf.is_symbol(sconf.parse('True'))


def test_parse_list():
    s = sconf.parse('( ; a list with multiple elem\n'
                    'true false ; some bool\n'
                    'random_sym ; a random symbol\n'
                    'no)')
    assert s.kind == Kind.LIST
    assert s.value is not None
    assert sconf.size(s) == 4
    assert sconf.is_true(sconf.at(s, 0))
    assert sconf.get_symbol_value(sconf.at(s, 2)) == 'random_sym'
    assert sconf.is_false(sconf.last(s))


def test_parse_list_with_sublist():
    s = sconf.parse('(sym () () ())')
    assert s.kind == Kind.LIST
    assert sconf.size(s) == 4
    for i in range(1, 4):
        assert sconf.is_empty(sconf.at(s, i))


def test_parse_nested():
    s = sconf.parse('(a (b (c d)) e)')
    assert sconf.size(s) == 3
    inner = sconf.at(sconf.at(s, 1), 1)
    assert sconf.get_symbol_value(sconf.first(inner)) == 'c'
    assert sconf.get_symbol_value(sconf.last(inner)) == 'd'
    assert sconf.get_symbol_value(sconf.last(s)) == 'e'


def test_parse_empty_list_unexpected_eof():
    set_error(ErrorCode.OK)
    assert sconf.parse('( ; eof') is None
    assert last_error() == ErrorCode.UNEXPECTED_EOF


def test_parse_list_unexpected_eof():
    assert sconf.parse('(true yes') is None
    assert sconf.parse('(a (b c)') is None


def test_parse_int():
    s = sconf.parse('-123456')
    assert s.kind == Kind.INT
    assert s.value == -123456


def test_parse_double():
    s = sconf.parse('3.14')
    assert s.kind == Kind.DOUBLE
    assert s.value == pytest.approx(3.14, abs=0.00004)


def test_parse_int_base16():
    s = sconf.parse('0xFF')
    assert s.kind == Kind.INT
    assert s.value == 255
    assert sconf.parse('-0x10').value == -16


@pytest.mark.parametrize('text,kind,value', [
    ('42', Kind.INT, 42),
    ('1e3', Kind.INT, 1000),
    ('2.5e2', Kind.DOUBLE, 250.0),
    ('-.5', Kind.DOUBLE, -0.5),
    ('12abc', Kind.INT, 12),
    ('1.2.3', Kind.DOUBLE, 1.2),
    ('-', Kind.INT, 0),
    ('-abc', Kind.INT, 0),
    ('0x', Kind.INT, 0),
    ('1e999', Kind.INT, 0),
    ('7-3', Kind.INT, 7),
])
def test_permissive_numbers(text, kind, value):
    s = sconf.parse(text)
    assert s.kind == kind
    assert s.value == value


def test_number_stops_at_delimiters():
    s = sconf.parse('(1 2.0(3)4)')
    assert sconf.size(s) == 4
    assert sconf.is_int(sconf.at(s, 0))
    assert sconf.is_double(sconf.at(s, 1))
    assert sconf.is_list(sconf.at(s, 2))
    assert sconf.at(s, 3).value == 4


def test_parse_string():
    s = sconf.parse('"Hello, world\\n"')
    assert s.kind == Kind.STRING
    assert sconf.get_string_value(s) == 'Hello, world\n'


def test_string_escapes():
    s = sconf.parse(r'"a\"b\rc\td\\"')
    assert sconf.get_string_value(s) == 'a"b\rc\\td\\\\'


def test_string_keeps_parens_and_semicolons():
    s = sconf.parse('"(not a list) ; nor a comment"')
    assert sconf.get_string_value(s) == '(not a list) ; nor a comment'


def test_parse_list_of_string():
    s = sconf.parse('("lol" "lulz" "all your base belong to us")')
    assert s.kind == Kind.LIST
    assert sconf.size(s) == 3
    assert sconf.get_string_value(sconf.last(s)) == 'all your base belong to us'


def test_parse_string_unexpected_eof():
    set_error(ErrorCode.OK)
    assert sconf.parse('"trans right are human right') is None
    assert last_error() == ErrorCode.UNEXPECTED_EOF
    assert sconf.parse('"dangling\\') is None


def test_parse_char():
    s = sconf.parse('\\o')
    assert s.kind == Kind.CHAR
    assert s.value == ord('o')
    assert sconf.parse('(\\( \\))').value.value == ord('(')
    assert sconf.parse('\\') is None


def test_unexpected_close_paren():
    set_error(ErrorCode.OK)
    assert sconf.parse(')') is None
    assert last_error() == ErrorCode.OK
    with pytest.raises(SexprError):
        SexprParser(')').parse()


def test_empty_input():
    assert sconf.parse('') is None
    assert sconf.parse(None) is None
    assert sconf.parse('   ; only a comment') is None
    with pytest.raises(UnexpectedEofError):
        SexprParser('  ').parse()


def test_only_first_value_is_read():
    s = sconf.parse('(a) (b) garbage )))')
    assert sconf.size(s) == 1


def test_symbol_token_cap():
    s = sconf.parse('x' * 200)
    assert len(sconf.get_symbol_value(s)) == 127
    lst = sconf.parse('(' + 'x' * 200 + ')')
    assert sconf.size(lst) == 2
    assert len(sconf.get_symbol_value(sconf.last(lst))) == 73


def test_number_token_cap():
    lst = sconf.parse('(' + '1' * 130 + ')')
    assert sconf.size(lst) == 2
    assert sconf.last(lst).value == 111


def test_nul_ends_input():
    assert sconf.is_symbol(sconf.parse('abc\0def'))
    assert sconf.get_symbol_value(sconf.parse('abc\0def')) == 'abc'
    assert sconf.parse('(a\0)') is None


def test_parse_with_length():
    s = sconf.parse_with_length('(a b) trailing', 5)
    assert sconf.size(s) == 2
    assert sconf.parse_with_length('(a b)', 3) is None
    assert sconf.get_symbol_value(sconf.parse_with_length(b'marxism', 4)) == 'marx'
    assert sconf.parse_with_length('abc', 0) is None
    assert sconf.parse_with_length(None, 3) is None


def test_parse_bytes():
    s = sconf.parse(b'("caf\xc3\xa9" 1)')
    assert sconf.get_string_value(sconf.first(s)) == 'café'


def test_load_text_and_binary():
    s = sconf.load(io.StringIO('(window (width 80))'))
    assert sconf.size(s) == 2
    s = sconf.load(io.BytesIO(b'(1 2 3)'))
    assert sconf.size(s) == 3
    assert sconf.load(io.StringIO('')) is None


def test_load_file(tmp_path):
    path = tmp_path / 'conf.scm'
    path.write_text('; settings\n(name "sconf")\n')
    with open(path, 'rb') as f:
        s = sconf.load(f)
    assert sconf.get_string_value(sconf.at(s, 1)) == 'sconf'


def test_nesting_limit():
    deep = '(' * 20 + ')' * 20
    assert sconf.parse(deep, max_depth=20) is not None
    assert sconf.parse(deep, max_depth=19) is None
    with pytest.raises(NestingError):
        SexprParser(deep, max_depth=5).parse()


def test_default_nesting_limit_guards_the_stack():
    deep = '(' * 100000 + ')' * 100000
    assert sconf.parse(deep) is None


def test_failed_parse_destroys_partial_tree():
    made = []
    real = sconf.sexpr.new_list

    def tracking_new_list():
        lst = real()
        made.append(lst)
        return lst

    with mock.patch.object(sconf.sexpr, 'new_list', tracking_new_list):
        assert sconf.parse('((a b) (c "unterminated') is None
    assert len(made) == 3
    for lst in made:
        assert lst.value is None
