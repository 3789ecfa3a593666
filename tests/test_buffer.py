# Growable token buffer

from sconf.buffer import BASE_CAPACITY, TokenBuffer


def test_starts_empty():
    b = TokenBuffer()
    assert len(b) == 0
    assert b.cap == 0
    assert b.value() == ''


def test_first_growth_is_base_capacity():
    b = TokenBuffer()
    b.append('a')
    assert b.cap == BASE_CAPACITY
    assert b.value() == 'a'


def test_doubles_when_full():
    b = TokenBuffer()
    for c in 'abcdefgh':
        b.append(c)
    assert b.cap == 8
    b.append('i')
    assert b.cap == 16
    for c in 'jklmnopq':
        b.append(c)
    assert b.cap == 32
    assert b.value() == 'abcdefghijklmnopq'


def test_reset_keeps_capacity():
    b = TokenBuffer()
    for c in 'hello world':
        b.append(c)
    b.reset()
    assert len(b) == 0
    assert b.cap == 16
    b.append('x')
    assert b.value() == 'x'


def test_clear_drops_storage():
    b = TokenBuffer()
    b.append('x')
    b.clear()
    assert b.cap == 0
    assert b.value() == ''
