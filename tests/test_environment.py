import pytest

from pylox.environment import Environment
from pylox.errors import LoxRuntimeError
from pylox.tokens import Token, TokenType


def name(lexeme):
    return Token(TokenType.IDENTIFIER, lexeme, None, 1)


def test_define_and_get():
    env = Environment()
    env.define('a', 1.0)
    assert env.get(name('a')) == 1.0
    assert 'a' in env


def test_define_overwrites_in_same_scope():
    env = Environment()
    env.define('a', 1.0)
    env.define('a', 'two')
    assert env.get(name('a')) == 'two'


def test_nil_binding_is_not_an_error():
    env = Environment()
    env.define('a', None)
    assert env.get(name('a')) is None


def test_get_walks_enclosing_chain():
    outer = Environment()
    outer.define('a', 1.0)
    inner = Environment(Environment(outer))
    assert inner.get(name('a')) == 1.0


def test_shadowing_does_not_touch_outer():
    outer = Environment()
    outer.define('a', 1.0)
    inner = Environment(outer)
    inner.define('a', 2.0)
    assert inner.get(name('a')) == 2.0
    assert outer.get(name('a')) == 1.0


def test_assign_rebinds_nearest_existing_binding():
    outer = Environment()
    outer.define('a', 1.0)
    inner = Environment(outer)
    inner.assign(name('a'), 5.0)
    assert outer.get(name('a')) == 5.0
    assert 'a' not in inner


def test_undefined_get_raises():
    env = Environment(Environment())
    with pytest.raises(LoxRuntimeError) as excinfo:
        env.get(name('missing'))
    assert excinfo.value.message == "Undefined variable 'missing'."
    assert excinfo.value.token.lexeme == 'missing'


def test_assign_never_declares():
    env = Environment()
    with pytest.raises(LoxRuntimeError):
        env.assign(name('missing'), 1.0)
    assert 'missing' not in env
