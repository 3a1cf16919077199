from Emitter.Events.context import current_emitter
from Emitter.Events.listener import OnceListener, Registration


def test_once_listener_exposes_original():
    fn = lambda: None
    wrapper = OnceListener(fn)
    assert wrapper.listener is fn


def test_once_listener_call_sets_context_and_returns_result():
    seen = []

    def fn(a, b):
        seen.append(current_emitter())
        return a + b

    context = object()
    assert OnceListener(fn).call(context, 2, 3) == 5
    assert seen == [context]


def test_once_listener_is_callable_and_shows_wrapped():
    def fn(x):
        return x * 2

    wrapper = OnceListener(fn)
    assert wrapper(4) == 8
    assert str(wrapper) == str(fn)
    assert repr(fn) in repr(wrapper)


def test_registration_tags():
    fn = lambda: None
    plain = Registration.plain(fn)
    once = Registration.wrapped(fn)
    assert plain.once is False and plain.raw is fn
    assert once.once is True and isinstance(once.raw, OnceListener)
    assert plain.matches(fn) and once.matches(fn)
    assert once.matches(once.raw)
    assert not plain.matches(once.raw)
