import pytest
from .fixtures import generator
from xmlnames.errors import UnboundCounter
from xmlnames.prefixes import generatePrefix, PrefixGenerator, prefixScope


@pytest.mark.parametrize("n,expected", [
    (0, "a"),
    (1, "b"),
    (25, "z"),
    (26, "ab"),
    (27, "bb"),
    (51, "zb"),
    (52, "ac"),
    (26 * 26, "aab"),
])
def test_generate(n, expected):
    assert generatePrefix(n) == expected


def test_generate_injective():
    prefixes = [generatePrefix(n) for n in range(26 ** 3)]
    assert len(set(prefixes)) == len(prefixes)


def test_generate_negative():
    with pytest.raises(ValueError):
        generatePrefix(-1)


def test_next_counts_up(generator):
    assert [generator.next() for _ in range(3)] == ["a", "b", "c"]
    assert next(generator) == "d"


def test_start():
    gen = PrefixGenerator(26)
    assert gen.next() == "ab"
    with pytest.raises(ValueError):
        PrefixGenerator(-1)


def test_scope_unbinds_counter():
    with prefixScope() as gen:
        assert gen.isBound()
        assert gen.next() == "a"
    assert not gen.isBound()
    with pytest.raises(UnboundCounter):
        gen.next()


def test_scope_unbinds_on_error():
    with pytest.raises(KeyError):
        with prefixScope() as gen:
            raise KeyError("boom")
    with pytest.raises(UnboundCounter):
        gen.next()


def test_scopes_are_independent():
    with prefixScope() as outer:
        outer.next()
        with prefixScope() as inner:
            assert inner.next() == "a"
        assert outer.next() == "b"
