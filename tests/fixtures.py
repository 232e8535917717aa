from xml.dom import minidom
import pytest
from xmlnames.prefixes import prefixScope


TRICKY_URIS = [
    "",
    "http://www.w3.org/2000/xmlns/",
    "urn:example:a.b.c",
    "a..b//c::d",
    "%",
    "%25",
    "100%",
    "~user/._-",
    "spaces and\ttabs",
    "http://example.org/café/日本",
    "emoji-\U0001F600",
    "lone-\ud800-surrogate",
    "xmlns.",
    "".join(map(chr, range(128))),
    "?#[]@!$&'()*+,;=",
]


@pytest.fixture(params=TRICKY_URIS)
def uri(request):
    "URIs with characters the identifier alphabet has to escape"
    return request.param


@pytest.fixture
def generator():
    "provide a prefix generator scoped to the test"
    with prefixScope() as gen:
        yield gen


@pytest.fixture
def nested_doc():
    "provide a parsed document with nested namespace declarations"
    return minidom.parseString(
        '<root xmlns="urn:default" xmlns:p="urn:p" p:id="1">'
        '<child xmlns:p="urn:other" xmlns:q="urn:q" q:kind="x">'
        '<leaf plain="y"/>'
        '</child>'
        '</root>')
