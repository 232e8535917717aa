"""Namespace-qualified application identifiers.

An :class:`Identifier` is a single name token of the form ``namespace/name``
or just ``name``. A qualified name is carried by an identifier whose
namespace segment is ``xmlns.`` followed by the encoded namespace URI, e.g.
``xmlns.urn%3Aexample/item`` for ``{urn:example}item``.
"""

from .namespaces import XMLNS_SEGMENT_PREFIX
from .qname import isBlank
from .uricodec import encodeUri

SEGMENT_SEPARATOR = "/"


class Identifier(str):
    "identifier token with an optional namespace segment"

    def __new__(cls, namespace, name):
        if not name:
            raise ValueError("identifier name must not be empty")
        if namespace:
            text = namespace + SEGMENT_SEPARATOR + name
        else:
            text = name
            namespace = None
        self = super().__new__(cls, text)
        self._namespace = namespace
        self._name = name
        return self

    @classmethod
    def parse(cls, text):
        "split identifier text on the first separator that has text on both sides"
        idx = text.find(SEGMENT_SEPARATOR)
        if 0 < idx < len(text) - 1:
            return cls(text[:idx], text[idx + 1:])
        return cls(None, text)

    def getNamespace(self):
        return self._namespace

    def getName(self):
        return self._name

    def __reduce__(self):
        return (Identifier, (self._namespace, self._name))

    def __repr__(self):
        return "Identifier(%r, %r)" % (self._namespace, self._name)


def canonicalIdentifier(uri, local):
    "single-token identifier for the name ``{uri}local``"
    if isBlank(uri):
        if SEGMENT_SEPARATOR in local:
            raise ValueError("local name %r without namespace cannot contain %r"
                             % (local, SEGMENT_SEPARATOR))
        return Identifier(None, local)
    return Identifier(XMLNS_SEGMENT_PREFIX + encodeUri(uri), local)
