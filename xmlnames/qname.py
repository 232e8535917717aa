"""Qualified name support; see e.g. https://en.wikipedia.org/wiki/QName"""

from functools import total_ordering

from .errors import InvalidQNameString


def isBlank(value):
    "true for None, the empty string and whitespace-only strings"
    return value is None or not value.strip()


@total_ordering
class QName:
    """Qualified name implementation.

    Two names are equal when namespace and local name match; the namespace
    prefix is a display hint only and never takes part in comparison or
    hashing. A missing or blank namespace is stored as ``""``.
    """

    __slots__ = ("_namespace", "_localname", "_namespace_prefix")

    def __init__(self, namespace, localname, namespace_prefix=None):
        if not localname:
            raise ValueError("QName local name must not be empty")
        object.__setattr__(self, "_namespace", "" if isBlank(namespace) else namespace)
        object.__setattr__(self, "_localname", localname)
        object.__setattr__(self, "_namespace_prefix", namespace_prefix or "")

    def __setattr__(self, name, value):
        raise AttributeError("QName is immutable")

    def __delattr__(self, name):
        raise AttributeError("QName is immutable")

    def getNamespace(self):
        return self._namespace

    def getLocalname(self):
        return self._localname

    def getNamespacePrefix(self):
        return self._namespace_prefix

    def getFullname(self):
        "Clark notation, ``{uri}local`` or ``local``"
        if self._namespace:
            return "{" + self._namespace + "}" + self._localname
        return self._localname

    uri = property(getNamespace)
    local = property(getLocalname)
    prefix = property(getNamespacePrefix)

    def _key(self):
        return (self._namespace, self._localname)

    def __eq__(self, other):
        if not isinstance(other, QName):
            return NotImplemented
        return self._key() == other._key()

    def __lt__(self, other):
        if not isinstance(other, QName):
            return NotImplemented
        return self._key() < other._key()

    def __hash__(self):
        return hash(self._key())

    def __reduce__(self):
        return (QName, (self._namespace, self._localname, self._namespace_prefix))

    def __str__(self):
        return self.getFullname()

    def __repr__(self):
        return "QName(%r, %r, %r)" % (self._namespace, self._localname, self._namespace_prefix)


def makeQName(*args):
    """Build a QName from ``(local)``, ``(uri, local)`` or ``(uri, local, prefix)``.

    A missing namespace or prefix becomes ``""``.
    """
    if len(args) == 1:
        return QName("", args[0], "")
    if len(args) == 2:
        return QName(args[0], args[1], "")
    if len(args) == 3:
        return QName(*args)
    raise TypeError("makeQName() takes 1 to 3 arguments (%d given)" % len(args))


def parseClark(text):
    "split a ``{uri}local`` or bare ``local`` string into ``(uri, local)``"
    if text.startswith("{"):
        end = text.find("}")
        if end < 0 or end == len(text) - 1:
            raise InvalidQNameString(text)
        return text[1:end], text[end + 1:]
    if not text or "}" in text:
        raise InvalidQNameString(text)
    return "", text
