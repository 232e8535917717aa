"""Name sources: anything a qualified name can be read from.

:func:`qnameUri` and :func:`qnameLocal` dispatch on the type of their
argument. Out of the box they accept :class:`~xmlnames.qname.QName`,
Clark notation strings and :class:`~xmlnames.identifier.Identifier`.
Other name representations register their own readers::

    @qnameUri.register(MyName)
    def _(name):
        return name.ns

    @qnameLocal.register(MyName)
    def _(name):
        return name.tag

A display prefix hint is read through :func:`qnamePrefix`, which defaults
to ``""`` for sources that do not register one.
"""

from functools import singledispatch

from .errors import InvalidNamespaceSegment
from .identifier import Identifier, canonicalIdentifier
from .namespaces import NS_XMLNS, XMLNS_MARKER, XMLNS_SEGMENT_PREFIX
from .qname import QName, isBlank, parseClark
from .uricodec import decodeUri


@singledispatch
def qnameUri(name):
    "namespace URI of a name source, ``\"\"`` when it has none"
    raise TypeError("%s is not a name source" % type(name).__name__)


@singledispatch
def qnameLocal(name):
    "local name of a name source"
    raise TypeError("%s is not a name source" % type(name).__name__)


@singledispatch
def qnamePrefix(name):
    "display prefix hint of a name source, ``\"\"`` when it carries none"
    return ""


@qnameUri.register(QName)
def _qnameUri(name):
    return name.getNamespace()


@qnameLocal.register(QName)
def _qnameLocal(name):
    return name.getLocalname()


@qnamePrefix.register(QName)
def _qnamePrefix(name):
    return name.getNamespacePrefix()


@qnameUri.register(str)
def _strUri(name):
    return parseClark(name)[0]


@qnameLocal.register(str)
def _strLocal(name):
    return parseClark(name)[1]


@qnameUri.register(Identifier)
def _identifierUri(name):
    segment = name.getNamespace()
    if not segment:
        return ""
    if segment.startswith(XMLNS_SEGMENT_PREFIX):
        return decodeUri(segment[len(XMLNS_SEGMENT_PREFIX):])
    if segment == XMLNS_MARKER:
        return NS_XMLNS
    raise InvalidNamespaceSegment(segment)


@qnameLocal.register(Identifier)
def _identifierLocal(name):
    return name.getName()


def isNamespaced(name):
    "true when the name has a non-blank namespace URI"
    return not isBlank(qnameUri(name))


def toQName(name):
    "normalized QName of any name source, display prefix dropped"
    return QName(qnameUri(name) or "", qnameLocal(name), "")


def qnameIdentifier(name):
    "canonical identifier of any name source"
    return canonicalIdentifier(qnameUri(name), qnameLocal(name))
