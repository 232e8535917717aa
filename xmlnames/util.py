"""Namespace declaration handling used when reading and writing documents."""

import logging
from xml.dom import minidom

from .namespaces import NS_XML, NS_XMLNS, XML_PREFIX, XMLNS_MARKER
from .qname import QName, isBlank
from .source import qnameLocal, qnamePrefix, qnameUri

logger = logging.getLogger(__name__)


def isXmlnsAttr(name):
    "true for attributes declaring a prefix or the default namespace"
    uri = qnameUri(name)
    return uri == NS_XMLNS or (isBlank(uri) and qnameLocal(name) == XMLNS_MARKER)


def separateXmlns(attrs):
    "split an attribute map into ``(ordinary, xmlns)`` attribute maps"
    ordinary = {}
    xmlns = {}
    for name, value in attrs.items():
        if isXmlnsAttr(name):
            xmlns[name] = value
        else:
            ordinary[name] = value
    return ordinary, xmlns


def mergeNamespaces(base, overlay):
    """Combine two prefix -> URI maps.

    Overlay entries win; an overlay entry with a blank URI unbinds the prefix.
    """
    merged = dict(base)
    for prefix, uri in overlay.items():
        if isBlank(uri):
            merged.pop(prefix, None)
        else:
            merged[prefix] = uri
    logger.debug("merged namespace bindings %s over %s", overlay, base)
    return merged


def xmlnsBindings(xmlnsAttrs):
    "prefix -> URI declarations carried by xmlns attributes"
    bindings = {}
    for name, uri in xmlnsAttrs.items():
        local = qnameLocal(name)
        bindings["" if local == XMLNS_MARKER else local] = uri or ""
    return bindings


def _boundPrefix(uri, bindings, preferred, attribute):
    if preferred and bindings.get(preferred) == uri:
        return preferred
    for prefix, bound in bindings.items():
        if bound == uri and not (attribute and prefix == ""):
            return prefix
    return None


def assignPrefix(name, bindings, generator, attribute=False):
    """Choose the prefix to write a name with.

    Returns ``(prefix, declarations)`` where ``declarations`` is the
    prefix -> URI overlay that has to be declared for the prefix to be in
    scope, suitable for :func:`mergeNamespaces`.
    """
    uri = qnameUri(name)
    if isBlank(uri):
        if not attribute and not isBlank(bindings.get("")):
            return "", {"": ""}
        return "", {}
    if uri == NS_XML:
        return XML_PREFIX, {}

    preferred = qnamePrefix(name) or ""
    prefix = _boundPrefix(uri, bindings, preferred, attribute)
    if prefix is not None:
        return prefix, {}

    if preferred and preferred not in bindings and \
            not preferred.lower().startswith(XML_PREFIX):
        prefix = preferred
    else:
        prefix = generator.next()
        while prefix in bindings or prefix.startswith(XML_PREFIX):
            prefix = generator.next()
    return prefix, {prefix: uri}


def qualifyName(name, bindings, generator, attribute=False):
    "``(prefix:local, declarations)`` for a name, see :func:`assignPrefix`"
    prefix, declarations = assignPrefix(name, bindings, generator, attribute)
    local = qnameLocal(name)
    return (prefix + ":" + local if prefix else local), declarations


def resolvePrefixedName(value, bindings):
    "QName for ``prefix:local`` or ``local`` text under the given bindings"
    vals = value.split(":", 1)
    if len(vals) == 1:
        return QName(bindings.get("", ""), vals[0])
    prefix, localName = vals
    if prefix == XML_PREFIX:
        return QName(NS_XML, localName, prefix)
    ns = bindings.get(prefix)
    if ns is None:
        logger.warning("prefix %s of %s is not bound to a namespace", prefix, value)
        ns = ""
    return QName(ns, localName, prefix)


def elementAttrs(el):
    "attributes of a minidom element as a QName -> value map"
    attrs = {}
    for attr in el.attributes.values():
        local = attr.localName or attr.name
        attrs[QName(attr.namespaceURI, local, attr.prefix)] = attr.value or ""
    return attrs


def collectBindings(node):
    "namespace bindings in scope at a minidom node, ancestors applied first"
    chain = []
    while node is not None:
        if node.nodeType == minidom.Node.ELEMENT_NODE:
            chain.append(node)
        node = node.parentNode
    bindings = {}
    for el in reversed(chain):
        _, xmlns = separateXmlns(elementAttrs(el))
        bindings = mergeNamespaces(bindings, xmlnsBindings(xmlns))
    return bindings


def addNSAttrToEl(el, ns, prefix):
    "declare ``prefix`` (``\"\"`` for the default namespace) on a minidom element"
    qualified = XMLNS_MARKER + ":" + prefix if prefix else XMLNS_MARKER
    el.setAttributeNS(NS_XMLNS, qualified, ns)
