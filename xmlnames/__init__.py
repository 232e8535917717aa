"""Qualified XML names: canonical comparison, identifier encoding and
namespace prefix handling for document serialization."""

from .errors import (XMLNamesError, MalformedEncoding, InvalidNamespaceSegment,
                     InvalidQNameString, UnboundCounter)
from .namespaces import NS_XMLNS, NS_XML
from .uricodec import encodeUri, decodeUri
from .qname import QName, makeQName, parseClark
from .identifier import Identifier, canonicalIdentifier
from .source import qnameUri, qnameLocal, qnamePrefix, isNamespaced, toQName, qnameIdentifier
from .util import isXmlnsAttr, separateXmlns, mergeNamespaces, xmlnsBindings, \
                  assignPrefix, qualifyName, resolvePrefixedName
from .prefixes import generatePrefix, PrefixGenerator, prefixScope
