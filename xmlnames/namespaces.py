"""XML namespaces and name markers used by the package"""


#: Namespace of ``xmlns`` declaration attributes
NS_XMLNS = "http://www.w3.org/2000/xmlns/"

#: Namespace bound to the reserved ``xml`` prefix
NS_XML = "http://www.w3.org/XML/1998/namespace"

#: Local name of the default namespace declaration, also the bare identifier segment
XMLNS_MARKER = "xmlns"

#: Identifier namespace segment prefix followed by an encoded URI
XMLNS_SEGMENT_PREFIX = XMLNS_MARKER + "."

#: Prefix permanently bound to :data:`NS_XML`
XML_PREFIX = "xml"
