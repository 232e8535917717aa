"""Exceptions raised by the package."""


class XMLNamesError(Exception):
    "base class of all package errors"


class MalformedEncoding(XMLNamesError, ValueError):
    "text handed to the URI decoder was never produced by the encoder"

    def __init__(self, text, reason):
        self.text = text
        super().__init__("malformed URI encoding %r: %s" % (text, reason))


class InvalidNamespaceSegment(XMLNamesError, ValueError):
    "identifier namespace segment does not carry a URI"

    def __init__(self, segment):
        self.segment = segment
        super().__init__("namespace segment %r is neither 'xmlns' nor 'xmlns.<encoded uri>'"
                         % segment)


class InvalidQNameString(XMLNamesError, ValueError):
    "string is not a Clark notation name"

    def __init__(self, text):
        self.text = text
        super().__init__("invalid qualified name string %r" % text)


class UnboundCounter(XMLNamesError, RuntimeError):
    "prefix generator used outside of its serialization pass"
