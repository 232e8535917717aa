from click.testing import CliRunner
from xmlnames.cmdline import main


def invoke(*args):
    return CliRunner().invoke(main, list(args))


def test_encode_decode():
    result = invoke("encode", "http://a.b/c")
    assert result.exit_code == 0
    assert result.output == "http%3A%2F%2Fa%2Eb%2Fc\n"

    result = invoke("decode", "http%3A%2F%2Fa%2Eb%2Fc")
    assert result.exit_code == 0
    assert result.output == "http://a.b/c\n"


def test_decode_malformed():
    result = invoke("decode", "a.b")
    assert result.exit_code == 1
    assert "malformed URI encoding" in result.output


def test_identifier_and_qname():
    result = invoke("identifier", "urn:x", "item")
    assert result.output == "xmlns.urn%3Ax/item\n"

    result = invoke("qname", "xmlns.urn%3Ax/item")
    assert result.exit_code == 0
    assert result.output == "{urn:x}item\n"


def test_qname_invalid_segment():
    result = invoke("qname", "app/item")
    assert result.exit_code == 1
    assert "namespace segment" in result.output


def test_prefixes():
    result = invoke("prefixes", "3", "--start", "25")
    assert result.exit_code == 0
    assert result.output.splitlines()[-3:] == ["z", "ab", "bb"]


def test_loglevel():
    result = invoke("-l", "DEBUG", "prefixes", "1")
    assert result.exit_code == 0
    assert "a" in result.output.splitlines()


def test_identifier_separator_without_namespace():
    result = invoke("identifier", "", "a/b")
    assert result.exit_code == 1
    assert "cannot contain" in result.output


def test_setup_logger():
    import logging
    from xmlnames.cmdline import setup_logger
    logger = setup_logger("xmlnames", "WARNING")
    assert logger.name == "xmlnames"
    assert isinstance(logger, logging.Logger)
