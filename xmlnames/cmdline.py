import logging
import click

from xmlnames.errors import XMLNamesError
from xmlnames.identifier import Identifier, canonicalIdentifier
from xmlnames.prefixes import prefixScope
from xmlnames.source import toQName
from xmlnames.uricodec import encodeUri, decodeUri

DEFAULT_LOGLEVEL = "INFO"

CONTEXT_SETTINGS = dict(help_option_names=['-h', '--help'])


def setup_logger(name, loglevel):
    logging.basicConfig(level=getattr(logging, loglevel))
    return logging.getLogger(name)


@click.group(context_settings=CONTEXT_SETTINGS)
@click.option('--loglevel', '-l', default=DEFAULT_LOGLEVEL, show_default=True,
              type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]),
              help='Log level')
def main(loglevel):
    "Qualified XML name utilities"
    setup_logger("xmlnames", loglevel)


@main.command()
@click.argument('uri')
def encode(uri):
    "Encode a namespace URI into identifier-safe text"
    click.echo(encodeUri(uri))


@main.command()
@click.argument('text')
def decode(text):
    "Decode identifier-safe text back into a namespace URI"
    try:
        click.echo(decodeUri(text))
    except XMLNamesError as ex:
        raise click.ClickException(str(ex))


@main.command()
@click.argument('uri')
@click.argument('local')
def identifier(uri, local):
    "Print the canonical identifier of {URI}LOCAL"
    try:
        click.echo(canonicalIdentifier(uri, local))
    except ValueError as ex:
        raise click.ClickException(str(ex))


@main.command()
@click.argument('text')
def qname(text):
    "Print an identifier in Clark notation, e.g. xmlns.urn%3Ax/item"
    try:
        click.echo(toQName(Identifier.parse(text)).getFullname())
    except XMLNamesError as ex:
        raise click.ClickException(str(ex))


@main.command()
@click.argument('count', type=click.IntRange(min=0))
@click.option('--start', '-s', type=click.IntRange(min=0), default=0, show_default=True,
              help='Counter value of the first prefix')
def prefixes(count, start):
    "Print COUNT generated namespace prefixes"
    with prefixScope(start) as generator:
        for _ in range(count):
            click.echo(generator.next())
