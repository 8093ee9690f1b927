"""MagasiID CLI - Command line interface for identifier generation and validation."""

import asyncio

import click
from click.core import ParameterSource

from scitrera_app_framework import get_variables

# option name -> IDConfiguration field
_CONFIG_OPTIONS = {
    'prefix': 'prefix',
    'length': 'length',
    'timestamp': 'include_timestamp',
    'dashes': 'use_dashes',
    'checksum': 'include_checksum',
    'charset': 'custom_char_set',
    'pattern': 'custom_format',
}


_PREFIX_OPTIONS = (
    click.option('--prefix', default='SIAS', help='Literal prefix (default: SIAS)'),
    click.option('--no-prefix', is_flag=True, help='Without a prefix'),
)

_SEPARATOR_OPTIONS = (
    click.option('--dashes/--no-dashes', default=True, help='Separate segments with dashes'),
    click.option('--checksum/--no-checksum', default=True, help='Trailing checksum character'),
)

_ID_CONFIG_OPTIONS = _PREFIX_OPTIONS + (
    click.option('--length', default=16, type=int, help='Target length excluding dashes and checksum'),
    click.option('--timestamp/--no-timestamp', default=True, help='Embed a base-36 timestamp segment'),
) + _SEPARATOR_OPTIONS + (
    click.option('--charset', default=None, help='Alphabet for the random body'),
    click.option('--format', 'pattern', default=None, help="Output pattern, 'X' takes the next id character"),
)

# validate_id only reads the prefix, dash and checksum settings
_VALIDATE_OPTIONS = _PREFIX_OPTIONS + _SEPARATOR_OPTIONS


def _apply_options(f, options):
    for option in reversed(options):
        f = option(f)
    return f


def id_config_options(f):
    """Attach the identifier configuration options to a command."""
    return _apply_options(f, _ID_CONFIG_OPTIONS)


def validate_options(f):
    """Attach the options validation depends on to a command."""
    return _apply_options(f, _VALIDATE_OPTIONS)


def config_from_options(ctx: click.Context, options: dict) -> dict:
    """Build a partial ID configuration from the options given on the command line."""
    partial = {}
    for option, field in _CONFIG_OPTIONS.items():
        if option in options and ctx.get_parameter_source(option) in (
                ParameterSource.COMMANDLINE, ParameterSource.ENVIRONMENT):
            partial[field] = options[option]
    if options.get('no_prefix'):
        partial['prefix'] = ''
    return partial


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose logs")
def cli(verbose: bool):
    """MagasiID - Structured identifier generation and tracking."""
    v = get_variables()  # get variables instance prior to preconfigure() call
    if verbose:
        v.set("LOGGING_LEVEL", "DEBUG")


@cli.command()
@id_config_options
@click.option('--count', '-n', default=1, type=int, help='Number of IDs to generate')
@click.pass_context
def generate(ctx: click.Context, count: int, **options):
    """Generate one or more identifiers."""
    from magasiid.dependencies import preconfigure
    from magasiid.exceptions import MagasiIDError
    from magasiid.services.ids import get_id_service

    v, _ = preconfigure()
    service = get_id_service(v)
    partial = config_from_options(ctx, options)

    try:
        ids = asyncio.run(service.generate_batch(count, partial))
    except MagasiIDError as e:
        click.echo(f"Error: {e.message}", err=True)
        raise SystemExit(2)

    for id_ in ids:
        click.echo(id_)


@cli.command()
@click.argument('id')
@validate_options
@click.pass_context
def validate(ctx: click.Context, id: str, **options):
    """Validate an identifier's prefix and checksum."""
    from magasiid.utils.id_generation import validate_id

    if validate_id(id, config_from_options(ctx, options)):
        click.echo("valid")
    else:
        click.echo("invalid")
        raise SystemExit(1)


@cli.command()
@click.argument('value')
def checksum(value: str):
    """Print the checksum character for VALUE (dashes ignored)."""
    from magasiid.utils.id_generation import calculate_checksum
    click.echo(calculate_checksum(value))


@cli.command(name='format')
@click.argument('id')
@click.argument('pattern')
def format_cmd(id: str, pattern: str):
    """Rewrite ID into PATTERN ('X' takes the next id character)."""
    from magasiid.utils.id_generation import format_id
    click.echo(format_id(id, pattern))


@cli.command()
def version():
    """Show version information."""
    from magasiid import __version__
    click.echo(f"magasiid v{__version__}")


if __name__ == '__main__':
    cli()
