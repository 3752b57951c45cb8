import click

from podclaim.utils.logging import setup_logging
from .resources import resolve, state


@click.group()
@click.option('--verbose', '-v', is_flag=True, help='Enables verbose mode.')
@click.option('--quiet', '-q', is_flag=True, help='Enables quiet mode.')
@click.pass_context
def app(ctx, verbose, quiet):
    """
    podclaim resource claim resolver CLI.
    """
    ctx.ensure_object(dict)
    ctx.obj['VERBOSE'] = verbose
    ctx.obj['QUIET'] = quiet

    if verbose:
        setup_logging(level="DEBUG")
    elif quiet:
        setup_logging(level="ERROR")
    else:
        setup_logging()

# Add subcommands
app.add_command(resolve, name='resolve')
app.add_command(state, name='state')

if __name__ == '__main__':
    app()
