import logging

import click

from rpncalc import conf
from rpncalc.__about__ import __version__
from rpncalc.compiler import compile
from rpncalc.conf.logging import configure_logging
from rpncalc.errors import CalculatorError
from rpncalc.expression import Expression, RENDER_MODES, format_value
from rpncalc.lexer import tokenize
from rpncalc.tokens import display_queue

log = logging.getLogger('rpncalc.cli')

LOG_LEVELS = ['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']


def process(text, render='none', show_tokens=False):
    """ Run the expression through the pipeline and return the output.

    The output consists of the token table (if ``show_tokens`` is set),
    the rendered expression (unless ``render`` is ``'none'``) and the
    result, each on a separate line.
    """
    tokens = tokenize(text)
    lines = []
    if show_tokens:
        lines.append(display_queue(tokens))
    expression = Expression(compile(tokens))
    if render != 'none':
        lines.append(expression.render(render))
    lines.append(format_value(expression.solve()))
    return '\n'.join(lines)


@click.group()
@click.version_option(__version__)
@click.option('--config', '-c', default=None,
              type=click.Path(exists=True, dir_okay=False))
@click.option('--log-level', '-l', default=None,
              type=click.Choice(LOG_LEVELS, case_sensitive=False))
def main(config, log_level):
    try:
        if config is not None:
            conf.load_file(config)
        settings = conf.settings
    except conf.ImproperlyConfigured as e:
        raise click.ClickException(str(e))
    configure_logging(log_level or settings.logging.level,
                      settings.logging.file)


@main.command('repl')
@click.option('--render', '-r', default=None,
              type=click.Choice(('none',) + RENDER_MODES))
@click.option('--tokens/--no-tokens', 'show_tokens', default=None)
def repl(render, show_tokens):
    """Read expressions line by line and print their results."""
    settings = conf.settings.repl
    if render is None:
        render = settings.render
    if show_tokens is None:
        show_tokens = settings.show_tokens
    stdin = click.get_text_stream('stdin')
    while True:
        click.echo(settings.prompt)
        line = stdin.readline()
        if not line:
            break
        line = line.rstrip().replace('\\n', '\n')
        if line.lower() in settings.exit_keywords:
            click.echo("Exiting...")
            break
        try:
            click.echo(process(line, render, show_tokens))
        except CalculatorError as e:
            log.info("cannot process %r: %s", line, e)
            click.echo(str(e))


@main.command('eval')
@click.argument('expression')
@click.option('--render', '-r', default='none',
              type=click.Choice(('none',) + RENDER_MODES))
@click.option('--tokens', 'show_tokens', is_flag=True)
def evaluate(expression, render, show_tokens):
    """Print the result of the EXPRESSION."""
    try:
        click.echo(process(expression, render, show_tokens))
    except CalculatorError as e:
        log.info("cannot process %r: %s", expression, e)
        raise click.ClickException(str(e))


@main.command('tokens')
@click.argument('expression')
def tokens(expression):
    """Print the tokens the EXPRESSION consists of."""
    try:
        click.echo(display_queue(tokenize(expression)))
    except CalculatorError as e:
        raise click.ClickException(str(e))
