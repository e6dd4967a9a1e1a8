import importlib.metadata
import logging

import typer
from rich.table import Table
from typing_extensions import Annotated

from cfsubmit import annotations, automation, config, providers
from cfsubmit import submit as submit_pkg
from cfsubmit.console import console

app = typer.Typer(no_args_is_help=True, cls=annotations.AliasGroup)
app.add_typer(
    config.app,
    name='config, cfg',
    cls=annotations.AliasGroup,
    help='Manage the configuration of the tool.',
)


@app.command('submit, s')
def submit(
    source: annotations.SourceFile,
    url: annotations.ProblemUrl,
    automation: annotations.Automation = True,
    wait: annotations.Wait = True,
    strategy: annotations.Strategy = None,
):
    """
    Copy the source to the clipboard, open the submission page and submit it.
    """
    submit_pkg.main(source, url, automation=automation, wait=wait, strategy=strategy)


@app.command('parse, p')
def parse(url: annotations.ProblemUrl):
    """
    Show the contest and problem identified by a problem URL.
    """
    problem = providers.parse(url)
    if problem is None:
        console.print(f'[error]Could not recognize a problem in [item]{url}[/item].[/error]')
        raise typer.Exit(1)
    console.print(f'Contest: [item]{problem.contestId}[/item]')
    console.print(f'Problem: [item]{problem.problemCode}[/item]')
    console.print(f'Kind: [item]{problem.kind.value}[/item]')
    if problem.groupId:
        console.print(f'Group: [item]{problem.groupId}[/item]')
    console.print(f'Aliases: {", ".join(providers.get_aliases(url))}')


@app.command('url, u')
def url(url: annotations.ProblemUrl):
    """
    Print the submission page of a problem URL.
    """
    console.print(providers.get_submit_url(url), style='default', soft_wrap=True)


@app.command('tools')
def tools():
    """
    Show which automation strategies are available on this machine.
    """
    cfg = config.get_config()
    detected = automation.detect_strategy(cfg.automation.strategy)

    table = Table()
    table.add_column('Strategy', style='item')
    table.add_column('Kind')
    table.add_column('Available')
    for strategy in automation.get_candidate_strategies():
        available = strategy.is_available()
        mark = '[success]yes[/success]' if available else '[error]no[/error]'
        if strategy.key() == detected.key():
            mark += ' (selected)'
        table.add_row(strategy.key(), strategy.kind().value, mark)
    console.print(table)
    if not cfg.automation.enabled:
        console.print('[warning]Automation is disabled in the config.[/warning]')


@app.command('version')
def version():
    """
    Show the installed version.
    """
    console.print(importlib.metadata.version('cfsubmit'), style='default')


@app.callback()
def callback(
    verbose: Annotated[
        bool, typer.Option('--verbose', '-v', help='Show debug logs.')
    ] = False,
):
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format='%(asctime)s %(levelname)s %(name)s: %(message)s',
    )
