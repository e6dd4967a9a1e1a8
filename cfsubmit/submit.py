import pathlib
from typing import Optional

import typer

from cfsubmit import submitors
from cfsubmit.config import get_config
from cfsubmit.console import console
from cfsubmit.schema import SubmissionState
from cfsubmit.submitors import SubmitorSettings


def main(
    source: pathlib.Path,
    url: str,
    automation: bool = True,
    wait: bool = True,
    strategy: Optional[str] = None,
):
    overrides = {}
    if not automation:
        overrides['automation_enabled'] = False
    if strategy is not None:
        overrides['forced_strategy'] = strategy
    settings = SubmitorSettings.from_config(get_config(), **overrides)

    submitor = submitors.get_submitor(url, settings)
    if submitor is None:
        console.print(f'[error]No submitor handles the URL [item]{url}[/item].[/error]')
        raise typer.Exit(1)

    report = submitor.submit(source, url)
    if report.failed:
        submitor.close()
        raise typer.Exit(1)

    if report.state != SubmissionState.AUTOMATING:
        return

    if not wait:
        submitor.detach()
        console.print('Automation keeps running in the background.')
        return

    with submitor:
        with console.status('Waiting for the browser automation to finish...'):
            outcome = submitor.wait()
    if outcome is not None and outcome.ok:
        console.print('[success]Submission sent.[/success]')
    else:
        console.print('[warning]Check the browser and submit manually if needed.[/warning]')
