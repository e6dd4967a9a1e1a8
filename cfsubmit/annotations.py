import pathlib
import re
from typing import Optional

import typer
import typer.core
from typing_extensions import Annotated

from cfsubmit import automation


def _get_strategy_options():
    return sorted(strategy.key() for strategy in automation.ALL_STRATEGIES)


SourceFile = Annotated[
    pathlib.Path,
    typer.Argument(
        help='Source file to be submitted.',
        dir_okay=False,
    ),
]
ProblemUrl = Annotated[
    str,
    typer.Argument(help='URL of the problem, as shown by the judge.'),
]
Strategy = Annotated[
    Optional[str],
    typer.Option(
        '--strategy',
        help='Force an automation strategy instead of detecting one.',
        autocompletion=_get_strategy_options,
    ),
]
Automation = Annotated[
    bool,
    typer.Option(
        '--automation/--no-automation',
        help='Whether to paste and submit automatically once the browser opens.',
    ),
]
Wait = Annotated[
    bool,
    typer.Option(
        '--wait/--no-wait',
        help='Whether to wait for the automation to finish before exiting.',
    ),
]


class AliasGroup(typer.core.TyperGroup):
    _CMD_SPLIT_P = re.compile(r', ?')

    def get_command(self, ctx, cmd_name):
        cmd_name = self._group_cmd_name(cmd_name)
        return super().get_command(ctx, cmd_name)

    def _group_cmd_name(self, default_name):
        for cmd in self.commands.values():
            if cmd.name and default_name in self._CMD_SPLIT_P.split(cmd.name):
                return cmd.name
        return default_name
