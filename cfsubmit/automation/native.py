import importlib.resources
import importlib.util
import pathlib
import sys
from typing import List

from cfsubmit.automation.strategy import (
    AutomationKind,
    AutomationSettings,
    AutomationStrategy,
)


class PyAutoGuiStrategy(AutomationStrategy):
    """Injects input through the OS native input APIs by running
    `inject.py` with pyautogui in a child interpreter."""

    def key(self) -> str:
        return 'pyautogui'

    def kind(self) -> AutomationKind:
        return AutomationKind.NATIVE

    def is_available(self) -> bool:
        return importlib.util.find_spec('pyautogui') is not None

    def get_inject_executable(self) -> pathlib.Path:
        with importlib.resources.as_file(
            importlib.resources.files('cfsubmit') / 'automation' / 'inject.py'
        ) as file:
            return file

    def build_command(self, settings: AutomationSettings) -> List[str]:
        return [
            sys.executable,
            str(self.get_inject_executable().resolve()),
            f'-d{settings.startup_delay:.3f}',
            f'-s{settings.step_delay:.3f}',
            f'-n{settings.focus_advances}',
        ]
