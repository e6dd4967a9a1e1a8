import abc
import dataclasses
import shutil
import sys
from enum import Enum
from typing import List, Optional, Tuple


class AutomationKind(str, Enum):
    NATIVE = 'native-input-injection'
    SCRIPT = 'script-based-injection'
    NONE = 'none'


@dataclasses.dataclass(frozen=True)
class AutomationSettings:
    # Seconds to wait before injecting any input, so the page has time to load.
    startup_delay: float = 2.5
    # Tab presses moving focus from the source editor to the submit button.
    focus_advances: int = 2
    # Short pause between each injected action.
    step_delay: float = 0.25


class AutomationStrategy(abc.ABC):
    """Injects select-all, paste, focus advances and a final submit into
    whatever window has focus, after waiting for the page to load.

    Strategies never receive the source code: they paste whatever the
    clipboard holds.
    """

    platforms: Tuple[str, ...] = ()

    @abc.abstractmethod
    def key(self) -> str:
        pass

    @abc.abstractmethod
    def kind(self) -> AutomationKind:
        pass

    @abc.abstractmethod
    def is_available(self) -> bool:
        pass

    @abc.abstractmethod
    def build_command(self, settings: AutomationSettings) -> List[str]:
        pass

    def supports_platform(self, platform: Optional[str] = None) -> bool:
        platform = platform or sys.platform
        if not self.platforms:
            return True
        return any(platform.startswith(p) for p in self.platforms)

    def describe(self) -> str:
        return f'{self.key()} ({self.kind().value})'


class ExecutableStrategy(AutomationStrategy):
    executables: Tuple[str, ...] = ()

    def kind(self) -> AutomationKind:
        return AutomationKind.SCRIPT

    def find_executable(self) -> Optional[str]:
        for name in self.executables:
            found = shutil.which(name)
            if found is not None:
                return found
        return None

    def is_available(self) -> bool:
        return self.find_executable() is not None

    def get_executable(self) -> str:
        executable = self.find_executable()
        if executable is None:
            raise FileNotFoundError(
                f'None of {", ".join(self.executables)} was found in PATH.'
            )
        return executable


class NoAutomation(AutomationStrategy):
    def key(self) -> str:
        return 'none'

    def kind(self) -> AutomationKind:
        return AutomationKind.NONE

    def is_available(self) -> bool:
        return True

    def build_command(self, settings: AutomationSettings) -> List[str]:
        raise NotImplementedError('The manual strategy does not spawn processes.')
