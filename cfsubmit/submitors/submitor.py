import abc
import dataclasses
import pathlib
from typing import Optional

from cfsubmit.automation import AutomationSettings
from cfsubmit.config import Config
from cfsubmit.schema import AutomationOutcome, SubmissionReport


@dataclasses.dataclass(frozen=True)
class SubmitorSettings:
    show_toasts: bool = True
    automation_enabled: bool = True
    forced_strategy: Optional[str] = None
    automation: AutomationSettings = AutomationSettings()

    @staticmethod
    def from_config(cfg: Config, **overrides) -> 'SubmitorSettings':
        settings = SubmitorSettings(
            show_toasts=cfg.showToastMessages,
            automation_enabled=cfg.automation.enabled,
            forced_strategy=cfg.automation.strategy,
            automation=AutomationSettings(
                startup_delay=cfg.automation.startupDelay,
                focus_advances=cfg.automation.focusAdvances,
            ),
        )
        return dataclasses.replace(settings, **overrides)


class Submitor(abc.ABC):
    @abc.abstractmethod
    def key(self) -> str:
        pass

    @classmethod
    @abc.abstractmethod
    def should_handle(cls, url: str) -> bool:
        pass

    @abc.abstractmethod
    def submit(self, file: pathlib.Path, url: str) -> SubmissionReport:
        pass

    def wait(self, timeout: Optional[float] = None) -> Optional[AutomationOutcome]:
        return None

    def detach(self):
        pass

    def close(self):
        pass

    def __enter__(self):
        return self

    def __exit__(self, *args, **kwargs):
        self.close()
