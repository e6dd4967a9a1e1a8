import io
import sys
from typing import List, Optional

from rich.console import Console

from cfsubmit.automation import AutomationKind, AutomationSettings, AutomationStrategy
from cfsubmit.clipboard import ClipboardError
from cfsubmit.notifier import MessageLogger, Notifier
from cfsubmit.schema import NotificationEvent


def clear_all_functools_cache():
    from cfsubmit import config

    pkgs = [config]

    for pkg in pkgs:
        for fn in pkg.__dict__.values():
            if hasattr(fn, 'cache_clear'):
                fn.cache_clear()


def quiet_console() -> Console:
    return Console(file=io.StringIO(), width=120)


class FakeClipboard:
    def __init__(self, fail: bool = False):
        self.fail = fail
        self.writes: List[str] = []

    def copy(self, text: str):
        if self.fail:
            raise ClipboardError('no clipboard backend')
        self.writes.append(text)

    def paste(self) -> str:
        return self.writes[-1] if self.writes else ''


class FakeBrowser:
    def __init__(self, ok: bool = True, clipboard: Optional[FakeClipboard] = None):
        self.ok = ok
        self.clipboard = clipboard
        self.opened: List[str] = []
        # What the clipboard held when each URL was opened.
        self.clipboard_at_open: List[str] = []

    def open(self, url: str) -> bool:
        self.opened.append(url)
        if self.clipboard is not None:
            self.clipboard_at_open.append(self.clipboard.paste())
        return self.ok


class PythonStrategy(AutomationStrategy):
    """Runs a Python snippet instead of injecting input."""

    def __init__(self, code: str = 'pass', key: str = 'python'):
        self.code = code
        self._key = key
        self.commands: List[List[str]] = []

    def key(self) -> str:
        return self._key

    def kind(self) -> AutomationKind:
        return AutomationKind.SCRIPT

    def is_available(self) -> bool:
        return True

    def build_command(self, settings: AutomationSettings) -> List[str]:
        command = [sys.executable, '-c', self.code]
        self.commands.append(command)
        return command


class MissingToolStrategy(PythonStrategy):
    def build_command(self, settings: AutomationSettings) -> List[str]:
        return ['/nonexistent/cfsubmit-automation-tool']


class RecordingNotifier(Notifier):
    def __init__(self, enabled: bool = True):
        super().__init__(enabled=enabled, console=quiet_console())
        self.events: List[NotificationEvent] = []
        self.add_listener(self.events.append)


class RecordingMessageLogger(MessageLogger):
    def __init__(self):
        super().__init__(console=quiet_console())
        self.messages: List[tuple] = []

    def info(self, head: str, body: str):
        self.messages.append(('info', head, body))
        super().info(head, body)

    def warn(self, head: str, body: str):
        self.messages.append(('warn', head, body))
        super().warn(head, body)

    def error(self, head: str, body: str):
        self.messages.append(('error', head, body))
        super().error(head, body)

    def levels(self) -> List[str]:
        return [level for level, _, _ in self.messages]
