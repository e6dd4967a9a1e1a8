import logging
from typing import Callable, List, Optional

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel

from cfsubmit.console import console as default_console
from cfsubmit.schema import NotificationEvent

logger = logging.getLogger(__name__)


class MessageLogger:
    """Host message log. Messages are always shown, regardless of the toast
    setting."""

    def __init__(self, console: Optional[Console] = None):
        self.console = console or default_console

    def _print(self, style: str, head: str, body: str):
        self.console.print(
            f'[item]{escape(head)}[/item] [{style}]{escape(body)}[/{style}]'
        )

    def info(self, head: str, body: str):
        logger.debug('info: %s: %s', head, body)
        self._print('status', head, body)

    def warn(self, head: str, body: str):
        logger.debug('warn: %s: %s', head, body)
        self._print('warning', head, body)

    def error(self, head: str, body: str):
        logger.debug('error: %s: %s', head, body)
        self._print('error', head, body)


ToastListener = Callable[[NotificationEvent], None]


class Notifier:
    """Toast surface, gated by the `showToastMessages` setting."""

    def __init__(
        self,
        enabled: bool = True,
        console: Optional[Console] = None,
    ):
        self.enabled = enabled
        self.console = console or default_console
        self.listeners: List[ToastListener] = []

    def add_listener(self, listener: ToastListener):
        self.listeners.append(listener)

    def notify(self, headline: str, body: str) -> bool:
        if not self.enabled:
            logger.debug('Toast suppressed: %s: %s', headline, body)
            return False
        event = NotificationEvent(headline=headline, body=body)
        self.console.print(
            Panel(
                escape(event.body),
                title=f'[cfs]{escape(event.headline)}[/cfs]',
                title_align='left',
                expand=False,
            )
        )
        for listener in self.listeners:
            listener(event)
        return True
