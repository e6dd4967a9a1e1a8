import logging
import subprocess
import threading
from typing import Callable, List, Optional

from cfsubmit.schema import AutomationOutcome

logger = logging.getLogger(__name__)

CompletionHandler = Callable[[AutomationOutcome], None]


class AutomationSession:
    """Owns one spawned automation process.

    Exactly one completion event is delivered per session, from a watcher
    thread, once the process exits. Sessions that were terminated deliver an
    outcome marked as cancelled.
    """

    strategy: str
    command: List[str]
    popen: Optional[subprocess.Popen]
    outcome: Optional[AutomationOutcome]

    def __init__(
        self,
        strategy: str,
        command: List[str],
        on_complete: Optional[CompletionHandler] = None,
    ):
        self.strategy = strategy
        self.command = command
        self.on_complete = on_complete
        self.popen = None
        self.outcome = None
        self._cancelled = False
        self._lock = threading.Lock()
        self._done = threading.Event()
        self._watcher: Optional[threading.Thread] = None

    def start(self):
        """Spawn the process and the thread waiting for it.

        Raises OSError if the process could not be spawned.
        """
        if self.popen is not None:
            raise RuntimeError('Automation session was already started.')
        logger.debug(
            "Spawning automation `%s' with command: `%s'.",
            self.strategy,
            ' '.join(self.command),
        )
        self.popen = subprocess.Popen(
            self.command,
            stdin=subprocess.DEVNULL,
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
            close_fds=True,
        )
        self._watcher = threading.Thread(
            target=self._watch,
            name=f'automation-{self.strategy}-{self.popen.pid}',
            daemon=True,
        )
        self._watcher.start()

    def _watch(self):
        assert self.popen is not None
        returncode = self.popen.wait()
        with self._lock:
            self.outcome = AutomationOutcome(
                strategy=self.strategy,
                returncode=returncode,
                cancelled=self._cancelled,
            )
        logger.debug(
            "Automation `%s' finished with return code %s.", self.strategy, returncode
        )
        try:
            if self.on_complete is not None:
                self.on_complete(self.outcome)
        finally:
            self._done.set()

    def is_alive(self) -> bool:
        return self.popen is not None and self.popen.poll() is None

    def terminate(self, grace: float = 1.0):
        """Stop the process, killing it if it does not exit within `grace`
        seconds, and wait until it is reaped."""
        if self.popen is None:
            return
        with self._lock:
            if self.outcome is None:
                self._cancelled = True
        if self.popen.poll() is None:
            logger.debug(
                "Terminating automation `%s' (pid %d).", self.strategy, self.popen.pid
            )
            try:
                self.popen.terminate()
                self.popen.wait(timeout=grace)
            except subprocess.TimeoutExpired:
                self.popen.kill()
                self.popen.wait()
            except OSError:
                # The process had died by itself.
                pass

    def wait(self, timeout: Optional[float] = None) -> Optional[AutomationOutcome]:
        if self.popen is None:
            return None
        if threading.current_thread() is self._watcher:
            # Called from a completion handler: the outcome is already set.
            return self.outcome
        self._done.wait(timeout)
        return self.outcome

    def __enter__(self):
        return self

    def __exit__(self, *args, **kwargs):
        self.terminate()
