import functools
import logging
import pathlib
import threading
from typing import List, Optional

from cfsubmit.automation import (
    AutomationKind,
    AutomationStrategy,
    NoAutomation,
    detect_strategy,
)
from cfsubmit.automation.session import AutomationSession, CompletionHandler
from cfsubmit.browser import Browser
from cfsubmit.clipboard import Clipboard, ClipboardError
from cfsubmit.notifier import MessageLogger, Notifier
from cfsubmit.providers.codeforces import get_submit_url, parse_problem_url
from cfsubmit.schema import (
    AutomationOutcome,
    NotificationEvent,
    SubmissionError,
    SubmissionReport,
    SubmissionRequest,
    SubmissionState,
)
from cfsubmit.submitors.submitor import Submitor, SubmitorSettings

logger = logging.getLogger(__name__)

_SUBMITOR_KEY = 'codeforces'
_LOG_HEAD = 'CF Submit'
_FINALIZER_WAIT = 2.0

_MANUAL_INSTRUCTIONS = (
    'Code copied to the clipboard. Paste it into the submission form '
    'and press Submit.'
)


class CodeforcesSubmitor(Submitor):
    """Submits a source file through the browser.

    The source is staged on the clipboard, the problem's submission page is
    opened in the default browser, and an automation strategy (if any is
    available) pastes the code and presses submit.

    Failures never propagate to the caller: they are reported through the
    message log, toasts and the returned `SubmissionReport`.
    """

    settings: SubmitorSettings
    strategy: AutomationStrategy
    session: Optional[AutomationSession]
    report: Optional[SubmissionReport]

    def __init__(
        self,
        settings: Optional[SubmitorSettings] = None,
        message_logger: Optional[MessageLogger] = None,
        notifier: Optional[Notifier] = None,
        clipboard: Optional[Clipboard] = None,
        browser: Optional[Browser] = None,
        strategy: Optional[AutomationStrategy] = None,
    ):
        self.settings = settings or SubmitorSettings()
        self.log = message_logger or MessageLogger()
        self.notifier = notifier or Notifier(enabled=self.settings.show_toasts)
        self.clipboard = clipboard or Clipboard()
        self.browser = browser or Browser()
        if strategy is None:
            if self.settings.automation_enabled:
                strategy = detect_strategy(self.settings.forced_strategy)
            else:
                strategy = NoAutomation()
        self.strategy = strategy
        self.session = None
        self.report = None
        self._handlers: List[CompletionHandler] = []
        self._session_lock = threading.Lock()

    def key(self) -> str:
        return _SUBMITOR_KEY

    @classmethod
    def should_handle(cls, url: str) -> bool:
        return 'codeforces.' in url

    @property
    def state(self) -> SubmissionState:
        if self.report is None:
            return SubmissionState.IDLE
        return self.report.state

    def on_complete(self, handler: CompletionHandler):
        """Register a handler called once per finished automation session."""
        self._handlers.append(handler)

    def _notify(self, report: SubmissionReport, body: str):
        problem = report.problem
        event = NotificationEvent.for_problem(
            problem.contestId if problem else '',
            problem.problemCode if problem else '',
            body,
        )
        self.notifier.notify(event.headline, event.body)

    def _fail(
        self, report: SubmissionReport, error: SubmissionError, message: str
    ) -> SubmissionReport:
        report.errors.append(error)
        report.state = SubmissionState.FAILED
        self.log.error(_LOG_HEAD, message)
        return report

    def submit(self, file: pathlib.Path, url: str) -> SubmissionReport:
        request = SubmissionRequest(sourceFilePath=file, problemUrl=url)
        report = SubmissionReport(request=request)
        self.report = report
        logger.debug("Submitting `%s' to `%s'.", file, url)
        self.log.info(_LOG_HEAD, 'Preparing browser submission...')

        report.state = SubmissionState.PARSING
        report.problem = parse_problem_url(url)
        if report.problem is None:
            report.errors.append(SubmissionError.URL_UNRECOGNIZED)
            self.log.warn(_LOG_HEAD, f'Could not recognize a problem in {url}.')

        report.state = SubmissionState.READING_FILE
        try:
            # No newline translation: the clipboard gets the exact contents.
            source = file.read_bytes().decode('utf-8')
        except (OSError, UnicodeDecodeError):
            logger.debug('Could not read %s.', file, exc_info=True)
            return self._fail(
                report,
                SubmissionError.FILE_UNREADABLE,
                f'Failed to read source file: {file}',
            )
        if not source.strip():
            return self._fail(
                report,
                SubmissionError.EMPTY_SOURCE,
                f'Source file is empty: {file}',
            )

        report.state = SubmissionState.STAGING
        try:
            self.clipboard.copy(source)
        except ClipboardError as e:
            return self._fail(
                report,
                SubmissionError.CLIPBOARD_UNAVAILABLE,
                f'Failed to copy code to the clipboard: {e}',
            )
        self.log.info(_LOG_HEAD, 'Code copied to clipboard.')

        report.state = SubmissionState.REWRITING
        report.targetUrl = get_submit_url(url)

        report.state = SubmissionState.OPENING_BROWSER
        if not self.browser.open(report.targetUrl):
            self._fail(
                report, SubmissionError.BROWSER_OPEN_FAILED, 'Failed to open browser.'
            )
            self._notify(report, 'Failed to open browser.')
            return report
        self.log.info(_LOG_HEAD, f'Browser opened to: {report.targetUrl}')
        self._notify(report, 'Copied & opened browser.')

        self._release_session()

        if self.strategy.kind() == AutomationKind.NONE:
            return self._manual_fallback(report)
        return self._automate(report)

    def _manual_fallback(self, report: SubmissionReport) -> SubmissionReport:
        report.state = SubmissionState.MANUAL_FALLBACK
        if self.settings.automation_enabled:
            report.errors.append(SubmissionError.AUTOMATION_TOOL_MISSING)
            self.log.info(
                _LOG_HEAD, 'No automation tool available, submit manually.'
            )
        self._notify(report, _MANUAL_INSTRUCTIONS)
        report.state = SubmissionState.DONE
        return report

    def _automate(self, report: SubmissionReport) -> SubmissionReport:
        report.state = SubmissionState.AUTOMATING
        report.strategy = self.strategy.key()
        try:
            command = self.strategy.build_command(self.settings.automation)
            session = AutomationSession(
                self.strategy.key(),
                command,
                on_complete=functools.partial(self._on_automation_finished, report),
            )
            with self._session_lock:
                session.start()
                self.session = session
        except OSError as e:
            report.errors.append(SubmissionError.AUTOMATION_PROCESS_FAILED)
            self.log.warn(_LOG_HEAD, f'Failed to start automation: {e}')
            self._notify(report, _MANUAL_INSTRUCTIONS)
            report.state = SubmissionState.DONE
            return report

        self.log.info(
            _LOG_HEAD, f'Automating submission with {self.strategy.describe()}...'
        )
        return report

    def _on_automation_finished(
        self, report: SubmissionReport, outcome: AutomationOutcome
    ):
        report.outcome = outcome
        if outcome.cancelled:
            self.log.info(
                _LOG_HEAD, 'Previous automated submission was cancelled.'
            )
        elif outcome.ok:
            self.log.info(_LOG_HEAD, 'Automated submission finished.')
            self._notify(report, 'Code submitted through the browser.')
        else:
            report.errors.append(SubmissionError.AUTOMATION_PROCESS_FAILED)
            self.log.warn(
                _LOG_HEAD,
                f'Automation exited with code {outcome.returncode}.',
            )
            self._notify(
                report,
                'Automation did not finish cleanly. Check the browser and '
                'submit manually if needed.',
            )
        report.state = SubmissionState.DONE
        for handler in self._handlers:
            handler(outcome)

    def _release_session(self, timeout: Optional[float] = None):
        with self._session_lock:
            session = self.session
            self.session = None
        if session is None:
            return
        session.terminate()
        # Make sure its completion event was delivered before moving on.
        session.wait(timeout)

    def wait(self, timeout: Optional[float] = None) -> Optional[AutomationOutcome]:
        session = self.session
        if session is None:
            return None
        return session.wait(timeout)

    def detach(self) -> Optional[AutomationSession]:
        """Give up ownership of the live session without terminating it."""
        with self._session_lock:
            session = self.session
            self.session = None
        if session is not None:
            logger.debug("Detached automation `%s'.", session.strategy)
        return session

    def close(self):
        self._release_session()

    def __del__(self):
        if getattr(self, 'session', None) is not None:
            self._release_session(timeout=_FINALIZER_WAIT)
