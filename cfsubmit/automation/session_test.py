import sys
import threading
from typing import List

import pytest

from cfsubmit.automation.session import AutomationSession
from cfsubmit.schema import AutomationOutcome


def _python(code: str) -> List[str]:
    return [sys.executable, '-c', code]


def test_successful_session_completes_once():
    outcomes: List[AutomationOutcome] = []
    session = AutomationSession('python', _python('pass'), on_complete=outcomes.append)

    session.start()
    outcome = session.wait(timeout=30)

    assert outcome is not None
    assert outcome.ok
    assert outcome.returncode == 0
    assert outcomes == [outcome]
    assert not session.is_alive()


def test_failed_session_reports_return_code():
    session = AutomationSession('python', _python('import sys; sys.exit(3)'))

    session.start()
    outcome = session.wait(timeout=30)

    assert outcome is not None
    assert not outcome.ok
    assert outcome.returncode == 3
    assert not outcome.cancelled


def test_terminated_session_is_cancelled():
    outcomes: List[AutomationOutcome] = []
    session = AutomationSession(
        'python', _python('import time; time.sleep(60)'), on_complete=outcomes.append
    )

    session.start()
    assert session.is_alive()
    session.terminate()

    assert not session.is_alive()
    outcome = session.wait(timeout=30)
    assert outcome is not None
    assert outcome.cancelled
    assert not outcome.ok
    assert len(outcomes) == 1


def test_completion_is_delivered_from_another_thread():
    threads = []
    session = AutomationSession(
        'python',
        _python('pass'),
        on_complete=lambda _: threads.append(threading.current_thread()),
    )

    session.start()
    session.wait(timeout=30)

    assert threads and threads[0] is not threading.main_thread()


def test_wait_inside_completion_handler_returns_outcome():
    seen: List[AutomationOutcome] = []
    returned = threading.Event()

    def handler(outcome: AutomationOutcome):
        waited = session.wait()
        assert waited is not None
        seen.append(waited)
        returned.set()

    session = AutomationSession('python', _python('pass'), on_complete=handler)
    session.start()

    assert returned.wait(timeout=30)
    assert seen == [session.wait(timeout=30)]


def test_context_manager_terminates():
    with AutomationSession('python', _python('import time; time.sleep(60)')) as session:
        session.start()
        assert session.is_alive()
    assert not session.is_alive()


def test_session_cannot_start_twice():
    session = AutomationSession('python', _python('pass'))
    session.start()
    with pytest.raises(RuntimeError):
        session.start()
    session.wait(timeout=30)


def test_unstarted_session():
    session = AutomationSession('python', _python('pass'))

    assert not session.is_alive()
    assert session.wait(timeout=0) is None
    session.terminate()


def test_missing_executable_raises():
    session = AutomationSession('missing', ['/nonexistent/cfsubmit-automation-tool'])

    with pytest.raises(OSError):
        session.start()
