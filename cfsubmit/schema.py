import pathlib
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict


class ProblemKind(str, Enum):
    CONTEST = 'contest'
    GYM = 'gym'
    GROUP = 'group'
    PROBLEMSET = 'problemset'


class ParsedProblem(BaseModel):
    model_config = ConfigDict(frozen=True)

    contestId: str
    problemCode: str
    kind: ProblemKind = ProblemKind.CONTEST
    groupId: Optional[str] = None

    def pretty_name(self) -> str:
        return f'{self.contestId}{self.problemCode}'


class SubmissionRequest(BaseModel):
    model_config = ConfigDict(frozen=True)

    sourceFilePath: pathlib.Path
    problemUrl: str


class NotificationEvent(BaseModel):
    model_config = ConfigDict(frozen=True)

    headline: str
    body: str

    @staticmethod
    def for_problem(
        contest_id: str, problem_code: str, body: str
    ) -> 'NotificationEvent':
        return NotificationEvent(
            headline=f'Contest {contest_id} Problem {problem_code}', body=body
        )


class SubmissionState(str, Enum):
    IDLE = 'idle'
    PARSING = 'parsing'
    READING_FILE = 'reading-file'
    STAGING = 'staging'
    REWRITING = 'rewriting'
    OPENING_BROWSER = 'opening-browser'
    AUTOMATING = 'automating'
    MANUAL_FALLBACK = 'manual-fallback'
    DONE = 'done'
    FAILED = 'failed'


class SubmissionError(str, Enum):
    FILE_UNREADABLE = 'FileUnreadable'
    EMPTY_SOURCE = 'EmptySource'
    URL_UNRECOGNIZED = 'UrlUnrecognized'
    BROWSER_OPEN_FAILED = 'BrowserOpenFailed'
    CLIPBOARD_UNAVAILABLE = 'ClipboardUnavailable'
    AUTOMATION_TOOL_MISSING = 'AutomationToolMissing'
    AUTOMATION_PROCESS_FAILED = 'AutomationProcessFailed'

    def is_fatal(self) -> bool:
        return self in (
            SubmissionError.FILE_UNREADABLE,
            SubmissionError.EMPTY_SOURCE,
            SubmissionError.BROWSER_OPEN_FAILED,
            SubmissionError.CLIPBOARD_UNAVAILABLE,
        )


class AutomationOutcome(BaseModel):
    model_config = ConfigDict(frozen=True)

    strategy: str
    returncode: Optional[int] = None
    # Set when a newer submission terminated this one.
    cancelled: bool = False

    @property
    def ok(self) -> bool:
        return self.returncode == 0 and not self.cancelled


class SubmissionReport(BaseModel):
    request: SubmissionRequest
    problem: Optional[ParsedProblem] = None
    targetUrl: Optional[str] = None
    state: SubmissionState = SubmissionState.IDLE
    errors: List[SubmissionError] = []
    strategy: Optional[str] = None
    outcome: Optional[AutomationOutcome] = None

    @property
    def failed(self) -> bool:
        return self.state == SubmissionState.FAILED

    def has_error(self, error: SubmissionError) -> bool:
        return error in self.errors
