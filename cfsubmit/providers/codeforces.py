import re
from typing import List, Optional

from cfsubmit.providers.provider import ProviderInterface
from cfsubmit.schema import ParsedProblem, ProblemKind

_HOST = r'\w+://(?:[\w-]+\.)?codeforces\.(?:com|ml|es)'
_CODE = r'([A-Za-z0-9]+)'
_TAIL = r'/?(?:[?#].*)?$'

_PATTERNS = [
    (
        re.compile(_HOST + r'/(contest|gym)/(\d+)/problem/' + _CODE + _TAIL),
        lambda m: ParsedProblem(
            contestId=m.group(2), problemCode=m.group(3), kind=ProblemKind(m.group(1))
        ),
    ),
    (
        re.compile(_HOST + r'/problemset/problem/(\d+)/' + _CODE + _TAIL),
        lambda m: ParsedProblem(
            contestId=m.group(1),
            problemCode=m.group(2),
            kind=ProblemKind.PROBLEMSET,
        ),
    ),
    (
        re.compile(_HOST + r'/group/([^/]+)/contest/(\d+)/problem/' + _CODE + _TAIL),
        lambda m: ParsedProblem(
            contestId=m.group(2),
            problemCode=m.group(3),
            kind=ProblemKind.GROUP,
            groupId=m.group(1),
        ),
    ),
]

# Problemset problems have no submit page of their own, so they are
# submitted through the contest they belong to.
_PROBLEMSET_PATTERN = re.compile(r'/problemset/problem/(\d+)/([^/?#]+)')
_CONTEST_PREFIXES = ('/contest/', '/gym/', '/group/')
_PROBLEM_SEPARATOR = '/problem/'


def parse_problem_url(url: str) -> Optional[ParsedProblem]:
    for pattern, extract in _PATTERNS:
        if match := pattern.match(url):
            return extract(match)
    return None


def _problem_index(rest: str) -> str:
    for separator in ('?', '#'):
        rest = rest.split(separator, 1)[0]
    return rest.split('/', 1)[0]


def get_submit_url(url: str) -> str:
    prefix, separator, rest = url.partition(_PROBLEM_SEPARATOR)
    if separator and any(p in prefix for p in _CONTEST_PREFIXES):
        index = _problem_index(rest)
        if index:
            return f'{prefix}/submit/{index}'

    if match := _PROBLEMSET_PATTERN.search(url):
        contest_id, index = match.groups()
        return f'https://codeforces.com/contest/{contest_id}/submit/{index}'
    return url


class CodeforcesProvider(ProviderInterface):
    def should_handle(self, url: str) -> bool:
        return 'codeforces.' in url

    def parse(self, url: str) -> Optional[ParsedProblem]:
        return parse_problem_url(url)

    def get_submit_url(self, url: str) -> str:
        return get_submit_url(url)

    def get_aliases(self, url: str) -> List[str]:
        problem = self.parse(url)
        if problem is None:
            return super().get_aliases(url)

        aliases = [problem.pretty_name(), problem.problemCode]
        if problem.groupId:
            aliases.insert(0, f'{problem.groupId}_{problem.pretty_name()}')
        return aliases
