import abc
from typing import List, Optional

from cfsubmit.schema import ParsedProblem


class ProviderInterface(abc.ABC):
    @abc.abstractmethod
    def should_handle(self, url: str) -> bool:
        pass

    def parse(self, url: str) -> Optional[ParsedProblem]:
        return None

    def get_submit_url(self, url: str) -> str:
        return url

    def get_code(self, url: str) -> Optional[str]:
        problem = self.parse(url)
        if problem is None:
            return None
        return problem.pretty_name()

    def get_aliases(self, url: str) -> List[str]:
        return []
