from typing import List, Optional, Type

from cfsubmit.submitors.codeforces import CodeforcesSubmitor
from cfsubmit.submitors.submitor import Submitor, SubmitorSettings

_SUBMITORS: List[Type[Submitor]] = [CodeforcesSubmitor]


def get_submitor(url: str, settings: SubmitorSettings, **kwargs) -> Optional[Submitor]:
    for submitor_cls in _SUBMITORS:
        if submitor_cls.should_handle(url):
            return submitor_cls(settings=settings, **kwargs)
    return None
