from typing import List, Optional

from cfsubmit.providers.codeforces import CodeforcesProvider
from cfsubmit.providers.provider import ProviderInterface
from cfsubmit.schema import ParsedProblem

ALL_PROVIDERS: List[ProviderInterface] = [
    CodeforcesProvider(),
]


def get_provider(url: str) -> Optional[ProviderInterface]:
    for provider in ALL_PROVIDERS:
        if provider.should_handle(url):
            return provider
    return None


def parse(url: str) -> Optional[ParsedProblem]:
    provider = get_provider(url)
    if provider is None:
        return None
    return provider.parse(url)


def get_submit_url(url: str) -> str:
    provider = get_provider(url)
    if provider is None:
        return url
    return provider.get_submit_url(url)


def get_code(url: str) -> Optional[str]:
    provider = get_provider(url)
    if provider is None:
        return None
    return provider.get_code(url)


def get_aliases(url: str) -> List[str]:
    provider = get_provider(url)
    if provider is None:
        return []
    return provider.get_aliases(url)
