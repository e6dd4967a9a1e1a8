import logging
import sys
from typing import List, Optional

from cfsubmit.automation.native import PyAutoGuiStrategy
from cfsubmit.automation.scripts import (
    AppleScriptStrategy,
    PowerShellStrategy,
    XdotoolStrategy,
)
from cfsubmit.automation.strategy import (
    AutomationKind,
    AutomationSettings,
    AutomationStrategy,
    NoAutomation,
)

logger = logging.getLogger(__name__)

# Script-based strategies come first: they need nothing but a system tool.
ALL_STRATEGIES: List[AutomationStrategy] = [
    XdotoolStrategy(),
    AppleScriptStrategy(),
    PowerShellStrategy(),
    PyAutoGuiStrategy(),
    NoAutomation(),
]


def get_strategy(key: str) -> Optional[AutomationStrategy]:
    for strategy in ALL_STRATEGIES:
        if strategy.key() == key:
            return strategy
    return None


def get_candidate_strategies(
    platform: Optional[str] = None,
) -> List[AutomationStrategy]:
    platform = platform or sys.platform
    return [s for s in ALL_STRATEGIES if s.supports_platform(platform)]


def detect_strategy(
    forced: Optional[str] = None, platform: Optional[str] = None
) -> AutomationStrategy:
    if forced:
        strategy = get_strategy(forced)
        if strategy is None:
            logger.warning("Unknown automation strategy `%s'.", forced)
            return NoAutomation()
        if not strategy.is_available():
            logger.warning("Automation strategy `%s' is not available.", forced)
            return NoAutomation()
        return strategy

    for strategy in get_candidate_strategies(platform):
        if strategy.is_available():
            logger.debug('Detected automation strategy %s.', strategy.describe())
            return strategy
    return NoAutomation()


__all__ = [
    'ALL_STRATEGIES',
    'AutomationKind',
    'AutomationSettings',
    'AutomationStrategy',
    'NoAutomation',
    'detect_strategy',
    'get_candidate_strategies',
    'get_strategy',
]
