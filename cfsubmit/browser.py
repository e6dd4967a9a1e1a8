import logging
import webbrowser

logger = logging.getLogger(__name__)


class Browser:
    """Opens URLs in the user's default browser."""

    def open(self, url: str) -> bool:
        logger.debug("Opening `%s' in the default browser.", url)
        try:
            return webbrowser.open(url, new=2)
        except webbrowser.Error:
            logger.debug('Browser could not be launched.', exc_info=True)
            return False
