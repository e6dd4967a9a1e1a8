import logging

import pyperclip

logger = logging.getLogger(__name__)


class ClipboardError(Exception):
    pass


class Clipboard:
    """Plain text access to the system clipboard."""

    def copy(self, text: str):
        logger.debug('Copying %d characters to the clipboard.', len(text))
        try:
            pyperclip.copy(text)
        except pyperclip.PyperclipException as e:
            raise ClipboardError(str(e)) from e

    def paste(self) -> str:
        try:
            return pyperclip.paste()
        except pyperclip.PyperclipException as e:
            raise ClipboardError(str(e)) from e
