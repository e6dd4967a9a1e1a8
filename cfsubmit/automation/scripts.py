import os
from typing import List

from cfsubmit.automation.strategy import AutomationSettings, ExecutableStrategy


def _ms(seconds: float) -> int:
    return int(round(seconds * 1000))


class XdotoolStrategy(ExecutableStrategy):
    platforms = ('linux', 'freebsd', 'openbsd')
    executables = ('xdotool',)

    def key(self) -> str:
        return 'xdotool'

    def is_available(self) -> bool:
        # xdotool talks to an X server; it cannot drive pure Wayland sessions.
        if not os.environ.get('DISPLAY'):
            return False
        return super().is_available()

    def build_command(self, settings: AutomationSettings) -> List[str]:
        step = f'{settings.step_delay:.3f}'
        keys = ['ctrl+a', 'ctrl+v']
        if settings.focus_advances > 0:
            keys.append(' '.join(['Tab'] * settings.focus_advances))
        keys.append('Return')

        command = [self.get_executable(), 'sleep', f'{settings.startup_delay:.3f}']
        for i, key in enumerate(keys):
            if i > 0:
                command.extend(['sleep', step])
            command.extend(['key', '--clearmodifiers', *key.split()])
        return command


class AppleScriptStrategy(ExecutableStrategy):
    platforms = ('darwin',)
    executables = ('osascript',)

    def key(self) -> str:
        return 'osascript'

    def get_script(self, settings: AutomationSettings) -> List[str]:
        step = f'{settings.step_delay:.3f}'
        return [
            f'delay {settings.startup_delay:.3f}',
            'tell application "System Events"',
            'keystroke "a" using command down',
            f'delay {step}',
            'keystroke "v" using command down',
            f'delay {step}',
            *(['key code 48'] * settings.focus_advances),  # Tab
            f'delay {step}',
            'key code 36',  # Return
            'end tell',
        ]

    def build_command(self, settings: AutomationSettings) -> List[str]:
        command = [self.get_executable()]
        for line in self.get_script(settings):
            command.extend(['-e', line])
        return command


class PowerShellStrategy(ExecutableStrategy):
    platforms = ('win32', 'cygwin')
    executables = ('powershell', 'pwsh')

    def key(self) -> str:
        return 'powershell'

    def get_script(self, settings: AutomationSettings) -> str:
        step = _ms(settings.step_delay)
        tabs = '{TAB}' * settings.focus_advances
        lines = [
            'Add-Type -AssemblyName System.Windows.Forms',
            f'Start-Sleep -Milliseconds {_ms(settings.startup_delay)}',
            "[System.Windows.Forms.SendKeys]::SendWait('^a')",
            f'Start-Sleep -Milliseconds {step}',
            "[System.Windows.Forms.SendKeys]::SendWait('^v')",
            f'Start-Sleep -Milliseconds {step}',
            f"[System.Windows.Forms.SendKeys]::SendWait('{tabs}')",
            f'Start-Sleep -Milliseconds {step}',
            "[System.Windows.Forms.SendKeys]::SendWait('{ENTER}')",
        ]
        return '; '.join(lines)

    def build_command(self, settings: AutomationSettings) -> List[str]:
        return [
            self.get_executable(),
            '-NoProfile',
            '-NonInteractive',
            '-Command',
            self.get_script(settings),
        ]
