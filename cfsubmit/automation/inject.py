import dataclasses
import sys
import time

import pyautogui


@dataclasses.dataclass()
class Options:
    startup_delay: float = 2.5
    step_delay: float = 0.25
    focus_advances: int = 2


def parse_opts() -> Options:
    options = Options()
    for opt in sys.argv[1:]:
        if opt.startswith('-d'):
            options.startup_delay = float(opt[2:])
        elif opt.startswith('-s'):
            options.step_delay = float(opt[2:])
        elif opt.startswith('-n'):
            options.focus_advances = int(opt[2:])
        else:
            print(f'Unknown option {opt}', file=sys.stderr)
            sys.exit(2)
    return options


def main():
    options = parse_opts()
    modifier = 'command' if sys.platform == 'darwin' else 'ctrl'

    time.sleep(options.startup_delay)
    pyautogui.hotkey(modifier, 'a')
    time.sleep(options.step_delay)
    pyautogui.hotkey(modifier, 'v')
    time.sleep(options.step_delay)
    pyautogui.press('tab', presses=options.focus_advances, interval=0.05)
    time.sleep(options.step_delay)
    pyautogui.press('enter')


if __name__ == '__main__':
    main()
