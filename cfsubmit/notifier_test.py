from cfsubmit.notifier import Notifier
from cfsubmit.testing_utils import RecordingMessageLogger, quiet_console


def test_notifier_gated_by_setting():
    events = []
    notifier = Notifier(enabled=False, console=quiet_console())
    notifier.add_listener(events.append)

    assert not notifier.notify('Contest 1 Problem A', 'hello')
    assert events == []

    notifier.enabled = True
    assert notifier.notify('Contest 1 Problem A', 'hello')
    assert [(e.headline, e.body) for e in events] == [('Contest 1 Problem A', 'hello')]


def test_notifier_renders_markup_literally():
    console = quiet_console()
    notifier = Notifier(console=console)

    notifier.notify('Contest [1] Problem [b]A', 'body with [red]brackets')

    output = console.file.getvalue()
    assert '[red]brackets' in output


def test_message_logger_levels():
    log = RecordingMessageLogger()

    log.info('CF Submit', 'one')
    log.warn('CF Submit', 'two')
    log.error('CF Submit', 'three')

    assert log.levels() == ['info', 'warn', 'error']
    output = log.console.file.getvalue()
    assert 'one' in output and 'two' in output and 'three' in output
