import logging

from proplogic.util import RelativeTimeFormatter, setup_logger


def make_record(level, message):
    return logging.LogRecord('proplogic.test', level, __file__, 1, message, None, None)


def test_warning_name_only_for_warnings():
    formatter = RelativeTimeFormatter('{warningname}{message}', style='{')
    assert formatter.format(make_record(logging.WARNING, 'hello')) == 'WARNING  hello'
    assert formatter.format(make_record(logging.INFO, 'hello')) == 'hello'


def test_setup_logger_writes_logfile(tmp_path):
    logfile = tmp_path / 'proplogic.log'
    level = logging.root.level
    setup_logger(loglevel=logging.DEBUG, logfile=logfile)
    try:
        logging.getLogger('proplogic.test').debug('generated %s', 'A \\and B')
    finally:
        handler = logging.root.handlers[0]
        logging.root.removeHandler(handler)
        handler.close()
        logging.root.setLevel(level)

    assert '| proplogic.test: generated A \\and B' in logfile.read_text()


def test_elapsed_does_not_touch_the_record():
    record = make_record(logging.INFO, 'hello')
    created = record.relativeCreated
    formatter = RelativeTimeFormatter('{elapsed:.6f}', style='{')

    first = formatter.format(record)
    assert formatter.format(record) == first
    assert record.relativeCreated == created
    assert first == f'{created / 1000:.6f}'

    formatter = RelativeTimeFormatter('{elapsed:.6f}', style='{', divider=1)
    assert formatter.format(record) == f'{created:.6f}'
