import logging

# eg: '    0.42 s WARNING  | proplogic.boolalg.parser: could not parse ...'
DEFAULT_FORMAT = '{elapsed:8.2f} s {warningname}| {name}: {message}'

# adds two fields for the format string:
#   elapsed:     time since startup, relativeCreated / divider (seconds by default)
#   warningname: padded level name for warnings and worse, otherwise empty
class RelativeTimeFormatter(logging.Formatter):
    def __init__(self, fmt=None, datefmt=None, style='%', divider=1000):
        super().__init__(fmt, datefmt, style)
        self.divider = divider

    def format(self, record):
        record.elapsed = record.relativeCreated / self.divider
        record.warningname = f'{record.levelname:<9s}' if record.levelno >= logging.WARNING else ''
        return super().format(record)

# logfile: path to log to instead of stderr
def setup_logger(format=DEFAULT_FORMAT, timedivider=1000, loglevel=logging.WARNING, logfile=None):
    logging.basicConfig(level=loglevel, filename=logfile, force=True)
    logging.root.handlers[0].setFormatter(RelativeTimeFormatter(format, style='{', divider=timedivider))
