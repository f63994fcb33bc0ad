import logging
import sys

# ANSI colors per level name
COLORS = {
    'TRACE': '\033[90m',     # Gray
    'DEBUG': '\033[36m',     # Cyan
    'INFO': '\033[32m',      # Green
    'WARNING': '\033[33m',   # Yellow
    'ERROR': '\033[31m',     # Red
    'CRITICAL': '\033[35m',  # Magenta
    'RESET': '\033[0m',
}


class ColoredFormatter(logging.Formatter):
    def format(self, record):
        color = COLORS.get(record.levelname, '')
        reset = COLORS['RESET']
        # color a copy so other handlers (e.g. pytest caplog) see the plain level name
        record = logging.makeLogRecord(record.__dict__)
        record.levelname = f"{color}{record.levelname: <8}{reset}"
        return super().format(record)


TRACE = 5  # Below DEBUG, per-label sizing

logging.addLevelName(TRACE, 'TRACE')


def trace(self, message, *args, **kwargs):
    if self.isEnabledFor(TRACE):
        self._log(TRACE, message, args, stacklevel=2, **kwargs)


logging.Logger.trace = trace

handler = logging.StreamHandler(sys.stderr)
handler.setFormatter(ColoredFormatter('%(levelname)s | %(message)s'))

logger = logging.getLogger('treeplot')
logger.addHandler(handler)
logger.setLevel('INFO')


def set_verbosity(level):
    """Set log level and format based on verbosity (0=INFO, 1=DEBUG, 2+=TRACE)."""
    if level >= 1:
        # Verbose format with file:line
        handler.setFormatter(ColoredFormatter(
            '%(levelname)s | %(filename)s:%(lineno)d | %(message)s'
        ))
    if level == 1:
        logger.setLevel('DEBUG')
    elif level >= 2:
        logger.setLevel('TRACE')
