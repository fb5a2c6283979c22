from logging import (
    ERROR,
    WARN,
    Formatter,
    LogRecord,
    StreamHandler,
    captureWarnings,
    getLogger,
)
from sys import stdout

log = getLogger(__package__)


class _Handler(StreamHandler):
    def handle(self, record: LogRecord) -> bool:
        if record.levelno <= WARN:
            return super().handle(record)
        else:
            return False


_fmt = Formatter("%(name)s %(levelname)s %(message)s")
_log = _Handler(stream=stdout)
_err = StreamHandler()
_err.setLevel(ERROR)

for handler in (_log, _err):
    handler.setFormatter(_fmt)
    log.addHandler(handler)

log.setLevel(WARN)
captureWarnings(True)


def set_level(level: int) -> None:
    log.setLevel(level)
