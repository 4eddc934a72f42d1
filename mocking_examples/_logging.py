import logging


logger = logging.getLogger(__package__)
logger.setLevel(logging.DEBUG)
handler = None


def install_std_handler(settings):
    global handler
    if handler:
        logger.removeHandler(handler)

    level = settings.get('debug', False)

    if level is False:
        formatter = LevelPrefixFormatter(
            fmt="mocking_examples: {LEVELNAME}{message}",
            style='{')
        handler = logging.StreamHandler()
        handler.setFormatter(formatter)
        handler.setLevel(logging.WARNING)

        logger.addHandler(handler)
        logger.setLevel(logging.WARNING)
    else:
        if level is True:
            level = logging.DEBUG
        else:
            level = logging.getLevelName(level.upper())

        formatter = LevelPrefixFormatter(
            fmt="mocking_examples: {filename}:{lineno}: {LEVELNAME}{message}",
            style='{')
        handler = logging.StreamHandler()
        handler.setFormatter(formatter)
        handler.setLevel(level)

        logger.addHandler(handler)
        logger.setLevel(min(logging.WARNING, level))

    return handler


def uninstall_std_handler():
    global handler
    if handler:
        logger.removeHandler(handler)
        handler = None


class LevelPrefixFormatter(logging.Formatter):
    def format(self, record):
        levelno = record.levelno
        if levelno > logging.INFO:
            record.LEVELNAME = record.levelname + ': '
        else:
            record.LEVELNAME = ''

        return super().format(record)
