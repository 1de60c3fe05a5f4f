import logging

logger = logging.getLogger("quantica")
logger.addHandler(logging.NullHandler())


def GetLogger():
    return logger


def Info(message):
    logger.info(message)


def Debug(message):
    logger.debug(message)


def SetLoggingLevel(level):
    logger.setLevel(level)
