import logging

LOG_FILE_NAME = '/tmp/pqueue.log'
LOGGING_LEVEL = logging.INFO


class Logger:
    __instance = None

    @staticmethod
    def get_instance():
        if Logger.__instance is None:
            return Logger()
        return Logger.__instance

    # Change where the log goes and how verbose it is. Takes effect right
    # away if the log is already open.
    @staticmethod
    def configure(log_file=None, level=None):
        global LOG_FILE_NAME, LOGGING_LEVEL
        if log_file:
            LOG_FILE_NAME = log_file
        if level:
            # setLevel accepts both names and numbers
            LOGGING_LEVEL = level.upper() if isinstance(level, str) else level
        if Logger.__instance is not None:
            Logger.__instance._open()

    def __init__(self):
        if Logger.__instance is not None:
            raise Exception("Invalid re-instantiation of Logger")
        self._logger = logging.getLogger('pqueue')
        self._handler = None
        self._open()
        Logger.__instance = self

    def _open(self):
        if self._handler is not None:
            self._logger.removeHandler(self._handler)
            self._handler.close()
        self._handler = logging.FileHandler(LOG_FILE_NAME)
        self._handler.setFormatter(
            logging.Formatter('%(asctime)s %(levelname)-8s %(message)s',
                              datefmt='%Y-%m-%d %H:%M:%S'))
        self._logger.addHandler(self._handler)
        self._logger.setLevel(LOGGING_LEVEL)

    def debug(self, msg):
        self._logger.debug(msg)

    def info(self, msg):
        self._logger.info(msg)

    def warning(self, msg):
        self._logger.warning(msg)

    def error(self, msg):
        self._logger.error(msg)


def logger():
    return Logger.get_instance()
