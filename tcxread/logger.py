import logging
from typing import Optional

from tcxread.config import Config
from tcxread.metadata import APP_NAME

FILE_FORMAT = logging.Formatter(fmt='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
                                datefmt='%Y-%m-%d %H:%M:%S')
CONSOLE_FORMAT = logging.Formatter('%(name)s - %(levelname)s - %(message)s')


def get_logger(name: Optional[str] = None, file_level: Optional[int] = None,
               console_level: Optional[int] = None, config: Optional[Config] = None,
               log_file: Optional[str] = None) -> logging.Logger:
    """Return an appropriately configured Logger instance.

    :param name: The name of the logger, relative to the package logger (so "parse" gives "tcxread.parse"). If not
        specified, this function returns the package logger itself, which is then configured using `config`,
        `file_level` and/or `console_level`. Named loggers propagate to the package logger and share its
        configuration.
    :param file_level: What severity level to log to the log file.
    :param console_level: What severity level to log to the console.
    :param config: A Config object providing the log file, if `log_file` is not given.
    :param log_file: Path to the file to log to.

    :return: A logging.Logger object.
    """

    package_logger = logging.getLogger(APP_NAME)
    if name is not None:
        return package_logger.getChild(name)

    levels = [level for level in (file_level, console_level) if level is not None]
    if not levels:
        raise ValueError('At least one of `file_level` and `console_level` must be set when configuring the '
                         f'"{APP_NAME}" logger.')
    package_logger.setLevel(min(levels))

    if (log_file is None) and (config is not None):
        log_file = config.log_file

    if (file_level is not None) and (log_file is not None):
        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(file_level)
        file_handler.setFormatter(FILE_FORMAT)
        package_logger.addHandler(file_handler)
        package_logger.debug(f'Logging to file "{log_file}".')

    if console_level is not None:
        console_handler = logging.StreamHandler()
        console_handler.setLevel(console_level)
        console_handler.setFormatter(CONSOLE_FORMAT)
        package_logger.addHandler(console_handler)

    return package_logger


def configure_logging(config: Config) -> Optional[logging.Logger]:
    """Configure the package logger from the [logging] section of a Config.
    Return None (and leave logging alone) if no levels are configured.
    """
    if (config.file_level is None) and (config.console_level is None):
        return None
    return get_logger(file_level=config.file_level, console_level=config.console_level, config=config)
