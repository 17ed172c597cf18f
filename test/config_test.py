import logging
import os
import tempfile
import unittest
from unittest import mock

from tcxread import Config, read_file
from tcxread.logger import configure_logging, get_logger

from test_vars import POLAR_RUN_FILE, TEST_CONFIG_FILE


class ConfigTestCase(unittest.TestCase):

    def setUp(self):
        self.tmp_dir = tempfile.TemporaryDirectory()
        self.log_file = os.path.join(self.tmp_dir.name, 'test.log')

    def tearDown(self):
        self.tmp_dir.cleanup()

    def test_01_defaults(self):
        config = Config()
        self.assertFalse(config.huge_tree)
        self.assertIsNone(config.console_level)
        self.assertIsNone(config.file_level)
        self.assertIsNone(config.log_file)

    def test_02_ini_file(self):
        config = Config(TEST_CONFIG_FILE, log_file=self.log_file)
        self.assertTrue(config.huge_tree)
        self.assertEqual(config.console_level, logging.WARNING)
        self.assertEqual(config.file_level, logging.DEBUG)
        self.assertEqual(config.log_file, self.log_file)

    def test_03_default_log_file(self):
        """Without a log file, logs go to the user's log directory."""
        log_dir = os.path.join(self.tmp_dir.name, 'logs')
        with mock.patch('tcxread.config.appdirs.user_log_dir', return_value=log_dir):
            config = Config(TEST_CONFIG_FILE)
        self.assertEqual(config.log_file, os.path.join(log_dir, 'tcxread.log'))
        self.assertTrue(os.path.isdir(log_dir))

    def test_04_kwargs_override_file(self):
        config = Config(TEST_CONFIG_FILE, huge_tree=False, console_level='info', file_level=None)
        self.assertFalse(config.huge_tree)
        self.assertEqual(config.console_level, logging.INFO)
        self.assertIsNone(config.file_level)
        self.assertIsNone(config.log_file)

    def test_05_levels(self):
        self.assertEqual(Config(console_level=logging.ERROR).console_level, logging.ERROR)
        self.assertEqual(Config(console_level='10').console_level, 10)
        with self.assertRaises(ValueError):
            Config(console_level='LOUD')

    def test_06_missing_file(self):
        with self.assertRaises(FileNotFoundError):
            Config(os.path.join(self.tmp_dir.name, 'missing.ini'))

    def test_07_equality(self):
        self.assertEqual(Config(TEST_CONFIG_FILE, log_file=self.log_file),
                         Config(TEST_CONFIG_FILE, log_file=self.log_file))
        self.assertNotEqual(Config(), Config(huge_tree=True))

    def test_08_read_with_config(self):
        config = Config(huge_tree=True)
        tc_db = read_file(POLAR_RUN_FILE, config)
        self.assertEqual(tc_db, read_file(POLAR_RUN_FILE))


class LoggingTestCase(unittest.TestCase):

    def setUp(self):
        self.tmp_dir = tempfile.TemporaryDirectory()
        self.log_file = os.path.join(self.tmp_dir.name, 'test.log')
        self.package_logger = logging.getLogger('tcxread')
        self.old_level = self.package_logger.level
        self.old_handlers = list(self.package_logger.handlers)
        self.old_root_handlers = list(logging.getLogger().handlers)

    def tearDown(self):
        for handler in self.package_logger.handlers:
            if handler not in self.old_handlers:
                handler.close()
        self.package_logger.handlers = self.old_handlers
        self.package_logger.setLevel(self.old_level)
        self.tmp_dir.cleanup()

    def test_01_no_levels(self):
        self.assertIsNone(configure_logging(Config()))
        with self.assertRaises(ValueError):
            get_logger()

    def test_02_named_loggers(self):
        """Named loggers sit under the package logger."""
        logger = get_logger('parse')
        self.assertEqual(logger.name, 'tcxread.parse')
        self.assertIs(logger.parent, self.package_logger)

    def test_03_configure(self):
        config = Config(TEST_CONFIG_FILE, log_file=self.log_file)
        logger = configure_logging(config)
        self.assertIs(logger, self.package_logger)
        self.assertEqual(logger.level, logging.DEBUG)
        file_handlers = [h for h in logger.handlers if isinstance(h, logging.FileHandler)]
        self.assertEqual(len(file_handlers), 1)
        self.assertEqual(file_handlers[0].level, logging.DEBUG)
        # The root logger is left to the application.
        self.assertEqual(logging.getLogger().handlers, self.old_root_handlers)

        read_file(POLAR_RUN_FILE, config)
        for handler in file_handlers:
            handler.flush()
        with open(self.log_file) as f:
            log_text = f.read()
        self.assertIn('tcxread.parse - INFO - Read TCX data with 1 activities.', log_text)


if __name__ == '__main__':
    unittest.main()
