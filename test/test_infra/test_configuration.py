import os
import tempfile
import textwrap
import unittest

from usercache.infra.configuration import DEFAULT_CONFIG_FILENAME, Config


class TestConfiguration(unittest.TestCase):
    def setUp(self):
        Config._instance = None

        # hermetic config so the repository's config/config.ini is not needed
        self.temp_config = tempfile.NamedTemporaryFile(
            mode="w", delete=False, suffix=".ini"
        )
        self.config_path = self.temp_config.name
        self.temp_config.write(
            textwrap.dedent(
                """
                [logging]
                level = debug
                log_dir = /tmp/logs
                ecs_compatible = true

                [demo]
                production_users = Ada, Grace
                counts = 1,2,3
                single = only
                """
            )
        )
        self.temp_config.close()

    def tearDown(self):
        Config._instance = None
        try:
            os.remove(self.config_path)
        except OSError:
            pass

    def test_config_is_singleton(self):
        cfg = Config(config_filename=self.config_path)
        self.assertIs(cfg, Config(config_filename=self.config_path))

    def test_log_level_is_normalised(self):
        cfg = Config(config_filename=self.config_path)
        self.assertEqual(cfg.get("logging", "level"), "DEBUG")

    def test_unknown_log_level_raises(self):
        cfg = Config(config_filename=self.config_path)
        cfg.set("logging", "level", "chatty")
        with self.assertRaises(KeyError):
            cfg.get("logging", "level")

    def test_comma_separated_values_become_lists(self):
        cfg = Config(config_filename=self.config_path)
        self.assertEqual(cfg.get("demo", "production_users"), ["Ada", "Grace"])
        self.assertEqual(cfg.get("demo", "counts"), [1, 2, 3])
        self.assertEqual(cfg.get("logging", "log_dir"), "/tmp/logs")

    def test_missing_key_raises_key_error(self):
        cfg = Config(config_filename=self.config_path)
        with self.assertRaises(KeyError):
            cfg.get("demo", "missing")
        with self.assertRaises(KeyError):
            cfg.get("nosection", "missing")

    def test_getarray_single_value(self):
        cfg = Config(config_filename=self.config_path)
        self.assertEqual(cfg.getarray("demo", "single"), ["only"])
        self.assertEqual(cfg.getarray("demo", "counts", dtype=str), ["1", "2", "3"])

    def test_set_and_get_methods(self):
        cfg = Config(config_filename=self.config_path)

        cfg.setint("demo", "size", 123)
        self.assertEqual(cfg.getint("demo", "size"), 123)

        with self.assertLogs("usercache.infra.configuration", level="WARNING"):
            cfg.set("demo", "foo", 7)
        self.assertEqual(cfg.getstr("demo", "foo"), "7")

        cfg.setarray("demo", "arr", ["1", "2", "3"])
        self.assertEqual(cfg.getarray("demo", "arr", dtype=int), [1, 2, 3])

        cfg.setarray("demo", "one", ["x"])
        self.assertEqual(cfg.getarray("demo", "one"), ["x"])

        cfg.setboolean("demo", "flag", False)
        self.assertFalse(cfg.getboolean("demo", "flag"))
        self.assertTrue(cfg.getboolean("logging", "ecs_compatible"))
        self.assertTrue(cfg.has_option("demo", "flag"))

    def test_default_config_file_is_readable(self):
        cfg = Config()
        self.assertEqual(cfg.config_filename, DEFAULT_CONFIG_FILENAME)
        self.assertEqual(
            cfg.getarray("demo", "mock_users"), ["MockUser1", "MockUser2", "MockUser3"]
        )
        self.assertEqual(cfg.get("logging", "level"), "INFO")


if __name__ == "__main__":
    unittest.main()
