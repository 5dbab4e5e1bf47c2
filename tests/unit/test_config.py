"""
Unit tests for process configuration and the command line.
"""
import logging

import pytest

from stormcast.__main__ import build_parser
from stormcast.config import Config, parse_bind, parse_log_level


class TestConfig:

    def test_defaults(self):
        config = Config.from_env({})
        assert config.bind == "0.0.0.0:8080"
        assert config.address == ("0.0.0.0", 8080)
        assert config.level == logging.INFO

    def test_from_env(self):
        config = Config.from_env({"STORMCAST_BIND": "127.0.0.1:9100", "STORMCAST_LOG_LEVEL": "debug"})
        assert config.address == ("127.0.0.1", 9100)
        assert config.level == logging.DEBUG

    def test_parse_bind(self):
        assert parse_bind(":8080") == ("", 8080)
        assert parse_bind("[::1]:9000") == ("::1", 9000)

    @pytest.mark.parametrize("bind", ["8080", "localhost", "host:abc", "host:70000", "host:"])
    def test_parse_bind_rejects(self, bind):
        with pytest.raises(ValueError):
            parse_bind(bind)

    def test_parse_log_level(self):
        assert parse_log_level("WARNING") == logging.WARNING
        assert parse_log_level(" error ") == logging.ERROR
        with pytest.raises(ValueError):
            parse_log_level("chatty")


class TestCommandLine:

    def test_env_supplies_defaults(self):
        parser = build_parser(Config(bind="127.0.0.1:9999", log_level="warning"))
        args = parser.parse_args([])
        assert args.bind == "127.0.0.1:9999"
        assert args.log_level == "warning"
        assert args.port is None

    def test_flags_override(self):
        parser = build_parser(Config())
        args = parser.parse_args(["--bind", "127.0.0.1:1234", "-p", "4321", "--log-level", "debug"])
        assert args.bind == "127.0.0.1:1234"
        assert args.port == 4321
        assert args.log_level == "debug"

    def test_bad_bind_is_usage_error(self):
        from stormcast.__main__ import main

        with pytest.raises(SystemExit) as exc_info:
            main(["--bind", "nonsense"])
        assert exc_info.value.code == 2
