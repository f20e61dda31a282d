import io

import pytest
import structlog
from glass_solver.models.instance import Instance
from glass_solver.utils import (
    InstanceFormatError,
    configure_logging,
    ensure_logging,
    parse_instance,
    read_instance,
)


class TestParseInstance:
    """Test suite for instance parsing"""

    def test_parse(self):
        """Count line followed by capacity/target pairs"""
        instance = parse_instance("2\n3 0\n5 4\n")
        assert instance == Instance(capacities=(3, 5), targets=(0, 4))
        assert len(instance) == 2

    def test_any_whitespace(self):
        """Tokens can be split across lines and spaces freely"""
        assert parse_instance("3 6 0\t10\n0 15 5") == Instance((6, 10, 15), (0, 0, 5))

    def test_zero_capacity_dropped(self):
        """Glasses with capacity <= 0 are discarded with their target"""
        instance = parse_instance("3\n2 0\n0 0\n0 0\n")
        assert instance.capacities == (2,)
        assert instance.targets == (0,)

    def test_empty_count(self):
        """Zero glasses is a valid instance"""
        assert len(parse_instance("0\n")) == 0

    def test_read_from_stream(self):
        """Streams are read to the end"""
        assert read_instance(io.StringIO("1\n4 4\n")) == Instance((4,), (4,))

    @pytest.mark.parametrize("text", ["", "two\n", "2\n3 0\n5\n", "1\n3 x\n", "-1\n"])
    def test_malformed(self, text):
        """Empty, truncated or non-numeric input is rejected"""
        with pytest.raises(InstanceFormatError):
            parse_instance(text)


class TestInstance:
    """Test suite for the Instance model"""

    def test_from_pairs(self):
        """Negative and zero capacities are dropped"""
        instance = Instance.from_pairs([(3, 1), (-2, 0), (0, 0), (5, 5)])
        assert instance.capacities == (3, 5)
        assert instance.targets == (1, 5)

    def test_frozen(self):
        """Instances are immutable"""
        instance = Instance((3,), (0,))
        with pytest.raises(AttributeError):
            instance.capacities = (4,)


class TestConfigureLogging:
    """Test suite for logging setup"""

    def test_debug_hidden_by_default(self, capsys):
        """Debug events are filtered unless verbose"""
        configure_logging(verbose=False)
        structlog.get_logger().debug("hidden event")
        captured = capsys.readouterr()
        assert "hidden event" not in captured.out + captured.err

    def test_verbose_goes_to_stderr(self, capsys):
        """Verbose output goes to stderr, never stdout"""
        configure_logging(verbose=True)
        structlog.get_logger().debug("shown event", glasses=3)
        captured = capsys.readouterr()
        assert "shown event" in captured.err
        assert captured.out == ""
        configure_logging(verbose=False)


class TestEnsureLogging:
    """Test suite for the default logging setup"""

    def test_configures_when_unset(self, capsys):
        """Without prior configuration debug events are filtered"""
        structlog.reset_defaults()
        ensure_logging()
        assert structlog.is_configured()
        structlog.get_logger().debug("dispatch", solver="bfs")
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "dispatch" not in captured.err

    def test_keeps_existing_configuration(self, capsys):
        """An application's own configuration is left alone"""
        configure_logging(verbose=True)
        ensure_logging()
        structlog.get_logger().debug("kept event")
        assert "kept event" in capsys.readouterr().err
        configure_logging(verbose=False)
