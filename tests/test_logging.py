"""Tests for subcmd logging functionality."""

import logging

import pytest
import structlog

from subcmd.logging import (
    configure_logging,
    filter_context_by_prefix,
    format_context_yaml,
    get_logger,
    strip_prefixes_from_keys,
)


class TestFormatContextYaml:
    """Tests for format_context_yaml function."""

    def test_format_context_yaml_empty(self) -> None:
        """Test formatting an empty event dict."""
        result = format_context_yaml({}, indent=0)
        assert result == ''

    def test_format_context_yaml_with_data(self) -> None:
        """Test formatting an event dict with data."""
        event_dict = {'name': 'build', 'status': 0}
        result = format_context_yaml(event_dict, indent=2)

        assert 'name: build' in result
        assert 'status: 0' in result
        assert result.startswith('  ')  # Should have indentation

    def test_format_context_yaml_nested(self) -> None:
        """Test formatting nested event dict."""
        event_dict = {
            'name': 'buld',
            'known': ['build', 'clean'],
        }
        result = format_context_yaml(event_dict, indent=0)

        assert 'name: buld' in result
        assert '- build' in result


class TestFilterContextByPrefix:
    """Tests for filter_context_by_prefix function."""

    def test_filter_verbose_prefix(self) -> None:
        """Test filtering _verbose_ prefix in non-verbose mode."""
        event_dict = {
            '_verbose_known': ['build'],
            'name': 'buld',
            '_debug_argv': ['buld'],
            'best_guess': 'build',
        }

        result = filter_context_by_prefix(event_dict)

        assert result == {'name': 'buld', 'best_guess': 'build'}

    def test_filter_no_prefixes(self) -> None:
        """Test with keys that don't have prefixes to filter."""
        event_dict = {
            'key1': 'value1',
            'key2': 'value2',
        }

        assert filter_context_by_prefix(event_dict) == event_dict


class TestStripPrefixesFromKeys:
    """Tests for strip_prefixes_from_keys function."""

    def test_strip_prefixes(self) -> None:
        """Test stripping every verbosity prefix."""
        event_dict = {
            '_verbose_config': {'color': 'auto'},
            'normal_key': 'value',
            '_debug_other': 'data',
            '_perf_timing': 'info',
        }

        result = strip_prefixes_from_keys(event_dict)

        assert result == {
            'config': {'color': 'auto'},
            'normal_key': 'value',
            'other': 'data',
            'timing': 'info',
        }

    def test_no_prefix_to_strip(self) -> None:
        """Test with keys that don't have prefixes to strip."""
        event_dict = {
            'key1': 'value1',
            'key2': 'value2',
        }

        assert strip_prefixes_from_keys(event_dict) == event_dict


class TestConfigureLogging:
    """Tests for configure_logging function."""

    def test_configure_logging_verbose(self) -> None:
        """Test configuring logging with verbose=True."""
        configure_logging(verbose=True)
        assert logging.getLogger().level == logging.DEBUG

    def test_configure_logging_non_verbose(self) -> None:
        """Test configuring logging with verbose=False."""
        configure_logging(verbose=False)
        assert logging.getLogger().level == logging.INFO


class TestCliRenderer:
    """Tests for the rich console renderer."""

    def test_debug_events_hidden_by_default(self, capsys: pytest.CaptureFixture) -> None:
        """Test that debug events are filtered at INFO level."""
        configure_logging(verbose=False)
        get_logger('tests.renderer').debug('subcommand_matched', name='build')
        assert capsys.readouterr().err == ''

    def test_verbose_events_rendered(self, capsys: pytest.CaptureFixture) -> None:
        """Test that debug events and their context reach stderr in verbose mode."""
        configure_logging(verbose=True)
        get_logger('tests.renderer').debug('subcommand_not_found', name='buld', _verbose_known=['build'])
        err = capsys.readouterr().err
        assert 'subcommand_not_found' in err
        assert 'buld' in err
        assert 'known' in err
        assert '_verbose_known' not in err


class TestGetLogger:
    """Tests for get_logger function."""

    def test_get_logger_returns_logger(self) -> None:
        """Test that get_logger returns a logger instance."""
        logger = get_logger('test_module')
        assert hasattr(logger, 'info')
        assert hasattr(logger, 'error')
        assert hasattr(logger, 'debug')

    def test_works_without_structlog_configuration(
        self,
        capsys: pytest.CaptureFixture,
    ) -> None:
        """Test that library loggers follow the stdlib level even when nothing is configured."""
        structlog.reset_defaults()
        logging.getLogger().setLevel(logging.WARNING)

        get_logger('tests.unconfigured').debug('subcommand_matched', name='build')

        captured = capsys.readouterr()
        assert captured.out == ''
        assert captured.err == ''
        assert not structlog.is_configured()
