# Path: tests/conftest.py
"""
Pytest Configuration and Shared Fixtures for readidx

Provides common test fixtures used across all test modules.
"""

import os
import sys
import tempfile
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest

# Make tests/fixtures importable as 'fixtures'
TESTS_ROOT = Path(__file__).parent
sys.path.insert(0, str(TESTS_ROOT))


# ==============================================================================
# ENVIRONMENT FIXTURES
# ==============================================================================

@pytest.fixture
def mock_env_vars(temp_dir):
    """Provide mock environment variables for testing."""
    env_vars = {
        'READIDX_ENVIRONMENT': 'test',
        'READIDX_DEBUG': 'true',

        # Logging
        'READIDX_LOG_DIR': str(temp_dir / 'logs'),
        'READIDX_LOG_LEVEL': 'DEBUG',
        'READIDX_LOG_FORMAT': 'json',

        # Taxonomy resolution
        'READIDX_TAXONOMY_CACHE_DIR': str(temp_dir / 'cache'),
        'READIDX_HTTP_TIMEOUT': '5',
        'READIDX_HTTP_MAX_RETRIES': '2',

        # Upload storage
        'READIDX_STORAGE_DIR': str(temp_dir / 'storage'),
        'READIDX_DEFAULT_UNIT': 'IDR',

        # Database
        'READIDX_DB_DRIVER': 'postgresql',
        'READIDX_DB_HOST': 'db.local',
        'READIDX_DB_PORT': '5433',
        'READIDX_DB_NAME': 'readidx_test',
        'READIDX_DB_USER': 'test_user',
        'READIDX_DB_PASSWORD': 'test_pass',
    }

    with patch.dict(os.environ, env_vars, clear=False):
        os.environ.pop('READIDX_DATABASE_URL', None)
        yield env_vars


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test files."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


# ==============================================================================
# MOCK FIXTURES
# ==============================================================================

@pytest.fixture
def mock_config(temp_dir):
    """Create a mock ConfigLoader backed by temp paths."""
    values = {
        'environment': 'test',
        'debug': False,
        'log_dir': temp_dir / 'logs',
        'log_level': 'DEBUG',
        'log_format': 'text',
        'taxonomy_cache_dir': temp_dir / 'cache',
        'http_timeout': 5,
        'http_max_retries': 1,
        'http_user_agent': 'readidx-test/1.0',
        'storage_dir': temp_dir / 'storage',
        'default_unit': 'IDR',
    }
    config = MagicMock()
    config.get.side_effect = lambda key, default=None: values.get(key, default)
    return config


@pytest.fixture
def fake_fetcher():
    """Remote fetcher stand-in; tests set fetch.return_value or side_effect."""
    fetcher = MagicMock()
    fetcher.fetch.return_value = (b'', {})
    return fetcher


# ==============================================================================
# DATABASE FIXTURES
# ==============================================================================

@pytest.fixture
def in_memory_db():
    """Initialize an in-memory SQLite database with all tables."""
    from readidx.database.models.base import (
        initialize_engine,
        create_all_tables,
        reset_engine,
    )

    reset_engine()
    initialize_engine(':memory:')
    create_all_tables()
    yield
    reset_engine()


@pytest.fixture
def db_session(in_memory_db):
    """Create in-memory database session for testing."""
    from readidx.database.models.base import session_scope

    with session_scope() as session:
        yield session


# ==============================================================================
# UTILITY FIXTURES
# ==============================================================================

@pytest.fixture
def capture_logs():
    """Capture log output for testing."""
    import logging
    from io import StringIO

    log_capture = StringIO()
    handler = logging.StreamHandler(log_capture)
    handler.setLevel(logging.DEBUG)

    root_logger = logging.getLogger()
    previous_level = root_logger.level
    root_logger.setLevel(logging.DEBUG)
    root_logger.addHandler(handler)

    yield log_capture

    root_logger.removeHandler(handler)
    root_logger.setLevel(previous_level)


@pytest.fixture
def restore_root_logging():
    """Restore root logger handlers replaced by setup_ipo_logging."""
    import logging

    root_logger = logging.getLogger()
    saved_handlers = list(root_logger.handlers)
    saved_level = root_logger.level
    yield
    for handler in root_logger.handlers:
        if handler not in saved_handlers:
            handler.close()
    root_logger.handlers[:] = saved_handlers
    root_logger.setLevel(saved_level)


@pytest.fixture
def reset_singletons():
    """Reset singleton instances between tests."""
    from readidx.config_loader import ConfigLoader

    ConfigLoader._instance = None
    ConfigLoader._initialized = False
    yield
    ConfigLoader._instance = None
    ConfigLoader._initialized = False
