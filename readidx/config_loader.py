# Path: readidx/config_loader.py
"""
Configuration Loader for readidx

Loads configuration from .env file for the XBRL import system.
Singleton pattern ensures consistent configuration across all components.

All configuration comes from environment variables; every key has a
default so the importer runs from a bare checkout.
"""

import os
from typing import Optional, Any
from pathlib import Path
from dotenv import load_dotenv


# ==============================================================================
# DEFAULT CONFIGURATION VALUES
# ==============================================================================

# Logging Defaults
DEFAULT_LOG_DIR: str = 'logs'
DEFAULT_LOG_LEVEL: str = 'INFO'
DEFAULT_LOG_FORMAT: str = 'text'

# Taxonomy / HTTP Defaults
DEFAULT_TAXONOMY_CACHE_DIR: str = 'cache/taxonomy'
DEFAULT_HTTP_TIMEOUT: int = 30
DEFAULT_HTTP_MAX_RETRIES: int = 3
DEFAULT_HTTP_USER_AGENT: str = 'readidx-xbrl/1.0'

# Storage Defaults
DEFAULT_STORAGE_DIR: str = 'instance_files'
DEFAULT_UNIT: str = 'IDR'

# Database Defaults
DEFAULT_DB_DRIVER: str = 'postgresql'
DEFAULT_DB_HOST: str = 'localhost'
DEFAULT_DB_PORT: int = 5432
DEFAULT_DB_NAME: str = 'readidx'


class ConfigLoader:
    """
    Singleton configuration loader for readidx.

    Loads configuration from environment variables with type conversion
    and sensible defaults.

    Example:
        config = ConfigLoader()
        cache_dir = config.get('taxonomy_cache_dir')  # Returns Path object
        timeout = config.get('http_timeout')  # Returns int
    """

    _instance: Optional['ConfigLoader'] = None
    _initialized: bool = False

    def __new__(cls) -> 'ConfigLoader':
        """Ensure only one instance exists (singleton pattern)."""
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self):
        """
        Initialize configuration loader.

        Only runs once due to singleton pattern. Loads the .env file from
        the working directory, falling back to the project root.
        """
        if ConfigLoader._initialized:
            return

        # readidx/config_loader.py -> project root is one level up
        project_root = Path(__file__).resolve().parent.parent
        for env_path in (Path.cwd() / '.env', project_root / '.env'):
            if env_path.exists():
                load_dotenv(dotenv_path=env_path, interpolate=True)
                break

        self._config = self._load_configuration()
        ConfigLoader._initialized = True

    def _load_configuration(self) -> dict[str, Any]:
        """
        Load all configuration from environment.

        Returns:
            Dictionary of configuration values with proper types
        """
        config = {
            # ================================================================
            # ENVIRONMENT
            # ================================================================
            'environment': self._get_env('READIDX_ENVIRONMENT', 'development'),
            'debug': self._get_bool('READIDX_DEBUG', False),

            # ================================================================
            # LOGGING CONFIGURATION
            # ================================================================
            'log_dir': self._get_path('READIDX_LOG_DIR', default=DEFAULT_LOG_DIR),
            'log_level': self._get_env('READIDX_LOG_LEVEL', DEFAULT_LOG_LEVEL),
            'log_format': self._get_env('READIDX_LOG_FORMAT', DEFAULT_LOG_FORMAT),
            'log_console': self._get_bool('READIDX_LOG_CONSOLE', True),

            # ================================================================
            # TAXONOMY RESOLUTION
            # ================================================================
            'taxonomy_cache_dir': self._get_path(
                'READIDX_TAXONOMY_CACHE_DIR', default=DEFAULT_TAXONOMY_CACHE_DIR
            ),
            'http_timeout': self._get_int('READIDX_HTTP_TIMEOUT', DEFAULT_HTTP_TIMEOUT),
            'http_max_retries': self._get_int(
                'READIDX_HTTP_MAX_RETRIES', DEFAULT_HTTP_MAX_RETRIES
            ),
            'http_user_agent': self._get_env(
                'READIDX_HTTP_USER_AGENT', DEFAULT_HTTP_USER_AGENT
            ),

            # ================================================================
            # UPLOAD STORAGE
            # ================================================================
            'storage_dir': self._get_path('READIDX_STORAGE_DIR', default=DEFAULT_STORAGE_DIR),
            'default_unit': self._get_env('READIDX_DEFAULT_UNIT', DEFAULT_UNIT),

            # ================================================================
            # DATABASE CONFIGURATION
            # ================================================================
            'database_url': self._get_env('READIDX_DATABASE_URL', ''),
            'db_driver': self._get_env('READIDX_DB_DRIVER', DEFAULT_DB_DRIVER),
            'db_host': self._get_env('READIDX_DB_HOST', DEFAULT_DB_HOST),
            'db_port': self._get_int('READIDX_DB_PORT', DEFAULT_DB_PORT),
            'db_name': self._get_env('READIDX_DB_NAME', DEFAULT_DB_NAME),
            'db_user': self._get_env('READIDX_DB_USER', ''),
            'db_password': self._get_env('READIDX_DB_PASSWORD', ''),
            'db_pool_size': self._get_int('READIDX_DB_POOL_SIZE', 5),
            'db_pool_max_overflow': self._get_int('READIDX_DB_POOL_MAX_OVERFLOW', 10),
            'db_pool_timeout': self._get_int('READIDX_DB_POOL_TIMEOUT', 30),
            'db_pool_recycle': self._get_int('READIDX_DB_POOL_RECYCLE', 3600),
        }

        return config

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get configuration value by key.

        Args:
            key: Configuration key
            default: Default value if key not found

        Returns:
            Configuration value or default
        """
        return self._config.get(key, default)

    def _get_path(
        self,
        key: str,
        default: Optional[str] = None,
        required: bool = False
    ) -> Optional[Path]:
        """
        Get path from environment variable.

        Args:
            key: Environment variable name
            default: Path used when the variable is unset
            required: If True, raise error when missing and no default

        Returns:
            Path object or None

        Raises:
            ValueError: If required and missing
        """
        value = os.getenv(key, default)

        if value is None:
            if required:
                raise ValueError(f"Required path not configured: {key}")
            return None

        # Handle variable interpolation
        if '${' in value:
            value = os.path.expandvars(value)

        return Path(value)

    def _get_env(self, key: str, default: str = '') -> str:
        """Get string environment variable."""
        return os.getenv(key, default)

    def _get_int(self, key: str, default: int) -> int:
        """Get integer environment variable."""
        value = os.getenv(key)
        if value is None:
            return default
        try:
            return int(value)
        except ValueError:
            return default

    def _get_bool(self, key: str, default: bool) -> bool:
        """Get boolean environment variable."""
        value = os.getenv(key)
        if value is None:
            return default
        return value.lower() in ('true', '1', 'yes', 'on')

    def get_db_connection_string(self) -> str:
        """
        Build database connection string.

        READIDX_DATABASE_URL wins when set. The sqlite driver treats
        db_name as a file path.

        Returns:
            SQLAlchemy connection URL
        """
        if self._config['database_url']:
            return self._config['database_url']

        driver = self._config['db_driver']
        if driver.startswith('sqlite'):
            return f"sqlite:///{self._config['db_name']}"

        return (
            f"{driver}://{self._config['db_user']}:"
            f"{self._config['db_password']}@"
            f"{self._config['db_host']}:"
            f"{self._config['db_port']}/"
            f"{self._config['db_name']}"
        )

    def __repr__(self) -> str:
        """String representation showing key settings."""
        return (
            f"ConfigLoader("
            f"environment={self._config.get('environment')}, "
            f"cache_dir={self._config.get('taxonomy_cache_dir')})"
        )


__all__ = ['ConfigLoader']
