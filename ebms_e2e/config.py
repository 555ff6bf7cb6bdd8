"""
Environment Configuration for the EBMS E2E Suite

Every tunable of the suite comes from an environment variable with a
hardcoded fallback:
- Type parsing (str, int, bool)
- Default values
- Range validation with clear error messages
- Masking of sensitive values when logged or dumped

Usage:
    from ebms_e2e.config import get_environment_config

    config = get_environment_config()
    page.goto(f"{config.base_url}/login")
"""

import logging
import os
from dataclasses import asdict, dataclass
from typing import Any, Dict, Optional, Union

logger = logging.getLogger(__name__)


class ConfigError(Exception):
    """Raised when configuration validation fails."""

    pass


@dataclass
class EnvVar:
    """Environment variable definition with validation."""

    name: str
    default: Any = None
    var_type: str = "str"  # str, int, bool
    required: bool = False
    description: str = ""
    min_value: Optional[Union[int, float]] = None
    sensitive: bool = False  # Don't log value if True

    def parse(self, value: str) -> Any:
        """Parse string value to target type."""
        if value is None:
            return None

        if self.var_type == "int":
            try:
                return int(value)
            except ValueError:
                raise ConfigError(f"{self.name}: '{value}' is not a valid integer")
        elif self.var_type == "bool":
            return value.lower() in ("true", "1", "yes", "on")
        return value

    def validate(self, value: Any) -> tuple[bool, str]:
        """Validate parsed value. Returns (is_valid, error_message)."""
        if value is None or value == "":
            if self.required:
                return False, f"{self.name} environment variable is required"
            return True, ""

        if self.var_type == "int" and self.min_value is not None and value < self.min_value:
            return False, f"{self.name}: value {value} is below minimum {self.min_value}"

        return True, ""

    def get_value(self) -> Any:
        """Get validated value from environment, falling back to the default."""
        raw_value = os.environ.get(self.name)
        value = self.default if raw_value is None else self.parse(raw_value)

        is_valid, error = self.validate(value)
        if not is_valid:
            raise ConfigError(error)

        return value


# Define all environment variables
ENV_VARS: Dict[str, EnvVar] = {
    # Target application
    "BASE_URL": EnvVar(
        name="BASE_URL",
        default="http://localhost:8000",
        required=True,
        description="Base URL of the EBMS application under test",
    ),
    "ADMIN_BASE_URL": EnvVar(
        name="ADMIN_BASE_URL",
        default=None,  # Falls back to BASE_URL
        description="Base URL of the EBMS admin area",
    ),
    # Credentials
    "TEST_EMAIL": EnvVar(
        name="TEST_EMAIL",
        default="user@example.com",
        required=True,
        description="Login email of the test account",
    ),
    "TEST_PASSWORD": EnvVar(
        name="TEST_PASSWORD",
        default="secret123",
        required=True,
        sensitive=True,
        description="Password of the test account",
    ),
    "ADMIN_EMAIL": EnvVar(
        name="ADMIN_EMAIL",
        default=None,  # Falls back to TEST_EMAIL
        description="Login email of the admin account",
    ),
    "ADMIN_PASSWORD": EnvVar(
        name="ADMIN_PASSWORD",
        default=None,  # Falls back to TEST_PASSWORD
        sensitive=True,
        description="Password of the admin account",
    ),
    # Timeouts (milliseconds)
    "TEST_TIMEOUT": EnvVar(
        name="TEST_TIMEOUT",
        default=30000,
        var_type="int",
        min_value=1,
        description="Default timeout for browser operations",
    ),
    "NAVIGATION_TIMEOUT": EnvVar(
        name="NAVIGATION_TIMEOUT",
        default=30000,
        var_type="int",
        min_value=1,
        description="Timeout for page navigation",
    ),
    "ACTION_TIMEOUT": EnvVar(
        name="ACTION_TIMEOUT",
        default=10000,
        var_type="int",
        min_value=1,
        description="Timeout for element waits and actions",
    ),
    # Environment
    "E2E_ENV": EnvVar(name="E2E_ENV", default="test", description="Environment name"),
    # Browser settings
    "E2E_HEADLESS": EnvVar(
        name="E2E_HEADLESS", default=True, var_type="bool", description="Run browsers headless"
    ),
    "E2E_SLOW_MO": EnvVar(
        name="E2E_SLOW_MO",
        default=0,
        var_type="int",
        min_value=0,
        description="Delay in ms between browser operations",
    ),
    "E2E_RECORD_VIDEO": EnvVar(
        name="E2E_RECORD_VIDEO",
        default=False,
        var_type="bool",
        description="Record a video of every browser context",
    ),
}


@dataclass(frozen=True)
class LoginCredentials:
    """Email/password pair used to sign in."""

    email: str
    password: str


@dataclass(frozen=True)
class EnvironmentConfig:
    """Immutable snapshot of the suite configuration."""

    base_url: str
    admin_base_url: str
    test_email: str
    test_password: str
    admin_email: str
    admin_password: str
    test_timeout: int
    navigation_timeout: int
    action_timeout: int
    environment: str
    headless: bool = True
    slow_mo: int = 0
    record_video: bool = False

    @classmethod
    def from_env(cls) -> "EnvironmentConfig":
        """
        Build the configuration from environment variables.

        Raises:
            ConfigError: If a variable is missing, malformed or out of range
        """
        values = {name: env_var.get_value() for name, env_var in ENV_VARS.items()}

        base_url = values["BASE_URL"].rstrip("/")
        admin_base_url = (values["ADMIN_BASE_URL"] or base_url).rstrip("/")

        return cls(
            base_url=base_url,
            admin_base_url=admin_base_url,
            test_email=values["TEST_EMAIL"],
            test_password=values["TEST_PASSWORD"],
            admin_email=values["ADMIN_EMAIL"] or values["TEST_EMAIL"],
            admin_password=values["ADMIN_PASSWORD"] or values["TEST_PASSWORD"],
            test_timeout=values["TEST_TIMEOUT"],
            navigation_timeout=values["NAVIGATION_TIMEOUT"],
            action_timeout=values["ACTION_TIMEOUT"],
            environment=values["E2E_ENV"],
            headless=values["E2E_HEADLESS"],
            slow_mo=values["E2E_SLOW_MO"],
            record_video=values["E2E_RECORD_VIDEO"],
        )

    def default_credentials(self) -> LoginCredentials:
        return LoginCredentials(email=self.test_email, password=self.test_password)

    def admin_credentials(self) -> LoginCredentials:
        return LoginCredentials(email=self.admin_email, password=self.admin_password)

    def to_dict(self, include_sensitive: bool = False) -> Dict[str, Any]:
        """Get all config values as dictionary."""
        result = asdict(self)
        if not include_sensitive:
            for key in ("test_password", "admin_password"):
                result[key] = "***" if result[key] else None
        return result


_config: Optional[EnvironmentConfig] = None


def get_environment_config() -> EnvironmentConfig:
    """Return the process-wide configuration, loading it on first use."""
    global _config
    if _config is None:
        _config = EnvironmentConfig.from_env()
        logger.info(
            f"Configuration loaded for {_config.environment}: base_url={_config.base_url}"
        )
        logger.debug(f"Config: {_config.to_dict()}")
    return _config


def reset_environment_config() -> None:
    """Forget the loaded configuration (useful for testing)."""
    global _config
    _config = None
