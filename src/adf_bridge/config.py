"""Configuration module for the ADF bridge."""

from dataclasses import dataclass
from typing import Literal

from .exceptions import ConfigurationError
from .utils import getenv, is_atlassian_cloud_url, is_env_truthy

OutputStyle = Literal["terminal", "xml", "plain"]

OUTPUT_STYLES: tuple[str, ...] = ("terminal", "xml", "plain")
COMMENT_API_VERSIONS: tuple[int, ...] = (2, 3)
DEFAULT_LOG_LEVEL = "WARNING"


@dataclass
class AdfBridgeConfig:
    """ADF bridge configuration.

    Decides how flat text is presented and which comment endpoint a Jira
    instance gets when the caller does not say.
    """

    url: str | None = None  # Base URL for Jira
    comment_api_version: int | None = None  # Explicit 2 or 3, else inferred from url
    output_style: OutputStyle = "terminal"  # How decoded text is presented
    color: bool = True  # Style terminal output
    log_level: str = DEFAULT_LOG_LEVEL
    log_to_file: bool = False
    log_dir: str | None = None

    @property
    def is_cloud(self) -> bool:
        """Check if this is a cloud instance.

        Returns:
            True if this is a cloud instance (atlassian.net), False otherwise.
        """
        return is_atlassian_cloud_url(self.url)

    @classmethod
    def from_env(cls, env: dict[str, str] | None = None) -> "AdfBridgeConfig":
        """Create configuration from environment variables.

        Args:
            env: Optional overrides checked before the process environment

        Returns:
            AdfBridgeConfig with values from environment variables

        Raises:
            ConfigurationError: If a variable holds an unsupported value
        """
        env = env or {}

        url = getenv(env, "JIRA_URL") or None

        comment_api_version = None
        raw_version = getenv(env, "JIRA_COMMENT_API_VERSION")
        if raw_version:
            if raw_version.strip() not in {str(v) for v in COMMENT_API_VERSIONS}:
                msg = f"JIRA_COMMENT_API_VERSION must be 2 or 3, got {raw_version!r}"
                raise ConfigurationError(msg)
            comment_api_version = int(raw_version)

        output_style = (getenv(env, "ADF_BRIDGE_OUTPUT", "terminal") or "terminal").lower()
        if output_style not in OUTPUT_STYLES:
            msg = (
                f"ADF_BRIDGE_OUTPUT must be one of {', '.join(OUTPUT_STYLES)}, "
                f"got {output_style!r}"
            )
            raise ConfigurationError(msg)

        # NO_COLOR disables colour whatever its value (https://no-color.org)
        color = not getenv(env, "NO_COLOR")

        log_level = (getenv(env, "LOG_LEVEL", DEFAULT_LOG_LEVEL) or DEFAULT_LOG_LEVEL).upper()

        log_to_file = is_env_truthy("ADF_BRIDGE_LOG_TO_FILE", env=env)

        return cls(
            url=url,
            comment_api_version=comment_api_version,
            output_style=output_style,  # type: ignore[arg-type]
            color=color,
            log_level=log_level,
            log_to_file=log_to_file,
            log_dir=getenv(env, "LOG_DIR"),
        )
