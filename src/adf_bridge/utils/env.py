"""Environment variable utility functions for the ADF bridge."""

import os


def is_env_truthy(
    env_var_name: str, default: str = "", env: dict[str, str] | None = None
) -> bool:
    """Check if environment variable is set to a standard truthy value.

    Considers 'true', '1', 'yes' as truthy values (case-insensitive).

    Args:
        env_var_name: Name of the environment variable to check
        default: Default value if environment variable is not set
        env: Optional overrides checked before the process environment

    Returns:
        True if the environment variable is set to a truthy value, False otherwise
    """
    value = getenv(env or {}, env_var_name, default) or ""
    return value.lower() in ("true", "1", "yes")


def getenv(
    env: dict[str, str], env_var_name: str, default: str | None = None
) -> str | None:
    """Retrieve the value of an environment variable.

    The provided `env` mapping is checked first, then the process environment.

    Args:
        env (dict[str, str]): Explicit overrides, e.g. from a request or a test.
        env_var_name (str): The name of the environment variable to retrieve.
        default (str | None): Value returned when the variable is unset.

    Returns:
        str | None: The value of the environment variable if found, otherwise default.
    """
    return env.get(env_var_name, os.getenv(env_var_name, default))
