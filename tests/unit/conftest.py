"""
Shared fixtures for ADF bridge unit tests.
"""

import logging

import pytest

# ============================================================================
# Logging
# ============================================================================


@pytest.fixture(autouse=True)
def reset_bridge_logger():
    """
    Detach handlers installed by setup_logger during a test.

    The CLI binds its console handler to the stderr of the invocation, which
    is gone once the test finishes.
    """
    yield
    logger = logging.Logger.manager.loggerDict.get("adf-bridge")
    if isinstance(logger, logging.Logger):
        for handler in list(logger.handlers):
            logger.removeHandler(handler)
            handler.close()
        logger.setLevel(logging.NOTSET)
        logger.propagate = True


# ============================================================================
# Configuration
# ============================================================================


@pytest.fixture
def cli_env():
    """
    Environment for CliRunner invocations with every setting unset.

    Returns:
        dict[str, str | None]: Mapping passed as ``env`` to ``invoke``
    """
    return {
        "JIRA_URL": None,
        "JIRA_COMMENT_API_VERSION": None,
        "ADF_BRIDGE_OUTPUT": None,
        "NO_COLOR": None,
        "LOG_LEVEL": None,
        "ADF_BRIDGE_LOG_TO_FILE": None,
        "LOG_DIR": None,
    }
