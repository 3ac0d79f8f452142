import json
from dataclasses import dataclass
from typing import Any

import click
from dotenv import load_dotenv

__version__ = "0.1.0"

from .adf import (
    CommentApiVersion,
    OutgoingComment,
    OutgoingEncoding,
    adf_to_search_text,
    adf_to_text,
    comment_api_version_for,
    decode_field,
    prepare_comment,
    wiki_to_adf,
)
from .config import OUTPUT_STYLES, AdfBridgeConfig
from .display import escape_xml, format_description, normalize_comment_body
from .exceptions import AdfBridgeError, ConfigurationError
from .logging_config import ContextualLogger, log_operation, setup_logger


@dataclass
class CliState:
    config: AdfBridgeConfig
    logger: ContextualLogger


def _read_value(raw: str) -> Any:
    """Parse input as JSON when possible, otherwise keep it as text."""
    try:
        return json.loads(raw)
    except json.JSONDecodeError:
        return raw


@click.group()
@click.version_option(__version__, prog_name="adf-bridge")
@click.option(
    "-v",
    "--verbose",
    count=True,
    help="Increase verbosity (can be used multiple times)",
)
@click.option(
    "--env-file", type=click.Path(exists=True, dir_okay=False), help="Path to .env file"
)
@click.pass_context
def main(ctx: click.Context, verbose: int, env_file: str | None) -> None:
    """ADF bridge - convert Jira rich text between ADF, wiki markup and flat text."""
    if env_file:
        load_dotenv(env_file)
    else:
        load_dotenv()

    try:
        config = AdfBridgeConfig.from_env()
    except ConfigurationError as e:
        raise click.ClickException(str(e)) from e

    logging_level = config.log_level
    if verbose == 1:
        logging_level = "INFO"
    elif verbose >= 2:
        logging_level = "DEBUG"

    logger = setup_logger(
        level=logging_level,
        log_to_file=config.log_to_file,
        log_dir=config.log_dir,
    )
    logger.debug(f"ADF bridge {__version__}, output style {config.output_style}")
    ctx.obj = CliState(config=config, logger=logger)


@main.command()
@click.argument("source", type=click.File("r", encoding="utf-8"), default="-")
@click.option(
    "--output",
    type=click.Choice(OUTPUT_STYLES),
    default=None,
    help="Presentation style (default: ADF_BRIDGE_OUTPUT or terminal)",
)
@click.pass_obj
def decode(state: CliState, source: Any, output: str | None) -> None:
    """Print a description or comment field (JSON or text) as flat text."""
    value = _read_value(source.read())
    with log_operation(state.logger, "decode"):
        text = format_description(
            value, output or state.config.output_style, color=state.config.color
        )
    click.echo(text)


@main.command()
@click.argument("source", type=click.File("r", encoding="utf-8"), default="-")
@click.option(
    "--api-version",
    type=click.Choice(["2", "3"]),
    default=None,
    help="Target comment endpoint (default: inferred from JIRA_URL)",
)
@click.option(
    "--adf-only",
    is_flag=True,
    default=False,
    help="Always encode as ADF, even for generated analysis text",
)
@click.pass_obj
def encode(state: CliState, source: Any, api_version: str | None, adf_only: bool) -> None:
    """Print the outgoing body for a comment read from SOURCE."""
    text = source.read()
    if not text.strip():
        raise click.ClickException("Comment cannot be empty")

    version = (
        CommentApiVersion(int(api_version))
        if api_version
        else comment_api_version_for(state.config)
    )
    with log_operation(state.logger, "encode", api_version=int(version)):
        outgoing = prepare_comment(text, version, allow_legacy=not adf_only)
        state.logger.info(
            f"Comment encoded as {outgoing.encoding.value} "
            f"for REST v{int(outgoing.api_version)}"
        )

    if isinstance(outgoing.body, dict):
        click.echo(json.dumps(outgoing.body, ensure_ascii=False, indent=2))
    else:
        click.echo(outgoing.body)


__all__ = [
    "AdfBridgeConfig",
    "AdfBridgeError",
    "CommentApiVersion",
    "ConfigurationError",
    "OutgoingComment",
    "OutgoingEncoding",
    "__version__",
    "adf_to_search_text",
    "adf_to_text",
    "comment_api_version_for",
    "decode_field",
    "escape_xml",
    "format_description",
    "log_operation",
    "main",
    "normalize_comment_body",
    "prepare_comment",
    "setup_logger",
    "wiki_to_adf",
]

if __name__ == "__main__":
    main()
