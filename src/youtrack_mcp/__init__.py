import asyncio
import logging
import os
import sys

import click
from dotenv import load_dotenv

from youtrack_mcp.utils.environment import is_youtrack_configured
from youtrack_mcp.utils.io import is_env_truthy
from youtrack_mcp.utils.logging import setup_logging

__version__ = "0.3.0"

TRANSPORTS = ("stdio", "sse", "streamable-http")
DEFAULT_PORT = 8000
DEFAULT_HOST = "0.0.0.0"  # noqa: S104

# CLI option -> environment variable read by the server lifespan
OPTION_ENV_VARS = {
    "base_url": "YOUTRACK_BASE_URL",
    "token": "YOUTRACK_TOKEN",
    "username": "YOUTRACK_USERNAME",
    "password": "YOUTRACK_PASSWORD",
    "enabled_tools": "ENABLED_TOOLS",
}
FLAG_ENV_VARS = {
    "debug": "YOUTRACK_DEBUG",
    "read_only": "READ_ONLY_MODE",
}


def _logging_level(verbose: int, debug: bool) -> int:
    """-v gives INFO, -vv or --debug gives DEBUG, otherwise MCP_* variables decide."""
    if verbose >= 2 or debug:
        return logging.DEBUG
    if verbose == 1:
        return logging.INFO
    if is_env_truthy("MCP_VERY_VERBOSE"):
        return logging.DEBUG
    if is_env_truthy("MCP_VERBOSE"):
        return logging.INFO
    return logging.WARNING


logger = setup_logging(_logging_level(0, False))


def _from_cli(ctx: click.Context | None, param_name: str) -> bool:
    """True if the user passed the option explicitly rather than relying on defaults."""
    if ctx is None:
        return False
    source = ctx.get_parameter_source(param_name)
    return source not in (
        click.core.ParameterSource.DEFAULT,
        click.core.ParameterSource.DEFAULT_MAP,
    )


def _export_options(ctx: click.Context | None, values: dict[str, object]) -> None:
    """Copy explicitly passed options into the environment for YouTrackConfig."""
    for param_name, env_var in OPTION_ENV_VARS.items():
        if _from_cli(ctx, param_name) and values[param_name] is not None:
            os.environ[env_var] = str(values[param_name])
    for param_name, env_var in FLAG_ENV_VARS.items():
        if _from_cli(ctx, param_name):
            os.environ[env_var] = str(values[param_name]).lower()


def _run_settings(
    ctx: click.Context | None, transport: str, port: int, host: str, path: str
) -> tuple[str, int, str, str | None]:
    """Resolve transport, port, host and path; CLI options beat TRANSPORT/PORT/HOST/STREAMABLE_HTTP_PATH."""
    final_transport = (
        transport if _from_cli(ctx, "transport") else os.getenv("TRANSPORT", "stdio")
    ).lower()
    if final_transport not in TRANSPORTS:
        logger.warning(
            f"Invalid transport '{final_transport}' from env/default, using 'stdio'."
        )
        final_transport = "stdio"

    env_port = os.getenv("PORT", "")
    final_port = DEFAULT_PORT
    if _from_cli(ctx, "port"):
        final_port = port
    elif env_port.isdigit():
        final_port = int(env_port)

    final_host = host if _from_cli(ctx, "host") else os.getenv("HOST", DEFAULT_HOST)
    final_path = (
        path if _from_cli(ctx, "path") else os.getenv("STREAMABLE_HTTP_PATH")
    )
    return final_transport, final_port, final_host, final_path


@click.command()
@click.version_option(__version__, prog_name="youtrack-mcp")
@click.option(
    "-v",
    "--verbose",
    count=True,
    help="Increase verbosity (-v for INFO, -vv for DEBUG)",
)
@click.option(
    "--env-file",
    type=click.Path(exists=True, dir_okay=False),
    help="Load environment variables from this .env file",
)
@click.option(
    "--transport",
    type=click.Choice(TRANSPORTS),
    default="stdio",
    help="MCP transport to serve on",
)
@click.option(
    "--port",
    default=DEFAULT_PORT,
    help="Listening port for the sse and streamable-http transports",
)
@click.option(
    "--host",
    default=DEFAULT_HOST,
    help="Bind address for the sse and streamable-http transports",
)
@click.option(
    "--path",
    default="/mcp",
    help="Endpoint path for the streamable-http transport",
)
@click.option(
    "--base-url",
    help="YouTrack base URL, e.g. https://example.youtrack.cloud",
)
@click.option("--token", help="YouTrack permanent token")
@click.option("--username", help="YouTrack login for basic authentication")
@click.option("--password", help="YouTrack password for basic authentication")
@click.option(
    "--debug",
    is_flag=True,
    help="Log YouTrack API error bodies and turn on debug logging",
)
@click.option(
    "--read-only",
    is_flag=True,
    help="Hide and refuse every tool that modifies YouTrack data",
)
@click.option(
    "--enabled-tools",
    help="Comma-separated tool names to expose (all tools when omitted)",
)
def main(
    verbose: int,
    env_file: str | None,
    transport: str,
    port: int,
    host: str,
    path: str,
    base_url: str | None,
    token: str | None,
    username: str | None,
    password: str | None,
    debug: bool,
    read_only: bool,
    enabled_tools: str | None,
) -> None:
    """YouTrack MCP Server - YouTrack issues, projects and agile boards over MCP

    Works with YouTrack Cloud and self-hosted YouTrack. Authenticate with a
    permanent token or with a username and password. Every option overrides
    the matching environment variable.
    """
    global logger
    level = _logging_level(verbose, debug)
    logger = setup_logging(level)
    logger.debug(f"Logging level set to: {logging.getLevelName(level)}")

    if env_file:
        logger.debug(f"Loading environment from file: {env_file}")
    load_dotenv(env_file, override=True)

    click_ctx = click.get_current_context(silent=True)
    _export_options(
        click_ctx,
        {
            "base_url": base_url,
            "token": token,
            "username": username,
            "password": password,
            "enabled_tools": enabled_tools,
            "debug": debug,
            "read_only": read_only,
        },
    )

    if not is_youtrack_configured():
        click.echo(
            "Error: YouTrack URL and credentials are required. Set YOUTRACK_BASE_URL "
            "and either YOUTRACK_TOKEN or YOUTRACK_USERNAME/YOUTRACK_PASSWORD "
            "(or pass --base-url with --token or --username/--password).",
            err=True,
        )
        sys.exit(1)

    final_transport, final_port, final_host, final_path = _run_settings(
        click_ctx, transport, port, host, path
    )

    from youtrack_mcp.servers import main_mcp

    run_kwargs: dict[str, object] = {"transport": final_transport}
    if final_transport == "stdio":
        logger.info("Starting server with STDIO transport.")
    else:
        run_kwargs.update(
            host=final_host,
            port=final_port,
            log_level=logging.getLevelName(level).lower(),
        )
        if final_path is not None:
            run_kwargs["path"] = final_path
        display_path = final_path or ("/sse" if final_transport == "sse" else "/mcp")
        logger.info(
            f"Starting server with {final_transport.upper()} transport on "
            f"http://{final_host}:{final_port}{display_path}"
        )

    asyncio.run(main_mcp.run_async(**run_kwargs))


__all__ = ["main", "__version__"]

if __name__ == "__main__":
    main()
