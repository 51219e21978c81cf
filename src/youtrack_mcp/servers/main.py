"""Main FastMCP server setup for the YouTrack integration."""

import logging
from collections.abc import AsyncIterator, Sequence
from contextlib import asynccontextmanager
from typing import Any

import anyio
from fastmcp import FastMCP
from fastmcp.exceptions import ToolError
from fastmcp.server.context import Context
from fastmcp.server.dependencies import get_context
from fastmcp.server.middleware import CallNext, Middleware, MiddlewareContext
from fastmcp.tools import Tool
from fastmcp.tools import ToolResult as MCPToolResult
from starlette.requests import Request
from starlette.responses import JSONResponse

from youtrack_mcp.exceptions import UnknownToolError
from youtrack_mcp.utils.environment import is_youtrack_configured
from youtrack_mcp.utils.io import is_read_only_mode
from youtrack_mcp.utils.logging import log_config_param
from youtrack_mcp.utils.tools import get_enabled_tools, should_include_tool
from youtrack_mcp.youtrack import YouTrackConfig, YouTrackFetcher

from .context import MainAppContext
from .registry import TOOL_DEFINITIONS, ToolDefinition, dispatch

logger = logging.getLogger("mcp-youtrack.server.main")

NOT_CONFIGURED_ERROR = "YouTrack client is not configured or available."


async def health_check(request: Request) -> JSONResponse:
    return JSONResponse({"status": "ok"})


def _app_context(ctx: Context | None) -> MainAppContext | None:
    """Fetch the MainAppContext yielded by ``main_lifespan``."""
    if ctx is None:
        return None
    lifespan_ctx = ctx.lifespan_context
    if not isinstance(lifespan_ctx, dict):
        return None
    return lifespan_ctx.get("app_lifespan_context")


@asynccontextmanager
async def main_lifespan(app: FastMCP[MainAppContext]) -> AsyncIterator[dict]:
    logger.info("Main YouTrack MCP server lifespan starting...")
    read_only = is_read_only_mode()
    enabled_tools = get_enabled_tools()

    fetcher: YouTrackFetcher | None = None
    if is_youtrack_configured():
        try:
            config = YouTrackConfig.from_env()
            log_config_param(logger, "URL", config.url)
            log_config_param(logger, "auth type", config.auth_type)
            log_config_param(logger, "token", config.token, sensitive=True)
            log_config_param(logger, "username", config.username)
            if config.is_auth_configured():
                fetcher = YouTrackFetcher(config=config)
                logger.info(
                    "YouTrack configuration loaded and authentication is configured."
                )
            else:
                logger.warning(
                    "YouTrack URL found, but authentication is not fully configured. YouTrack tools will be unavailable."
                )
        except ValueError as e:
            logger.error(f"Failed to load YouTrack configuration: {e}", exc_info=True)
    else:
        logger.warning(
            "YouTrack URL or credentials missing. YouTrack tools will be unavailable."
        )

    app_context = MainAppContext(
        youtrack=fetcher,
        read_only=read_only,
        enabled_tools=enabled_tools,
    )
    logger.info(f"Read-only mode: {'ENABLED' if read_only else 'DISABLED'}")
    logger.info(f"Enabled tools filter: {enabled_tools or 'All tools enabled'}")
    try:
        yield {"app_lifespan_context": app_context}
    finally:
        if fetcher is not None:
            fetcher.session.close()
        logger.info("Main YouTrack MCP server lifespan shutting down.")


class YouTrackTool(Tool):
    """A registry tool exposed through FastMCP.

    Arguments are passed to ``dispatch`` untouched; the result envelope is
    returned as a single indented JSON text block.
    """

    @classmethod
    def from_definition(cls, definition: ToolDefinition) -> "YouTrackTool":
        return cls(
            name=definition.name,
            description=definition.description,
            parameters=definition.input_schema(),
            tags=definition.tags,
        )

    async def run(self, arguments: dict[str, Any]) -> MCPToolResult:
        app_ctx = _app_context(get_context())
        if app_ctx is None or app_ctx.youtrack is None:
            raise ToolError(NOT_CONFIGURED_ERROR)

        try:
            # The catalog uses blocking requests calls
            result = await anyio.to_thread.run_sync(
                dispatch, app_ctx.youtrack, self.name, arguments, app_ctx.read_only
            )
        except UnknownToolError as e:
            raise ToolError(str(e)) from e
        except Exception as e:
            logger.error(f"Unexpected error in tool {self.name}: {e}", exc_info=True)
            raise ToolError(f"Error executing tool {self.name}: {e}") from e

        return MCPToolResult(content=result.to_json())


class ToolFilterMiddleware(Middleware):
    """Hide tools according to ENABLED_TOOLS, read-only mode and configuration."""

    async def on_list_tools(
        self,
        context: MiddlewareContext[Any],
        call_next: CallNext[Any, Sequence[Tool]],
    ) -> Sequence[Tool]:
        all_tools = await call_next(context)
        app_lifespan_state = _app_context(context.fastmcp_context)
        read_only = app_lifespan_state.read_only if app_lifespan_state else False
        enabled_tools_filter = (
            app_lifespan_state.enabled_tools if app_lifespan_state else None
        )
        logger.debug(
            f"list_tools: read_only={read_only}, enabled_tools_filter={enabled_tools_filter}"
        )

        filtered_tools: list[Tool] = []
        for tool in all_tools:
            if not should_include_tool(tool.name, enabled_tools_filter):
                logger.debug(f"Excluding tool '{tool.name}' (not enabled)")
                continue

            if read_only and "write" in tool.tags:
                logger.debug(
                    f"Excluding tool '{tool.name}' due to read-only mode and 'write' tag"
                )
                continue

            if "youtrack" in tool.tags and (
                app_lifespan_state is None or app_lifespan_state.youtrack is None
            ):
                logger.debug(
                    f"Excluding tool '{tool.name}' as YouTrack configuration is incomplete."
                )
                continue

            filtered_tools.append(tool)

        logger.debug(f"list_tools: Total tools after filtering: {len(filtered_tools)}")
        return filtered_tools


class YouTrackMCP(FastMCP[MainAppContext]):
    """FastMCP server exposing every registered YouTrack tool, with filtering."""

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        middleware = [ToolFilterMiddleware(), *(kwargs.pop("middleware", None) or [])]
        super().__init__(*args, middleware=middleware, **kwargs)
        for definition in TOOL_DEFINITIONS.values():
            self.add_tool(YouTrackTool.from_definition(definition))


main_mcp = YouTrackMCP(name="YouTrack MCP", lifespan=main_lifespan)


@main_mcp.custom_route("/healthz", methods=["GET"], include_in_schema=False)
async def _health_check_route(request: Request) -> JSONResponse:
    return await health_check(request)


logger.info("Added /healthz endpoint for Kubernetes probes")
