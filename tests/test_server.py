"""Tests for the nunit-pipeline MCP server."""

import logging

import pytest


class TestServerBasics:
    """Basic server tests."""

    def test_version(self):
        """Test version is defined."""
        from nunit_pipeline_mcp import __version__
        assert __version__ == "0.1.0"

    def test_server_creation(self):
        """Test server can be created."""
        from nunit_pipeline_mcp.server import server
        assert server.name == "nunit-pipeline"

    def test_all_tools_have_handlers(self):
        from nunit_pipeline_mcp.server import ALL_HANDLERS, ALL_TOOLS
        assert {t.name for t in ALL_TOOLS} == set(ALL_HANDLERS)

    @pytest.mark.parametrize("name, expected", [
        (None, logging.INFO),
        ("debug", logging.DEBUG),
        (" Warning ", logging.WARNING),
        ("verbose", None),
        ("", logging.INFO),
    ])
    def test_resolve_log_level(self, name, expected):
        from nunit_pipeline_mcp.server import resolve_log_level
        assert resolve_log_level(name) == expected

    @pytest.mark.asyncio
    async def test_unknown_tool(self):
        from nunit_pipeline_mcp.server import call_tool

        result = await call_tool("no_such_tool", {})

        assert result[0].text == "Unknown tool: no_such_tool"

    @pytest.mark.asyncio
    async def test_routes_to_handler(self):
        from nunit_pipeline_mcp.server import call_tool

        result = await call_tool("build_nunit_command", {"assemblies": ["a.dll"], "tool_path": "/tools"})

        assert '"a.dll"' in result[0].text
