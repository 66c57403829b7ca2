"""MCP Server exposing document heading outlines."""

import asyncio
import json
from typing import Any

from mcp.server import Server
from mcp.server.stdio import stdio_server
from mcp.types import Tool, TextContent

from .tools.get_outline import get_outline as do_get_outline, get_outline_tree as do_get_outline_tree
from .tools.entries import (
    get_children as do_get_children,
    get_parent as do_get_parent,
    get_path_to as do_get_path,
    find_entries as do_find_entries,
)


# Create MCP server
server = Server("outline-nav")

SOURCE_PROPERTY = {
    "type": "string",
    "description": "Local path or http(s) URL of a .md, .mdx or .rst document",
}

NODE_ID_PROPERTY = {
    "type": "integer",
    "description": "Entry id from get_outline (0 is the document root)",
}


@server.list_tools()
async def list_tools() -> list[Tool]:
    """List available tools."""
    return [
        Tool(
            name="get_outline",
            description="""Get the heading outline of a document.

Returns every heading in document order with its id, level, line number,
parent id and breadcrumb path. Ids are assigned in document order starting
at 1; id 0 is the synthetic root.""",
            inputSchema={
                "type": "object",
                "properties": {
                    "source": SOURCE_PROPERTY,
                    "max_level": {
                        "type": "integer",
                        "description": "Only include headings with level <= this value",
                    },
                },
                "required": ["source"],
            },
        ),
        Tool(
            name="get_outline_tree",
            description="""Get the heading outline as a nested tree.

Useful for understanding the document structure at a glance.""",
            inputSchema={
                "type": "object",
                "properties": {"source": SOURCE_PROPERTY},
                "required": ["source"],
            },
        ),
        Tool(
            name="get_children",
            description="""Get the direct children of an outline entry.

Omit node_id (or pass 0) to list the top-level headings.""",
            inputSchema={
                "type": "object",
                "properties": {"source": SOURCE_PROPERTY, "node_id": NODE_ID_PROPERTY},
                "required": ["source"],
            },
        ),
        Tool(
            name="get_parent",
            description="""Get the parent of an outline entry.

Top-level headings have the root (id 0) as parent.""",
            inputSchema={
                "type": "object",
                "properties": {"source": SOURCE_PROPERTY, "node_id": NODE_ID_PROPERTY},
                "required": ["source", "node_id"],
            },
        ),
        Tool(
            name="get_path",
            description="""Get the ancestors of an outline entry and its breadcrumb.

Ancestors are ordered from the top-level heading down to the direct parent.""",
            inputSchema={
                "type": "object",
                "properties": {"source": SOURCE_PROPERTY, "node_id": NODE_ID_PROPERTY},
                "required": ["source", "node_id"],
            },
        ),
        Tool(
            name="find_entries",
            description="""Find outline entries by exact id, title, level and/or parent id.

All supplied fields must match; omitted fields match everything.""",
            inputSchema={
                "type": "object",
                "properties": {
                    "source": SOURCE_PROPERTY,
                    "node_id": NODE_ID_PROPERTY,
                    "title": {"type": "string", "description": "Exact heading title"},
                    "level": {"type": "integer", "description": "Heading level (1 = top)"},
                    "parent_id": {"type": "integer", "description": "Id of the parent entry"},
                },
                "required": ["source"],
            },
        ),
    ]


async def dispatch(name: str, arguments: dict[str, Any]) -> dict:
    """Run a tool by name and return its result dict."""
    if name == "get_outline":
        return await do_get_outline(
            source=arguments["source"],
            max_level=arguments.get("max_level"),
        )
    elif name == "get_outline_tree":
        return await do_get_outline_tree(source=arguments["source"])
    elif name == "get_children":
        return await do_get_children(
            source=arguments["source"],
            node_id=arguments.get("node_id", 0),
        )
    elif name == "get_parent":
        return await do_get_parent(source=arguments["source"], node_id=arguments["node_id"])
    elif name == "get_path":
        return await do_get_path(source=arguments["source"], node_id=arguments["node_id"])
    elif name == "find_entries":
        return await do_find_entries(
            source=arguments["source"],
            node_id=arguments.get("node_id"),
            title=arguments.get("title"),
            level=arguments.get("level"),
            parent_id=arguments.get("parent_id"),
        )
    return {"error": f"Unknown tool: {name}"}


@server.call_tool()
async def call_tool(name: str, arguments: dict[str, Any]) -> list[TextContent]:
    """Handle tool calls."""
    try:
        result = await dispatch(name, arguments)
        return [TextContent(type="text", text=json.dumps(result, indent=2))]

    except Exception as e:
        error_result = {"error": str(e)}
        return [TextContent(type="text", text=json.dumps(error_result, indent=2))]


async def run_server():
    """Run the MCP server."""
    async with stdio_server() as (read_stream, write_stream):
        await server.run(
            read_stream,
            write_stream,
            server.create_initialization_options(),
        )


def main():
    """Entry point for the MCP server."""
    asyncio.run(run_server())


if __name__ == "__main__":
    main()
