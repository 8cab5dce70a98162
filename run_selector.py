#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Interactive Tool Router Script
==============================

Try the tool router against a real catalogue.

Usage:
    python run_selector.py catalog.json "book a meeting with Jane"
    python run_selector.py http://localhost:8000          # interactive
    python run_selector.py catalog.json --max-tools 40 --explain
"""

import argparse
import sys
import io

# Fix Windows console encoding
if sys.platform == 'win32':
    sys.stdout = io.TextIOWrapper(sys.stdout.buffer, encoding='utf-8', errors='replace')
    sys.stderr = io.TextIOWrapper(sys.stderr.buffer, encoding='utf-8', errors='replace')

from ghl import ToolRouter, CatalogError, fetch_tool_catalog, load_tool_catalog
from ghl.config import settings


def route_query(router, tools, query, history, max_tools, explain=False):
    """Route a single query and display results."""
    print(f"\n{'='*70}")
    print(f"Query: '{query}'")
    print(f"{'='*70}")

    result = router.select_tools(tools, query, history, max_tools)

    print(f"[+] Intents: {', '.join(result.detected_intents)}")
    print(f"  Tools: {result.tool_count} of {len(tools)} (max {max_tools})")
    for name in result.tool_names:
        print(f"    - {name}")

    if explain:
        print("\n  Not selected:")
        for row in router.explain_selection(tools, query, history, max_tools):
            if not row['selected']:
                categories = ', '.join(row['categories']) or 'no category'
                print(f"    - {row['name']} ({categories})")

    return result


def main():
    parser = argparse.ArgumentParser(description="Show which tools the router picks for a message")
    parser.add_argument('source', help="catalogue JSON file or MCP server URL")
    parser.add_argument('message', nargs='?', help="message to route (interactive if omitted)")
    parser.add_argument('--max-tools', type=int, default=settings.MAX_TOOLS)
    parser.add_argument('--explain', action='store_true', help="list tools that were left out")
    args = parser.parse_args()

    try:
        if args.source.startswith(('http://', 'https://')):
            tools = fetch_tool_catalog(args.source)
        else:
            tools = load_tool_catalog(args.source)
    except CatalogError as e:
        print(f"[-] {e}")
        return 1

    router = ToolRouter()

    if args.message:
        route_query(router, tools, args.message, [], args.max_tools, args.explain)
        return 0

    # Interactive: earlier messages become context for later ones
    history = []
    print("Type a message (empty line to quit).")
    while True:
        try:
            query = input("> ").strip()
        except EOFError:
            break
        if not query:
            break
        route_query(router, tools, query, history, args.max_tools, args.explain)
        history.append({'role': 'user', 'content': query})

    return 0


if __name__ == '__main__':
    sys.exit(main())
