"""
GHL Tool Catalogue
==================
Loads the tool catalogue the router selects from, either from a JSON file
or from a running MCP server over HTTP (JSON-RPC).

Both MCP HTTP transports are handled: plain JSON replies, and replies
framed as server-sent events (``event:``/``data:`` lines). For servers
mounted at ``/sse`` the client first opens the event stream to obtain a
``sessionId`` and passes it as a query parameter on every POST, the same
flow the GoHighLevel server expects.
"""

from __future__ import annotations

import itertools
import json
import re
import time
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

import requests

from . import config
from .tool_router.exceptions import CatalogError
from .tool_router.models import ToolDefinition, is_tool_dict
from .utils import log, safe_json_parse

MCP_PROTOCOL_VERSION = "2024-11-05"
CLIENT_INFO = {"name": "ghl-tool-router", "version": "1.0.0"}

ACCEPT_RPC = "application/json, text/event-stream"
SESSION_HEADER = "Mcp-Session-Id"
SESSION_ID_PATTERN = re.compile(r"sessionId=([^&\s]+)")


# ================================================================================
# PARSING
# ================================================================================

def parse_event_stream(text: str, request_id: Optional[int] = None) -> Optional[Dict[str, Any]]:
    """
    Extract a JSON-RPC message from a server-sent events body.

    Events are separated by blank lines; an event's ``data:`` lines are
    joined with newlines. Returns the message whose ``id`` matches
    request_id, else the first message carrying ``result`` or ``error``,
    else None.
    """
    messages = []
    data_lines: List[str] = []

    for line in (text or '').splitlines() + ['']:
        if line.startswith('data:'):
            data_lines.append(line[5:].lstrip())
        elif not line.strip() and data_lines:
            message = safe_json_parse('\n'.join(data_lines))
            if isinstance(message, dict):
                messages.append(message)
            data_lines = []

    if request_id is not None:
        for message in messages:
            if message.get('id') == request_id:
                return message

    for message in messages:
        if 'result' in message or 'error' in message:
            return message

    return None


def parse_rpc_body(text: str, request_id: Optional[int] = None) -> Optional[Dict[str, Any]]:
    """Decode a JSON-RPC reply sent either as plain JSON or as an event stream."""
    result = safe_json_parse(text)
    if isinstance(result, dict):
        return result
    return parse_event_stream(text, request_id)


def parse_tool_list(payload: Any) -> List[ToolDefinition]:
    """
    Parse a tool catalogue payload.

    Accepts a bare list of tool dicts, ``{"tools": [...]}`` or a full
    JSON-RPC response ``{"result": {"tools": [...]}}``. Entries without a
    string name are skipped with a warning.
    """
    if isinstance(payload, dict):
        if 'error' in payload:
            raise CatalogError(f"MCP error: {payload['error']}")
        if 'result' in payload:
            payload = payload['result']
        if isinstance(payload, dict):
            payload = payload.get('tools')

    if not isinstance(payload, list):
        raise CatalogError("Tool catalogue must be a list of tools")

    tools = []
    for index, raw in enumerate(payload):
        if not is_tool_dict(raw):
            log.warning(f"[CATALOG] Skipping malformed tool entry #{index}")
            continue
        tools.append(ToolDefinition.from_dict(raw))
    return tools


def load_tool_catalog(path: Union[str, Path]) -> List[ToolDefinition]:
    """Load a tool catalogue from a JSON file."""
    path = Path(path)
    try:
        with path.open('r', encoding='utf-8') as f:
            payload = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise CatalogError(f"Cannot read tool catalogue {path}: {e}") from e

    tools = parse_tool_list(payload)
    log.info(f"[CATALOG] Loaded {len(tools)} tools from {path}")
    return tools


# ================================================================================
# MCP CLIENT
# ================================================================================

class MCPCatalogClient:
    """
    Minimal JSON-RPC client for fetching tools from an MCP server.
    Features:
    - initialize handshake (opens an SSE session first for /sse endpoints)
    - tools/list
    - JSON and event-stream framed replies
    - Session carried as ?sessionId= or the Mcp-Session-Id header
    - Auto-retry with exponential backoff on timeouts and connection errors
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        max_retries: Optional[int] = None
    ):
        self.base_url = (base_url or config.settings.MCP_URL).rstrip('/')
        self.timeout = float(timeout or config.settings.MCP_TIMEOUT)
        self.max_retries = max(1, max_retries or config.settings.MCP_RETRIES)
        self.session_id: Optional[str] = None
        self.mcp_session_id: Optional[str] = None
        self._ids = itertools.count(1)

    @property
    def uses_sse_endpoint(self) -> bool:
        return self.base_url.endswith('/sse')

    def is_healthy(self) -> bool:
        """Check if the server root endpoint responds."""
        try:
            resp = requests.get(self.base_url, timeout=5)
            return resp.status_code == 200
        except requests.exceptions.RequestException:
            return False

    def open_session(self) -> str:
        """
        Open the event stream and read the session id the server announces.

        The server's first event carries an endpoint such as
        ``/messages?sessionId=abc``; the stream is closed once it is seen.
        """
        try:
            resp = requests.get(
                self.base_url,
                headers={'Accept': 'text/event-stream', 'Cache-Control': 'no-cache'},
                stream=True,
                timeout=self.timeout,
            )
        except requests.exceptions.RequestException as e:
            raise CatalogError(f"Cannot open event stream at {self.base_url}: {e}") from e

        try:
            resp.raise_for_status()
            for line in resp.iter_lines(decode_unicode=True):
                # Undecoded when the server sends no charset
                if isinstance(line, bytes):
                    line = line.decode('utf-8', errors='replace')
                if not line or not line.startswith('data:'):
                    continue
                match = SESSION_ID_PATTERN.search(line)
                if match:
                    self.session_id = match.group(1)
                    log.info(f"[CATALOG] SSE session {self.session_id}")
                    return self.session_id
        except requests.exceptions.RequestException as e:
            raise CatalogError(f"Event stream at {self.base_url} failed: {e}") from e
        finally:
            resp.close()

        raise CatalogError(f"No session id announced by {self.base_url}")

    def _request_kwargs(self, payload: Dict[str, Any]) -> Dict[str, Any]:
        headers = {'Accept': ACCEPT_RPC}
        if self.mcp_session_id:
            headers[SESSION_HEADER] = self.mcp_session_id
        kwargs: Dict[str, Any] = {
            'json': payload,
            'headers': headers,
            'timeout': self.timeout,
        }
        if self.session_id:
            kwargs['params'] = {'sessionId': self.session_id}
        return kwargs

    def _rpc(self, method: str, params: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        """Send one JSON-RPC request and return the decoded response."""
        request_id = next(self._ids)
        payload = {
            "jsonrpc": "2.0",
            "method": method,
            "params": params or {},
            "id": request_id,
        }

        last_error: Optional[Exception] = None
        for attempt in range(self.max_retries):
            try:
                resp = requests.post(self.base_url, **self._request_kwargs(payload))
                resp.raise_for_status()

                session = resp.headers.get(SESSION_HEADER)
                if isinstance(session, str) and session:
                    self.mcp_session_id = session

                result = parse_rpc_body(resp.text, request_id)
                if result is None:
                    raise CatalogError(f"Invalid JSON-RPC response to {method}")
                if 'error' in result:
                    raise CatalogError(f"MCP error on {method}: {result['error']}")
                return result

            except requests.exceptions.Timeout as e:
                last_error = e
                wait_time = 2 ** attempt
                log.warning(f"[CATALOG] Timeout on attempt {attempt + 1}, retrying in {wait_time}s...")
                time.sleep(wait_time)

            except requests.exceptions.ConnectionError as e:
                last_error = e
                wait_time = 2 ** attempt
                log.warning(f"[CATALOG] Connection error on attempt {attempt + 1}, retrying in {wait_time}s...")
                time.sleep(wait_time)

            except requests.exceptions.HTTPError as e:
                raise CatalogError(f"HTTP error on {method}: {e}") from e

        raise CatalogError(
            f"MCP server unreachable after {self.max_retries} attempts: {last_error}"
        ) from last_error

    def initialize(self) -> Dict[str, Any]:
        """Perform the MCP initialize handshake; returns the server's result."""
        if self.uses_sse_endpoint and self.session_id is None:
            self.open_session()

        response = self._rpc("initialize", {
            "protocolVersion": MCP_PROTOCOL_VERSION,
            "capabilities": {},
            "clientInfo": CLIENT_INFO,
        })
        return response.get('result', {})

    def list_tools(self) -> List[ToolDefinition]:
        """Fetch the full tool catalogue."""
        tools = parse_tool_list(self._rpc("tools/list"))
        log.info(f"[CATALOG] Fetched {len(tools)} tools from {self.base_url}")
        return tools


def fetch_tool_catalog(base_url: Optional[str] = None) -> List[ToolDefinition]:
    """Handshake with an MCP server and return its tools."""
    client = MCPCatalogClient(base_url)
    client.initialize()
    return client.list_tools()
