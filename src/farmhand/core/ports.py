# src/farmhand/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the core.

The task system depends on Protocols instead of concrete implementations.
The RPC transport and the push channel live in the network layer; tests swap in fakes.
"""

from typing import Any, Awaitable, Callable, Protocol

Payload = dict[str, Any]
# Decoded message: plain field -> value mapping (wire field names, snake_case).

EventHandler = Callable[..., Any]


class RpcTransport(Protocol):
    """
    Request/reply transport to the game server.

    Raises on transport or remote failure; never returns an error reply.
    """

    def send(self, service: str, method: str, payload: Payload) -> Awaitable[Payload]: ...


class EventSource(Protocol):
    """Push-notification channel (server -> client)."""

    def on(self, event: str, handler: EventHandler) -> None: ...
    def off(self, event: str, handler: EventHandler) -> None: ...


class ItemNameLookup(Protocol):
    def get_item_name(self, item_id: int) -> str: ...
