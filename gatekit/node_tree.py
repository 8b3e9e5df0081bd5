"""Path-addressed tree of services.

A path such as ``logInfo/config/info`` is split on ``/`` and matched one
level at a time; the last component must name a node with a handler.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from enum import IntFlag
from typing import Any

MAX_PATH_LEN = 127

log = logging.getLogger(__name__)


class Method(IntFlag):
    GET = 1
    POST = 2


Process = Callable[["ServiceNode", Any], Any]


@dataclass
class ServiceNode:
    """A named service, with either a handler or child services."""

    name: str
    process: Process | None = None
    children: list[ServiceNode] = field(default_factory=list)
    methods: Method = Method.GET
    description: str | None = None


class ServiceNotFound(LookupError):
    """Raised when a path does not lead to a node with a handler."""


def find_process(
    nodes: Sequence[ServiceNode], path: str
) -> tuple[Process, ServiceNode]:
    """Resolve ``path`` against ``nodes`` and return ``(handler, node)``.

    Empty path components are skipped; paths longer than
    ``MAX_PATH_LEN`` characters are cut to that length.
    """
    tokens = [token for token in path[:MAX_PATH_LEN].split("/") if token]
    if not tokens:
        raise ServiceNotFound(f"no match node: {path}")
    level: Sequence[ServiceNode] = nodes
    for depth, token in enumerate(tokens):
        found = next((node for node in level if node.name == token), None)
        if found is None:
            raise ServiceNotFound(f"no match node: {token}")
        if depth == len(tokens) - 1:
            if found.process is None:
                raise ServiceNotFound(f"node has no service: {found.name}")
            return found.process, found
        if not found.children:
            break
        level = found.children
    raise ServiceNotFound(f"no match node: {path}")


def _announce(label: str) -> Process:
    def handler(node: ServiceNode, args: Any) -> None:
        log.info("%s called for %s", label, node.name)

    handler.__name__ = label
    return handler


def build_default_tree() -> list[ServiceNode]:
    """Return the standard root services: system, logInfo and network."""
    system = ServiceNode(
        "system",
        children=[
            ServiceNode("config", _announce("system_config")),
            ServiceNode("info", _announce("system_info")),
        ],
        description="system calls",
    )
    log_config = ServiceNode(
        "config",
        children=[
            ServiceNode("config", _announce("log_config_v2")),
            ServiceNode("info", _announce("log_info_v2")),
        ],
    )
    log_info = ServiceNode(
        "logInfo",
        children=[log_config, ServiceNode("info", _announce("log_info"))],
        description="logs",
    )
    network = ServiceNode(
        "network",
        _announce("network"),
        methods=Method.GET | Method.POST,
        description="network parameters",
    )
    return [system, log_info, network]