"""
This module implements the URL decomposer behind the ``parseurl`` command.

``parse_url`` splits an absolute or relative URL into its components and
returns an immutable ``UrlParts`` value. The rich report printed by the CLI
is built from that value by ``build_report``; parsing itself has no side
effects.

Query strings are split on ``&`` and each segment on its first ``=``. Keys
and values are percent-decoded, a segment without ``=`` keeps its key with a
``None`` value, and a repeated key keeps the LAST value seen (at the
position where the key first appeared).
"""
import logging
import re
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional, Tuple
from urllib.parse import unquote, urlsplit

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from shellbox.core.errors import ParseError

logger = logging.getLogger(__name__)

DEFAULT_PORTS: Mapping[str, int] = MappingProxyType({
    "http": 80,
    "https": 443,
    "ws": 80,
    "wss": 443,
    "ftp": 21,
    "sftp": 22,
    "ssh": 22,
    "telnet": 23,
    "gopher": 70,
    "ldap": 389,
    "ldaps": 636,
    "nntp": 119,
})

# Schemes that make no sense without an authority component.
HOST_REQUIRED_SCHEMES = frozenset({"http", "https", "ws", "wss", "ftp", "sftp", "ssh", "telnet"})

_SCHEME_PATTERN = re.compile(r"^[A-Za-z][A-Za-z0-9+.\-]*$")
_FORBIDDEN_CHARS = re.compile(r"[\x00-\x20\x7f<>\"{}|\\^`]")


@dataclass(frozen=True)
class UrlParts:
    original: str
    scheme: str
    host: str
    port: Optional[int]
    path: str
    query_parameters: Mapping[str, Optional[str]] = field(default_factory=lambda: MappingProxyType({}))
    fragment: str = ""
    user_info: str = ""
    is_default_port: bool = True
    path_segments: Tuple[str, ...] = ()

    @property
    def is_absolute(self) -> bool:
        return bool(self.scheme)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "original": self.original,
            "scheme": self.scheme,
            "host": self.host,
            "port": self.port,
            "path": self.path,
            "query_parameters": dict(self.query_parameters),
            "fragment": self.fragment,
            "user_info": self.user_info,
            "is_default_port": self.is_default_port,
            "path_segments": list(self.path_segments),
        }


def parse_query(query: str) -> Dict[str, Optional[str]]:
    """
    Split a raw query string (without the leading '?') into an ordered dict.

    Empty segments are skipped. A duplicate key overwrites the earlier value.
    """
    params: Dict[str, Optional[str]] = {}
    for segment in query.split("&"):
        if not segment:
            continue
        key, sep, value = segment.partition("=")
        params[unquote(key)] = unquote(value) if sep else None
    return params


def _split_authority(netloc: str) -> Tuple[str, str]:
    """Return (user_info, host) from a netloc, keeping the host's case."""
    user_info, _, host_port = netloc.rpartition("@")
    if host_port.startswith("["):
        closing = host_port.find("]")
        if closing == -1:
            raise ValueError("unbalanced IPv6 brackets")
        return user_info, host_port[1:closing]
    host, _, _ = host_port.partition(":")
    return user_info, host


def parse_url(raw: str) -> UrlParts:
    """
    Parse ``raw`` into a ``UrlParts`` value.

    :param raw: The URL text. Surrounding whitespace is ignored.
    :raises ParseError: If the input is empty or not a valid URI. No partial
                        result is ever returned.
    """
    if raw is None or not raw.strip():
        raise ParseError("", "empty input")

    text = raw.strip()
    bad_char = _FORBIDDEN_CHARS.search(text)
    if bad_char:
        raise ParseError(raw, f"illegal character {bad_char.group()!r} at position {bad_char.start()}")

    try:
        split = urlsplit(text)
        explicit_port = split.port
        user_info, host = _split_authority(split.netloc)
    except ValueError as e:
        raise ParseError(raw, str(e)) from e

    scheme = split.scheme
    if scheme and not _SCHEME_PATTERN.match(scheme):
        raise ParseError(raw, f"invalid scheme {scheme!r}")
    if not scheme and ":" in text.split("/", 1)[0].split("?", 1)[0].split("#", 1)[0]:
        raise ParseError(raw, "invalid scheme")
    if scheme.lower() in HOST_REQUIRED_SCHEMES and not host:
        raise ParseError(raw, f"missing host for {scheme} URL")

    default_port = DEFAULT_PORTS.get(scheme.lower())
    port = explicit_port if explicit_port is not None else default_port
    is_default_port = explicit_port is None or explicit_port == default_port

    parts = UrlParts(
        original=raw,
        scheme=scheme,
        host=host,
        port=port,
        path=split.path,
        query_parameters=MappingProxyType(parse_query(split.query)),
        fragment=split.fragment,
        user_info=user_info,
        is_default_port=is_default_port,
        path_segments=tuple(unquote(s) for s in split.path.split("/") if s),
    )
    logger.debug(f"Parsed {raw!r} -> scheme={scheme!r} host={host!r} port={port}")
    return parts


def build_report(parts: UrlParts) -> Table:
    """Lay out a ``UrlParts`` value as a two-column rich table."""
    table = Table(title=f"URL: {escape(parts.original)}", show_header=True, header_style="bold magenta")
    table.add_column("Component", style="bold cyan")
    table.add_column("Value")

    port_text = "" if parts.port is None else str(parts.port)
    if parts.port is not None and parts.is_default_port:
        port_text += " (default)"

    table.add_row("Scheme", parts.scheme or "[dim](relative)[/dim]")
    table.add_row("User info", escape(parts.user_info))
    table.add_row("Host", escape(parts.host))
    table.add_row("Port", port_text)
    table.add_row("Path", escape(parts.path))
    table.add_row("Segments", escape(" / ".join(parts.path_segments)))
    for key, value in parts.query_parameters.items():
        table.add_row(f"Query: {escape(key)}", "[dim](no value)[/dim]" if value is None else escape(value))
    table.add_row("Fragment", escape(parts.fragment))
    return table


def print_report(parts: UrlParts, console: Console = None) -> None:
    (console or Console()).print(build_report(parts))
