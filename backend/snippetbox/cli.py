"""
Snippetbox Backend - Command-Line Entry Point
=============================================

What:  Starts the Snippetbox HTTP server.
How:   Parses flags, binds the listen socket, and runs uvicorn on it.
Who:   The ``snippetbox`` console script and ``python -m snippetbox``.

Usage:
    snippetbox                      # listen on :4000
    snippetbox -port :8080          # listen on all interfaces, port 8080
    snippetbox -port 127.0.0.1:4000 --static-dir ./ui/static

A listen address that cannot be bound (already in use, permission denied)
is fatal: the error is logged and the process exits with status 1.
"""

import argparse
import errno
import logging
import socket
import sys
from typing import List, Optional

import uvicorn
from pydantic import ValidationError

from snippetbox import __version__
from snippetbox.config import Settings, settings as default_settings
from snippetbox.main import create_app, setup_logging

logger = logging.getLogger("snippetbox")

NO_IPV6_ERRNOS = {errno.EAFNOSUPPORT, errno.EADDRNOTAVAIL, errno.EPROTONOSUPPORT}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="snippetbox",
        description="Run the Snippetbox HTTP server.",
    )
    parser.add_argument(
        "-port",
        "--port",
        dest="listen_addr",
        default=default_settings.listen_addr,
        help="HTTP network address, host:port (default: %(default)s)",
    )
    parser.add_argument(
        "--static-dir",
        default=default_settings.static_dir,
        help="directory served under /static/ (default: %(default)s)",
    )
    parser.add_argument(
        "--log-level",
        default=default_settings.log_level,
        help="logging level name (default: %(default)s)",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def _bind(family: int, host: str, port: int, dual_stack: bool = False) -> socket.socket:
    sock = socket.socket(family, socket.SOCK_STREAM)
    try:
        sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
        if dual_stack:
            sock.setsockopt(socket.IPPROTO_IPV6, socket.IPV6_V6ONLY, 0)
        sock.bind((host, port))
    except OSError:
        sock.close()
        raise
    sock.set_inheritable(True)
    return sock


def bind_socket(host: str, port: int) -> socket.socket:
    """
    Bind (but do not listen on) a TCP socket for ``host:port``.

    An empty host binds a dual-stack IPv6 socket on ``::`` that also accepts
    IPv4 connections. Where the kernel has no IPv6 support it binds
    ``0.0.0.0`` instead. Any other bind error, such as the port being in
    use, propagates.
    """
    if host == "":
        try:
            return _bind(socket.AF_INET6, "::", port, dual_stack=True)
        except OSError as e:
            if e.errno not in NO_IPV6_ERRNOS:
                raise
            logger.info("IPv6 unavailable (%s); listening on IPv4 only", e)
        host = "0.0.0.0"
    family = socket.AF_INET6 if ":" in host else socket.AF_INET
    return _bind(family, host, port)


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        app_settings = Settings(
            listen_addr=args.listen_addr,
            static_dir=args.static_dir,
            log_level=args.log_level,
        )
    except ValidationError as e:
        parser.error(str(e))

    setup_logging(app_settings.log_level)

    try:
        sock = bind_socket(app_settings.host, app_settings.port)
    except OSError as e:
        logger.error("Cannot listen on %s: %s", app_settings.listen_addr, e)
        return 1

    config = uvicorn.Config(
        create_app(app_settings),
        host=app_settings.host or "::",
        port=app_settings.port,
        log_config=None,
        access_log=False,
    )
    server = uvicorn.Server(config)
    server.run(sockets=[sock])
    return 0


if __name__ == "__main__":
    sys.exit(main())
