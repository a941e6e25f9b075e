"""Asyncio TCP listener feeding client lines into :class:`ClientSession`."""

from __future__ import annotations

import asyncio
import logging

from ..config.model import ServerConfig
from ..constants import CLIENT_READ_TIMEOUT, LINE_READ_LIMIT
from ..errors.handling import log_error
from ..errors.internal import NetworkError
from ..logs.logger import logger
from .session import ClientSession


def _peer_host(writer: asyncio.StreamWriter) -> tuple[str, int]:
    peer = writer.get_extra_info("peername") or ("unknown", 0)
    host, port = peer[0], peer[1]
    # trim IPv4 mapped prefix
    if host.startswith("::ffff:"):
        host = host[len("::ffff:") :]
    return host, port


class IRCServer:
    """Accepts client connections and answers their lines.

    Each connection gets its own :class:`ClientSession`; nothing is shared
    between connections.
    """

    def __init__(
        self,
        config: ServerConfig | None = None,
        *,
        read_timeout: float = CLIENT_READ_TIMEOUT,
        line_limit: int = LINE_READ_LIMIT,
    ) -> None:
        self.config = config or ServerConfig()
        self.address = self.config.listen.host
        self.port = self.config.listen.port
        self.read_timeout = read_timeout
        self.line_limit = line_limit
        self._server: asyncio.Server | None = None
        self._clients: set[asyncio.Task] = set()

    async def start(self) -> None:
        """Bind the listening socket.

        Raises:
            NetworkError: If the address cannot be bound.
        """
        try:
            self._server = await asyncio.start_server(
                self._accept,
                self.config.listen.host,
                self.config.listen.port,
                limit=self.line_limit,
            )
        except OSError as e:
            raise NetworkError(
                f"Cannot listen on {self.config.listen.host}:{self.config.listen.port}",
                data={"host": self.config.listen.host, "port": self.config.listen.port},
            ) from e
        if self._server.sockets:
            self.address, self.port = self._server.sockets[0].getsockname()[:2]
        logger.log_event("server", "listening", address=self.address, port=self.port)

    async def serve_forever(self) -> None:
        if self._server is None:
            await self.start()
        assert self._server is not None
        await self._server.serve_forever()

    async def close(self) -> None:
        if self._server is None:
            return
        self._server.close()
        for task in list(self._clients):
            task.cancel()
        if self._clients:
            await asyncio.gather(*self._clients, return_exceptions=True)
        await self._server.wait_closed()
        self._server = None
        logger.log_event("server", "closed")

    async def _accept(
        self, reader: asyncio.StreamReader, writer: asyncio.StreamWriter
    ) -> None:
        task = asyncio.current_task()
        if task is not None:
            self._clients.add(task)
        try:
            await self.handle_client(reader, writer)
        finally:
            if task is not None:
                self._clients.discard(task)

    async def handle_client(
        self, reader: asyncio.StreamReader, writer: asyncio.StreamWriter
    ) -> None:
        host, port = _peer_host(writer)
        client = f"{host}:{port}"
        session = ClientSession(host, self.config.irc)
        logger.log_event("client", "connected", client=client)
        try:
            while True:
                data = await self._read_line(reader, client)
                if data is None:
                    break
                for line in session.handle_line(data.decode("utf-8", errors="ignore")):
                    await self._send(writer, line)
        except (ConnectionResetError, BrokenPipeError) as e:
            logger.log_event(
                "client", "connection_reset", level=logging.WARNING, client=client, error=str(e)
            )
        except OSError as e:
            log_error("Client connection failed", NetworkError(str(e)), context={"client": client})
        finally:
            await self._close_writer(writer)
            logger.log_event("client", "disconnected", client=client)

    async def _read_line(self, reader: asyncio.StreamReader, client: str) -> bytes | None:
        """Next raw line, or None once the client should be dropped."""
        try:
            data = await asyncio.wait_for(reader.readline(), timeout=self.read_timeout)
        except TimeoutError:
            logger.log_event(
                "client", "read_timeout", level=logging.WARNING, client=client, timeout=self.read_timeout
            )
            return None
        except ValueError:
            # readline() reports a line above the stream limit as ValueError
            logger.log_event(
                "client", "line_too_long", level=logging.WARNING, client=client, limit=self.line_limit
            )
            return None
        if not data:
            return None
        return data

    async def _send(self, writer: asyncio.StreamWriter, line: str) -> None:
        if writer.is_closing():
            return
        writer.write(line.encode("utf-8"))
        await writer.drain()

    @staticmethod
    async def _close_writer(writer: asyncio.StreamWriter) -> None:
        writer.close()
        try:
            await writer.wait_closed()
        except (ConnectionResetError, BrokenPipeError):
            pass
