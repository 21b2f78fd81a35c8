"""A broadcast chat server and a line-based chat client over TCP."""

from __future__ import annotations

import argparse
import socket
import sys
import threading
from typing import Optional, Sequence

DEFAULT_PORT = 12345
DEFAULT_SERVER_HOST = "0.0.0.0"
DEFAULT_CLIENT_HOST = "127.0.0.1"
BUFFER_SIZE = 4096
QUIT_COMMAND = "quit"

_ACCEPT_POLL_SECONDS = 0.2


def _close_quietly(sock: socket.socket) -> None:
    try:
        sock.shutdown(socket.SHUT_RDWR)
    except OSError:
        pass
    sock.close()


class ChatServer:
    """Accepts clients and relays each message to every other connected client."""

    def __init__(self, host: str = DEFAULT_SERVER_HOST, port: int = DEFAULT_PORT) -> None:
        self._listener = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
        try:
            self._listener.bind((host, port))
            self._listener.listen(socket.SOMAXCONN)
        except OSError:
            self._listener.close()
            raise
        self._listener.settimeout(_ACCEPT_POLL_SECONDS)
        self._clients: list[socket.socket] = []
        self._lock = threading.Lock()
        self._stopping = threading.Event()

    @property
    def address(self) -> tuple[str, int]:
        """The host and port the server listens on."""
        host, port = self._listener.getsockname()[:2]
        return host, port

    @property
    def connected(self) -> int:
        """How many clients are currently connected."""
        with self._lock:
            return len(self._clients)

    def serve_forever(self) -> None:
        """Accept clients until shut down, serving each on its own thread."""
        while not self._stopping.is_set():
            try:
                conn, _ = self._listener.accept()
            except TimeoutError:
                continue
            except OSError:
                if self._stopping.is_set():
                    return
                raise
            conn.setblocking(True)
            with self._lock:
                if self._stopping.is_set():
                    _close_quietly(conn)
                    return
                self._clients.append(conn)
            threading.Thread(target=self._serve_client, args=(conn,), daemon=True).start()

    def _serve_client(self, conn: socket.socket) -> None:
        print("Client Connected")
        while True:
            try:
                data = conn.recv(BUFFER_SIZE)
            except OSError:
                data = b""
            if not data:
                print("Client Disconnected")
                break
            message = data.decode("utf-8", errors="replace")
            print(f"Message from client : {message}")
            self.broadcast(message, conn)
        with self._lock:
            if conn in self._clients:
                self._clients.remove(conn)
        conn.close()

    def broadcast(self, message: str, sender: Optional[socket.socket]) -> None:
        """Send ``message`` to every connected client except ``sender``."""
        payload = message.encode("utf-8")
        with self._lock:
            recipients = [client for client in self._clients if client is not sender]
        for client in recipients:
            try:
                client.sendall(payload)
            except OSError:
                pass

    def shutdown(self) -> None:
        """Stop accepting and disconnect every client."""
        self._stopping.set()
        self._listener.close()
        with self._lock:
            clients = list(self._clients)
            self._clients.clear()
        for client in clients:
            _close_quietly(client)

    def __enter__(self) -> ChatServer:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.shutdown()


class ChatClient:
    """A connection to a chat server that sends messages under a chat name."""

    def __init__(
        self,
        name: str,
        host: str = DEFAULT_CLIENT_HOST,
        port: int = DEFAULT_PORT,
        timeout: Optional[float] = None,
    ) -> None:
        self.name = name
        self._sock = socket.create_connection((host, port), timeout=timeout)

    def send(self, message: str) -> None:
        """Send ``message`` as ``<name> : <message>``."""
        self._sock.sendall(f"{self.name} : {message}".encode("utf-8"))

    def receive(self) -> Optional[str]:
        """The next chunk of text from the server, or ``None`` once disconnected.

        Raises TimeoutError if the client was given a timeout and it expires.
        """
        try:
            data = self._sock.recv(BUFFER_SIZE)
        except TimeoutError:
            raise
        except OSError:
            return None
        if not data:
            return None
        return data.decode("utf-8", errors="replace")

    def close(self) -> None:
        """Close the connection."""
        _close_quietly(self._sock)

    def __enter__(self) -> ChatClient:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


def _print_incoming(client: ChatClient) -> None:
    while (message := client.receive()) is not None:
        print(message)
    print("Disconnected from the server")


def server_main(argv: Optional[Sequence[str]] = None) -> int:
    """Run a chat server until interrupted."""
    parser = argparse.ArgumentParser(description="Run the chat server.")
    parser.add_argument("--host", default=DEFAULT_SERVER_HOST)
    parser.add_argument("--port", type=int, default=DEFAULT_PORT)
    args = parser.parse_args(argv)
    print("Server Program")
    try:
        server = ChatServer(args.host, args.port)
    except OSError as exc:
        print(f"Bind Failed: {exc}")
        return 1
    print(f"Server has started listening on port : {server.address[1]}")
    try:
        server.serve_forever()
    except KeyboardInterrupt:
        pass
    except OSError as exc:
        print(f"Invalid client socket: {exc}")
        return 1
    finally:
        server.shutdown()
    return 0


def client_main(argv: Optional[Sequence[str]] = None) -> int:
    """Connect to a chat server, then send lines from standard input until ``quit``."""
    parser = argparse.ArgumentParser(description="Run a chat client.")
    parser.add_argument("--host", default=DEFAULT_CLIENT_HOST)
    parser.add_argument("--port", type=int, default=DEFAULT_PORT)
    args = parser.parse_args(argv)
    print("Client Program")
    print("Enter your chat name : ")
    name = sys.stdin.readline().rstrip("\n")
    try:
        client = ChatClient(name, args.host, args.port)
    except OSError:
        print("Not able to connect to server")
        return 1
    print("Successfully connected to server")
    receiver = threading.Thread(target=_print_incoming, args=(client,), daemon=True)
    receiver.start()
    for line in sys.stdin:
        message = line.rstrip("\n")
        try:
            client.send(message)
        except OSError:
            print("Error sending the message")
            break
        if message == QUIT_COMMAND:
            print("Stopping the application.")
            break
    client.close()
    receiver.join(timeout=5)
    return 0


if __name__ == "__main__":
    sys.exit(server_main())