"""Messaging nodes: publisher, subscriber, request client and reply server."""

from __future__ import annotations

import itertools
from typing import Callable, Optional

import zmq

LINGER_MS = 1000

Callback = Callable[[str], str]


class _Node:
    def __init__(self, context: zmq.Context, kind: int, endpoint: str, bind: bool) -> None:
        self.endpoint = endpoint
        self._socket = context.socket(kind)
        self._socket.setsockopt(zmq.LINGER, LINGER_MS)
        try:
            if bind:
                self._socket.bind(endpoint)
            else:
                self._socket.connect(endpoint)
        except zmq.ZMQError:
            self._socket.close(linger=0)
            raise

    @property
    def closed(self) -> bool:
        return self._socket.closed

    def close(self) -> None:
        if not self._socket.closed:
            self._socket.close()


def _iterations(limit: Optional[int]):
    return itertools.count() if limit is None else range(limit)


class Publisher(_Node):
    """Binds a PUB socket and broadcasts string messages."""

    def __init__(self, context: zmq.Context, endpoint: str) -> None:
        super().__init__(context, zmq.PUB, endpoint, bind=True)

    def publish(self, message: str) -> None:
        print(f"Publisher sending: {message}.")
        self._socket.send_string(message)

    def close(self) -> None:
        super().close()


class Subscriber(_Node):
    """Connects a SUB socket to every topic and hands messages to a callback."""

    def __init__(self, context: zmq.Context, endpoint: str, callback: Callback) -> None:
        super().__init__(context, zmq.SUB, endpoint, bind=False)
        self._callback = callback
        self._socket.setsockopt_string(zmq.SUBSCRIBE, "")

    def receive_once(self) -> str:
        """Wait for one message and return what the callback makes of it."""
        message = self._socket.recv_string()
        print(f"Subscriber received: {message}.")
        return self._callback(message)

    def spin(self, max_messages: Optional[int] = None) -> None:
        """Process messages forever, or max_messages of them."""
        for _ in _iterations(max_messages):
            self.receive_once()

    def close(self) -> None:
        super().close()


class Server(_Node):
    """Binds a REP socket and answers each request with the callback's reply."""

    def __init__(self, context: zmq.Context, endpoint: str, callback: Callback) -> None:
        super().__init__(context, zmq.REP, endpoint, bind=True)
        self._callback = callback

    def handle_once(self) -> str:
        """Serve one request and return the reply that was sent."""
        request = self._socket.recv_string()
        print(f"Server received: {request} from client.")
        reply = self._callback(request)
        print(f"Server sending: {reply} to client.")
        self._socket.send_string(reply)
        return reply

    def spin(self, max_requests: Optional[int] = None) -> None:
        """Serve requests forever, or max_requests of them."""
        for _ in _iterations(max_requests):
            self.handle_once()

    def close(self) -> None:
        super().close()


class Client(_Node):
    """Connects a REQ socket and makes blocking request/reply exchanges."""

    def __init__(self, context: zmq.Context, endpoint: str) -> None:
        super().__init__(context, zmq.REQ, endpoint, bind=False)

    def request(self, message: str) -> str:
        print(f"Client sending: {message} to server.")
        self._socket.send_string(message)
        reply = self._socket.recv_string()
        print(f"Client received: {reply} from server.")
        return reply

    def close(self) -> None:
        super().close()


class NodeHandle:
    """Creates nodes on one context and closes them together."""

    def __init__(self, context: Optional[zmq.Context] = None) -> None:
        self._owns_context = context is None
        self.context = zmq.Context() if context is None else context
        self._nodes: list[_Node] = []

    def _track(self, node: _Node) -> _Node:
        self._nodes.append(node)
        return node

    def create_publisher(self, endpoint: str) -> Publisher:
        return self._track(Publisher(self.context, endpoint))

    def create_subscriber(self, endpoint: str, callback: Callback) -> Subscriber:
        return self._track(Subscriber(self.context, endpoint, callback))

    def create_server(self, endpoint: str, callback: Callback) -> Server:
        return self._track(Server(self.context, endpoint, callback))

    def create_client(self, endpoint: str) -> Client:
        return self._track(Client(self.context, endpoint))

    def close(self) -> None:
        """Close every node created here, and the context if this handle made it."""
        for node in self._nodes:
            node.close()
        self._nodes.clear()
        if self._owns_context and not self.context.closed:
            self.context.term()

    def __enter__(self) -> "NodeHandle":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()