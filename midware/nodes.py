"""Command entry points that run a publisher, subscriber, server or client."""

from __future__ import annotations

import argparse
import itertools
import time

from midware.node import NodeHandle


def process(message: str) -> str:
    """The work done on each incoming message."""
    return "Processed " + message


def _parser(description: str, endpoint: str) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description=description)
    parser.add_argument("--endpoint", default=endpoint)
    parser.add_argument("--count", type=int, default=None)
    return parser


def publisher_main(argv=None) -> int:
    """Publish a message over and over."""
    parser = _parser("Publish messages.", "tcp://*:5556")
    parser.add_argument("--message", default="test")
    parser.add_argument("--interval", type=float, default=0.0)
    args = parser.parse_args(argv)

    iterations = itertools.count() if args.count is None else range(args.count)
    with NodeHandle() as handle:
        publisher = handle.create_publisher(args.endpoint)
        for _ in iterations:
            publisher.publish(args.message)
            if args.interval > 0:
                time.sleep(args.interval)
    return 0


def _on_message(message: str) -> str:
    print(f"Processing message from publisher: {message}...")
    return process(message)


def subscriber_main(argv=None) -> int:
    """Receive and process published messages."""
    args = _parser("Subscribe to messages.", "tcp://localhost:5556").parse_args(argv)
    with NodeHandle() as handle:
        subscriber = handle.create_subscriber(args.endpoint, _on_message)
        subscriber.spin(args.count)
    return 0


def _on_request(request: str) -> str:
    print(f"Processing request from client: {request}...")
    return process(request)


def server_main(argv=None) -> int:
    """Answer client requests."""
    args = _parser("Serve requests.", "tcp://*:5555").parse_args(argv)
    with NodeHandle() as handle:
        server = handle.create_server(args.endpoint, _on_request)
        server.spin(args.count)
    return 0


def client_main(argv=None) -> int:
    """Send numbered requests; asks how many when --count is not given."""
    args = _parser("Send requests.", "tcp://localhost:5555").parse_args(argv)
    count = args.count
    if count is None:
        print("Enter number of requests to send: ")
        try:
            count = int(input())
        except (ValueError, EOFError):
            print("Invalid number of requests.")
            return 2
    with NodeHandle() as handle:
        client = handle.create_client(args.endpoint)
        for i in range(count):
            client.request(f"Message #{i}")
    return 0