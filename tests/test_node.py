import threading

import pytest
import zmq

from midware.node import Client, NodeHandle, Publisher, Server, Subscriber


@pytest.fixture
def context():
    ctx = zmq.Context()
    yield ctx
    ctx.term()


def test_request_reply_round_trip(context):
    server = Server(context, "inproc://rr", lambda request: request[::-1])
    client = Client(context, "inproc://rr")
    results = []
    worker = threading.Thread(target=lambda: results.append(server.handle_once()))
    worker.start()
    try:
        reply = client.request("abc")
    finally:
        worker.join(timeout=5)
        client.close()
        server.close()
    assert reply == "cba"
    assert results == ["cba"]


def test_server_spin_handles_limited_requests(context):
    server = Server(context, "inproc://spin", lambda request: request + "!")
    client = Client(context, "inproc://spin")
    worker = threading.Thread(target=server.spin, kwargs={"max_requests": 2})
    worker.start()
    replies = [client.request("a"), client.request("b")]
    worker.join(timeout=5)
    client.close()
    server.close()
    assert replies == ["a!", "b!"]
    assert not worker.is_alive()


def test_publish_subscribe(context, capsys):
    publisher = Publisher(context, "inproc://pubsub")
    subscriber = Subscriber(context, "inproc://pubsub", lambda message: message.upper())
    stop = threading.Event()

    def pump():
        while not stop.is_set():
            publisher.publish("hello")
            stop.wait(0.01)

    worker = threading.Thread(target=pump)
    worker.start()
    try:
        result = subscriber.receive_once()
    finally:
        stop.set()
        worker.join(timeout=5)
        subscriber.close()
        publisher.close()
    assert result == "HELLO"
    out = capsys.readouterr().out
    assert "Publisher sending: hello." in out
    assert "Subscriber received: hello." in out


def test_binding_same_endpoint_twice_raises(context):
    first = Publisher(context, "inproc://dup")
    try:
        with pytest.raises(zmq.ZMQError):
            Publisher(context, "inproc://dup")
    finally:
        first.close()


def test_node_handle_closes_its_nodes_but_not_borrowed_context(context):
    handle = NodeHandle(context)
    client = handle.create_client("inproc://nowhere")
    publisher = handle.create_publisher("inproc://handle")
    handle.close()
    assert client.closed
    assert publisher.closed
    assert not context.closed


def test_node_handle_terminates_own_context():
    with NodeHandle() as handle:
        handle.create_server("inproc://own", lambda request: request)
        ctx = handle.context
    assert ctx.closed


def test_node_handle_creates_working_pair():
    with NodeHandle() as handle:
        server = handle.create_server("inproc://pair", lambda request: "ok:" + request)
        client = handle.create_client("inproc://pair")
        worker = threading.Thread(target=server.handle_once)
        worker.start()
        reply = client.request("ping")
        worker.join(timeout=5)
    assert reply == "ok:ping"