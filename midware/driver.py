"""Device drivers that talk to their devices through protocol-specific sockets."""

from __future__ import annotations

import argparse
from typing import ClassVar, Optional, TextIO


class _Protocol:
    label: ClassVar[str] = ""

    def __init__(self, out: Optional[TextIO] = None) -> None:
        self._out = out

    def _say(self, action: str) -> None:
        print(f"{self.label}: {action}", file=self._out)

    def connect(self) -> bool:
        self._say("connect")
        return True

    def poll(self) -> bool:
        self._say("poll")
        return True

    def disconnect(self) -> None:
        self._say("disconnect")


class TcpProtocol(_Protocol):
    """TCP transport."""

    label = "TCP"

    def __init__(self, out: Optional[TextIO] = None) -> None:
        super().__init__(out)

    def connect(self) -> bool:
        return super().connect()

    def poll(self) -> bool:
        return super().poll()

    def disconnect(self) -> None:
        super().disconnect()


class UdpProtocol(_Protocol):
    """UDP transport."""

    label = "UDP"

    def __init__(self, out: Optional[TextIO] = None) -> None:
        super().__init__(out)

    def connect(self) -> bool:
        return super().connect()

    def poll(self) -> bool:
        return super().poll()

    def disconnect(self) -> None:
        super().disconnect()


class Socket:
    """A named socket that delegates to a transport protocol."""

    def __init__(self, socket_id: str, protocol: _Protocol, out: Optional[TextIO] = None) -> None:
        self.id = socket_id
        self._protocol = protocol
        self._out = out
        self._closed = False
        print("Socket constructed", file=self._out)

    @property
    def closed(self) -> bool:
        return self._closed

    def _check_open(self) -> None:
        if self._closed:
            raise RuntimeError("socket is closed")

    def connect(self) -> bool:
        self._check_open()
        return self._protocol.connect()

    def poll(self) -> bool:
        self._check_open()
        return self._protocol.poll()

    def disconnect(self) -> None:
        self._check_open()
        self._protocol.disconnect()

    def close(self) -> None:
        """Release the socket; later calls do nothing."""
        if self._closed:
            return
        self._closed = True
        print("Socket destructed", file=self._out)


class Driver:
    """Base driver; subclasses choose the transport protocol."""

    protocol_class: ClassVar[Optional[type]] = None

    def __init__(self, driver_id: str, out: Optional[TextIO] = None) -> None:
        if self.protocol_class is None:
            raise TypeError(f"{type(self).__name__} does not define a protocol")
        self.id = driver_id
        self._out = out
        self._closed = False
        self._socket = Socket(driver_id, self.protocol_class(out), out)
        print(f"{self._name} constructed", file=self._out)

    @property
    def _name(self) -> str:
        return type(self).__name__

    @property
    def closed(self) -> bool:
        return self._closed

    def initialize(self) -> bool:
        print(f"{self._name}: initialize", file=self._out)
        return self._socket.connect()

    def poll(self) -> bool:
        print(f"{self._name}: poll", file=self._out)
        return self._socket.poll()

    def shutdown(self) -> None:
        print(f"{self._name}: shutdown", file=self._out)
        self._socket.disconnect()

    def close(self) -> None:
        """Release the driver and its socket; later calls do nothing."""
        if self._closed:
            return
        self._closed = True
        print(f"{self._name} destructed", file=self._out)
        self._socket.close()

    def __enter__(self) -> "Driver":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()


class ImuDriver(Driver):
    """Inertial measurement unit reached over TCP."""

    protocol_class = TcpProtocol


class LidarDriver(Driver):
    """LIDAR reached over UDP."""

    protocol_class = UdpProtocol


def main(argv=None) -> int:
    """Bring an IMU and a LIDAR driver up, poll them and shut them down."""
    argparse.ArgumentParser(description="Exercise the IMU and LIDAR drivers.").parse_args(argv)

    print("Creating IMU driver")
    with ImuDriver("IMU_ID") as imu:
        imu.initialize()
        imu.poll()
        imu.shutdown()

    print()

    print("Creating LIDAR driver")
    with LidarDriver("LIDAR_ID") as lidar:
        lidar.initialize()
        lidar.poll()
        lidar.shutdown()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())