import io

import pytest

from midware.driver import (
    Driver,
    ImuDriver,
    LidarDriver,
    Socket,
    TcpProtocol,
    UdpProtocol,
    main,
)


def test_imu_driver_lifecycle_output():
    out = io.StringIO()
    with ImuDriver("IMU_ID", out) as imu:
        assert imu.initialize() is True
        assert imu.poll() is True
        imu.shutdown()
    assert out.getvalue().splitlines() == [
        "Socket constructed",
        "ImuDriver constructed",
        "ImuDriver: initialize",
        "TCP: connect",
        "ImuDriver: poll",
        "TCP: poll",
        "ImuDriver: shutdown",
        "TCP: disconnect",
        "ImuDriver destructed",
        "Socket destructed",
    ]


def test_lidar_driver_uses_udp():
    out = io.StringIO()
    lidar = LidarDriver("LIDAR_ID", out)
    assert lidar.initialize() is True
    lidar.close()
    lines = out.getvalue().splitlines()
    assert "UDP: connect" in lines
    assert not any(line.startswith("TCP") for line in lines)
    assert lines[-2:] == ["LidarDriver destructed", "Socket destructed"]


def test_close_is_idempotent():
    out = io.StringIO()
    driver = ImuDriver("IMU_ID", out)
    driver.close()
    driver.close()
    assert out.getvalue().count("destructed") == 2
    assert driver.closed


def test_driver_keeps_id():
    driver = LidarDriver("LIDAR_ID", io.StringIO())
    assert driver.id == "LIDAR_ID"


def test_base_driver_cannot_be_constructed():
    with pytest.raises(TypeError):
        Driver("X", io.StringIO())


def test_socket_delegates_and_rejects_use_after_close():
    out = io.StringIO()
    socket = Socket("S", TcpProtocol(out), out)
    assert socket.poll() is True
    socket.close()
    with pytest.raises(RuntimeError):
        socket.connect()
    assert out.getvalue().splitlines() == [
        "Socket constructed",
        "TCP: poll",
        "Socket destructed",
    ]


def test_protocols_report_their_actions():
    out = io.StringIO()
    udp = UdpProtocol(out)
    assert udp.connect() is True
    udp.disconnect()
    assert out.getvalue().splitlines() == ["UDP: connect", "UDP: disconnect"]


def test_main_output(capsys):
    assert main([]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "Creating IMU driver"
    assert "" in lines
    blank = lines.index("")
    assert lines[blank + 1] == "Creating LIDAR driver"
    assert lines[blank - 1] == "Socket destructed"
    assert lines[-1] == "Socket destructed"