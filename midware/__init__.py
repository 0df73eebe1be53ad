"""Small middleware building blocks: buffers, matrices, priority queues, CSV reading, scheduling, drivers and ZeroMQ nodes."""

__version__ = "0.1.0"

__all__ = [
    "circular_buffer",
    "matrix",
    "metrics",
    "csv_parser",
    "scheduler",
    "driver",
    "node",
    "nodes",
]