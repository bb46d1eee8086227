"""Repeating-key XOR over a mutable byte buffer."""

import numpy as np


def xor_transform(buffer: bytearray | memoryview, key: bytes, offset: int = 0) -> None:
    """XOR ``buffer`` in place with ``key`` repeated from stream position ``offset``.

    Byte ``i`` of the buffer is combined with ``key[(offset + i) % len(key)]``.
    Passing the running byte count as ``offset`` keys a chunked stream exactly
    like one contiguous buffer. Applying the transform twice at the same offset
    restores the original bytes. An empty key leaves the buffer unchanged.

    Args:
        buffer: Writable bytes-like object (bytearray or a writable memoryview)
        key: Transform key bytes
        offset: Stream position of ``buffer[0]``
    """
    size = len(buffer)
    if not key or size == 0:
        return

    data = np.frombuffer(buffer, dtype=np.uint8)
    pattern = np.frombuffer(key, dtype=np.uint8)
    phase = offset % len(key)
    if phase:
        pattern = np.roll(pattern, -phase)
    np.bitwise_xor(data, np.resize(pattern, size), out=data)
