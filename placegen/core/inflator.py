"""Padding of encoded images up to a target byte size."""

import logging

logger = logging.getLogger(__name__)


def inflate(data: bytes, target_size: int) -> bytes:
    """Append zero bytes until ``data`` is ``target_size`` long.

    A non-positive target, or one that does not exceed the current length,
    returns ``data`` unchanged. The original bytes are always a prefix of the
    result.

    Args:
        data: Encoded image bytes
        target_size: Desired total length in bytes, 0 for no target

    Returns:
        Padded bytes
    """
    if target_size <= 0 or target_size <= len(data):
        return data

    padding = target_size - len(data)
    logger.debug(f"Padding {len(data)} bytes with {padding} zero bytes")
    return data + bytes(padding)
