"""Key events and the byte-level decoding that produces them."""

from .decoder import decode_byte, decode_key, iter_keys
from .events import KeyInput
from .reader import ByteSource, KeyReader

__all__ = [
    "KeyInput",
    "decode_byte",
    "decode_key",
    "iter_keys",
    "ByteSource",
    "KeyReader",
]
