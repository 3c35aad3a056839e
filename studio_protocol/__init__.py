from studio_protocol.codec import (
    bytes_to_hex,
    escape_bytes,
    hex_to_bytes,
    resolve_escape_sequences,
    text_to_bytes,
)

__all__ = ["hex_to_bytes", "text_to_bytes", "resolve_escape_sequences", "bytes_to_hex", "escape_bytes"]
