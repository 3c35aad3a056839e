"""
Conversions between what a user types into an action and the bytes that go
onto the wire.

.. autofunction:: studio_protocol.codec.resolve_escape_sequences

.. autofunction:: studio_protocol.codec.text_to_bytes

.. autofunction:: studio_protocol.codec.hex_to_bytes
"""
from studio_app import helpers as hp

import logging
import re

log = logging.getLogger("studio_protocol.codec")

escapes = {
    "a": "\a",
    "b": "\b",
    "f": "\f",
    "n": "\n",
    "r": "\r",
    "t": "\t",
    "v": "\v",
    "0": "\0",
    "\\": "\\",
    '"': '"',
    "'": "'",
}

unescapes = {
    "\a": "\\a",
    "\b": "\\b",
    "\f": "\\f",
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
    "\v": "\\v",
    "\0": "\\0",
    "\\": "\\\\",
}

regexes = {
    "escape": re.compile(r"\\(.)", re.DOTALL),
    "whitespace": re.compile(r"\s+"),
    "hex_pair": re.compile(r"^[0-9a-fA-F]{2}$"),
    "lone_surrogate": re.compile("[\ud800-\udfff]"),
}


def resolve_escape_sequences(text):
    """
    Replace C style escape tokens like ``\\r`` and ``\\n`` with the control
    characters they represent.

    We go through the string once from left to right so ``\\\\n`` is a
    backslash followed by the letter n rather than a newline. Tokens we don't
    recognise, and a backslash at the very end, are left as is.
    """

    def replace(m):
        return escapes.get(m.group(1), m.group(0))

    return regexes["escape"].sub(replace, text)


def text_to_bytes(text):
    """
    Return text encoded as utf-8.

    Lone surrogates can't be encoded so each one becomes U+FFFD.
    """
    return regexes["lone_surrogate"].sub("\ufffd", text).encode("utf-8")


def hex_to_bytes(text):
    """
    Convert a string of hex digit pairs like ``"48 65 6C"`` into bytes.

    Whitespace is ignored. If we have an odd number of digits we complain and
    return empty bytes. Pairs that aren't hex digits are skipped.
    """
    digits = regexes["whitespace"].sub("", text)

    if len(digits) % 2 != 0:
        log.warning(hp.lc("Not a valid hexadecimal array", got=text))
        return b""

    result = bytearray()
    for i in range(0, len(digits), 2):
        pair = digits[i : i + 2]
        if regexes["hex_pair"].match(pair):
            result.append(int(pair, 16))
        else:
            log.debug(hp.lc("Skipping invalid hex pair", pair=pair))

    return bytes(result)


def bytes_to_hex(data, separator=" "):
    """Return data as upper case hex pairs joined by separator"""
    return separator.join("{0:02X}".format(b) for b in data)


def escape_bytes(data):
    """
    Return a printable version of data where control characters are shown as
    the escape tokens ``resolve_escape_sequences`` understands.

    Anything that isn't valid utf-8 or is otherwise unprintable is shown as
    ``\\xHH``.
    """
    text = data.decode("utf-8", errors="surrogateescape")

    result = []
    for char in text:
        if char in unescapes:
            result.append(unescapes[char])
        elif 0xDC80 <= ord(char) <= 0xDCFF:
            result.append("\\x{0:02x}".format(ord(char) - 0xDC00))
        elif char.isprintable():
            result.append(char)
        elif ord(char) <= 0xFF:
            result.append("\\x{0:02x}".format(ord(char)))
        else:
            result.append("\\u{0:04x}".format(ord(char)))
    return "".join(result)
