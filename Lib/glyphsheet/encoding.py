#!/usr/bin/env python3
# Copyright 2026 The glyphsheet Authors.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
#
"""UTF-8 encoding of single codepoints.

>>> encode_codepoint(0x41)
b'A'
>>> encode_codepoint(0x20AC).hex()
'e282ac'
>>> decode_character(b'\\xe2\\x82\\xac') == 0x20AC
True
"""

_CONTINUATION = 0x80
_CONTINUATION_MASK = 0x3F


def encode_codepoint(codepoint):
    """Return the UTF-8 bytes for a single codepoint.

    Args:
      codepoint: An unsigned integer. Values above U+10FFFF are not valid
        Unicode but still produce four bytes, each unit truncated to 8 bits.
    Returns:
      bytes of length 1 to 4.
    """
    if codepoint <= 0x7F:
        return bytes([codepoint])
    if codepoint <= 0x7FF:
        return bytes(
            [
                0xC0 | (codepoint >> 6),
                _CONTINUATION | (codepoint & _CONTINUATION_MASK),
            ]
        )
    if codepoint <= 0xFFFF:
        return bytes(
            [
                0xE0 | (codepoint >> 12),
                _CONTINUATION | (codepoint >> 6 & _CONTINUATION_MASK),
                _CONTINUATION | (codepoint & _CONTINUATION_MASK),
            ]
        )
    return bytes(
        [
            (0xF0 | (codepoint >> 18)) & 0xFF,
            _CONTINUATION | (codepoint >> 12 & _CONTINUATION_MASK),
            _CONTINUATION | (codepoint >> 6 & _CONTINUATION_MASK),
            _CONTINUATION | (codepoint & _CONTINUATION_MASK),
        ]
    )


def _sequence_length(lead):
    if lead < 0x80:
        return 1
    if lead & 0xE0 == 0xC0:
        return 2
    if lead & 0xF0 == 0xE0:
        return 3
    if lead & 0xF8 == 0xF0:
        return 4
    raise ValueError("invalid lead byte 0x%02X" % lead)


def decode_character(data):
    """Return the codepoint encoded by a single UTF-8 sequence.

    Raises:
      ValueError: if data is not exactly one well-formed sequence.
    """
    if not data:
        raise ValueError("empty sequence")
    length = _sequence_length(data[0])
    if len(data) != length:
        raise ValueError(
            "expected %d bytes after lead 0x%02X, got %d" % (length, data[0], len(data))
        )
    if length == 1:
        return data[0]
    codepoint = data[0] & (0xFF >> (length + 1))
    for unit in data[1:]:
        if unit & 0xC0 != _CONTINUATION:
            raise ValueError("invalid continuation byte 0x%02X" % unit)
        codepoint = (codepoint << 6) | (unit & _CONTINUATION_MASK)
    return codepoint
