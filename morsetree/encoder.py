"""
Text to growth-symbol encoding via international Morse code.
"""

from dataclasses import dataclass
from typing import List, Optional, Tuple

from .branch import BAR

MORSE = {
    'A': '.-', 'B': '-...', 'C': '-.-.', 'D': '-..', 'E': '.', 'F': '..-.',
    'G': '--.', 'H': '....', 'I': '..', 'J': '.---', 'K': '-.-', 'L': '.-..',
    'M': '--', 'N': '-.', 'O': '---', 'P': '.--.', 'Q': '--.-', 'R': '.-.',
    'S': '...', 'T': '-', 'U': '..-', 'V': '...-', 'W': '.--', 'X': '-..-',
    'Y': '-.--', 'Z': '--..',
    '1': '.----', '2': '..---', '3': '...--', '4': '....-', '5': '.....',
    '6': '-....', '7': '--...', '8': '---..', '9': '----.', '0': '-----',
}

# A space is a double fan, each letter ends with a single one
WORD_SEPARATOR = (BAR, BAR)
CHARACTER_TERMINATOR = BAR


@dataclass(frozen=True)
class Encoding:
    symbols: Tuple[str, ...]
    text: str


def encode_character(ch: str) -> Optional[Encoding]:
    """Symbols and typed-text fragment for one character, or None if it is not encodable."""
    if not isinstance(ch, str) or len(ch) != 1:
        return None

    if ch == ' ':
        return Encoding(WORD_SEPARATOR, ' ')

    upper = ch.upper()
    code = MORSE.get(upper)
    if code is None:
        return None

    return Encoding(tuple(code) + (CHARACTER_TERMINATOR,), upper)


def encode_text(text: str) -> List[str]:
    symbols = []
    for ch in text:
        encoding = encode_character(ch)
        if encoding is not None:
            symbols.extend(encoding.symbols)
    return symbols
