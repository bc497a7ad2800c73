"""
Terminal escape stripping for raw inxi output.

inxi colours its output with either ANSI escape sequences or IRC (mIRC)
colour codes depending on how it was launched. Everything is removed
before parsing so section titles and keys compare cleanly.
"""

import re

# Order matters: the alternation is scanned left to right, so full
# CSI/OSC sequences win over the generic two-byte ESC form.
ESCAPE_PATTERN = re.compile(
    r"\x1b\[[^@-~]*[@-~]?"                     # CSI: ESC [ params final-byte
    r"|\x1b\](?:[^\x07\x1b]|\x1b(?!\\))*(?:\x07|\x1b\\)?"  # OSC: ESC ] ... BEL | ST
    r"|\x1b.?"                                  # any other ESC pair
    r"|\x03[0-9]{0,2}(?:,[0-9]{0,2})?"          # mIRC colour: ^C fg[,bg]
    r"|[\x00-\x08\x0b\x0c\x0e-\x1f\x7f-\x9f]",  # remaining control chars
    re.DOTALL,
)


def strip_ansi(text: str) -> str:
    """
    Remove colour and control sequences, keeping line structure.

    Newlines, carriage returns and tabs survive; every other control
    character is dropped.

    Example:
        >>> strip_ansi("\\x1b[32mhello\\x1b[0m world")
        'hello world'
    """
    if not text:
        return ""
    return ESCAPE_PATTERN.sub("", text)
