"""
Decomposer: split compound values into labeled fragments.

inxi packs several facts into one value, e.g.
"vendor: Samsung model: SSD 980 size: 931.51 GiB". The embedded
labels are ASCII word characters, parentheses, "/" or "-" immediately
followed by a colon, at the start of the value or after whitespace.
"""

import re

from .schemas import SubValue

EMBEDDED_LABEL = re.compile(r"(?:^|\s)([\w()/-]+):", re.ASCII)


def explode_value(value: str) -> list[SubValue]:
    """
    Split a value on its embedded "label:" markers.

    Returns a single unlabeled fragment when the value has no colon.
    Text before the first label becomes an unlabeled leading fragment.
    A value with colons but no recognisable label yields no fragments.

    Example:
        >>> [(p.key, p.value) for p in explode_value("vendor: Acme model: X1 size: 512 GB")]
        [('vendor', 'Acme'), ('model', 'X1'), ('size', '512 GB')]
    """
    value = value or ""
    trimmed = value.strip()
    if ":" not in trimmed:
        return [SubValue(key="", value=trimmed)]

    fragments: list[SubValue] = []
    last_key = None
    last_end = 0

    for match in EMBEDDED_LABEL.finditer(value):
        if last_key is not None:
            fragments.append(SubValue(key=last_key, value=value[last_end:match.start()].strip()))
        else:
            lead = value[:match.start()].strip()
            if lead:
                fragments.append(SubValue(key="", value=lead))
        last_key = match.group(1)
        last_end = match.end()

    if last_key is not None:
        fragments.append(SubValue(key=last_key, value=value[last_end:].strip()))

    return fragments
