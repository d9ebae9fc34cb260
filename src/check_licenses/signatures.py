"""Known license texts and the patterns used to recognize them.

Signatures are checked in order and the first match wins, so texts that
embed or reference other licenses (LGPL quoting the GPL, BSD-3-Clause
extending BSD-2-Clause, ISC extending 0BSD) must come before them. Each
signature requires all of its patterns to be found in the text. Patterns
use ``\\s+`` between words so that line wrapping and indentation in the
license file do not matter.
"""

import re
from typing import Optional

from check_licenses.models import LicenseSignature


def _signature(identifier: str, *patterns: str) -> LicenseSignature:
    return LicenseSignature(
        identifier=identifier,
        patterns=tuple(re.compile(p, re.IGNORECASE | re.DOTALL) for p in patterns),
    )


LICENSE_SIGNATURES: tuple[LicenseSignature, ...] = (
    _signature(
        "AGPL-3.0",
        r"GNU\s+AFFERO\s+GENERAL\s+PUBLIC\s+LICENSE\s+Version\s+3\b",
    ),
    _signature(
        "LGPL-3.0",
        r"GNU\s+LESSER\s+GENERAL\s+PUBLIC\s+LICENSE\s+Version\s+3\b",
    ),
    _signature(
        "LGPL-2.1",
        r"GNU\s+LESSER\s+GENERAL\s+PUBLIC\s+LICENSE\s+Version\s+2\.1\b",
    ),
    _signature(
        "GPL-3.0",
        r"GNU\s+GENERAL\s+PUBLIC\s+LICENSE\s+Version\s+3\b",
    ),
    _signature(
        "GPL-2.0",
        r"GNU\s+GENERAL\s+PUBLIC\s+LICENSE\s+Version\s+2\b",
    ),
    _signature(
        "MPL-2.0",
        r"Mozilla\s+Public\s+License,?\s+(?:Version|v\.?)\s*2\.0",
    ),
    _signature(
        "Apache-2.0",
        r"Apache\s+License,?\s+Version\s+2\.0",
    ),
    _signature(
        "EPL-2.0",
        r"Eclipse\s+Public\s+License\s+-?\s*v\s*2\.0",
    ),
    _signature(
        "CC0-1.0",
        r"CC0\s+1\.0\s+Universal",
    ),
    _signature(
        "CC-BY-SA-4.0",
        r"Attribution-ShareAlike\s+4\.0\s+International",
    ),
    _signature(
        "CC-BY-4.0",
        r"Creative\s+Commons\s+Attribution\s+4\.0\s+International",
    ),
    _signature(
        "CC-BY-3.0",
        r"Creative\s+Commons\s+(?:Legal\s+Code\s+)?Attribution\s+3\.0",
    ),
    _signature(
        "Unlicense",
        r"This\s+is\s+free\s+and\s+unencumbered\s+software\s+released\s+into"
        r"\s+the\s+public\s+domain",
    ),
    _signature(
        "WTFPL",
        r"DO\s+WHAT\s+THE\s+FUCK\s+YOU\s+WANT\s+TO\s+PUBLIC\s+LICENSE",
    ),
    _signature(
        "Zlib",
        r"provided\s+['\"]as-is['\"],\s+without\s+any\s+express\s+or\s+implied"
        r"\s+warranty",
        r"The\s+origin\s+of\s+this\s+software\s+must\s+not\s+be\s+misrepresented",
    ),
    _signature(
        "BSD-3-Clause",
        r"Redistribution\s+and\s+use\s+in\s+source\s+and\s+binary\s+forms",
        r"Redistributions\s+in\s+binary\s+form\s+must\s+reproduce",
        r"(?:Neither\s+the\s+name|The\s+names?)\s+of\b.{0,200}?\bmay\s+(?:not\s+)?"
        r"be\s+used\s+to\s+endorse\s+or\s+promote",
    ),
    _signature(
        "BSD-2-Clause",
        r"Redistribution\s+and\s+use\s+in\s+source\s+and\s+binary\s+forms",
        r"Redistributions\s+in\s+binary\s+form\s+must\s+reproduce",
    ),
    _signature(
        "MIT",
        r"Permission\s+is\s+hereby\s+granted,\s+free\s+of\s+charge,\s+to\s+any"
        r"\s+person\s+obtaining\s+a\s+copy",
        r"The\s+above\s+copyright\s+notice\s+and\s+this\s+permission\s+notice"
        r"\s+shall\s+be\s+included",
    ),
    _signature(
        "ISC",
        r"Permission\s+to\s+use,\s+copy,\s+modify,\s+(?:and/or|and)\s+distribute"
        r"\s+this\s+software\s+for\s+any\s+purpose\s+with\s+or\s+without\s+fee"
        r"\s+is\s+hereby\s+granted,\s+provided\s+that\s+the\s+above\s+copyright"
        r"\s+notice\s+and\s+this\s+permission\s+notice\s+appear\s+in\s+all"
        r"\s+copies",
    ),
    _signature(
        "0BSD",
        r"Permission\s+to\s+use,\s+copy,\s+modify,\s+and/or\s+distribute\s+this"
        r"\s+software\s+for\s+any\s+purpose\s+with\s+or\s+without\s+fee\s+is"
        r"\s+hereby\s+granted\.",
    ),
)


def match_signature(text: str) -> Optional[str]:
    """Return the identifier of the first signature matching ``text``.

    Args:
        text: Full text of a license file.

    Returns:
        The matching license identifier, or None if nothing matches.
    """
    for signature in LICENSE_SIGNATURES:
        if signature.matches(text):
            return signature.identifier
    return None
