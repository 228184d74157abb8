"""Recipient heuristics and filename building.

Invoice and payslip layouts vary widely, so the parser works line by line on
the flattened page text and simply gives up (returns ``None``) when nothing
recognisable is found.

Name and locality use different tie-breaks on purpose: the first name label
wins, while the last locality seen wins. Both rules were tuned on real
documents; keep them as they are.
"""

from __future__ import annotations

import re
from typing import List, Optional, Tuple

from .config import MAX_FILENAME_LENGTH
from .types import Recipient

NAME_LABEL = re.compile(
    r"^(?:Name|An|Rechnungsempfänger|Empfänger|Rechnungsadresse)\b\s*:?\s*(.*)$",
    re.IGNORECASE,
)
LOCALITY_LABEL = re.compile(r"\b(?:Wohnort|Ort|Adresse)\b\s*:?\s*(.+)$", re.IGNORECASE)
POSTAL_CODE_LINE = re.compile(r"^(\d{5})\s+(\S.+)$")
UNSAFE_FILENAME_CHARS = re.compile(r"[^A-Za-z0-9_.\-äöüÄÖÜß]")

NAME_LOOKAHEAD_LINES = 2


def _split_lines(text: str) -> List[str]:
    return [line.strip() for line in re.split(r"\r?\n", text) if line.strip()]


def _split_name(value: str, allow_comma: bool = True) -> Tuple[str, str]:
    """Return ``(first_name, last_name)`` for a name fragment."""

    comma = value.find(",")
    if allow_comma and comma > 0:
        return value[comma + 1:].strip(), value[:comma].strip()

    parts = value.split()
    if len(parts) >= 2:
        return parts[0], " ".join(parts[1:])
    if len(parts) == 1:
        return "", parts[0]
    return "", ""


def _match_locality(line: str) -> Optional[str]:
    labelled = LOCALITY_LABEL.search(line)
    if labelled:
        return labelled.group(1).strip() or None

    postal = POSTAL_CODE_LINE.match(line)
    if postal:
        return f"{postal.group(1)} {postal.group(2)}".strip()
    return None


def parse_recipient_from_text(text: str) -> Optional[Recipient]:
    """Find a recipient's name and locality in a page's text.

    Name labels (``Name``, ``An``, ``Rechnungsempfänger``, ``Empfänger``,
    ``Rechnungsadresse``) take the rest of the line, ``"Nachname, Vorname"``
    or ``"Vorname Nachname"``; a bare label takes the next two lines instead.
    Localities come from ``Wohnort``/``Ort``/``Adresse`` labels or from a line
    starting with a five digit postal code.

    Returns ``None`` when neither a name nor a locality was found.
    """

    if not text or not text.strip():
        return None

    lines = _split_lines(text)
    first_name = ""
    last_name = ""
    locality = ""

    for index, line in enumerate(lines):
        if not (first_name and last_name):
            match = NAME_LABEL.match(line)
            if match:
                rest = match.group(1).strip()
                if rest:
                    parsed = _split_name(rest)
                else:
                    following = lines[index + 1:index + 1 + NAME_LOOKAHEAD_LINES]
                    parsed = _split_name(" ".join(following), allow_comma=False)
                # a label without any name text keeps the earlier result
                if any(parsed):
                    first_name, last_name = parsed

        found = _match_locality(line)
        if found:
            locality = found

    if not (first_name + last_name).strip() and not locality:
        return None

    return Recipient(first_name=first_name, last_name=last_name, locality=locality)


def _page_filename(page_index: int) -> str:
    return f"Seite_{page_index + 1:02d}.pdf"


def build_safe_filename(
    recipient: Optional[Recipient],
    page_index: int,
    max_length: int = MAX_FILENAME_LENGTH,
) -> str:
    """Build ``Nachname_Vorname_Wohnort.pdf`` or ``Seite_NN.pdf``.

    Characters outside ASCII letters, digits, ``_.-`` and German umlauts are
    replaced with underscores and the base is cut to ``max_length``.
    """

    if recipient is not None:
        parts = [recipient.last_name, recipient.first_name, recipient.locality]
        base = "_".join(part for part in parts if part)
        base = UNSAFE_FILENAME_CHARS.sub("_", base)[:max_length]
        if base:
            return f"{base}.pdf"
    return _page_filename(page_index)


__all__ = ["build_safe_filename", "parse_recipient_from_text"]
