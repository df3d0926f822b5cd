"""Canonical directory names from a book's OPF metadata."""

from __future__ import annotations

import xml.etree.ElementTree as ET

from .constants import DC_NAMESPACE, IDENTIFIER_ID, IDENTIFIER_PREFIX


class IdentifierError(ValueError):
    pass


def canonical_name(identifier: str, prefix: str = IDENTIFIER_PREFIX) -> str:
    """url:https://standardebooks.org/ebooks/jane-doe/a-book -> jane-doe_a-book.git"""
    value = identifier.strip()
    if not value.startswith(prefix) or len(value) == len(prefix):
        raise IdentifierError(f"Identifier {value!r} does not start with {prefix!r}")
    return value[len(prefix) :].strip("/").replace("/", "_") + ".git"


def canonical_name_from_opf(opf: str | bytes, prefix: str = IDENTIFIER_PREFIX) -> str:
    """Find <dc:identifier id="uid"> in the package document and derive the local name.

    Raises:
        IdentifierError: the document is not well-formed or has no usable identifier
    """
    try:
        root = ET.fromstring(opf)
    except ET.ParseError as e:
        raise IdentifierError(f"Invalid OPF: {e}") from e

    for el in root.iter(f"{{{DC_NAMESPACE}}}identifier"):
        if el.get("id") == IDENTIFIER_ID:
            return canonical_name(el.text or "", prefix)
    raise IdentifierError(f'No <dc:identifier id="{IDENTIFIER_ID}"> element found')
