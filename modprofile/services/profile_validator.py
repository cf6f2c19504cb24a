from __future__ import annotations

from modprofile.domain.errors import (
    EmptyDocumentError,
    InvalidStructureError,
    MissingModificationsError,
    UnbalancedBracesError,
    UnbalancedBracketsError,
)


def scan_balance(text: str) -> tuple[int, int]:
    """
    Count ``{}`` and ``[]`` outside of string literals.

    Returns ``(braces, brackets)``; zero means balanced. A backslash escapes the
    next character whether or not we are inside a string. Nesting order is not
    checked, so ``{[}]`` counts as balanced.
    """
    braces = 0
    brackets = 0
    in_string = False
    escaped = False

    for ch in text:
        if escaped:
            escaped = False
            continue
        if ch == "\\":
            escaped = True
            continue
        if ch == '"':
            in_string = not in_string
            continue
        if in_string:
            continue
        if ch == "{":
            braces += 1
        elif ch == "}":
            braces -= 1
        elif ch == "[":
            brackets += 1
        elif ch == "]":
            brackets -= 1

    return braces, brackets


def validate_profile_text(text: str) -> None:
    """
    Heuristic structural check of a profile document. Not a JSON parser.

    Checks run in a fixed order and the first failure is raised:
      1. empty (after trimming)            -> EmptyDocumentError
      2. no _meta/_input and no legacy key -> InvalidStructureError
      3. no "modifications" key            -> MissingModificationsError
      4. brace / bracket counts            -> UnbalancedBracesError / UnbalancedBracketsError
    """
    t = text.strip()
    if not t:
        raise EmptyDocumentError()

    has_meta_input = '"_meta"' in t and '"_input"' in t
    has_legacy = '"profileName"' in t or '"formatVersion"' in t
    if not has_meta_input and not has_legacy:
        raise InvalidStructureError()

    if '"modifications"' not in t:
        raise MissingModificationsError()

    braces, brackets = scan_balance(t)
    if braces != 0:
        raise UnbalancedBracesError()
    if brackets != 0:
        raise UnbalancedBracketsError()
