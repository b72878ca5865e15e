"""Line-based dependency substitution (pure).

A declaration line is ``<indent><key><pad>=<pad><value>`` where ``<key>``
starts with the dependency name and continues with any characters other
than whitespace and ``=`` (so ``lib3h_protocol`` matches ``lib3h``).  The
key must open the line; ``otherlib3hthing = ...`` never matches.

Multi-line table declarations such as ``[dependencies.lib3h]`` are not
declaration lines and are left alone.

Guarantees
----------
* No I/O, no ``print()``.
* The replacement is inserted as literal text.
* Line endings are preserved; untouched lines are byte-identical.
"""

from __future__ import annotations

import re

from deptool.core.models import SubstitutionResult

_PIN_RE = re.compile(r'^"=[^"\s]+"\s*(?:#.*)?$')


def dependency_line_pattern(name: str) -> re.Pattern[str]:
    """Compile the declaration-line pattern for dependency key *name*."""
    return re.compile(
        r"^(?P<lead>[ \t]*(?P<key>" + re.escape(name) + r"[^\s=]*)[ \t]*=[ \t]*)"
        r"(?P<value>[^\r\n]*)",
        re.MULTILINE,
    )


def substitute_dependency(text: str, name: str, replacement: str) -> SubstitutionResult:
    """Replace the value of every *name* declaration line in *text*.

    The key, the padding around ``=`` and the line ending are kept; the
    rest of the line becomes *replacement*.
    """
    keys: list[str] = []

    def _replace(match: re.Match[str]) -> str:
        keys.append(match.group("key"))
        return match.group("lead") + replacement

    new_text = dependency_line_pattern(name).sub(_replace, text)
    return SubstitutionResult(text=new_text, keys=tuple(keys))


def find_declarations(text: str, name: str) -> list[tuple[str, str]]:
    """Return ``(key, value)`` for every *name* declaration line in *text*."""
    return [
        (match.group("key"), match.group("value").rstrip())
        for match in dependency_line_pattern(name).finditer(text)
    ]


def is_pinned(value: str) -> bool:
    """Return ``True`` when *value* is an exact ``"=X.Y.Z"`` version pin."""
    return _PIN_RE.match(value.strip()) is not None
