"""Unix path simplification and the longest file path in a tree listing."""

from __future__ import annotations


def simplify_path(path: str) -> str:
    """Canonical form of an absolute Unix path."""
    parts: list[str] = []
    for part in path.split("/"):
        if part in ("", "."):
            continue
        if part == "..":
            if parts:
                parts.pop()
        else:
            parts.append(part)
    return "/" + "/".join(parts)


def length_longest_path(text: str) -> int:
    """Length of the longest absolute file path in a tab-indented listing.

    Names containing ``.`` are files; 0 is returned when there is none.
    """
    parents: list[int] = []
    longest = 0
    for line in text.split("\n"):
        name = line.lstrip("\t")
        if name:
            level = len(line) - len(name)
        else:
            level, name = 0, line
        del parents[level:]
        abs_len = len(name) + (parents[-1] if parents else 0)
        if "." in name:
            longest = max(longest, abs_len)
        else:
            parents.append(abs_len + 1)
    return longest