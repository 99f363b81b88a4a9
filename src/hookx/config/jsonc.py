"""Comment stripping for JSONC-style configuration files."""

from __future__ import annotations


def strip_json_comments(text: str) -> str:
    """Remove ``//`` line comments and ``/* */`` block comments.

    Comment markers inside string literals are kept, including after escaped
    quotes. Newlines inside comments are preserved so parse errors still
    point at the right line.
    """
    out: list[str] = []
    i = 0
    length = len(text)
    in_string = False
    escaped = False

    while i < length:
        ch = text[i]
        if in_string:
            out.append(ch)
            if escaped:
                escaped = False
            elif ch == "\\":
                escaped = True
            elif ch == '"':
                in_string = False
            i += 1
            continue

        if ch == '"':
            in_string = True
            out.append(ch)
            i += 1
            continue

        nxt = text[i + 1] if i + 1 < length else ""
        if ch == "/" and nxt == "/":
            end = text.find("\n", i + 2)
            if end == -1:
                break
            out.append("\n")
            i = end + 1
        elif ch == "/" and nxt == "*":
            end = text.find("*/", i + 2)
            body = text[i + 2 :] if end == -1 else text[i + 2 : end]
            out.append("\n" * body.count("\n"))
            if end == -1:
                break
            i = end + 2
        else:
            out.append(ch)
            i += 1

    return "".join(out)
