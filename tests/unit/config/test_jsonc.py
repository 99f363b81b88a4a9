"""Unit tests for JSONC comment stripping."""

from __future__ import annotations

import json

from hookx.config import strip_json_comments


def test_strips_line_comments_keeping_newlines() -> None:
    text = '{\n  // comment\n  "a": 1 // trailing\n}'
    stripped = strip_json_comments(text)
    assert json.loads(stripped) == {"a": 1}
    assert stripped.count("\n") == text.count("\n")


def test_strips_block_comments() -> None:
    text = '{ /* one */ "a": /* two\n lines */ 2 }'
    stripped = strip_json_comments(text)
    assert json.loads(stripped) == {"a": 2}
    assert "\n" in stripped


def test_keeps_comment_markers_inside_strings() -> None:
    text = '{"url": "https://example.com/*x*/", "glob": "src/**//"}'
    assert json.loads(strip_json_comments(text)) == {
        "url": "https://example.com/*x*/",
        "glob": "src/**//",
    }


def test_handles_escaped_quotes_in_strings() -> None:
    text = '{"cmd": "echo \\"// not a comment\\"" // real comment\n}'
    assert json.loads(strip_json_comments(text)) == {"cmd": 'echo "// not a comment"'}


def test_unterminated_comments_run_to_end() -> None:
    assert strip_json_comments('{"a": 1} // end') == '{"a": 1} '
    assert strip_json_comments('{"a": 1} /* open') == '{"a": 1} '


def test_lone_slash_is_preserved() -> None:
    assert strip_json_comments("a / b") == "a / b"
