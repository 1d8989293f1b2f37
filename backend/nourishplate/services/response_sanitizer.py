"""Recover a JSON payload from raw model output.

Models wrap JSON in Markdown fences, add explanations before and after it, and
occasionally emit JavaScript-ish literals. The pipeline is:

1. trim and unwrap Markdown code fences;
2. slice from the first ``{`` to the last ``}``;
3. strict parse;
4. repairs: collapse raw newlines/tabs, then one scan that skips string literals
   while quoting bare keys, converting single quotes and dropping trailing commas;
5. strict parse again, else ``SanitizeFailure``.

The repairs are heuristics. Anything they cannot fix goes to the fallback planner.
"""
from __future__ import annotations

import json
import logging
import re
from dataclasses import dataclass
from typing import Any, List, Tuple

from nourishplate.core.errors import SanitizeFailure

logger = logging.getLogger(__name__)

_FENCED_BLOCK_RE = re.compile(r"```[ \t]*(?:json|JSON)?[ \t]*\n?(.*?)```", re.DOTALL)
_FENCE_MARKER_RE = re.compile(r"```[ \t]*(?:json|JSON)?[ \t]*\n?")
_RAW_WHITESPACE_RE = re.compile(r"[\r\n\t]+")
_BARE_KEY_RE = re.compile(r"([A-Za-z_][A-Za-z0-9_\-]*)(?=\s*:)")


@dataclass
class SanitizedPayload:
    text: str
    value: Any
    repaired: bool


def sanitize_response(raw: str | None) -> str:
    """Return a JSON string recovered from ``raw`` or raise ``SanitizeFailure``."""
    return _sanitize(raw).text


def parse_model_json(raw: str | None) -> Any:
    """Return the parsed JSON value recovered from ``raw`` or raise ``SanitizeFailure``."""
    return _sanitize(raw).value


def _sanitize(raw: str | None) -> SanitizedPayload:
    text = (raw or "").strip()
    if not text:
        raise SanitizeFailure(["Empty model response"], "")

    candidate = _isolate_object(_strip_fences(text))
    if candidate is None:
        raise SanitizeFailure(["No JSON object found in model response"], text)

    try:
        parsed_text, value = _strict_parse(candidate)
        return SanitizedPayload(text=parsed_text, value=value, repaired=False)
    except json.JSONDecodeError as first_error:
        repaired = repair_json_text(candidate)
        try:
            parsed_text, value = _strict_parse(repaired)
        except json.JSONDecodeError as second_error:
            logger.warning("Model response unparsable after repair: %s / %s", first_error, second_error)
            raise SanitizeFailure(
                [f"strict parse: {first_error}", f"after repair: {second_error}"],
                candidate,
            ) from second_error
        logger.info("Model response parsed after textual repair (%s)", first_error)
        return SanitizedPayload(text=parsed_text, value=value, repaired=True)


def repair_json_text(text: str) -> str:
    """Apply the conservative second-pass repairs to a JSON-like string.

    Keys are quoted and trailing commas dropped only outside string literals,
    so the contents of a value are never rewritten.
    """
    source = _RAW_WHITESPACE_RE.sub(" ", text)
    out: List[str] = []
    previous = ""
    index = 0
    while index < len(source):
        char = source[index]
        if char in "\"'":
            end = _literal_end(source, index)
            literal = source[index:end]
            if char == "'" and end > index + 1 and source[end - 1] == "'":
                literal = _requote(literal[1:-1])
            out.append(literal)
            previous = '"'
            index = end
            continue
        if char == ",":
            following = source[index + 1 :].lstrip(" ")
            if following[:1] in ("}", "]"):
                index += 1
                continue
        if previous in ("{", ","):
            key = _BARE_KEY_RE.match(source, index)
            if key:
                out.append(f'"{key.group(1)}"')
                previous = '"'
                index = key.end(1)
                continue
        out.append(char)
        if char != " ":
            previous = char
        index += 1
    return "".join(out)


def _strip_fences(text: str) -> str:
    block = _FENCED_BLOCK_RE.search(text)
    if block and "{" in block.group(1):
        return block.group(1).strip()
    return _FENCE_MARKER_RE.sub("", text).replace("```", "").strip()


def _isolate_object(text: str) -> str | None:
    start = text.find("{")
    end = text.rfind("}")
    if start == -1 or end == -1 or end <= start:
        return None
    return text[start : end + 1]


def _strict_parse(text: str) -> Tuple[str, Any]:
    try:
        return text, json.loads(text)
    except json.JSONDecodeError:
        # Trailing prose that itself contains a closing brace.
        value, end = json.JSONDecoder().raw_decode(text)
        return text[:end], value


def _requote(inner: str) -> str:
    unescaped = inner.replace("\\'", "'")
    return json.dumps(unescaped, ensure_ascii=False)


def _literal_end(text: str, start: int) -> int:
    """Index just past the literal opened at ``start``, or the end of ``text``."""
    quote = text[start]
    index = start + 1
    while index < len(text):
        if text[index] == "\\":
            index += 2
            continue
        if text[index] == quote:
            return index + 1
        index += 1
    return len(text)
