import json
from typing import Any, Dict, Iterator, List, Optional, Union

from ..exceptions import ParseFailure


def loads_body(raw_body: Union[str, bytes]) -> Any:
    if isinstance(raw_body, bytes):
        raw_body = raw_body.decode("utf-8", errors="replace")
    if raw_body is None or not raw_body.strip():
        raise ParseFailure("Upstream response body is empty")
    try:
        return json.loads(raw_body)
    except json.JSONDecodeError as e:
        raise ParseFailure(f"Upstream response is not valid JSON: {e}")
    except RecursionError:
        raise ParseFailure("Upstream response is nested too deeply")


def extract_chat_message(envelope: Any) -> str:
    """Return ``choices[0].message.content`` of a chat-completion envelope."""
    try:
        content = envelope["choices"][0]["message"]["content"]
    except (KeyError, IndexError, TypeError):
        raise ParseFailure("Chat completion has no assistant message")

    if not isinstance(content, str) or not content.strip():
        raise ParseFailure("Assistant message is empty")
    return content


def span_ends(text: str, open_char: str = "[", close_char: str = "]") -> Dict[int, Optional[int]]:
    """
    Map each ``open_char`` index to the index of the bracket closing it, or
    None when it never balances.

    Brackets inside JSON string literals are ignored. Every opener is matched
    as if scanning started at it. One run resolves all openers it meets
    outside a string, so a run of unclosed brackets is walked once.
    """
    ends: Dict[int, Optional[int]] = {}
    openers = [i for i, char in enumerate(text) if char == open_char]

    for start in openers:
        if start in ends:
            continue

        stack = []
        in_string = False
        escaped = False
        for i in range(start, len(text)):
            char = text[i]
            if in_string:
                if escaped:
                    escaped = False
                elif char == "\\":
                    escaped = True
                elif char == '"':
                    in_string = False
                continue

            if char == '"':
                in_string = True
            elif char == open_char:
                stack.append(i)
            elif char == close_char:
                ends[stack.pop()] = i
                if not stack:
                    break

        for unclosed in stack:
            ends[unclosed] = None

    return ends


def iter_balanced_spans(text: str, open_char: str = "[", close_char: str = "]") -> Iterator[str]:
    ends = span_ends(text, open_char, close_char)
    for start in sorted(ends):
        end = ends[start]
        if end is not None:
            yield text[start:end + 1]


def extract_json_array(text: str) -> Optional[List[Any]]:
    """
    Find a JSON array embedded in free text.

    Prefers the first balanced span that decodes to a list of objects and
    otherwise returns the first span that decodes to any list. Returns None
    when no span decodes. Scanning stops at a span nested too deeply to
    decode.
    """
    if not text:
        return None

    decoder = json.JSONDecoder()
    ends = span_ends(text)
    first_list = None
    for start in sorted(ends):
        end = ends[start]
        if end is None:
            continue
        try:
            value, decoded_end = decoder.raw_decode(text, start)
        except json.JSONDecodeError:
            continue
        except RecursionError:
            break
        if decoded_end != end + 1:
            continue

        if value and all(isinstance(item, dict) for item in value):
            return value
        if first_list is None:
            first_list = value

    return first_list
