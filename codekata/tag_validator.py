"""Validating a code snippet wrapped in nested, well-formed tags."""

from __future__ import annotations

from enum import Enum, auto

_CDATA_OPEN = "[CDATA["
_MAX_TAG_NAME = 9


class _State(Enum):
    INIT = auto()
    TAG_NAME = auto()
    TAG_CONTENT = auto()
    CDATA_TAG = auto()
    CDATA_CONTENT = auto()
    END = auto()


class _InvalidCode(Exception):
    """Raised inside the validator when the code breaks a rule."""


class _Validator:
    """A character-driven state machine over the tag grammar."""

    def __init__(self) -> None:
        self.state = _State.INIT
        self.stack: list[str] = []
        self.cache = ""
        self.is_close = False
        self.brackets = 0

    def feed(self, c: str) -> None:
        if self.state is _State.END:
            raise _InvalidCode("content after the closing tag")
        handler = {
            _State.INIT: self._init,
            _State.TAG_NAME: self._tag_name,
            _State.TAG_CONTENT: self._tag_content,
            _State.CDATA_TAG: self._cdata_tag,
            _State.CDATA_CONTENT: self._cdata_content,
        }[self.state]
        handler(c)

    def _open_tag_name(self) -> None:
        self.state = _State.TAG_NAME
        self.cache = ""
        self.is_close = False

    def _init(self, c: str) -> None:
        if c != "<":
            raise _InvalidCode("expected '<'")
        self._open_tag_name()

    def _tag_name(self, c: str) -> None:
        length = len(self.cache)
        if "A" <= c <= "Z" and length < _MAX_TAG_NAME:
            self.cache += c
        elif c == ">" and 1 <= length <= _MAX_TAG_NAME:
            if not self.is_close:
                self.stack.append(self.cache)
                self.state = _State.TAG_CONTENT
            elif self.stack and self.stack.pop() == self.cache:
                self.state = _State.TAG_CONTENT if self.stack else _State.END
            else:
                raise _InvalidCode("wrong close tag")
        elif c == "/" and length == 0 and not self.is_close:
            self.is_close = True
        elif c == "!" and length == 0 and not self.is_close and self.stack:
            self.state = _State.CDATA_TAG
            self.cache = ""
        else:
            raise _InvalidCode("invalid character in tag name")

    def _tag_content(self, c: str) -> None:
        if c == "<":
            self._open_tag_name()

    def _cdata_tag(self, c: str) -> None:
        if len(self.cache) >= len(_CDATA_OPEN):
            raise _InvalidCode("invalid CDATA tag")
        self.cache += c
        if self.cache == _CDATA_OPEN:
            self.state = _State.CDATA_CONTENT
            self.brackets = 0
        elif not _CDATA_OPEN.startswith(self.cache):
            raise _InvalidCode("wrong CDATA tag character")

    def _cdata_content(self, c: str) -> None:
        if self.brackets == 2:
            if c == ">":
                self.state = _State.TAG_CONTENT
            elif c != "]":
                self.brackets = 0
        elif c == "]":
            self.brackets += 1


def is_valid(code: str) -> bool:
    """Whether ``code`` is one well-formed tag with valid content."""
    validator = _Validator()
    try:
        for c in code:
            validator.feed(c)
    except _InvalidCode:
        return False
    return validator.state is _State.END