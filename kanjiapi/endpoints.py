from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

import config
from kanjiapi.models import ResultKind


class RequestKind(Enum):
    SINGLE_KANJI = "SingleKanji"
    JOUYOU = "Jouyou"
    JINMEIYO = "Jinmeiyo"
    ALL = "All"
    GRADE = "Grade"
    JLPT = "Jlpt"
    WORDS = "Words"


# The service spells the name-kanji list "jinmeiyou"
_PATHS = {
    RequestKind.SINGLE_KANJI: "kanji/{}",
    RequestKind.JOUYOU: "kanji/jouyou",
    RequestKind.JINMEIYO: "kanji/jinmeiyou",
    RequestKind.ALL: "kanji/all",
    RequestKind.GRADE: "kanji/grade-{}",
    RequestKind.JLPT: "kanji/jlpt-{}",
    RequestKind.WORDS: "words/{}",
}

_RESULTS = {
    RequestKind.SINGLE_KANJI: ResultKind.KANJI_DETAIL,
    RequestKind.JOUYOU: ResultKind.KANJI_CHARS,
    RequestKind.JINMEIYO: ResultKind.KANJI_CHARS,
    RequestKind.ALL: ResultKind.KANJI_CHARS,
    RequestKind.GRADE: ResultKind.KANJI_CHARS,
    RequestKind.JLPT: ResultKind.KANJI_CHARS,
    RequestKind.WORDS: ResultKind.WORDS,
}


_WITH_ARG = {
    RequestKind.SINGLE_KANJI,
    RequestKind.GRADE,
    RequestKind.JLPT,
    RequestKind.WORDS,
}


@dataclass(frozen=True)
class KanjiRequest:
    """One kanjiapi.dev lookup. Build it with the classmethods below."""
    kind: RequestKind
    arg: Optional[Union[str, int]] = None

    def __post_init__(self):
        if self.kind in _WITH_ARG and self.arg is None:
            raise TypeError(f"{self.kind.value} request needs an argument")
        if self.kind not in _WITH_ARG and self.arg is not None:
            raise TypeError(f"{self.kind.value} request takes no argument")

    @classmethod
    def single_kanji(cls, char: str) -> "KanjiRequest":
        return cls(RequestKind.SINGLE_KANJI, char)

    @classmethod
    def jouyou(cls) -> "KanjiRequest":
        return cls(RequestKind.JOUYOU)

    @classmethod
    def jinmeiyo(cls) -> "KanjiRequest":
        return cls(RequestKind.JINMEIYO)

    @classmethod
    def all(cls) -> "KanjiRequest":
        return cls(RequestKind.ALL)

    @classmethod
    def grade(cls, level: int) -> "KanjiRequest":
        return cls(RequestKind.GRADE, level)

    @classmethod
    def jlpt(cls, level: int) -> "KanjiRequest":
        return cls(RequestKind.JLPT, level)

    @classmethod
    def words(cls, char: str) -> "KanjiRequest":
        return cls(RequestKind.WORDS, char)


def resolve_path(request: KanjiRequest) -> str:
    """Map a request to its path under the API base address."""
    return _PATHS[request.kind].format(request.arg)


def build_url(request: KanjiRequest, base_url: str = config.KANJIAPI_BASE_URL) -> str:
    return f"{base_url}{resolve_path(request)}"


def expected_result(request: KanjiRequest) -> ResultKind:
    """Result tag a successful response to this request carries."""
    return _RESULTS[request.kind]
