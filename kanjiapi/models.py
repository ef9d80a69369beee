from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from kanjiapi.errors import TypeMismatchError


class KanjiDetail(BaseModel):
    frequency: Optional[int] = Field(default=None, alias="freq_mainichi_shinbun")
    grade: Optional[int] = None
    heisig_en: Optional[str] = None
    jlpt: int
    kanji: str
    kunyomi: List[str] = Field(default_factory=list, alias="kun_readings")
    meanings: List[str] = Field(default_factory=list)
    name_readings: List[str] = Field(default_factory=list)
    notes: List[str] = Field(default_factory=list)
    onyomi: List[str] = Field(default_factory=list, alias="on_readings")
    stroke_count: Optional[int] = None
    unicode: str

    # Pydantic v2 style config
    model_config = ConfigDict(
        populate_by_name=True,
        extra="ignore",
        strict=True,
        frozen=True,
    )


class Meaning(BaseModel):
    glosses: List[str]

    model_config = ConfigDict(extra="ignore", strict=True, frozen=True)


class Variant(BaseModel):
    priorities: List[str]
    pronounced: str
    written: str

    model_config = ConfigDict(extra="ignore", strict=True, frozen=True)


class Word(BaseModel):
    meanings: List[Meaning]
    variants: List[Variant]

    model_config = ConfigDict(extra="ignore", strict=True, frozen=True)


class ResultKind(Enum):
    KANJI_DETAIL = "KanjiDetail"
    KANJI_CHARS = "KanjiChars"
    WORDS = "Words"


Payload = Union[KanjiDetail, List[str], List[Word]]


def _kind_of(payload) -> Optional[ResultKind]:
    """Tag matching the payload's shape, or None if it fits no tag (or both list tags)."""
    if isinstance(payload, KanjiDetail):
        return ResultKind.KANJI_DETAIL
    if not isinstance(payload, list) or not payload:
        return None
    if all(isinstance(item, str) for item in payload):
        return ResultKind.KANJI_CHARS
    if all(isinstance(item, Word) for item in payload):
        return ResultKind.WORDS
    return None


@dataclass(frozen=True)
class KanjiResult:
    """
    Tagged response from kanjiapi.dev.

    The tag is decided by the request that produced the result, so callers
    narrow it with the into_* methods instead of inspecting the payload.
    """
    kind: ResultKind
    payload: Payload

    def __post_init__(self):
        found = _kind_of(self.payload)
        if found is self.kind:
            return
        if found is None and self.kind is not ResultKind.KANJI_DETAIL and self.payload == []:
            return
        raise TypeMismatchError(self.kind, found or type(self.payload).__name__)

    def _expect(self, kind: ResultKind) -> Payload:
        if self.kind is not kind:
            raise TypeMismatchError(kind, self.kind)
        return self.payload

    def into_kanji_detail(self) -> KanjiDetail:
        return self._expect(ResultKind.KANJI_DETAIL)

    def into_kanji_chars(self) -> List[str]:
        return self._expect(ResultKind.KANJI_CHARS)

    def into_words(self) -> List[Word]:
        return self._expect(ResultKind.WORDS)
