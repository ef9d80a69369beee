import asyncio
import logging
from typing import List

import requests
from pydantic import TypeAdapter, ValidationError

import config
from kanjiapi.endpoints import KanjiRequest, build_url, expected_result
from kanjiapi.errors import DeserializationError, NetworkError
from kanjiapi.models import KanjiDetail, KanjiResult, ResultKind, Word

logger = logging.getLogger(__name__)

_ADAPTERS = {
    ResultKind.KANJI_DETAIL: TypeAdapter(KanjiDetail),
    ResultKind.KANJI_CHARS: TypeAdapter(List[str]),
    ResultKind.WORDS: TypeAdapter(List[Word]),
}


def _get(url: str, session=None) -> bytes:
    """Send one GET to kanjiapi.dev and return the raw body, whatever the status."""
    http = session if session is not None else requests
    try:
        resp = http.get(url, timeout=config.REQUEST_TIMEOUT)
    except requests.RequestException as e:
        raise NetworkError(url, str(e)) from e
    logger.debug(f"GET {url} -> {resp.status_code} ({len(resp.content)} bytes)")
    return resp.content


def parse_body(kind: ResultKind, body: bytes) -> KanjiResult:
    """Deserialize a response body into the shape tagged by kind."""
    try:
        text = body.decode("utf-8")
    except UnicodeDecodeError as e:
        raise DeserializationError(kind, str(e)) from e
    try:
        payload = _ADAPTERS[kind].validate_json(text, strict=True)
    except ValidationError as e:
        raise DeserializationError(kind, str(e)) from e
    return KanjiResult(kind, payload)


def fetch(request: KanjiRequest, session=None) -> KanjiResult:
    """Look up one request on kanjiapi.dev and return the tagged result."""
    body = _get(build_url(request), session)
    return parse_body(expected_result(request), body)


async def fetch_async(request: KanjiRequest, session=None) -> KanjiResult:
    return await asyncio.to_thread(fetch, request, session)


get = fetch


def kanji(char: str, session=None) -> KanjiDetail:
    return fetch(KanjiRequest.single_kanji(char), session).into_kanji_detail()


def jouyou(session=None) -> List[str]:
    return fetch(KanjiRequest.jouyou(), session).into_kanji_chars()


def jinmeiyo(session=None) -> List[str]:
    return fetch(KanjiRequest.jinmeiyo(), session).into_kanji_chars()


def all_kanji(session=None) -> List[str]:
    return fetch(KanjiRequest.all(), session).into_kanji_chars()


def grade(level: int, session=None) -> List[str]:
    return fetch(KanjiRequest.grade(level), session).into_kanji_chars()


def jlpt(level: int, session=None) -> List[str]:
    return fetch(KanjiRequest.jlpt(level), session).into_kanji_chars()


def words(char: str, session=None) -> List[Word]:
    return fetch(KanjiRequest.words(char), session).into_words()
