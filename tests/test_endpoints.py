import pytest

from kanjiapi.endpoints import (
    _WITH_ARG,
    KanjiRequest,
    RequestKind,
    build_url,
    expected_result,
    resolve_path,
)
from kanjiapi.models import ResultKind


# ---------------------------------------------------------------------------
# TestResolvePath
# ---------------------------------------------------------------------------


class TestResolvePath:
    @pytest.mark.parametrize(
        "request_, path",
        [
            (KanjiRequest.single_kanji("雨"), "kanji/雨"),
            (KanjiRequest.grade(1), "kanji/grade-1"),
            (KanjiRequest.jlpt(3), "kanji/jlpt-3"),
            (KanjiRequest.jouyou(), "kanji/jouyou"),
            (KanjiRequest.jinmeiyo(), "kanji/jinmeiyou"),
            (KanjiRequest.all(), "kanji/all"),
            (KanjiRequest.words("雨"), "words/雨"),
        ],
    )
    def test_path_table(self, request_, path):
        """Every request kind maps to its literal path."""
        assert resolve_path(request_) == path

    def test_out_of_range_levels_pass_through(self):
        """Grade and JLPT levels are not range-checked."""
        assert resolve_path(KanjiRequest.grade(42)) == "kanji/grade-42"
        assert resolve_path(KanjiRequest.jlpt(0)) == "kanji/jlpt-0"

    def test_non_kanji_passes_through(self):
        """Any character is used verbatim."""
        assert resolve_path(KanjiRequest.single_kanji("a")) == "kanji/a"

    def test_build_url_uses_base(self):
        assert build_url(KanjiRequest.all()) == "https://kanjiapi.dev/v1/kanji/all"
        assert build_url(KanjiRequest.all(), "http://localhost/") == "http://localhost/kanji/all"


# ---------------------------------------------------------------------------
# TestKanjiRequest
# ---------------------------------------------------------------------------


class TestKanjiRequest:
    def test_constructors_set_kind(self):
        assert KanjiRequest.single_kanji("一").kind is RequestKind.SINGLE_KANJI
        assert KanjiRequest.jinmeiyo().kind is RequestKind.JINMEIYO
        assert KanjiRequest.words("一").arg == "一"

    def test_requests_are_immutable(self):
        req = KanjiRequest.grade(2)
        with pytest.raises(AttributeError):
            req.arg = 3

    def test_equal_requests_compare_equal(self):
        assert KanjiRequest.jlpt(5) == KanjiRequest.jlpt(5)
        assert KanjiRequest.jlpt(5) != KanjiRequest.grade(5)


# ---------------------------------------------------------------------------
# TestExpectedResult
# ---------------------------------------------------------------------------


class TestExpectedResult:
    def test_single_kanji_gives_detail(self):
        assert expected_result(KanjiRequest.single_kanji("一")) is ResultKind.KANJI_DETAIL

    @pytest.mark.parametrize(
        "request_",
        [
            KanjiRequest.all(),
            KanjiRequest.grade(1),
            KanjiRequest.jlpt(1),
            KanjiRequest.jouyou(),
            KanjiRequest.jinmeiyo(),
        ],
    )
    def test_list_endpoints_give_chars(self, request_):
        assert expected_result(request_) is ResultKind.KANJI_CHARS

    def test_words_give_words(self):
        assert expected_result(KanjiRequest.words("一")) is ResultKind.WORDS

    def test_every_kind_is_mapped(self):
        """No request kind is left without a path or result tag."""
        for kind in RequestKind:
            req = KanjiRequest(kind, "x" if kind in _WITH_ARG else None)
            assert resolve_path(req)
            assert isinstance(expected_result(req), ResultKind)

    @pytest.mark.parametrize("kind", [RequestKind.GRADE, RequestKind.JLPT, RequestKind.SINGLE_KANJI, RequestKind.WORDS])
    def test_missing_argument_rejected(self, kind):
        """A kind that formats an argument into its path cannot be built without one."""
        with pytest.raises(TypeError, match="needs an argument"):
            KanjiRequest(kind)

    @pytest.mark.parametrize("kind", [RequestKind.JOUYOU, RequestKind.JINMEIYO, RequestKind.ALL])
    def test_stray_argument_rejected(self, kind):
        with pytest.raises(TypeError, match="takes no argument"):
            KanjiRequest(kind, "x")
