import argparse
import logging
import sys

import config
from kanjiapi.client import fetch
from kanjiapi.endpoints import KanjiRequest, build_url
from kanjiapi.errors import DeserializationError, NetworkError
from kanjiapi.models import KanjiDetail, ResultKind, Word


def format_detail(detail: KanjiDetail) -> str:
    """Render one kanji's metadata as a few labelled lines."""
    lines = [
        f"{detail.kanji} ({detail.unicode})",
        f"  Meanings: {', '.join(detail.meanings)}",
        f"  Kun'yomi: {', '.join(detail.kunyomi)}",
        f"  On'yomi:  {', '.join(detail.onyomi)}",
    ]
    if detail.name_readings:
        lines.append(f"  Nanori:   {', '.join(detail.name_readings)}")
    lines.append(f"  JLPT: {detail.jlpt}  Grade: {detail.grade or '-'}  Strokes: {detail.stroke_count or '-'}")
    if detail.heisig_en:
        lines.append(f"  Heisig: {detail.heisig_en}")
    if detail.notes:
        lines.append(f"  Notes: {'; '.join(detail.notes)}")
    return "\n".join(lines)


def format_word(word: Word) -> str:
    forms = ", ".join(f"{v.written} [{v.pronounced}]" for v in word.variants)
    glosses = "; ".join(", ".join(m.glosses) for m in word.meanings)
    return f"{forms}: {glosses}"


def build_request(args) -> KanjiRequest:
    if args.command == "kanji":
        return KanjiRequest.single_kanji(args.char)
    if args.command == "words":
        return KanjiRequest.words(args.char)
    if args.command == "grade":
        return KanjiRequest.grade(args.level)
    if args.command == "jlpt":
        return KanjiRequest.jlpt(args.level)
    if args.command == "jouyou":
        return KanjiRequest.jouyou()
    if args.command == "jinmeiyo":
        return KanjiRequest.jinmeiyo()
    return KanjiRequest.all()


def make_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Look up kanji and words on kanjiapi.dev")
    sub = parser.add_subparsers(dest="command", required=True)

    for name, what in (("kanji", "Details for a single kanji"), ("words", "Words containing a kanji")):
        p = sub.add_parser(name, help=what)
        p.add_argument("char", help="Kanji character")
    for name, what in (("grade", "Kanji taught in a school grade"), ("jlpt", "Kanji for a JLPT level")):
        p = sub.add_parser(name, help=what)
        p.add_argument("level", type=int)
    sub.add_parser("jouyou", help="All jouyou kanji")
    sub.add_parser("jinmeiyo", help="All jinmeiyo kanji")
    sub.add_parser("all", help="Every kanji the service knows")
    return parser


def main(argv=None):
    args = make_parser().parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, config.LOG_LEVEL.upper(), logging.WARNING),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    request = build_request(args)
    print(f"Fetching {build_url(request)}...")
    try:
        result = fetch(request)
    except (NetworkError, DeserializationError) as e:
        print(f"Error: {e}")
        sys.exit(1)

    if result.kind is ResultKind.KANJI_DETAIL:
        print(format_detail(result.into_kanji_detail()))
    elif result.kind is ResultKind.KANJI_CHARS:
        chars = result.into_kanji_chars()
        print(f"{len(chars)} kanji:")
        print("".join(chars))
    else:
        for word in result.into_words():
            print(format_word(word))


if __name__ == "__main__":
    main()
