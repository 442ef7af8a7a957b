"""Tests for .al parsing and formatting, plain text output and reports"""

import math

import pytest

from bitext_aligner.core import Alignment, pinned_alignment
from bitext_aligner.corpus import AlParser, BilingualCorpus, PlaintextParser
from bitext_aligner.errors import FormatError
from bitext_aligner.output import (
    AlFormatter,
    InfoFormatter,
    OutputFormatter,
    PlaintextFormatter,
)


@pytest.fixture
def tricky_alignments():
    return [
        Alignment(["Tom & Jerry <3", "\"quoted\" 'text'"], ["Zażółć gęślą"], 0.1 + 0.2),
        Alignment([""], [], 0.0),
        Alignment([], ["Only target"], math.inf),
        pinned_alignment(["Pinned"], ["Fest"]),
    ]


# .al format
def test_al_round_trip_is_exact(tricky_alignments):
    text = AlFormatter().format(tricky_alignments)
    parsed = AlParser(text).parse()

    assert parsed == tricky_alignments
    assert parsed[0].score == 0.1 + 0.2


def test_al_round_trip_keeps_carriage_returns():
    alignments = [
        Alignment(["First line.\r\n", "Second\rline."], ["Erste Zeile.\r\n"], 0.5)
    ]
    text = AlFormatter().format(alignments)

    assert "\r" not in text
    assert AlParser(text).parse() == alignments


def test_al_document_layout(tricky_alignments):
    text = AlFormatter().format(tricky_alignments)

    assert text.startswith('<?xml version="1.0" encoding="UTF-8" standalone="yes"?>')
    assert "<alignmentlist>" in text
    assert 'score="-Infinity"' in text
    assert "&amp;" in text


def test_al_parser_defaults():
    text = (
        "<alignmentlist><alignment>"
        "<sourcelist><segment>a</segment><segment/></sourcelist>"
        "</alignment></alignmentlist>"
    )
    alignment = AlParser(text).parse()[0]

    assert alignment.source_segments == ("a", "")
    assert alignment.target_segments == ()
    assert alignment.score == 0.0


@pytest.mark.parametrize(
    "text",
    [
        "<alignmentlist><alignment>",
        "<other/>",
        '<alignmentlist><alignment score="high"/></alignmentlist>',
    ],
)
def test_al_parser_rejects_malformed_documents(text):
    with pytest.raises(FormatError):
        AlParser(text).parse()


# Plain text
def test_plaintext_parser():
    alignments = PlaintextParser("Source text.", "Target text.").parse()
    assert alignments == [Alignment(["Source text."], ["Target text."])]
    assert PlaintextParser("", "x").parse()[0].source_segments == ()


def test_plaintext_formatter():
    alignments = [
        Alignment(["One.", " Two.\n"], ["Eins und zwei."]),
        Alignment([], ["Drei."]),
    ]
    source, target = PlaintextFormatter().format(alignments)

    assert source == "One. Two.\n\n"
    assert target == "Eins und zwei.\nDrei.\n"


# Reports
def test_info_formatter_orders_categories():
    alignments = [
        Alignment(["a", "b"], ["c"]),
        Alignment(["d"], ["e"]),
        Alignment([], ["f"]),
        Alignment(["g"], []),
        Alignment(["h"], ["i", "j"]),
        Alignment(["k"], ["l"]),
    ]
    assert InfoFormatter().format(alignments).splitlines() == [
        "(0-1)\t1",
        "(1-0)\t1",
        "(1-1)\t2",
        "(1-2)\t1",
        "(2-1)\t1",
        "Total\t6",
    ]


def test_output_formatter_summary(tricky_alignments):
    summary = OutputFormatter.build_summary(tricky_alignments)

    assert summary["total_alignments"] == 4
    assert summary["pinned"] == 1
    assert summary["segments"] == {"source": 4, "target": 3}
    assert summary["score"]["count"] == 2
    assert "Alignments:" in OutputFormatter.format_report(summary)


def test_output_formatter_empty():
    summary = OutputFormatter.build_summary([])
    assert summary["score"]["mean"] == 0.0
    assert "Total" not in OutputFormatter.format_report(summary)


# Corpus files
def test_corpus_files(tmp_path, tricky_alignments):
    corpus = BilingualCorpus(tricky_alignments)
    path = corpus.save_al(str(tmp_path / "nested" / "corpus.al"))

    assert len(BilingualCorpus.from_al(path)) == 4
    assert list(BilingualCorpus.from_al(path)) == tricky_alignments

    corpus.save_plaintext(str(tmp_path / "src.txt"), str(tmp_path / "tgt.txt"))
    assert (tmp_path / "tgt.txt").read_text(encoding="utf-8").startswith("Zażółć")


def test_corpus_from_plaintext(tmp_path):
    (tmp_path / "a.txt").write_text("Hello.", encoding="utf-8")
    (tmp_path / "b.txt").write_text("Hallo.", encoding="utf-8")
    corpus = BilingualCorpus.from_plaintext(str(tmp_path / "a.txt"), str(tmp_path / "b.txt"))
    assert corpus.alignments == [Alignment(["Hello."], ["Hallo."])]
