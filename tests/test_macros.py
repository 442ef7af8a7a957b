"""Tests for alignment macros and the high level API"""

import logging

import pytest

from bitext_aligner import BitextAligner, align_texts, build_pipeline
from bitext_aligner.core import Alignment, pinned_alignment
from bitext_aligner.errors import ConfigurationError
from bitext_aligner.filter import (
    GaleAndChurchMacro,
    MooreMacro,
    PoissonMacro,
    PoissonTranslationMacro,
    TranslationMacro,
)


def joined(alignments):
    source = [s for a in alignments for s in a.source_segments]
    target = [t for a in alignments for t in a.target_segments]
    return source, target


# Length macros
def test_gale_and_church_identical_texts(source_sentences):
    alignments = GaleAndChurchMacro().apply([Alignment(source_sentences, source_sentences)])
    assert len(alignments) == len(source_sentences)
    assert all(a.is_one_to_one for a in alignments)


def test_poisson_macro_preserves_segments(unaligned, source_sentences, target_sentences):
    alignments = PoissonMacro().apply(unaligned)
    assert joined(alignments) == (source_sentences, target_sentences)


# Moore
def test_moore_preserves_original_segments(unaligned, source_sentences, target_sentences):
    alignments = MooreMacro().apply(unaligned)
    assert joined(alignments) == (source_sentences, target_sentences)
    assert all(a.score >= 0.0 for a in alignments)


def test_moore_aligns_parallel_sentences(unaligned):
    alignments = MooreMacro().apply(unaligned)
    one_to_one = sum(1 for a in alignments if a.is_one_to_one)
    assert one_to_one >= 7


def test_moore_falls_back_to_length_alignment(unaligned, caplog):
    """Nothing selected for training leaves the length alignment"""
    with caplog.at_level(logging.WARNING):
        alignments = MooreMacro(select_fraction=0.0).apply(unaligned)

    assert "Content alignment is impossible" in caplog.text
    assert sum(len(a.source_segments) for a in alignments) == 10


def test_moore_with_viterbi_content_phase(unaligned, source_sentences, target_sentences):
    alignments = MooreMacro(content_algorithm="viterbi").apply(unaligned)
    assert joined(alignments) == (source_sentences, target_sentences)


def test_macro_rejects_bad_config():
    with pytest.raises(ConfigurationError):
        MooreMacro(select_fraction=2.0)


# Translation macros
@pytest.mark.parametrize("macro_class", [TranslationMacro, PoissonTranslationMacro])
def test_translation_macros_realign_input(
    macro_class, parallel_alignments, source_sentences, target_sentences
):
    alignments = macro_class().apply(parallel_alignments)
    assert joined(alignments) == (source_sentences, target_sentences)


def test_translation_macro_keeps_pinned_in_place(parallel_alignments):
    pinned = pinned_alignment(["Fixed."], ["Fest."])
    alignments = parallel_alignments[:5] + [pinned] + parallel_alignments[5:]
    result = TranslationMacro().apply(alignments)

    assert pinned in result
    index = result.index(pinned)
    assert sum(len(a.source_segments) for a in result[:index]) == 5


def test_translation_macro_empty_input():
    assert TranslationMacro().apply([]) == []


# API
def test_align_texts(source_sentences, target_sentences):
    alignments = align_texts(
        " ".join(source_sentences), "\n".join(target_sentences), macro="galechurch"
    )
    assert joined(alignments) == (source_sentences, target_sentences)


def test_build_pipeline_rejects_unknown_names():
    with pytest.raises(ConfigurationError):
        build_pipeline(macro="unknown")
    with pytest.raises(ConfigurationError):
        build_pipeline(split="unknown")


def test_bitext_aligner_files(tmp_path, source_sentences, target_sentences):
    source_file = tmp_path / "en.txt"
    target_file = tmp_path / "de.txt"
    source_file.write_text(" ".join(source_sentences), encoding="utf-8")
    target_file.write_text(" ".join(target_sentences), encoding="utf-8")

    aligner = BitextAligner(str(source_file), str(target_file), macro="poisson")
    alignments = aligner.align()
    result = aligner.save_results(alignments, str(tmp_path / "out"))

    assert (tmp_path / "out" / "alignment.al").exists()
    assert (tmp_path / "out" / "en_aligned.txt").exists()
    assert result["summary"]["segments"] == {"source": 10, "target": 10}
    assert result["io"]["al_path"].endswith("alignment.al")
