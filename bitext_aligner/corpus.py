"""
Corpus loading and saving.

Parsers build the initial alignment list the filters work on; the corpus
object ties parsing, formatting and file handling together.
"""

import math
import os
import xml.etree.ElementTree as ET
from typing import List, Sequence

from .core.alignment import Alignment
from .errors import FormatError
from .output.formatter import AlFormatter, PlaintextFormatter


class PlaintextParser:
    """Whole source and target texts become one unaligned alignment."""

    def __init__(self, source_text: str, target_text: str):
        self.source_text = source_text
        self.target_text = target_text

    def parse(self) -> List[Alignment]:
        source_segments = [self.source_text] if self.source_text else []
        target_segments = [self.target_text] if self.target_text else []
        return [Alignment(source_segments, target_segments)]


class AlParser:
    """Parser of the native .al XML format."""

    def __init__(self, content: str):
        self.content = content

    def parse(self) -> List[Alignment]:
        try:
            root = ET.fromstring(self.content)
        except ET.ParseError as e:
            raise FormatError(f"Malformed .al document: {e}") from e
        if root.tag != "alignmentlist":
            raise FormatError(
                f"Expected <alignmentlist> root element, found <{root.tag}>"
            )

        alignments = []
        for element in root.iter("alignment"):
            score = self._parse_score(element.get("score"))
            source_segments = self._segments(element.find("sourcelist"))
            target_segments = self._segments(element.find("targetlist"))
            if score == -math.inf:
                alignments.append(
                    Alignment(source_segments, target_segments, 0.0, pinned=True)
                )
            else:
                alignments.append(Alignment(source_segments, target_segments, score))
        return alignments

    @staticmethod
    def _parse_score(value) -> float:
        if value is None:
            return 0.0
        try:
            return float(value)
        except ValueError as e:
            raise FormatError(f"Invalid alignment score: {value!r}") from e

    @staticmethod
    def _segments(segment_list) -> List[str]:
        if segment_list is None:
            return []
        return [segment.text or "" for segment in segment_list.iter("segment")]


class BilingualCorpus:
    """Alignment list with file input and output helpers"""

    def __init__(self, alignments: Sequence[Alignment] = ()):
        self.alignments: List[Alignment] = list(alignments)

    @classmethod
    def from_plaintext(cls, source_path: str, target_path: str) -> "BilingualCorpus":
        """Load two parallel plain text files as one unaligned alignment."""
        with open(source_path, "r", encoding="utf-8") as f:
            source_text = f.read()
        with open(target_path, "r", encoding="utf-8") as f:
            target_text = f.read()
        return cls(PlaintextParser(source_text, target_text).parse())

    @classmethod
    def from_al(cls, path: str) -> "BilingualCorpus":
        with open(path, "r", encoding="utf-8") as f:
            return cls(AlParser(f.read()).parse())

    def save_al(self, path: str) -> str:
        """Write corpus in .al format, returns absolute path."""
        path = os.path.abspath(path)
        os.makedirs(os.path.dirname(path), exist_ok=True)
        with open(path, "w", encoding="utf-8") as f:
            f.write(AlFormatter().format(self.alignments))
        return path

    def save_plaintext(self, source_path: str, target_path: str):
        source_text, target_text = PlaintextFormatter().format(self.alignments)
        for path, text in ((source_path, source_text), (target_path, target_text)):
            path = os.path.abspath(path)
            os.makedirs(os.path.dirname(path), exist_ok=True)
            with open(path, "w", encoding="utf-8") as f:
                f.write(text)

    def __len__(self):
        return len(self.alignments)

    def __iter__(self):
        return iter(self.alignments)
