"""Split algorithms: break segments into sentences, paragraphs or words.

Splitting never drops characters except where stated (word split removes
whitespace, paragraph split removes blank lines).
"""

import re
from abc import abstractmethod
from typing import List, Sequence

from .modify import ModifyAlgorithm


class SplitAlgorithm(ModifyAlgorithm):
    """Splits every segment independently and concatenates the pieces."""

    @abstractmethod
    def split(self, text: str) -> List[str]:
        raise NotImplementedError

    def modify(self, segments: Sequence[str]) -> List[str]:
        result = []
        for segment in segments:
            result.extend(self.split(segment))
        return result


class SentenceSplitAlgorithm(SplitAlgorithm):
    """Simple rule based sentence splitter.

    Splits after an end of line, and after sentence ending punctuation when
    the next non-space character is an upper case letter. Whitespace after
    the punctuation stays at the beginning of the next sentence.
    """

    SENTENCE_END_CHARS = ".?!"
    LINE_END_CHARS = "\r\n"

    def split(self, text: str) -> List[str]:
        segments = []
        start = 0
        i = 0
        n = len(text)
        while i < n:
            ch = text[i]
            i += 1
            if ch in self.LINE_END_CHARS:
                if i < n and text[i] == "\n":
                    i += 1
                segments.append(text[start:i])
                start = i
            elif ch in self.SENTENCE_END_CHARS:
                j = i
                while j < n and text[j].isspace() and text[j] not in self.LINE_END_CHARS:
                    j += 1
                if j < n and text[j].isupper():
                    segments.append(text[start:i])
                    start = i
        if start < n:
            segments.append(text[start:])
        return [segment for segment in segments if segment]


class ParagraphSplitAlgorithm(SplitAlgorithm):
    """Splits on blank lines."""

    PARAGRAPH_BREAK_PATTERN = re.compile(r"\n\s*\n")

    def split(self, text: str) -> List[str]:
        paragraphs = self.PARAGRAPH_BREAK_PATTERN.split(text)
        return [p for p in paragraphs if p.strip()]


class WordSplitAlgorithm(SplitAlgorithm):
    """Splits into words.

    Every character that is not a letter or digit is a word boundary.
    Punctuation characters become single character words, whitespace is
    removed. Placeholders such as ``{OTHER}`` stay a single word.
    """

    PLACEHOLDER_PATTERN = re.compile(r"\{[A-Z]+\}")

    def split(self, text: str) -> List[str]:
        words = []
        start = 0
        end = 0
        while end < len(text):
            ch = text[end]
            if ch.isalnum():
                end += 1
                continue
            if end > start:
                words.append(text[start:end])
            placeholder = self.PLACEHOLDER_PATTERN.match(text, end) if ch == "{" else None
            if placeholder:
                words.append(placeholder.group())
                end = placeholder.end()
            else:
                if not ch.isspace():
                    words.append(ch)
                end += 1
            start = end
        if start < len(text):
            words.append(text[start:])
        return words


class FilterNonWordsSplitAlgorithmDecorator(SplitAlgorithm):
    """Keeps only real words from the wrapped splitter, lower-cased.

    A piece counts as a word when its first character is a letter or digit,
    or when it is a whole placeholder. Braces keep ``{other}`` apart from
    ``other``.
    """

    def __init__(self, split_algorithm: SplitAlgorithm):
        self.split_algorithm = split_algorithm

    def split(self, text: str) -> List[str]:
        return [
            word.lower()
            for word in self.split_algorithm.split(text)
            if word
            and (
                word[0].isalnum()
                or WordSplitAlgorithm.PLACEHOLDER_PATTERN.fullmatch(word)
            )
        ]
