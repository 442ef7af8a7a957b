"""Formatting of alignment lists: .al documents, plain text and reports"""

import math
import xml.etree.ElementTree as ET
from statistics import mean
from typing import Any, Dict, List, Sequence, Tuple

from ..core.alignment import Alignment, Category

PINNED_SCORE = "-Infinity"


class AlFormatter:
    """Native .al XML format, preserves segments and scores exactly.

    Layout::

        <alignmentlist>
            <alignment score="0.105">
                <sourcelist><segment>...</segment></sourcelist>
                <targetlist><segment>...</segment></targetlist>
            </alignment>
        </alignmentlist>
    """

    INDENT = "    "

    def format(self, alignments: Sequence[Alignment]) -> str:
        root = ET.Element("alignmentlist")
        for alignment in alignments:
            score = PINNED_SCORE if alignment.pinned else repr(float(alignment.score))
            element = ET.SubElement(root, "alignment", score=score)
            for tag, segments in (
                ("sourcelist", alignment.source_segments),
                ("targetlist", alignment.target_segments),
            ):
                segment_list = ET.SubElement(element, tag)
                for segment in segments:
                    ET.SubElement(segment_list, "segment").text = segment
        ET.indent(root, space=self.INDENT)
        # Parsers normalise raw carriage returns, a character reference survives
        body = ET.tostring(root, encoding="unicode").replace("\r", "&#13;")
        return (
            '<?xml version="1.0" encoding="UTF-8" standalone="yes"?>\n' + body + "\n"
        )


class PlaintextFormatter:
    """Two parallel texts with one alignment per line."""

    def __init__(self, separator: str = " "):
        self.separator = separator

    def format(self, alignments: Sequence[Alignment]) -> Tuple[str, str]:
        source_lines = []
        target_lines = []
        for alignment in alignments:
            source_lines.append(self._line(alignment.source_segments))
            target_lines.append(self._line(alignment.target_segments))
        return "\n".join(source_lines) + "\n", "\n".join(target_lines) + "\n"

    def _line(self, segments: Sequence[str]) -> str:
        text = self.separator.join(segment.strip() for segment in segments)
        return " ".join(text.splitlines())


def _category_order(category: Category):
    """(0-1), (1-0), (1-1), (1-2), (2-1), (2-2), ..."""
    return (
        min(category),
        max(category),
        category.source_count,
    )


class InfoFormatter:
    """Number of alignments per category plus the total."""

    def format(self, alignments: Sequence[Alignment]) -> str:
        counts: Dict[Category, int] = {}
        for alignment in alignments:
            counts[alignment.category] = counts.get(alignment.category, 0) + 1
        lines = [
            f"{category}\t{counts[category]}"
            for category in sorted(counts, key=_category_order)
        ]
        lines.append(f"Total\t{len(alignments)}")
        return "\n".join(lines)


class OutputFormatter:
    """Builds summary dicts and console reports for alignment results"""

    @staticmethod
    def build_summary(alignments: Sequence[Alignment]) -> Dict[str, Any]:
        """Build summary from alignment list

        Returns:
            Structured summary dict with segment totals, category breakdown
            and score statistics (pinned and impossible alignments excluded)
        """
        breakdown: Dict[str, int] = {}
        for alignment in alignments:
            key = alignment.operation_type
            breakdown[key] = breakdown.get(key, 0) + 1

        scores = [
            a.score for a in alignments if not a.pinned and math.isfinite(a.score)
        ]
        return {
            "total_alignments": len(alignments),
            "one_to_one": breakdown.get("1:1", 0),
            "pinned": sum(1 for a in alignments if a.pinned),
            "segments": {
                "source": sum(len(a.source_segments) for a in alignments),
                "target": sum(len(a.target_segments) for a in alignments),
            },
            "breakdown": dict(sorted(breakdown.items())),
            "score": {
                "mean": round(mean(scores), 4) if scores else 0.0,
                "min": round(min(scores), 4) if scores else 0.0,
                "max": round(max(scores), 4) if scores else 0.0,
                "count": len(scores),
            },
        }

    @staticmethod
    def format_report(summary: Dict[str, Any], title: str = "Alignment Report") -> str:
        lines: List[str] = ["=" * 70, title, "=" * 70]
        lines.append(f"Alignments:        {summary['total_alignments']}")
        lines.append(
            f"Segments:          {summary['segments']['source']} source, "
            f"{summary['segments']['target']} target"
        )
        total = summary["total_alignments"]
        if total:
            ratio = summary["one_to_one"] / total
            lines.append(f"One-to-one:        {summary['one_to_one']} ({ratio:.1%})")
        if summary["pinned"]:
            lines.append(f"Pinned:            {summary['pinned']}")
        lines.append("Breakdown:")
        for operation, count in summary["breakdown"].items():
            lines.append(f"  {operation:<6} {count}")
        score = summary["score"]
        lines.append(
            f"Score:             mean={score['mean']:.4f} "
            f"min={score['min']:.4f} max={score['max']:.4f}"
        )
        lines.append("=" * 70)
        return "\n".join(lines)
