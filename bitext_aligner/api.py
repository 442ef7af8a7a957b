"""
API module for bilingual text alignment.
Provides high-level interface for easy integration.
"""

import logging
import os
import time
from datetime import datetime
from typing import Any, Dict, List, Optional

from .config import merge_config
from .core.alignment import Alignment
from .core.cleaner import TrimCleanAlgorithm
from .corpus import BilingualCorpus, PlaintextParser
from .errors import ConfigurationError
from .filter.base import CompositeFilter, Filter, IgnorePinnedFilterDecorator
from .filter.macro import MACROS
from .filter.modifier import MODIFY_ALGORITHMS, Modifier
from .output.formatter import OutputFormatter

logger = logging.getLogger(__name__)


def build_pipeline(macro: str = "moore", split: str = "sentence", **config) -> Filter:
    """Split, trim and align with the named macro.

    Args:
        macro: Name from MACROS
        split: Name from MODIFY_ALGORITHMS used to segment the texts, or None
        **config: Overrides of DEFAULT_CONFIG

    Raises:
        ConfigurationError: Unknown macro or split name, invalid config value
    """
    if macro not in MACROS:
        raise ConfigurationError(
            f"Unknown macro {macro!r}, expected one of {sorted(MACROS)}", "macro"
        )
    filters = []
    if split is not None:
        if split not in MODIFY_ALGORITHMS:
            raise ConfigurationError(
                f"Unknown split algorithm {split!r}, expected one of "
                f"{sorted(MODIFY_ALGORITHMS)}",
                "split",
            )
        filters.append(Modifier(MODIFY_ALGORITHMS[split]()))
        filters.append(Modifier(TrimCleanAlgorithm()))
    filters.append(IgnorePinnedFilterDecorator(MACROS[macro](**config)))
    return CompositeFilter(filters)


def align_texts(
    source_text: str,
    target_text: str,
    macro: str = "moore",
    split: str = "sentence",
    **config,
) -> List[Alignment]:
    """Align two parallel texts and return the alignment list."""
    alignments = PlaintextParser(source_text, target_text).parse()
    return build_pipeline(macro, split, **config).apply(alignments)


class BitextAligner:
    """File based aligner: load two texts, align, save and report.

    Example::

        aligner = BitextAligner("en.txt", "pl.txt", macro="moore")
        alignments = aligner.align()
        aligner.save_results(alignments, "output/")
        aligner.print_report(alignments)
    """

    def __init__(
        self,
        source_path: str,
        target_path: str,
        macro: str = "moore",
        split: str = "sentence",
        **config,
    ):
        self.source_file = source_path
        self.target_file = target_path
        self.macro = macro
        self.split = split
        self.config = merge_config(**config)
        self.pipeline = build_pipeline(macro, split, **config)
        self.start_time = time.time()

    def align(self) -> List[Alignment]:
        corpus = BilingualCorpus.from_plaintext(self.source_file, self.target_file)
        logger.info(f"Aligning {self.source_file} with {self.target_file} ({self.macro})")
        alignments = self.pipeline.apply(corpus.alignments)
        logger.info(
            f"Aligned into {len(alignments)} alignments in "
            f"{time.time() - self.start_time:.2f}s"
        )
        return alignments

    def save_results(
        self,
        alignments: List[Alignment],
        output_dir: Optional[str] = None,
        al_file: Optional[str] = None,
        write_plaintext: bool = True,
    ) -> Dict[str, Any]:
        """Save alignment results.

        Relative file names are resolved against output_dir (current
        directory when None).

        Returns:
            dict with "io" key holding absolute output paths and timestamp
        """
        if output_dir is None:
            output_dir = os.getcwd()
        output_dir = os.path.normpath(os.path.abspath(output_dir))
        os.makedirs(output_dir, exist_ok=True)

        if al_file is None:
            al_file = "alignment.al"
        corpus = BilingualCorpus(alignments)
        io_info = {
            "al_path": corpus.save_al(os.path.join(output_dir, al_file)),
            "output_base": output_dir,
            "generated_at": datetime.now().isoformat(timespec="seconds"),
        }

        if write_plaintext:
            source_name = os.path.splitext(os.path.basename(self.source_file))[0]
            target_name = os.path.splitext(os.path.basename(self.target_file))[0]
            source_path = os.path.join(output_dir, f"{source_name}_aligned.txt")
            target_path = os.path.join(output_dir, f"{target_name}_aligned.txt")
            corpus.save_plaintext(source_path, target_path)
            io_info["source_path"] = source_path
            io_info["target_path"] = target_path

        return {"io": io_info, "summary": OutputFormatter.build_summary(alignments)}

    def print_report(self, alignments: List[Alignment]):
        summary = OutputFormatter.build_summary(alignments)
        print(OutputFormatter.format_report(summary, f"Alignment Report ({self.macro})"))
