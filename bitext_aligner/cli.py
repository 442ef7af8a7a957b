import argparse
import logging
import sys

from .alignment import ALGORITHM_FACTORIES, AdaptiveBandAlgorithm
from .api import BitextAligner
from .calculator import (
    COUNTERS,
    CompositeCalculator,
    NormalDistributionCalculator,
    PoissonDistributionCalculator,
    TranslationCalculator,
)
from .config import merge_config
from .core.category import CATEGORY_MAPS
from .corpus import AlParser, PlaintextParser
from .errors import AlignerError
from .filter import (
    MACROS,
    MODIFY_ALGORITHMS,
    Aligner,
    FractionSelector,
    IgnorePinnedFilterDecorator,
    Modifier,
    OneToOneSelector,
    ProbabilitySelector,
)
from .matrix import BandMatrixFactory, FullMatrixFactory
from .output.formatter import (
    AlFormatter,
    InfoFormatter,
    OutputFormatter,
    PlaintextFormatter,
)
from .utils import build_config_from_args

CALCULATORS = ("normal", "poisson", "translation", "poisson-translation")
SEARCHES = ("adaptive", "band", "full")
SELECTORS = ("one-to-one", "fraction", "probability")


def _read(path):
    if path is None or path == "-":
        return sys.stdin.read()
    with open(path, "r", encoding="utf-8") as f:
        return f.read()


def _write(path, text):
    if path is None or path == "-":
        sys.stdout.write(text)
        return
    with open(path, "w", encoding="utf-8") as f:
        f.write(text)


def _add_band_options(parser):
    parser.add_argument("--band-radius", type=int, help="Initial band radius (default: 20)")
    parser.add_argument(
        "--band-increment", type=float, help="Band radius growth ratio (default: 1.5)"
    )
    parser.add_argument(
        "--band-margin", type=int, help="Minimum distance from band edge (default: 5)"
    )
    parser.add_argument(
        "--max-band-iterations", type=int, help="Give up after this many band widenings"
    )
    parser.add_argument("--timeout", type=float, help="Time limit in seconds")
    parser.add_argument(
        "--iterations", type=int, help="Translation model training iterations (default: 4)"
    )


def _build_calculator(name, counter, alignments, config):
    if name == "normal":
        return NormalDistributionCalculator(counter)
    if name == "poisson":
        return PoissonDistributionCalculator(counter, alignments)
    translation = TranslationCalculator.train(alignments, config["train_iteration_count"])
    if name == "translation":
        return translation
    return CompositeCalculator(
        [PoissonDistributionCalculator(counter, alignments), translation]
    )


def _run_align(args, alignments):
    config = merge_config(**build_config_from_args(args))
    calculator = _build_calculator(
        args.calculator, COUNTERS[args.counter](), alignments, config
    )
    category_map = CATEGORY_MAPS[args.categories]
    factory = ALGORITHM_FACTORIES[args.algorithm]()
    if args.search == "adaptive":
        algorithm = AdaptiveBandAlgorithm(factory, calculator, category_map, **config)
    elif args.search == "band":
        algorithm = factory.create_algorithm(
            calculator, category_map, BandMatrixFactory(config["initial_band_radius"])
        )
    else:
        algorithm = factory.create_algorithm(calculator, category_map, FullMatrixFactory())
    return Aligner(algorithm).apply(alignments)


def _build_selector(args):
    if args.selector == "one-to-one":
        return OneToOneSelector()
    if args.selector == "fraction":
        return FractionSelector(args.value)
    return ProbabilitySelector(args.value)


def _run_format(args, alignments):
    if args.format == "al":
        _write(args.output, AlFormatter().format(alignments))
    elif args.format == "info":
        _write(args.output, InfoFormatter().format(alignments) + "\n")
    elif args.format == "report":
        summary = OutputFormatter.build_summary(alignments)
        _write(args.output, OutputFormatter.format_report(summary) + "\n")
    else:
        if not args.source_output or not args.target_output:
            raise AlignerError(
                "--source-output and --target-output are required for plaintext"
            )
        source_text, target_text = PlaintextFormatter().format(alignments)
        _write(args.source_output, source_text)
        _write(args.target_output, target_text)


def _build_parser():
    parser = argparse.ArgumentParser(
        description="Statistical bilingual text alignment tool",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  bitext-aligner run -s en.txt -t pl.txt -o output/ --macro moore
  bitext-aligner parse -s en.txt -t pl.txt | bitext-aligner modify --algorithm sentence \\
      | bitext-aligner macro --name poisson | bitext-aligner format --format info
        """,
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose output (show debug information)",
    )
    commands = parser.add_subparsers(dest="command", required=True)

    run = commands.add_parser("run", help="Align two plain text files end to end")
    run.add_argument("-s", "--source", required=True, help="Source language file")
    run.add_argument("-t", "--target", required=True, help="Target language file")
    run.add_argument("-o", "--output", required=True, help="Output directory")
    run.add_argument("--macro", choices=sorted(MACROS), default="moore")
    run.add_argument("--split", choices=sorted(MODIFY_ALGORITHMS), default="sentence")
    run.add_argument("--al-file", help="Name of .al output file (default: alignment.al)")
    _add_band_options(run)
    run.add_argument("--fraction", type=float, help="Moore training selection fraction")

    parse = commands.add_parser("parse", help="Convert plain text files to .al")
    parse.add_argument("-s", "--source", required=True)
    parse.add_argument("-t", "--target", required=True)
    parse.add_argument("-o", "--output", help="Output .al file (default: stdout)")

    modify = commands.add_parser("modify", help="Split, merge or clean segments")
    modify.add_argument("-i", "--input", help="Input .al file (default: stdin)")
    modify.add_argument("-o", "--output", help="Output .al file (default: stdout)")
    modify.add_argument("--algorithm", choices=sorted(MODIFY_ALGORITHMS), required=True)
    modify.add_argument("--target-algorithm", choices=sorted(MODIFY_ALGORITHMS))

    align = commands.add_parser("align", help="Align with chosen algorithm and calculator")
    align.add_argument("-i", "--input")
    align.add_argument("-o", "--output")
    align.add_argument("--algorithm", choices=sorted(ALGORITHM_FACTORIES), default="fb")
    align.add_argument("--calculator", choices=CALCULATORS, default="poisson")
    align.add_argument("--counter", choices=sorted(COUNTERS), default="word")
    align.add_argument("--categories", choices=sorted(CATEGORY_MAPS), default="best")
    align.add_argument("--search", choices=SEARCHES, default="adaptive")
    _add_band_options(align)

    select = commands.add_parser("select", help="Keep a subset of alignments")
    select.add_argument("-i", "--input")
    select.add_argument("-o", "--output")
    select.add_argument("--selector", choices=SELECTORS, required=True)
    select.add_argument(
        "--value", type=float, default=1.0, help="Fraction or probability threshold"
    )

    macro = commands.add_parser("macro", help="Run a predefined alignment recipe")
    macro.add_argument("-i", "--input")
    macro.add_argument("-o", "--output")
    macro.add_argument("--name", choices=sorted(MACROS), default="moore")
    _add_band_options(macro)
    macro.add_argument("--fraction", type=float, help="Moore training selection fraction")

    fmt = commands.add_parser("format", help="Render .al input")
    fmt.add_argument("-i", "--input")
    fmt.add_argument("-o", "--output")
    fmt.add_argument(
        "--format", choices=("al", "plaintext", "info", "report"), default="info"
    )
    fmt.add_argument("--source-output", help="Source text file for plaintext format")
    fmt.add_argument("--target-output", help="Target text file for plaintext format")

    return parser


def main(argv=None):
    parser = _build_parser()
    args = parser.parse_args(argv)

    # Configure logging
    if args.verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        )
    else:
        logging.basicConfig(level=logging.INFO, format="%(message)s")

    try:
        if args.command == "run":
            aligner = BitextAligner(
                args.source,
                args.target,
                macro=args.macro,
                split=args.split,
                **build_config_from_args(args),
            )
            alignments = aligner.align()
            result = aligner.save_results(alignments, args.output, al_file=args.al_file)
            aligner.print_report(alignments)
            logging.info(f"Alignment written: {result['io']['al_path']}")
            return 0

        if args.command == "parse":
            alignments = PlaintextParser(_read(args.source), _read(args.target)).parse()
            _write(args.output, AlFormatter().format(alignments))
            return 0

        alignments = AlParser(_read(args.input)).parse()

        if args.command == "format":
            _run_format(args, alignments)
            return 0

        if args.command == "modify":
            source_algorithm = MODIFY_ALGORITHMS[args.algorithm]()
            target_algorithm = MODIFY_ALGORITHMS[
                args.target_algorithm or args.algorithm
            ]()
            result = Modifier(source_algorithm, target_algorithm).apply(alignments)
        elif args.command == "align":
            result = _run_align(args, alignments)
        elif args.command == "select":
            result = _build_selector(args).apply(alignments)
        else:
            macro = MACROS[args.name](**build_config_from_args(args))
            result = IgnorePinnedFilterDecorator(macro).apply(alignments)

        _write(args.output, AlFormatter().format(result))
        return 0
    except (AlignerError, OSError) as e:
        logging.error(f"Error: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
