\
import argparse
import sys
from pathlib import Path
from typing import List, Optional

from .core.collector import DocumentCollector, SingleFileCollector, configure_logging
from .core.errors import NoInputError, OutputWriteError, SlimError
from .core.loader import build_rule_set
from .core.models import SlimOptions
from .core.pipeline import Collector, run_slim
from .core.reporting import Reporter
from .core.writer import write_output


TOGGLE_HELP = {
    "annotations": "annotations, extended and changed properties",
    "lineage": "lineage tags",
    "language_data": "linguistic metadata, culture references and the cultures/ folder",
    "column_metadata": "column metadata such as summarizeBy, sourceColumn and formatString",
    "inferred_metadata": "inferred-name and inferred-type flags",
    "display_properties": "display properties such as isHidden and displayFolder",
}


def _add_common(p: argparse.ArgumentParser, default_out: Path) -> None:
    p.add_argument("--out", type=Path, default=default_out, help=f"Output file (default {default_out}).")
    p.add_argument("--report", type=Path, default=None, help="Also write the summary as JSON to this path.")
    for toggle in SlimOptions.toggle_names():
        flag = "--keep-" + toggle.replace("_", "-")
        p.add_argument(flag, dest=f"keep_{toggle}", action="store_true", help=f"Keep {TOGGLE_HELP[toggle]}.")
    p.add_argument("--verbose", action="store_true", help="Enable verbose logging output.")


def build_arg_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="tmdlslim",
        description="Strip metadata from TMDL semantic models, keeping keys, relationships and comments.",
    )
    sub = p.add_subparsers(dest="mode", required=True)

    # dir mode
    d = sub.add_parser("dir", help="Slim every .tmdl document under a folder into one file.")
    d.add_argument("path", type=Path, help="Model folder to scan recursively.")
    _add_common(d, Path("./model.slim.tmdl"))
    d.add_argument("--no-progress", action="store_true", help="Disable the progress bar.")

    # file mode
    f = sub.add_parser("file", help="Slim a single .tmdl document.")
    f.add_argument("path", type=Path, help="Document to slim.")
    _add_common(f, Path("./document.slim.tmdl"))

    return p


def options_from_args(args: argparse.Namespace) -> SlimOptions:
    return SlimOptions(**{
        toggle: not getattr(args, f"keep_{toggle}")
        for toggle in SlimOptions.toggle_names()
    })


def _finish(collector: Collector, source: str, args: argparse.Namespace) -> int:
    try:
        run = run_slim(collector, source)
        reporter = Reporter(run.report)
        # output is replaced last
        if args.report is not None:
            reporter.write_json(args.report)
        try:
            write_output(args.out, run.text)
        except OutputWriteError:
            if args.report is not None and args.report.exists():
                args.report.unlink()
            raise
    except NoInputError as exc:
        print(f"{exc}. Nothing to do.", file=sys.stderr)
        return 0
    except SlimError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    sys.stdout.write(reporter.render())
    print(f"Wrote {args.out}")
    return 0


def run_dir(args: argparse.Namespace) -> int:
    rule_set = build_rule_set(options_from_args(args))
    collector = DocumentCollector(
        root=args.path,
        rule_set=rule_set,
        logger=configure_logging(verbose=args.verbose),
        verbose=args.verbose,
        show_progress=not args.no_progress,
        skip_paths=[p for p in (args.out, args.report) if p is not None],
    )
    return _finish(collector, args.path.resolve().name or str(args.path), args)


def run_file(args: argparse.Namespace) -> int:
    rule_set = build_rule_set(options_from_args(args))
    collector = SingleFileCollector(
        file_path=args.path,
        rule_set=rule_set,
        logger=configure_logging(verbose=args.verbose),
        verbose=args.verbose,
    )
    return _finish(collector, args.path.name, args)


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_arg_parser()
    args = parser.parse_args(argv)
    if args.mode == "dir":
        return run_dir(args)
    elif args.mode == "file":
        return run_file(args)
    else:
        parser.print_help()
        return 2


if __name__ == "__main__":
    raise SystemExit(main())
