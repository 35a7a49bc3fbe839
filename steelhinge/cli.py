"""
Command-line interface for steelhinge.

Usage:
  steelhinge run <job.yaml> [--model PATH] [--no-export] [--log-file PATH] [--verbose]
  steelhinge --version

Examples:
  # Calculate all variants of a job and patch the model named in it
  steelhinge run job.yaml

  # Patch another copy of the model, skip the workbook
  steelhinge run job.yaml --model copy.$2k --no-export
"""

import argparse
import sys
from pathlib import Path

from loguru import logger

from steelhinge import __version__
from steelhinge.batch import run_batch
from steelhinge.core.config import load_job
from steelhinge.core.errors import HingeError
from steelhinge.core.logging import configure_logging
from steelhinge.core.settings import load_hinge_parameters
from steelhinge.io.excel_export import ExcelResultsSink, results_path_for
from steelhinge.io.section_source import CatalogSectionSource, S2kSectionSource


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(
        prog="steelhinge",
        description="Nonlinear hinge parameters for steel members, written into $2k model files",
    )
    parser.add_argument("--version", action="version", version=f"steelhinge {__version__}")

    subparsers = parser.add_subparsers(dest="command")

    # --- run ---
    run_parser = subparsers.add_parser("run", help="Calculate variants and patch the model")
    run_parser.add_argument("job_file", help="Job file (.yaml)")
    run_parser.add_argument("--model", default=None, help="Model file to patch (overrides the job)")
    run_parser.add_argument("--no-export", action="store_true", help="Do not write the results workbook")
    run_parser.add_argument("--log-file", default=None, help="Also log (DEBUG) to this file")
    run_parser.add_argument("--verbose", "-v", action="store_true", help="Debug output on the console")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 0

    if args.command == "run":
        return _cmd_run(args)

    return 0


def _cmd_run(args) -> int:
    configure_logging("DEBUG" if args.verbose else "INFO", args.log_file)

    try:
        job = load_job(args.job_file)
        variants = job.build_variants()
        parameters = load_hinge_parameters(job.parameters) if job.parameters else None
    except (OSError, ValueError, HingeError) as exc:
        logger.error(str(exc))
        return 2

    model_path = Path(args.model) if args.model else job.model
    if not model_path.is_file():
        logger.error(f"Model file not found: {model_path}")
        return 2

    if job.sections is not None:
        try:
            source = CatalogSectionSource.from_yaml(job.sections)
        except (OSError, ValueError) as exc:
            logger.error(f"Cannot load section catalog {job.sections}: {exc}")
            return 2
    else:
        source = S2kSectionSource(model_path)

    sink = None
    if job.export and not args.no_export:
        sink = ExcelResultsSink(results_path_for(model_path))

    logger.info(f"Processing {len(variants)} variant(s) into {model_path.name}")
    summary = run_batch(variants, source, model_path, sink=sink, parameters=parameters)

    if summary.total:
        print(summary.to_frame().to_string(index=False))
    print(f"\n{summary.succeeded} of {summary.total} hinges written to {model_path}")
    return 0 if summary.ok else 1


if __name__ == "__main__":
    sys.exit(main())
