#!/usr/bin/env python3
"""
Feature to curl conversion script

Usage:
  python scripts/convert_features.py convert [--features-dir <dir>] [--output-dir <dir>] [--pattern <glob>] [--config <yaml>] [--log-level <level>]
  python scripts/convert_features.py show <feature-file>

Examples:
  python scripts/convert_features.py
  python scripts/convert_features.py convert --features-dir src/test/karate --output-dir generated
  python scripts/convert_features.py show features/widgets.feature
"""
from __future__ import annotations

import argparse
import sys
from pathlib import Path

from application.services.conversion_service import FeatureConversionService
from application.services.feature_parser import FeatureCurlParser
from domain.exceptions import ScriptParseError
from infrastructure.config.settings import SettingsError, load_settings
from infrastructure.feature.file_source import FeatureFileSource, FeatureSourceError
from infrastructure.logging.log_setup import setup_console_logging
from infrastructure.logging.loguru_logger import LoguruLogger
from infrastructure.output.text_writer import CommandTextWriter, format_commands

COMMANDS = {"convert", "show"}


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Convert Karate feature files to curl commands")
    subparsers = parser.add_subparsers(dest="command")

    convert_parser = subparsers.add_parser("convert", help="Convert every feature file in a directory")
    convert_parser.add_argument("--features-dir", type=str)
    convert_parser.add_argument("--output-dir", type=str)
    convert_parser.add_argument("--pattern", type=str)
    convert_parser.add_argument("--config", type=str)
    convert_parser.add_argument("--log-level", type=str)

    show_parser = subparsers.add_parser("show", help="Print the curl commands of one feature file")
    show_parser.add_argument("feature_file", type=str)

    return parser


def _convert(args: argparse.Namespace) -> int:
    config_path = Path(args.config) if args.config else None
    settings = load_settings(config_path).merged(
        {
            "features_dir": args.features_dir,
            "output_dir": args.output_dir,
            "pattern": args.pattern,
            "log_level": args.log_level,
        }
    )
    setup_console_logging(level=settings.log_level)

    service = FeatureConversionService(
        source=FeatureFileSource(settings.features_dir, settings.pattern),
        sink=CommandTextWriter(settings.output_dir, settings.output_suffix),
        logger=LoguruLogger(),
    )
    report = service.convert_all()

    print(f"Files: {len(report.outcomes)}")
    print(f"Commands: {report.command_count}")
    for outcome in report.failed:
        print(f"FAILED: {outcome.source}: {outcome.error_message}")
    return 0 if report.ok else 1


def _show(args: argparse.Namespace) -> int:
    path = Path(args.feature_file)
    source = FeatureFileSource(path.parent)
    commands = FeatureCurlParser().parse(source.read(path))
    sys.stdout.write(format_commands(commands))
    return 0


def main() -> None:
    parser = _build_parser()
    argv = sys.argv[1:]
    if not argv or argv[0] not in COMMANDS and argv[0] not in {"-h", "--help"}:
        argv = ["convert"] + argv
    args = parser.parse_args(argv)

    try:
        if args.command == "convert":
            exit_code = _convert(args)
        elif args.command == "show":
            exit_code = _show(args)
        else:
            raise ValueError(f"Unknown command: {args.command}")
    except (ValueError, SettingsError, FeatureSourceError, ScriptParseError) as exc:
        print(f"ERROR: {exc}")
        sys.exit(1)
    sys.exit(exit_code)


if __name__ == "__main__":
    main()
