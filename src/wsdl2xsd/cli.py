"""wsdl2xsd CLI: extract embedded schemas from WSDL documents."""

import argparse
import logging
import sys
from importlib.metadata import version as get_version, PackageNotFoundError
from pathlib import Path


def main():
    """Main CLI entry point for wsdl2xsd commands."""
    try:
        wsdl2xsd_version = get_version("wsdl2xsd")
    except PackageNotFoundError:
        wsdl2xsd_version = "dev"

    parser = argparse.ArgumentParser(
        prog="wsdl2xsd",
        description="wsdl2xsd: write the schema embedded in a WSDL to a standalone .xsd file"
    )
    parser.add_argument("--version", action="version", version=f"wsdl2xsd {wsdl2xsd_version}")
    # Common arguments
    parent_parser = argparse.ArgumentParser(add_help=False)
    parent_parser.add_argument(
        "--quiet",
        action="store_true",
        help="Suppress all non-error output."
    )
    parent_parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="INFO",
        help="Log level for progress messages (default INFO)"
    )
    parent_parser.add_argument(
        "--log-file",
        type=Path,
        default=None,
        help="Also write log messages to this file"
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # extract command
    extract_parser = subparsers.add_parser(
        "extract",
        help="Extract the embedded schema of each configured WSDL",
        parents=[parent_parser]
    )
    extract_parser.add_argument(
        "--project-dir",
        type=Path,
        default=Path("."),
        help="Project base directory for the default src/wsdl and src/xsd locations"
    )
    extract_parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="JSON configuration file (flags given here take precedence)"
    )
    extract_parser.add_argument(
        "--wsdl-directory",
        type=Path,
        default=None,
        help="Directory containing WSDL files (defaults to <project>/src/wsdl)"
    )
    extract_parser.add_argument(
        "--wsdl-file",
        dest="wsdl_files",
        action="append",
        default=None,
        help="WSDL to extract; repeatable. Without it every .wsdl in the WSDL directory is used"
    )
    extract_parser.add_argument(
        "--dest-dir",
        type=Path,
        default=None,
        help="Output directory for schema files (defaults to <project>/src/xsd)"
    )
    extract_parser.add_argument(
        "--dependency",
        default=None,
        help="groupId:artifactId of the dependency archive holding the WSDL files"
    )
    extract_parser.add_argument(
        "--artifacts",
        type=Path,
        default=None,
        help="JSON manifest of resolved build artifacts (required with --dependency)"
    )

    args = parser.parse_args()

    if not args.command:
        parser.print_help()
        sys.exit(1)

    from ._internal.logging import configure_logging

    configure_logging(
        level=logging.WARNING if args.quiet else args.log_level,
        log_file=args.log_file,
    )

    if args.command == "extract":
        from .api import extract_schemas
        from .config import ExtractionConfig
        from .errors import Wsdl2XsdError
        from ._internal.io.artifacts import load_artifact_manifest

        try:
            if args.config is not None:
                config = ExtractionConfig.from_json_file(args.config.resolve())
            else:
                config = ExtractionConfig.for_project(args.project_dir.resolve())

            overrides = {}
            if args.wsdl_directory is not None:
                overrides["wsdl_directory"] = args.wsdl_directory.resolve()
            if args.wsdl_files is not None:
                overrides["wsdl_files"] = list(args.wsdl_files)
            if args.dest_dir is not None:
                overrides["source_dest_dir"] = args.dest_dir.resolve()
            if args.dependency is not None:
                overrides["wsdl_dependency"] = args.dependency
            config = config.model_copy(update=overrides)

            artifacts = []
            if args.artifacts is not None:
                artifacts = load_artifact_manifest(args.artifacts.resolve())

            results = extract_schemas(config, artifacts=artifacts)

            if not args.quiet:
                print("[OK] Extraction complete")
                print(f"  Schemas: {len(results)}")
                for result in results:
                    print(f"  {result.output_path}")
        except Wsdl2XsdError as e:
            print(f"Error: {e}", file=sys.stderr)
            sys.exit(1)
        except Exception as e:
            print(f"Unexpected error: {e}", file=sys.stderr)
            import traceback
            traceback.print_exc()
            sys.exit(1)
    else:
        parser.print_help()
        sys.exit(1)


if __name__ == "__main__":
    main()
