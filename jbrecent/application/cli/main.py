"""
CLI entry point. Usage: jbrecent list | jbrecent search <query> | jbrecent show <name> <application>
Scans the JetBrains options folder and Toolbox installs on every call; prints one project per line
(name, application, project path, IDE bundle) or JSON with --json.
"""
import argparse
import json
import logging
import sys

from jbrecent.config import load_config
from jbrecent.core.discovery import discover_from_config
from jbrecent.core.exceptions import JBRecentError
from jbrecent.core.logger import setup_logging

logger = logging.getLogger(__name__)


def _format_line(project) -> str:
    name = f"{project.name} (Opened)" if project.opened else project.name
    return "\t".join((name, project.application, project.path, project.app_path))


def _emit(projects, as_json: bool) -> None:
    if as_json:
        print(json.dumps([p.to_dict() for p in projects], indent=2))
        return
    for project in projects:
        print(_format_line(project))


def _add_common_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--json", action="store_true", help="Print JSON instead of tab-separated lines")
    parser.add_argument("--config", "-c", type=str, default=None, help="Path to YAML config (default: jbrecent/config/default.yaml + JBRECENT_CONFIG)")
    parser.add_argument("--projects-root", type=str, default=None, help="JetBrains options folder (default: ~/Library/Application Support/JetBrains)")
    parser.add_argument("--toolbox-root", type=str, default=None, help="Toolbox installation folder (default: Toolbox folder under projects root)")
    parser.add_argument("--merge-applications", action="store_true", default=None, help="Keep one entry per project name across IDEs")
    parser.add_argument("--log-level", type=str, default=None, choices=["DEBUG", "INFO", "WARNING", "ERROR"], help="Log level (default: WARNING or JBRECENT_LOG_LEVEL)")
    parser.add_argument("--log-dir", type=str, default=None, help="Directory for jbrecent.log (default: JBRECENT_LOG_DIR or console only)")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="jbrecent", description="Recent JetBrains IDE projects, newest first")
    subparsers = parser.add_subparsers(dest="command", required=True)
    list_parser = subparsers.add_parser("list", help="List all recent projects")
    _add_common_arguments(list_parser)
    search_parser = subparsers.add_parser("search", help="List projects whose name contains QUERY (case-insensitive)")
    search_parser.add_argument("query", type=str, help="Substring of the project name")
    _add_common_arguments(search_parser)
    show_parser = subparsers.add_parser("show", help="Show one project by name and application")
    show_parser.add_argument("name", type=str, help="Project name")
    show_parser.add_argument("application", type=str, help="Owning application, e.g. IntelliJIdea")
    _add_common_arguments(show_parser)
    return parser


def main(argv=None) -> None:
    args = build_parser().parse_args(argv)

    level = getattr(logging, args.log_level) if args.log_level else None
    setup_logging(level=level, log_dir=args.log_dir)

    try:
        config = dict(load_config(override_path=args.config))
        if args.projects_root:
            config["projects_root"] = args.projects_root
        if args.toolbox_root:
            config["toolbox_root"] = args.toolbox_root
        if args.merge_applications is not None:
            config["merge_applications"] = args.merge_applications

        registry = discover_from_config(config)

        if args.command == "list":
            _emit(registry.list_projects(), args.json)
        elif args.command == "search":
            _emit(registry.filter_projects(args.query), args.json)
        elif args.command == "show":
            _emit([registry.lookup(args.name, args.application)], args.json)
    except JBRecentError as e:
        logger.error("%s", e)
        sys.exit(1)


if __name__ == "__main__":
    main()
