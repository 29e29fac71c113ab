"""
Command-line interface for the torrent maker.
"""

import argparse
import logging
import sys

from cleanup import clean
from create_torrent import CreateTorrentErrorPage, CreateTorrentForm, CreateTorrentInfo, render_create_torrent
from file_selection import FileSelectionError, collect_files
from torrent_request import TorrentCreationRequest


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Prepare new torrents from local files")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable verbose logging")
    subparsers = parser.add_subparsers(dest="command", required=True)

    create = subparsers.add_parser("create", help="Resolve files into a torrent creation request")
    create.add_argument("paths", nargs="+", help="Files or a folder to include")
    create.add_argument(
        "-t",
        "--tracker",
        action="append",
        dest="trackers",
        help="Tracker URL (repeatable, default: built-in tracker list)",
    )
    create.add_argument("-c", "--comment", default="", help="Torrent comment")
    create.add_argument("-p", "--private", action="store_true", help="Mark the torrent as private")

    subparsers.add_parser("clean", help="Remove config and temp files and uninstall handlers")
    return parser


def run_create(args: argparse.Namespace) -> int:
    try:
        file_set = collect_files(args.paths)
    except FileSelectionError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    page = render_create_torrent(CreateTorrentInfo(files=file_set.files, folder_path=file_set.folder_path))
    if isinstance(page, CreateTorrentErrorPage):
        for message in page.messages:
            print(message, file=sys.stderr)
        return 1

    form = CreateTorrentForm(comment=args.comment, private=args.private)
    if args.trackers:
        form.trackers = "\n".join(args.trackers)

    print(page.title)
    print(page.torrent_info)
    print(f"Path: {page.path}")
    for entry in page.file_listing:
        print(f"  {entry}")

    requests: list[TorrentCreationRequest] = []
    page.submit(form, lambda action, *payload: requests.extend(payload))
    print(requests[0].model_dump_json(indent=2))
    return 0


def run_clean(args: argparse.Namespace) -> int:
    report = clean()
    for step in report.steps:
        status = "failed" if step.error else ("removed" if step.removed else "skipped")
        target = f" ({step.target})" if step.target else ""
        print(f"{step.name}{target}: {status}")
    # Best effort: failures are reported but don't change the exit status
    return 0


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(message)s",
    )

    if args.command == "create":
        return run_create(args)
    return run_clean(args)


if __name__ == "__main__":
    sys.exit(main())
