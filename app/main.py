import argparse
from pathlib import Path

from app.config.settings import Settings
from app.logging.logger import Log
from app.logging.sinks import LoggerSink
from app.page.exceptions import MissingCapabilityError
from app.page.replay import replay_page_view
from app.upload.blob_loader import BlobLoader
from app.worker.invocation_runner import InvocationRunner
from app.worker.worker import Worker


def build_worker(settings: Settings, container_dir: Path | None = None) -> Worker:
    """Build an upload Worker watching the configured container directory."""
    blob_loader = BlobLoader(container_dir or Path(settings.upload_container_dir))
    invocation_runner = InvocationRunner(blob_loader, LoggerSink())
    return Worker(blob_loader, invocation_runner, settings)


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="blobnotify")
    commands = parser.add_subparsers(dest="command", required=True)

    watch = commands.add_parser("watch", help="invoke the upload function for new blobs")
    watch.add_argument("--container", type=Path, default=None)
    watch.add_argument("--max-files", type=int, default=None)

    page = commands.add_parser("page-timing", help="replay a navigation-timing record")
    page.add_argument("record", type=Path)

    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Entry point: load settings -> configure logging -> run the chosen host."""
    args = _parse_args(argv)
    settings = Settings()
    Log.configure(settings.log_level)

    if args.command == "watch":
        worker = build_worker(settings, args.container)
        worker.run(max_files=args.max_files)
        return 0

    try:
        replay_page_view(args.record, LoggerSink(), settings.page_ready_message)
    except MissingCapabilityError as exc:
        Log.error(f"Page timing replay failed: {exc}")
        return 1
    except (OSError, ValueError) as exc:
        Log.error(f"Cannot read timing record {args.record}: {exc}")
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
