import time

from app.config.settings import Settings
from app.logging.logger import Log
from app.upload.blob_loader import BlobLoader
from app.worker.invocation_runner import InvocationRunner


class Worker:
    """Poll loop: scan container -> dispatch each new or overwritten blob once -> sleep."""

    def __init__(
        self,
        blob_loader: BlobLoader,
        invocation_runner: InvocationRunner,
        settings: Settings,
    ) -> None:
        self._blob_loader = blob_loader
        self._invocation_runner = invocation_runner
        self._settings = settings
        # blob name -> modification time it was dispatched at
        self._seen: dict[str, int] = {}

    def run(self, max_files: int | None = None) -> None:
        """Main poll loop. Runs forever until interrupted.

        If max_files is set, stop after that many invocations (for testing).
        """
        Log.info(f"Worker started, watching {self._blob_loader.container_dir}")
        files_done = 0
        try:
            while True:
                if max_files is not None and files_done >= max_files:
                    break
                blob = self._next_changed_blob()
                if blob:
                    name, modified_ns = blob
                    self._seen[name] = modified_ns
                    self._invocation_runner.run(name)
                    files_done += 1
                else:
                    Log.debug("No new blobs, sleeping")
                    time.sleep(self._settings.upload_poll_interval_seconds)
        except KeyboardInterrupt:
            Log.info("Worker shutting down gracefully")

    def _next_changed_blob(self) -> tuple[str, int] | None:
        """Return the first blob that is new or modified since dispatch.

        Names gone from the listing are forgotten. Listing errors are retried next poll.
        """
        try:
            blobs = self._blob_loader.list_blobs()
        except OSError as exc:
            Log.warning(f"Cannot list container, will retry: {exc}")
            return None
        for name in set(self._seen) - set(blobs):
            del self._seen[name]
        for name, modified_ns in blobs.items():
            if self._seen.get(name) != modified_ns:
                return name, modified_ns
        return None
