from app.logging.logger import Log
from app.logging.sinks import LogSink
from app.upload.blob_loader import BlobLoader
from app.upload.function import BlobInvocationContext, handle_blob
from app.upload.models import UploadSummary


class InvocationRunner:
    """Run one function invocation for a blob and contain its failure."""

    def __init__(self, blob_loader: BlobLoader, sink: LogSink) -> None:
        self._blob_loader = blob_loader
        self._sink = sink

    def run(self, name: str) -> UploadSummary | None:
        """Invoke the upload function for ``name``; failures are logged, not retried."""
        Log.debug(f"Invoking upload function for {name}")
        try:
            content = self._blob_loader.load(name)
            context = BlobInvocationContext(name=name, log=self._sink.write)
            return handle_blob(context, content)
        except Exception as exc:
            Log.error(f"Invocation for {name} failed: {exc}")
            return None
