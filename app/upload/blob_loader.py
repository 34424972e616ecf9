from pathlib import Path

from app.upload.exceptions import UnreadableBlobError


class BlobLoader:
    """Lists and reads blobs stored as plain files in a container directory."""

    def __init__(self, container_dir: Path) -> None:
        self._container_dir = container_dir

    @property
    def container_dir(self) -> Path:
        return self._container_dir

    def list_blobs(self) -> dict[str, int]:
        """Map each blob name to its modification time in nanoseconds.

        Names are relative to the container with posix separators, in sorted order.
        An overwritten blob keeps its name but gets a new modification time.
        """
        if not self._container_dir.is_dir():
            return {}
        paths = sorted(p for p in self._container_dir.rglob("*") if p.is_file())
        return {
            path.relative_to(self._container_dir).as_posix(): path.stat().st_mtime_ns
            for path in paths
        }

    def load(self, name: str) -> bytes:
        """Read blob bytes.

        Raises:
            UnreadableBlobError: if the blob is missing or cannot be read.
        """
        path = self._container_dir / name
        try:
            return path.read_bytes()
        except OSError as exc:
            raise UnreadableBlobError(f"Cannot read blob {name}: {exc}") from exc
