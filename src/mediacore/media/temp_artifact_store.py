"""Temporary staging directory for attachment bytes."""

from __future__ import annotations

import logging
import secrets
import shutil
import time
from dataclasses import dataclass, field
from pathlib import Path

from ..exceptions import FilesystemError

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class TempArtifactStore:
    """Owns the staging directory and evicts entries by modification time.

    The store keeps no record of which files are in use: an artifact is
    protected only by being younger than the retention window.
    """

    root: Path
    log: logging.Logger = field(default_factory=lambda: logger)

    def ensure_directory(self) -> Path:
        try:
            self.root.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise FilesystemError(
                f"Cannot create temp directory {self.root}: {exc}"
            ) from exc
        return self.root

    def exists(self) -> bool:
        try:
            return self.root.is_dir()
        except OSError:
            return False

    def stage(self, data: bytes, filename: str | None = None) -> Path:
        """Write ``data`` under the root and return the new artifact path."""
        directory = self.ensure_directory()
        target = directory / self._derive_filename(filename)
        try:
            target.write_bytes(data)
        except OSError as exc:
            raise FilesystemError(f"Cannot stage artifact {target}: {exc}") from exc
        self.log.info(
            "media.temp.staged",
            extra={"path": str(target), "size_bytes": len(data)},
        )
        return target

    def cleanup_file(self, path: str | Path) -> bool:
        """Delete ``path`` if present. Returns ``True`` when a file was removed."""
        target = Path(path)
        try:
            target.unlink()
        except FileNotFoundError:
            return False
        except OSError as exc:
            self.log.error(
                "media.temp.cleanup.failed",
                extra={"path": str(target), "error": str(exc)},
            )
            return False
        self.log.info("media.temp.cleanup.removed", extra={"path": target.name})
        return True

    def stale_entries(self, max_age_seconds: float, now: float | None = None) -> list[Path]:
        """Return direct children of the root older than ``max_age_seconds``.

        Ages come from ``lstat`` so a symlink is judged by its own mtime and a
        dangling link is still selected. Entries that vanish while listing are
        skipped.
        """
        threshold = (time.time() if now is None else now) - max_age_seconds
        try:
            entries = list(self.root.iterdir())
        except FileNotFoundError:
            return []
        except OSError as exc:
            self.log.error(
                "media.sweep.list_failed",
                extra={"root": str(self.root), "error": str(exc)},
            )
            return []

        stale: list[Path] = []
        for entry in entries:
            try:
                modified = entry.lstat().st_mtime
            except FileNotFoundError:
                # Removed concurrently by a caller or an overlapping sweep.
                continue
            except OSError as exc:
                self.log.warning(
                    "media.sweep.skip",
                    extra={"path": str(entry), "error": str(exc)},
                )
                continue
            if modified < threshold:
                stale.append(entry)
        return stale

    def sweep(self, max_age_seconds: float, now: float | None = None) -> list[Path]:
        """Remove direct children of the root older than ``max_age_seconds``."""
        removed: list[Path] = []
        for entry in self.stale_entries(max_age_seconds, now):
            try:
                if entry.is_dir() and not entry.is_symlink():
                    shutil.rmtree(entry)
                else:
                    entry.unlink()
            except FileNotFoundError:
                continue
            except OSError as exc:
                self.log.warning(
                    "media.sweep.skip",
                    extra={"path": str(entry), "error": str(exc)},
                )
                continue
            removed.append(entry)
            self.log.info("media.sweep.removed", extra={"path": entry.name})
        return removed

    @staticmethod
    def _derive_filename(filename: str | None) -> str:
        suffix = Path(filename).suffix.lower() if filename else ""
        stamp = int(time.time() * 1000)
        return f"{stamp}_{secrets.token_hex(4)}{suffix}"


__all__ = ["TempArtifactStore"]
