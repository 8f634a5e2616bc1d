"""Persist rendered artifacts into an explicit output directory."""

from __future__ import annotations

import os
import tempfile
from pathlib import Path

from rich.console import Console
from rich.markup import escape

from .config import GeneratorConfig
from .errors import ArtifactWriteError


class ArtifactEmitter:
    """Writes one file per schema and reports each write.

    A schema name emitted twice in one run overwrites the earlier file;
    the overwrite is reported as a warning.
    """

    def __init__(
        self,
        out_dir: str | Path,
        config: GeneratorConfig | None = None,
        console: Console | None = None,
    ) -> None:
        self.out_dir = Path(out_dir)
        self.config = config or GeneratorConfig()
        self.console = console or Console()
        self.emitted: list[Path] = []
        self._seen: set[str] = set()

    def __call__(self, text: str, schema_name: str) -> Path:
        return self.emit(text, schema_name)

    def target(self, schema_name: str) -> Path:
        """File for ``schema_name``; it must sit directly inside ``out_dir``."""
        path = self.out_dir / self.config.artifact_name(schema_name)
        try:
            inside = path.resolve().parent == self.out_dir.resolve()
        except (OSError, UnicodeError) as exc:
            raise ArtifactWriteError(f"Cannot resolve {path}: {exc}") from exc
        if not inside:
            msg = f"Artifact for schema '{schema_name}' would be written outside {self.out_dir}"
            raise ArtifactWriteError(msg)
        return path

    def emit(self, text: str, schema_name: str) -> Path:
        path = self.target(schema_name)
        if schema_name in self._seen:
            self.console.print(
                f"[yellow]warning:[/] schema '{escape(schema_name)}' generated again; "
                f"overwriting {escape(str(path))}"
            )
        try:
            self._write(path, text)
        except (OSError, UnicodeError) as exc:
            raise ArtifactWriteError(f"Cannot write {path}: {exc}") from exc
        self._seen.add(schema_name)
        self.emitted.append(path)
        self.console.print(f"file {escape(str(path))} written successfully")
        return path

    def _write(self, path: Path, text: str) -> None:
        self.out_dir.mkdir(parents=True, exist_ok=True)
        fd, name = tempfile.mkstemp(dir=self.out_dir, prefix=f"{path.stem}.", suffix=".tmp")
        tmp_path = Path(name)
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as tmp:
                tmp.write(text)
            tmp_path.chmod(0o644)
            os.replace(tmp_path, path)
        finally:
            tmp_path.unlink(missing_ok=True)
