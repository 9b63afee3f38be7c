"""File output for rendered reports."""

from pathlib import Path

from rich.console import Console

type FilePath = str | Path

console = Console(stderr=True)


def write_output(text: str, path: FilePath) -> None:
    """Write a rendered report, creating parent directories as needed."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text if text.endswith("\n") else text + "\n", encoding="utf-8")
    console.print(f"  Wrote report to {path}")
