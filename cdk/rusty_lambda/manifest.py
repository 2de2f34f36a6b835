"""
Locating and checking the Cargo manifest a RustFunction is built from.
"""
import os
import tomllib
from pathlib import Path

MANIFEST_NAME = "Cargo.toml"


def resolve_manifest_path(manifest_path: str | os.PathLike, base_dir: str | os.PathLike | None = None) -> Path:
    """
    Resolve ``manifest_path`` to an existing Cargo manifest.

    Relative paths are taken from ``base_dir`` (the caller's own directory
    when omitted by the stack). A directory is accepted when it holds a
    Cargo.toml. Raises FileNotFoundError if nothing is there and ValueError
    if the file does not describe a crate or workspace.
    """
    path = Path(manifest_path)
    if not path.is_absolute() and base_dir is not None:
        path = Path(base_dir) / path
    path = path.resolve()

    if path.is_dir():
        path = path / MANIFEST_NAME

    if not path.is_file():
        raise FileNotFoundError(f"Cargo manifest not found at {path}")

    try:
        with open(path, "rb") as f:
            manifest = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ValueError(f"{path} is not a buildable Cargo manifest: {e}") from e

    if "package" not in manifest and "workspace" not in manifest:
        raise ValueError(f"{path} is not a buildable Cargo manifest: no [package] or [workspace] table")

    return path
