"""Write word lists as python modules."""

import os
import tempfile
from collections.abc import Mapping, Sequence
from pathlib import Path

BANNER = "# Code generated by 'codewords build'. DO NOT EDIT."
ATTRIBUTION = "# Derived from Princeton WordNet https://wordnet.princeton.edu"


def render_word_list(variable: str, words: Sequence[str]) -> str:
    """Render a module holding `words` as a tuple named `variable`."""
    lines = [BANNER, ATTRIBUTION, "", f"{variable} = ("]
    lines.extend(f'    "{word}",' for word in words)
    lines.append(")")
    return "\n".join(lines) + "\n"


def _write_temp(path: Path, text: str) -> Path:
    """Write `text` to a temporary file next to `path`."""
    fd, name = tempfile.mkstemp(
        dir=path.parent, prefix=f".{path.name}.", suffix=".tmp"
    )
    try:
        with os.fdopen(fd, "w", encoding="utf-8", newline="\n") as fp:
            fp.write(text)
    except BaseException:
        os.unlink(name)
        raise
    return Path(name)


def write_modules(modules: Mapping[Path, str]) -> list[Path]:
    """Write several modules so that either all of them change or none do.

    Every module is written to a temporary file first. The targets are only
    replaced once all temporary files are complete and every target is known
    to be replaceable.
    """
    temps: dict[Path, Path] = {}
    try:
        for path, text in modules.items():
            temps[path] = _write_temp(path, text)
        for path in temps:
            if path.exists() and not path.is_file():
                raise IsADirectoryError(f"Cannot replace {path}: not a file")
        for path, temp in list(temps.items()):
            os.replace(temp, path)
            del temps[path]
    finally:
        for temp in temps.values():
            temp.unlink(missing_ok=True)
    return list(modules)


def write_word_lists(
    output_dir: str | Path, lists: Mapping[str, tuple[str, Sequence[str]]]
) -> dict[str, Path]:
    """Write `{filename: (variable, words)}` into `output_dir` all at once."""
    output_dir = Path(output_dir)
    modules = {
        output_dir / filename: render_word_list(variable, words)
        for filename, (variable, words) in lists.items()
    }
    write_modules(modules)
    return {filename: output_dir / filename for filename in lists}


def write_word_list(path: str | Path, variable: str, words: Sequence[str]) -> Path:
    """Write the rendered module to `path`."""
    path = Path(path)
    write_modules({path: render_word_list(variable, words)})
    return path
