#!/usr/bin/env python3
"""
Core Utilities

Features:
- Dataclass reconstruction from plain dicts (YAML configuration)
- File I/O helpers, including an atomic text writer
- Path and string utilities
"""

from __future__ import annotations

import os
import tempfile
import types
from dataclasses import fields, is_dataclass
from pathlib import Path
from typing import (
    IO,
    Any,
    Literal,
    Mapping,
    Optional,
    TypeGuard,
    TypeVar,
    Union,
    cast,
    get_args,
    get_origin,
    get_type_hints,
    overload,
)

from txf_converter.utilities.converters_scalar import SCALAR_CONVERTERS

# region Common functions

DEFAULT_CONFIG_PATH = "~/.config/csv-to-txf/mappings.yaml"
TXF_SUFFIX = ".txf"


def is_null_or_whitespace(s: Optional[str]) -> bool:
    """Check if a string is None, empty, or consists only of whitespace."""
    return s is None or s.strip() == ""


def resolve_path(path: str | Path) -> Path:
    """Expand a leading ``~`` and return an absolute path."""
    return Path(path).expanduser().resolve()


def default_config_path() -> Path:
    return resolve_path(DEFAULT_CONFIG_PATH)


def default_output_path(csv_path: Path) -> Path:
    """``statement.csv`` → ``statement.txf`` beside the input."""
    return csv_path.with_suffix(TXF_SUFFIX)


@overload
def open_for_read(path: Path, binary: Literal[True], **kwargs: Any) -> IO[bytes]: ...
@overload
def open_for_read(path: Path, binary: Literal[False], **kwargs: Any) -> IO[str]: ...


def open_for_read(path: Path, binary: bool = False, **kwargs: Any) -> IO[Any]:
    mode = "rb" if binary else "r"
    return open(path, mode, **kwargs)


def open_for_write(
    path: Path,
    *,
    ensure_parent: bool = True,
    newline: str | None = "",
    encoding: str | None = "utf-8",
) -> IO[str]:
    if ensure_parent:
        path.parent.mkdir(parents=True, exist_ok=True)
    return open(path, "w", newline=newline, encoding=encoding)


def write_text_atomic(path: Path, text: str, encoding: str = "utf-8") -> None:
    """
    Write ``text`` to ``path`` in a single replace step.

    The content goes to a temporary file in the destination directory which is
    then moved over ``path`` with ``os.replace``. Line endings are written
    verbatim (no newline translation). On failure the temporary file is
    removed and the original ``OSError`` propagates.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    fd, tmp_name = tempfile.mkstemp(
        prefix=f".{path.name}.", suffix=".tmp", dir=str(path.parent)
    )
    try:
        with os.fdopen(fd, "w", encoding=encoding, newline="") as fp:
            fp.write(text)
        os.replace(tmp_name, path)
    except BaseException:
        Path(tmp_name).unlink(missing_ok=True)
        raise


# endregion Common functions

# region Value conversion

_UNION_TYPES = (Union, types.UnionType)

DC = TypeVar("DC")


def __unwrap_union(target_type: object, value: Any) -> Any:
    args = get_args(target_type)
    if value is None and type(None) in args:
        return None
    for arg in args:
        if arg is type(None):
            continue
        try:
            return convert_value(arg, value)
        except (TypeError, ValueError):
            pass
    raise ValueError(f"Cannot convert {value!r} to {target_type!r}")


def convert_value(target_type: object, value: object) -> Any:
    """Convert ``value`` to ``target_type`` (scalars, Optional/Union, dataclasses)."""
    origin = get_origin(target_type)

    if origin in _UNION_TYPES:
        return __unwrap_union(target_type, value)

    if isinstance(target_type, type):
        if is_dataclass(target_type):
            if isinstance(value, target_type):
                return value
            return from_dict(target_type, value)
        if target_type in SCALAR_CONVERTERS:
            return SCALAR_CONVERTERS[target_type](value)

    raise ValueError(
        f"Don’t know how to convert {type(value).__name__} -> {target_type!r}"
    )


# endregion Value conversion

# region from_dict


def _is_mapping_of_str_any(m: object) -> TypeGuard[Mapping[str, Any]]:
    if not isinstance(m, Mapping):
        return False
    nm: Mapping[object, Any] = cast(Mapping[object, Any], m)
    return all(isinstance(k, str) for k in nm.keys())


@overload
def from_dict(target_type: type[DC], src: Mapping[str, Any], /) -> DC: ...
@overload
def from_dict(target_type: object, src: Any, /) -> Any: ...


def from_dict(target_type: object, src: Any, /) -> Any:
    """
    Reconstruct dataclass ``target_type`` from a plain dict.

    Keys that are not fields are ignored; missing keys fall back to the
    dataclass defaults. Non-dataclass targets are delegated to
    ``convert_value``.
    """
    if not isinstance(target_type, type) or not is_dataclass(target_type):
        return convert_value(target_type, src)

    class_type: type[Any] = target_type

    if not _is_mapping_of_str_any(src):
        raise TypeError(
            f"from_dict expects a string-keyed mapping for {class_type.__name__}, "
            f"got {type(src).__name__}"
        )

    type_hints = get_type_hints(class_type)
    kwargs: dict[str, Any] = {}
    for f in fields(class_type):
        if not f.init or f.name not in src:
            # let dataclass defaults apply
            continue
        ftype = type_hints.get(f.name, f.type)
        kwargs[f.name] = convert_value(ftype, src[f.name])
    return class_type(**kwargs)


# endregion from_dict
