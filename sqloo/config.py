"""Backend options: an explicit embedded/remote union plus env loading."""

from __future__ import annotations

import os
from dataclasses import dataclass, fields
from typing import Any, ClassVar, Mapping, Optional, Union

DEFAULT_SQLITE_FILE = ":memory:"
DEFAULT_POSTGRES_PORT = 5432

ENV_PREFIX = "SQLOO_"


@dataclass(frozen=True)
class EmbeddedOptions:
    """Options for the embedded SQLite engine.

    Attributes:
        file: Database path, `:memory:` for a private in-memory database.
        journal_mode: Value for `PRAGMA journal_mode`, or `None` to leave it.
    """

    type: ClassVar[str] = "sqlite"

    file: str = DEFAULT_SQLITE_FILE
    journal_mode: Optional[str] = "WAL"


@dataclass(frozen=True)
class RemoteOptions:
    """Options for the remote PostgreSQL engine reached through a pool."""

    type: ClassVar[str] = "postgres"

    host: str = "localhost"
    port: int = DEFAULT_POSTGRES_PORT
    database: Optional[str] = None
    user: Optional[str] = None
    password: Optional[str] = None
    min_size: int = 1
    max_size: int = 10

    def __post_init__(self) -> None:
        if self.min_size < 0:
            raise ValueError("min_size must be >= 0.")
        if self.max_size < 1 or self.max_size < self.min_size:
            raise ValueError("max_size must be >= 1 and >= min_size.")


DatabaseOptions = Union[EmbeddedOptions, RemoteOptions]

_BACKEND_TYPES = {"sqlite": EmbeddedOptions, "postgres": RemoteOptions}
_NULLABLE_OPTIONS = {"journal_mode"}


def resolve_options(
    options: DatabaseOptions | Mapping[str, Any] | None = None,
    **overrides: Any,
) -> DatabaseOptions:
    """Resolve loosely-typed options into `EmbeddedOptions` or `RemoteOptions`.

    An explicit `type` wins. Without one, a `host` selects postgres and
    anything else selects the embedded engine. `username` is accepted as an
    alias for `user` and string ports are coerced to `int`.

    Args:
        options: Options object, mapping, or `None`.
        **overrides: Extra keys merged over `options`.

    Returns:
        Concrete options object.
    """

    if isinstance(options, (EmbeddedOptions, RemoteOptions)) and not overrides:
        return options

    raw: dict[str, Any] = {}
    if isinstance(options, (EmbeddedOptions, RemoteOptions)):
        raw["type"] = options.type
        raw.update({f.name: getattr(options, f.name) for f in fields(options)})
    elif options is not None:
        raw.update(options)
    raw.update(overrides)

    if "username" in raw:
        username = raw.pop("username")
        raw.setdefault("user", username)

    backend = raw.pop("type", None) or ("postgres" if raw.get("host") else "sqlite")
    options_cls = _BACKEND_TYPES.get(str(backend).lower())
    if options_cls is None:
        raise ValueError(
            f"Unsupported database type: {backend!r}. Use 'sqlite' or 'postgres'."
        )

    values = {
        key: value
        for key, value in raw.items()
        if value is not None or key in _NULLABLE_OPTIONS
    }
    allowed = {f.name for f in fields(options_cls)}
    unknown = sorted(set(values) - allowed)
    if unknown:
        raise ValueError(f"Unsupported {options_cls.type} options: {unknown}")

    if "port" in values:
        values["port"] = int(values["port"])
    return options_cls(**values)


def options_from_env(environ: Mapping[str, str] | None = None) -> DatabaseOptions:
    """Build options from `SQLOO_*` environment variables.

    Reads `SQLOO_TYPE`, `SQLOO_FILE`, `SQLOO_HOST`, `SQLOO_PORT`,
    `SQLOO_DATABASE`, `SQLOO_USER`, and `SQLOO_PASSWORD`. Unset variables
    fall back to the option defaults.
    """

    env = os.environ if environ is None else environ
    raw: dict[str, Any] = {}
    for key in ("type", "file", "host", "port", "database", "user", "password"):
        value = env.get(f"{ENV_PREFIX}{key.upper()}")
        if value:
            raw[key] = value

    backend = raw.get("type") or ("postgres" if raw.get("host") else "sqlite")
    if str(backend).lower() == "sqlite":
        raw = {key: raw[key] for key in ("type", "file") if key in raw}
    else:
        raw.pop("file", None)
    return resolve_options(raw)
