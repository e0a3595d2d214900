from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass

from sha3sum.digest.compute import BUF_SIZE
from sha3sum.digest.widths import AlgorithmWidth, TransferMode
from sha3sum.errors import ConfigError

ENV_DEFAULT_MODE = "SHA3SUM_DEFAULT_MODE"
ENV_CHUNK_SIZE = "SHA3SUM_CHUNK_SIZE"
ENV_JOBS = "SHA3SUM_JOBS"


@dataclass(frozen=True, slots=True)
class Sha3sumConfig:
    width: AlgorithmWidth = AlgorithmWidth.SHA3_256
    default_mode: TransferMode = TransferMode.BINARY
    chunk_size: int = BUF_SIZE
    jobs: int = 1


def resolve_width(bits: int) -> AlgorithmWidth:
    try:
        return AlgorithmWidth.from_bits(bits)
    except ValueError:
        raise ConfigError(f"bad algorithm: {bits} (expected 224, 256, 384 or 512)") from None


def resolve_transfer_mode(*, binary: bool, text: bool, portable: bool) -> TransferMode | None:
    """Map the mode flags to one override; None when no flag is given."""

    selected = [
        mode
        for mode, flag in (
            (TransferMode.BINARY, binary),
            (TransferMode.TEXT, text),
            (TransferMode.PORTABLE, portable),
        )
        if flag
    ]
    if len(selected) > 1:
        names = ", ".join(f"--{m.value}" for m in selected)
        raise ConfigError(f"conflicting transfer modes: {names}")
    return selected[0] if selected else None


def _env_positive_int(environ: Mapping[str, str], name: str, default: int) -> int:
    raw = environ.get(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        value = int(raw)
    except ValueError:
        raise ConfigError(f"{name} must be an integer, got {raw!r}") from None
    if value <= 0:
        raise ConfigError(f"{name} must be > 0 when set")
    return value


def load_config_from_env(environ: Mapping[str, str] | None = None) -> Sha3sumConfig:
    """Read process configuration once at startup.

    The core never looks at the environment; callers pass these values in.
    """

    env = os.environ if environ is None else environ

    raw_mode = env.get(ENV_DEFAULT_MODE)
    default_mode = TransferMode.BINARY
    if raw_mode is not None and raw_mode.strip() != "":
        try:
            default_mode = TransferMode.parse(raw_mode)
        except ValueError:
            raise ConfigError(
                f"{ENV_DEFAULT_MODE} must be one of binary, text, portable; got {raw_mode!r}"
            ) from None

    return Sha3sumConfig(
        default_mode=default_mode,
        chunk_size=_env_positive_int(env, ENV_CHUNK_SIZE, BUF_SIZE),
        jobs=_env_positive_int(env, ENV_JOBS, 1),
    )
