"""PipelineSettings — configuration loaded from environment variables."""

from __future__ import annotations

import os
import random
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Literal

from fastapi_filter_pipeline.policy import (
    AccessPolicy,
    RandomAccessPolicy,
    StaticAccessPolicy,
)

ENV_PREFIX = "FILTER_PIPELINE_"

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off", ""}
_POLICIES = ("random", "allow", "deny")


@dataclass(frozen=True)
class PipelineSettings:
    debug: bool = False
    log_level: str = "INFO"
    policy: Literal["random", "allow", "deny"] = "random"
    seed: int | None = None
    host: str = "127.0.0.1"
    port: int = 8000

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> PipelineSettings:
        """Read ``FILTER_PIPELINE_*`` variables, falling back to defaults.

        Raises ``ValueError`` for values that cannot be parsed.
        """
        env = os.environ if environ is None else environ

        def get(name: str) -> str | None:
            return env.get(ENV_PREFIX + name)

        defaults = cls()

        debug = defaults.debug
        raw_debug = get("DEBUG")
        if raw_debug is not None:
            debug = _parse_bool("DEBUG", raw_debug)

        policy = (get("POLICY") or defaults.policy).strip().lower()
        if policy not in _POLICIES:
            raise ValueError(
                f"{ENV_PREFIX}POLICY must be one of {', '.join(_POLICIES)},"
                f" got {policy!r}"
            )

        raw_seed = get("SEED")
        seed = _parse_int("SEED", raw_seed) if raw_seed else defaults.seed

        raw_port = get("PORT")
        port = _parse_int("PORT", raw_port) if raw_port else defaults.port

        return cls(
            debug=debug,
            log_level=(get("LOG_LEVEL") or defaults.log_level).upper(),
            policy=policy,  # type: ignore[arg-type]
            seed=seed,
            host=get("HOST") or defaults.host,
            port=port,
        )

    def build_policy(self) -> AccessPolicy:
        if self.policy == "allow":
            return StaticAccessPolicy(True)
        if self.policy == "deny":
            return StaticAccessPolicy(False)
        rng = random.Random(self.seed) if self.seed is not None else None
        return RandomAccessPolicy(rng)


def _parse_bool(name: str, raw: str) -> bool:
    value = raw.strip().lower()
    if value in _TRUE:
        return True
    if value in _FALSE:
        return False
    raise ValueError(f"{ENV_PREFIX}{name} must be a boolean, got {raw!r}")


def _parse_int(name: str, raw: str) -> int:
    try:
        return int(raw)
    except ValueError:
        raise ValueError(
            f"{ENV_PREFIX}{name} must be an integer, got {raw!r}"
        ) from None
