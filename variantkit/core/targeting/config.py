import os
from dataclasses import dataclass
from typing import Any

_TRUTHY = ("1", "true", "yes")


@dataclass(frozen=True)
class TargetingRunConfig:
    # strict_gaps: reject partition inputs whose sdk ranges leave a hole
    strict_gaps: bool = False
    # match_workers: > 1 evaluates matcher rows on a thread pool
    match_workers: int = 1

    def __post_init__(self):
        if not isinstance(self.match_workers, int) or self.match_workers < 1:
            object.__setattr__(self, "match_workers", 1)

    @classmethod
    def from_payload(cls, payload: Any) -> "TargetingRunConfig":
        """
        Accepts:
          - None
          - {"strict_gaps": true, "match_workers": 4}
        Wrongly typed fields fall back to defaults.
        """
        if not isinstance(payload, dict):
            return cls()

        strict = payload.get("strict_gaps", False)
        workers = payload.get("match_workers", 1)

        # bool is an int subclass; never treat True as a worker count
        if isinstance(workers, bool) or not isinstance(workers, int):
            workers = 1

        return cls(
            strict_gaps=strict if isinstance(strict, bool) else False,
            match_workers=workers,
        )

    @classmethod
    def from_env(cls) -> "TargetingRunConfig":
        strict = (os.getenv("VARIANTKIT_STRICT_GAPS") or "0").strip().lower() in _TRUTHY
        try:
            workers = int((os.getenv("VARIANTKIT_MATCH_WORKERS") or "1").strip())
        except ValueError:
            workers = 1
        return cls(strict_gaps=strict, match_workers=workers)


def resolve_config(config: "TargetingRunConfig | None") -> TargetingRunConfig:
    return config if config is not None else TargetingRunConfig()
