from __future__ import annotations

from collections.abc import Sequence

from option_model.app import run


def main(argv: Sequence[str] | None = None) -> int:
    # Console entrypoint delegating to the CLI runner.
    return run(list(argv) if argv is not None else None)


if __name__ == "__main__":
    raise SystemExit(main())
