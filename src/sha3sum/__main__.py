from __future__ import annotations

from sha3sum.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
