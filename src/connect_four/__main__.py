from __future__ import annotations

from connect_four.main import main

if __name__ == "__main__":
    raise SystemExit(main())
