"""WSGI entry point for the SuperCycle photoperiod service.

Configuration comes from the environment (see ``supercycle.config``).
"""

from __future__ import annotations

import logging
import sys

from supercycle import create_app
from supercycle.config import load_config

if sys.platform == "win32":
    sys.stdout.reconfigure(encoding="utf-8")

app = create_app()


def main() -> int:
    config = load_config()
    logging.info("Starting server on %s:%s", config.host, config.port)

    try:
        app.run(host=config.host, port=config.port, debug=config.DEBUG, use_reloader=False)
    except KeyboardInterrupt:
        logging.info("Server stopped by user")
    except Exception:
        logging.exception("Server error")
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
