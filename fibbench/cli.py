import sys
import logging
from logging import StreamHandler, Formatter

from fibbench import config
from fibbench.cpu_task import busy_cpu_task

logger = logging.getLogger(__name__)


def setup_logging() -> None:
    """Send package logs to stderr; stdout carries only the two result lines."""
    pkg_logger = logging.getLogger("fibbench")
    if not pkg_logger.handlers:
        handler = StreamHandler(sys.stderr)
        handler.setFormatter(Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s"))
        pkg_logger.addHandler(handler)
    pkg_logger.setLevel(config.log_level())


def main() -> int:
    config.load_env()
    setup_logging()

    res = busy_cpu_task()
    print(res["result"])
    print(res["elapsed_s"])
    logger.info("fib(%d) = %d in %d s", res["n"], res["result"], res["elapsed_s"])
    return 0


if __name__ == "__main__":
    sys.exit(main())
