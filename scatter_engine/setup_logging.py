import logging
import sys
from pathlib import Path


def setup_logging(log_dir: str | Path = "logs", level: int = logging.INFO):
    """
    Configures the root logger for scatter runs.
    - Message format with time, level and source line.
    - Console output (stdout).
    - Log file <log_dir>/scatter.log.
    """
    log_dir = Path(log_dir)
    log_dir.mkdir(parents=True, exist_ok=True)
    log_file = log_dir / "scatter.log"

    logging.basicConfig(
        level=level,
        format="%(asctime)s.%(msecs)03d [%(levelname)s] %(name)s:%(lineno)d | %(message)s",
        datefmt="%H:%M:%S",
        handlers=[
            logging.FileHandler(log_file, mode="w", encoding="utf-8"),
            logging.StreamHandler(sys.stdout),
        ],
        force=True,  # drop previously installed handlers, no duplicate lines
    )

    logging.getLogger("scatter_engine").setLevel(level)
    logging.getLogger("numba").setLevel(logging.WARNING)
