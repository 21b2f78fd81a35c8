"""A thread-safe, process-wide logger and a demonstration of using it from threads."""

from __future__ import annotations

import argparse
import random
import sys
import threading
from typing import Optional, Sequence

_TARGETS = [
    (class_name, function_name)
    for class_name in ("ClassA", "ClassB", "ClassC")
    for function_name in ("func1", "func2", "func3")
]

_CREATION_KEY = object()


class Logger:
    """The single logger of the process; obtain it with ``Logger.instance()``."""

    _instance: Optional[Logger] = None
    _lock = threading.Lock()

    def __new__(cls, key: object = None) -> Logger:
        if key is not _CREATION_KEY:
            raise TypeError("use Logger.instance() to obtain the logger")
        return super().__new__(cls)

    def __copy__(self) -> Logger:
        # Copying never yields a second logger: the shared one is returned.
        return type(self).instance()

    def __deepcopy__(self, memo: dict) -> Logger:
        shared = type(self).instance()
        memo[id(self)] = shared
        return shared

    @classmethod
    def instance(cls) -> Logger:
        """The shared logger, created on first use."""
        with cls._lock:
            if cls._instance is None:
                cls._instance = cls(_CREATION_KEY)
            return cls._instance

    def log(self, message: str) -> None:
        """Write ``Log: <message>`` to standard output as one line."""
        with self._lock:
            sys.stdout.write(f"Log: {message}\n")
            sys.stdout.flush()


def log_from(class_name: str, function_name: str) -> None:
    """Log a call made from ``class_name::function_name``."""
    Logger.instance().log(f"{class_name}::{function_name}")


def _log_random_call(rng: random.Random) -> None:
    choice = rng.randrange(len(_TARGETS))
    sys.stdout.write(f"{choice}\n")
    log_from(*_TARGETS[choice])


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Start several threads, each logging one randomly chosen call."""
    parser = argparse.ArgumentParser(description="Log from several threads at once.")
    parser.add_argument("--threads", type=int, default=5, help="number of threads")
    args = parser.parse_args(argv)
    threads = [
        threading.Thread(target=_log_random_call, args=(random.Random(),))
        for _ in range(args.threads)
    ]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()
    return 0


if __name__ == "__main__":
    sys.exit(main())