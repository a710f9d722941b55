"""
Example console logging using the support log formatter.

Run it and compare the two warnings: the forged line inside the user
supplied name is marked with ``[LF]> `` instead of appearing as a real
log entry, and the exception is printed with its cause first.
"""

from support_log_formatter import setup_logger

logger = setup_logger("examples.main", level="DEBUG")


class Repository:
    def load(self, key: str) -> dict:
        try:
            return {}[key]
        except KeyError as e:
            raise LookupError(f"no record for {key!r}") from e


def main() -> None:
    user_name = "alice\n2024-01-01 00:00:00.000+0000 [id=1]\tINFO\tadmin logged in"
    logger.info("login attempt for %s", user_name)

    try:
        Repository().load("missing")
    except LookupError:
        logger.warning("lookup failed", exc_info=True, extra={"source_class": "examples.main.Repository"})


if __name__ == "__main__":
    main()
