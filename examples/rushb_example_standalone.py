"""Example of running a rushb suite outside any test harness."""

import sys

from rushb import RecordingReporter, RunAborted, Suite


def parse_version(text: str) -> tuple[int, ...]:
    return tuple(int(part) for part in text.split("."))


def main() -> int:
    reporter = RecordingReporter()
    suite = Suite(reporter)

    def parsing():
        suite.check("plain version", lambda s: s.assert_equal(parse_version("1.2.3"), (1, 2, 3)))
        suite.check("rejects garbage", lambda s: s.try_(lambda: parse_version("one")) is False)
        suite.skip("pre-release tags", lambda s: parse_version("1.0.0rc1"))

    def ordering():
        def newer(s):
            if parse_version("1.10") <= parse_version("1.9"):
                s.fail("1.10 should sort after 1.9")
            s.info("numeric ordering holds")

        suite.check("numeric compare", newer)

    def body():
        suite.critical("module imports", lambda s: parse_version is not None)
        suite.title("Parsing", parsing)
        suite.title("Ordering", ordering)

    try:
        suite.start("Version helpers", body)
    except RunAborted:
        return 2
    return 1 if reporter.failed else 0


if __name__ == "__main__":
    sys.exit(main())
