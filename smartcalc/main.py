"""
Command-line driver for the smartcalc calculator.

The driver reads one line at a time, hands it to a ``Session`` and prints what comes
back. Interactive input goes through prompt_toolkit (line editing and history);
piped stdin and ``--eval`` lines are processed in batch mode.
"""

import argparse
import logging
import sys
from typing import Callable, Iterable, List, Optional

from prompt_toolkit import PromptSession
from prompt_toolkit.history import FileHistory, History, InMemoryHistory
from pydantic import ValidationError

from .config import LOG_LEVELS, CalculatorSettings, load_settings
from .session import LineResult, Session

logger = logging.getLogger(__name__)

GOODBYE = "Bye!"


class REPL:
    """Read-Eval-Print Loop around a single calculator session."""

    def __init__(self, session: Session, settings: CalculatorSettings,
                 prompt_func: Optional[Callable[[str], str]] = None):
        self.session = session
        self.settings = settings
        self._prompt_func = prompt_func

    def _make_history(self) -> History:
        path = self.settings.history_file
        if not path:
            return InMemoryHistory()
        try:
            with open(path, "ab"):
                pass
        except OSError as e:
            logger.warning("History file %s is not writable (%s); history will not be saved", path, e)
            return InMemoryHistory()
        return FileHistory(path)

    def _default_prompt(self) -> Callable[[str], str]:
        return PromptSession(history=self._make_history()).prompt

    def _emit(self, result: LineResult) -> None:
        if result.message is not None:
            print(result.message)

    def handle(self, line: str) -> bool:
        """Process one line and print its outcome. Returns False once the session ends."""
        result = self.session.process(line)
        self._emit(result)
        if not result.running:
            print(GOODBYE)
        return result.running

    def run(self) -> None:
        """Interactive loop; ends on /exit or EOF, Ctrl-C only discards the line."""
        prompt = self._prompt_func or self._default_prompt()
        while True:
            try:
                line = prompt(self.settings.prompt)
            except KeyboardInterrupt:
                print("^C")
                continue
            except EOFError:
                print(GOODBYE)
                break
            if not self.handle(line):
                break

    def run_lines(self, lines: Iterable[str]) -> None:
        """Batch mode: process lines until they run out or /exit is seen."""
        for line in lines:
            if not self.handle(line.rstrip('\r\n')):
                break


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="smartcalc",
        description="Integer calculator with variables and arbitrary-precision arithmetic.",
    )
    parser.add_argument(
        "-e", "--eval",
        action="append",
        metavar="LINE",
        help="Process LINE instead of reading input (may be given several times).",
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        help="Logging level (default: SMARTCALC_LOG_LEVEL or WARNING).",
    )
    parser.add_argument(
        "--history-file",
        help="File for interactive history; an empty string disables it.",
    )
    parser.add_argument(
        "--max-exponent",
        type=int,
        help="Largest exponent accepted by '^' for bases other than 0, 1 and -1.",
    )
    parser.add_argument(
        "--max-result-bits",
        type=int,
        help="Largest result size, in bits, that '^' may produce.",
    )
    parser.add_argument(
        "--env-file",
        help="Read SMARTCALC_* settings from this .env file.",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Entry point for the calculator application."""
    args = build_arg_parser().parse_args(argv)
    try:
        settings = load_settings(
            env_file=args.env_file,
            log_level=args.log_level,
            history_file=args.history_file,
            max_exponent=args.max_exponent,
            max_result_bits=args.max_result_bits,
        )
    except ValidationError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 2

    logging.basicConfig(
        level=getattr(logging, settings.log_level),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    logger.debug("Starting with settings %s", settings.model_dump())

    session = Session(max_exponent=settings.max_exponent,
                      max_result_bits=settings.max_result_bits)
    repl = REPL(session, settings)
    if args.eval:
        repl.run_lines(args.eval)
    elif not sys.stdin.isatty():
        repl.run_lines(sys.stdin)
    else:
        repl.run()
    return 0


if __name__ == '__main__':
    sys.exit(main())
