"""Interactive read-eval-print loop for Carlae. Uses cmd as backend."""

from __future__ import annotations

import cmd
import logging
import sys

from carlae.config import EXIT_COMMANDS, get_prompt, get_recursion_limit
from carlae.errors import CarlaeError
from carlae.interpreter import Interpreter
from carlae.log import configure_logging
from carlae.reader.parser import tokenize

logger = logging.getLogger(__name__)


class CarlaeShell(cmd.Cmd):
    """Carlae interpreter shell."""
    intro = "Carlae interpreter. Type 'exit' or Ctrl-D to leave."

    def __init__(self, interpreter: Interpreter | None = None, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.prompt = get_prompt()
        self.interpreter = interpreter if interpreter is not None else Interpreter()

    def onecmd(self, line):
        # Every line is Carlae source; bypass cmd's do_<word> dispatch
        line = line.strip()
        if line in EXIT_COMMANDS or line == "EOF":
            if line == "EOF":
                self.stdout.write("\n")
            return True
        if not tokenize(line):
            return False  # blank or comment-only line
        self.default(line)
        return False

    def default(self, line):
        """Evaluates one line and prints its result or error."""
        try:
            result = self.interpreter.eval_to_string(line)
        except CarlaeError as e:
            logger.debug("error evaluating %r", line, exc_info=True)
            self.stdout.write(f"{type(e).__name__}: {e}\n")
        except RecursionError:
            self.stdout.write("CarlaeEvaluationError: maximum recursion depth exceeded\n")
        else:
            self.stdout.write(result + "\n")



def main(argv: list[str] | None = None) -> int:
    """Runs the Carlae REPL. Called from the carlae console script."""
    configure_logging()
    limit = get_recursion_limit()
    if limit is not None:
        sys.setrecursionlimit(limit)
        logger.info("recursion limit set to %d", limit)
    try:
        CarlaeShell().cmdloop()
    except KeyboardInterrupt:
        print()
    return 0
