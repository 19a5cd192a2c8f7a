from __future__ import annotations

import logging
import sys
from contextlib import redirect_stdout
from typing import Literal, TextIO

from oats import LispValue
from oats.builtin.registry import PrimitiveRegistry
from oats.config import get_prelude_path
from oats.errors import OatsError
from oats.evaluation.apply import apply
from oats.evaluation.evaluator import evaluate
from oats.printer import to_external
from oats.reader.parser import read_all
from oats.types.environment import Environment
from oats.types.symbol import Symbol
from oats.types.void import Void, VoidType


class Interpreter:
    """
    Orchestrates reading and evaluating oats code.
    Maintains one Environment across calls, so definitions persist.
    """

    def __init__(
        self,
        registry: PrimitiveRegistry | None = None,
        prelude: str | None | Literal['auto'] = 'auto',
    ):
        self._logger = logging.getLogger("Interpreter")
        self.env: Environment = Environment(registry)

        if prelude is None:
            pass  # explicit: no prelude
        elif prelude == 'auto':
            path = get_prelude_path()
            if path.is_file():
                self._logger.debug("loading prelude from %s", path)
                self.eval_prelude(path.read_text(encoding="utf-8"))
        elif prelude:
            self.eval_prelude(prelude)

    def eval_prelude(self, code: str) -> None:
        for expr in read_all(code):
            evaluate(expr, self.env)

    def eval(self, code: str) -> LispValue:
        """Evaluate every form in `code` and return the last result.

        Errors propagate; forms before the failing one keep their effects.
        """
        result: LispValue = Void
        for expr in read_all(code):
            self._logger.debug("evaluating %s", to_external(expr))
            result = evaluate(expr, self.env)
        return result

    def call(self, name: str, *args: LispValue) -> LispValue:
        """Call the procedure bound to `name` with already-evaluated arguments."""
        return apply(self.env.lookup(Symbol(name)), list(args), self.env)

    def run(self, code: str, out: TextIO | None = None) -> bool:
        """Evaluate `code` form by form, printing like the command line does.

        Non-void results are printed in external form, errors as
        `error: <message>`. An error does not stop later forms. If `code` does
        not read, nothing is evaluated. Output from `display` goes to `out` too.
        Returns True when every form succeeded.
        """
        out = out if out is not None else sys.stdout
        try:
            forms = read_all(code)
        except OatsError as ex:
            self._logger.debug("read failed: %s", ex)
            print(f"error: {ex}", file=out)
            return False

        ok = True
        with redirect_stdout(out):
            for expr in forms:
                try:
                    result = evaluate(expr, self.env)
                    if not isinstance(result, VoidType):
                        print(to_external(result))
                except (OatsError, RecursionError) as ex:
                    self._logger.debug("evaluation of %s failed: %s", to_external(expr), ex)
                    print(f"error: {ex}")
                    ok = False
        return ok
