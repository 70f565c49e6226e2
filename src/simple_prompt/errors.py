"""Exceptions raised by simple_prompt.

Bad input from the person at the terminal is never an exception: it is
handled by re-asking the question.  Exceptions are reserved for mistakes in
the question definitions themselves.
"""


class QuestionConfigError(ValueError):
    """A question's validator or filter raised instead of returning.

    The original exception is chained as ``__cause__``.
    """

    def __init__(self, key: str, stage: str, message: str) -> None:
        self.key = key
        self.stage = stage
        super().__init__(f"{stage} for question {key!r} raised: {message}")
