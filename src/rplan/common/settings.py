import logging as lg


class PlannerSettings:
    verbose: bool
    indent: int | None

    def __init__(self):
        self.verbose = False
        self.indent = 2

    def update(
        self,
        verbose: bool | None = None,
        indent: int | None = None
    ):
        if verbose is not None:
            self.verbose = verbose

        if indent is not None:
            self.indent = indent if indent > 0 else None

        return self

    def log_level(self) -> int:
        return lg.DEBUG if self.verbose else lg.INFO
