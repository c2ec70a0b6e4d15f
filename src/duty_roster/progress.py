class MinimalProgress:
    """
    A progress callback for the stochastic optimizer that logs accepted moves.
    """

    def __init__(self, max_iterations: int, log_every: int = 1_000):
        self.max_iterations = int(max_iterations) if max_iterations > 0 else None
        self.log_every = int(log_every)
        self.last_iteration = -1
        self.sols = 0
        self._cost_field_width = 0
        self.history: list[tuple[int, float]] = []

        self.has_performed_initial_print = False

    def on_solution(self, iteration: int, cost: float) -> None:
        """Called with the starting roster (iteration 0) and every accepted move."""
        if iteration == 0 and self.history:
            # a new run reuses this callback
            self.history = []
            self.sols = 0
            self.last_iteration = -1
        if not self.has_performed_initial_print:
            print(
                "\ncost: sum of squared spacing shortfalls of the current roster\n"
                "sols: number of rosters accepted so far\n"
            )
            self.has_performed_initial_print = True
        self.sols += 1
        self.history.append((iteration, cost))

        if (
            self.last_iteration < 0
            or (iteration - self.last_iteration) >= self.log_every
            or cost == 0
        ):
            self._print_line(iteration, cost)
            self.last_iteration = iteration

    def on_finish(self, iteration: int, cost: float) -> None:
        status = "converged" if cost == 0 else "budget exhausted"
        print(f"Stopped after {iteration:,} iterations ({status}), cost={cost:,.0f}")

    def _print_line(self, iteration: int, cost: float) -> None:
        cost_str = f"{cost:,.0f}"
        self._cost_field_width = max(self._cost_field_width, len(cost_str))
        cost_field = cost_str.ljust(self._cost_field_width)
        if self.max_iterations:
            pct_val = min(100.0, 100.0 * iteration / self.max_iterations)
            pct_field = f"{pct_val:6.2f}%"
        else:
            pct_field = "  n/a "
        print(
            f"[it={iteration:>7}] pct of budget={pct_field} | cost={cost_field} | sols={self.sols:<5.0f}",
            flush=True,
        )

    def solution_history(self) -> list[tuple[int, float]]:
        """Return collected (iteration, cost) tuples."""
        return list(self.history)
