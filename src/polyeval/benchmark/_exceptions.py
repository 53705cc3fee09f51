class BenchmarkUnavailableError(RuntimeError):
    """Timing utility cannot run.

    Raised when ``torch.utils.benchmark`` cannot be imported or a timer
    fails. Evaluation results are never affected; callers skip the
    benchmark and report it.
    """

    pass
