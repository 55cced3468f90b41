"""Root of the parallel-install exception hierarchy."""


class ParallelInstallError(Exception):
    """Raised for failures the CLI reports as a message rather than a traceback.

    `retriable` marks errors a caller may safely attempt again.
    """

    def __init__(self, message: str, retriable: bool = False) -> None:
        super().__init__(message)
        self.retriable = retriable
