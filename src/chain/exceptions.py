class TxBuilderError(Exception):
    pass


class RpcError(TxBuilderError):
    pass


class InvalidAddressError(TxBuilderError):
    pass


class InvalidAmountError(TxBuilderError):
    pass


class SimulationError(TxBuilderError):
    def __init__(self, err: object, logs: list[str] | None = None) -> None:
        self.err = err
        self.logs = logs or []
        message = f"Transaction simulation failed: {err}"
        if self.logs:
            message += " | logs: " + " / ".join(self.logs)
        super().__init__(message)
