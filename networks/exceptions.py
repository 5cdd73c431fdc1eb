class NetworkNotFoundError(LookupError):
    def __init__(self, network_id: str, known: list[str] | None = None):
        self.network_id = network_id
        self.known = known or []
        message = f"Unknown network: {network_id!r}"
        if self.known:
            message += f" (known: {', '.join(self.known)})"
        super().__init__(message)
