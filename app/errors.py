class FinglishBotError(Exception):
    """Base class for failures that end the handling of a single update."""


class DecodeError(FinglishBotError):
    pass


class InvalidUpdateError(FinglishBotError):
    pass


class RemoteServiceError(FinglishBotError):
    pass


class DeliveryError(FinglishBotError):
    def __init__(self, message: str, response_body: str = "") -> None:
        super().__init__(message)
        self.response_body = response_body
