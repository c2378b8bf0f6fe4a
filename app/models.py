from typing import Any

from pydantic import BaseModel, Field, field_validator


class Chat(BaseModel):
    id: int = 0


class Audio(BaseModel):
    file_id: str = ""
    duration: int = 0


class Voice(Audio):
    pass


class Document(BaseModel):
    file_id: str = ""
    file_name: str = ""


class Message(BaseModel):
    text: str = ""
    chat: Chat = Field(default_factory=Chat)
    audio: Audio | None = None
    voice: Voice | None = None
    document: Document | None = None

    @field_validator("text", mode="before")
    @classmethod
    def _null_text_is_empty(cls, value: Any) -> Any:
        return "" if value is None else value

    @field_validator("chat", mode="before")
    @classmethod
    def _null_chat_is_empty(cls, value: Any) -> Any:
        return {} if value is None else value


class Update(BaseModel):
    # update_id == 0 doubles as "not parsed"; see app.telegram.parsing.
    update_id: int = 0
    message: Message = Field(default_factory=Message)

    @field_validator("message", mode="before")
    @classmethod
    def _null_message_is_empty(cls, value: Any) -> Any:
        return {} if value is None else value


class OutboundReply(BaseModel):
    chat_id: int
    text: str

    def as_form(self) -> dict[str, str]:
        return {"chat_id": str(self.chat_id), "text": self.text}
