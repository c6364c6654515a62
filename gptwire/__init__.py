"""Wire-format models for chat, chat stream, assistant, batch and audio API bodies."""

__version__ = "0.1.0"

__all__ = ["assistant", "audio", "batch", "chat", "chat_stream"]