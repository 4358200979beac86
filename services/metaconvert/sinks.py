# services/metaconvert/sinks.py
from abc import ABC, abstractmethod
from typing import TextIO

from core.models import VideoFrame


class MessageSink(ABC):
    """Receives the serialized document of a frame"""

    @abstractmethod
    def publish(self, frame: VideoFrame, message: str) -> None:
        pass


class FrameMessageSink(MessageSink):
    """Attaches the message to the frame itself"""

    def publish(self, frame: VideoFrame, message: str) -> None:
        frame.add_message(message)


class StreamMessageSink(MessageSink):
    """Writes one message per line to a text stream"""

    def __init__(self, stream: TextIO, flush: bool = False):
        self.stream = stream
        self.flush = flush

    def publish(self, frame: VideoFrame, message: str) -> None:
        self.stream.write(message)
        self.stream.write("\n")
        if self.flush:
            self.stream.flush()
