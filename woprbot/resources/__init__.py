"""Resource namespaces exposed on ``WOPRBot``."""

from woprbot.resources.audio import Audio, AudioSpeech, AudioTranscriptions
from woprbot.resources.chat import Chat, ChatCompletions
from woprbot.resources.completions import Completions, Embeddings
from woprbot.resources.media import Images, Video, VideoGenerateParams
from woprbot.resources.messaging import Models, Sms, SmsSendParams
from woprbot.resources.phone import (
    Phone,
    PhoneCallParams,
    PhoneNumberProvisionParams,
    PhoneNumbers,
)

__all__ = [
    "Audio",
    "AudioSpeech",
    "AudioTranscriptions",
    "Chat",
    "ChatCompletions",
    "Completions",
    "Embeddings",
    "Images",
    "Models",
    "Phone",
    "PhoneCallParams",
    "PhoneNumberProvisionParams",
    "PhoneNumbers",
    "Sms",
    "SmsSendParams",
    "Video",
    "VideoGenerateParams",
]
