"""Example: Transcribe an audio file, then speak the transcript back."""

import asyncio
from pathlib import Path

from woprbot import WOPRBot


async def main():
    """Round-trip an audio file through speech-to-text and text-to-speech."""
    async with WOPRBot.from_env() as bot:
        audio_path = Path("path/to/your/audio.wav")

        print("Transcribing audio...")
        transcript = await bot.audio.transcriptions.create(
            file=(audio_path.name, audio_path.read_bytes(), "audio/wav"),
            model="whisper-1",
            language="en",
        )
        print(f"\nTranscript:\n{transcript['text']}")

        speech = await bot.audio.speech.create(model="tts-1", input=transcript["text"], voice="alloy")
        try:
            Path("transcript.mp3").write_bytes(await speech.aread())
        finally:
            await speech.aclose()
        print("\nWrote transcript.mp3")


if __name__ == "__main__":
    asyncio.run(main())
