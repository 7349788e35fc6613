"""Example: Send chat completion requests, plain and streamed."""

import asyncio

from woprbot import ErrorKind, WOPRBot, WOPRError, setup_logging


async def main():
    """Send a simple chat completion, then stream one."""
    setup_logging("INFO")

    # Reads WOPR_API_KEY (and optionally WOPR_BASE_URL) from the environment
    async with WOPRBot.from_env() as bot:
        messages = [
            {"role": "system", "content": "You are a helpful assistant."},
            {"role": "user", "content": "What is the capital of France?"},
        ]

        print("Sending chat completion request...")
        try:
            response = await bot.chat.completions.create(
                model="gpt-4o-mini",
                messages=messages,
                temperature=0.7,
                max_tokens=100,
            )
        except WOPRError as e:
            if e.kind is ErrorKind.INSUFFICIENT_CREDITS:
                print(f"Out of credits, top up at {e.top_up_url}")
                return
            raise

        print(f"\nAssistant: {response['choices'][0]['message']['content']}")

        if "usage" in response:
            print(f"\nTokens used: {response['usage'].get('total_tokens', 'N/A')}")

        print("\nStreaming:")
        stream = await bot.chat.completions.create(
            model="gpt-4o-mini",
            messages=messages,
            stream=True,
        )
        async with stream:
            async for chunk in stream:
                delta = chunk["choices"][0].get("delta", {}) if chunk.get("choices") else {}
                print(delta.get("content") or "", end="", flush=True)
        print()


if __name__ == "__main__":
    asyncio.run(main())
