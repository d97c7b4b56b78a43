"""
Basic example: trace one AI operation with a span and a generation.

Set POSTHOG_API_KEY (and optionally POSTHOG_HOST) in the environment or in a
.env file next to this script, then run:

    python examples/basic.py
"""

import asyncio
import logging
import os

from posthog_llm import PostHogLLM, PostHogLLMConfig

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


async def run_ai_operation(client: PostHogLLM):
    # Trace for the entire operation
    trace = client.trace(
        "example-operation",
        distinct_id="user-123",
        input_state={"query": "What is the weather like today?"},
        metadata={"source": "example"},
    )

    preprocess_span = trace.span("preprocess-query", input_state={"raw_query": "What is the weather like today?"})
    await asyncio.sleep(0.1)
    preprocess_span.end(output_state={"processed_query": "get_weather(today)"})

    generation = trace.generation(
        "weather-response",
        model="gpt-4",
        provider="openai",
        input={"query": "get_weather(today)"},
        input_tokens=5,
    )
    await asyncio.sleep(0.5)
    generation.end(
        output={"response": "It is sunny and 75°F today."},
        output_tokens=10,
        latency=0.5,
        http_status=200,
    )

    trace.end(output_state={"result": "It is sunny and 75°F today."})
    logger.info(f"AI operation completed and traced to PostHog (trace {trace.trace_id})")


def main():
    env_file = os.path.join(os.path.dirname(__file__), ".env")
    config = PostHogLLMConfig.from_env(env_file if os.path.exists(env_file) else None)
    with PostHogLLM(config) as client:
        asyncio.run(run_ai_operation(client))


if __name__ == "__main__":
    main()
