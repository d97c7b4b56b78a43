"""
Retrieval-augmented generation traced end to end, printed locally.

Uses the LoggingSink so no PostHog project is needed. Shows nested spans,
an embedding call, property inheritance, privacy mode and error capture.

    python examples/rag_pipeline.py
"""

import logging
import random

from posthog_llm import LoggingSink, PostHogLLM, PostHogLLMConfig

logging.basicConfig(level=logging.INFO, format="%(message)s")


def retrieve(trace, question):
    embedding = trace.embedding(
        "embed-question",
        model="text-embedding-3-small",
        provider="openai",
        input=question,
        base_url="https://api.openai.com/v1",
    )
    embedding.end(input_tokens=len(question.split()), http_status=200)

    with trace.span("retrieve", input_state={"question": question}) as span:
        with span.span("vector-search", properties={"index": "docs-v2"}) as search:
            documents = ["PostHog captures events.", "Traces group spans."]
            search.update(output_state={"hits": len(documents)})
        span.update(output_state={"documents": documents})
    return documents


def answer(trace, question, documents):
    generation = trace.generation(
        "answer",
        model="gpt-4o-mini",
        provider="openai",
        input=[
            {"role": "system", "content": "Answer from the documents: " + " ".join(documents)},
            {"role": "user", "content": question},
        ],
    )
    if random.random() < 0.2:
        generation.end(is_error=True, error={"status": 503, "message": "upstream unavailable"}, http_status=503)
        return None
    generation.end(output="Traces group spans of work.", input_tokens=42, output_tokens=7, http_status=200)
    return "Traces group spans of work."


def main():
    config = PostHogLLMConfig(default_privacy_mode=True, default_distinct_id="example-user")
    client = PostHogLLM(config, sink=LoggingSink())

    question = "What is a trace?"
    # Privacy mode keeps the question out of the trace event; children still carry it
    trace = client.trace("rag-question", input_state={"question": question}, properties={"app": "docs-bot"})
    documents = retrieve(trace, question)
    result = answer(trace, question, documents)
    trace.end(output_state={"answer": result}, is_error=result is None, error="generation failed")
    client.shutdown()


if __name__ == "__main__":
    main()
