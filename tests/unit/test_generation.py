"""
Unit tests for the Generation model.
"""

import time

import pytest
from pydantic import ValidationError

from posthog_llm import EventName, Generation, MissingDistinctIdError


@pytest.fixture
def generation(client):
    trace = client.trace("t", distinct_id="user-123", properties={"team": "search"})
    return trace.generation(
        "answer",
        model="gpt-4",
        provider="openai",
        input=[{"role": "user", "content": "hi"}],
        input_tokens=5,
    )


class TestGenerationCreation:
    """Test cases for creating generations."""

    def test_inherits_from_trace(self, generation):
        assert generation.distinct_id == "user-123"
        assert generation.properties == {"team": "search"}
        assert generation.input_tokens == 5

    def test_cannot_have_children(self, generation):
        assert not hasattr(generation, "span")
        assert not hasattr(generation, "generation")

    def test_missing_distinct_id_raises(self):
        with pytest.raises(MissingDistinctIdError):
            Generation(name="g", trace_id="t", model="m", provider="p", input="hi")

    def test_missing_model_raises(self):
        with pytest.raises(ValidationError):
            Generation(name="g", trace_id="t", provider="p", input="hi", distinct_id="u")


class TestGenerationEnd:
    """Test cases for generation events."""

    def test_generation_event(self, generation, sink):
        generation.end(
            output=[{"role": "assistant", "content": "hello"}],
            output_tokens=10,
            latency=0.5,
            http_status=200,
        )

        record = sink.last()
        assert record.event == EventName.GENERATION_EVENT
        assert record.distinct_id == "user-123"
        assert record.properties == {
            "$ai_trace_id": generation.trace_id,
            "$ai_model": "gpt-4",
            "$ai_provider": "openai",
            "$ai_input": '[{"role":"user","content":"hi"}]',
            "$ai_latency": 0.5,
            "$ai_is_error": False,
            "$ai_output_choices": '[{"role":"assistant","content":"hello"}]',
            "$ai_input_tokens": 5,
            "$ai_output_tokens": 10,
            "$ai_http_status": 200,
            "team": "search",
        }
        assert generation.latency == 0.5

    def test_non_list_output_is_wrapped(self, generation, sink):
        """Test that a single output is wrapped as one assistant choice."""
        generation.end(output={"response": "sunny"})

        assert sink.last().properties["$ai_output_choices"] == (
            '[{"role":"assistant","content":{"response":"sunny"}}]'
        )

    def test_missing_output_is_omitted(self, generation, sink):
        generation.end()

        assert "$ai_output_choices" not in sink.last().properties
        assert "$ai_output_tokens" not in sink.last().properties

    def test_non_string_input_keys_still_emit(self, trace, sink):
        """Test that an input mapping with tuple keys is sent as its str() form."""
        generation = trace.generation("g", model="m", provider="p", input={(1, 2): "x"})

        generation.end()

        assert sink.last().properties["$ai_input"] == "{(1, 2): 'x'}"

    def test_unserializable_input_keeps_original_exception(self, trace, sink):
        """Test that leaving a block with an exception re-raises it even when the input is not JSON."""
        with pytest.raises(RuntimeError, match="provider down"):
            with trace.generation("g", model="m", provider="p", input={(1, 2): "x"}):
                raise RuntimeError("provider down")

        properties = sink.last().properties
        assert properties["$ai_is_error"] is True
        assert properties["$ai_error"] == '{"type":"RuntimeError","message":"provider down"}'

    def test_base_url_and_metadata(self, client, sink):
        trace = client.trace("t", distinct_id="u")
        generation = trace.generation(
            "g", model="m", provider="p", input="hi",
            base_url="https://api.openai.com/v1", metadata={"temperature": 0.2},
        )

        generation.end()

        properties = sink.last().properties
        assert properties["$ai_input"] == '"hi"'
        assert properties["$ai_base_url"] == "https://api.openai.com/v1"
        assert properties["$ai_metadata"] == '{"temperature":0.2}'

    def test_measured_latency_is_stored(self, generation, sink):
        time.sleep(0.02)

        generation.end()

        assert generation.latency >= 0.015
        assert sink.last().properties["$ai_latency"] == generation.latency

    def test_error(self, generation, sink):
        generation.end(is_error=True, error={"status": 429, "message": "rate limited"}, http_status=429)

        properties = sink.last().properties
        assert properties["$ai_is_error"] is True
        assert properties["$ai_error"] == '{"status":429,"message":"rate limited"}'
        assert properties["$ai_http_status"] == 429

    def test_update(self, generation):
        result = generation.update(model="gpt-4o", output="partial", metadata={"k": "v"})

        assert result is generation
        assert generation.model == "gpt-4o"
        assert generation.output == "partial"
        assert generation.metadata == {"k": "v"}
