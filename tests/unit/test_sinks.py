"""
Unit tests for event sinks.
"""

import json
import logging
from unittest.mock import MagicMock

from posthog_llm import EventName, InMemorySink, LoggingSink, PostHogLLMConfig, PostHogSink


class TestPostHogSink:
    """Test cases for the PostHog sink."""

    def test_capture_forwards_to_client(self):
        posthog_client = MagicMock()
        sink = PostHogSink(PostHogLLMConfig(api_key="phc_key"), client=posthog_client)

        sink.capture("user-1", "$ai_trace", {"$ai_trace_id": "t"})

        posthog_client.capture.assert_called_once_with(
            distinct_id="user-1", event="$ai_trace", properties={"$ai_trace_id": "t"}
        )

    def test_flush_and_shutdown(self):
        posthog_client = MagicMock()
        sink = PostHogSink(PostHogLLMConfig(api_key="phc_key"), client=posthog_client)

        sink.flush()
        sink.shutdown()

        posthog_client.flush.assert_called_once_with()
        posthog_client.shutdown.assert_called_once_with()

    def test_trace_end_reaches_posthog(self, config):
        """Test the full path from a trace to the PostHog client."""
        from posthog_llm import PostHogLLM

        posthog_client = MagicMock()
        client = PostHogLLM(config, sink=PostHogSink(config, client=posthog_client))

        client.trace("t", distinct_id="u").end(latency=1.0)

        kwargs = posthog_client.capture.call_args.kwargs
        assert kwargs["distinct_id"] == "u"
        assert kwargs["event"] == "$ai_trace"
        assert kwargs["properties"]["$ai_latency"] == 1.0


class TestInMemorySink:
    """Test cases for the in-memory sink."""

    def test_records_events(self):
        sink = InMemorySink()

        sink.capture("u", "$ai_span", {"a": 1})
        sink.capture("u", "$ai_trace", {"b": 2})

        assert [record.event for record in sink.events] == [EventName.SPAN_EVENT, EventName.TRACE_EVENT]
        assert sink.last().properties == {"b": 2}
        assert sink.last("$ai_span").properties == {"a": 1}
        assert len(sink.by_name("$ai_trace")) == 1

    def test_copies_properties(self):
        sink = InMemorySink()
        properties = {"a": 1}

        sink.capture("u", "$ai_span", properties)
        properties["a"] = 2

        assert sink.last().properties == {"a": 1}

    def test_clear(self):
        sink = InMemorySink()
        sink.capture("u", "$ai_span", {})

        sink.clear()

        assert sink.events == []
        assert sink.last() is None


class TestLoggingSink:
    """Test cases for the logging sink."""

    def test_logs_json_line(self, caplog):
        caplog.set_level(logging.INFO, logger="posthog_llm.sinks.logging_sink")
        sink = LoggingSink()

        sink.capture("u", "$ai_generation", {"$ai_model": "gpt-4"})

        payload = json.loads(caplog.records[-1].getMessage())
        assert payload == {"event": "$ai_generation", "distinct_id": "u", "properties": {"$ai_model": "gpt-4"}}

    def test_custom_logger_and_level(self, caplog):
        logger = logging.getLogger("tests.events")
        caplog.set_level(logging.DEBUG, logger="tests.events")
        sink = LoggingSink(logger=logger, level=logging.DEBUG)

        sink.capture("u", "$ai_span", {})

        assert caplog.records[-1].levelno == logging.DEBUG
        assert caplog.records[-1].name == "tests.events"
