import json
import random
from unittest.mock import Mock, patch

from django.test import SimpleTestCase, override_settings

from core.services.ai import SponsorChatResponder, StructuredResponseGenerator, analyze_progress
from core.services.ai.client import AIResult, OpenAIResponsesClient
from core.services.ai.fallbacks import PROGRESS_FALLBACK_TEXT, SPONSOR_FALLBACK_REPLIES
from core.services.ai.schemas import SUPPORT_TYPES, EnhancementOutput, SponsorReplyOutput


def _ok(text: str) -> AIResult:
    return AIResult(text=text, model="gpt-4o", source="openai", status="success", tokens_input=12, tokens_output=30)


def _failed(message: str = "connection reset") -> AIResult:
    return AIResult(text="", model="gpt-4o", source="provider_error", status="failed", error_message=message)


def _client(result: AIResult) -> Mock:
    client = Mock(spec=OpenAIResponsesClient)
    client.complete_json.return_value = result
    client.complete_text.return_value = result
    return client


ENHANCEMENT_FALLBACK = EnhancementOutput(enhanced_message="hello", suggestion="sorry", insights=[])


class StructuredResponseGeneratorTests(SimpleTestCase):
    def _generate(self, result: AIResult):
        generator = StructuredResponseGenerator(client=_client(result))
        return generator.generate(
            feature="message_enhancement",
            system_prompt="Return JSON.",
            user_content="hello",
            schema=EnhancementOutput,
            fallback=lambda: ENHANCEMENT_FALLBACK.model_copy(deep=True),
        )

    def test_provider_failure_returns_fallback_exactly(self):
        result = self._generate(_failed())
        self.assertTrue(result.used_fallback)
        self.assertEqual(result.reason, "provider_error")
        self.assertEqual(result.value, ENHANCEMENT_FALLBACK)

    def test_invalid_json_returns_fallback(self):
        result = self._generate(_ok('{"enhancedMessage": "hi",'))
        self.assertEqual(result.reason, "invalid_json")
        self.assertEqual(result.value, ENHANCEMENT_FALLBACK)

    def test_json_that_is_not_an_object_returns_fallback(self):
        result = self._generate(_ok('["hi", "there"]'))
        self.assertEqual(result.reason, "not_an_object")
        self.assertEqual(result.value, ENHANCEMENT_FALLBACK)

    def test_missing_field_is_defaulted_and_others_kept(self):
        result = self._generate(_ok(json.dumps({"enhancedMessage": "Hello there.", "suggestion": "Breathe."})))
        self.assertEqual(result.status, "partial")
        self.assertEqual(result.defaulted, ("insights",))
        self.assertEqual(result.value.enhanced_message, "Hello there.")
        self.assertEqual(result.value.suggestion, "Breathe.")
        self.assertEqual(result.value.insights, [])

    def test_mistyped_fields_are_defaulted_individually(self):
        result = self._generate(_ok(json.dumps({"enhancedMessage": "Hi.", "suggestion": 7, "insights": "one"})))
        self.assertEqual(set(result.defaulted), {"suggestion", "insights"})
        self.assertEqual(result.value.enhanced_message, "Hi.")
        self.assertEqual(result.value.suggestion, "")
        self.assertEqual(result.value.insights, [])

    def test_output_always_has_every_declared_field(self):
        payloads = [
            "{}",
            json.dumps({"enhancedMessage": None}),
            json.dumps({"insights": [1, 2]}),
            json.dumps({"unexpected": "value"}),
            json.dumps({"enhancedMessage": "x", "suggestion": "y", "insights": ["z"]}),
            "not json at all",
        ]
        for text in payloads:
            with self.subTest(text=text):
                value = self._generate(_ok(text)).value
                self.assertEqual(set(value.model_dump(by_alias=True)), {"enhancedMessage", "suggestion", "insights"})

    def test_deeply_nested_json_returns_fallback(self):
        result = self._generate(_ok("[" * 100000 + "]" * 100000))
        self.assertEqual(result.reason, "invalid_json")
        self.assertEqual(result.value, ENHANCEMENT_FALLBACK)

    def test_complete_response_is_success(self):
        result = self._generate(_ok(json.dumps({"enhancedMessage": "Hi.", "suggestion": "s", "insights": ["a"]})))
        self.assertEqual(result.status, "success")
        self.assertEqual(result.defaulted, ())
        self.assertEqual(result.tokens_output, 30)

    @override_settings(OPENAI_API_KEY="")
    def test_missing_api_key_falls_back(self):
        generator = StructuredResponseGenerator()
        result = generator.generate(
            feature="message_enhancement",
            system_prompt="Return JSON.",
            user_content="hello",
            schema=EnhancementOutput,
            fallback=lambda: ENHANCEMENT_FALLBACK,
        )
        self.assertEqual(result.reason, "no_api_key")
        self.assertEqual(result.value, ENHANCEMENT_FALLBACK)


class OpenAIResponsesClientTests(SimpleTestCase):
    @patch("core.services.ai.client.OpenAI")
    def test_json_mode_request_shape(self, openai_cls):
        openai_cls.return_value.responses.create.return_value = Mock(
            output_text=' {"message": "hi"} ',
            usage=Mock(input_tokens=5, output_tokens=9),
        )
        client = OpenAIResponsesClient(api_key="sk-test", timeout=12)
        result = client.complete_json(model="gpt-4o", system_prompt="sys", user_prompt="usr", temperature=0.3)

        openai_cls.assert_called_once_with(api_key="sk-test", timeout=12, max_retries=0)
        openai_cls.return_value.responses.create.assert_called_once_with(
            model="gpt-4o",
            instructions="sys",
            input="usr",
            text={"format": {"type": "json_object"}},
            temperature=0.3,
        )
        self.assertTrue(result.ok)
        self.assertEqual(result.text, '{"message": "hi"}')
        self.assertEqual((result.tokens_input, result.tokens_output), (5, 9))

    @patch("core.services.ai.client.OpenAI")
    def test_text_mode_omits_format_and_temperature_for_gpt5(self, openai_cls):
        openai_cls.return_value.responses.create.return_value = Mock(output_text="Keep going.", usage=None)
        result = OpenAIResponsesClient(api_key="sk-test").complete_text(model="gpt-5-mini", system_prompt="s", user_prompt="u")
        kwargs = openai_cls.return_value.responses.create.call_args.kwargs
        self.assertNotIn("text", kwargs)
        self.assertNotIn("temperature", kwargs)
        self.assertEqual(result.text, "Keep going.")

    @patch("core.services.ai.client.OpenAI")
    def test_provider_exception_is_returned_not_raised(self, openai_cls):
        openai_cls.return_value.responses.create.side_effect = RuntimeError("503 upstream")
        result = OpenAIResponsesClient(api_key="sk-test").complete_json(model="gpt-4o", system_prompt="s", user_prompt="u")
        self.assertEqual(result.status, "failed")
        self.assertEqual(result.source, "provider_error")
        self.assertIn("503", result.error_message)

    @patch("core.services.ai.client.OpenAI")
    def test_empty_output_is_a_failure(self, openai_cls):
        openai_cls.return_value.responses.create.return_value = Mock(output_text="", usage=None)
        result = OpenAIResponsesClient(api_key="sk-test").complete_json(model="gpt-4o", system_prompt="s", user_prompt="u")
        self.assertEqual(result.source, "empty_response")
        self.assertFalse(result.ok)

    @patch("core.services.ai.client.OpenAI")
    def test_no_key_skips_provider(self, openai_cls):
        result = OpenAIResponsesClient(api_key="").complete_text(model="gpt-4o", system_prompt="s", user_prompt="u")
        openai_cls.assert_not_called()
        self.assertEqual((result.status, result.source), ("fallback", "no_api_key"))


class ProgressAnalyzerTests(SimpleTestCase):
    def test_returns_model_text(self):
        client = _client(_ok("You are showing steady growth."))
        text = analyze_progress(["2026-10-01 mood=4/10", "2026-10-08 mood=7/10"], client=client)
        self.assertEqual(text, "You are showing steady growth.")
        prompt = client.complete_text.call_args.kwargs["user_prompt"]
        self.assertTrue(prompt.startswith("Recent progress entries:\n"))
        self.assertLess(prompt.index("2026-10-01"), prompt.index("2026-10-08"))

    def test_failure_returns_fixed_text(self):
        self.assertEqual(analyze_progress(["entry"], client=_client(_failed())), PROGRESS_FALLBACK_TEXT)

    def test_no_entries_skips_provider(self):
        client = _client(_ok("unused"))
        self.assertEqual(analyze_progress([], client=client), PROGRESS_FALLBACK_TEXT)
        client.complete_text.assert_not_called()


class SponsorChatResponderTests(SimpleTestCase):
    def _responder(self, result: AIResult, seed: int = 3) -> SponsorChatResponder:
        return SponsorChatResponder(StructuredResponseGenerator(client=_client(result)), rng=random.Random(seed))

    def test_valid_reply_passes_through(self):
        payload = {
            "message": "It sounds like a part of you is really tired.",
            "supportType": "encouragement",
            "suggestedResources": ["Big Book p.86-87"],
        }
        reply = self._responder(_ok(json.dumps(payload))).generate_reply("I'm exhausted")
        self.assertEqual(reply.model_dump(by_alias=True), payload)

    def test_unknown_support_type_uses_fallback_pool(self):
        payload = {"message": "Hang in there.", "supportType": "unknown_category", "suggestedResources": []}
        reply = self._responder(_ok(json.dumps(payload))).generate_reply("help")
        self.assertIn(reply, SPONSOR_FALLBACK_REPLIES)
        self.assertIn(reply.support_type, SUPPORT_TYPES)

    def test_missing_message_uses_fallback_pool(self):
        reply = self._responder(_ok(json.dumps({"supportType": "practical"}))).generate_reply("help")
        self.assertIn(reply, SPONSOR_FALLBACK_REPLIES)

    def test_deeply_nested_reply_uses_fallback_pool(self):
        text = '{"message": ' + "[" * 100000 + "]" * 100000 + "}"
        reply = self._responder(_ok(text)).generate_reply("help")
        self.assertIn(reply, SPONSOR_FALLBACK_REPLIES)

    def test_missing_resources_is_defaulted_not_replaced(self):
        reply = self._responder(_ok(json.dumps({"message": "Call me tonight.", "supportType": "practical"}))).generate_reply("help")
        self.assertEqual(reply.message, "Call me tonight.")
        self.assertEqual(reply.suggested_resources, [])

    def test_provider_failure_selection_is_pinned_by_rng(self):
        expected = random.Random(11).choice(SPONSOR_FALLBACK_REPLIES)
        reply = self._responder(_failed(), seed=11).generate_reply("help")
        self.assertEqual(reply, expected)

    def test_fallback_pool_is_not_mutated_by_callers(self):
        responder = SponsorChatResponder(
            StructuredResponseGenerator(client=_client(_failed())),
            fallback_pool=SPONSOR_FALLBACK_REPLIES[:1],
        )
        reply = responder.generate_reply("help")
        reply.suggested_resources.append("Extra")
        self.assertNotIn("Extra", SPONSOR_FALLBACK_REPLIES[0].suggested_resources)

    def test_persona_prompt_is_sent_with_raw_user_message(self):
        client = _client(_failed())
        SponsorChatResponder(StructuredResponseGenerator(client=client), persona_prompt="PERSONA").generate_reply("raw text")
        kwargs = client.complete_json.call_args.kwargs
        self.assertEqual(kwargs["system_prompt"], "PERSONA")
        self.assertEqual(kwargs["user_prompt"], "raw text")

    def test_empty_pool_is_rejected(self):
        with self.assertRaises(ValueError):
            SponsorChatResponder(StructuredResponseGenerator(client=_client(_failed())), fallback_pool=())

    def test_fallback_pool_entries_satisfy_contract(self):
        for entry in SPONSOR_FALLBACK_REPLIES:
            self.assertIsInstance(entry, SponsorReplyOutput)
            self.assertIn(entry.support_type, SUPPORT_TYPES)
            self.assertTrue(entry.message)
