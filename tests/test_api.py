import os
import unittest
from unittest import mock

from uigen_backend import create_app
from uigen_backend.config import DEFAULT_LLM_MODEL, GENERATION_PROMPT
from uigen_backend.services.llm import GenerationLLMClient, GenerationResult


class _StubGenerationClient:
    def __init__(self, result=None, error=None):
        self.result = result or GenerationResult(raw_text="<App />", model="stub-model")
        self.error = error
        self.prompts: list[str] = []

    def generate(self, *, prompt):
        self.prompts.append(prompt)
        if self.error is not None:
            raise self.error
        return self.result


def _build_app(client=None):
    with mock.patch.dict(os.environ, {}, clear=True):
        app = create_app()
    if client is not None:
        app.extensions["generation_llm_client"] = client
    return app


class AppFactoryTests(unittest.TestCase):
    def test_client_disabled_without_api_key(self):
        app = _build_app()
        self.assertNotIn("generation_llm_client", app.extensions)

    def test_client_configured_from_environment(self):
        env = {"UIGEN_LLM_API_KEY": "sk-test", "UIGEN_LLM_MODEL": "gpt-test"}
        with mock.patch.dict(os.environ, env, clear=True):
            app = create_app()
        client = app.extensions["generation_llm_client"]
        self.assertIsInstance(client, GenerationLLMClient)
        self.assertEqual(client.model, "gpt-test")

    def test_client_configured_from_openai_key_fallback(self):
        with mock.patch.dict(os.environ, {"OPENAI_API_KEY": "sk-fallback"}, clear=True):
            app = create_app()
        client = app.extensions["generation_llm_client"]
        self.assertIsInstance(client, GenerationLLMClient)
        self.assertEqual(client.model, DEFAULT_LLM_MODEL)

    def test_healthchecks(self):
        test_client = _build_app().test_client()
        for path in ("/healthz", "/api/healthz"):
            with self.subTest(path=path):
                response = test_client.get(path)
                self.assertEqual(response.status_code, 200)
                self.assertEqual(response.get_json(), {"status": "ok"})


class PromptEndpointTests(unittest.TestCase):
    def test_returns_generation_prompt_and_conventions(self):
        response = _build_app().test_client().get("/api/prompts/generation")

        self.assertEqual(response.status_code, 200)
        self.assertEqual(
            response.get_json(),
            {
                "prompt": GENERATION_PROMPT,
                "entrypoint": "/App.jsx",
                "importAlias": "@/",
            },
        )


class GenerateEndpointTests(unittest.TestCase):
    def test_forwards_prompt_to_client(self):
        stub = _StubGenerationClient()
        response = _build_app(stub).test_client().post(
            "/api/generate", json={"prompt": "  a login form "}
        )

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.get_json(), {"raw": "<App />", "model": "stub-model"})
        self.assertEqual(stub.prompts, ["a login form"])

    def test_rejects_missing_or_blank_prompt(self):
        stub = _StubGenerationClient()
        test_client = _build_app(stub).test_client()
        for body in ({}, {"prompt": "   "}, {"prompt": 42}, ["prompt"]):
            with self.subTest(body=body):
                response = test_client.post("/api/generate", json=body)
                self.assertEqual(response.status_code, 400)
                self.assertEqual(response.get_json(), {"error": "prompt is required"})
        self.assertEqual(stub.prompts, [])

    def test_unconfigured_client_returns_503(self):
        response = _build_app().test_client().post(
            "/api/generate", json={"prompt": "card"}
        )
        self.assertEqual(response.status_code, 503)
        self.assertEqual(
            response.get_json(), {"error": "generation LLM client is not configured"}
        )

    def test_model_in_request_body_is_ignored(self):
        stub = _StubGenerationClient(
            result=GenerationResult(raw_text="<Card />", model="configured-model")
        )
        response = _build_app(stub).test_client().post(
            "/api/generate", json={"prompt": "card", "model": "other"}
        )

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.get_json()["model"], "configured-model")
        self.assertEqual(stub.prompts, ["card"])

    def test_upstream_failure_returns_502(self):
        stub = _StubGenerationClient(error=RuntimeError("upstream down"))
        app = _build_app(stub)
        with self.assertLogs(app.logger, "ERROR"):
            response = app.test_client().post("/api/generate", json={"prompt": "card"})
        self.assertEqual(response.status_code, 502)
        self.assertEqual(
            response.get_json(), {"error": "failed to query generation model"}
        )


if __name__ == "__main__":
    unittest.main()
