"""Static route table and prefix matching."""

from typing import Sequence, Tuple

from .errors import NoRouteMatch
from .models import Route

# Order matters: the first prefix that matches wins.
ROUTES: Tuple[Route, ...] = (
    Route(
        prefix="/openai",
        upstream_base="https://api.openai.com",
        auth="Authorization: Bearer sk-...",
        example_endpoint="/v1/chat/completions",
    ),
    Route(
        prefix="/claude",
        upstream_base="https://api.anthropic.com",
        auth="x-api-key: sk-ant-... + anthropic-version: 2023-06-01",
        example_endpoint="/v1/messages",
        note="Beta features via anthropic-beta header",
    ),
    Route(
        prefix="/gemini",
        upstream_base="https://generativelanguage.googleapis.com",
        auth="?key=YOUR_KEY (query param)",
        example_endpoint="/v1beta/models/gemini-2.5-flash:generateContent",
    ),
    Route(
        prefix="/openrouter",
        upstream_base="https://openrouter.ai/api",
        auth="Authorization: Bearer sk-or-...",
        example_endpoint="/v1/chat/completions",
        note="Optional: HTTP-Referer, X-Title headers",
    ),
    Route(
        prefix="/groq",
        upstream_base="https://api.groq.com/openai",
        auth="Authorization: Bearer gsk_...",
        example_endpoint="/v1/chat/completions",
    ),
    Route(
        prefix="/xai",
        upstream_base="https://api.x.ai",
        auth="Authorization: Bearer xai-...",
        example_endpoint="/v1/chat/completions",
    ),
    Route(
        prefix="/mistral",
        upstream_base="https://api.mistral.ai",
        auth="Authorization: Bearer ...",
        example_endpoint="/v1/chat/completions",
    ),
    Route(
        prefix="/perplexity",
        upstream_base="https://api.perplexity.ai",
        auth="Authorization: Bearer pplx-...",
        example_endpoint="/chat/completions",
    ),
    Route(
        prefix="/replicate",
        upstream_base="https://api.replicate.com",
        auth="Authorization: Token r8_...",
        example_endpoint="/v1/predictions",
    ),
    Route(
        prefix="/cohere",
        upstream_base="https://api.cohere.com",
        auth="Authorization: Bearer ...",
        example_endpoint="/v2/chat",
    ),
    Route(
        prefix="/together",
        upstream_base="https://api.together.xyz",
        auth="Authorization: Bearer ...",
        example_endpoint="/v1/chat/completions",
    ),
    Route(
        prefix="/fireworks",
        upstream_base="https://api.fireworks.ai",
        auth="Authorization: Bearer ...",
        example_endpoint="/inference/v1/chat/completions",
    ),
    Route(
        prefix="/huggingface",
        upstream_base="https://api-inference.huggingface.co",
        auth="Authorization: Bearer hf_...",
        example_endpoint="/models/{model_id}",
    ),
    Route(
        prefix="/novita",
        upstream_base="https://api.novita.ai",
        auth="Authorization: Bearer ...",
        example_endpoint="/v3/openai/chat/completions",
    ),
    Route(
        prefix="/portkey",
        upstream_base="https://api.portkey.ai",
        auth="Authorization: Bearer ... + x-portkey-api-key",
        example_endpoint="/v1/chat/completions",
    ),
    Route(
        prefix="/zenmux",
        upstream_base="https://zenmux.ai/api",
        auth="Authorization: Bearer ...",
        example_endpoint="/v1/chat/completions",
        note="Model format: provider/model-name",
    ),
    Route(
        prefix="/cerebras",
        upstream_base="https://api.cerebras.ai",
        auth="Authorization: Bearer ...",
        example_endpoint="/v1/chat/completions",
        note="Ultra-fast inference, free 1M tokens/day",
    ),
    Route(
        prefix="/sambanova",
        upstream_base="https://api.sambanova.ai",
        auth="Authorization: Bearer ...",
        example_endpoint="/v1/chat/completions",
        note="High-speed inference, free tier available",
    ),
    Route(
        prefix="/hyperbolic",
        upstream_base="https://api.hyperbolic.xyz",
        auth="Authorization: Bearer ...",
        example_endpoint="/v1/chat/completions",
        note="Open-source models (Llama, Qwen, etc.)",
    ),
    Route(
        prefix="/discord",
        upstream_base="https://discord.com/api",
        auth="Authorization: Bot ...",
        example_endpoint="/v10/channels/{id}/messages",
    ),
    Route(
        prefix="/telegram",
        upstream_base="https://api.telegram.org",
        auth="Token in URL path",
        example_endpoint="/bot{token}/sendMessage",
    ),
)


def match_route(path: str, routes: Sequence[Route] = ROUTES) -> Tuple[Route, str]:
    """Return the first route whose prefix starts ``path`` and the remainder.

    Matching is a literal string prefix test in table order. There is no
    segment boundary check, so ``/openaix`` matches ``/openai`` with the
    remainder ``x``.
    """
    for route in routes:
        if path.startswith(route.prefix):
            return route, path[len(route.prefix):]
    raise NoRouteMatch(f"No route for {path}")
