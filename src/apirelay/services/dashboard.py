"""HTML dashboard listing every proxied upstream."""

from html import escape
from typing import Dict, List, Sequence, Tuple

from ..models import Route
from ..routes import ROUTES

# name -> (path below the host, extra headers, JSON body)
CURL_EXAMPLES: Dict[str, Tuple[str, List[str], str]] = {
    "openai": (
        "/openai/v1/chat/completions",
        ["Authorization: Bearer sk-YOUR_KEY"],
        '{"model":"gpt-4o","messages":[{"role":"user","content":"hello"}]}',
    ),
    "claude": (
        "/claude/v1/messages",
        ["x-api-key: sk-ant-YOUR_KEY", "anthropic-version: 2023-06-01"],
        '{"model":"claude-sonnet-4-6","max_tokens":1024,'
        '"messages":[{"role":"user","content":"hello"}]}',
    ),
    "gemini": (
        "/gemini/v1beta/models/gemini-2.5-flash:generateContent?key=YOUR_KEY",
        [],
        '{"contents":[{"parts":[{"text":"hello"}]}]}',
    ),
    "openrouter": (
        "/openrouter/v1/chat/completions",
        ["Authorization: Bearer sk-or-YOUR_KEY"],
        '{"model":"google/gemini-3-flash-preview","messages":[{"role":"user","content":"hello"}]}',
    ),
    "groq": (
        "/groq/v1/chat/completions",
        ["Authorization: Bearer gsk_YOUR_KEY"],
        '{"model":"llama-3.3-70b-versatile","messages":[{"role":"user","content":"hello"}]}',
    ),
    "mistral": (
        "/mistral/v1/chat/completions",
        ["Authorization: Bearer YOUR_KEY"],
        '{"model":"mistral-large-latest","messages":[{"role":"user","content":"hello"}]}',
    ),
    "xai": (
        "/xai/v1/chat/completions",
        ["Authorization: Bearer xai-YOUR_KEY"],
        '{"model":"grok-3-latest","messages":[{"role":"user","content":"hello"}]}',
    ),
    "perplexity": (
        "/perplexity/chat/completions",
        ["Authorization: Bearer pplx-YOUR_KEY"],
        '{"model":"sonar-pro","messages":[{"role":"user","content":"hello"}]}',
    ),
    "zenmux": (
        "/zenmux/v1/chat/completions",
        ["Authorization: Bearer YOUR_KEY"],
        '{"model":"openai/gpt-4o","messages":[{"role":"user","content":"hello"}]}',
    ),
}

_STYLE = """
*{margin:0;padding:0;box-sizing:border-box}
:root{--bg:#0a0a0f;--card:#12121a;--border:#1e1e2e;--text:#e0e0e0;--dim:#666;--accent:#6c8aff;--green:#22c55e;--red:#ef4444;--yellow:#eab308}
body{background:var(--bg);color:var(--text);font-family:-apple-system,BlinkMacSystemFont,'Segoe UI',Roboto,sans-serif;padding:1.5rem}
.container{max-width:1100px;margin:0 auto}
header{text-align:center;margin-bottom:2rem}
header h1{font-size:1.5rem;font-weight:600}
header p{color:var(--dim);font-size:.82rem;margin-top:.3rem}
.section-title{font-size:.85rem;font-weight:600;color:var(--dim);margin:1.8rem 0 .8rem;text-transform:uppercase}
.grid{display:grid;grid-template-columns:repeat(auto-fill,minmax(340px,1fr));gap:.8rem}
.card{background:var(--card);border:1px solid var(--border);border-radius:12px;padding:1rem 1.1rem}
.card-head{display:flex;align-items:center;justify-content:space-between;margin-bottom:.5rem}
.card-name{font-size:.95rem;font-weight:600;text-transform:capitalize}
.status{display:flex;align-items:center;gap:.35rem;font-size:.72rem}
.dot{width:7px;height:7px;border-radius:50%;background:var(--yellow)}
.dot.ok{background:var(--green)}
.dot.err{background:var(--red)}
.card-url{font-size:.75rem;background:#0d0d14;border-radius:6px;padding:.4rem .6rem;margin-bottom:.4rem;display:flex;justify-content:space-between;gap:.5rem;word-break:break-all}
.copy-btn{background:none;border:1px solid var(--border);color:var(--dim);border-radius:4px;padding:2px 8px;cursor:pointer;font-size:.68rem;white-space:nowrap}
.copy-btn:hover{color:var(--accent);border-color:var(--accent)}
.card-meta{font-size:.7rem;color:#888;line-height:1.5}
.card-note{font-size:.68rem;color:#555;font-style:italic;margin-top:.2rem}
.example-block{background:var(--card);border:1px solid var(--border);border-radius:12px;padding:1.1rem;position:relative}
.example-block select{background:var(--bg);color:var(--text);border:1px solid var(--border);border-radius:6px;padding:.3rem .6rem;margin-bottom:.7rem}
.example-block pre{font-size:.75rem;line-height:1.55;white-space:pre-wrap;word-break:break-all;color:#b0b0b0}
.example-block .copy-btn{position:absolute;top:1rem;right:1rem}
"""

_SCRIPT = """
function copyText(text, btn) {
  navigator.clipboard.writeText(text).then(() => {
    const prev = btn.textContent;
    btn.textContent = "Copied!";
    setTimeout(() => btn.textContent = prev, 1200);
  });
}
function currentExample() {
  const name = document.getElementById("exampleSelect").value;
  return document.querySelector('pre.example[data-name="' + name + '"]');
}
function updateExample() {
  document.querySelectorAll("pre.example").forEach(pre => pre.hidden = true);
  const pre = currentExample();
  if (pre) pre.hidden = false;
}
function copyExample(btn) {
  const pre = currentExample();
  if (pre) copyText(pre.textContent, btn);
}
document.querySelectorAll(".card-url .copy-btn").forEach(btn => {
  btn.addEventListener("click", () => copyText(btn.dataset.url, btn));
});
updateExample();
fetch("/debug").then(r => r.json()).then(d => {
  const loc = [d.outbound_city, d.outbound_country].filter(Boolean).join(", ");
  document.getElementById("nodeText").textContent = loc ? "Outbound: " + loc : "Node: " + (d.entry_colo || "unknown");
}).catch(() => {
  document.getElementById("nodeText").textContent = "unable to detect";
});
fetch("/api/status").then(r => r.json()).then(data => {
  for (const item of data) {
    const dot = document.getElementById("dot-" + item.name);
    const ms = document.getElementById("ms-" + item.name);
    if (!dot) continue;
    dot.classList.add(item.ok ? "ok" : "err");
    ms.textContent = item.ok ? item.latency_ms + "ms" : "unreachable";
  }
}).catch(() => {});
"""


def render_curl_example(name: str, host: str) -> str:
    """Build the curl command for one entry of CURL_EXAMPLES."""
    path, headers, body = CURL_EXAMPLES[name]
    url = f"https://{host}{path}"
    if "?" in path:
        url = f'"{url}"'
    lines = [f"curl {url}", '  -H "Content-Type: application/json"']
    lines.extend(f'  -H "{header}"' for header in headers)
    lines.append(f"  -d '{body}'")
    return " \\\n".join(lines)


def _render_card(route: Route, host: str) -> str:
    name = escape(route.name)
    proxy_url = escape(f"https://{host}{route.prefix}")
    note = f'<div class="card-note">{escape(route.note)}</div>' if route.note else ""
    return f"""<div class="card" data-name="{name}">
  <div class="card-head">
    <span class="card-name">{name}</span>
    <span class="status"><span class="dot" id="dot-{name}"></span><span id="ms-{name}">checking</span></span>
  </div>
  <div class="card-url"><code>{proxy_url}</code><button class="copy-btn" data-url="{proxy_url}">Copy</button></div>
  <div class="card-meta">Target: <span>{escape(route.upstream_base)}</span></div>
  <div class="card-meta">Auth: <span>{escape(route.auth)}</span></div>
  <div class="card-meta">Example: <span>{escape(route.prefix + route.example_endpoint)}</span></div>
  {note}
</div>"""


def _render_examples(host: str) -> str:
    options = "\n".join(
        f'<option value="{escape(name)}">{escape(name)}</option>' for name in CURL_EXAMPLES
    )
    blocks = "\n".join(
        f'<pre class="example" data-name="{escape(name)}" hidden>'
        f"{escape(render_curl_example(name, host))}</pre>"
        for name in CURL_EXAMPLES
    )
    return f"""<div class="example-block">
<select id="exampleSelect" onchange="updateExample()">
{options}
</select>
<button class="copy-btn" onclick="copyExample(this)">Copy</button>
{blocks}
</div>"""


def render_dashboard(host: str, routes: Sequence[Route] = ROUTES) -> str:
    """Render the dashboard page for requests addressed to ``host``."""
    cards = "\n".join(_render_card(route, host) for route in routes)
    return f"""<!DOCTYPE html>
<html lang="en">
<head>
<meta charset="utf-8">
<meta name="viewport" content="width=device-width,initial-scale=1">
<title>API Relay</title>
<style>{_STYLE}</style>
</head>
<body>
<div class="container">
<header>
  <h1>API Relay</h1>
  <p>{len(routes)} upstreams, replace the upstream origin with the proxy URL and keep your usual auth headers</p>
  <p id="nodeText">detecting node</p>
</header>
<div class="section-title">Upstreams</div>
<div class="grid">
{cards}
</div>
<div class="section-title">Examples</div>
{_render_examples(host)}
</div>
<script>{_SCRIPT}</script>
</body>
</html>"""
