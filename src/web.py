# ABOUTME: ASGI web entry point for the city weather UI.
# ABOUTME: Serves the search page and a JSON endpoint that runs the search orchestrator per request.

import logging
from contextlib import asynccontextmanager

import httpx
import uvicorn
from starlette.applications import Starlette
from starlette.requests import Request
from starlette.responses import HTMLResponse, JSONResponse
from starlette.routing import Route

from src.config import Settings, load_settings
from src.deps import SearchDeps, create_http_client
from src.orchestrator import SearchOrchestrator
from src.render import BUTTON_LABEL, IDLE_HINT, LOADING_LABEL, render_state

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

# The page keeps its own generation counter so a slow response from an older
# search never overwrites the result of a newer one.
INDEX_HTML = """<!doctype html>
<html lang="en">
<head>
<meta charset="utf-8">
<meta name="viewport" content="width=device-width, initial-scale=1">
<title>Weather App</title>
<style>
  body { font-family: system-ui, sans-serif; min-height: 100vh; margin: 0; display: flex;
         align-items: center; justify-content: center; background: linear-gradient(135deg, #60a5fa, #4f46e5); }
  .card { width: 100%; max-width: 28rem; padding: 1.5rem; border-radius: 1rem; color: #fff;
          background: rgba(255, 255, 255, 0.2); box-shadow: 0 20px 40px rgba(0, 0, 0, 0.25); }
  h1 { text-align: center; }
  .row { display: flex; gap: 0.5rem; }
  input { flex: 1; padding: 0.75rem; border: none; border-radius: 0.75rem; }
  button { padding: 0.5rem 1rem; border: none; border-radius: 0.75rem; background: #2563eb; color: #fff; }
  #error { color: #fecaca; text-align: center; }
  #temperature { font-size: 2.25rem; font-weight: bold; margin: 0.5rem 0; }
  [hidden] { display: none; }
</style>
</head>
<body>
<div class="card">
  <h1>Weather App</h1>
  <div class="row">
    <input id="city" type="text" placeholder="Search any city..." autofocus>
    <button id="go">__BUTTON_LABEL__</button>
  </div>
  <p id="error" hidden></p>
  <div id="result" hidden>
    <p id="display-name"></p>
    <p id="temperature"></p>
    <p id="windspeed"></p>
    <p id="winddirection" hidden></p>
    <p id="time"></p>
  </div>
  <p id="hint">__IDLE_HINT__</p>
</div>
<script>
  const input = document.getElementById("city");
  const button = document.getElementById("go");
  const errorBox = document.getElementById("error");
  const resultBox = document.getElementById("result");
  const hint = document.getElementById("hint");
  let generation = 0;

  function setLoading(loading) {
    button.disabled = loading;
    button.textContent = loading ? "__LOADING_LABEL__" : "__BUTTON_LABEL__";
  }

  function render(view) {
    errorBox.hidden = !view.error;
    errorBox.textContent = view.error || "";
    resultBox.hidden = !view.result;
    hint.hidden = !view.hint;
    if (view.result) {
      document.getElementById("display-name").textContent = view.result.display_name;
      document.getElementById("temperature").textContent = view.result.temperature;
      document.getElementById("windspeed").textContent = view.result.windspeed + " Wind";
      const direction = document.getElementById("winddirection");
      direction.hidden = view.result.winddirection === null;
      direction.textContent = "Direction: " + (view.result.winddirection || "");
      document.getElementById("time").textContent = "Time: " + view.result.time;
    }
  }

  async function search() {
    const mine = ++generation;
    render({ error: null, result: null, hint: null });
    setLoading(true);
    let view;
    try {
      const resp = await fetch("/api/weather?city=" + encodeURIComponent(input.value));
      view = await resp.json();
    } catch (err) {
      console.error(err);
      view = { error: "Something went wrong while fetching data. Check your connection.", result: null, hint: null };
    }
    if (mine !== generation) return;
    setLoading(false);
    render(view);
  }

  button.addEventListener("click", search);
  input.addEventListener("keydown", (e) => { if (e.key === "Enter") search(); });
</script>
</body>
</html>
"""


def render_index() -> str:
    """Fill the page template with the button labels and idle hint."""
    return (
        INDEX_HTML.replace("__BUTTON_LABEL__", BUTTON_LABEL)
        .replace("__LOADING_LABEL__", LOADING_LABEL)
        .replace("__IDLE_HINT__", IDLE_HINT)
    )


async def index(request: Request) -> HTMLResponse:
    """Serve the search page."""
    return HTMLResponse(render_index())


async def weather(request: Request) -> JSONResponse:
    """Run one search for the ``city`` query parameter and return the rendered state."""
    deps: SearchDeps = request.app.state.deps
    orchestrator = SearchOrchestrator(deps.http_client, settings=deps.settings)
    state = await orchestrator.search(request.query_params.get("city", ""))
    status_code = state.error_kind.status_code if state.error_kind else 200
    return JSONResponse(render_state(state), status_code=status_code)


async def healthz(request: Request) -> JSONResponse:
    """Report that the app is up without calling any provider."""
    return JSONResponse({"status": "ok"})


def create_app(settings: Settings | None = None, http_client: httpx.AsyncClient | None = None) -> Starlette:
    """Build the Starlette app.

    The HTTP client is opened and closed with the app lifespan. A client passed in by
    the caller is used as-is and left open.
    """
    settings = settings or load_settings()

    @asynccontextmanager
    async def lifespan(app: Starlette):
        if http_client is not None:
            app.state.deps = SearchDeps(http_client=http_client, settings=settings)
            yield
            return
        async with create_http_client(settings) as client:
            app.state.deps = SearchDeps(http_client=client, settings=settings)
            yield

    routes = [
        Route("/", index),
        Route("/api/weather", weather),
        Route("/healthz", healthz),
    ]
    return Starlette(routes=routes, lifespan=lifespan)


def configure_logging(level: str) -> None:
    """Set up root logging once for the process."""
    logging.basicConfig(level=level, format=LOG_FORMAT)


def main() -> None:
    """Load settings, configure logging and serve the app with uvicorn."""
    settings = load_settings()
    configure_logging(settings.log_level)
    logger.info("Starting weather app on %s:%d", settings.host, settings.port)
    uvicorn.run(create_app(settings), host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    main()
