# ABOUTME: ASGI web entry point for the weather search UI.
# ABOUTME: Serves the page and runs one SearchSession per WebSocket connection.

import json
import logging
from contextlib import asynccontextmanager

import httpx
import uvicorn
from starlette.applications import Starlette
from starlette.endpoints import WebSocketEndpoint
from starlette.requests import Request
from starlette.responses import HTMLResponse, JSONResponse
from starlette.routing import Route, WebSocketRoute
from starlette.websockets import WebSocket

from weather_search import config
from weather_search.deps import create_http_client
from weather_search.render import render_state
from weather_search.session import SearchSession

logger = logging.getLogger(__name__)

INDEX_HTML = """<!doctype html>
<html lang="en">
<head>
<meta charset="utf-8">
<title>Weather Forecast</title>
</head>
<body>
<h1>Weather Forecast</h1>
<p>Discover the weather in your favorite cities</p>
<form id="search">
  <input id="city" type="text" placeholder="Search for a city..." autocomplete="off">
  <button id="go" type="submit">Search</button>
  <ul id="suggestions"></ul>
</form>
<div id="error" hidden></div>
<div id="weather" hidden>
  <h2 id="w-location"></h2>
  <div id="w-temperature"></div>
  <p id="w-condition"></p>
  <dl>
    <dt>Feels like</dt><dd id="w-feels_like"></dd>
    <dt>Wind speed</dt><dd id="w-wind"></dd>
    <dt>Humidity</dt><dd id="w-humidity"></dd>
    <dt>Pressure</dt><dd id="w-pressure"></dd>
  </dl>
</div>
<script>
const ws = new WebSocket((location.protocol === "https:" ? "wss://" : "ws://") + location.host + "/ws");
const city = document.getElementById("city");
const list = document.getElementById("suggestions");
const send = (msg) => ws.send(JSON.stringify(msg));
city.addEventListener("input", () => send({type: "input", text: city.value}));
document.getElementById("search").addEventListener("submit", (e) => { e.preventDefault(); send({type: "submit"}); });
ws.onmessage = (event) => {
  const state = JSON.parse(event.data);
  if (document.activeElement !== city || state.weather) city.value = state.query;
  list.replaceChildren(...state.suggestions.map((label, index) => {
    const li = document.createElement("li");
    li.textContent = label;
    li.onclick = () => send({type: "select", index, label});
    return li;
  }));
  document.getElementById("go").disabled = state.loading;
  document.getElementById("go").textContent = state.loading ? "Loading..." : "Search";
  const error = document.getElementById("error");
  error.hidden = !state.error;
  error.textContent = state.error || "";
  const panel = document.getElementById("weather");
  panel.hidden = !state.weather;
  if (state.weather) {
    for (const [key, value] of Object.entries(state.weather)) {
      document.getElementById("w-" + key).textContent = value;
    }
  }
};
</script>
</body>
</html>
"""


class SearchSocket(WebSocketEndpoint):
    """One browser session: receives input/select/submit events, pushes rendered state."""

    encoding = "text"

    async def on_connect(self, websocket: WebSocket) -> None:
        await websocket.accept()
        self.websocket = websocket

        async def push() -> None:
            await websocket.send_json(render_state(self.session))

        app_state = websocket.app.state
        self.session = SearchSession(
            app_state.http_client,
            debounce_seconds=app_state.debounce_seconds,
            on_change=push,
        )
        self.push = push
        await push()

    async def on_receive(self, websocket: WebSocket, data: str) -> None:
        try:
            message = json.loads(data)
            kind = message["type"]
        except (json.JSONDecodeError, KeyError, TypeError):
            logger.warning("Ignoring malformed message: %.200s", data)
            return

        if kind == "input":
            text = message.get("text")
            if not isinstance(text, str):
                logger.warning("Ignoring input message without text")
                return
            self.session.on_input_change(text)
        elif kind == "select":
            index = message.get("index")
            if not isinstance(index, int):
                logger.warning("Ignoring select message without an integer index")
                return
            label = message.get("label")
            self.session.start_selection(index, label if isinstance(label, str) else None)
        elif kind == "submit":
            self.session.start_submit()
        else:
            logger.warning("Ignoring unknown message type %r", kind)
            return
        await self.push()

    async def on_disconnect(self, websocket: WebSocket, close_code: int) -> None:
        session = getattr(self, "session", None)
        if session is not None:
            session.close()


async def index(request: Request) -> HTMLResponse:
    return HTMLResponse(INDEX_HTML)


async def health(request: Request) -> JSONResponse:
    return JSONResponse({"status": "ok"})


def create_app(http_client: httpx.AsyncClient | None = None, debounce_seconds: float | None = None) -> Starlette:
    """Build the ASGI app.

    Without an injected client, one is created on startup and closed on shutdown.
    """

    @asynccontextmanager
    async def lifespan(app: Starlette):
        owned = http_client is None
        app.state.http_client = create_http_client() if owned else http_client
        try:
            yield
        finally:
            if owned:
                await app.state.http_client.aclose()

    app = Starlette(
        routes=[
            Route("/", index),
            Route("/health", health),
            WebSocketRoute("/ws", SearchSocket),
        ],
        lifespan=lifespan,
    )
    app.state.http_client = http_client
    app.state.debounce_seconds = debounce_seconds
    return app


app = create_app()


def main() -> None:
    logging.basicConfig(
        level=config.LOG_LEVEL.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    uvicorn.run(app, host=config.HOST, port=config.PORT)


if __name__ == "__main__":
    main()
