"""Test helpers: a fake engine served over a unix socket."""

import hashlib
import os
import shutil
import tempfile

from aiohttp import web

API_PREFIXES = ("", "/v1.41")


def make_id(seed: str) -> str:
    """Generate a deterministic content addressable id."""
    return "sha256:" + hashlib.sha256(seed.encode("utf-8")).hexdigest()


def history_entry(created_by: str) -> dict:
    return {
        "Id": "<missing>",
        "Created": 1700000000,
        "CreatedBy": created_by,
        "Tags": None,
        "Size": 0,
        "Comment": "",
    }


class FakeEngine:
    """Minimal engine API backed by in-memory image records."""

    def __init__(self) -> None:
        self.images: list[dict] = []
        self.histories: dict[str, list[dict]] = {}
        self.requests: list[str] = []
        self.failing_paths: set[str] = set()
        self.socket_path = ""
        self._socket_dir = ""
        self._runner: web.AppRunner | None = None

    def add_image(
        self, repo_tags: list[str], layers: list[str], history: list[str], seed: str = ""
    ) -> str:
        """Register an image; ``history`` is newest first."""
        image_id = make_id(seed or ",".join(repo_tags) or ",".join(layers))
        self.images.append(
            {
                "Id": image_id,
                "RepoTags": repo_tags or None,
                "RootFS": {"Type": "layers", "Layers": layers},
            }
        )
        self.histories[image_id] = [history_entry(command) for command in history]
        return image_id

    def lookup(self, name: str) -> dict | None:
        for image in self.images:
            digest = image["Id"].split(":", 1)[1]
            if name == image["Id"] or digest.startswith(name):
                return image
            if name in (image["RepoTags"] or []):
                return image
        return None

    async def handle_ping(self, request: web.Request) -> web.Response:
        return web.Response(text="OK")

    async def handle_list(self, request: web.Request) -> web.Response:
        self.requests.append(request.path)
        if "list" in self.failing_paths:
            return web.json_response({"message": "list failed"}, status=500)
        return web.json_response(
            [
                {"Id": image["Id"], "RepoTags": image["RepoTags"], "Size": 0}
                for image in self.images
            ]
        )

    async def handle_inspect(self, request: web.Request) -> web.Response:
        self.requests.append(request.path)
        name = request.match_info["name"]
        image = self.lookup(name)
        if image is None:
            return web.json_response({"message": f"No such image: {name}"}, status=404)
        return web.json_response(image)

    async def handle_history(self, request: web.Request) -> web.Response:
        self.requests.append(request.path)
        if "history" in self.failing_paths:
            return web.json_response({"message": "history failed"}, status=500)
        name = request.match_info["name"]
        image = self.lookup(name)
        if image is None:
            return web.json_response({"message": f"No such image: {name}"}, status=404)
        return web.json_response(self.histories[image["Id"]])

    def make_app(self) -> web.Application:
        app = web.Application()
        for prefix in API_PREFIXES:
            app.router.add_get(f"{prefix}/_ping", self.handle_ping)
            app.router.add_get(f"{prefix}/images/json", self.handle_list)
            app.router.add_get(prefix + "/images/{name:.+}/json", self.handle_inspect)
            app.router.add_get(prefix + "/images/{name:.+}/history", self.handle_history)
        return app

    async def start(self) -> None:
        # Short directory keeps the socket path under the AF_UNIX limit
        self._socket_dir = tempfile.mkdtemp(prefix="dfi-")
        self.socket_path = os.path.join(self._socket_dir, "docker.sock")
        self._runner = web.AppRunner(self.make_app())
        await self._runner.setup()
        site = web.UnixSite(self._runner, self.socket_path)
        await site.start()

    async def stop(self) -> None:
        if self._runner is not None:
            await self._runner.cleanup()
        shutil.rmtree(self._socket_dir, ignore_errors=True)


# A small local store: alpine is the base of demo:v1
ALPINE_HISTORY = [
    '/bin/sh -c #(nop)  CMD ["/bin/sh"]',
    "/bin/sh -c #(nop) ADD file:37a76ec18f9887751cd8473744917d08b7431fc4085097bb6a09d81b41775473 in / ",
]
DEMO_HISTORY = [
    "/bin/sh -c apk add --no-cache bash &&     apk add --no-cache jq",
    "/bin/sh -c #(nop) WORKDIR /app",
    "/bin/sh -c #(nop)  ENV APP_ENV=production",
] + ALPINE_HISTORY


def populate_demo_store(engine: FakeEngine) -> None:
    engine.add_image(["alpine:3.19", "alpine:latest"], ["sha256:layer-a"], ALPINE_HISTORY)
    engine.add_image(
        ["demo:v1"], ["sha256:layer-a", "sha256:layer-b"], DEMO_HISTORY
    )
