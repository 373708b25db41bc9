import asyncio
import socket
import threading

import pytest
from aiohttp import web


class AdminServer:
    def __init__(self):
        self.reply_text = "column renamed successfully"
        self.reply_status = 200
        self.reply_headers = {}
        self.requests = []
        self.base_url = None


@pytest.fixture()
def admin_server():
    server = AdminServer()

    async def database_action(request):
        server.requests.append(
            {
                "method": request.method,
                "path": request.path,
                "content_type": request.headers.get("Content-Type"),
                "body": await request.text(),
            }
        )
        return web.Response(
            text=server.reply_text, status=server.reply_status, headers=server.reply_headers
        )

    app = web.Application()
    app.router.add_post("/api/admin/database-action", database_action)

    loop = asyncio.new_event_loop()
    runner = web.AppRunner(app)
    loop.run_until_complete(runner.setup())
    site = web.TCPSite(runner, "127.0.0.1", 0)
    loop.run_until_complete(site.start())
    host, port = runner.addresses[0][:2]
    server.base_url = f"http://{host}:{port}"

    thread = threading.Thread(target=loop.run_forever, daemon=True)
    thread.start()
    try:
        yield server
    finally:
        loop.call_soon_threadsafe(loop.stop)
        thread.join()
        loop.run_until_complete(runner.cleanup())
        loop.close()


@pytest.fixture()
def closed_port_url():
    sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    sock.bind(("127.0.0.1", 0))
    port = sock.getsockname()[1]
    sock.close()
    return f"http://127.0.0.1:{port}"
