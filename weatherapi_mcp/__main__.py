from weatherapi_mcp.server.main import run

run()
