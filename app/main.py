import uvicorn
from dotenv import load_dotenv

from infrastructure.services import get_settings

load_dotenv()

server_app = "server.server:handler"


def main() -> None:
    """Run the HTTP server."""
    settings = get_settings()
    uvicorn.run(
        server_app,
        host=settings.server.HOST,
        port=settings.server.PORT,
        reload=settings.is_development,
    )


if __name__ == "__main__":
    main()
