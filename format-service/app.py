from fastapi import FastAPI

from docformat import __version__
from docformat.router import router as format_router

# Import centralized logging configuration
from docformat.utils.logging_config import get_logger

logger = get_logger()

app = FastAPI(title="Document Formatting API", version=__version__)

app.include_router(format_router)


@app.get("/ping")
async def ping():
    """Ping endpoint that includes mammoth, html4docx and BeautifulSoup health information."""
    mammoth_healthy, mammoth_status = await check_mammoth_health()
    html4docx_healthy, html4docx_status = await check_html4docx_health()
    beautifulsoup_healthy, beautifulsoup_status = await check_beautifulsoup_health()

    return {
        "success": True,
        "data": "PONG!",
        "mammoth": {
            "status": "healthy" if mammoth_healthy else "unhealthy",
            "response_code": mammoth_status
        },
        "html4docx": {
            "status": "healthy" if html4docx_healthy else "unhealthy",
            "response_code": html4docx_status
        },
        "beautifulsoup": {
            "status": "healthy" if beautifulsoup_healthy else "unhealthy",
            "response_code": beautifulsoup_status
        }
    }


async def check_mammoth_health() -> tuple[bool, int]:
    """
    Check that mammoth is importable.

    Returns:
        tuple: (is_healthy: bool, status_code: int)
    """
    try:
        import mammoth  # noqa: F401
        return True, 200
    except ImportError:
        return False, 503


async def check_html4docx_health() -> tuple[bool, int]:
    """Check that html4docx is importable."""
    try:
        from html4docx import HtmlToDocx  # noqa: F401
        return True, 200
    except ImportError:
        return False, 503


async def check_beautifulsoup_health() -> tuple[bool, int]:
    """Check that beautifulsoup4 is importable."""
    try:
        from bs4 import BeautifulSoup  # noqa: F401
        return True, 200
    except ImportError:
        return False, 503
