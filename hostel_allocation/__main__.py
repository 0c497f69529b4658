"""Run the API with uvicorn: ``python -m hostel_allocation``."""
import uvicorn

from hostel_allocation.config.settings import settings

if __name__ == "__main__":
    uvicorn.run(
        "hostel_allocation.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.RELOAD,
    )
