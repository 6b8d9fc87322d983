import uvicorn
import os

from stays.core.config import settings

if __name__ == "__main__":
    host = os.environ.get("HOST", settings.HOST)
    port = int(os.environ.get("PORT", settings.PORT))

    uvicorn.run(
        "stays.main:app",
        host=host,
        port=port,
        reload=settings.RELOAD,
        log_level=settings.LOG_LEVEL.lower(),
        workers=1,  # pending image replacements live in-process
    )
