"""Run the API with uvicorn: python -m rsvp_segmenter"""

import uvicorn

from rsvp_segmenter.config.settings import get_settings

if __name__ == "__main__":
    settings = get_settings()
    uvicorn.run(
        "rsvp_segmenter.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
        log_level=settings.log_level.lower(),
    )
