import logging
import uvicorn
from videotube.config.environments import PORT, LOG_LEVEL

logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s"
)

from videotube.application import application  # noqa: E402

if __name__ == "__main__":
    uvicorn.run(
        application,
        host="0.0.0.0",
        port=PORT,
        reload=False
    )
