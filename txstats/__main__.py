"""python -m txstats"""

import uvicorn

from txstats.main import app
from txstats.shared.config.settings import settings

uvicorn.run(app, host=settings.host, port=settings.port, log_config=None)
