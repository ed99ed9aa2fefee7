"""Run the Friend Quotes server: python -m friend_quotes"""

import logging

from . import config
from .app import create_app

if __name__ == "__main__":
    logging.basicConfig(
        level=config.LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    app = create_app()
    print(f"\n  Friend Quotes running at: http://localhost:{config.PORT}/friends\n")
    app.run(host=config.HOST, port=config.PORT, debug=config.DEBUG, threaded=True)
