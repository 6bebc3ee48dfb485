import logging
from typing import Optional

import uvicorn

from webanalyzer import config as env
from webanalyzer.api.server import create_app
from webanalyzer.container import Container

logger = logging.getLogger(__name__)


def main(container: Optional[Container] = None):
    logging.basicConfig(
        level=env.log_level(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    # Allow tests to inject a container with overridden providers
    if container is None:
        container = Container()

    app = create_app(container)
    host = container.config.WEBANALYZER_HOST()
    port = container.config.WEBANALYZER_PORT()

    logger.info("WebAnalyzer listening on http://%s:%s", host, port)
    uvicorn.run(app, host=host, port=int(port))


if __name__ == '__main__':
    main()
