import argparse
import asyncio
import logging

import yaml
from rich.logging import RichHandler

from answer_submitter import Answer_Submitter
from answers import answer_from_config
from api import API
from challenge_requester import Challenge_Requester
from config import Config
from logo import LOGO, show_logo
from webhook_dataclasses import Workflow_Result
from workflow import Workflow

logger = logging.getLogger(__name__)


class Webhook_Client:
    async def main(self, config_path: str) -> Workflow_Result | None:
        try:
            self.config = Config.from_yaml(config_path)
            answer_producer = answer_from_config(self.config.answer)
        except (OSError, yaml.YAMLError, RuntimeError, TypeError, ValueError) as e:
            logger.error('Could not load config "%s": %s', config_path, e)
            return None

        show_logo(LOGO, self.config.version)

        async with API(self.config) as api:
            workflow = Workflow(Challenge_Requester(api),
                                Answer_Submitter(api),
                                self.config.identity,
                                answer_producer)
            return await workflow.run()


def main() -> None:
    parser = argparse.ArgumentParser(description='Requests a webhook, computes the answer and submits it.')
    parser.add_argument('--config', '-c', default='config.yml', help='Path to config.yml.')
    parser.add_argument('--debug', '-d', action='store_true', help='Enable debug logging.')
    args = parser.parse_args()

    logging.basicConfig(level=logging.DEBUG if args.debug else logging.INFO,
                        format='%(message)s',
                        datefmt='[%X]',
                        handlers=[RichHandler(show_path=args.debug)])

    # Failures are logged by the workflow, the exit status stays 0 either way.
    asyncio.run(Webhook_Client().main(args.config), debug=args.debug)


if __name__ == '__main__':
    main()
