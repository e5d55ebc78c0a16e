import json
import logging
from typing import Optional

import requests

from .constants import SLACK_TIMEOUT_SECONDS, SLACK_WEBHOOK_BASE_URL
from .models import SlackDeliveryError, SlackMessage

logger = logging.getLogger(__name__)


class SlackWebhookClient:
    def __init__(self, base_url: Optional[str] = None, timeout: Optional[float] = None):
        self.base_url = base_url or SLACK_WEBHOOK_BASE_URL
        self.timeout = SLACK_TIMEOUT_SECONDS if timeout is None else timeout

    def build_url(self, token: str) -> str:
        return f"{self.base_url.rstrip('/')}/{token.strip('/')}"

    def send(self, token: str, message: SlackMessage) -> requests.Response:
        """
        Faz um único POST form-encoded (payload=<json>) no webhook do Slack.
        Sem retry: qualquer falha vira SlackDeliveryError para o chamador.
        """
        form = {"payload": json.dumps(message.to_dict())}
        try:
            resp = requests.post(self.build_url(token), data=form, timeout=self.timeout)
            resp.raise_for_status()
        except requests.RequestException as exc:
            # A URL carrega o token; não deixa vazar em log nem na resposta
            error_text = str(exc).replace(token, "***") if token else str(exc)
            logger.warning("Slack webhook falhou para %s: %s", message.channel, error_text)
            raise SlackDeliveryError(error_text) from exc

        logger.debug("Slack response: %s %s", resp.status_code, resp.text)
        return resp
