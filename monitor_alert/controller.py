import logging
from typing import Optional

from flask import Flask, request

from .constants import ALERT_ROUTE, ALERT_SCHEMA, DEBUG_MODE, SLACK_TOKEN
from .handler import AlertHandler
from .models import AlertSchema, InboundRequest
from .services import SlackWebhookClient

logger = logging.getLogger(__name__)

_TEXT_PLAIN = {'Content-Type': 'text/plain; charset=utf-8'}


def create_app(
    slack_token: Optional[str] = None,
    schema: Optional[str] = None,
    slack_client: Optional[SlackWebhookClient] = None,
):
    app = Flask(__name__)
    handler = AlertHandler(
        slack_token=SLACK_TOKEN if slack_token is None else slack_token,
        schema=AlertSchema(schema or ALERT_SCHEMA),
        slack_client=slack_client,
    )

    @app.route('/health', methods=['GET'])
    def health():
        return {'status': 'ok', 'service': 'monitor-alert-slack'}, 200

    @app.route(ALERT_ROUTE, methods=['POST'])
    def alert():
        try:
            # silent=True: body ausente ou JSON inválido vira None e o handler responde 400
            data = request.get_json(silent=True, force=True)
            if DEBUG_MODE:
                logger.debug("Received data: %s", data)

            result = handler.handle(InboundRequest(query=request.args, body=data))
            return result.body, result.status_code, _TEXT_PLAIN
        except Exception as e:
            logger.exception("Erro inesperado ao processar alerta")
            return f'Error: {str(e)}', 500, _TEXT_PLAIN

    return app
