import logging
from typing import Any, Optional

from .constants import (
    MSG_BODY_MISSING,
    MSG_CHANNEL_MISSING,
    MSG_FORMAT_FAILED,
    MSG_SEND_FAILED,
    MSG_SENT,
    MSG_TOKEN_MISSING,
)
from .formatters import extract_alert, format_slack_message
from .models import (
    AlertSchema,
    HandlerResponse,
    InboundRequest,
    MissingAlertField,
    SlackDeliveryError,
    SlackMessage,
    StepResult,
)
from .services import SlackWebhookClient

logger = logging.getLogger(__name__)


def _is_blank(value: Optional[str]) -> bool:
    return value is None or str(value).strip() == ""


def validate_channel(request: InboundRequest) -> StepResult:
    channel = request.query.get("channel")
    if _is_blank(channel):
        return StepResult.fail(MSG_CHANNEL_MISSING)
    return StepResult.ok(channel)


def validate_token(token: Optional[str]) -> StepResult:
    if _is_blank(token):
        return StepResult.fail(MSG_TOKEN_MISSING)
    return StepResult.ok(token)


def validate_body(request: InboundRequest) -> StepResult:
    if request.body is None:
        return StepResult.fail(MSG_BODY_MISSING)
    return StepResult.ok(request.body)


class AlertHandler:
    """
    Pipeline linear do webhook:
    canal -> token -> body -> formatação -> envio ao Slack.
    A primeira etapa que falha encerra com 400; não há retry.
    """

    def __init__(
        self,
        slack_token: Optional[str],
        schema: AlertSchema = AlertSchema.CLASSIC,
        slack_client: Optional[SlackWebhookClient] = None,
    ):
        self.slack_token = slack_token
        self.schema = AlertSchema(schema)
        self.slack_client = slack_client or SlackWebhookClient()

    def format_message(self, channel: str, body: Any) -> StepResult:
        try:
            alert = extract_alert(body, self.schema)
            message = format_slack_message(channel, alert)
        except MissingAlertField as exc:
            return StepResult.fail(MSG_FORMAT_FAILED.format(path=exc.path))
        return StepResult.ok(message)

    def deliver(self, message: SlackMessage) -> StepResult:
        try:
            self.slack_client.send(self.slack_token, message)
        except SlackDeliveryError as exc:
            return StepResult.fail(MSG_SEND_FAILED.format(error=exc))
        logger.info("Alerta enviado ao Slack no canal %s", message.channel)
        return StepResult.ok(MSG_SENT)

    def handle(self, request: InboundRequest) -> HandlerResponse:
        channel_result = validate_channel(request)
        outcome = (
            channel_result
            .and_then(lambda _: validate_token(self.slack_token))
            .and_then(lambda _: validate_body(request))
            .and_then(lambda body: self.format_message(channel_result.value, body))
            .and_then(self.deliver)
        )

        if not outcome.is_ok:
            logger.warning("Alerta rejeitado: %s", outcome.failure.body)
            return outcome.failure
        return HandlerResponse(200, outcome.value)
